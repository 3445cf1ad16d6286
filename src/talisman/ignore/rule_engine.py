"""
Rule evaluation shared by both ignore formats.

A rule is effective for a detector when its pattern is not blank and the
detector is either named in the rule's scope or the scope is empty. An
addition is denied (exempt from the detector) when it matches any effective
pattern.
"""

import logging
from typing import Iterable, List, Protocol, Sequence, Tuple

from .patterns import contains, is_blank
from talisman.utils import get_logger, log_with_context

logger = get_logger(__name__)


class PathMatcher(Protocol):
    """Anything that can tell whether its path matches a pattern"""

    def matches(self, pattern: str) -> bool:
        ...


def is_effective(pattern: str, scope: Sequence[str], detector_name: str) -> bool:
    return not is_blank(pattern) and (len(scope) == 0 or contains(scope, detector_name))


class RuleEvaluator:
    """
    Accept/deny queries over an immutable set of rules.

    Subclasses provide ``_scoped_patterns``, yielding ``(pattern, scope)``
    pairs in rule order.
    """

    def _scoped_patterns(self) -> Iterable[Tuple[str, Sequence[str]]]:
        raise NotImplementedError

    def effective_rules(self, detector_name: str) -> List[str]:
        """
        Patterns that apply to a detector

        Args:
            detector_name: Name of the detector asking

        Returns:
            Effective patterns in rule order
        """
        return [
            pattern
            for pattern, scope in self._scoped_patterns()
            if is_effective(pattern, scope, detector_name)
        ]

    def accepts_all(self) -> bool:
        """
        True when no rule applies to every detector.

        Scoped rules do not count, so a config made only of scoped rules
        still accepts all.
        """
        return not any(
            not is_blank(pattern) and len(scope) == 0
            for pattern, scope in self._scoped_patterns()
        )

    def accept(self, addition: PathMatcher, detector_name: str) -> bool:
        """True if the addition should be checked by the detector"""
        return not self.deny(addition, detector_name)

    def deny(self, addition: PathMatcher, detector_name: str) -> bool:
        """True if the addition is exempt from the detector"""
        for pattern in self.effective_rules(detector_name):
            if addition.matches(pattern):
                path = getattr(addition, 'path', addition)
                log_with_context(
                    logger,
                    logging.DEBUG,
                    f"Ignoring {path} for {detector_name} (matched: {pattern})",
                    path=str(path),
                    detector=detector_name,
                    pattern=pattern,
                )
                return True
        return False
