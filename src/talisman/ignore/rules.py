"""
Legacy .talismanignore grammar

Each line is ``<pattern> [# [ignore:<d1>,<d2>,...] <free comment>]``.
Every line parses; blank and comment-only lines produce rules with an empty
pattern, which the evaluator never treats as effective.
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union

from .constants import COMMENT_MARKER, DETECTOR_SEPARATOR
from .patterns import IGNORE_DIRECTIVE_PATTERN, is_blank
from .rule_engine import RuleEvaluator
from talisman.utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class IgnoreRule:
    """A single pattern, its comment and the detectors it is scoped to"""
    pattern: str
    comment: str = ""
    ignored_detectors: Tuple[str, ...] = ()

    @property
    def has_pattern(self) -> bool:
        return not is_blank(self.pattern)


def parse_ignored_detectors(comment: str) -> Tuple[str, ...]:
    """
    Extract the detector scope from a rule comment

    Args:
        comment: Comment text without the leading '#'

    Returns:
        Detector names, or an empty tuple when the comment has no directive
    """
    match = IGNORE_DIRECTIVE_PATTERN.match(comment)
    if not match:
        return ()
    names = (name.strip() for name in match.group(1).split(DETECTOR_SEPARATOR))
    return tuple(name for name in names if name)


def parse_line(line: str) -> IgnoreRule:
    """
    Parse one line of a .talismanignore file

    Args:
        line: Raw line, without its newline

    Returns:
        IgnoreRule with trimmed pattern and comment
    """
    pattern, marker, comment = line.partition(COMMENT_MARKER)
    comment = comment.strip() if marker else ""
    return IgnoreRule(
        pattern=pattern.strip(),
        comment=comment,
        ignored_detectors=parse_ignored_detectors(comment),
    )


class IgnoreRules(RuleEvaluator):
    """Ordered, immutable set of legacy ignore rules"""

    def __init__(self, rules: Iterable[IgnoreRule] = ()):
        self._rules: Tuple[IgnoreRule, ...] = tuple(rules)

    @classmethod
    def from_lines(cls, *lines: str) -> "IgnoreRules":
        return cls(parse_line(line) for line in lines)

    @classmethod
    def from_content(cls, content: Union[str, bytes]) -> "IgnoreRules":
        """
        Build rules from the full text of an ignore file

        Args:
            content: File content; bytes are decoded as UTF-8

        Returns:
            IgnoreRules with one rule per line
        """
        if isinstance(content, bytes):
            content = content.decode("utf-8", errors="replace")
        lines = content.split("\n")
        # A final newline terminates the last line rather than starting a new one
        if lines[-1] == "":
            lines.pop()
        rules = cls.from_lines(*(line[:-1] if line.endswith("\r") else line for line in lines))
        logger.debug(
            f"Parsed {len(rules)} ignore lines, {len(rules.patterns())} with patterns"
        )
        return rules

    @property
    def rules(self) -> Tuple[IgnoreRule, ...]:
        return self._rules

    def patterns(self) -> List[str]:
        """Non-empty patterns in file order"""
        return [rule.pattern for rule in self._rules if rule.has_pattern]

    def _scoped_patterns(self) -> Iterable[Tuple[str, Sequence[str]]]:
        return ((rule.pattern, rule.ignored_detectors) for rule in self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules)

    def __eq__(self, other) -> bool:
        if not isinstance(other, IgnoreRules):
            return NotImplemented
        return self._rules == other._rules

    def __hash__(self) -> int:
        return hash(self._rules)

    def __repr__(self) -> str:
        return f"IgnoreRules({list(self._rules)!r})"
