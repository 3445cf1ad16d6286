"""
Shared string helpers for the ignore grammars.

Regular expressions are compiled once at import and never mutated, so they
can be shared by concurrent evaluations.
"""

import re
from typing import Iterable

from .constants import IGNORE_DIRECTIVE_PREFIX

BLANK_PATTERN = re.compile(r"^\s*$")

# "ignore:" followed by a run of non-whitespace detector names
IGNORE_DIRECTIVE_PATTERN = re.compile(
    r"^" + re.escape(IGNORE_DIRECTIVE_PREFIX) + r"(\S+)"
)


def is_blank(value: str) -> bool:
    """True for the empty string and whitespace-only strings"""
    return BLANK_PATTERN.match(value) is not None


def contains(values: Iterable[str], value: str) -> bool:
    return any(candidate == value for candidate in values)
