"""
A staged file change and how its path matches ignore patterns
"""

import posixpath
from dataclasses import dataclass, field
from functools import lru_cache

import pathspec

from talisman.ignore.constants import GLOB_CHARACTERS, MAX_CACHE_SIZE
from talisman.utils import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=MAX_CACHE_SIZE)
def _compile_pattern(pattern: str) -> pathspec.PathSpec:
    return pathspec.PathSpec.from_lines('gitwildmatch', [pattern])


@dataclass(frozen=True)
class Addition:
    """A file added or modified in the staged changes"""
    path: str
    data: bytes = field(default=b"", repr=False)

    @property
    def name(self) -> str:
        return posixpath.basename(self.path)

    def matches(self, pattern: str) -> bool:
        """
        Check the path against an ignore pattern

        Args:
            pattern: Directory prefix (trailing '/'), glob, or exact path

        Returns:
            True if the path is covered by the pattern
        """
        if pattern.endswith('/'):
            return self.path.startswith(pattern)
        if any(char in pattern for char in GLOB_CHARACTERS):
            try:
                return bool(_compile_pattern(pattern).match_file(self.path))
            except ValueError as e:
                logger.warning(f"Skipping invalid pattern '{pattern}': {e}")
                return False
        return self.path == pattern
