"""
Loaders that read the default ignore files from the repository root
"""

from typing import Callable

from .constants import DEFAULT_IGNORE_FILENAME, DEFAULT_RC_FILENAME
from .errors import IgnoreFileReadError
from .rc_config import TalismanRCIgnore, parse_rc_config
from .rules import IgnoreRules
from talisman.utils import get_logger

logger = get_logger(__name__)

RepoFileRead = Callable[[str], bytes]


def _read(repo_file_read: RepoFileRead, filename: str) -> bytes:
    try:
        return repo_file_read(filename)
    except Exception as e:
        logger.error(f"Failed to read {filename}: {e}")
        raise IgnoreFileReadError(filename, e) from e


def read_ignores_from_file(repo_file_read: RepoFileRead) -> IgnoreRules:
    """
    Build IgnoreRules from the .talismanignore file

    Args:
        repo_file_read: Reads a file by name relative to the repository root

    Returns:
        Parsed legacy rules

    Raises:
        IgnoreFileReadError: If the file cannot be read
    """
    contents = _read(repo_file_read, DEFAULT_IGNORE_FILENAME)
    return IgnoreRules.from_content(contents)


def read_config_from_rc_file(repo_file_read: RepoFileRead,
                             strict: bool = False) -> TalismanRCIgnore:
    """
    Build a TalismanRCIgnore from the .talismanrc file

    Args:
        repo_file_read: Reads a file by name relative to the repository root
        strict: Raise RCConfigError on a malformed document instead of
            returning an empty config

    Returns:
        Parsed structured config

    Raises:
        IgnoreFileReadError: If the file cannot be read
    """
    contents = _read(repo_file_read, DEFAULT_RC_FILENAME)
    return parse_rc_config(contents, strict=strict)
