"""
Structured .talismanrc configuration

    fileignoreconfig:
      - filename: secrets.json
        checksum: 5f1e...
        ignore_detectors: [filecontent]

A document that cannot be decoded yields an empty config (fail-open) unless
the caller asks for strict parsing.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple, Union

import yaml

from .constants import (
    CHECKSUM_KEY,
    DEFAULT_RC_FILENAME,
    FILE_IGNORE_CONFIG_KEY,
    FILENAME_KEY,
    IGNORE_DETECTORS_KEY,
)
from .errors import RCConfigError
from .rule_engine import RuleEvaluator
from talisman.utils import get_logger

logger = get_logger(__name__)

# BaseLoader keeps every scalar as its literal text; these spell an empty value
NULL_SCALARS = ("", "~", "null", "Null", "NULL")


@dataclass(frozen=True)
class FileIgnoreConfig:
    """One fileignoreconfig entry. The checksum is carried, never checked."""
    filename: str = ""
    checksum: str = ""
    ignore_detectors: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TalismanRCIgnore(RuleEvaluator):
    """Decoded .talismanrc with accept/deny queries"""
    file_ignore_config: Tuple[FileIgnoreConfig, ...] = ()
    # Set when the document failed to decode and the config fell back to empty
    load_error: Optional[str] = field(default=None, compare=False)

    def is_empty(self) -> bool:
        return len(self.file_ignore_config) == 0

    @property
    def is_valid(self) -> bool:
        return self.load_error is None

    def _scoped_patterns(self) -> Iterable[Tuple[str, Sequence[str]]]:
        return ((entry.filename, entry.ignore_detectors) for entry in self.file_ignore_config)


def _is_null(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value in NULL_SCALARS)


def _scalar(value: Any, key: str) -> str:
    if _is_null(value):
        return ""
    if not isinstance(value, str):
        raise RCConfigError(f"'{key}' must be a scalar, got {type(value).__name__}")
    return value


def _detector_list(value: Any) -> Tuple[str, ...]:
    if _is_null(value):
        return ()
    if not isinstance(value, list):
        raise RCConfigError(
            f"'{IGNORE_DETECTORS_KEY}' must be a list, got {type(value).__name__}"
        )
    return tuple(_scalar(item, IGNORE_DETECTORS_KEY) for item in value)


def _file_entry(raw: Any) -> FileIgnoreConfig:
    if not isinstance(raw, Mapping):
        raise RCConfigError(
            f"'{FILE_IGNORE_CONFIG_KEY}' entries must be mappings, got {type(raw).__name__}"
        )
    return FileIgnoreConfig(
        filename=_scalar(raw.get(FILENAME_KEY), FILENAME_KEY),
        checksum=_scalar(raw.get(CHECKSUM_KEY), CHECKSUM_KEY),
        ignore_detectors=_detector_list(raw.get(IGNORE_DETECTORS_KEY)),
    )


def decode_rc_config(contents: Union[bytes, str]) -> TalismanRCIgnore:
    """
    Decode a .talismanrc document, raising on any shape mismatch

    Args:
        contents: Raw YAML document

    Returns:
        TalismanRCIgnore with the decoded entries

    Raises:
        RCConfigError: If the document is not valid YAML or has the wrong shape
    """
    try:
        document = yaml.load(contents, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise RCConfigError(str(e)) from e

    if _is_null(document):
        return TalismanRCIgnore()
    if not isinstance(document, Mapping):
        raise RCConfigError(
            f"top level must be a mapping, got {type(document).__name__}"
        )

    entries = document.get(FILE_IGNORE_CONFIG_KEY)
    if _is_null(entries):
        return TalismanRCIgnore()
    if not isinstance(entries, list):
        raise RCConfigError(
            f"'{FILE_IGNORE_CONFIG_KEY}' must be a list, got {type(entries).__name__}"
        )

    return TalismanRCIgnore(file_ignore_config=tuple(_file_entry(raw) for raw in entries))


def parse_rc_config(contents: Union[bytes, str], strict: bool = False) -> TalismanRCIgnore:
    """
    Build a TalismanRCIgnore from file contents

    Args:
        contents: Raw YAML document
        strict: Raise instead of falling back to an empty config

    Returns:
        Decoded config, or an empty config carrying ``load_error`` when
        decoding failed
    """
    try:
        config = decode_rc_config(contents)
    except RCConfigError as e:
        if strict:
            raise
        logger.error(f"Unable to parse {DEFAULT_RC_FILENAME}")
        logger.error(f"error: {e}")
        return TalismanRCIgnore(load_error=str(e))

    logger.debug(
        f"Loaded {len(config.file_ignore_config)} entries from {DEFAULT_RC_FILENAME}"
    )
    return config
