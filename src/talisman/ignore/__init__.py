"""
Ignore rules for talisman detectors

This module decides which detectors apply to which paths:
- Legacy .talismanignore files, one pattern per line with optional
  ``#ignore:<detectors>`` scoping
- Structured .talismanrc files with per-file checksums and detector scopes
- Accept/deny queries shared by both formats
"""

from .constants import DEFAULT_IGNORE_FILENAME, DEFAULT_RC_FILENAME
from .errors import IgnoreError, IgnoreFileReadError, RCConfigError
from .rules import IgnoreRule, IgnoreRules, parse_line, parse_ignored_detectors
from .rc_config import FileIgnoreConfig, TalismanRCIgnore, decode_rc_config, parse_rc_config
from .rule_engine import RuleEvaluator
from .file_loader import read_ignores_from_file, read_config_from_rc_file

__all__ = [
    'DEFAULT_IGNORE_FILENAME',
    'DEFAULT_RC_FILENAME',
    'IgnoreError',
    'IgnoreFileReadError',
    'RCConfigError',
    'IgnoreRule',
    'IgnoreRules',
    'parse_line',
    'parse_ignored_detectors',
    'FileIgnoreConfig',
    'TalismanRCIgnore',
    'decode_rc_config',
    'parse_rc_config',
    'RuleEvaluator',
    'read_ignores_from_file',
    'read_config_from_rc_file',
]
