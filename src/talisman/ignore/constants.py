"""
Central configuration for ignore file processing
"""

# Legacy line-oriented ignore file at the repository root
DEFAULT_IGNORE_FILENAME = ".talismanignore"

# Structured YAML ignore file at the repository root
DEFAULT_RC_FILENAME = ".talismanrc"

# Keys of the .talismanrc document
FILE_IGNORE_CONFIG_KEY = "fileignoreconfig"
FILENAME_KEY = "filename"
CHECKSUM_KEY = "checksum"
IGNORE_DETECTORS_KEY = "ignore_detectors"

# Legacy comment directive that scopes a rule to some detectors
IGNORE_DIRECTIVE_PREFIX = "ignore:"
COMMENT_MARKER = "#"
DETECTOR_SEPARATOR = ","

# Characters that turn a pattern into a glob
GLOB_CHARACTERS = "*?[]\\"

# Limits for security and performance
MAX_IGNORE_FILE_SIZE = 1024 * 1024  # 1MB
MAX_CACHE_SIZE = 10000
