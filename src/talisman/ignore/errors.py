"""
Exceptions raised by the ignore subsystem
"""


class IgnoreError(Exception):
    """Base class for ignore configuration failures"""


class IgnoreFileReadError(IgnoreError):
    """An ignore file could not be read. Scanning cannot proceed."""

    def __init__(self, filename: str, cause: BaseException):
        self.filename = filename
        super().__init__(f"Unable to read {filename}: {cause}")


class RCConfigError(IgnoreError):
    """A .talismanrc document could not be decoded (strict mode only)"""
