# Custom exceptions for dailylog
"""
Centralized exception handling for dailylog.

All exceptions inherit from DailyLogError so the CLI can translate them
into an exit code in one place.
"""


class DailyLogError(Exception):
    """Base exception for all dailylog errors."""

    def __init__(self, message, exit_code=1):
        self.message = message
        self.exit_code = exit_code
        super().__init__(self.message)


class ConfigError(DailyLogError):
    """Raised when sink parameters or configuration values are invalid."""

    def __init__(self, message):
        super().__init__(message, exit_code=2)


class IoError(DailyLogError):
    """Raised when a log file cannot be opened, written, flushed or closed."""

    def __init__(self, message, path=None, errno=None):
        self.path = path
        self.errno = errno
        if errno is not None:
            message = f"{message} (errno {errno})"
        super().__init__(message, exit_code=3)


class RetentionError(DailyLogError):
    """Raised when the file falling out of the retention window cannot be removed."""

    def __init__(self, path, errno=None):
        self.path = path
        self.errno = errno
        message = f"Failed removing daily file {path}"
        if errno is not None:
            message = f"{message} (errno {errno})"
        super().__init__(message, exit_code=4)
