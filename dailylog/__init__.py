"""
dailylog - daily rotating log files with retention.

Programmatic entry points:

    from dailylog import daily_file_sink_mt, daily_logger_mt

    logger = daily_logger_mt("app", "logs/app.log", hour=2, minute=30, max_files=7)
    logger.warning("written to logs/app_YYYY-MM-DD.log")
"""

from .exceptions import ConfigError, DailyLogError, IoError, RetentionError
from .file_helper import FileEventHandlers
from .filename import (
    DailyFilenameCalculator,
    FilenameStrategy,
    FormatFilenameCalculator,
    split_by_extension,
)
from .handler import (
    DailyFileHandler,
    daily_logger_format_mt,
    daily_logger_format_st,
    daily_logger_mt,
    daily_logger_st,
)
from .sink import (
    DailyFileSink,
    NullLock,
    daily_file_format_sink_mt,
    daily_file_format_sink_st,
    daily_file_sink_mt,
    daily_file_sink_st,
)

__version__ = "0.1.0"
