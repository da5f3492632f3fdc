import logging
import os
import time

import pytest

from dailylog.exceptions import ConfigError, IoError
from dailylog.filename import DailyFilenameCalculator
from dailylog.handler import DailyFileHandler, daily_logger_format_st, daily_logger_mt, daily_logger_st
from dailylog.sink import DailyFileSink


@pytest.fixture
def detach():
    """Close and remove handlers from loggers created by a test."""
    loggers = []
    yield loggers.append
    for logger in loggers:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


def todays_file(base_filename):
    return DailyFilenameCalculator().calc_filename(base_filename, time.localtime())


def test_daily_logger_writes_to_todays_file(base_filename, detach):
    logger = daily_logger_mt("dailylog.test.mt", base_filename)
    detach(logger)
    logger.propagate = False
    logger.warning("disk %s%% full", 91)
    for handler in logger.handlers:
        handler.flush()

    with open(todays_file(base_filename)) as f:
        content = f.read()
    assert "[dailylog.test.mt] [WARNING] disk 91% full" in content


def test_handler_formatter_is_used(base_filename, detach):
    logger = daily_logger_st("dailylog.test.fmt", base_filename)
    detach(logger)
    logger.propagate = False
    logger.handlers[0].setFormatter(logging.Formatter("%(levelname)s|%(message)s"))
    logger.error("boom")
    logger.handlers[0].flush()

    with open(todays_file(base_filename)) as f:
        assert f.read() == "ERROR|boom\n"


def test_format_logger_uses_pattern(log_dir, detach):
    logger = daily_logger_format_st("dailylog.test.pattern", str(log_dir / "svc-%Y.log"))
    detach(logger)
    assert os.listdir(log_dir) == [time.strftime("svc-%Y.log")]


def test_handler_level_filters_records(base_filename, detach):
    sink = DailyFileSink(base_filename, formatter=logging.Formatter("%(message)s"))
    handler = DailyFileHandler(sink, level=logging.ERROR)
    logger = logging.getLogger("dailylog.test.level")
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    detach(logger)

    logger.info("skipped")
    logger.error("kept")
    handler.flush()
    with open(todays_file(base_filename)) as f:
        assert f.read() == "kept\n"


def test_emit_failure_goes_to_handle_error(monkeypatch):
    class FailingSink:
        formatter = logging.Formatter()

        def set_formatter(self, formatter):
            pass

        def write(self, record):
            raise IoError("disk gone", "app.log", 28)

    handler = DailyFileHandler(FailingSink())
    errors = []
    monkeypatch.setattr(handler, "handleError", errors.append)
    record = logging.makeLogRecord({"msg": "x"})
    handler.emit(record)
    assert errors == [record]


def test_second_daily_logger_with_same_name_is_rejected(log_dir, base_filename, detach):
    logger = daily_logger_st("dailylog.test.duplicate", base_filename)
    detach(logger)
    with pytest.raises(ConfigError):
        daily_logger_mt("dailylog.test.duplicate", str(log_dir / "other.log"))
    assert len(logger.handlers) == 1
    assert not any(name.startswith("other") for name in os.listdir(log_dir))
