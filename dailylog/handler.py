# stdlib logging integration for dailylog

import logging

from .exceptions import ConfigError
from .sink import (
	daily_file_format_sink_mt,
	daily_file_format_sink_st,
	daily_file_sink_mt,
	daily_file_sink_st,
)


class DailyFileHandler(logging.Handler):
	"""logging.Handler writing records through a DailyFileSink.

	The sink formats records through this handler, so setFormatter() on the
	handler behaves as it does for any stdlib handler.
	"""

	def __init__(self, sink, level=logging.NOTSET):
		super().__init__(level)
		self.sink = sink
		self.setFormatter(sink.formatter)
		sink.set_formatter(self)

	def emit(self, record):
		try:
			self.sink.write(record)
		except Exception:
			self.handleError(record)

	def flush(self):
		self.acquire()
		try:
			self.sink.flush()
		finally:
			self.release()

	def close(self):
		self.acquire()
		try:
			self.sink.close()
		finally:
			self.release()
		super().close()


def _create_logger(logger_name, sink_factory, *args, **kwargs):
	logger = logging.getLogger(logger_name)
	if any(isinstance(h, DailyFileHandler) for h in logger.handlers):
		raise ConfigError(f"Logger '{logger_name}' already has a daily file handler")
	logger.addHandler(DailyFileHandler(sink_factory(*args, **kwargs)))
	return logger


def daily_logger_mt(logger_name, filename, hour=0, minute=0, truncate=False, max_files=0, event_handlers=None):
	return _create_logger(
		logger_name, daily_file_sink_mt, filename, hour, minute, truncate, max_files, event_handlers=event_handlers,
	)


def daily_logger_st(logger_name, filename, hour=0, minute=0, truncate=False, max_files=0, event_handlers=None):
	return _create_logger(
		logger_name, daily_file_sink_st, filename, hour, minute, truncate, max_files, event_handlers=event_handlers,
	)


def daily_logger_format_mt(logger_name, filename, hour=0, minute=0, truncate=False, max_files=0, event_handlers=None):
	return _create_logger(
		logger_name, daily_file_format_sink_mt, filename, hour, minute, truncate, max_files, event_handlers=event_handlers,
	)


def daily_logger_format_st(logger_name, filename, hour=0, minute=0, truncate=False, max_files=0, event_handlers=None):
	return _create_logger(
		logger_name, daily_file_format_sink_st, filename, hour, minute, truncate, max_files, event_handlers=event_handlers,
	)
