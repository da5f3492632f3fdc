# Daily rotating file sink for dailylog

import logging
import threading
import time
from typing import Optional

from .clock import RotationClock
from .exceptions import ConfigError
from .file_helper import FileHelper
from .filename import FilenameStrategy, daily_filename_calculator, daily_filename_format_calculator
from .retention import cutoff_time, delete_old, remove_obsolete_logs

DEFAULT_FORMAT = '[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s'


class NullLock:
	"""Lock stand-in for sinks that are only used from one thread."""

	def __enter__(self):
		return self

	def __exit__(self, exc_type, exc, tb):
		return False


class DailyFileSink:
	"""Writes records to a date-stamped file, switching files once a day.

	If truncate is set, each newly opened file is truncated.
	If max_files > 0, only the last max_files days are kept and older
	date-stamped files are deleted.
	"""

	terminator = '\n'

	def __init__(
		self,
		base_filename,
		rotation_hour=0,
		rotation_minute=0,
		truncate=False,
		max_files=0,
		calculator: Optional[FilenameStrategy] = None,
		lock=None,
		event_handlers=None,
		formatter=None,
		encoding='utf-8',
		clock=time.time,
		localtime=time.localtime,
		mktime=None,
	):
		self._clock_source = clock
		self._rotation = RotationClock(rotation_hour, rotation_minute, localtime, mktime)
		if not isinstance(max_files, int) or isinstance(max_files, bool) or max_files < 0:
			raise ConfigError(f"Invalid max_files {max_files!r} (must be an integer >= 0)")

		self.base_filename = base_filename
		self.truncate = truncate
		self.max_files = max_files
		self.calculator = calculator or daily_filename_calculator
		self.encoding = encoding
		self.formatter = formatter or logging.Formatter(DEFAULT_FORMAT)
		self._lock = lock if lock is not None else threading.Lock()
		self._file_helper = FileHelper(event_handlers)

		now = clock()
		self._file_helper.open(self._calc_filename(now), self.truncate)
		self._rotation_tp = self._rotation.next_rotation(now)

		if self.max_files > 0:
			remove_obsolete_logs(
				self.base_filename,
				self._rotation.now_tm(cutoff_time(clock(), self.max_files)),
				self.calculator,
			)

	@property
	def rotation_hour(self):
		return self._rotation.rotation_hour

	@property
	def rotation_minute(self):
		return self._rotation.rotation_minute

	@property
	def rotation_instant(self):
		with self._lock:
			return self._rotation_tp

	def filename(self):
		"""Name of the file currently being written."""
		with self._lock:
			return self._file_helper.filename

	current_filename = filename

	def set_formatter(self, formatter):
		with self._lock:
			self.formatter = formatter

	def write(self, record):
		"""Append ``record``, rotating first if its timestamp reached the rotation instant.

		Raises:
			IoError: If the new file cannot be opened or the record cannot be written
			RetentionError: If the expired file cannot be removed after a rotation;
				the record has already been written at that point
		"""
		with self._lock:
			record_time = record.created
			should_rotate = self._rotation.is_due(record_time, self._rotation_tp)
			if should_rotate:
				self._file_helper.close()
				self._file_helper.open(self._calc_filename(record_time), self.truncate)
				self._rotation_tp = self._rotation.next_rotation(self._clock_source())
			elif not self._file_helper.is_open():
				# Reopened after close(); keep what is already in the file
				self._file_helper.open(self._calc_filename(record_time), False)

			self._file_helper.write(self._format(record))

			# Cleaning goes last since it may raise
			if should_rotate and self.max_files > 0:
				delete_old(
					self.base_filename,
					self._rotation.now_tm(cutoff_time(record_time, self.max_files)),
					self.calculator,
				)

	def flush(self):
		with self._lock:
			self._file_helper.flush()

	def close(self):
		with self._lock:
			self._file_helper.close()

	def _calc_filename(self, timestamp):
		return self.calculator.calc_filename(self.base_filename, self._rotation.now_tm(timestamp))

	def _format(self, record):
		formatted = self.formatter.format(record)
		if isinstance(formatted, bytes):
			return formatted
		return (formatted + self.terminator).encode(self.encoding)


def daily_file_sink_mt(base_filename, rotation_hour=0, rotation_minute=0, truncate=False, max_files=0, **kwargs):
	"""Sink guarded by a real lock, safe to share between threads."""
	return DailyFileSink(base_filename, rotation_hour, rotation_minute, truncate, max_files,
		lock=threading.Lock(), **kwargs)


def daily_file_sink_st(base_filename, rotation_hour=0, rotation_minute=0, truncate=False, max_files=0, **kwargs):
	"""Sink without locking, for callers that guarantee single-threaded access."""
	return DailyFileSink(base_filename, rotation_hour, rotation_minute, truncate, max_files,
		lock=NullLock(), **kwargs)


def daily_file_format_sink_mt(filename_pattern, rotation_hour=0, rotation_minute=0, truncate=False, max_files=0, **kwargs):
	"""Thread-safe sink naming files with a strftime pattern, e.g. "logs/app-%Y-%m-%d.log"."""
	return daily_file_sink_mt(filename_pattern, rotation_hour, rotation_minute, truncate, max_files,
		calculator=daily_filename_format_calculator, **kwargs)


def daily_file_format_sink_st(filename_pattern, rotation_hour=0, rotation_minute=0, truncate=False, max_files=0, **kwargs):
	"""Single-threaded sink naming files with a strftime pattern."""
	return daily_file_sink_st(filename_pattern, rotation_hour, rotation_minute, truncate, max_files,
		calculator=daily_filename_format_calculator, **kwargs)
