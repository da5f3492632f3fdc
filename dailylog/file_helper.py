# Owned log file handle for dailylog

import os
import time

from .exceptions import IoError


class FileEventHandlers:
	"""Optional callbacks fired around opening and closing a log file.

	before_open(filename), after_open(filename, file_obj),
	before_close(filename, file_obj), after_close(filename)
	"""

	def __init__(self, before_open=None, after_open=None, before_close=None, after_close=None):
		self.before_open = before_open
		self.after_open = after_open
		self.before_close = before_close
		self.after_close = after_close


class FileHelper:
	"""Binary append-only file handle with open retries."""

	open_tries = 5
	open_interval = 0.01

	def __init__(self, event_handlers=None):
		self.event_handlers = event_handlers or FileEventHandlers()
		self._fd = None
		self._filename = ''

	@property
	def filename(self):
		return self._filename

	def is_open(self):
		return self._fd is not None

	def open(self, filename, truncate=False):
		"""Open ``filename`` for appending, closing any file already held.

		Raises:
			IoError: If the file still cannot be opened after ``open_tries`` attempts
		"""
		self.close()
		self._filename = filename
		handlers = self.event_handlers
		last_error = None

		for _ in range(self.open_tries):
			try:
				folder = os.path.dirname(filename)
				if folder:
					os.makedirs(folder, exist_ok=True)
				if handlers.before_open:
					handlers.before_open(filename)
				if truncate:
					# Truncate through a separate handle, then reopen for appending
					with open(filename, 'wb'):
						pass
				self._fd = open(filename, 'ab')
				if handlers.after_open:
					handlers.after_open(filename, self._fd)
				return
			except OSError as e:
				last_error = e
				time.sleep(self.open_interval)

		raise IoError(f"Failed opening file {filename} for writing", filename, last_error.errno)

	def write(self, data):
		if self._fd is None:
			raise IoError(f"Failed writing to file {self._filename}: not open", self._filename)
		try:
			self._fd.write(data)
		except OSError as e:
			raise IoError(f"Failed writing to file {self._filename}", self._filename, e.errno) from e

	def flush(self):
		if self._fd is None:
			return
		try:
			self._fd.flush()
		except OSError as e:
			raise IoError(f"Failed flush to file {self._filename}", self._filename, e.errno) from e

	def close(self):
		if self._fd is None:
			return
		handlers = self.event_handlers
		fd = self._fd
		self._fd = None
		if handlers.before_close:
			handlers.before_close(self._filename, fd)
		try:
			fd.close()
		except OSError as e:
			raise IoError(f"Failed closing file {self._filename}", self._filename, e.errno) from e
		if handlers.after_close:
			handlers.after_close(self._filename)
