# Daily file name calculation for dailylog

import os
import time
from typing import Protocol, Tuple

FOLDER_SEPS = ('/', '\\') if os.sep == '\\' else ('/',)


class FilenameStrategy(Protocol):
	"""Anything that maps (base filename, calendar time) to a concrete file name.

	Strategies whose names cannot be recognised structurally by the retention
	scan set ``supports_retention_scan`` to False.
	"""

	supports_retention_scan: bool

	def calc_filename(self, filename: str, now_tm: time.struct_time) -> str:
		...


def split_by_extension(filename: str) -> Tuple[str, str]:
	"""Split a path into (stem, extension) at the last dot.

	The dot only counts when it is neither the first nor the last character
	and it comes after the last folder separator, so "/etc/rc.d/somelog" and
	"/abc/.hidden" have no extension.
	"""
	ext_index = filename.rfind('.')
	if ext_index <= 0 or ext_index == len(filename) - 1:
		return filename, ''

	folder_index = max(filename.rfind(sep) for sep in FOLDER_SEPS)
	if folder_index != -1 and folder_index >= ext_index - 1:
		return filename, ''

	return filename[:ext_index], filename[ext_index:]


class DailyFilenameCalculator:
	"""Generates names of the form basename_YYYY-MM-DD.ext"""

	supports_retention_scan = True

	def calc_filename(self, filename, now_tm):
		stem, ext = split_by_extension(filename)
		return f"{stem}_{now_tm.tm_year:04d}-{now_tm.tm_mon:02d}-{now_tm.tm_mday:02d}{ext}"


class FormatFilenameCalculator:
	"""Generates names by applying the base filename as a strftime pattern.

	e.g. "logs/myapp-%Y-%m-%d.log". The retention scan cannot recognise these
	names, so only the per-rotation delete works with this strategy.
	"""

	supports_retention_scan = False

	def calc_filename(self, filename, now_tm):
		return time.strftime(filename, now_tm)


daily_filename_calculator = DailyFilenameCalculator()
daily_filename_format_calculator = FormatFilenameCalculator()
