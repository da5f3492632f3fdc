# Retention of daily log files for dailylog

import logging
import os

from .clock import SECONDS_PER_DAY
from .exceptions import RetentionError
from .filename import FOLDER_SEPS, split_by_extension

logger = logging.getLogger(__name__)

# _YYYY-MM-DD
SUFFIX_SIZE = 11
DATE_SIZE = SUFFIX_SIZE - 1
SEPARATOR_OFFSETS = (4, 7)


def split_folder(base_filename):
	"""Split a base filename into (folder, basename).

	The folder keeps its trailing separator and is "." when the base filename
	has no directory part.
	"""
	folder_index = max(base_filename.rfind(sep) for sep in FOLDER_SEPS)
	if folder_index == -1:
		return '.', base_filename
	return base_filename[:folder_index + 1], base_filename[folder_index + 1:]


def daily_log_matcher(base_filename):
	"""Build a predicate recognising directory entries owned by ``base_filename``.

	A match is purely structural: exact length, "stem_" prefix, extension
	suffix and a digit/dash date region. Dates are not validated, so
	"app_2024-13-32.log" is still considered owned.
	"""
	_, basename = split_folder(base_filename)
	stem, ext = split_by_extension(basename)
	prefix = stem + '_'
	target_size = len(basename) + SUFFIX_SIZE

	def is_daily_log(entry):
		if len(entry) != target_size or not entry.startswith(prefix) or not entry.endswith(ext):
			return False
		date = entry[len(prefix):len(prefix) + DATE_SIZE]
		for offset, char in enumerate(date):
			if offset in SEPARATOR_OFFSETS:
				if char != '-':
					return False
			elif not ('0' <= char <= '9'):
				return False
		return True

	return is_daily_log


def entry_date(base_filename, entry):
	"""Return the YYYY-MM-DD region of an owned entry."""
	_, basename = split_folder(base_filename)
	stem, _ = split_by_extension(basename)
	start = len(stem) + 1
	return entry[start:start + DATE_SIZE]


def cutoff_time(current, max_files):
	"""Timestamp ``max_files`` days before ``current``."""
	return current - SECONDS_PER_DAY * max_files


def cutoff_date(base_filename, cutoff_tm, calculator):
	"""Format the cutoff calendar time into the YYYY-MM-DD region used by owned names."""
	_, basename = split_folder(base_filename)
	return entry_date(base_filename, calculator.calc_filename(basename, cutoff_tm))


def _remove_if_exists(path):
	try:
		os.remove(path)
	except FileNotFoundError:
		return False
	return True


def _remove_quietly(path):
	try:
		return _remove_if_exists(path)
	except OSError as e:
		logger.warning("Could not remove obsolete daily log %s: %s", path, e)
		return False


def prune(base_filename, entries, cutoff, remove=_remove_quietly):
	"""Delete owned entries whose encoded date is at or before ``cutoff``.

	Entries that vanish between listing and removal are skipped.

	Args:
		base_filename: Configured base filename, e.g. "logs/app.log"
		entries: Names found in the base filename's folder
		cutoff: YYYY-MM-DD string; comparison is lexicographic
		remove: Callable deleting a path, returning False if nothing was removed

	Returns:
		list: Paths that were removed
	"""
	folder, _ = split_folder(base_filename)
	is_daily_log = daily_log_matcher(base_filename)
	removed = []

	for entry in entries:
		if not is_daily_log(entry):
			continue
		if entry_date(base_filename, entry) <= cutoff:
			path = os.path.join(folder, entry)
			if remove(path):
				logger.debug("Removed obsolete daily log %s", path)
				removed.append(path)

	return removed


def remove_obsolete_logs(base_filename, cutoff_tm, calculator, listdir=os.listdir):
	"""Lenient startup scan removing every owned file at or before the cutoff.

	Returns:
		list: Paths that were removed
	"""
	if not getattr(calculator, 'supports_retention_scan', False):
		logger.warning(
			"Skipping retention scan for %s: file names are not recognisable by date",
			base_filename,
		)
		return []

	folder, _ = split_folder(base_filename)
	try:
		entries = listdir(folder)
	except FileNotFoundError:
		return []

	return prune(base_filename, entries, cutoff_date(base_filename, cutoff_tm, calculator))


def delete_old(base_filename, cutoff_tm, calculator):
	"""Remove the single file that has just fallen out of the retention window.

	A missing file is fine; failing to remove an existing one is not.

	Raises:
		RetentionError: If the expired file exists but cannot be removed
	"""
	path = calculator.calc_filename(base_filename, cutoff_tm)
	try:
		_remove_if_exists(path)
	except OSError as e:
		raise RetentionError(path, e.errno) from e
	return path
