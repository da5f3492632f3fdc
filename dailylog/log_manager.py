# Log inspection for dailylog

import os

from .retention import daily_log_matcher, entry_date, split_folder


def list_daily_logs(base_filename):
	"""List the date-stamped files owned by a base filename.

	Returns:
		list: Tuples (path, date, size) sorted newest first
	"""
	folder, _ = split_folder(base_filename)
	if not os.path.isdir(folder):
		return []

	is_daily_log = daily_log_matcher(base_filename)
	log_info = []
	for entry in os.listdir(folder):
		if not is_daily_log(entry):
			continue
		path = os.path.join(folder, entry)
		try:
			size = os.path.getsize(path)
		except FileNotFoundError:
			continue
		log_info.append((path, entry_date(base_filename, entry), size))

	log_info.sort(key=lambda info: info[1], reverse=True)
	return log_info


def get_latest_log(base_filename):
	"""Get the path to the newest daily file.

	Returns:
		tuple: (log_path, log_exists)
	"""
	logs = list_daily_logs(base_filename)
	if not logs:
		return None, False
	return logs[0][0], True


def read_log_content(log_path):
	"""Read the content of a log file."""
	with open(log_path, 'r', encoding='utf-8', errors='replace') as f:
		return f.read()
