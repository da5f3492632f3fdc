# Rotation schedule for dailylog

import calendar
import time

from .exceptions import ConfigError

SECONDS_PER_DAY = 24 * 60 * 60


def _valid_field(value, upper):
	return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= upper


class RotationClock:
	"""Decides when the active daily file has to be switched.

	Rotation is lazy: nothing happens until a record arrives whose timestamp
	is at or past the stored rotation instant.
	"""

	def __init__(self, rotation_hour=0, rotation_minute=0, localtime=time.localtime, mktime=None):
		if not _valid_field(rotation_hour, 23) or not _valid_field(rotation_minute, 59):
			raise ConfigError(
				f"Invalid rotation time {rotation_hour!r}:{rotation_minute!r} "
				"(hour must be 0-23, minute 0-59)"
			)
		self.rotation_hour = rotation_hour
		self.rotation_minute = rotation_minute
		self._localtime = localtime
		# Inverse of localtime; gmtime pairs with timegm, anything else must be passed
		if mktime is None:
			mktime = calendar.timegm if localtime is time.gmtime else time.mktime
		self._mktime = mktime

	def now_tm(self, timestamp):
		"""Convert an epoch timestamp into local calendar time."""
		return self._localtime(timestamp)

	def next_rotation(self, now):
		"""Return the first rotation instant strictly after ``now``.

		DST transitions can make consecutive instants 23 or 25 hours apart.
		"""
		date = self.now_tm(now)
		candidate = self._mktime((
			date.tm_year, date.tm_mon, date.tm_mday,
			self.rotation_hour, self.rotation_minute, 0,
			0, 0, -1,
		))
		if candidate > now:
			return candidate
		return candidate + SECONDS_PER_DAY

	@staticmethod
	def is_due(record_time, rotation_instant):
		return record_time >= rotation_instant
