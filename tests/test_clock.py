import calendar
import time

import pytest

from dailylog.clock import SECONDS_PER_DAY, RotationClock
from dailylog.exceptions import ConfigError
from conftest import local_ts


class TestRotationClockValidation:
    """Schedule validation at construction."""

    @pytest.mark.parametrize("hour, minute", [(24, 0), (0, 60), (-1, 0), (0, -1), (25, 61)])
    def test_out_of_range_rejected(self, hour, minute):
        with pytest.raises(ConfigError):
            RotationClock(hour, minute)

    @pytest.mark.parametrize("hour, minute", [("1", 0), (1.5, 0), (True, 0), (0, None)])
    def test_non_integers_rejected(self, hour, minute):
        with pytest.raises(ConfigError):
            RotationClock(hour, minute)

    @pytest.mark.parametrize("hour, minute", [(0, 0), (23, 59), (12, 30)])
    def test_bounds_accepted(self, hour, minute):
        clock = RotationClock(hour, minute)
        assert (clock.rotation_hour, clock.rotation_minute) == (hour, minute)


class TestNextRotation:
    """next_rotation() always lands strictly in the future."""

    @pytest.mark.parametrize("hour, minute", [(0, 0), (0, 1), (6, 30), (12, 0), (23, 59)])
    @pytest.mark.parametrize("now", [
        local_ts(2024, 1, 10, 0, 0, 0),
        local_ts(2024, 1, 10, 6, 30, 0),
        local_ts(2024, 1, 10, 12, 0, 0),
        local_ts(2024, 1, 10, 23, 59, 59),
    ])
    def test_strictly_after_now(self, hour, minute, now):
        assert RotationClock(hour, minute).next_rotation(now) > now

    def test_later_today(self):
        clock = RotationClock(14, 30)
        assert clock.next_rotation(local_ts(2024, 1, 10, 9)) == local_ts(2024, 1, 10, 14, 30)

    def test_tomorrow_when_boundary_passed(self):
        clock = RotationClock(2, 0)
        assert clock.next_rotation(local_ts(2024, 1, 10, 9)) == local_ts(2024, 1, 10, 2) + SECONDS_PER_DAY

    def test_exactly_at_boundary_moves_to_next_day(self):
        clock = RotationClock(0, 0)
        now = local_ts(2024, 1, 10)
        assert clock.next_rotation(now) == now + SECONDS_PER_DAY

    def test_seconds_are_zeroed(self):
        clock = RotationClock(10, 15)
        rotation = clock.next_rotation(local_ts(2024, 1, 10, 10, 14, 59))
        assert rotation == local_ts(2024, 1, 10, 10, 15, 0)


def test_is_due_uses_greater_or_equal():
    instant = local_ts(2024, 1, 2)
    assert RotationClock.is_due(instant, instant)
    assert RotationClock.is_due(instant + 1, instant)
    assert not RotationClock.is_due(instant - 0.001, instant)


class TestCalendarConversion:
    """The instant is rebuilt with the inverse of the injected conversion."""

    def test_gmtime_uses_utc_boundary(self, sydney_tz):
        clock = RotationClock(0, 0, localtime=time.gmtime)
        now = calendar.timegm((2024, 1, 1, 10, 0, 0))
        assert clock.next_rotation(now) == calendar.timegm((2024, 1, 2, 0, 0, 0))

    def test_local_boundary_follows_process_zone(self, sydney_tz):
        clock = RotationClock(0, 0)
        now = calendar.timegm((2024, 1, 1, 10, 0, 0))
        # 10:00Z is 21:00 in Sydney (UTC+11 in January)
        assert clock.next_rotation(now) == calendar.timegm((2024, 1, 1, 13, 0, 0))

    def test_explicit_inverse(self):
        offset = 3600

        def plus_one(ts):
            return time.gmtime(ts + offset)

        def plus_one_inverse(fields):
            return calendar.timegm(fields) - offset

        clock = RotationClock(0, 0, localtime=plus_one, mktime=plus_one_inverse)
        now = calendar.timegm((2024, 1, 1, 22, 0, 0))
        assert clock.next_rotation(now) == calendar.timegm((2024, 1, 1, 23, 0, 0))
