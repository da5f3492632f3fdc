"""
Pytest fixtures for dailylog tests.

This module provides shared fixtures used across test modules.
"""

import logging
import time
from pathlib import Path

import pytest
import yaml

from dailylog import config


def local_ts(year, month, day, hour=0, minute=0, second=0):
    """Epoch timestamp of a local wall-clock time."""
    return time.mktime((year, month, day, hour, minute, second, 0, 0, -1))


def make_record(created, msg="message", name="test"):
    return logging.makeLogRecord({"name": name, "msg": msg, "levelname": "INFO", "levelno": logging.INFO, "created": created})


class FakeClock:
    """Callable clock whose time only moves when a test says so."""

    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop the cached config home and settings around each test."""
    config.reset_config()
    yield
    config.reset_config()


@pytest.fixture
def log_dir(tmp_path):
    d = tmp_path / "logs"
    d.mkdir()
    return d


@pytest.fixture
def base_filename(log_dir):
    return str(log_dir / "app.log")


@pytest.fixture
def fake_clock():
    return FakeClock(local_ts(2024, 1, 1, 23, 59, 59))


@pytest.fixture
def temp_config_dir(tmp_path, monkeypatch):
    """
    Create a dailylog config home and point DAILYLOG_HOME at it.

    temp_config_dir/
    ├── config/
    │   └── dailylog.yaml
    └── logs/
    """
    home = tmp_path / "home"
    (home / "config").mkdir(parents=True)
    (home / "logs").mkdir()
    monkeypatch.setenv("DAILYLOG_HOME", str(home))
    return home


@pytest.fixture
def write_config(temp_config_dir):
    """Return a function writing config/dailylog.yaml from a dict."""

    def _write(data):
        config_file = Path(temp_config_dir) / "config" / "dailylog.yaml"
        with open(config_file, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
        config.reset_config()
        return str(config_file)

    return _write


@pytest.fixture
def sydney_tz(monkeypatch):
    """Run the test with a process time zone far from UTC."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "Australia/Sydney")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
