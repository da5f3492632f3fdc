# Configuration management for dailylog
import logging
import os

import yaml

from .filename import daily_filename_calculator, daily_filename_format_calculator
from .sink import DailyFileSink

CONFIG_FILE = 'config/dailylog.yaml'

DEFAULT_CONFIG = {
	'sink': {
		'base_filename': 'logs/app.log',
		'rotation_hour': 0,
		'rotation_minute': 0,
		'truncate': False,
		'max_files': 0,
	},
	'logging': {
		'format': '[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s',
		'datefmt': None,
	},
	'validation': {'strict': False},
}

_global_config = None
_config_home = None


def find_config_home():
	"""
	Find the dailylog configuration directory.
	Priority order:
	1. DAILYLOG_HOME environment variable
	2. ~/.config/dailylog/ if it holds config/dailylog.yaml
	3. Current working directory
	"""
	global _config_home
	if _config_home is not None:
		return _config_home

	env_home = os.environ.get('DAILYLOG_HOME')
	if env_home:
		env_home = os.path.expanduser(env_home)
		if os.path.isdir(env_home):
			_config_home = env_home
			return _config_home

	user_config = os.path.expanduser('~/.config/dailylog')
	if os.path.isdir(user_config) and os.path.exists(os.path.join(user_config, CONFIG_FILE)):
		_config_home = user_config
		return _config_home

	_config_home = os.getcwd()
	return _config_home


def resolve_path(path):
	"""Resolve a path relative to config home if it's not absolute."""
	if os.path.isabs(path):
		return path
	return os.path.join(find_config_home(), path)


def load_global_config():
	"""Load global configuration settings from config/dailylog.yaml."""
	global _global_config
	if _global_config is None:
		config_file = resolve_path(CONFIG_FILE)
		if os.path.exists(config_file):
			with open(config_file, 'r') as f:
				_global_config = yaml.safe_load(f) or {}
		else:
			_global_config = {}
	return _global_config


def reset_config():
	"""Forget the cached config home and settings."""
	global _global_config, _config_home
	_global_config = None
	_config_home = None


def get_config_value(path, default=None):
	"""Get a configuration value using dot notation (e.g., 'sink.max_files')."""
	config = load_global_config()
	value = config
	for key in path.split('.'):
		if isinstance(value, dict) and key in value:
			value = value[key]
		else:
			return default
	return value


def _default(path):
	section, key = path.split('.')
	return DEFAULT_CONFIG[section][key]


def get_sink_settings():
	"""Resolve DailyFileSink keyword arguments from the global config.

	Returns:
		dict: base_filename, rotation_hour, rotation_minute, truncate,
			max_files, calculator and formatter
	"""
	filename_format = get_config_value('sink.filename_format')
	if filename_format:
		base_filename = resolve_path(filename_format)
		calculator = daily_filename_format_calculator
	else:
		base_filename = resolve_path(get_config_value('sink.base_filename', _default('sink.base_filename')))
		calculator = daily_filename_calculator

	return {
		'base_filename': base_filename,
		'rotation_hour': get_config_value('sink.rotation_hour', _default('sink.rotation_hour')),
		'rotation_minute': get_config_value('sink.rotation_minute', _default('sink.rotation_minute')),
		'truncate': bool(get_config_value('sink.truncate', _default('sink.truncate'))),
		'max_files': get_config_value('sink.max_files', _default('sink.max_files')),
		'calculator': calculator,
		'formatter': logging.Formatter(
			get_config_value('logging.format', _default('logging.format')),
			get_config_value('logging.datefmt', _default('logging.datefmt')),
		),
	}


def create_sink_from_config(**overrides):
	"""Build a thread-safe DailyFileSink from the global config."""
	settings = get_sink_settings()
	settings.update(overrides)
	return DailyFileSink(**settings)
