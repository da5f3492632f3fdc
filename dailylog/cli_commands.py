# CLI command definitions for dailylog
import functools
import logging
import os
import sys
import time
from datetime import datetime

import click
import yaml

from .clock import RotationClock
from .config import (
	CONFIG_FILE,
	DEFAULT_CONFIG,
	create_sink_from_config,
	find_config_home,
	get_sink_settings,
)
from .exceptions import DailyLogError
from .log_manager import get_latest_log, list_daily_logs, read_log_content
from .retention import cutoff_date, cutoff_time, prune, split_folder
from .validator import validate_configuration
from .cli_output import print_daily_log_table


def handle_exceptions(func):
	"""Report DailyLogError on stderr and exit with its exit code."""

	@functools.wraps(func)
	def wrapper(*args, **kwargs):
		try:
			return func(*args, **kwargs)
		except DailyLogError as e:
			click.echo(f"Error: {e.message}", err=True)
			sys.exit(e.exit_code)

	return wrapper


def _make_record(logger_name, level, message):
	levelno = logging.getLevelName(level.upper())
	if not isinstance(levelno, int):
		raise click.BadParameter(f"Unknown level {level}", param_hint="--level")
	return logging.LogRecord(logger_name, levelno, "", 0, message, None, None)


@click.group()
def cli():
	"""dailylog - daily rotating log files with retention."""
	pass


@cli.command()
@click.option('--force', is_flag=True, help='Overwrite an existing config file.')
def init(force):
	"""Write a default config/dailylog.yaml in the config home."""
	config_file = os.path.join(find_config_home(), CONFIG_FILE)
	if os.path.exists(config_file) and not force:
		click.echo(f"Configuration already exists: {config_file}")
		return

	os.makedirs(os.path.dirname(config_file), exist_ok=True)
	with open(config_file, 'w') as f:
		yaml.dump(DEFAULT_CONFIG, f, default_flow_style=False, sort_keys=False)
	click.echo(f"✓ Created configuration: {config_file}")


@cli.command()
@click.argument('message', nargs=-1, required=True)
@click.option('--name', default='dailylog', help='Logger name recorded with the message.')
@click.option('--level', default='INFO', help='Level name recorded with the message.')
@handle_exceptions
def write(message, name, level):
	"""Write MESSAGE to the current daily file."""
	record = _make_record(name, level, ' '.join(message))
	sink = create_sink_from_config()
	try:
		sink.write(record)
		sink.flush()
	finally:
		sink.close()


@cli.command()
@click.option('--name', default='dailylog', help='Logger name recorded with each line.')
@click.option('--level', default='INFO', help='Level name recorded with each line.')
@handle_exceptions
def pipe(name, level):
	"""Write each line read from stdin, rotating as days pass."""
	# Reject a bad --level before blocking on stdin
	_make_record(name, level, '')
	sink = create_sink_from_config()
	try:
		for line in click.get_text_stream('stdin'):
			sink.write(_make_record(name, level, line.rstrip('\n')))
			sink.flush()
	finally:
		sink.close()


@cli.command(name='list')
@handle_exceptions
def list_logs():
	"""List the daily files of the configured base filename."""
	settings = get_sink_settings()
	if not settings['calculator'].supports_retention_scan:
		click.echo("Daily files named by filename_format cannot be listed")
		return
	logs = list_daily_logs(settings['base_filename'])
	if not logs:
		click.echo("No daily log files found")
		return
	current = settings['calculator'].calc_filename(settings['base_filename'], time.localtime())
	print_daily_log_table(logs, current=current)


@cli.command()
@click.option('--date', help='Show the file for YYYY-MM-DD instead of the newest one.')
@handle_exceptions
def show(date):
	"""Print the contents of a daily file."""
	settings = get_sink_settings()
	if date:
		log_path = next((path for path, day, _ in list_daily_logs(settings['base_filename']) if day == date), None)
	else:
		log_path, _ = get_latest_log(settings['base_filename'])
	if not log_path:
		click.echo("No daily log file found")
		return
	click.echo(read_log_content(log_path), nl=False)


@cli.command(name='prune')
@click.option('--max-files', type=click.IntRange(min=1), default=None, help='Days to keep (defaults to sink.max_files).')
@click.option('--dry-run', is_flag=True, help='Show what would be removed.')
@handle_exceptions
def prune_logs(max_files, dry_run):
	"""Remove daily files that fell out of the retention window."""
	settings = get_sink_settings()
	base_filename = settings['base_filename']
	calculator = settings['calculator']
	if max_files is None:
		max_files = settings['max_files']
	if not max_files:
		click.echo("Retention disabled (max_files is 0), nothing to prune")
		return
	if not calculator.supports_retention_scan:
		click.echo("Daily files named by filename_format cannot be scanned, nothing pruned")
		return

	folder, _ = split_folder(base_filename)
	if not os.path.isdir(folder):
		click.echo(f"Log directory not found: {folder}")
		return

	cutoff = cutoff_date(base_filename, time.localtime(cutoff_time(time.time(), max_files)), calculator)
	if dry_run:
		removed = prune(base_filename, os.listdir(folder), cutoff, remove=lambda path: True)
	else:
		removed = prune(base_filename, os.listdir(folder), cutoff)

	for path in removed:
		click.echo(f"{'Would remove' if dry_run else 'Removed'} {path}")
	click.echo(f"{len(removed)} file(s) at or before {cutoff}")


@cli.command()
@handle_exceptions
def status():
	"""Show the current daily file and the next rotation time."""
	settings = get_sink_settings()
	clock = RotationClock(settings['rotation_hour'], settings['rotation_minute'])
	now = time.time()
	filename = settings['calculator'].calc_filename(settings['base_filename'], clock.now_tm(now))
	next_rotation = datetime.fromtimestamp(clock.next_rotation(now))

	click.echo(f"Current file: {filename}")
	if os.path.exists(filename):
		click.echo(f"Size: {os.path.getsize(filename)} bytes")
	click.echo(f"Next rotation: {next_rotation.strftime('%Y-%m-%d %H:%M:%S')}")
	max_files = settings['max_files']
	click.echo(f"Retention: {f'{max_files} day(s)' if max_files else 'disabled'}")


@cli.command()
def validate():
	"""Validate config/dailylog.yaml."""
	result = validate_configuration()
	for error in result.errors:
		click.echo(f"❌ {error}", err=True)
	for warning in result.warnings:
		click.echo(f"⚠️  {warning}")
	if result.is_valid:
		click.echo("✓ Configuration is valid")
	else:
		sys.exit(1)
