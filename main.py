#!/usr/bin/env python3
"""
dailylog - daily rotating log files with retention

Entry point for the dailylog CLI. All logic lives in dailylog/.
"""

from dailylog.cli_commands import cli

if __name__ == '__main__':
    cli()
