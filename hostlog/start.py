#!/usr/bin/env python3
"""
Command line access to hostlog for shell scripts and scheduled jobs.

    hostlog log "Backup finished" --component backup
    hostlog console "Starting sync" --log-path /opt/sync
    hostlog cleanup --days 30 --config config/config.yaml
"""
import argparse
import dataclasses
import sys
from pathlib import Path
from typing import List, Optional

from hostlog.config import LoggerConfig, load_config
from hostlog.exceptions import HostLogError
from hostlog.logging_config import setup_logging
from hostlog.logging_utils import delete_old_log_files, log, log_and_console


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hostlog", description='Write and prune per-day host log files')
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--config', help='YAML config file with a "logging" section')
    common.add_argument('--log-path', help='Base directory holding the Logs folder')
    common.add_argument('--component', help='Component name embedded in the log file name')
    common.add_argument('--verbose', action='store_true', help='Show diagnostic messages')

    subparsers = parser.add_subparsers(dest='command', required=True)

    log_parser = subparsers.add_parser('log', parents=[common], help='Append a message to the log file')
    log_parser.add_argument('message')

    console_parser = subparsers.add_parser('console', parents=[common],
                                           help='Print a message and append it to the log file')
    console_parser.add_argument('message')

    cleanup_parser = subparsers.add_parser('cleanup', parents=[common], help='Delete old log files')
    cleanup_parser.add_argument('--days', type=int, help='Retention window in days (default: 90)')
    cleanup_parser.add_argument('--strict', action='store_true',
                                help='Exit with an error if any file could not be deleted')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "WARNING")

    try:
        config = load_config(args.config) if args.config else LoggerConfig()
        if args.component is not None:
            config = dataclasses.replace(config, component_name=args.component)
        # The entry point is not the caller's script; default to where the job runs
        if args.log_path is None and config.base_directory is None:
            config = config.with_base_directory(Path.cwd())

        if args.command == 'log':
            log(args.message, log_path=args.log_path, config=config)
        elif args.command == 'console':
            log_and_console(args.message, log_path=args.log_path, config=config)
        else:
            result = delete_old_log_files(args.days, log_path=args.log_path, config=config, strict=args.strict)
            print(f"Deleted {len(result.deleted)} old log file(s)")
    except (HostLogError, OSError, ValueError) as e:
        print(f"Error: {type(e).__name__}: {str(e)}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
