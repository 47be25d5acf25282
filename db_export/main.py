#!/usr/bin/env python3
"""
MySQL Database Export - CLI Entry Point
=======================================
Exports and imports a MySQL database with mysqldump/mysql:
- Content-only or full database dumps
- Dump files stored in a package's Resources/Private/Content/ directory
- Or any explicit .sql file path
"""

import argparse
import sys
from typing import Optional, Sequence

import yaml

from .commands import DbCommands
from .config import ConfigLoader
from .exceptions import DbExportError
from .models import DumpMode
from .packages import PackageRegistry
from .utils import setup_logging


def _add_dump_arguments(parser: argparse.ArgumentParser, action: str) -> None:
    parser.add_argument(
        '--package-key',
        help=f'Package key whose Resources/Private/Content/ directory the .sql file is {action}'
    )
    parser.add_argument(
        '--sql-file',
        help='Path to the .sql file (ignored when --package-key is given)'
    )
    parser.add_argument(
        '--mode',
        default=DumpMode.CONTENT.value,
        choices=[mode.value for mode in DumpMode],
        help="'content' (default) for content only tables or 'all' for the whole database"
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog='db-export',
        description='MySQL Database Export - dump and restore content tables'
    )
    parser.add_argument(
        '-c', '--config',
        default='config.yaml',
        help='Path to configuration file (default: config.yaml)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )
    parser.add_argument(
        '-q', '--quiet',
        action='store_true',
        help='Do not echo the output of mysql/mysqldump'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)
    _add_dump_arguments(
        subparsers.add_parser('export', help='Export the database into a .sql file'),
        'exported to'
    )
    _add_dump_arguments(
        subparsers.add_parser('import', help='Import the database from a .sql file'),
        'imported from'
    )
    return parser


def main(argv: Optional[Sequence[str]] = None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Load configuration
    try:
        config = ConfigLoader(args.config)
    except FileNotFoundError:
        print(f"Error: Configuration file '{args.config}' not found")
        sys.exit(1)
    except yaml.YAMLError as e:
        print(f"Error: Invalid YAML in configuration file: {e}")
        sys.exit(1)
    except DbExportError as e:
        print(f"Error: {e}")
        sys.exit(e.exit_code)

    # Setup logging
    log_settings = config.get_logging_settings()
    if args.verbose:
        log_settings['level'] = 'DEBUG'
    setup_logging(log_settings)

    try:
        settings = config.get_command_settings()
        if args.quiet:
            settings.output_results = False
        commands = DbCommands(settings, PackageRegistry.from_config(config.get_packages()))

        if args.command == 'export':
            result = commands.export(args.package_key, args.sql_file, args.mode)
        else:
            result = commands.import_(args.package_key, args.sql_file, args.mode)

    except DbExportError as e:
        print(e)
        sys.exit(e.exit_code)

    sys.exit(result)


if __name__ == '__main__':
    main()
