#!/usr/bin/env python3
"""
WordPress to Zola Converter - Main CLI Entry Point

This script provides the command-line interface for turning a WordPress
export (``/wp-admin/export.php``) into a Zola content directory with one
section index per directory and one Markdown page per published post.
"""

import argparse
import logging
import sys
from typing import List, Optional

import yaml

from config_loader import ConfigLoader, get_nested
from errors import MigrationError
from logger import LOG_LEVEL_ENV_VAR, log_config, log_section, setup_logging
from orchestrator import MigrationOrchestrator

# Version
__version__ = "0.1.0"


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog='wordpress-to-zola',
        description="Convert a WordPress export XML into Zola sections and pages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Convert an export into ./content
  wordpress-to-zola ./export.xml ./content

  # Use a config file and show progress
  wordpress-to-zola ./export.xml ./content --config config.yaml --progress

  # Verbose logging (or set {LOG_LEVEL_ENV_VAR}=DEBUG)
  wordpress-to-zola ./export.xml ./content -vv
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        'input',
        metavar='INPUT',
        help='Path to the WordPress export XML file'
    )

    parser.add_argument(
        'output_dir',
        metavar='OUTPUT_DIR',
        help='Directory receiving the Zola content tree'
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to configuration YAML file'
    )

    parser.add_argument(
        '--paginate-by',
        type=int,
        default=None,
        help='paginate_by value written to section index files (default: 5)'
    )

    parser.add_argument(
        '--log-file',
        type=str,
        default=None,
        help='Also write logs to this rotating file'
    )

    parser.add_argument(
        '--progress',
        action=argparse.BooleanOptionalAction,
        default=None,
        help='Show a progress bar while converting items'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help='Increase verbosity (-v for INFO, -vv for DEBUG)'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        config = ConfigLoader.load(args.config)
        config = ConfigLoader.merge_with_args(config, args)
        ConfigLoader.validate(config)
    except FileNotFoundError as e:
        print(f"ERROR: File not found: {e}", file=sys.stderr)
        return 2
    except (ValueError, yaml.YAMLError) as e:
        print(f"ERROR: Configuration error: {e}", file=sys.stderr)
        return 2

    try:
        setup_logging(
            level=get_nested(config, 'logging.level'),
            log_file=get_nested(config, 'logging.file')
        )
    except ValueError as e:
        print(f"ERROR: Configuration error: {e}", file=sys.stderr)
        return 2
    logger = logging.getLogger('wordpress_to_zola.migrate')

    log_section("WordPress to Zola")
    logger.info(f"Version: {__version__}")
    log_config(config)

    try:
        orchestrator = MigrationOrchestrator(config, logger=logger)
        orchestrator.run(args.input, get_nested(config, 'export.output_directory'))
    except MigrationError as e:
        logger.error(f"Conversion failed: {e}")
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1
    except KeyboardInterrupt:
        logger.error("Conversion interrupted by user")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
