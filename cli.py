"""
Command-Line Interface for ND Exposure Tables

Prints how long each shutter speed becomes behind every ND filter combination,
first as a Markdown table and then as a CSV table.
"""

import os
import sys
import argparse
import logging

# Add parent directory to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from analyzers import CombinationBuilder
from catalog import default_registry, shutter_speeds
from reporters import TableReporter, SUPPORTED_FORMATS

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, debug: bool = False):
    """Send log records to stderr so stdout only carries the tables."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def load_shutter_options(config_path: str) -> dict:
    """Read the ``shutters`` section of a configuration file."""
    import yaml

    with open(config_path, 'r') as f:
        config = yaml.safe_load(f) or {}

    return config.get('shutters') or {}


def cmd_tables(args):
    """Build the filter combinations and print the exposure tables."""
    if args.config:
        logger.info(f"Loading configuration from: {args.config}")
        builder = CombinationBuilder.from_config(args.config)
        reporter = TableReporter.from_config(args.config)
        include_extreme = bool(load_shutter_options(args.config).get('include_extreme', False))
    else:
        builder = CombinationBuilder()
        reporter = TableReporter()
        include_extreme = False

    if args.all_triples:
        builder.include_all_triples = True
    if args.full_stack:
        builder.include_full_stack = True
    if args.include_extreme_shutters:
        include_extreme = True
    if args.format:
        formats = SUPPORTED_FORMATS if args.format == 'both' else (args.format,)
        reporter = TableReporter(formats=formats)

    registry = default_registry()
    combinations = builder.build(registry)
    shutters = shutter_speeds(include_extreme=include_extreme)

    reporter.write(shutters, combinations, sys.stdout)
    logger.info(f"✓ Printed {len(reporter.formats)} table(s)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Exposure times for ND filter combinations',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  # Markdown and CSV tables for the curated filters
  python cli.py

  # Only the CSV table, including every three-filter stack
  python cli.py --format csv --all-triples

  # Read options from a YAML file
  python cli.py --config config.example.yaml
        '''
    )

    parser.add_argument('--config', help='Path to YAML config file (optional)')
    parser.add_argument('--format', choices=['markdown', 'csv', 'both'],
                        help='Tables to print (default: both)')
    parser.add_argument('--all-triples', action='store_true',
                        help='List every three-filter stack instead of the hand-picked ones')
    parser.add_argument('--full-stack', action='store_true',
                        help='Also list all filters stacked together')
    parser.add_argument('--include-extreme-shutters', action='store_true',
                        help='Include 1/8000, 1/6400 and 1/5000')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log progress to stderr')
    parser.add_argument('--debug', action='store_true', help='Log debug details to stderr')
    parser.set_defaults(func=cmd_tables)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, debug=args.debug)

    try:
        args.func(args)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
