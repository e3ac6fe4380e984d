"""Import and export subcommands"""

from __future__ import annotations
from argparse import ArgumentParser, Namespace, _SubParsersAction
from pathlib import Path
import logging

from ..editor import EXPORT_FILENAME
from ..io import write_collection
from ..session import RadarSession
from .common import import_file, load_session, setup_logging

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add import and export subcommand parsers

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        The ArgumentParser of the 'export' subcommand
    """
    importer = subparsers.add_parser(
        'import',
        help='Validate an exported document and store it as the current collection'
    )
    importer.add_argument('--input', required=True, help='Document to import')
    importer.add_argument('--output', required=True,
                          help='Collection file (or directory) to replace')
    importer.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')

    exporter = subparsers.add_parser(
        'export',
        help=f'Write the collection as {EXPORT_FILENAME}'
    )
    exporter.add_argument('--input',
                          help='Collection JSON file (default: bundled dataset)')
    exporter.add_argument('--output-dir', required=True,
                          help=f'Directory to write {EXPORT_FILENAME} into')
    exporter.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')

    return exporter  # type: ignore[no-any-return]


def run_import(args: Namespace) -> None:
    """
    Replace a collection file with an imported document

    The target is left untouched when the document is not valid JSON or a
    record is missing a field or has an unknown quadrant, ring or trend.
    """
    session = RadarSession()
    logger.info(import_file(session, args.input))
    write_collection(session.technologies, args.output)


def run_export(args: Namespace) -> None:
    session = load_session(args.input)
    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    write_collection(session.technologies, output_dir / EXPORT_FILENAME)


def run(args: Namespace) -> None:
    """
    Execute import or export subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    setup_logging(getattr(args, 'debug', False))

    if args.command == 'import':
        run_import(args)
    else:
        run_export(args)
