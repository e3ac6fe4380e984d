"""List subcommand - technologies grouped by quadrant"""

from __future__ import annotations
from argparse import ArgumentParser, Namespace, _SubParsersAction
import logging

from ..filters import move_symbol, normalize_filters
from ..io import write_tsv
from .common import add_filter_arguments, load_session, setup_logging

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add list subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for list subcommand
    """
    parser = subparsers.add_parser(
        'list',
        help='List technologies grouped by quadrant'
    )

    parser.add_argument('--input',
                        help='Collection JSON file (default: bundled dataset)')
    add_filter_arguments(parser)
    parser.add_argument('--tsv', metavar='FILE',
                        help='Also write the filtered list to a TSV file')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')

    return parser  # type: ignore[no-any-return]


def format_listing(grouped: dict) -> str:
    """
    Text rendering of the grouped list view

    One header per quadrant with its count, then one line per technology:
    id, name, ring, '*' for new technologies and the trend marker.
    """
    lines = []
    for quadrant, technologies in grouped.items():
        lines.append(f"{quadrant} ({len(technologies)})")
        for t in technologies:
            new_flag = ' *' if t['isNew'] else ''
            lines.append(f"  [{t['id']:>3}] {t['name']}{new_flag}  {t['ring']}  {move_symbol(t['moved'])}")
    return '\n'.join(lines)


def run(args: Namespace) -> None:
    """
    Execute list subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    setup_logging(getattr(args, 'debug', False))

    session = load_session(args.input)
    session.set_filters(normalize_filters(vars(args)))
    visible = session.visible()

    print(f"Technologies ({len(visible)})")
    print(format_listing(session.grouped()))

    if args.tsv:
        write_tsv(visible, args.tsv)
