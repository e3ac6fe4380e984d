"""Edit subcommands - add, update and remove technologies in a collection file"""

from __future__ import annotations
from argparse import ArgumentParser, Namespace, _SubParsersAction
from pathlib import Path
import logging
import sys

from .. import editor
from ..exceptions import MalformedInput
from ..io import read_collection, write_collection
from ..types import QUADRANTS, RINGS, Collection, TechnologyRecord
from ..utils import quadrant_index, ring_index, validate_movement
from .common import setup_logging

logger = logging.getLogger(__name__)

COMMANDS = ('add', 'update', 'remove')


def _add_common(parser: ArgumentParser) -> None:
    parser.add_argument('--input', required=True,
                        help='Collection JSON file, rewritten in place')
    parser.add_argument('--output',
                        help='Write the result here instead of overwriting --input')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add add/update/remove subcommand parsers

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        The ArgumentParser of the 'add' subcommand
    """
    add = subparsers.add_parser('add', help='Add a technology')
    _add_common(add)
    add.add_argument('--name', required=True, help='Technology name')
    add.add_argument('--quadrant', choices=QUADRANTS, default='Tools',
                     help='Quadrant (default: Tools)')
    add.add_argument('--ring', choices=RINGS, default='Assess',
                     help='Ring (default: Assess)')
    add.add_argument('--description', required=True, help='Free text description')
    add.add_argument('--new', dest='is_new', action='store_true',
                     help='Mark as new on the radar')
    add.add_argument('--moved', type=int, choices=[-1, 0, 1], default=0,
                     help='Trend: 1 toward Adopt, -1 toward Hold (default: 0)')

    update = subparsers.add_parser('update', help='Change fields of a technology')
    _add_common(update)
    update.add_argument('--id', type=int, required=True, help='Id of the technology to change')
    update.add_argument('--name', help='New name')
    update.add_argument('--quadrant', choices=QUADRANTS, help='New quadrant')
    update.add_argument('--ring', choices=RINGS, help='New ring')
    update.add_argument('--description', help='New description')
    update.add_argument('--new', dest='is_new', action='store_true', default=None,
                        help='Mark as new')
    update.add_argument('--not-new', dest='is_new', action='store_false',
                        help='Clear the new marker')
    update.add_argument('--moved', type=int, choices=[-1, 0, 1], help='New trend')
    update.set_defaults(is_new=None)

    remove = subparsers.add_parser('remove', help='Delete a technology')
    _add_common(remove)
    remove.add_argument('--id', type=int, required=True, help='Id of the technology to delete')

    return add  # type: ignore[no-any-return]


def apply_changes(technology: TechnologyRecord, args: Namespace) -> TechnologyRecord:
    """
    Copy of a record with the fields given on the command line

    Raises:
        ValueError: If the new name or description is blank
        InvalidCategory: If the new quadrant or ring is unknown
    """
    changed: TechnologyRecord = dict(technology)  # type: ignore[assignment]
    if args.name is not None:
        changed['name'] = editor.require_text(args.name, 'name')
    if args.quadrant is not None:
        quadrant_index(args.quadrant)
        changed['quadrant'] = args.quadrant
    if args.ring is not None:
        ring_index(args.ring)
        changed['ring'] = args.ring
    if args.description is not None:
        changed['description'] = editor.require_text(args.description, 'description')
    if args.is_new is not None:
        changed['isNew'] = bool(args.is_new)
    if args.moved is not None:
        changed['moved'] = validate_movement(args.moved)  # type: ignore[typeddict-item]
    return changed


def edit(technologies: Collection, args: Namespace) -> Collection:
    """Apply one add/update/remove command to a collection"""
    if args.command == 'add':
        record = editor.new_record(
            name=args.name,
            quadrant=args.quadrant,
            ring=args.ring,
            description=args.description,
            is_new=args.is_new,
            moved=args.moved
        )
        result = editor.add(technologies, record)
        logger.info(f"Added {result[-1]['name']!r} with id {result[-1]['id']}")
        return result

    existing = editor.find(technologies, args.id)
    if existing is None:
        logger.warning(f"No technology with id {args.id}; collection unchanged")
        return technologies

    if args.command == 'update':
        logger.info(f"Updating {existing['name']!r} (id {args.id})")
        return editor.update(technologies, apply_changes(existing, args))

    logger.info(f"Removing {existing['name']!r} (id {args.id})")
    return editor.remove(technologies, args.id)


def run(args: Namespace) -> None:
    """
    Execute add/update/remove subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    setup_logging(getattr(args, 'debug', False))

    input_file = Path(args.input)
    output_file = Path(args.output) if args.output else input_file

    try:
        technologies = read_collection(input_file)
    except MalformedInput:
        logger.error(f"Invalid JSON file format: {input_file}")
        sys.exit(1)

    write_collection(edit(technologies, args), output_file)
