"""
techradar CLI

Command-line interface with subcommands for drawing and editing a radar.
"""

import argparse
import sys
from .cli import edit, listing, plot, transfer


def main():
    parser = argparse.ArgumentParser(
        prog='techradar',
        description='techradar: Technology radar visualization and editing'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Add subcommand parsers
    plot.add_parser(subparsers)
    listing.add_parser(subparsers)
    edit.add_parser(subparsers)
    transfer.add_parser(subparsers)

    # Parse arguments
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Execute the appropriate subcommand
    if args.command == 'plot':
        plot.run(args)
    elif args.command == 'list':
        listing.run(args)
    elif args.command in edit.COMMANDS:
        edit.run(args)
    elif args.command in ('import', 'export'):
        transfer.run(args)


if __name__ == "__main__":
    main()
