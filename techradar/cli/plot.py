"""Plot subcommand - radar visualization"""

from __future__ import annotations
from argparse import ArgumentParser, Namespace, _SubParsersAction
from pathlib import Path
import logging

import matplotlib.pyplot as plt

from ..config import PlotConfig
from ..filters import normalize_filters
from ..visualizer import RadarPlotter
from .common import add_filter_arguments, load_session, setup_logging

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add plot subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for plot subcommand
    """
    parser = subparsers.add_parser(
        'plot',
        help='Draw the technology radar'
    )

    parser.add_argument('--input',
                        help='Collection JSON file (default: bundled dataset)')
    parser.add_argument('--output', default='technology_radar.png',
                        help='Output image (default: technology_radar.png)')
    add_filter_arguments(parser)

    # Optional
    parser.add_argument('--select', type=int, metavar='ID',
                        help='Highlight and label the technology with this id')
    parser.add_argument('--title', help='Plot title')
    parser.add_argument('--seed', type=int,
                        help='Random seed for dot placement (default: random)')
    parser.add_argument('--preset', choices=['default', 'publication', 'presentation'],
                        default='default', help='Plot style preset (default: default)')

    # Debug flag
    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute plot subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    setup_logging(getattr(args, 'debug', False))

    config = PlotConfig.from_preset(args.preset)
    session = load_session(args.input, seed=args.seed, layout_config=config.layout)
    session.set_filters(normalize_filters(vars(args)))
    if args.select is not None and session.select(args.select) is None:
        logger.warning(f"No technology with id {args.select}; nothing highlighted")

    visible = session.visible()
    logger.info(f"Drawing {len(visible)} of {len(session.technologies)} technologies")

    plotter = RadarPlotter(config)
    fig = plotter.plot(
        technologies=visible,
        positions=session.positions(visible),
        output_file=str(Path(args.output)),
        title=args.title,
        selected_id=session.selected_id
    )
    plt.close(fig)

    logger.info(f"✓ Plot saved: {args.output}")
