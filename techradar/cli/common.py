"""Shared helpers for CLI subcommands"""

from __future__ import annotations
from typing import Optional
from argparse import ArgumentParser
from pathlib import Path
import logging
import sys

from ..config import LayoutConfig
from ..data import DEFAULT_TECHNOLOGIES
from ..exceptions import MalformedInput
from ..io import CollectionReader
from ..layout import LayoutEngine
from ..session import IMPORT_ERROR_MESSAGE, RadarSession
from ..types import QUADRANTS, RINGS, PathLike

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure logging for a subcommand run"""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Silence very noisy third-party loggers (matplotlib font discovery etc.)
    for noisy in ("matplotlib", "matplotlib.font_manager", "PIL", "PIL.Image", "fontTools"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def add_filter_arguments(parser: ArgumentParser) -> None:
    parser.add_argument('--search', default='',
                        help='Only technologies whose name or description contains this text')
    parser.add_argument('--quadrant', choices=['All', *QUADRANTS], default='All',
                        help='Only technologies in this quadrant (default: All)')
    parser.add_argument('--ring', choices=['All', *RINGS], default='All',
                        help='Only technologies in this ring (default: All)')


def import_file(session: RadarSession, source: PathLike) -> str:
    """
    Import a document file into a session

    Exits with status 1 if the file is not UTF-8 JSON or holds an unusable
    record; the session keeps its collection in that case.

    Returns:
        The import summary message
    """
    try:
        ok, message = session.import_text(CollectionReader.read_text(source))
    except MalformedInput as e:
        ok, message = False, f"{IMPORT_ERROR_MESSAGE}: {e}"
    if not ok:
        logger.error(f"{message}: {source}")
        sys.exit(1)
    return message


def load_session(
    input_file: Optional[str],
    seed: Optional[int] = None,
    layout_config: Optional[LayoutConfig] = None
) -> RadarSession:
    """
    Start a session from a collection file, or the bundled dataset

    Exits with status 1 if the file cannot be imported.

    Raises:
        FileNotFoundError: If input_file does not exist
    """
    source = input_file or DEFAULT_TECHNOLOGIES
    if input_file is None:
        logger.info("Using bundled technologies dataset")

    session = RadarSession(layout_engine=LayoutEngine(layout_config, seed=seed))
    import_file(session, source)
    logger.info(f"Loaded {len(session.technologies)} technologies from {Path(source).name}")
    return session
