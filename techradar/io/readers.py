"""
I/O Readers

Handles reading of technology collections from disk.
"""

from __future__ import annotations
from pathlib import Path
import logging

from ..editor import deserialize
from ..exceptions import MalformedInput
from ..types import Collection, PathLike

logger = logging.getLogger(__name__)


class CollectionReader:
    """Reads collections exported as {"technologies": [...]} documents"""

    @staticmethod
    def read_text(filepath: PathLike) -> str:
        """
        Raw document text

        Raises:
            FileNotFoundError: If the file does not exist
            MalformedInput: If the file is not UTF-8 text
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Collection file not found: {path}")
        try:
            return path.read_text(encoding='utf-8')
        except UnicodeDecodeError as e:
            raise MalformedInput('Invalid JSON format') from e

    @staticmethod
    def read(filepath: PathLike) -> Collection:
        """
        Read a collection

        Args:
            filepath: Path to JSON document

        Returns:
            Collection in document order

        Raises:
            FileNotFoundError: If the file does not exist
            MalformedInput: If the file is not valid JSON
        """
        technologies = deserialize(CollectionReader.read_text(filepath))
        logger.debug(f"Read {len(technologies)} technologies from {filepath}")
        return technologies


def read_collection(filepath: PathLike) -> Collection:
    """
    Convenience function to read a collection

    Args:
        filepath: Path to JSON document

    Returns:
        Collection in document order
    """
    return CollectionReader.read(filepath)
