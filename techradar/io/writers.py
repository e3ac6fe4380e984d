"""
I/O Writers

Handles writing of collections and list views.
"""

from __future__ import annotations
from pathlib import Path
import logging

import pandas as pd

from ..editor import EXPORT_FILENAME, serialize
from ..filters import move_symbol
from ..types import QUADRANTS, RINGS, Collection, PathLike

logger = logging.getLogger(__name__)

LIST_COLUMNS = ['id', 'name', 'quadrant', 'ring', 'isNew', 'moved', 'trend', 'description']


class CollectionWriter:
    """Writes collections as {"technologies": [...]} documents"""

    def write(self, technologies: Collection, output_file: PathLike) -> Path:
        """
        Write a collection to a JSON file

        Args:
            technologies: Collection to write
            output_file: Target file, or a directory to write technologies.json into

        Returns:
            Path of the written file
        """
        path = Path(output_file)
        if path.is_dir():
            path = path / EXPORT_FILENAME
        path.parent.mkdir(parents=True, exist_ok=True)

        path.write_text(serialize(technologies) + '\n', encoding='utf-8')
        logger.info(f"Wrote {len(technologies)} technologies to {path}")
        return path


def write_collection(technologies: Collection, output_file: PathLike) -> Path:
    """Convenience function for CollectionWriter.write"""
    return CollectionWriter().write(technologies, output_file)


def to_frame(technologies: Collection) -> pd.DataFrame:
    """
    Collection as a DataFrame in list-view order

    Rows are ordered by quadrant then ring (enumeration order); ties keep
    collection order. Adds a 'trend' column with the movement marker.
    """
    if not technologies:
        return pd.DataFrame(columns=LIST_COLUMNS)

    df = pd.DataFrame(technologies)
    df['trend'] = df['moved'].apply(move_symbol)
    df['quadrant'] = pd.Categorical(df['quadrant'], categories=list(QUADRANTS), ordered=True)
    df['ring'] = pd.Categorical(df['ring'], categories=list(RINGS), ordered=True)
    df = df.sort_values(['quadrant', 'ring'], kind='stable').reset_index(drop=True)
    df['quadrant'] = df['quadrant'].astype(str)
    df['ring'] = df['ring'].astype(str)
    return df[LIST_COLUMNS]


class TSVWriter:
    """Writes the list view in TSV format"""

    def write(self, technologies: Collection, output_file: PathLike) -> None:
        """
        Write technologies to a TSV file

        Args:
            technologies: Collection to write
            output_file: Path to output TSV file
        """
        if len(technologies) == 0:
            logger.warning("No technologies to save")
            return

        Path(output_file).parent.mkdir(parents=True, exist_ok=True)
        to_frame(technologies).to_csv(output_file, sep='\t', index=False)
        logger.info(f"Wrote list view to {output_file}")


def write_tsv(technologies: Collection, output_file: PathLike) -> None:
    """Convenience function for TSVWriter.write"""
    TSVWriter().write(technologies, output_file)
