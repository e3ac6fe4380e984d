"""
Type definitions for techradar

Common types used throughout the package for type checking and documentation.
"""

from __future__ import annotations
from typing import TypedDict, Literal, List, Tuple, Union
from pathlib import Path

# Type aliases
PathLike = Union[str, Path]
"""File path as string or Path object"""

Quadrant = Literal['Techniques', 'Platforms', 'Tools', 'Languages & Frameworks']
"""Top-level category of a technology"""

Ring = Literal['Adopt', 'Trial', 'Assess', 'Hold']
"""Adoption stage, most to least mature"""

Movement = Literal[-1, 0, 1]
"""Trend direction: -1 toward Hold, 0 unchanged, 1 toward Adopt"""

# Ordered enumerations. Index drives both chart geometry and display order.
QUADRANTS: Tuple[Quadrant, ...] = ('Techniques', 'Platforms', 'Tools', 'Languages & Frameworks')
RINGS: Tuple[Ring, ...] = ('Adopt', 'Trial', 'Assess', 'Hold')
MOVEMENTS: Tuple[int, ...] = (-1, 0, 1)

ALL = 'All'
"""Filter selection matching every quadrant or ring"""


# Structured data types

class NewTechnology(TypedDict):
    """Technology record before an id has been assigned"""
    name: str
    quadrant: Quadrant
    ring: Ring
    description: str
    isNew: bool
    moved: Movement


class TechnologyRecord(NewTechnology):
    """
    Single technology on the radar

    Field names match the persisted JSON document, hence the camelCase
    ``isNew``.
    """
    id: int


Collection = List[TechnologyRecord]
"""Ordered sequence of technology records"""


class ExportDocument(TypedDict):
    """Top-level shape of an exported collection"""
    technologies: Collection
