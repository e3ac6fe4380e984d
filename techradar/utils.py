"""
Utility functions

General-purpose helpers shared by the layout engine, the editor and the CLI.
"""

from __future__ import annotations
from typing import Tuple

from .exceptions import InvalidCategory
from .types import QUADRANTS, RINGS, MOVEMENTS


def quadrant_index(quadrant: str) -> int:
    """
    Position of a quadrant in the fixed quadrant order

    Args:
        quadrant: Quadrant label, e.g. 'Tools'

    Returns:
        Zero-based index into QUADRANTS

    Raises:
        InvalidCategory: If the label is not a known quadrant
    """
    try:
        return QUADRANTS.index(quadrant)  # type: ignore[arg-type]
    except ValueError:
        raise InvalidCategory('quadrant', quadrant) from None


def ring_index(ring: str) -> int:
    """
    Position of a ring in the fixed ring order (Adopt first)

    Raises:
        InvalidCategory: If the label is not a known ring
    """
    try:
        return RINGS.index(ring)  # type: ignore[arg-type]
    except ValueError:
        raise InvalidCategory('ring', ring) from None


def validate_movement(moved: object) -> int:
    """Coerce a trend value to -1, 0 or 1"""
    try:
        value = int(moved)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        raise ValueError(f"Invalid moved value: {moved!r}") from None
    if value not in MOVEMENTS:
        raise ValueError(f"Invalid moved value: {moved!r} (expected -1, 0 or 1)")
    return value


def split_label(label: str) -> Tuple[str, ...]:
    """
    Split long quadrant labels over two lines

    Labels of more than two words keep the first two words on the first line.
    """
    words = label.split(' ')
    if len(words) > 2:
        return (' '.join(words[:2]), ' '.join(words[2:]))
    return (label,)
