"""
List filtering and grouping

Search and quadrant/ring selection for the list and radar views, plus
grouping of the list by quadrant.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional
import logging

from .types import ALL, QUADRANTS, RINGS, Collection, TechnologyRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterState:
    """
    Current list/radar filter

    Attributes:
        search: Case-insensitive substring matched against name and description
        quadrant: Quadrant label or 'All'
        ring: Ring label or 'All'
    """
    search: str = ''
    quadrant: str = ALL
    ring: str = ALL

    @property
    def is_active(self) -> bool:
        return bool(self.search) or self.quadrant != ALL or self.ring != ALL


def _selection(value: Optional[object], options: Iterable[str], kind: str) -> str:
    if value is None or value == '' or value == ALL:
        return ALL
    value = str(value)
    if value not in options:
        logger.warning(f"Unknown {kind} filter {value!r}; showing all")
        return ALL
    return value


def normalize_filters(raw: dict) -> FilterState:
    """
    Build a FilterState from untrusted input (CLI arguments, query params)

    Unknown quadrant or ring selections fall back to 'All'.
    """
    search = str(raw.get('search') or '').strip()
    return FilterState(
        search=search,
        quadrant=_selection(raw.get('quadrant'), QUADRANTS, 'quadrant'),
        ring=_selection(raw.get('ring'), RINGS, 'ring'),
    )


def matches(technology: TechnologyRecord, state: FilterState) -> bool:
    """Whether a record passes the filter"""
    term = state.search.lower()
    if term and term not in technology['name'].lower() \
            and term not in technology['description'].lower():
        return False
    if state.quadrant != ALL and technology['quadrant'] != state.quadrant:
        return False
    if state.ring != ALL and technology['ring'] != state.ring:
        return False
    return True


def filter_technologies(
    collection: Collection,
    search: str = '',
    quadrant: str = ALL,
    ring: str = ALL
) -> Collection:
    """
    Records matching a search term and quadrant/ring selection

    Example:
        >>> filter_technologies(techs, search='react', ring='Adopt')
    """
    state = FilterState(search=search, quadrant=quadrant, ring=ring)
    return apply_filters(collection, state)


def apply_filters(collection: Collection, state: FilterState) -> Collection:
    return [t for t in collection if matches(t, state)]


def group_by_quadrant(collection: Collection) -> Dict[str, List[TechnologyRecord]]:
    """
    Group records by quadrant

    Groups appear in order of the first record of each quadrant; records
    keep their collection order inside a group.
    """
    groups: Dict[str, List[TechnologyRecord]] = {}
    for technology in collection:
        groups.setdefault(technology['quadrant'], []).append(technology)
    return groups


def move_symbol(moved: int) -> str:
    """List view marker for a trend value"""
    if moved > 0:
        return '↑'
    if moved < 0:
        return '↓'
    return '-'
