"""
Radar session

Presentation-side state: the authoritative collection, the selection,
the active filter and the position of every dot drawn so far.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Tuple
import logging

from . import editor
from .exceptions import MalformedInput
from .filters import FilterState, apply_filters, group_by_quadrant
from .layout import LayoutEngine, Point
from .types import Collection, NewTechnology, TechnologyRecord

logger = logging.getLogger(__name__)

IMPORT_ERROR_MESSAGE = 'Invalid JSON file format'


class RadarSession:
    """
    Mutable view state around an immutable collection value

    Positions are computed on first request per id and reused for the rest
    of the session, so redraws after filtering or editing do not move dots.
    An edit that changes quadrant or ring drops the position so the dot is
    placed again in its new sector and band.
    """

    def __init__(
        self,
        technologies: Optional[Collection] = None,
        layout_engine: Optional[LayoutEngine] = None
    ) -> None:
        self.technologies: Collection = list(technologies or [])
        self.layout_engine = layout_engine or LayoutEngine()
        self.filters = FilterState()
        self.selected_id: Optional[int] = None
        self.import_error: str = ''
        self._positions: Dict[int, Point] = {}

    # ============================================================
    # LAYOUT
    # ============================================================

    def position_for(self, technology: TechnologyRecord) -> Point:
        """Cached position of a record, computed on first request"""
        position = self._positions.get(technology['id'])
        if position is None:
            position = self.layout_engine.position_for(technology)
            self._positions[technology['id']] = position
        return position

    def positions(self, technologies: Optional[Collection] = None) -> Dict[int, Point]:
        """Positions of the given records (default: visible ones) keyed by id"""
        if technologies is None:
            technologies = self.visible()
        return {t['id']: self.position_for(t) for t in technologies}

    @property
    def cached_ids(self) -> List[int]:
        return list(self._positions)

    # ============================================================
    # FILTERS & SELECTION
    # ============================================================

    def set_filters(self, state: FilterState) -> None:
        self.filters = state

    def visible(self) -> Collection:
        """Records passing the current filter, in collection order"""
        return apply_filters(self.technologies, self.filters)

    def grouped(self) -> Dict[str, List[TechnologyRecord]]:
        return group_by_quadrant(self.visible())

    def select(self, technology_id: Optional[int]) -> Optional[TechnologyRecord]:
        """Select a record by id; unknown ids clear the selection"""
        technology = editor.find(self.technologies, technology_id) if technology_id is not None else None
        self.selected_id = technology['id'] if technology else None
        return technology

    def clear_selection(self) -> None:
        self.selected_id = None

    @property
    def selected(self) -> Optional[TechnologyRecord]:
        if self.selected_id is None:
            return None
        return editor.find(self.technologies, self.selected_id)

    # ============================================================
    # EDITING
    # ============================================================

    def add(self, technology: NewTechnology) -> TechnologyRecord:
        """Add a record and return it with its assigned id"""
        self.technologies = editor.add(self.technologies, technology)
        return self.technologies[-1]

    def update(self, technology: TechnologyRecord) -> bool:
        """
        Replace a record by id

        Returns:
            False if no record has that id (the collection is unchanged)
        """
        previous = editor.find(self.technologies, technology['id'])
        if previous is None:
            return False
        self.technologies = editor.update(self.technologies, technology)
        if previous['quadrant'] != technology['quadrant'] or previous['ring'] != technology['ring']:
            # Old position lies in the wrong sector or band
            self._positions.pop(technology['id'], None)
        return True

    def remove(self, technology_id: int) -> bool:
        """Remove a record by id; False if it did not exist"""
        before = len(self.technologies)
        self.technologies = editor.remove(self.technologies, technology_id)
        # The id may be handed out again by next_id
        self._positions.pop(technology_id, None)
        if self.selected_id == technology_id:
            self.selected_id = None
        return len(self.technologies) < before

    # ============================================================
    # IMPORT / EXPORT
    # ============================================================

    def import_text(self, text: str) -> Tuple[bool, str]:
        """
        Replace the collection with an imported document

        Args:
            text: Document text

        Returns:
            (success, message); on failure the collection is left unmodified
            and the message is meant for the user
        """
        try:
            technologies = editor.validate_collection(editor.deserialize(text))
        except MalformedInput as e:
            message = f"{IMPORT_ERROR_MESSAGE}: {e}"
            logger.error(f"Import failed: {e}")
            self.import_error = message
            return False, message

        self.technologies = technologies
        self._positions.clear()
        self.selected_id = None
        self.import_error = ''
        logger.info(f"Imported {len(technologies)} technologies")
        return True, f"Imported {len(technologies)} technologies"

    def export_text(self) -> str:
        return editor.serialize(self.technologies)
