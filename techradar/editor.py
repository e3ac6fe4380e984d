"""
Collection Editor

Pure transformations over a collection of technology records. Every
function returns a new list and leaves its input untouched; the caller
decides which collection is the current one.
"""

from __future__ import annotations
from typing import Any, Iterable, Optional
import json
import logging

from .exceptions import MalformedInput
from .types import Collection, NewTechnology, TechnologyRecord
from .utils import quadrant_index, ring_index, validate_movement

logger = logging.getLogger(__name__)

EXPORT_FILENAME = 'technologies.json'
"""File name offered for exported collections"""


def next_id(collection: Iterable[TechnologyRecord]) -> int:
    """
    Id for the next record added to a collection

    One more than the largest current id (or 1 for an empty collection).
    Ids freed by removing the largest record are handed out again.
    """
    return max((t['id'] for t in collection), default=0) + 1


def require_text(value: Optional[str], field: str) -> str:
    """Stripped value of a required form field; ValueError if blank"""
    if not value or not value.strip():
        raise ValueError(f"Technology {field} is required")
    return value.strip()


def new_record(
    name: str,
    description: str,
    quadrant: str = 'Tools',
    ring: str = 'Assess',
    is_new: bool = False,
    moved: int = 0
) -> NewTechnology:
    """
    Build a record without id, ready for add()

    Name and description are required; the other defaults are those of an
    empty entry form. add() itself does not validate.

    Raises:
        ValueError: If name or description is blank, or moved is not -1, 0 or 1
        InvalidCategory: If quadrant or ring is unknown
    """
    name = require_text(name, 'name')
    description = require_text(description, 'description')
    quadrant_index(quadrant)
    ring_index(ring)
    return {
        'name': name,
        'quadrant': quadrant,  # type: ignore[typeddict-item]
        'ring': ring,  # type: ignore[typeddict-item]
        'description': description,
        'isNew': bool(is_new),
        'moved': validate_movement(moved),  # type: ignore[typeddict-item]
    }


def add(collection: Collection, technology: NewTechnology) -> Collection:
    """
    Append a technology with a freshly assigned id

    Args:
        collection: Current collection
        technology: Record fields without 'id' (an 'id' key, if present, is replaced)

    Returns:
        New collection with the record at the end
    """
    record: TechnologyRecord = {**technology, 'id': next_id(collection)}  # type: ignore[typeddict-item]
    logger.debug(f"Adding technology {record['name']!r} with id {record['id']}")
    return [*collection, record]


def update(collection: Collection, technology: TechnologyRecord) -> Collection:
    """
    Replace the record whose id matches ``technology['id']``

    Order and all other records are kept. An unknown id leaves the
    collection unchanged.
    """
    return [technology if t['id'] == technology['id'] else t for t in collection]


def remove(collection: Collection, technology_id: int) -> Collection:
    """Drop the record with the given id; unknown ids are a no-op"""
    return [t for t in collection if t['id'] != technology_id]


def find(collection: Iterable[TechnologyRecord], technology_id: int) -> Optional[TechnologyRecord]:
    """Record with the given id, or None"""
    for technology in collection:
        if technology['id'] == technology_id:
            return technology
    return None


def serialize(collection: Collection) -> str:
    """
    Export a collection as a JSON document

    The document is ``{"technologies": [...]}`` indented by two spaces,
    with records in collection order.
    """
    return json.dumps({'technologies': collection}, indent=2, ensure_ascii=False)


def deserialize(text: str) -> Collection:
    """
    Parse an exported JSON document

    A valid document without a 'technologies' key yields an empty
    collection.

    Args:
        text: Document text

    Returns:
        The 'technologies' array

    Raises:
        MalformedInput: If the text is not valid JSON, or 'technologies'
            is present but not an array
    """
    try:
        data: Any = json.loads(text)
    except (TypeError, ValueError) as e:
        raise MalformedInput('Invalid JSON format') from e

    if not isinstance(data, dict):
        logger.warning("Imported document is not a JSON object; treating as empty")
        return []

    technologies = data.get('technologies')
    if technologies is None:
        return []
    if not isinstance(technologies, list):
        raise MalformedInput(f"'technologies' must be an array, got {type(technologies).__name__}")
    return list(technologies)


RECORD_FIELDS = ('id', 'name', 'quadrant', 'ring', 'description', 'isNew', 'moved')


def validate_record(record: Any) -> None:
    """
    Check that an imported record can be drawn and edited

    Raises:
        MalformedInput: If a field is missing or has an unusable value
    """
    if not isinstance(record, dict):
        raise MalformedInput(f"Technology must be an object, got {type(record).__name__}")
    missing = [f for f in RECORD_FIELDS if f not in record]
    if missing:
        raise MalformedInput(f"Technology {record.get('name', '?')!r} is missing {', '.join(missing)}")
    if not isinstance(record['id'], int) or isinstance(record['id'], bool):
        raise MalformedInput(f"Technology id must be an integer, got {record['id']!r}")
    if not isinstance(record['name'], str) or not record['name'].strip():
        raise MalformedInput(f"Technology {record['id']} has no name")
    if not isinstance(record['description'], str):
        raise MalformedInput(f"Technology {record['id']} description must be text")
    if not isinstance(record['isNew'], bool):
        raise MalformedInput(f"Technology {record['id']} isNew must be true or false")
    try:
        quadrant_index(record['quadrant'])
        ring_index(record['ring'])
        if not isinstance(record['moved'], int) or isinstance(record['moved'], bool):
            raise ValueError(f"Invalid moved value: {record['moved']!r}")
        validate_movement(record['moved'])
    except ValueError as e:
        raise MalformedInput(f"Technology {record['id']}: {e}") from e


def validate_collection(technologies: Collection) -> Collection:
    """
    Check every record of an imported collection and that ids are unique

    Returns:
        The collection, unchanged

    Raises:
        MalformedInput: On the first unusable record or a duplicate id
    """
    seen = set()
    for record in technologies:
        validate_record(record)
        if record['id'] in seen:
            raise MalformedInput(f"Duplicate technology id {record['id']}")
        seen.add(record['id'])
    return technologies
