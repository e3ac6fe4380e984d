"""
Exceptions raised by techradar

Both concrete errors subclass ValueError so callers that only care about
bad input can keep catching that.
"""


class TechRadarError(Exception):
    """Base class for techradar errors"""


class InvalidCategory(TechRadarError, ValueError):
    """Quadrant or ring outside the fixed enumerations"""

    def __init__(self, kind: str, value: object) -> None:
        self.kind = kind
        self.value = value
        super().__init__(f"Invalid {kind}: {value!r}")


class MalformedInput(TechRadarError, ValueError):
    """Imported text is not a valid JSON document"""
