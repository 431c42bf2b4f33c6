from typing import Any, Sequence


class GeoJSONError(Exception):
    """Base class of the errors raised while reading GeoJSON."""

    def __init__(self, message: str, location: Sequence[Any] = ()):
        super().__init__(message)
        self.location = tuple(location)


class ParseError(GeoJSONError, ValueError):
    """The input is not JSON at all."""


class ShapeError(GeoJSONError, ValueError):
    """The JSON does not have the layout of the expected GeoJSON object.

    Wrong coordinate nesting, a non-numeric coordinate, a missing member or
    an unknown `type` all end up here.
    """


class BboxFieldError(GeoJSONError, ValueError):
    """A `bbox` member is present but is not an array of numbers.

    Kept apart from ShapeError so that callers can decide to accept the
    object without its bbox (see `drop_invalid_bbox`).
    """


class UnsupportedScalarType(GeoJSONError, TypeError):
    """A stored column value cannot be read as GeoJSON text."""
