from geojson_kit import bounding_box
from geojson_kit.bounding_box import Envelope
from pydantic import (
    BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer, SerializerFunctionWrapHandler, ValidationInfo,
    field_validator, model_serializer,
)
from typing import Annotated, Any, ClassVar
import logging


logger = logging.getLogger(__name__)

# Integral floats above this are written as floats, not as exact integers
_MAX_EXACT_INTEGER = 2 ** 53


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _require_number(value: Any) -> Any:
    if not _is_number(value):
        raise ValueError(f'coordinate must be a number, got {type(value).__name__}')
    return value


def _compact_number(value: float):
    # 1.0 -> 1, as a JSON number needs no fractional part
    if isinstance(value, float) and value.is_integer() and abs(value) < _MAX_EXACT_INTEGER:
        return int(value)
    return value


def compact_numbers(value: Any) -> Any:
    """`_compact_number` applied through nested JSON arrays and objects."""
    if isinstance(value, dict):
        return {key: compact_numbers(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [compact_numbers(item) for item in value]
    return _compact_number(value)


Number = Annotated[float, BeforeValidator(_require_number), PlainSerializer(_compact_number, when_used='json')]

# ----- Coordinate shapes -----
Position = Annotated[list[Number], Field(min_length=2)]
LineCoordinates = list[Position]
PolygonCoordinates = list[list[Position]]
MultiPolygonCoordinates = list[list[list[Position]]]

BBox = list[Number]


class GeoJSONObject(BaseModel):
    """Behaviour shared by geometries, features and feature collections.

    Subclasses declare their own `type` literal and `bbox` member; members
    listed in `omitted_when_none` are left out of the JSON when unset.
    """

    # Nested objects passed in are copied, never shared with the caller
    model_config = ConfigDict(revalidate_instances='always')

    omitted_when_none: ClassVar[tuple[str, ...]] = ('bbox',)

    @field_validator('bbox', mode='before', check_fields=False)
    @classmethod
    def check_bbox(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return None
        if isinstance(value, (list, tuple)) and all(_is_number(v) for v in value):
            return value
        if info.context and info.context.get('drop_invalid_bbox'):
            logger.debug('Dropping unusable bbox of %s: %r', cls.__name__, value)
            return None
        raise ValueError(f'bounding box not usable, got {type(value).__name__}')

    @model_serializer(mode='wrap')
    def omit_absent_members(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for name in self.omitted_when_none:
            if data.get(name) is None:
                data.pop(name, None)
        return data

    def compute_bbox(self, force: bool = False) -> Envelope | None:
        """(min, max) of all positions, or None for an empty or mixed-dimension object.

        A well-formed stored bbox is returned without scanning the coordinates
        unless `force` is set.
        """
        return bounding_box.compute(self, force)

    def attach_bbox(self, force: bool = False) -> list[float] | None:
        envelope = self.compute_bbox(force)
        if envelope is not None:
            self.bbox = envelope.to_bbox()
        return self.bbox

    def lonlat_bbox(self) -> list[float]:
        return bounding_box.lonlat(self)

    def encode(self) -> dict[str, Any]:
        return self.model_dump(mode='json')
