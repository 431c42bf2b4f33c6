"""Conversion between GeoJSON objects and JSON.

`decode*` functions take an already parsed JSON value (dicts, lists,
numbers), `loads*` functions take the JSON text itself. `encode` and
`dumps` go the other way.
"""
from geojson_kit.core.errors import BboxFieldError, ParseError, ShapeError
from geojson_kit.core.settings import get_settings
from geojson_kit.schemas import Feature, FeatureCollection, GeoJSONObject, Geometry
from geojson_kit.schemas.geometry import (
    GeometryCollection, LineString, MultiLineString, MultiPoint, MultiPolygon, Point, Polygon,
)
from pydantic import Field, TypeAdapter, ValidationError
from pydantic_core import from_json, to_json
from typing import Annotated, Any, NoReturn


GeoJSON = Annotated[
    Point | MultiPoint | LineString | MultiLineString | Polygon | MultiPolygon | GeometryCollection
    | Feature | FeatureCollection,
    Field(discriminator='type'),
]

_GEOJSON_ADAPTER = TypeAdapter(GeoJSON)
_GEOMETRY_ADAPTER = TypeAdapter(Geometry)


def _location(error: dict[str, Any]) -> str:
    return '.'.join(str(part) for part in error['loc']) or '<root>'


def _raise_decode_error(exc: ValidationError, what: str) -> NoReturn:
    errors = exc.errors()
    shape_errors = [error for error in errors if 'bbox' not in error['loc']]
    if not shape_errors:
        error = errors[0]
        raise BboxFieldError(f'{what} has an unusable bbox at {_location(error)}: {error["msg"]}', error['loc']) from exc
    error = shape_errors[0]
    raise ShapeError(f'invalid {what} at {_location(error)}: {error["msg"]}', error['loc']) from exc


def _validate(validate, tree: Any, what: str, drop_invalid_bbox: bool | None) -> Any:
    if drop_invalid_bbox is None:
        drop_invalid_bbox = get_settings().drop_invalid_bbox
    try:
        return validate(tree, context={'drop_invalid_bbox': drop_invalid_bbox})
    except ValidationError as exc:
        _raise_decode_error(exc, what)


def _parse(data: str | bytes | bytearray) -> Any:
    try:
        return from_json(data)
    except ValueError as exc:
        raise ParseError(f'invalid JSON: {exc}') from exc


# ----- Decode -----

def decode(tree: Any, *, drop_invalid_bbox: bool | None = None) -> GeoJSONObject:
    """Any of the nine GeoJSON objects, chosen by the `type` member."""
    return _validate(_GEOJSON_ADAPTER.validate_python, tree, 'GeoJSON object', drop_invalid_bbox)


def decode_geometry(tree: Any, *, drop_invalid_bbox: bool | None = None) -> Geometry:
    return _validate(_GEOMETRY_ADAPTER.validate_python, tree, 'geometry', drop_invalid_bbox)


def decode_feature(tree: Any, *, drop_invalid_bbox: bool | None = None) -> Feature:
    return _validate(Feature.model_validate, tree, 'feature', drop_invalid_bbox)


def decode_feature_collection(tree: Any, *, drop_invalid_bbox: bool | None = None) -> FeatureCollection:
    return _validate(FeatureCollection.model_validate, tree, 'feature collection', drop_invalid_bbox)


def loads(data: str | bytes | bytearray, *, drop_invalid_bbox: bool | None = None) -> GeoJSONObject:
    return decode(_parse(data), drop_invalid_bbox=drop_invalid_bbox)


def loads_geometry(data: str | bytes | bytearray, *, drop_invalid_bbox: bool | None = None) -> Geometry:
    return decode_geometry(_parse(data), drop_invalid_bbox=drop_invalid_bbox)


def loads_feature(data: str | bytes | bytearray, *, drop_invalid_bbox: bool | None = None) -> Feature:
    return decode_feature(_parse(data), drop_invalid_bbox=drop_invalid_bbox)


def loads_feature_collection(data: str | bytes | bytearray, *,
                             drop_invalid_bbox: bool | None = None) -> FeatureCollection:
    return decode_feature_collection(_parse(data), drop_invalid_bbox=drop_invalid_bbox)


# ----- Encode -----

def encode(entity: GeoJSONObject) -> dict[str, Any]:
    """JSON value of `entity` using the RFC 7946 member names.

    `bbox` and a feature's `id` only appear when set, a feature's
    `properties` is always there (null when unset) and a collection's
    `features` is always an array.
    """
    return entity.encode()


def dumps(entity: GeoJSONObject) -> bytes:
    return to_json(encode(entity))
