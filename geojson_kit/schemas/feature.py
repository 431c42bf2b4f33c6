from geojson_kit.schemas.base import BBox, GeoJSONObject, compact_numbers
from geojson_kit.schemas.geometry import (
    Geometry, new_geometry_collection, new_line_string, new_multi_line_string, new_multi_point,
    new_multi_polygon, new_point, new_polygon,
)
from pydantic import Field, StrictFloat, StrictInt, StrictStr, field_serializer
from typing import Any, ClassVar, Literal, Sequence


_MISSING = object()


def _matches(value: Any, expected_type: type) -> bool:
    # bool is an int subclass; keep the two apart in both directions
    if expected_type is bool:
        return isinstance(value, bool)
    if isinstance(value, bool):
        return False
    if expected_type is float:
        return isinstance(value, (int, float))
    return isinstance(value, expected_type)


# ----- Core GeoJSON Objects -----
class Feature(GeoJSONObject):
    omitted_when_none: ClassVar[tuple[str, ...]] = ('id', 'bbox')

    type: Literal['Feature']
    geometry: Geometry | None
    # Written as `null` when absent, never dropped
    properties: dict[str, Any] | None = Field(default=None)
    id: StrictStr | StrictInt | StrictFloat | None = None
    bbox: BBox | None = None

    @field_serializer('properties', 'id', when_used='json')
    def write_numbers_compact(self, value: Any) -> Any:
        return compact_numbers(value)

    def set_property(self, key: str, value: Any) -> None:
        if self.properties is None:
            self.properties = {}
        self.properties[key] = value

    def get_property(self, key: str, expected_type: type | None = None, default: Any = _MISSING) -> Any:
        """Value of property `key`, checked against `expected_type` when given.

        Raises KeyError for a missing key and TypeError for a value of another
        type, unless a `default` is given, in which case it is returned instead.
        An int is accepted where a float is expected; bools only match bool.
        """
        if self.properties is None or key not in self.properties:
            if default is not _MISSING:
                return default
            raise KeyError(key)
        value = self.properties[key]
        if expected_type is not None and not _matches(value, expected_type):
            if default is not _MISSING:
                return default
            raise TypeError(f'property {key!r} is a {type(value).__name__}, not a {expected_type.__name__}')
        return value

class FeatureCollection(GeoJSONObject):
    type: Literal['FeatureCollection']
    features: list[Feature]
    bbox: BBox | None = None

    def add_feature(self, feature: Feature) -> 'FeatureCollection':
        self.features.append(feature.model_copy(deep=True))
        return self


# ----- Constructors -----
def new_feature(geometry: Geometry | None, properties: dict[str, Any] | None = None,
                id: str | int | float | None = None) -> Feature:
    return Feature(type='Feature', geometry=geometry, properties=properties, id=id)

def new_feature_collection(*features: Feature) -> FeatureCollection:
    return FeatureCollection(type='FeatureCollection', features=list(features))

def new_point_feature(position: Sequence[float]) -> Feature:
    return new_feature(new_point(position))

def new_multi_point_feature(*positions: Sequence[float]) -> Feature:
    return new_feature(new_multi_point(*positions))

def new_line_string_feature(positions: Sequence[Sequence[float]]) -> Feature:
    return new_feature(new_line_string(positions))

def new_multi_line_string_feature(*lines: Sequence[Sequence[float]]) -> Feature:
    return new_feature(new_multi_line_string(*lines))

def new_polygon_feature(rings: Sequence[Sequence[Sequence[float]]]) -> Feature:
    return new_feature(new_polygon(rings))

def new_multi_polygon_feature(*polygons: Sequence[Sequence[Sequence[float]]]) -> Feature:
    return new_feature(new_multi_polygon(*polygons))

def new_geometry_collection_feature(*geometries: Geometry) -> Feature:
    return new_feature(new_geometry_collection(*geometries))
