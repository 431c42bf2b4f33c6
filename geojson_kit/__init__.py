"""GeoJSON (RFC 7946) objects, their bounding boxes and their JSON form."""
from geojson_kit.bounding_box import Envelope
from geojson_kit.codec import (
    decode, decode_feature, decode_feature_collection, decode_geometry, dumps, encode, loads, loads_feature,
    loads_feature_collection, loads_geometry,
)
from geojson_kit.core.errors import BboxFieldError, GeoJSONError, ParseError, ShapeError, UnsupportedScalarType
from geojson_kit.core.types import GeoJSONGeometry
from geojson_kit.enums import GeoJSONType, GeometryType
from geojson_kit.scalar import geometry_from_scalar, geometry_to_scalar
from geojson_kit.schemas import (
    Feature, FeatureCollection, Geometry, GeometryCollection, LineString, MultiLineString, MultiPoint,
    MultiPolygon, Point, Polygon, new_feature, new_feature_collection, new_geometry_collection,
    new_geometry_collection_feature, new_line_string, new_line_string_feature, new_multi_line_string,
    new_multi_line_string_feature, new_multi_point, new_multi_point_feature, new_multi_polygon,
    new_multi_polygon_feature, new_point, new_point_feature, new_polygon, new_polygon_feature,
)

__all__ = [
    'BboxFieldError', 'Envelope', 'Feature', 'FeatureCollection', 'GeoJSONError', 'GeoJSONGeometry', 'GeoJSONType',
    'Geometry', 'GeometryCollection', 'GeometryType', 'LineString', 'MultiLineString', 'MultiPoint', 'MultiPolygon',
    'ParseError', 'Point', 'Polygon', 'ShapeError', 'UnsupportedScalarType',
    'decode', 'decode_feature', 'decode_feature_collection', 'decode_geometry', 'dumps', 'encode',
    'geometry_from_scalar', 'geometry_to_scalar', 'loads', 'loads_feature', 'loads_feature_collection',
    'loads_geometry', 'new_feature', 'new_feature_collection', 'new_geometry_collection',
    'new_geometry_collection_feature', 'new_line_string', 'new_line_string_feature', 'new_multi_line_string',
    'new_multi_line_string_feature', 'new_multi_point', 'new_multi_point_feature', 'new_multi_polygon',
    'new_multi_polygon_feature', 'new_point', 'new_point_feature', 'new_polygon', 'new_polygon_feature',
]
