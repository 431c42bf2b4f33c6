from geojson_kit.schemas.base import BBox, GeoJSONObject, Position
from geojson_kit.schemas.feature import (
    Feature, FeatureCollection, new_feature, new_feature_collection, new_geometry_collection_feature,
    new_line_string_feature, new_multi_line_string_feature, new_multi_point_feature,
    new_multi_polygon_feature, new_point_feature, new_polygon_feature,
)
from geojson_kit.schemas.geometry import (
    Geometry, GeometryCollection, LineString, MultiLineString, MultiPoint, MultiPolygon, Point, Polygon,
    new_geometry_collection, new_line_string, new_multi_line_string, new_multi_point, new_multi_polygon,
    new_point, new_polygon,
)
