from enum import StrEnum


class GeometryType(StrEnum):
    POINT = 'Point'
    MULTI_POINT = 'MultiPoint'
    LINE_STRING = 'LineString'
    MULTI_LINE_STRING = 'MultiLineString'
    POLYGON = 'Polygon'
    MULTI_POLYGON = 'MultiPolygon'
    GEOMETRY_COLLECTION = 'GeometryCollection'

    @property
    def coordinate_depth(self) -> int | None:
        """How many list levels wrap a single position in `coordinates`.

        A Point's coordinates are one position (depth 0), a LineString's a list
        of positions (depth 1), and so on. GeometryCollection has no coordinates.
        """
        return _COORDINATE_DEPTHS.get(self)


class GeoJSONType(StrEnum):
    FEATURE = 'Feature'
    FEATURE_COLLECTION = 'FeatureCollection'


_COORDINATE_DEPTHS = {
    GeometryType.POINT: 0,
    GeometryType.MULTI_POINT: 1,
    GeometryType.LINE_STRING: 1,
    GeometryType.MULTI_LINE_STRING: 2,
    GeometryType.POLYGON: 2,
    GeometryType.MULTI_POLYGON: 3,
}
