from geojson_kit.schemas.base import (
    BBox, GeoJSONObject, LineCoordinates, MultiPolygonCoordinates, PolygonCoordinates, Position,
)
from pydantic import Field
from typing import Annotated, Literal, Sequence


# ----- Geometry Types -----
class Point(GeoJSONObject):
    type: Literal['Point']
    coordinates: Position
    bbox: BBox | None = None

class MultiPoint(GeoJSONObject):
    type: Literal['MultiPoint']
    coordinates: LineCoordinates
    bbox: BBox | None = None

class LineString(GeoJSONObject):
    type: Literal['LineString']
    # At least 2 positions per RFC 7946 (not enforced here)
    coordinates: LineCoordinates
    bbox: BBox | None = None

class MultiLineString(GeoJSONObject):
    type: Literal['MultiLineString']
    coordinates: PolygonCoordinates
    bbox: BBox | None = None

class Polygon(GeoJSONObject):
    type: Literal['Polygon']
    # Each linear ring: at least 4 positions, first == last per RFC 7946 (not enforced here)
    coordinates: PolygonCoordinates
    bbox: BBox | None = None

class MultiPolygon(GeoJSONObject):
    type: Literal['MultiPolygon']
    coordinates: MultiPolygonCoordinates
    bbox: BBox | None = None

class GeometryCollection(GeoJSONObject):
    type: Literal['GeometryCollection']
    geometries: list['Geometry']
    bbox: BBox | None = None


Geometry = Annotated[
    Point | MultiPoint | LineString | MultiLineString | Polygon | MultiPolygon | GeometryCollection,
    Field(discriminator='type'),
]

GeometryCollection.model_rebuild()


# ----- Constructors -----
def new_point(position: Sequence[float]) -> Point:
    return Point(type='Point', coordinates=position)

def new_multi_point(*positions: Sequence[float]) -> MultiPoint:
    return MultiPoint(type='MultiPoint', coordinates=list(positions))

def new_line_string(positions: Sequence[Sequence[float]]) -> LineString:
    return LineString(type='LineString', coordinates=positions)

def new_multi_line_string(*lines: Sequence[Sequence[float]]) -> MultiLineString:
    return MultiLineString(type='MultiLineString', coordinates=list(lines))

def new_polygon(rings: Sequence[Sequence[Sequence[float]]]) -> Polygon:
    return Polygon(type='Polygon', coordinates=rings)

def new_multi_polygon(*polygons: Sequence[Sequence[Sequence[float]]]) -> MultiPolygon:
    return MultiPolygon(type='MultiPolygon', coordinates=list(polygons))

def new_geometry_collection(*geometries: Geometry) -> GeometryCollection:
    """Collection owning `geometries`, in the given order."""
    return GeometryCollection(type='GeometryCollection', geometries=list(geometries))
