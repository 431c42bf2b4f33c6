from geojson_kit.codec import decode_geometry
from geojson_kit.core.errors import ShapeError
from geojson_kit.schemas import Geometry
from geoalchemy2.elements import WKBElement, WKTElement
from geoalchemy2.shape import to_shape
from shapely.geometry import mapping, shape
import shapely


def to_shapely(geometry: Geometry) -> shapely.Geometry:
    return shape(geometry.encode())


def from_shapely(geom: shapely.Geometry) -> Geometry:
    if geom.is_empty:
        raise ShapeError(f'empty {geom.geom_type} has no GeoJSON coordinates')
    return decode_geometry(mapping(geom))


def from_spatial_element(element: WKBElement | WKTElement) -> Geometry:
    """Geometry of a value read from a PostGIS / GeoPackage geometry column."""
    return from_shapely(to_shape(element))
