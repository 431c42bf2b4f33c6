"""Geometries stored as a single column value.

Text and binary columns hold the GeoJSON text of the geometry; spatial
columns (PostGIS, GeoPackage) come back from GeoAlchemy2 as WKB/WKT
elements and are converted through shapely.
"""
from geojson_kit.codec import dumps, loads_geometry
from geojson_kit.core.errors import ParseError, UnsupportedScalarType
from geojson_kit.core.settings import get_settings
from geojson_kit.interop import from_spatial_element
from geojson_kit.schemas import Geometry
from geoalchemy2.elements import WKBElement, WKTElement
from typing import Any


def geometry_from_scalar(value: Any, *, drop_invalid_bbox: bool | None = None) -> Geometry:
    if isinstance(value, (WKBElement, WKTElement)):
        return from_spatial_element(value)
    if isinstance(value, memoryview):
        value = value.tobytes()
    if isinstance(value, (bytes, bytearray)):
        try:
            value = bytes(value).decode(get_settings().scalar_encoding)
        except UnicodeDecodeError as exc:
            raise ParseError(f'stored geometry is not valid text: {exc}') from exc
    if not isinstance(value, str):
        raise UnsupportedScalarType(f'cannot read a geometry from a {type(value).__name__} value')
    return loads_geometry(value, drop_invalid_bbox=drop_invalid_bbox)


def geometry_to_scalar(geometry: Geometry) -> str:
    return dumps(geometry).decode('utf-8')
