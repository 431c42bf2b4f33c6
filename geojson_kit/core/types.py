from geojson_kit.codec import decode_geometry
from geojson_kit.scalar import geometry_from_scalar, geometry_to_scalar
from sqlalchemy import Text
from sqlalchemy.types import TypeDecorator


class GeoJSONGeometry(TypeDecorator):
    """Text column holding one GeoJSON geometry.

    Accepts geometry models or plain GeoJSON dicts on write, and always gives
    back geometry models on read.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, dict):
            value = decode_geometry(value)
        return geometry_to_scalar(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return geometry_from_scalar(value)
