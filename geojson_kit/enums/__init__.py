from geojson_kit.enums.geometry_type import GeoJSONType, GeometryType

__all__ = ['GeoJSONType', 'GeometryType']
