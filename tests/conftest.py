import pytest
from geojson_kit.core.settings import get_settings


RFC_FEATURE_COLLECTION = """
{ "type": "FeatureCollection",
  "features": [
    { "type": "Feature",
      "geometry": {"type": "Point", "coordinates": [102.0, 0.5]},
      "properties": {"prop0": "value0"}
    },
    { "type": "Feature",
      "geometry": {
        "type": "LineString",
        "coordinates": [[102.0, 0.0], [103.0, 1.0], [104.0, 0.0], [105.0, 1.0]]
      },
      "properties": {"prop0": "value0", "prop1": 0.0}
    },
    { "type": "Feature",
      "geometry": {
        "type": "Polygon",
        "coordinates": [
          [[100.5, 0.2], [101.5, 0.0], [101.0, 1.0], [100.1, 1.0], [100.5, 0.2]]
        ]
      },
      "properties": {"prop0": "value0", "prop1": {"this": "that"}}
    }
  ]
}
"""


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Every test starts from default settings, whatever the environment says."""
    monkeypatch.delenv('GEOJSON_DROP_INVALID_BBOX', raising=False)
    monkeypatch.delenv('GEOJSON_SCALAR_ENCODING', raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def rfc_collection_json():
    return RFC_FEATURE_COLLECTION
