"""Shared fixtures: a fresh map host / registry and sample overlay files."""

from __future__ import annotations

import pytest

from drrm.layers import Layer, LayerFeature, LayerRegistry, MapHost

BARANGAY_KML = """\
<?xml version="1.0" encoding="UTF-8"?>
<kml xmlns="http://www.opengis.net/kml/2.2">
  <Document>
    <name>Barangay Hazard Zones</name>
    <Placemark>
      <name>Evacuation Point</name>
      <description>Covered court</description>
      <Point>
        <coordinates>123.7437,13.1391,0</coordinates>
      </Point>
    </Placemark>
    <Placemark>
      <name>Flood Zone</name>
      <Polygon>
        <outerBoundaryIs>
          <LinearRing>
            <coordinates>
              123.74,13.13,0 123.76,13.13,0 123.76,13.15,0 123.74,13.15,0 123.74,13.13,0
            </coordinates>
          </LinearRing>
        </outerBoundaryIs>
      </Polygon>
    </Placemark>
  </Document>
</kml>
"""

ROAD_KML = """\
<?xml version="1.0" encoding="UTF-8"?>
<kml xmlns="http://www.opengis.net/kml/2.2">
  <Document>
    <name>Evacuation Route</name>
    <Placemark>
      <name>Route 1</name>
      <LineString>
        <coordinates>123.70,13.10,0 123.72,13.11,0 123.73,13.12,0</coordinates>
      </LineString>
    </Placemark>
  </Document>
</kml>
"""

EMPTY_KML = (
    '<?xml version="1.0"?><kml xmlns="http://www.opengis.net/kml/2.2">'
    "<Document><name>Empty</name></Document></kml>"
)


@pytest.fixture
def map_host():
    return MapHost(center=(13.1391, 123.7437), zoom=13)


@pytest.fixture
def registry(map_host):
    return LayerRegistry(map_host)


def make_layer(layer_id: str, lat: float = 13.14, lng: float = 123.74, **kwargs) -> Layer:
    """A one-point layer for registry tests."""
    return Layer(
        layer_id=layer_id,
        name=kwargs.pop("name", f"{layer_id}.kml"),
        features=[LayerFeature("f1", "Point", [lng, lat], {"name": "A"})],
        **kwargs,
    )


@pytest.fixture
def layer_factory():
    return make_layer


@pytest.fixture
def barangay_kml():
    return BARANGAY_KML


@pytest.fixture
def road_kml():
    return ROAD_KML


@pytest.fixture
def empty_kml():
    return EMPTY_KML
