"""Tests for MapHost — render handles, teardown and folium rendering."""

import folium
from drrm.layers import MapHost


class TestHandles:
    def test_attach_detach(self, map_host, layer_factory):
        layer = layer_factory("a")
        handle = map_host.attach(layer)
        assert handle.layer_id == "a"
        assert handle.geojson["type"] == "FeatureCollection"
        assert map_host.is_attached("a")
        assert map_host.detach("a") is True
        assert map_host.detach("a") is False

    def test_teardown_drops_everything(self, registry, map_host, layer_factory):
        registry.add(layer_factory("a"))
        registry.add(layer_factory("b"))
        map_host.teardown()
        assert map_host.attached_ids() == []

    def test_default_viewport(self):
        host = MapHost()
        assert host.viewport.center == (13.1391, 123.7437)
        assert host.viewport.zoom == 13


class TestHandleStyle:
    def test_styles_by_geometry(self, map_host, layer_factory):
        layer = layer_factory("a")
        layer.color = "#ef4444"
        handle = map_host.attach(layer)
        poly = handle.style_for({"geometry": {"type": "Polygon"}})
        line = handle.style_for({"geometry": {"type": "LineString"}})
        assert poly == {"color": "#ef4444", "weight": 2, "opacity": 0.7, "fillOpacity": 0.3}
        assert line == {"color": "#ef4444", "weight": 3, "opacity": 0.7}
        assert handle.style_for({}) == {"color": "#ef4444"}


class TestRender:
    def test_build_map_uses_viewport(self, map_host):
        map_host.controller.fly_to(14.0, 121.0, zoom=10)
        fmap = map_host.build_map()
        assert isinstance(fmap, folium.Map)
        assert fmap.location == [14.0, 121.0]

    def test_render_includes_visible_layers_only(self, registry, map_host, layer_factory):
        registry.add(layer_factory("a", name="flood_zones.kml"))
        registry.add(layer_factory("b", name="landslide.kml"))
        registry.toggle("b")
        html = map_host.render()
        assert "openstreetmap" in html
        assert "flood_zones.kml" in html
        assert "landslide.kml" not in html

    def test_render_empty_map(self, map_host):
        html = map_host.render()
        assert "<html" in html.lower()
