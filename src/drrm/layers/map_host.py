"""MapHost — the single map instance that overlays are drawn on.

The host owns the viewport and one render handle per attached layer.
Rendering is delegated to folium (Leaflet); the host itself only keeps
track of what is attached.
"""

from __future__ import annotations

from dataclasses import dataclass

import folium
from loguru import logger

from drrm.layers.exporters.geojson import export_geojson
from drrm.layers.layer import Layer
from drrm.layers.viewport import ViewportController, Viewport

OSM_TILES = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
OSM_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
)


@dataclass
class RenderHandle:
    """What the map needs to draw one layer."""

    layer_id: str
    name: str
    color: str
    geojson: dict

    def style_for(self, feature: dict) -> dict:
        geom_type = (feature.get("geometry") or {}).get("type")
        if geom_type == "Polygon":
            return {"color": self.color, "weight": 2, "opacity": 0.7, "fillOpacity": 0.3}
        if geom_type == "LineString":
            return {"color": self.color, "weight": 3, "opacity": 0.7}
        return {"color": self.color}


class MapHost:
    """One map viewport plus the render handles currently attached to it."""

    def __init__(
        self,
        center: tuple[float, float] = (13.1391, 123.7437),
        zoom: int = 13,
        width: int = 1024,
        height: int = 768,
    ) -> None:
        self.viewport = Viewport(lat=center[0], lng=center[1], zoom=zoom)
        self.controller = ViewportController(self.viewport, width=width, height=height)
        self._handles: dict[str, RenderHandle] = {}

    # -- handle bookkeeping ------------------------------------------------

    def attach(self, layer: Layer) -> RenderHandle:
        handle = RenderHandle(
            layer_id=layer.layer_id,
            name=layer.name,
            color=layer.color,
            geojson=export_geojson(layer),
        )
        self._handles[layer.layer_id] = handle
        return handle

    def detach(self, layer_id: str) -> bool:
        return self._handles.pop(layer_id, None) is not None

    def is_attached(self, layer_id: str) -> bool:
        return layer_id in self._handles

    def attached_ids(self) -> list[str]:
        return list(self._handles)

    def teardown(self) -> None:
        """Drop every handle; called when the map goes away."""
        count = len(self._handles)
        self._handles.clear()
        logger.info(f"Map host torn down ({count} handles detached)")

    # -- rendering ---------------------------------------------------------

    def build_map(self) -> folium.Map:
        fmap = folium.Map(
            location=list(self.viewport.center),
            zoom_start=self.viewport.zoom,
            tiles=None,
            zoom_control=False,
            max_zoom=self.controller.max_zoom,
        )
        folium.TileLayer(
            tiles=OSM_TILES,
            attr=OSM_ATTRIBUTION,
            name="OpenStreetMap",
            max_zoom=self.controller.max_zoom,
        ).add_to(fmap)

        for handle in self._handles.values():
            group = folium.FeatureGroup(name=handle.name)
            folium.GeoJson(
                handle.geojson,
                name=handle.name,
                style_function=handle.style_for,
            ).add_to(group)
            group.add_to(fmap)

        if self._handles:
            folium.LayerControl(collapsed=False).add_to(fmap)
        return fmap

    def render(self) -> str:
        """Standalone HTML page for the current map state."""
        return self.build_map().get_root().render()
