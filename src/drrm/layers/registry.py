"""LayerRegistry — the ordered list of overlays shown on the interactive map.

Manages the lifecycle of Layer objects (add, toggle, remove, clear) and
keeps the map host in step: a layer's render handle is attached to the
map exactly when the layer is visible.
"""

from __future__ import annotations

from loguru import logger

from drrm.layers.layer import PALETTE, Layer
from drrm.layers.map_host import MapHost


class LayerRegistry:
    """Ordered registry of user-added map layers."""

    def __init__(self, map_host: MapHost, palette: tuple[str, ...] = PALETTE) -> None:
        self.map_host = map_host
        self.palette = palette
        # dicts keep insertion order
        self._layers: dict[str, Layer] = {}

    def __len__(self) -> int:
        return len(self._layers)

    def next_color(self) -> str:
        """Color the next added layer will get."""
        return self.palette[len(self._layers) % len(self.palette)]

    def add(self, layer: Layer) -> str:
        """Append a layer, assign its color and attach it if visible.

        Returns:
            The layer_id of the added layer.
        """
        layer.color = self.next_color()
        self._layers[layer.layer_id] = layer
        if layer.visible:
            self.map_host.attach(layer)
        logger.info(
            f"Layer added: {layer.name} ({layer.layer_id}, "
            f"{len(layer.features)} features, {layer.color})"
        )
        return layer.layer_id

    def get(self, layer_id: str) -> Layer | None:
        return self._layers.get(layer_id)

    def list(self) -> list[Layer]:
        """All layers in insertion order."""
        return list(self._layers.values())

    def toggle(self, layer_id: str) -> Layer | None:
        """Flip a layer's visibility and attach/detach its handle.

        Returns:
            The toggled Layer, or None if the id is unknown.
        """
        layer = self._layers.get(layer_id)
        if layer is None:
            return None
        if layer.visible:
            self.map_host.detach(layer_id)
        else:
            self.map_host.attach(layer)
        layer.visible = not layer.visible
        return layer

    def remove(self, layer_id: str) -> bool:
        """Detach and delete a layer.

        Returns:
            True if the layer was removed, False if it didn't exist.
        """
        layer = self._layers.get(layer_id)
        if layer is None:
            return False
        self.map_host.detach(layer_id)
        del self._layers[layer_id]
        logger.info(f"Layer removed: {layer.name} ({layer_id})")
        return True

    def clear(self) -> int:
        """Remove every layer. Returns how many were removed."""
        count = 0
        for layer_id in list(self._layers):
            if self.remove(layer_id):
                count += 1
        return count

    def zoom_to(self, layer_id: str) -> bool:
        """Fit the viewport to one layer's geometry."""
        layer = self._layers.get(layer_id)
        if layer is None:
            return False
        return self.map_host.controller.fit_bounds(layer.bounds())
