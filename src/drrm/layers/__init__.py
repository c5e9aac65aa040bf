"""Interactive map overlays — layer registry, map host, viewport, uploads.

Supports KML 2.2 and CSV point tables. Parsers use only the Python
stdlib (xml.etree.ElementTree, csv); rendering goes through folium.
"""

from drrm.layers.layer import PALETTE, Bounds, Layer, LayerFeature, LayerKind, LayerParseError
from drrm.layers.map_host import MapHost
from drrm.layers.registry import LayerRegistry
from drrm.layers.upload import FitPolicy, UploadPipeline, UploadReport
from drrm.layers.viewport import Viewport, ViewportController

__all__ = [
    "PALETTE",
    "Bounds",
    "FitPolicy",
    "Layer",
    "LayerFeature",
    "LayerKind",
    "LayerParseError",
    "LayerRegistry",
    "MapHost",
    "UploadPipeline",
    "UploadReport",
    "Viewport",
    "ViewportController",
]
