"""Export a Layer to a GeoJSON FeatureCollection dict (RFC 7946).

Coordinates are already stored as [lng, lat], so no reordering is needed.
"""

from __future__ import annotations

from drrm.layers.layer import Layer, LayerFeature


def export_geojson(layer: Layer) -> dict:
    """Export a Layer to a GeoJSON FeatureCollection dict."""
    return {
        "type": "FeatureCollection",
        "name": layer.name,
        "features": [_feature_to_geojson(f) for f in layer.features],
    }


def _feature_to_geojson(feature: LayerFeature) -> dict:
    properties = dict(feature.properties)
    if feature.style:
        properties["style"] = dict(feature.style)
    return {
        "type": "Feature",
        "id": feature.feature_id,
        "geometry": {
            "type": feature.geometry_type,
            "coordinates": feature.coordinates,
        },
        "properties": properties,
    }
