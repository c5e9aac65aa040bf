"""Decode CSV point tables (lat/lng columns) into map layer features.

Column headers are matched case-insensitively: 'lat' or 'latitude' and
'lng', 'lon' or 'longitude'. All other columns become feature properties.
Coordinates are stored as [lng, lat] (GeoJSON convention).
"""

from __future__ import annotations

import csv
import io
from importlib import resources

from drrm.layers.layer import (
    Layer,
    LayerFeature,
    LayerKind,
    LayerParseError,
    new_layer_id,
)

_LAT_HEADERS = ("lat", "latitude")
_LNG_HEADERS = ("lng", "lon", "longitude")

SAMPLE_DATASET = "evacuation_centers.csv"


def parse_csv(csv_string: str) -> list[LayerFeature]:
    """Parse CSV text into Point features.

    Rows whose coordinates are not numeric are skipped.

    Raises:
        LayerParseError: If the header lacks a latitude or longitude column.
    """
    reader = csv.DictReader(io.StringIO(csv_string))
    header_map = {h.lower().strip(): h for h in (reader.fieldnames or [])}
    lat_col = next((header_map[h] for h in _LAT_HEADERS if h in header_map), None)
    lng_col = next((header_map[h] for h in _LNG_HEADERS if h in header_map), None)
    if lat_col is None or lng_col is None:
        raise LayerParseError("CSV needs latitude and longitude columns")

    features: list[LayerFeature] = []
    for idx, row in enumerate(reader):
        try:
            lat = float(row[lat_col])
            lng = float(row[lng_col])
        except (TypeError, ValueError):
            continue

        properties = {
            key: value
            for key, value in row.items()
            if key not in (lat_col, lng_col) and key is not None
        }
        features.append(
            LayerFeature(
                feature_id=f"csv-{idx}",
                geometry_type="Point",
                coordinates=[lng, lat],
                properties=properties,
            )
        )
    return features


def load_sample_points() -> Layer:
    """Build a CSV layer from the point dataset bundled with the package."""
    text = (
        resources.files("drrm.layers.data")
        .joinpath(SAMPLE_DATASET)
        .read_text(encoding="utf-8")
    )
    return Layer(
        layer_id=new_layer_id(),
        name="Evacuation Centers",
        features=parse_csv(text),
        kind=LayerKind.CSV,
        source_file=SAMPLE_DATASET,
    )
