"""Overlay file decoders."""

from drrm.layers.parsers.csv_import import load_sample_points, parse_csv
from drrm.layers.parsers.kml import parse_kml

__all__ = ["load_sample_points", "parse_csv", "parse_kml"]
