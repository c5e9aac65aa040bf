"""GeoJSON export of map layers."""
