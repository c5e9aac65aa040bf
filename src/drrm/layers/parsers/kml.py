"""Decode KML 2.2 documents into map layer features.

Handles Placemark/Point, Placemark/LineString, Placemark/Polygon (including
MultiGeometry children). KML coordinates are "lng,lat,alt" tuples separated
by whitespace; they are stored as [lng, lat, alt] (GeoJSON order).
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from drrm.layers.layer import LayerFeature, LayerParseError


def parse_kml(kml_string: str) -> tuple[str, list[LayerFeature]]:
    """Parse raw KML into (document name, features).

    Raises:
        LayerParseError: If the text is not well-formed XML or has no
            <kml> root.
    """
    try:
        root = ET.fromstring(kml_string)
    except ET.ParseError as e:
        raise LayerParseError(f"Malformed KML: {e}") from e

    ns = _namespace(root)
    if _local_name(root.tag) != "kml":
        raise LayerParseError(f"Unexpected root element <{_local_name(root.tag)}>")

    doc_name = ""
    doc = root.find(f"{ns}Document")
    if doc is not None:
        doc_name = _text(doc, "name", ns, recursive=False)

    features: list[LayerFeature] = []
    for idx, placemark in enumerate(root.iter(f"{ns}Placemark")):
        features.extend(_placemark_features(placemark, ns, idx))
    return doc_name, features


def _namespace(root: ET.Element) -> str:
    if root.tag.startswith("{"):
        return root.tag.split("}")[0] + "}"
    return ""


def _local_name(tag: str) -> str:
    return tag.split("}")[-1]


def _text(parent: ET.Element, tag: str, ns: str, recursive: bool = True) -> str:
    path = f".//{ns}{tag}" if recursive else f"{ns}{tag}"
    elem = parent.find(path)
    if elem is not None and elem.text:
        return elem.text.strip()
    return ""


def _placemark_features(pm: ET.Element, ns: str, idx: int) -> list[LayerFeature]:
    properties: dict = {}
    name = _text(pm, "name", ns, recursive=False)
    description = _text(pm, "description", ns, recursive=False)
    if name:
        properties["name"] = name
    if description:
        properties["description"] = description
    style = _parse_style(pm, ns) or None

    features = []
    for geom_idx, (geom_type, coords) in enumerate(_geometries(pm, ns)):
        feature_id = f"kml-{idx}" if geom_idx == 0 else f"kml-{idx}-{geom_idx}"
        features.append(
            LayerFeature(
                feature_id=feature_id,
                geometry_type=geom_type,
                coordinates=coords,
                properties=dict(properties),
                style=style,
            )
        )
    return features


def _geometries(pm: ET.Element, ns: str):
    """Yield (geometry_type, coordinates) for every geometry under a Placemark."""
    for point in pm.iter(f"{ns}Point"):
        coords = _coordinates(point, ns)
        if coords:
            yield "Point", coords[0]
    for line in pm.iter(f"{ns}LineString"):
        coords = _coordinates(line, ns)
        if len(coords) >= 2:
            yield "LineString", coords
    for polygon in pm.iter(f"{ns}Polygon"):
        rings = _polygon_rings(polygon, ns)
        if rings:
            yield "Polygon", rings


def _coordinates(geom: ET.Element, ns: str) -> list[list[float]]:
    text = _text(geom, "coordinates", ns)
    coords = []
    for token in text.split():
        parts = token.split(",")
        if len(parts) < 2:
            continue
        try:
            lng = float(parts[0])
            lat = float(parts[1])
            alt = float(parts[2]) if len(parts) >= 3 and parts[2] else 0.0
        except ValueError:
            continue
        coords.append([lng, lat, alt])
    return coords


def _polygon_rings(polygon: ET.Element, ns: str) -> list[list[list[float]]]:
    rings = []
    # outer ring first, then holes
    for boundary in ("outerBoundaryIs", "innerBoundaryIs"):
        for elem in polygon.findall(f"{ns}{boundary}"):
            ring = elem.find(f"{ns}LinearRing")
            if ring is None:
                continue
            coords = _coordinates(ring, ns)
            if coords:
                rings.append(coords)
    return rings


def _parse_style(pm: ET.Element, ns: str) -> dict:
    style_elem = pm.find(f"{ns}Style")
    if style_elem is None:
        return {}

    style: dict = {}
    line_style = style_elem.find(f"{ns}LineStyle")
    if line_style is not None:
        color = _text(line_style, "color", ns)
        if color:
            style["color"] = kml_color_to_hex(color)
        width = _text(line_style, "width", ns)
        if width:
            try:
                style["weight"] = float(width)
            except ValueError:
                pass
    poly_style = style_elem.find(f"{ns}PolyStyle")
    if poly_style is not None:
        color = _text(poly_style, "color", ns)
        if color:
            style["fillColor"] = kml_color_to_hex(color)
    return style


def kml_color_to_hex(kml_color: str) -> str:
    """Convert KML aabbggrr to CSS #rrggbb. Unrecognised input is returned as-is."""
    value = kml_color.strip().lstrip("#")
    if len(value) != 8:
        return kml_color
    bb, gg, rr = value[2:4], value[4:6], value[6:8]
    return f"#{rr}{gg}{bb}".lower()
