"""Layer and LayerFeature dataclasses for the interactive map overlays.

All coordinates are stored in GeoJSON convention: [lng, lat] or [lng, lat, alt].
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

# Display colors, cycled by registration order.
PALETTE: tuple[str, ...] = (
    "#3b82f6",
    "#ef4444",
    "#10b981",
    "#f59e0b",
    "#8b5cf6",
    "#ec4899",
    "#14b8a6",
    "#f97316",
)


class LayerKind(str, Enum):
    """Where a layer's geometry came from."""

    KML = "kml"
    CSV = "csv"

    @classmethod
    def from_filename(cls, filename: str) -> "LayerKind | None":
        lowered = filename.lower()
        for kind in cls:
            if lowered.endswith(f".{kind.value}"):
                return kind
        return None


class LayerParseError(ValueError):
    """Raised when an overlay file cannot be decoded into geometry."""


@dataclass
class Bounds:
    """Lat/lng bounding box (south-west to north-east corner)."""

    south: float
    west: float
    north: float
    east: float

    @classmethod
    def of_point(cls, lat: float, lng: float) -> "Bounds":
        return cls(south=lat, west=lng, north=lat, east=lng)

    def extend(self, other: "Bounds") -> "Bounds":
        return Bounds(
            south=min(self.south, other.south),
            west=min(self.west, other.west),
            north=max(self.north, other.north),
            east=max(self.east, other.east),
        )

    def is_valid(self) -> bool:
        return (
            -90.0 <= self.south <= self.north <= 90.0
            and -180.0 <= self.west <= self.east <= 180.0
        )

    @property
    def center(self) -> tuple[float, float]:
        return ((self.south + self.north) / 2, (self.west + self.east) / 2)

    def to_list(self) -> list[list[float]]:
        """Leaflet order: [[south, west], [north, east]]."""
        return [[self.south, self.west], [self.north, self.east]]


@dataclass
class LayerFeature:
    """A single feature (point, line, polygon) within a layer.

    Attributes:
        feature_id: Identifier unique within the layer.
        geometry_type: One of "Point", "LineString", "Polygon".
        coordinates: GeoJSON-style coordinate arrays.
            Point: [lng, lat] or [lng, lat, alt]
            LineString: [[lng, lat], [lng, lat], ...]
            Polygon: [[[lng, lat], [lng, lat], ...]]  (list of rings)
        properties: Arbitrary key-value metadata (name, description, CSV columns).
        style: Optional rendering hints read from the source file.
    """

    feature_id: str
    geometry_type: str
    coordinates: list
    properties: dict
    style: dict | None = None

    def positions(self) -> list[list[float]]:
        """Flatten the geometry to a list of [lng, lat, ...] positions."""
        if self.geometry_type == "Point":
            return [self.coordinates] if self.coordinates else []
        if self.geometry_type == "LineString":
            return list(self.coordinates)
        if self.geometry_type == "Polygon":
            return [pos for ring in self.coordinates for pos in ring]
        return []


@dataclass
class Layer:
    """One uploaded or generated overlay of map geometry.

    Attributes:
        layer_id: Opaque identifier, unique at generation time.
        name: Human-readable display name (the uploaded file name).
        features: The layer's geometry collection.
        kind: KML or CSV.
        source_file: File the geometry was decoded from.
        visible: Whether the render handle is attached to the map.
        color: One of PALETTE, assigned by the registry on add.
        created_at: ISO8601 creation timestamp.
    """

    layer_id: str
    name: str
    features: list[LayerFeature]
    kind: LayerKind = LayerKind.KML
    source_file: str = ""
    visible: bool = True
    color: str = PALETTE[0]
    created_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    def bounds(self) -> Bounds | None:
        """Bounding box over every position in the layer, or None if empty."""
        result: Bounds | None = None
        for feature in self.features:
            for pos in feature.positions():
                if len(pos) < 2:
                    continue
                point = Bounds.of_point(lat=pos[1], lng=pos[0])
                result = point if result is None else result.extend(point)
        return result

    def to_dict(self) -> dict:
        return {
            "id": self.layer_id,
            "name": self.name,
            "kind": self.kind.value,
            "source_file": self.source_file,
            "visible": self.visible,
            "color": self.color,
            "feature_count": len(self.features),
            "created_at": self.created_at,
        }


def new_layer_id() -> str:
    return f"layer-{uuid.uuid4().hex[:12]}"
