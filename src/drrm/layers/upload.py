"""Upload pipeline — turns a batch of overlay files into registered layers.

Files are handled one at a time in batch order. A bad file is reported
and skipped; it never aborts the rest of the batch.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable

from loguru import logger

from drrm.layers.layer import Layer, LayerKind, LayerParseError, new_layer_id
from drrm.layers.parsers.csv_import import parse_csv
from drrm.layers.parsers.kml import parse_kml
from drrm.layers.registry import LayerRegistry


class FitPolicy(str, Enum):
    """Which layers of a batch move the viewport once added."""

    FIRST = "first"
    EACH = "each"
    NONE = "none"


@dataclass
class UploadReport:
    layers: list[Layer] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    fitted_layer_id: str | None = None

    def to_dict(self) -> dict:
        return {
            "layers": [layer.to_dict() for layer in self.layers],
            "errors": list(self.errors),
            "fitted_layer_id": self.fitted_layer_id,
        }


class UploadPipeline:
    """Read, decode and register a batch of uploaded overlay files."""

    def __init__(
        self,
        registry: LayerRegistry,
        allowed_extensions: Iterable[str] = (".kml",),
        fit_policy: FitPolicy = FitPolicy.FIRST,
    ) -> None:
        self.registry = registry
        self.allowed_extensions = tuple(ext.lower() for ext in allowed_extensions)
        self.fit_policy = FitPolicy(fit_policy)

    def accepts(self, filename: str) -> bool:
        return filename.lower().endswith(self.allowed_extensions)

    async def process(self, files: Iterable[Any]) -> UploadReport:
        """Process files in order.

        Each item is either a ``(filename, content)`` pair, where content is
        ``bytes`` or ``str``, or an object with a ``filename`` attribute and
        an (async) ``read()`` method such as FastAPI's UploadFile.
        """
        report = UploadReport()
        for item in files:
            filename, source = _unpack(item)

            if not self.accepts(filename):
                self._reject(report, f"{filename} is not a KML file")
                continue

            try:
                text = await _read_text(source)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Read failed for {filename}: {e}")
                self._reject(report, f"Failed to read {filename}")
                continue

            try:
                layer = decode_layer(filename, text)
            except LayerParseError as e:
                logger.warning(f"Decode failed for {filename}: {e}")
                self._reject(report, f"Failed to load {filename}")
                continue

            self.registry.add(layer)
            report.layers.append(layer)
            self._maybe_fit(report, layer)

        return report

    def _reject(self, report: UploadReport, message: str) -> None:
        logger.warning(f"Upload rejected: {message}")
        report.errors.append(message)

    def _maybe_fit(self, report: UploadReport, layer: Layer) -> None:
        if self.fit_policy is FitPolicy.NONE:
            return
        if self.fit_policy is FitPolicy.FIRST and report.fitted_layer_id is not None:
            return
        if self.registry.map_host.controller.fit_bounds(layer.bounds()):
            report.fitted_layer_id = layer.layer_id


def decode_layer(filename: str, text: str) -> Layer:
    """Decode one file's text into an (unregistered) Layer.

    Raises:
        LayerParseError: If the extension is unknown or the content
            cannot be decoded.
    """
    kind = LayerKind.from_filename(filename)
    if kind is LayerKind.KML:
        _, features = parse_kml(text)
    elif kind is LayerKind.CSV:
        features = parse_csv(text)
    else:
        raise LayerParseError(f"No decoder for {filename}")

    return Layer(
        layer_id=new_layer_id(),
        name=filename,
        features=features,
        kind=kind,
        source_file=filename,
    )


def _unpack(item: Any) -> tuple[str, Any]:
    if isinstance(item, tuple):
        filename, source = item
        return filename or "", source
    return getattr(item, "filename", None) or "", item


async def _read_text(source: Any) -> str:
    if isinstance(source, str):
        return source
    if isinstance(source, (bytes, bytearray)):
        return bytes(source).decode("utf-8")
    data = source.read()
    if inspect.isawaitable(data):
        data = await data
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("utf-8")
    return data
