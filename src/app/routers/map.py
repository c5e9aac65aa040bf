"""Interactive map API — overlay layers and the map viewport.

Endpoints:
    GET    /api/map                          Rendered map (HTML)
    GET    /api/map/layers                   List layers in insertion order
    POST   /api/map/layers/upload            Upload a batch of overlay files
    POST   /api/map/layers/sample            Add the bundled evacuation-centre points
    POST   /api/map/layers/{id}/toggle       Show / hide a layer
    POST   /api/map/layers/{id}/zoom         Fit the viewport to a layer
    GET    /api/map/layers/{id}/geojson      Layer geometry as GeoJSON
    DELETE /api/map/layers/{id}              Remove a layer
    DELETE /api/map/layers                   Remove every layer
    GET    /api/map/viewport                 Current center and zoom
    POST   /api/map/viewport/zoom-in|zoom-out
    POST   /api/map/viewport/fly-to

Unknown layer ids are a lookup miss, not an error: the mutating
endpoints answer 200 with ``changed: false``.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from app.dashboard import Dashboard, get_dashboard
from drrm.layers.exporters.geojson import export_geojson
from drrm.layers.parsers import load_sample_points

router = APIRouter(prefix="/api/map", tags=["map"])


class FlyToRequest(BaseModel):
    """Move the map to a point."""
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    zoom: Optional[int] = None


def _layers_payload(dash: Dashboard) -> dict:
    return {
        "layers": [layer.to_dict() for layer in dash.registry.list()],
        "attached": dash.map_host.attached_ids(),
    }


@router.get("", response_class=HTMLResponse)
async def render_map(dash: Dashboard = Depends(get_dashboard)):
    """The map with every visible layer drawn on it."""
    return HTMLResponse(content=dash.map_host.render())


# ---------------------------------------------------------------------------
# Layers
# ---------------------------------------------------------------------------

@router.get("/layers")
async def list_layers(dash: Dashboard = Depends(get_dashboard)):
    return _layers_payload(dash)


@router.post("/layers/upload")
async def upload_layers(
    files: list[UploadFile] = File(...),
    dash: Dashboard = Depends(get_dashboard),
):
    """Upload one or more overlay files.

    Per-file failures are listed in ``errors``; the rest of the batch
    is still processed.
    """
    report = await dash.uploads.process(files)
    payload = report.to_dict()
    payload["viewport"] = dash.map_host.viewport.to_dict()
    return payload


@router.post("/layers/sample")
async def add_sample_layer(dash: Dashboard = Depends(get_dashboard)):
    layer = load_sample_points()
    dash.registry.add(layer)
    return layer.to_dict()


@router.post("/layers/{layer_id}/toggle")
async def toggle_layer(layer_id: str, dash: Dashboard = Depends(get_dashboard)):
    layer = dash.registry.toggle(layer_id)
    if layer is None:
        return {"changed": False, "layer": None}
    return {"changed": True, "layer": layer.to_dict()}


@router.post("/layers/{layer_id}/zoom")
async def zoom_to_layer(layer_id: str, dash: Dashboard = Depends(get_dashboard)):
    changed = dash.registry.zoom_to(layer_id)
    return {"changed": changed, "viewport": dash.map_host.viewport.to_dict()}


@router.get("/layers/{layer_id}/geojson")
async def layer_geojson(layer_id: str, dash: Dashboard = Depends(get_dashboard)):
    layer = dash.registry.get(layer_id)
    if layer is None:
        raise HTTPException(status_code=404, detail=f"Layer not found: {layer_id}")
    return export_geojson(layer)


@router.delete("/layers/{layer_id}")
async def remove_layer(layer_id: str, dash: Dashboard = Depends(get_dashboard)):
    return {"changed": dash.registry.remove(layer_id)}


@router.delete("/layers")
async def clear_layers(dash: Dashboard = Depends(get_dashboard)):
    return {"removed": dash.registry.clear()}


# ---------------------------------------------------------------------------
# Viewport
# ---------------------------------------------------------------------------

@router.get("/viewport")
async def get_viewport(dash: Dashboard = Depends(get_dashboard)):
    return dash.map_host.viewport.to_dict()


@router.post("/viewport/zoom-in")
async def zoom_in(dash: Dashboard = Depends(get_dashboard)):
    return dash.map_host.controller.zoom_in().to_dict()


@router.post("/viewport/zoom-out")
async def zoom_out(dash: Dashboard = Depends(get_dashboard)):
    return dash.map_host.controller.zoom_out().to_dict()


@router.post("/viewport/fly-to")
async def fly_to(body: FlyToRequest, dash: Dashboard = Depends(get_dashboard)):
    return dash.map_host.controller.fly_to(body.lat, body.lng, body.zoom).to_dict()
