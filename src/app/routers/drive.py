"""Image galleries backed by Google Drive.

Endpoints:
    GET /api/drive/images?folderId=   Images in one Drive folder
    GET /api/gallery                  Configured gallery views
    GET /api/gallery/{view}           One view's folder and its images
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from app.dashboard import Dashboard, get_dashboard
from drrm.gallery import DriveError

router = APIRouter(prefix="/api", tags=["gallery"])

_CACHE_HEADERS = {"Cache-Control": "max-age=3600"}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get("/drive/images")
async def list_drive_images(
    folder_id: Optional[str] = Query(None, alias="folderId"),
    dash: Dashboard = Depends(get_dashboard),
):
    """List the images in a shared Drive folder, newest first."""
    if not folder_id:
        return _error(400, "folderId parameter is required")

    try:
        images = await dash.drive.list_images(folder_id)
    except DriveError as e:
        return _error(e.status_code, str(e))

    return JSONResponse(
        content={
            "success": True,
            "images": [img.to_dict() for img in images],
            "count": len(images),
        },
        headers=_CACHE_HEADERS,
    )


@router.get("/gallery")
async def list_galleries(dash: Dashboard = Depends(get_dashboard)):
    return [folder.to_dict() for folder in dash.galleries.list()]


@router.get("/gallery/{view}")
async def get_gallery(view: str, dash: Dashboard = Depends(get_dashboard)):
    """A sidebar view's folder plus its images."""
    folder = dash.galleries.get(view)
    if folder is None:
        return _error(404, f'Gallery view "{view}" not configured')

    try:
        images = await dash.drive.list_images(folder.folder_id)
    except DriveError as e:
        return _error(e.status_code, str(e))

    payload = folder.to_dict()
    payload["images"] = [img.to_dict() for img in images]
    payload["count"] = len(images)
    return JSONResponse(content=payload, headers=_CACHE_HEADERS)
