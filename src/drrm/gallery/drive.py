"""Google Drive image listing for the photo galleries.

Lists the images in a shared Drive folder (newest first) and turns each
file into the view / thumbnail / download URLs the galleries display.
Only an API key is needed; folders must be link-shared.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx
from loguru import logger

DRIVE_FILES_URL = "https://www.googleapis.com/drive/v3/files"
_FIELDS = "files(id, name, mimeType, thumbnailLink, webViewLink, createdTime)"
_PAGE_SIZE = 100


class DriveError(Exception):
    """Drive listing failed; carries the HTTP status to report."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass
class DriveImage:
    id: str
    name: str
    url: str
    thumbnail_url: str
    view_url: str

    @classmethod
    def from_file(cls, file: dict) -> "DriveImage":
        file_id = file["id"]
        return cls(
            id=file_id,
            name=file.get("name", ""),
            url=f"https://drive.google.com/uc?export=view&id={file_id}",
            thumbnail_url=file.get("thumbnailLink")
            or f"https://drive.google.com/thumbnail?id={file_id}&sz=w500",
            view_url=f"https://drive.google.com/file/d/{file_id}/view",
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "url": self.url,
            "thumbnailUrl": self.thumbnail_url,
            "viewUrl": self.view_url,
        }


class DriveClient:
    def __init__(self, api_key: str, timeout: float = 15.0) -> None:
        self.api_key = api_key
        self.timeout = timeout

    async def list_images(self, folder_id: str) -> list[DriveImage]:
        """Images in a folder, newest first.

        Raises:
            DriveError: If no API key is configured or Drive answers with
                an error status.
        """
        if not self.api_key:
            raise DriveError("Google Drive API key not configured", status_code=500)

        params = {
            "q": f"'{folder_id}' in parents and mimeType contains 'image/' and trashed=false",
            "fields": _FIELDS,
            "key": self.api_key,
            "pageSize": _PAGE_SIZE,
            "orderBy": "createdTime desc",
        }
        async with httpx.AsyncClient() as client:
            try:
                resp = await client.get(DRIVE_FILES_URL, params=params, timeout=self.timeout)
                resp.raise_for_status()
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                logger.warning(f"Google Drive API error: {status} {e.response.reason_phrase}")
                raise DriveError("Failed to fetch images from Google Drive", status_code=status)
            except httpx.HTTPError as e:
                logger.warning(f"Google Drive request failed: {e}")
                raise DriveError("Failed to fetch images from Google Drive", status_code=502)

        try:
            files = resp.json().get("files") or []
            return [DriveImage.from_file(f) for f in files]
        except (ValueError, AttributeError, KeyError, TypeError) as e:
            logger.warning(f"Unreadable Google Drive response: {e}")
            raise DriveError(f"Internal server error: {e}", status_code=500)
