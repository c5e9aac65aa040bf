"""Which Drive folder backs each gallery view in the sidebar."""

from __future__ import annotations

from dataclasses import dataclass

PANORAMA_VIEW = "panorama"

DEFAULT_TITLES = {
    "panorama": "360° Panorama",
    "purok": "Purok Boundary Maps",
    "barangay": "Barangay Boundary Maps",
    "municipal": "Municipal Boundary Map",
    "hazard": "Hazard Maps",
    "evacuation": "Evacuation Centers",
}


@dataclass
class GalleryFolder:
    view: str
    title: str
    folder_id: str

    @property
    def kind(self) -> str:
        return "panorama" if self.view == PANORAMA_VIEW else "image"

    def to_dict(self) -> dict:
        return {
            "view": self.view,
            "title": self.title,
            "kind": self.kind,
            "folderId": self.folder_id,
        }


class GalleryCatalogue:
    """Views that have a Drive folder configured."""

    def __init__(self, folders: dict[str, str], titles: dict[str, str] | None = None) -> None:
        titles = {**DEFAULT_TITLES, **(titles or {})}
        self._folders = {
            view: GalleryFolder(view=view, title=titles.get(view, view.title()), folder_id=fid)
            for view, fid in folders.items()
            if fid
        }

    def get(self, view: str) -> GalleryFolder | None:
        return self._folders.get(view)

    def list(self) -> list[GalleryFolder]:
        return list(self._folders.values())
