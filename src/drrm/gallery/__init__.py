"""Image galleries backed by shared Google Drive folders."""

from drrm.gallery.catalogue import GalleryCatalogue, GalleryFolder
from drrm.gallery.drive import DriveClient, DriveError, DriveImage

__all__ = ["DriveClient", "DriveError", "DriveImage", "GalleryCatalogue", "GalleryFolder"]
