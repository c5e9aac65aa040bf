"""Tests for DriveClient and GalleryCatalogue (no real Drive calls)."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from drrm.gallery import DriveClient, DriveError, DriveImage, GalleryCatalogue

FILES = {
    "files": [
        {"id": "abc", "name": "plaza.jpg", "mimeType": "image/jpeg",
         "thumbnailLink": "https://lh3.example/thumb-abc"},
        {"id": "def", "name": "river.png", "mimeType": "image/png"},
    ]
}


def _mock_client(payload=None, error=None):
    resp = MagicMock()
    resp.raise_for_status = MagicMock()
    resp.json = MagicMock(return_value=payload)
    client = AsyncMock()
    client.get = AsyncMock(side_effect=error) if error else AsyncMock(return_value=resp)
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=False)
    return client


def _list(client, api_key="key-123", folder="folder-1"):
    with patch("drrm.gallery.drive.httpx.AsyncClient", return_value=client):
        return asyncio.run(DriveClient(api_key).list_images(folder))


class TestDriveImage:
    def test_urls_from_file(self):
        img = DriveImage.from_file({"id": "def", "name": "river.png"})
        assert img.url == "https://drive.google.com/uc?export=view&id=def"
        assert img.thumbnail_url == "https://drive.google.com/thumbnail?id=def&sz=w500"
        assert img.view_url == "https://drive.google.com/file/d/def/view"

    def test_to_dict_uses_camel_case(self):
        d = DriveImage.from_file(FILES["files"][0]).to_dict()
        assert set(d) == {"id", "name", "url", "thumbnailUrl", "viewUrl"}
        assert d["thumbnailUrl"] == "https://lh3.example/thumb-abc"


class TestDriveClient:
    def test_list_images(self):
        client = _mock_client(FILES)
        images = _list(client)
        assert [i.id for i in images] == ["abc", "def"]
        params = client.get.call_args.kwargs["params"]
        assert params["q"] == "'folder-1' in parents and mimeType contains 'image/' and trashed=false"
        assert params["orderBy"] == "createdTime desc"
        assert params["pageSize"] == 100
        assert params["key"] == "key-123"

    def test_empty_folder(self):
        assert _list(_mock_client({})) == []

    def test_missing_api_key(self):
        with pytest.raises(DriveError) as exc:
            _list(_mock_client(FILES), api_key="")
        assert exc.value.status_code == 500
        assert "not configured" in str(exc.value)

    def test_upstream_status_propagates(self):
        req = httpx.Request("GET", "https://www.googleapis.com/drive/v3/files")
        resp = httpx.Response(403, request=req)
        error = httpx.HTTPStatusError("403", request=req, response=resp)
        with pytest.raises(DriveError) as exc:
            _list(_mock_client(error=error))
        assert exc.value.status_code == 403

    def test_network_error_is_bad_gateway(self):
        with pytest.raises(DriveError) as exc:
            _list(_mock_client(error=httpx.ConnectError("down")))
        assert exc.value.status_code == 502

    def test_non_json_response(self):
        client = _mock_client(FILES)
        client.get.return_value.json = MagicMock(side_effect=ValueError("Expecting value"))
        with pytest.raises(DriveError) as exc:
            _list(client)
        assert exc.value.status_code == 500
        assert str(exc.value).startswith("Internal server error")


class TestGalleryCatalogue:
    def test_only_configured_views(self):
        cat = GalleryCatalogue({"panorama": "p1", "purok": "", "barangay": "b1"})
        assert [f.view for f in cat.list()] == ["panorama", "barangay"]
        assert cat.get("purok") is None

    def test_kind_and_title(self):
        cat = GalleryCatalogue({"panorama": "p1", "barangay": "b1", "roads": "r1"},
                               titles={"barangay": "Barangay Maps"})
        assert cat.get("panorama").kind == "panorama"
        assert cat.get("barangay").kind == "image"
        assert cat.get("barangay").title == "Barangay Maps"
        assert cat.get("roads").title == "Roads"
        assert cat.get("panorama").to_dict()["folderId"] == "p1"
