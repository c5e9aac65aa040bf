"""Page content (login / admin text blocks) with a bundled fallback.

Content is fetched from the proxy's ``/api/page`` endpoint. When the
proxy answers with an error status a placeholder message is shown; when
it cannot be reached at all, the text file shipped with the package is
used instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from importlib import resources

import httpx
from loguru import logger

DEFAULT_TITLES = {
    "login": "Login",
    "admin": "Admin Panel",
}


@dataclass
class PageContent:
    title: str
    content: str
    source: str  # "database", "error" or "fallback"

    def to_dict(self) -> dict:
        return {"title": self.title, "content": self.content, "source": self.source}


def read_fallback(page_type: str) -> str | None:
    """Bundled static text for a page type, or None if there is none."""
    resource = resources.files("drrm.content").joinpath("static").joinpath(f"{page_type}.txt")
    try:
        return resource.read_text(encoding="utf-8")
    except (FileNotFoundError, OSError):
        return None


class PageContentLoader:
    """Fetch page text from the proxy, falling back to bundled files."""

    def __init__(self, api_url: str, timeout: float = 10.0) -> None:
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    async def load(self, page_type: str) -> PageContent:
        title = DEFAULT_TITLES.get(page_type, page_type.title())

        async with httpx.AsyncClient() as client:
            try:
                resp = await client.get(
                    f"{self.api_url}/api/page",
                    params={"type": page_type},
                    timeout=self.timeout,
                )
            except httpx.HTTPError as e:
                logger.warning(
                    f"Could not fetch /api/page ({e}), falling back to {page_type}.txt"
                )
                return self._fallback(page_type, title)

        if resp.is_success:
            try:
                page = resp.json().get("page") or {}
                content = PageContent(
                    title=page.get("title") or title,
                    content=page.get("content") or "",
                    source="database",
                )
            except (ValueError, AttributeError) as e:
                logger.warning(
                    f"/api/page?type={page_type} sent an unreadable body ({e}), "
                    f"falling back to {page_type}.txt"
                )
                return self._fallback(page_type, title)
            return content

        logger.warning(f"/api/page?type={page_type} returned {resp.status_code}")
        return PageContent(
            title=title,
            content=f"Failed to load {page_type} content from database. Using fallback.",
            source="error",
        )

    def _fallback(self, page_type: str, title: str) -> PageContent:
        text = read_fallback(page_type)
        if text is None:
            return PageContent(
                title=title,
                content=f"Failed to load {page_type} content",
                source="error",
            )
        return PageContent(title=title, content=text, source="fallback")
