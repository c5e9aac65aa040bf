"""Login / admin page content and the admin session flag."""

from drrm.content.pages import PageContent, PageContentLoader, read_fallback
from drrm.content.session import LoginError, LoginSession

__all__ = ["LoginError", "LoginSession", "PageContent", "PageContentLoader", "read_fallback"]
