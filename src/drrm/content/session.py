"""Login flag for the admin panel.

This is a plain boolean, not authentication: any non-empty password
switches it on and nothing is verified server-side.
"""

from __future__ import annotations

from loguru import logger


class LoginError(ValueError):
    """Raised when a login attempt is rejected."""


class LoginSession:
    def __init__(self) -> None:
        self._logged_in = False

    @property
    def is_logged_in(self) -> bool:
        return self._logged_in

    def login(self, password: str) -> None:
        if not password:
            raise LoginError("Please enter a password")
        self._logged_in = True
        logger.info("Admin session opened")

    def logout(self) -> None:
        self._logged_in = False
        logger.info("Admin session closed")
