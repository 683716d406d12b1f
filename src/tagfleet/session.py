"""Session placeholder shared by every request."""

from __future__ import annotations

from typing import Any, Optional


class SessionContext:
    """Holds the admin token and role established by the login workflow.

    Login itself lives outside this package; callers ``init`` the context once
    a session exists and ``clear`` it on logout.
    """

    def __init__(self, token: Optional[str] = None, role: Optional[str] = None, user: Optional[dict[str, Any]] = None) -> None:
        self.token = token
        self.role = role
        self.user = user

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def init(self, token: str, role: str, user: Optional[dict[str, Any]] = None) -> None:
        if not isinstance(token, str) or not token.strip():
            raise ValueError(f"Invalid token: {token!r}")
        self.token = token
        self.role = role
        self.user = user

    def clear(self) -> None:
        self.token = None
        self.role = None
        self.user = None

    def headers(self) -> dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}


__all__ = ["SessionContext"]
