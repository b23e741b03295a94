"""Authentication session state shared by the client and its services."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from pydantic import ValidationError

from .enums import UserType
from .errors import ApiError
from .schemas.auth import User

if TYPE_CHECKING:
    from .services.auth import AuthService

logger = logging.getLogger(__name__)


class TokenStore:
    """Persists the bearer token and the last known user between runs."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path).expanduser()

    def load(self) -> dict[str, Any]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("session_file_corrupt", extra={"path": str(self.path)})
            return {}
        return data if isinstance(data, dict) else {}

    def save(self, token: Optional[str], user: Optional[dict[str, Any]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps({"token": token, "user": user}, indent=2)
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            os.fchmod(fh.fileno(), 0o600)
            fh.write(payload)

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)


class SessionContext:
    """
    Explicit authentication state passed to everything that needs it.

    Call ``initialize`` once at startup to restore a persisted token and
    ``logout`` to tear the session down again.
    """

    def __init__(self, store: TokenStore) -> None:
        self.store = store
        self.token: Optional[str] = None
        self.user: Optional[User] = None
        self.is_loading = True

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def is_owner(self) -> bool:
        return self.user is not None and self.user.user_type is UserType.OWNER

    @property
    def is_tenant(self) -> bool:
        return self.user is not None and self.user.user_type is UserType.TENANT

    async def initialize(self, auth: AuthService) -> Optional[User]:
        """Restore the persisted token and confirm it with the backend."""
        token = self.store.load().get("token")
        if not token:
            self.logout()
            return None

        self.token = token
        try:
            user = await auth.get_current_user()
        except (ApiError, ValidationError) as exc:
            logger.warning("auth_check_failed", exc_info=exc)
            self.logout()
            return None

        self.login(user)
        return user

    def login(self, user: User, token: Optional[str] = None) -> None:
        if token:
            self.token = token
        self.user = user
        self.is_loading = False
        self.store.save(self.token, user.to_api())

    def logout(self) -> None:
        self.store.clear()
        self.token = None
        self.user = None
        self.is_loading = False
