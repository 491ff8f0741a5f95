# tuition_api/client/session.py
"""Logged-in admin identity with an inactivity expiry.

The session is persisted as JSON so another process (or a restart) sees the
same login. A session ends when the inactivity window passes without
activity or on logout. Another process clearing the storage file ends it too;
``sync_from_storage`` picks that up.
"""
import json
import logging
import os
import time
from datetime import timedelta
from pathlib import Path
from typing import Callable, Optional, Tuple, Union

import httpx
from pydantic import ValidationError

from .api import APIError, TuitionAPIClient
from ..schemas.auth_schemas import BRANCH_ADMIN, SUPER_ADMIN, AdminIdentity
from ..schemas.base import utc_now

logger = logging.getLogger(__name__)

INACTIVITY = timedelta(minutes=5)
ACTIVITY_DEBOUNCE = timedelta(seconds=3)


class AdminSession:
    def __init__(
        self,
        storage_path: Union[str, Path],
        inactivity: timedelta = INACTIVITY,
        debounce: timedelta = ACTIVITY_DEBOUNCE,
        clock: Callable[[], float] = time.time,
    ):
        self.storage_path = Path(storage_path)
        self.inactivity = inactivity.total_seconds()
        self.debounce = debounce.total_seconds()
        self._clock = clock
        self._admin: Optional[AdminIdentity] = None
        self._expires_at = 0.0
        self._last_activity = 0.0

        # A persisted, still-valid session is available before any data is requested
        self.restore()

    # State

    def current(self) -> Optional[AdminIdentity]:
        """The logged-in admin, or None once the inactivity window has passed"""
        if self._admin is not None and self._clock() >= self._expires_at:
            logger.info(f"Session expired for {self._admin.email}")
            self._clear()
        return self._admin

    @property
    def is_authenticated(self) -> bool:
        return self.current() is not None

    @property
    def expires_at(self) -> Optional[float]:
        return self._expires_at if self._admin else None

    # Transitions

    async def login(self, api: TuitionAPIClient, email: str, password: str) -> bool:
        """Try super-admin login, then branch-admin login; first match wins"""
        try:
            identity = await self._authenticate(api, email, password)
        except (APIError, httpx.HTTPError) as e:
            logger.error(f"Login error: {e}")
            return False

        if identity is None:
            return False
        self._establish(identity)
        return True

    def logout(self):
        self._clear()

    def touch(self):
        """Record user activity; extends the session at most once per debounce window"""
        now = self._clock()
        if now - self._last_activity > self.debounce:
            self._last_activity = now
            self.refresh()

    def refresh(self):
        if self.current() is None:
            return
        self._expires_at = self._clock() + self.inactivity
        self._persist()

    def restore(self) -> Optional[AdminIdentity]:
        revived = self._read()
        if revived:
            self._admin, self._expires_at = revived
        return self._admin

    def sync_from_storage(self) -> Optional[AdminIdentity]:
        """Adopt whatever another process left in storage; cleared means logged out"""
        revived = self._read()
        if revived:
            self._admin, self._expires_at = revived
        else:
            self._admin = None
            self._expires_at = 0.0
        return self._admin

    # Internals

    async def _authenticate(self, api: TuitionAPIClient, email: str, password: str) -> Optional[AdminIdentity]:
        now = utc_now()
        try:
            admin = await api.login_super_admin(email, password)
            return AdminIdentity(
                id=str(admin.id), name=admin.name, email=admin.email,
                role=SUPER_ADMIN, login_time=now,
            )
        except APIError as e:
            if e.status_code != 401:
                raise

        try:
            admin = await api.login_branch_admin(email, password)
            return AdminIdentity(
                id=str(admin.id), name=admin.name, email=admin.email,
                role=BRANCH_ADMIN, login_time=now,
                branch_id=admin.branch_id, branch_name=admin.branch_name,
            )
        except APIError as e:
            if e.status_code != 401:
                raise
        return None

    def _establish(self, identity: AdminIdentity):
        self._admin = identity
        self._last_activity = self._clock()
        self._expires_at = self._last_activity + self.inactivity
        self._persist()
        logger.info(f"{identity.role} logged in: {identity.email}")

    def _clear(self):
        self._admin = None
        self._expires_at = 0.0
        try:
            self.storage_path.unlink()
        except FileNotFoundError:
            pass

    def _persist(self):
        payload = {
            "admin": self._admin.model_dump(mode="json", by_alias=True),
            "expiresAt": int(self._expires_at * 1000),
        }
        tmp_path = self.storage_path.with_suffix(self.storage_path.suffix + ".tmp")
        try:
            self.storage_path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(payload))
            os.replace(tmp_path, self.storage_path)
        except OSError as e:
            logger.warning(f"Could not persist session: {e}")

    def _read(self) -> Optional[Tuple[AdminIdentity, float]]:
        try:
            raw = self.storage_path.read_text()
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning(f"Could not read session: {e}")
            return None

        try:
            parsed = json.loads(raw)
            admin = AdminIdentity.model_validate(parsed["admin"])
            expires_at = parsed["expiresAt"] / 1000
        except (ValueError, KeyError, TypeError, ValidationError):
            logger.warning("Discarding unreadable session file")
            return None

        if expires_at <= self._clock():
            # expired
            try:
                self.storage_path.unlink()
            except FileNotFoundError:
                pass
            return None
        return admin, expires_at
