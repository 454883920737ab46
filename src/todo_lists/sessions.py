from __future__ import annotations

import logging
import secrets
from datetime import datetime, timedelta
from threading import RLock
from typing import Dict, Optional, Tuple

from fastapi import Depends, Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from .models import TodoSession
from .repositories import SessionRepository
from .settings import DEFAULT_SESSION_PURGE_INTERVAL, Settings, get_settings

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Thread-safe in-memory store of browser sessions keyed by session id.

    Sessions idle for longer than ``max_age_seconds`` expire. Expired
    sessions are swept at most once every ``purge_interval_seconds``.
    """

    def __init__(
        self,
        max_age_seconds: int,
        purge_interval_seconds: int = DEFAULT_SESSION_PURGE_INTERVAL,
    ) -> None:
        self._lock = RLock()
        self._sessions: Dict[str, TodoSession] = {}
        self._max_age = timedelta(seconds=max_age_seconds)
        self._purge_interval = timedelta(seconds=purge_interval_seconds)
        self._last_purge: Optional[datetime] = None

    def _now(self) -> datetime:
        return datetime.now()

    def _is_expired(self, session: TodoSession, now: datetime) -> bool:
        return now - session.last_seen > self._max_age

    def get(self, session_id: Optional[str]) -> Optional[TodoSession]:
        """
        Return the live session for ``session_id`` and mark it as seen, or
        None when the id is missing, unknown or expired.
        """
        if not session_id:
            return None
        now = self._now()
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            if self._is_expired(session, now):
                logger.info("Session expired after %s of inactivity", now - session.last_seen)
                del self._sessions[session.id]
                return None
            session.last_seen = now
            return session

    def create(self) -> TodoSession:
        session = TodoSession(id=secrets.token_urlsafe(32), last_seen=self._now())
        with self._lock:
            self._sessions[session.id] = session
        logger.debug("Created new session")
        return session

    def load(self, session_id: Optional[str]) -> Tuple[TodoSession, bool]:
        """
        Return the session for ``session_id`` and whether it was just created.
        """
        session = self.get(session_id)
        if session is not None:
            return session, False
        return self.create(), True

    def purge_expired(self) -> int:
        """Drop every expired session and return how many were removed."""
        now = self._now()
        with self._lock:
            self._last_purge = now
            stale = [sid for sid, s in self._sessions.items() if self._is_expired(s, now)]
            for sid in stale:
                del self._sessions[sid]
        if stale:
            logger.info("Purged %d expired sessions", len(stale))
        return len(stale)

    def purge_if_due(self) -> int:
        """Run ``purge_expired`` unless a sweep ran within the purge interval."""
        with self._lock:
            if self._last_purge is not None and self._now() - self._last_purge < self._purge_interval:
                return 0
            return self.purge_expired()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


class ServerSessionMiddleware(BaseHTTPMiddleware):
    """
    Attach the caller's existing TodoSession, if its cookie names one, and
    set the session cookie on responses for requests that used a session.

    New sessions are only minted by ``get_session``, so routes that never
    touch the session (health checks, rejected requests) leave no state.
    """

    def __init__(self, app, store: SessionStore, settings: Settings) -> None:
        super().__init__(app)
        self.store = store
        self.settings = settings

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        self.store.purge_if_due()
        request.state.todo_session = self.store.get(
            request.cookies.get(self.settings.session_cookie_name)
        )

        response = await call_next(request)
        session: Optional[TodoSession] = request.state.todo_session
        if session is not None:
            response.set_cookie(
                self.settings.session_cookie_name,
                session.id,
                max_age=self.settings.session_max_age_seconds,
                httponly=True,
                samesite="lax",
                secure=self.settings.session_cookie_secure,
            )
        return response


_session_store: Optional[SessionStore] = None


# PUBLIC_INTERFACE
def get_session_store() -> SessionStore:
    """Return the process-wide session store, creating it on first use."""
    global _session_store
    if _session_store is None:
        settings = get_settings()
        _session_store = SessionStore(
            settings.session_max_age_seconds,
            settings.session_purge_interval_seconds,
        )
    return _session_store


# PUBLIC_INTERFACE
def get_session(request: Request) -> TodoSession:
    """
    FastAPI dependency returning the caller's session, creating one on first use.
    """
    session: Optional[TodoSession] = getattr(request.state, "todo_session", None)
    if session is None:
        session = get_session_store().create()
        request.state.todo_session = session
    return session


# PUBLIC_INTERFACE
def get_repository(session: TodoSession = Depends(get_session)) -> SessionRepository:
    """FastAPI dependency returning a repository bound to the caller's session."""
    return SessionRepository(session)
