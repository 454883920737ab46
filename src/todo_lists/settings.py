from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_SESSION_MAX_AGE = 14 * 24 * 60 * 60
DEFAULT_SESSION_PURGE_INTERVAL = 60
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - SESSION_COOKIE_NAME: name of the cookie carrying the session id (default: 'todo_session')
    - SESSION_MAX_AGE_SECONDS: idle lifetime of a session in seconds (default: 14 days)
    - SESSION_PURGE_INTERVAL_SECONDS: minimum seconds between sweeps of expired sessions (default: 60)
    - SESSION_COOKIE_SECURE: 'true' to mark the session cookie Secure (default: false)
    - LOG_LEVEL: root logging level name (default: 'INFO')
    """

    session_cookie_name: str
    session_max_age_seconds: int
    session_purge_interval_seconds: int
    session_cookie_secure: bool
    log_level: str


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_bool(value: str, default: bool = False) -> bool:
    v = value.strip().lower()
    if v in {"1", "true", "yes", "on"}:
        return True
    if v in {"0", "false", "no", "off"}:
        return False
    return default


def _parse_positive_int(value: str, default: int) -> int:
    try:
        parsed = int(value.strip())
    except ValueError:
        return default
    return parsed if parsed > 0 else default


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    cookie_name = _get_env("SESSION_COOKIE_NAME", "todo_session").strip()
    max_age = _parse_positive_int(
        _get_env("SESSION_MAX_AGE_SECONDS", str(DEFAULT_SESSION_MAX_AGE)),
        DEFAULT_SESSION_MAX_AGE,
    )
    purge_interval = _parse_positive_int(
        _get_env("SESSION_PURGE_INTERVAL_SECONDS", str(DEFAULT_SESSION_PURGE_INTERVAL)),
        DEFAULT_SESSION_PURGE_INTERVAL,
    )
    secure = _parse_bool(_get_env("SESSION_COOKIE_SECURE", "false"), False)
    log_level = _get_env("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in _LOG_LEVELS:
        log_level = "INFO"

    return Settings(
        session_cookie_name=cookie_name,
        session_max_age_seconds=max_age,
        session_purge_interval_seconds=purge_interval,
        session_cookie_secure=secure,
        log_level=log_level,
    )
