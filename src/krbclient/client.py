from __future__ import annotations
import logging
from typing import Any, Optional
from .config import Settings, new_settings

DEFAULT_LOG_LEVEL = logging.INFO


class Client:
    """Kerberos client identity together with the Settings it owns."""

    def __init__(self, username: str, realm: str, settings: Optional[Settings] = None) -> None:
        self._username = username
        self._realm = realm
        self._settings = settings if settings is not None else new_settings()

    @property
    def username(self) -> str:
        return self._username

    @property
    def realm(self) -> str:
        return self._realm

    @property
    def principal(self) -> str:
        return f"{self._username}@{self._realm}"

    @property
    def settings(self) -> Settings:
        return self._settings

    def log(self, fmt: str, *args: Any, level: int = DEFAULT_LOG_LEVEL) -> None:
        """Write to the client's logger if one is configured.

        ``fmt`` and ``args`` follow %-style formatting, done by the logger
        only when the record is emitted. ``stacklevel=2`` makes the record's
        location point at the caller of this method.
        """
        sink = self._settings.logger
        if sink is None:
            return
        sink.log(level, fmt, *args, stacklevel=2)
