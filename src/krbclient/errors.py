from __future__ import annotations
from typing import Optional


class KrbClientError(Exception):
    """Base class for errors raised by krbclient."""


class SerializationError(KrbClientError):
    """Raised when Settings cannot be encoded to JSON."""

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error
