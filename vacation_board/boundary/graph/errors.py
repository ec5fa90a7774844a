"""
Remote API error type.

Dependencies: none
System role: Carries a non-success upstream response to the API layer
"""

from typing import Any


class RemoteAPIError(Exception):
    """Raised when the identity provider or Graph answers with a non-2xx status."""

    def __init__(self, status_code: int, body: Any = None, message: str | None = None) -> None:
        """
        Args:
            status_code: HTTP status returned by the remote service
            body: Decoded JSON body when the response had one, else None
            message: Optional human-readable summary
        """
        self.status_code = status_code
        self.body = body
        super().__init__(message or f"Remote API returned {status_code}")
