"""Errors surfaced to HTTP callers.

Each error knows the status code and JSON payload it maps to. Malformed model
output is not part of this hierarchy: it is recovered with a fallback decision.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


REQUIRED_FIELDS = ("players", "position", "hand", "situation")


class AdvisorError(Exception):
    """Base error carrying an HTTP status and a caller-facing message."""

    status_code: int = 500

    def __init__(self, error: str, detail: Optional[str] = None) -> None:
        super().__init__(error)
        self.error = error
        self.detail = detail

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.error}
        if self.detail is not None:
            payload["detail"] = self.detail
        return payload


class MissingFieldsError(AdvisorError):
    """Raised when a required query parameter is absent or empty."""

    status_code = 400

    def __init__(self) -> None:
        super().__init__("Missing required fields: " + ", ".join(REQUIRED_FIELDS))


class ConfigurationError(AdvisorError):
    """Raised when the provider credential is not configured."""

    status_code = 500

    def __init__(self, error: str = "OPENAI_API_KEY not set on server") -> None:
        super().__init__(error)


class UpstreamError(AdvisorError):
    """Raised when the model provider answers with a non-success status."""

    status_code = 502

    def __init__(self, detail: str, upstream_status: Optional[int] = None) -> None:
        super().__init__("Upstream model error", detail=detail)
        self.upstream_status = upstream_status
