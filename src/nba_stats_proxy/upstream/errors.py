from __future__ import annotations

from .types import Classification, UpstreamResponse


class UpstreamError(RuntimeError):
    """Base exception for upstream-related failures."""


class UpstreamRequestError(UpstreamError):
    """Transport layer failures (timeouts, connection resets, TLS, DNS)."""

    def __init__(self, message: str, *, url: str, code: str | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.code = code


class UpstreamBlockedError(UpstreamError):
    """Upstream answered, but not with well-formed JSON (block page, empty body, etc.)."""

    def __init__(self, response: UpstreamResponse, classification: Classification) -> None:
        super().__init__(
            f"Upstream returned {classification.kind} (HTTP {response.status_code}) for {response.url}"
        )
        self.response = response
        self.classification = classification
