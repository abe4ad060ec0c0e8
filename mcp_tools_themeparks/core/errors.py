from __future__ import annotations


class ConfigError(Exception):
    """Raised when the server cannot be configured from the environment."""


class ThemeParksApiError(Exception):
    """Base class for every failure of a ThemeParks.wiki API call."""


class RateLimitedError(ThemeParksApiError):
    """HTTP 429. Never retried automatically; the caller decides."""

    def __init__(self, retry_after: str = "unknown") -> None:
        self.retry_after = retry_after
        super().__init__(
            f"API rate limit exceeded. Please try again after {retry_after} seconds."
        )


class UpstreamError(ThemeParksApiError):
    """Any other non-2xx status returned by the API."""

    def __init__(self, status_code: int, detail: str) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"API responded with status {status_code}: {detail}")


class TransportError(ThemeParksApiError):
    """The request never produced a usable response (network failure, bad JSON)."""

    def __init__(self, path: str, cause: str) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to call ThemeParks API for {path}. {cause}")
