from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

import requests

from ..core.config import Settings
from ..core.errors import RateLimitedError, ThemeParksApiError, TransportError, UpstreamError


logger = logging.getLogger(__name__)

QueryValue = Union[str, int, float, bool, None]


class ThemeParksClient:
    """Single entry point for every ThemeParks.wiki request.

    Notes:
    - GET only, one attempt per call (no retry, no cache).
    - Failures are raised as one of RateLimitedError / UpstreamError / TransportError.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def url_for(self, path: str) -> str:
        return self.settings.base_url + path

    def get(self, path: str, params: Optional[Mapping[str, QueryValue]] = None) -> Any:
        """GET `path` below the configured base URL and return the decoded JSON body."""
        url = self.url_for(path)
        query = _query_params(params)
        headers = {"User-Agent": self.settings.user_agent, "Accept": "application/json"}

        try:
            r = requests.get(url, params=query, headers=headers, timeout=self.settings.timeout_s)

            if r.status_code == 429:
                retry_after = r.headers.get("Retry-After") or "unknown"
                logger.warning("ThemeParks API rate limit hit for %s. Retry after: %ss", path, retry_after)
                raise RateLimitedError(retry_after)

            if not 200 <= r.status_code < 300:
                err = UpstreamError(r.status_code, _error_detail(r))
                logger.error("ThemeParks API error for %s: %s", path, err)
                raise err

            return r.json()
        except ThemeParksApiError:
            raise
        except Exception as exc:
            logger.error("Network or other error calling ThemeParks API for %s: %s", path, exc)
            raise TransportError(path, str(exc)) from exc


def _query_params(params: Optional[Mapping[str, QueryValue]]) -> Optional[Dict[str, str]]:
    if not params:
        return None
    return {key: _query_value(value) for key, value in params.items() if value is not None}


def _query_value(value: QueryValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _error_detail(r: requests.Response) -> str:
    """Best-effort error text: JSON `message`, then `error`, then the raw body."""
    try:
        data = r.json()
    except ValueError:
        return r.text
    if isinstance(data, dict):
        detail = data.get("message") or data.get("error")
        if detail:
            return str(detail)
    return r.text
