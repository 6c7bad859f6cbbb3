from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from .errors import UpstreamRequestError
from .headers import browser_headers
from .types import UpstreamResponse

logger = logging.getLogger(__name__)


@dataclass
class StatsHttpClient:
    """
    Thin wrapper over a single httpx.Client.

    - Keep-alive connection pool and cookie jar are shared by every request.
    - HTTP status codes are returned, never raised; only transport failures raise.
    - Tests inject an httpx.MockTransport via `transport`.
    """

    timeout_s: float = 20.0
    connect_timeout_s: float = 10.0
    follow_redirects: bool = True

    transport: httpx.BaseTransport | None = None
    primed: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self._client = httpx.Client(
            timeout=httpx.Timeout(self.timeout_s, connect=self.connect_timeout_s),
            follow_redirects=self.follow_redirects,
            transport=self.transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> StatsHttpClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def has_cookies(self) -> bool:
        return len(self._client.cookies) > 0

    def get(
        self,
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        timeout_s: float | None = None,
    ) -> UpstreamResponse:
        """
        GET `url` and capture status, content-type and decoded body.
        Raises UpstreamRequestError on timeouts / network / protocol failures.
        """
        timeout: Any = httpx.USE_CLIENT_DEFAULT
        if timeout_s is not None:
            timeout = httpx.Timeout(timeout_s, connect=min(timeout_s, self.connect_timeout_s))

        try:
            resp = self._client.get(url, params=params, headers=headers, timeout=timeout)
        except httpx.HTTPError as e:
            raise UpstreamRequestError(str(e) or type(e).__name__, url=url, code=type(e).__name__) from e

        return UpstreamResponse(
            url=str(resp.url),
            status_code=resp.status_code,
            content_type=resp.headers.get("content-type"),
            body=resp.content,
        )

    def prime(self, url: str, *, timeout_s: float | None = None) -> bool:
        """
        Visit `url` like a browser would, so the upstream can set its cookies
        on the shared jar. A transport failure is logged and reported as False.
        """
        try:
            resp = self.get(url, headers=browser_headers(), timeout_s=timeout_s)
        except UpstreamRequestError as e:
            logger.warning("Cookie priming failed for %s: %s (%s)", url, e, e.code)
            return False

        self.primed = True
        logger.info(
            "Primed cookies from %s: HTTP %s, %d cookie(s) in jar",
            url,
            resp.status_code,
            len(self._client.cookies),
        )
        return True
