from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .client import StatsHttpClient
from .errors import UpstreamRequestError
from .headers import browser_headers

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProbeResult:
    url: str
    ok: bool
    status: int | None = None
    content_type: str | None = None
    error: str | None = None
    code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        if self.ok:
            return {
                "url": self.url,
                "ok": True,
                "status": self.status,
                "contentType": self.content_type,
            }
        return {"url": self.url, "ok": False, "error": self.error, "code": self.code}


def run_probe(
    http: StatsHttpClient, targets: Iterable[str], *, timeout_s: float = 15.0
) -> list[ProbeResult]:
    """Check, one target at a time, which hosts are reachable from this deployment."""

    results: list[ProbeResult] = []
    for url in targets:
        try:
            resp = http.get(url, headers=browser_headers(), timeout_s=timeout_s)
        except UpstreamRequestError as e:
            logger.warning("Probe %s failed: %s", url, e)
            results.append(ProbeResult(url=url, ok=False, error=str(e), code=e.code))
            continue
        results.append(
            ProbeResult(url=url, ok=True, status=resp.status_code, content_type=resp.content_type)
        )
    return results
