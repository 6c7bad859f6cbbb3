from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from nba_stats_proxy.core.config import Settings, settings
from nba_stats_proxy.upstream import StatsHttpClient


@contextmanager
def stats_client_scope(cfg: Settings | None = None) -> Iterator[StatsHttpClient]:
    """
    Context-managed upstream client for one-shot CLI commands.
    Ensures the connection pool is closed.
    """
    cfg = cfg or settings
    http = StatsHttpClient(timeout_s=cfg.request_timeout_s)
    try:
        yield http
    finally:
        http.close()
