from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from typing import Any

import httpx
from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse, Response

from nba_stats_proxy.core.config import Settings
from nba_stats_proxy.core.config import settings as default_settings
from nba_stats_proxy.upstream import (
    StatsHttpClient,
    TeamStatsForwarder,
    UpstreamRequestError,
    classify_response,
    default_query,
    run_probe,
)

logger = logging.getLogger(__name__)

SERVICE_NAME = "nba-stats-proxy"


def cors_headers(cfg: Settings) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": cfg.cors_allow_origin,
        "Access-Control-Allow-Methods": "GET,OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }


def create_app(
    cfg: Settings | None = None, *, transport: httpx.BaseTransport | None = None
) -> FastAPI:
    """
    Build the proxy app around one shared StatsHttpClient.
    `transport` swaps the network for an httpx.MockTransport in tests.
    """
    cfg = cfg or default_settings
    http = StatsHttpClient(timeout_s=cfg.request_timeout_s, transport=transport)
    forwarder = TeamStatsForwarder(http=http, cfg=cfg)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        try:
            yield
        finally:
            http.close()

    app = FastAPI(title="NBA Stats Proxy", lifespan=lifespan)

    @app.get("/health")
    def health() -> dict[str, Any]:
        return {"ok": True, "service": SERVICE_NAME}

    @app.get("/probe")
    def probe() -> dict[str, Any]:
        results = run_probe(http, cfg.probe_targets, timeout_s=cfg.probe_timeout_s)
        return {"ok": True, "results": [r.to_dict() for r in results]}

    @app.get("/nba/teamstats")
    def team_stats(
        season: str | None = Query(default=None),
        season_type: str | None = Query(default=None, alias="seasonType"),
    ) -> Response:
        query = default_query(cfg)
        if season is not None:
            query = replace(query, season=season)
        if season_type is not None:
            query = replace(query, season_type=season_type)

        try:
            upstream = forwarder.fetch(query)
        except UpstreamRequestError as e:
            logger.error("NBA request failed: %s (%s)", e, e.code)
            return JSONResponse(
                status_code=500,
                content={"error": "NBA request failed", "details": str(e), "code": e.code},
                headers=cors_headers(cfg),
            )

        classification = classify_response(upstream, snippet_chars=cfg.snippet_chars)
        logger.info(
            "GET %s -> HTTP %s (%s)", upstream.url, upstream.status_code, classification.kind
        )
        if not classification.is_json:
            logger.warning(
                "Upstream anomaly (%s) HTTP %s from %s",
                classification.kind,
                upstream.status_code,
                upstream.url,
            )
            return JSONResponse(
                status_code=502,
                content={
                    "error": "Upstream returned non-JSON response",
                    "kind": classification.kind,
                    "upstreamStatus": upstream.status_code,
                    "contentType": upstream.content_type,
                    "url": upstream.url,
                    "snippet": classification.snippet,
                },
                headers=cors_headers(cfg),
            )

        return Response(
            content=upstream.body,
            status_code=upstream.status_code,
            media_type="application/json",
            headers=cors_headers(cfg),
        )

    @app.options("/{path:path}")
    def preflight(path: str) -> Response:
        return Response(status_code=204, headers=cors_headers(cfg))

    return app
