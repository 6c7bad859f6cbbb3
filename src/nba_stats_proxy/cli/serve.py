from __future__ import annotations

import typer
import uvicorn

from nba_stats_proxy.core.config import settings
from nba_stats_proxy.core.log import configure_logging
from nba_stats_proxy.server.app import create_app


def serve_cmd(
    host: str | None = typer.Option(None, "--host", help="Bind address (default: HOST or 0.0.0.0)."),
    port: int | None = typer.Option(None, "--port", help="Bind port (default: PORT or 3000)."),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Logging level (default: LOG_LEVEL or INFO)."
    ),
) -> None:
    """Run the proxy HTTP server."""

    level = (log_level or settings.log_level).upper()
    configure_logging(level)

    bind_host = host or settings.host
    bind_port = port or settings.port
    typer.echo(f"Listening on {bind_host}:{bind_port}")
    uvicorn.run(create_app(settings), host=bind_host, port=bind_port, log_level=level.lower())
