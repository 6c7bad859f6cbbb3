from __future__ import annotations

import json

import typer

from nba_stats_proxy.cli.common import stats_client_scope
from nba_stats_proxy.core.config import settings
from nba_stats_proxy.core.log import configure_logging
from nba_stats_proxy.upstream import (
    TeamStatsForwarder,
    TeamStatsQuery,
    UpstreamBlockedError,
    UpstreamRequestError,
    run_probe,
)

app = typer.Typer(help="Talk to stats.nba.com directly, without running the server.")


@app.command("fetch")
def fetch_cmd(
    season: str = typer.Option(settings.default_season, "--season", help="Season (e.g. 2025-26)."),
    season_type: str = typer.Option(
        settings.default_season_type,
        "--season-type",
        help="Season type (e.g. 'Regular Season', 'Playoffs').",
    ),
    prime: bool = typer.Option(
        settings.prime_cookies,
        "--prime/--no-prime",
        help="Visit nba.com first to collect cookies.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log upstream traffic."),
) -> None:
    """Fetch team stats once and print the upstream JSON."""

    if verbose:
        configure_logging("INFO")

    cfg = settings.model_copy(update={"prime_cookies": prime})
    with stats_client_scope(cfg) as http:
        forwarder = TeamStatsForwarder(http=http, cfg=cfg)
        try:
            data = forwarder.fetch_json(TeamStatsQuery(season=season, season_type=season_type))
        except UpstreamRequestError as e:
            typer.echo(f"NBA request failed: {e} (code={e.code})", err=True)
            raise typer.Exit(code=1) from e
        except UpstreamBlockedError as e:
            typer.echo(str(e), err=True)
            typer.echo(e.classification.snippet, err=True)
            raise typer.Exit(code=1) from e

    typer.echo(json.dumps(data, indent=2))


@app.command("probe")
def probe_cmd() -> None:
    """Report which of the configured probe targets are reachable."""

    with stats_client_scope() as http:
        results = run_probe(http, settings.probe_targets, timeout_s=settings.probe_timeout_s)

    for r in results:
        if r.ok:
            typer.echo(f"OK    {r.status} {r.content_type or '-'} {r.url}")
        else:
            typer.echo(f"FAIL  {r.code or '-'} {r.url}: {r.error}")
