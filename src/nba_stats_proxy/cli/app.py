from __future__ import annotations

import typer

from nba_stats_proxy.cli.serve import serve_cmd
from nba_stats_proxy.cli.upstream import app as upstream_app

app = typer.Typer(no_args_is_help=True)
app.command("serve")(serve_cmd)
app.add_typer(upstream_app, name="upstream")
