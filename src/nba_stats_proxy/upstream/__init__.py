from nba_stats_proxy.upstream.classify import classify_response
from nba_stats_proxy.upstream.client import StatsHttpClient
from nba_stats_proxy.upstream.errors import (
    UpstreamBlockedError,
    UpstreamError,
    UpstreamRequestError,
)
from nba_stats_proxy.upstream.probe import ProbeResult, run_probe
from nba_stats_proxy.upstream.team_stats import (
    TeamStatsForwarder,
    build_team_stats_params,
    build_team_stats_url,
    default_query,
)
from nba_stats_proxy.upstream.types import Classification, TeamStatsQuery, UpstreamResponse

__all__ = [
    "Classification",
    "ProbeResult",
    "StatsHttpClient",
    "TeamStatsForwarder",
    "TeamStatsQuery",
    "UpstreamBlockedError",
    "UpstreamError",
    "UpstreamRequestError",
    "UpstreamResponse",
    "build_team_stats_params",
    "build_team_stats_url",
    "classify_response",
    "default_query",
    "run_probe",
]
