from __future__ import annotations

import logging
import threading
from urllib.parse import quote, urlencode

from nba_stats_proxy.core.config import Settings
from nba_stats_proxy.core.config import settings as default_settings

from .classify import classify_response
from .client import StatsHttpClient
from .errors import UpstreamBlockedError
from .headers import stats_headers
from .types import Json, TeamStatsQuery, UpstreamResponse

logger = logging.getLogger(__name__)


def default_query(cfg: Settings | None = None) -> TeamStatsQuery:
    cfg = cfg or default_settings
    return TeamStatsQuery(season=cfg.default_season, season_type=cfg.default_season_type)


def build_team_stats_params(query: TeamStatsQuery, cfg: Settings | None = None) -> dict[str, str]:
    cfg = cfg or default_settings
    return {
        "Season": query.season,
        "SeasonType": query.season_type,
        "LeagueID": cfg.league_id,
        "PerMode": cfg.per_mode,
        "MeasureType": cfg.measure_type,
    }


def build_team_stats_url(query: TeamStatsQuery, cfg: Settings | None = None) -> str:
    """Full leaguedashteamstats URL; spaces are encoded as %20, not '+'."""

    cfg = cfg or default_settings
    qs = urlencode(build_team_stats_params(query, cfg), quote_via=quote)
    return f"{cfg.team_stats_url}?{qs}"


class TeamStatsForwarder:
    def __init__(self, *, http: StatsHttpClient, cfg: Settings | None = None) -> None:
        self.http = http
        self.cfg = cfg or default_settings
        self._prime_lock = threading.Lock()

    def ensure_primed(self) -> None:
        # A failed priming leaves `primed` unset, so the next request tries again.
        if not self.cfg.prime_cookies or self.http.primed:
            return
        with self._prime_lock:
            if not self.http.primed:
                self.http.prime(self.cfg.priming_url, timeout_s=self.cfg.request_timeout_s)

    def fetch(self, query: TeamStatsQuery) -> UpstreamResponse:
        """Forward one team stats request. Any HTTP status is returned as-is."""

        self.ensure_primed()
        url = build_team_stats_url(query, self.cfg)
        resp = self.http.get(url, headers=stats_headers(), timeout_s=self.cfg.request_timeout_s)
        logger.debug(
            "GET %s -> HTTP %s (%s)", url, resp.status_code, resp.content_type or "no content-type"
        )
        return resp

    def fetch_json(self, query: TeamStatsQuery) -> Json:
        resp = self.fetch(query)
        classification = classify_response(resp, snippet_chars=self.cfg.snippet_chars)
        if not classification.is_json:
            raise UpstreamBlockedError(resp, classification)
        return classification.data
