from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PROBE_TARGETS = [
    "https://www.google.com",
    "https://www.nba.com",
    "https://stats.nba.com/stats/leaguedashteamstats?LeagueID=00&Season=2024-25"
    "&SeasonType=Regular%20Season&PerMode=Totals&MeasureType=Base",
]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Server
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=3000, ge=1, le=65535, validation_alias="PORT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    cors_allow_origin: str = "*"

    # stats.nba.com
    upstream_base_url: str = "https://stats.nba.com/stats"
    team_stats_path: str = "leaguedashteamstats"
    league_id: str = "00"
    per_mode: str = "Totals"
    measure_type: str = "Base"
    default_season: str = "2025-26"
    default_season_type: str = "Regular Season"
    request_timeout_s: float = Field(default=20.0, gt=0)

    # Cookie priming
    prime_cookies: bool = True
    priming_url: str = "https://www.nba.com/"

    # Diagnostics
    snippet_chars: int = Field(default=500, ge=0)
    probe_timeout_s: float = Field(default=15.0, gt=0)
    probe_targets: list[str] = Field(default_factory=lambda: list(DEFAULT_PROBE_TARGETS))

    @property
    def team_stats_url(self) -> str:
        return self.upstream_base_url.rstrip("/") + "/" + self.team_stats_path.lstrip("/")


settings = Settings()
