from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

Json = Any

ClassificationKind = Literal["json", "html", "empty", "invalid_json", "unexpected"]


@dataclass(frozen=True)
class TeamStatsQuery:
    """
    Caller-facing knobs for a team stats request.
    Everything else on the upstream URL is fixed by settings.
    """
    season: str = "2025-26"
    season_type: str = "Regular Season"


@dataclass(frozen=True)
class UpstreamResponse:
    url: str
    status_code: int
    content_type: str | None
    body: bytes

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class Classification:
    kind: ClassificationKind
    snippet: str
    data: Json = None

    @property
    def is_json(self) -> bool:
        return self.kind == "json"
