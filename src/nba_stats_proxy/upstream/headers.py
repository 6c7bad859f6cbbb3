from __future__ import annotations

CHROME_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

# What the nba.com stats pages send on their own XHRs.
_STATS_HEADERS: dict[str, str] = {
    "Accept": "application/json, text/plain, */*",
    "Accept-Language": "en-US,en;q=0.9",
    "Origin": "https://www.nba.com",
    "Referer": "https://www.nba.com/",
    "User-Agent": CHROME_USER_AGENT,
    "x-nba-stats-origin": "stats",
    "x-nba-stats-token": "true",
}

_BROWSER_HEADERS: dict[str, str] = {
    "User-Agent": CHROME_USER_AGENT,
    "Accept": "text/html,application/json;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}


def stats_headers() -> dict[str, str]:
    """Spoofed browser headers for stats.nba.com JSON endpoints."""

    return dict(_STATS_HEADERS)


def browser_headers() -> dict[str, str]:
    """Plain page-navigation headers, used for cookie priming and probes."""

    return dict(_BROWSER_HEADERS)
