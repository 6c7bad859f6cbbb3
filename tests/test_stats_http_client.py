from __future__ import annotations

import httpx
import pytest

from nba_stats_proxy.upstream import StatsHttpClient, UpstreamRequestError


def test_get_returns_non_2xx_status_without_raising() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, text="<html>nope</html>", headers={"content-type": "text/html"})

    with StatsHttpClient(transport=httpx.MockTransport(handler)) as http:
        resp = http.get("https://stats.nba.com/stats/leaguedashteamstats")

    assert resp.status_code == 403
    assert resp.content_type == "text/html"
    assert resp.body == b"<html>nope</html>"


def test_get_wraps_transport_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    with StatsHttpClient(transport=httpx.MockTransport(handler)) as http:
        with pytest.raises(UpstreamRequestError) as excinfo:
            http.get("https://stats.nba.com/stats/leaguedashteamstats")

    assert excinfo.value.code == "ConnectTimeout"
    assert excinfo.value.url == "https://stats.nba.com/stats/leaguedashteamstats"
    assert isinstance(excinfo.value.__cause__, httpx.ConnectTimeout)


def test_prime_collects_cookies_for_later_requests() -> None:
    seen_cookies: list[str | None] = []

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "www.nba.com":
            assert "text/html" in request.headers["accept"]
            return httpx.Response(
                200,
                text="<html></html>",
                headers={"set-cookie": "ak_bmsc=abc123; Domain=.nba.com; Path=/"},
            )
        seen_cookies.append(request.headers.get("cookie"))
        return httpx.Response(200, json={})

    with StatsHttpClient(transport=httpx.MockTransport(handler)) as http:
        assert not http.primed
        assert http.prime("https://www.nba.com/") is True
        assert http.primed
        assert http.has_cookies
        http.get("https://stats.nba.com/stats/leaguedashteamstats")

    assert seen_cookies == ["ak_bmsc=abc123"]


def test_prime_failure_is_reported_not_raised() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with StatsHttpClient(transport=httpx.MockTransport(handler)) as http:
        assert http.prime("https://www.nba.com/") is False
        assert not http.primed
