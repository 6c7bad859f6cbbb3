from __future__ import annotations

from nba_stats_proxy.upstream import UpstreamResponse, classify_response


def _resp(body: bytes, content_type: str | None, status_code: int = 200) -> UpstreamResponse:
    return UpstreamResponse(
        url="https://stats.nba.com/stats/leaguedashteamstats",
        status_code=status_code,
        content_type=content_type,
        body=body,
    )


def test_json_body_is_passed_through() -> None:
    c = classify_response(_resp(b'{"resultSets": []}', "application/json; charset=utf-8"))
    assert c.is_json
    assert c.data == {"resultSets": []}


def test_json_detected_by_body_prefix_without_content_type() -> None:
    c = classify_response(_resp(b'  \n[1, 2, 3]', None))
    assert c.kind == "json"
    assert c.data == [1, 2, 3]


def test_json_error_status_is_still_json() -> None:
    c = classify_response(_resp(b'{"message": "bad season"}', "application/json", status_code=400))
    assert c.is_json


def test_bom_prefixed_json_is_accepted() -> None:
    c = classify_response(_resp('\ufeff{"a": 1}'.encode("utf-8"), "text/plain"))
    assert c.kind == "json"
    assert c.data == {"a": 1}


def test_html_block_page_is_an_anomaly() -> None:
    c = classify_response(_resp(b"<HTML><HEAD><TITLE>Access Denied</TITLE>", "text/html"))
    assert c.kind == "html"
    assert not c.is_json
    assert "Access Denied" in c.snippet


def test_html_detected_by_prefix_when_content_type_lies() -> None:
    c = classify_response(_resp(b"<!doctype html><p>blocked</p>", "text/plain"))
    assert c.kind == "html"


def test_malformed_json_is_invalid_json() -> None:
    c = classify_response(_resp(b'{"resultSets": [', "application/json"))
    assert c.kind == "invalid_json"
    assert c.data is None


def test_empty_body() -> None:
    assert classify_response(_resp(b"", "application/json")).kind == "empty"
    assert classify_response(_resp(b"  \r\n", None)).kind == "empty"


def test_plain_text_is_unexpected() -> None:
    c = classify_response(_resp(b"Service Unavailable", "text/plain", status_code=503))
    assert c.kind == "unexpected"


def test_snippet_is_truncated() -> None:
    body = b"<html>" + b"x" * 2000
    c = classify_response(_resp(body, "text/html"), snippet_chars=50)
    assert len(c.snippet) == 50
    assert c.snippet.startswith("<html>")


def test_non_standard_json_constants_are_invalid_json() -> None:
    for body in (b'{"a": NaN}', b'{"a": Infinity}', b"[-Infinity]"):
        c = classify_response(_resp(body, "application/json"))
        assert c.kind == "invalid_json", body
