from __future__ import annotations

import json

from .types import Classification, UpstreamResponse

DEFAULT_SNIPPET_CHARS = 500

_LEADING = " \t\r\n\ufeff"


def _reject_constant(name: str) -> float:
    raise ValueError(f"{name} is not valid JSON")


def _body_prefix(text: str) -> str:
    return text.lstrip(_LEADING)[:1]


def classify_response(
    resp: UpstreamResponse, *, snippet_chars: int = DEFAULT_SNIPPET_CHARS
) -> Classification:
    """
    Decide whether an upstream response can be passed through as JSON.

    Only the content-type and the body are inspected. A non-2xx status with a
    JSON body is still `json`; the caller forwards the status unchanged.
    """
    text = resp.text
    snippet = text[:snippet_chars]
    content_type = (resp.content_type or "").lower()
    prefix = _body_prefix(text)

    if not text.strip(_LEADING):
        return Classification(kind="empty", snippet=snippet)

    if prefix in ("{", "[") or "json" in content_type:
        try:
            data = json.loads(text.lstrip("\ufeff"), parse_constant=_reject_constant)
        except ValueError:
            return Classification(kind="invalid_json", snippet=snippet)
        return Classification(kind="json", snippet=snippet, data=data)

    if "html" in content_type or prefix == "<":
        return Classification(kind="html", snippet=snippet)

    return Classification(kind="unexpected", snippet=snippet)
