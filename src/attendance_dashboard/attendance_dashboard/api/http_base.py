from __future__ import annotations

from typing import Any

import requests

from ..core.exceptions import UpstreamUnavailable
from ..core.logging import get_logger
from .connection import ApiConnection

logger = get_logger(__name__)


def get_payload(conn: ApiConnection, params: dict[str, str]) -> Any:
    """GET `base_url?route=...` and return the `data` member of the JSON body.

    Raises UpstreamUnavailable on transport errors, non-2xx or malformed JSON.
    """
    if not conn.base_url:
        raise UpstreamUnavailable("SUMMARY_API_URL is not configured")

    try:
        response = conn.session().get(conn.base_url, params=params, timeout=conn.timeout)
    except requests.RequestException as exc:
        raise UpstreamUnavailable(f"request failed: {exc}") from exc

    if not 200 <= response.status_code < 300:
        raise UpstreamUnavailable(f"HTTP {response.status_code}")

    try:
        body = response.json()
    except ValueError as exc:
        raise UpstreamUnavailable("response is not valid JSON") from exc

    if not isinstance(body, dict):
        raise UpstreamUnavailable("response body is not a JSON object")
    return body.get("data")


def fetch_or_default(conn: ApiConnection, params: dict[str, str], default: Any) -> Any:
    try:
        return get_payload(conn, params)
    except UpstreamUnavailable as exc:
        logger.warning("summary source unavailable route=%s params=%s: %s", params.get("route"), params, exc)
        return default
