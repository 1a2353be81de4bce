"""HTTP client for the TFS REST API."""
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from .config import TfsConnection

logger = logging.getLogger(__name__)


class DecodeError(ValueError):
    """Response body is not JSON, or lacks a field the caller needs."""


def open_client(conn: TfsConnection, transport: Optional[httpx.BaseTransport] = None) -> httpx.Client:
    """A fresh, unpooled client for a single request."""
    return httpx.Client(
        auth=conn.basic_auth,
        headers={"Accept": "application/json"},
        timeout=conn.timeout,
        transport=transport,
    )


def _join(*parts: Any) -> str:
    return "/".join(quote(str(part), safe="") for part in parts)


def project_url(conn: TfsConnection, *parts: Any) -> str:
    """``{collection}/{project}/_apis/{parts...}``"""
    url = f"{conn.collection_url}/{quote(conn.project, safe='')}/_apis"
    return f"{url}/{_join(*parts)}" if parts else url


def collection_url(conn: TfsConnection, *parts: Any) -> str:
    """``{collection}/_apis/{parts...}``"""
    url = f"{conn.collection_url}/_apis"
    return f"{url}/{_join(*parts)}" if parts else url


def _decode(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError as exc:
        raise DecodeError(f"{resp.request.method} {resp.request.url} returned non-JSON body") from exc


def _send(
    conn: TfsConnection,
    method: str,
    url: str,
    params: Optional[Dict[str, Any]] = None,
    **kwargs: Any,
) -> Any:
    query = dict(params or {})
    query["api-version"] = conn.api_version

    logger.debug("%s %s", method, url)
    with open_client(conn) as client:
        resp = client.request(method, url, params=query, **kwargs)
        resp.raise_for_status()
        return _decode(resp)


def get_json(conn: TfsConnection, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
    """GET ``url`` and return the decoded JSON body."""
    return _send(conn, "GET", url, params)


def post_json(
    conn: TfsConnection,
    url: str,
    body: Any,
    params: Optional[Dict[str, Any]] = None,
) -> Any:
    """POST a JSON body and return the decoded JSON response."""
    return _send(conn, "POST", url, params, json=body)


def patch_json(
    conn: TfsConnection,
    url: str,
    body: Any,
    params: Optional[Dict[str, Any]] = None,
    content_type: str = "application/json",
) -> Any:
    """PATCH a JSON body. Work item updates need ``application/json-patch+json``."""
    return _send(conn, "PATCH", url, params, json=body, headers={"Content-Type": content_type})
