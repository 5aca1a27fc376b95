from __future__ import annotations

"""Lightweight HTTP client util for JSON GETs.

Uses stdlib urllib; the only outbound call this service makes is a single
exchange-rate lookup, so there is nothing to gain from a pooled client.
One attempt per call: failures surface immediately as HttpError.
"""
import http.client
import json
import logging
import urllib.request
from typing import Any, Dict

logger = logging.getLogger("app.http")


class HttpError(Exception):
    pass


def get_json(url: str, *, timeout: float = 10.0) -> Dict[str, Any]:
    try:
        request = urllib.request.Request(url, headers={"Accept": "application/json"})
        with urllib.request.urlopen(request, timeout=timeout) as resp:  # nosec B310
            if resp.status >= 400:
                raise HttpError(f"HTTP {resp.status} for {url}")
            data = resp.read()
            return json.loads(data.decode("utf-8"))
    except (
        HttpError,
        http.client.HTTPException,
        OSError,
        ValueError,
    ) as e:  # OSError covers URLError and timeouts; ValueError for JSON decode
        logger.warning("GET failed", extra={"url": url, "error": str(e)})
        raise HttpError(f"Failed to fetch JSON from {url}: {e}") from e
