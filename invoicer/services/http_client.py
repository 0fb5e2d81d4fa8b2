from __future__ import annotations

"""Async HTTP GET-JSON helper.

Single attempt, no retries. Failures are normalised into ``HttpError`` whose
message is the service's structured ``error`` field when the body carries
one, otherwise the transport / status message.
"""
import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger("invoicer.http")


class HttpError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def extract_error_message(payload: Any) -> Optional[str]:
    """Return the ``error`` message of a JSON error body, if present.

    Handles both ``{"error": "..."}`` and the newer
    ``{"error": {"code": ..., "info": "..."}}`` shapes.
    """
    if not isinstance(payload, dict):
        return None
    err = payload.get("error")
    if not err:
        return None
    if isinstance(err, str):
        return err
    if isinstance(err, dict):
        for key in ("info", "message", "type"):
            if err.get(key):
                return str(err[key])
    return str(err)


def _structured_error(response: httpx.Response) -> Optional[str]:
    try:
        return extract_error_message(response.json())
    except ValueError:
        return None


async def get_json(
    url: str,
    *,
    timeout: float = 5.0,
    client: Optional[httpx.AsyncClient] = None,
) -> Dict[str, Any]:
    """GET ``url`` and decode the JSON body.

    An injected ``client`` is used as-is and left open; otherwise a client is
    created for this one call.
    """
    logger.debug("GET %s", url)
    try:
        if client is not None:
            response = await client.get(url, timeout=timeout)
        else:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                response = await own_client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise HttpError(str(e) or e.__class__.__name__) from e

    if response.is_error:
        message = _structured_error(response)
        if message is None:
            message = f"Request failed with status code {response.status_code}"
        raise HttpError(message, status_code=response.status_code)

    try:
        data = response.json()
    except ValueError as e:  # JSON decode
        raise HttpError(f"Invalid JSON from {url}: {e}", response.status_code) from e
    message = extract_error_message(data)
    if message is not None:
        raise HttpError(message, status_code=response.status_code)
    if not isinstance(data, dict):
        raise HttpError(f"Unexpected JSON payload from {url}", response.status_code)
    return data
