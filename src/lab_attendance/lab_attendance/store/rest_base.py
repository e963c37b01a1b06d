from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List

import requests

from ..core.exceptions import UpstreamStoreError

logger = logging.getLogger(__name__)


@contextmanager
def store_call(operation: str) -> Iterator[None]:
    """Translate transport and HTTP failures into UpstreamStoreError."""
    try:
        yield
    except requests.Timeout as e:
        raise UpstreamStoreError(f"{operation}: store request timed out") from e
    except requests.HTTPError as e:
        raise UpstreamStoreError(f"{operation}: {describe_http_error(e)}") from e
    except requests.RequestException as e:
        raise UpstreamStoreError(f"{operation}: {e}") from e


def describe_http_error(error: requests.HTTPError) -> str:
    response = error.response
    if response is None:
        return str(error)
    detail = ""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        detail = str(body.get("message") or body.get("error") or "")
    return f"store answered {response.status_code}" + (f": {detail}" if detail else "")


def json_rows(response: requests.Response) -> List[Dict[str, Any]]:
    response.raise_for_status()
    if not response.content:
        return []
    try:
        payload = response.json()
    except ValueError as e:
        raise UpstreamStoreError("store answered with a non-JSON body") from e
    if isinstance(payload, dict):
        payload = [payload]
    if not isinstance(payload, list):
        raise UpstreamStoreError(f"store answered with unexpected payload type {type(payload).__name__}")
    bad = [i for i, row in enumerate(payload) if not isinstance(row, dict)]
    if bad:
        raise UpstreamStoreError(f"store answered with non-object rows at positions {bad}")
    logger.debug("store returned %d row(s)", len(payload))
    return payload
