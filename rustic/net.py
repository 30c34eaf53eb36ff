"""
HTTP fetch helpers returning Results instead of raising.

Both variants decode the body as JSON (``mode="json"``) or text
(``mode="string"``). Pass an ``httpx`` client to reuse connections or to
inject a transport. A client passed in is used as is: it keeps its own
timeout and is never closed here. `timeout` only applies to the client
created when none is given.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable

import httpx

from .dispatch import match
from .parsers.types import TextParseError
from .result import Err, Ok

logger = logging.getLogger(__name__)


class FetchError(str, Enum):
    """Transport error kinds reported by fetch.

    Body decoding failures are reported with `TextParseError` kinds.
    """

    FETCH_ERROR = "FetchError"
    RESPONSE_ERROR = "ResponseError"

    def __str__(self) -> str:
        return self.value


FetchResult = Ok[Any] | Err[FetchError] | Err[TextParseError]


async def fetch(
    url: str,
    mode: str = "json",
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float = 10.0,
) -> FetchResult:
    """
    GET `url` and decode the body.

    Returns:
        Ok(body) on a 2xx response that decodes in the requested mode
        Err(FetchError, exc) if the request could not be made
        Err(ResponseError, status_code) on a non-2xx response
        Err(JsonParseError | TextParseError, message) if decoding failed
    """
    decode = _decoder(mode)

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as owned:
                response = await owned.get(url)
        else:
            response = await client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.debug("Fetching %s failed: %s", url, e)
        return Err(FetchError.FETCH_ERROR, e)

    return _read_response(response, decode)


def fetch_sync(
    url: str,
    mode: str = "json",
    *,
    client: httpx.Client | None = None,
    timeout: float = 10.0,
) -> FetchResult:
    """Synchronous variant of `fetch` for non-async call sites."""
    decode = _decoder(mode)

    try:
        if client is None:
            with httpx.Client(timeout=timeout) as owned:
                response = owned.get(url)
        else:
            response = client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.debug("Fetching %s failed: %s", url, e)
        return Err(FetchError.FETCH_ERROR, e)

    return _read_response(response, decode)


def _decoder(mode: str) -> Callable[[httpx.Response], FetchResult]:
    """Pick the body decoder for `mode`; an unknown mode is a Panic."""
    return match(
        mode,
        {
            "json": lambda: _decode_json,
            "string": lambda: _decode_text,
        },
    )


def _read_response(
    response: httpx.Response, decode: Callable[[httpx.Response], FetchResult]
) -> FetchResult:
    if not response.is_success:
        logger.debug("%s answered with status %s", response.url, response.status_code)
        return Err(FetchError.RESPONSE_ERROR, response.status_code)
    return decode(response)


def _decode_json(response: httpx.Response) -> FetchResult:
    try:
        return Ok(response.json())
    except ValueError as e:
        return Err(TextParseError.JSON_PARSE_ERROR, str(e))


def _decode_text(response: httpx.Response) -> FetchResult:
    try:
        return Ok(response.text)
    except (UnicodeDecodeError, LookupError) as e:
        return Err(TextParseError.TEXT_PARSE_ERROR, str(e))
