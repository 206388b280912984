"""Generic GET-and-decode helper for upstream JSON resources.

One request per call, no retries.  Transport failures and non-200 statuses
become :class:`FetchError`; bodies that are not JSON of the requested shape
become :class:`DecodeError` after the raw body has been logged.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from src.utils.errors import DecodeError, FetchError
from src.utils.logging import get_logger

_T = TypeVar("_T")

# Upper bound on the body excerpt written to the log on decode failure.
_MAX_LOGGED_BODY = 2000

_logger = get_logger(__name__)


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


async def fetch_json(
    client: httpx.AsyncClient,
    url: str,
    shape: type[_T],
    *,
    resource: str,
) -> _T:
    """GET *url* and validate the JSON body against *shape*.

    Parameters
    ----------
    client:
        Shared async HTTP client; its timeout policy applies.
    url:
        Absolute URL of the resource.
    shape:
        Any type pydantic can validate: a model class or a generic alias
        such as ``list[Artist]``.
    resource:
        Resource name attached to raised errors and log events.

    Raises
    ------
    FetchError
        On transport failure or a status other than 200.
    DecodeError
        If the body is not valid JSON matching *shape*.
    """
    _logger.debug("upstream_fetch", resource=resource, url=url)
    try:
        response = await client.get(url)
    except httpx.HTTPError as exc:
        raise FetchError(f"failed to fetch {url}: {exc}", resource=resource) from exc

    if response.status_code != httpx.codes.OK:
        raise FetchError(
            f"unexpected status code for {url}: {response.status_code}",
            resource=resource,
        )

    try:
        return _adapter(shape).validate_json(response.content)
    except ValidationError as exc:
        _logger.warning(
            "upstream_decode_failed",
            resource=resource,
            url=url,
            errors=exc.error_count(),
            body=response.text[:_MAX_LOGGED_BODY],
        )
        raise DecodeError(f"failed to parse JSON from {url}: {exc}", resource=resource) from exc
