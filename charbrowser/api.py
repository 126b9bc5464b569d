"""External Rick & Morty API client.

Fetches a single page of the character list and maps every way that can fail
onto the taxonomy in :mod:`charbrowser.errors`. No retries and no timeout:
a failed load is surfaced as-is and re-triggered through navigation.
"""

import json
import logging
from typing import Any, Dict

import httpx
from pydantic import ValidationError

from .errors import HttpStatusError, MalformedResponseError, TransportError
from .schemas import CharacterPage

BASE_URL = "https://rickandmortyapi.com/api"
CHARACTER_URL = f"{BASE_URL}/character"

log = logging.getLogger(__name__)


async def _get(client: httpx.AsyncClient, url: str, params: Dict[str, Any]):
    """Issue the GET and translate transport failures and non-2xx statuses.

    Args:
        client: An open `httpx.AsyncClient`.
        url: Target URL.
        params: Query parameters.

    Returns:
        The successful `httpx.Response`.

    Raises:
        TransportError: If no response was received.
        HttpStatusError: If the response status is not 2xx.
    """
    try:
        r = await client.get(url, params=params, timeout=None)
    except httpx.HTTPError as exc:
        log.warning("upstream.transport_error url=%s err=%r", url, exc)
        raise TransportError(f"Network error: {exc}") from exc

    if not r.is_success:
        log.warning(
            "upstream.bad_status url=%s params=%s status=%d",
            url,
            params,
            r.status_code,
        )
        raise HttpStatusError(r.status_code)
    return r


def parse_character_page(resp: httpx.Response) -> CharacterPage:
    """Decode a character-list response body.

    Raises:
        MalformedResponseError: If the body is not JSON or lacks ``results``.
    """
    try:
        data = resp.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedResponseError(f"Invalid JSON in response: {exc}") from exc

    try:
        return CharacterPage.model_validate(data)
    except ValidationError as exc:
        n = exc.error_count()
        raise MalformedResponseError(
            f"Unexpected response shape ({n} validation error{'s' if n != 1 else ''})"
        ) from exc


async def fetch_page(
    page: int, client: httpx.AsyncClient | None = None
) -> CharacterPage:
    """Fetch one page of characters.

    Args:
        page: 1-based page number. Upper bounds are left to the upstream API,
            which answers out-of-range pages with a 404.
        client: Optional shared client; when omitted a short-lived one is used.

    Returns:
        The parsed `CharacterPage`.

    Raises:
        TransportError, HttpStatusError, MalformedResponseError
    """
    params = {"page": page}
    if client is not None:
        resp = await _get(client, CHARACTER_URL, params)
    else:
        async with httpx.AsyncClient() as own:
            resp = await _get(own, CHARACTER_URL, params)
    return parse_character_page(resp)
