# --- keep this shim at the very top ---
import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
# --------------------------------------

from typing import Any, Dict, List

import httpx
import pytest
import pytest_asyncio

from charbrowser.controller import CharacterBrowser
from charbrowser.schemas import Character


def make_character(
    name: str,
    status: str = "Alive",
    episodes: int = 1,
    **overrides: Any,
) -> Dict[str, Any]:
    """Raw upstream-shaped character dict."""
    raw = {
        "id": len(name),
        "name": name,
        "status": status,
        "species": "Human",
        "type": "",
        "gender": "Male",
        "origin": {"name": "Earth (C-137)", "url": ""},
        "location": {"name": "Citadel of Ricks", "url": ""},
        "image": f"https://rickandmortyapi.com/api/character/avatar/{name}.jpeg",
        "episode": [
            f"https://rickandmortyapi.com/api/episode/{i}" for i in range(1, episodes + 1)
        ],
        "url": "",
        "created": "2017-11-04T18:48:46.250Z",
    }
    raw.update(overrides)
    return raw


def page_payload(*names: str) -> Dict[str, Any]:
    return {
        "info": {"count": 826, "pages": 42, "next": None, "prev": None},
        "results": [make_character(n) for n in names],
    }


def characters(*names: str) -> List[Character]:
    return [Character.model_validate(make_character(n)) for n in names]


@pytest.fixture
def rick_and_morty() -> List[Character]:
    return characters("Rick Sanchez", "Morty Smith", "Summer Smith", "Birdperson")


@pytest_asyncio.fixture
async def mock_pages():
    """Factory: MockTransport-backed client serving ``{page: payload_or_status}``.

    Returns ``(client, seen)`` where ``seen`` lists requested page numbers.
    Every client built here is closed at teardown.
    """
    clients: List[httpx.AsyncClient] = []

    def _factory(pages: Dict[int, Any]):
        seen: List[int] = []

        def handler(request: httpx.Request) -> httpx.Response:
            page = int(request.url.params["page"])
            seen.append(page)
            body = pages.get(page, 404)
            if isinstance(body, int):
                return httpx.Response(body, json={"error": "There is nothing here"})
            return httpx.Response(200, json=body)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client, seen

    yield _factory

    for client in clients:
        await client.aclose()


@pytest.fixture
def browser_for(mock_pages):
    def _factory(pages: Dict[int, Any]):
        client, seen = mock_pages(pages)
        return CharacterBrowser(client=client), seen

    return _factory
