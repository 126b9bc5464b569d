"""Browser session controller: page loads, navigation, and search.

A :class:`CharacterBrowser` owns one :class:`~charbrowser.state.SessionState`
and one :class:`~charbrowser.state.View`. Front ends wire their events to it:

- initial load  -> ``start()``
- search input  -> ``apply_filter(value)`` on every keystroke
- previous/next -> ``prev_page()`` / ``next_page()``

Loads may overlap. Each load takes a request id, and only the most recently
issued one is allowed to write state or view when it completes.
"""

import logging

import httpx

from . import api, render, search
from .errors import FetchError
from .logging_config import configure_logging
from .state import SessionState, View

log = logging.getLogger(__name__)


class CharacterBrowser:
    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        state: SessionState | None = None,
        view: View | None = None,
    ) -> None:
        """Create a session.

        Args:
            client: Optional shared `httpx.AsyncClient`; the caller owns its
                lifetime. Without one, each load opens its own client.
            state: Session state to drive (a fresh one by default).
            view: View regions to mutate (a fresh one by default).
        """
        self._client = client
        self.state = state or SessionState()
        self.view = view or View()

    async def start(self) -> None:
        """Configure logging (once per process) and load page 1."""
        configure_logging()
        log.info("session.start")
        await self.load_page(1)

    async def load_page(self, page: int) -> None:
        """Load ``page`` and show it, or show why it could not be loaded.

        Fetch failures never escape: they end up in the error region and the
        session stays usable. If another load was issued while this one was
        in flight, this one's outcome is dropped.
        """
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")

        request_id = self.state.next_request_id()
        self.view.show_loading()
        self.view.hide_error()
        log.info("fetch.start page=%d request_id=%d", page, request_id)

        try:
            result = await api.fetch_page(page, client=self._client)
            if self._is_stale(page, request_id):
                return
            self.state.replace_page(page, result.results)
            render.render(self.view, self.state.filtered_characters)
            self.view.show_content()
            self.view.show_pagination(self.state.current_page)
            log.info("fetch.ok page=%d count=%d", page, len(result.results))
        except FetchError as exc:
            if self._is_stale(page, request_id):
                return
            log.warning("fetch.failed page=%d error=%r", page, exc)
            self.view.show_error(str(exc))
        finally:
            # a newer load owns the loading indicator
            if self.state.is_latest(request_id):
                self.view.hide_loading()

    def _is_stale(self, page: int, request_id: int) -> bool:
        if self.state.is_latest(request_id):
            return False
        log.info(
            "fetch.stale_discarded page=%d request_id=%d latest=%d",
            page,
            request_id,
            self.state.latest_request_id,
        )
        return True

    def apply_filter(self, term: str) -> None:
        search.apply_filter(self.state, self.view, term)

    async def next_page(self) -> None:
        await self.load_page(self.state.current_page + 1)

    async def prev_page(self) -> None:
        """Load the previous page; no-op on page 1."""
        if self.state.current_page <= 1:
            log.debug("nav.prev_ignored page=%d", self.state.current_page)
            return
        await self.load_page(self.state.current_page - 1)
