"""Session state and abstract view regions.

``SessionState`` is the data a browser session keeps between interactions;
``View`` is the set of regions a front end draws (loading, error, content,
pagination). Neither knows about the network.
"""

from __future__ import annotations

import enum
from typing import List, Optional, TYPE_CHECKING

from .schemas import Character

if TYPE_CHECKING:
    from .render import CardView


class UIMode(str, enum.Enum):
    LOADING = "loading"
    ERROR = "error"
    CONTENT = "content"


class SessionState:
    """Mutable per-session data, owned by a single controller."""

    def __init__(self) -> None:
        self.current_page: int = 1
        self.all_characters: List[Character] = []
        self.filtered_characters: List[Character] = []
        # bumped for every load; only the latest may write back
        self.latest_request_id: int = 0

    def next_request_id(self) -> int:
        self.latest_request_id += 1
        return self.latest_request_id

    def is_latest(self, request_id: int) -> bool:
        return request_id == self.latest_request_id

    def replace_page(self, page: int, characters: List[Character]) -> None:
        """Swap in a freshly loaded page; resets any active filter."""
        self.all_characters = list(characters)
        self.filtered_characters = list(characters)
        self.current_page = page


class View:
    """Visibility and contents of the four view regions."""

    def __init__(self) -> None:
        self.loading_visible: bool = False
        self.error_visible: bool = False
        self.error_message: str = ""
        self.content_visible: bool = False
        self.cards: List["CardView"] = []
        self.placeholder: Optional[str] = None
        self.pagination_visible: bool = False
        self.page_label: str = ""

    @property
    def mode(self) -> UIMode | None:
        """Primary UI mode derived from the visible regions (None before any load)."""
        if self.loading_visible:
            return UIMode.LOADING
        if self.error_visible:
            return UIMode.ERROR
        if self.content_visible:
            return UIMode.CONTENT
        return None

    def show_loading(self) -> None:
        self.loading_visible = True
        self.content_visible = False
        self.pagination_visible = False

    def hide_loading(self) -> None:
        self.loading_visible = False

    def show_error(self, message: str) -> None:
        self.error_message = message
        self.error_visible = True
        self.content_visible = False

    def hide_error(self) -> None:
        self.error_visible = False

    def show_content(self) -> None:
        self.content_visible = True

    def show_pagination(self, page: int) -> None:
        self.pagination_visible = True
        self.page_label = f"Page {page}"

    def hide_pagination(self) -> None:
        self.pagination_visible = False
