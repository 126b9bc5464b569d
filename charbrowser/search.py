"""Client-side name search over the currently loaded page."""

import logging
from typing import List, Sequence

from . import render
from .schemas import Character
from .state import SessionState, View

log = logging.getLogger(__name__)


def filter_characters(characters: Sequence[Character], term: str) -> List[Character]:
    """Order-preserving case-insensitive substring match on ``name``.

    The term is not trimmed; an empty term matches everything.
    """
    needle = term.lower()
    return [ch for ch in characters if needle in ch.name.lower()]


def apply_filter(state: SessionState, view: View, term: str) -> None:
    """Filter the loaded page, re-render, and toggle pagination.

    Pagination is hidden whenever the trimmed term is non-empty, even if
    nothing matched; the match itself uses the untrimmed term. Only content
    and pagination are touched: in error mode the cards re-render into the
    hidden content region while an empty term still reveals pagination.
    """
    state.filtered_characters = filter_characters(state.all_characters, term)
    render.render(view, state.filtered_characters)

    if term.strip() != "":
        view.hide_pagination()
    else:
        view.show_pagination(state.current_page)

    log.debug(
        "search.applied term=%r matched=%d of=%d",
        term,
        len(state.filtered_characters),
        len(state.all_characters),
    )
