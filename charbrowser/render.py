"""Project characters into card view-models and (optionally) HTML.

``render`` overwrites the content region of a :class:`~charbrowser.state.View`
on every call; there is no diffing. ``render_html`` turns whatever the content
region currently holds into markup for a web front end.
"""

import enum
from html import escape
from typing import Iterable, List, NamedTuple, Sequence

from .schemas import Character
from .state import View

EMPTY_STATE_TEXT = "No characters found"


class StatusStyle(str, enum.Enum):
    ALIVE = "status-alive"
    DEAD = "status-dead"
    UNKNOWN = "status-unknown"


DEFAULT_STATUS_STYLE = StatusStyle.UNKNOWN

_STATUS_STYLES = {
    "Alive": StatusStyle.ALIVE,
    "Dead": StatusStyle.DEAD,
}


def status_style(status: str) -> StatusStyle:
    """Badge style for a status; anything but Alive/Dead gets the default."""
    return _STATUS_STYLES.get(status, DEFAULT_STATUS_STYLE)


class CardView(NamedTuple):
    """Everything a front end needs to draw one character card."""

    name: str
    image: str
    status: str
    status_style: StatusStyle
    species: str
    gender: str
    origin: str
    appearances: int


def build_card(ch: Character) -> CardView:
    return CardView(
        name=ch.name,
        image=ch.image,
        status=ch.status,
        status_style=status_style(ch.status),
        species=ch.species,
        gender=ch.gender,
        origin=ch.origin.name,
        appearances=len(ch.episode),
    )


def build_cards(characters: Iterable[Character]) -> List[CardView]:
    return [build_card(ch) for ch in characters]


def render(view: View, characters: Sequence[Character]) -> None:
    """Replace the content region with cards for ``characters``.

    An empty sequence yields the empty-state placeholder and no cards.
    """
    if not characters:
        view.cards = []
        view.placeholder = EMPTY_STATE_TEXT
        return
    view.cards = build_cards(characters)
    view.placeholder = None


_CARD_TEMPLATE = """\
<div class="character-card">
  <div class="card-image-container">
    <img src="{image}" alt="{name}" class="card-image">
    <div class="card-image-overlay"></div>
  </div>
  <div class="card-content">
    <h3 class="card-title">{name}</h3>
    <div class="card-info">
      <div class="info-row">
        <span class="info-label">Status:</span>
        <span class="status-badge {style}">{status}</span>
      </div>
      <div class="info-row">
        <span class="info-label">Species:</span>
        <span class="info-value">{species}</span>
      </div>
      <div class="info-row">
        <span class="info-label">Gender:</span>
        <span class="info-value">{gender}</span>
      </div>
      <div class="info-row">
        <span class="info-label">Origin:</span>
        <span class="info-value">{origin}</span>
      </div>
    </div>
    <div class="card-footer">Appearances: {appearances} episodes</div>
  </div>
</div>"""


def card_html(card: CardView) -> str:
    return _CARD_TEMPLATE.format(
        image=escape(card.image),
        name=escape(card.name),
        style=card.status_style.value,
        status=escape(card.status),
        species=escape(card.species),
        gender=escape(card.gender),
        origin=escape(card.origin),
        appearances=card.appearances,
    )


def render_html(view: View) -> str:
    """Markup for the current content region (cards or empty state)."""
    if view.placeholder is not None:
        return f'<div class="empty-state"><p>{escape(view.placeholder)}</p></div>'
    return "\n".join(card_html(c) for c in view.cards)
