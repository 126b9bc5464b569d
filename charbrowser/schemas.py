"""Pydantic schemas for the upstream character-list payload."""

from typing import Optional, List
from pydantic import BaseModel, ConfigDict


class _Upstream(BaseModel):
    # upstream adds fields over time; we only keep what we render
    model_config = ConfigDict(extra="ignore", frozen=True)


class Origin(_Upstream):
    name: str
    url: Optional[str] = None


class Character(_Upstream):
    id: Optional[int] = None
    name: str
    status: str
    species: str
    gender: str
    origin: Origin
    image: str
    episode: List[str] = []
    url: Optional[str] = None


class PageInfo(_Upstream):
    count: Optional[int] = None
    pages: Optional[int] = None
    next: Optional[str] = None
    prev: Optional[str] = None


class CharacterPage(_Upstream):
    info: Optional[PageInfo] = None
    results: List[Character]
