"""Fixed-size, 1-based pagination over filtered rosters."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from rosterdb.config import PAGE_SIZE
from rosterdb.models import PlayerRecord


class PageOutOfRange(IndexError):
    """Raised when a page outside ``1..total_pages`` is requested."""

    def __init__(self, page: int, total_pages: int):
        super().__init__(f"page {page} is outside 1..{total_pages}")
        self.page = page
        self.total_pages = total_pages


@dataclass(frozen=True)
class Page:
    players: Tuple[PlayerRecord, ...]
    page: int
    page_size: int
    total_items: int
    total_pages: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def first_index(self) -> int:
        if not self.players:
            return 0
        return (self.page - 1) * self.page_size + 1

    @property
    def last_index(self) -> int:
        if not self.players:
            return 0
        return self.first_index + len(self.players) - 1

    def summary_line(self) -> str:
        if not self.total_items:
            return "No players found"
        return f"Showing {self.first_index}-{self.last_index} of {self.total_items} players"


def total_pages(total_items: int, page_size: int = PAGE_SIZE) -> int:
    return max(1, math.ceil(total_items / page_size))


def clamp_page(page: int, total_items: int, page_size: int = PAGE_SIZE) -> int:
    return min(max(1, page), total_pages(total_items, page_size))


def paginate(
    players: Sequence[PlayerRecord],
    page: int = 1,
    *,
    page_size: int = PAGE_SIZE,
    clamp: bool = False,
) -> Page:
    """Slice one page out of ``players``.

    Out-of-range pages raise ``PageOutOfRange`` unless ``clamp`` is set, in
    which case the nearest valid page is returned instead.
    """

    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")

    count = len(players)
    pages = total_pages(count, page_size)
    if clamp:
        page = clamp_page(page, count, page_size)
    elif page < 1 or page > pages:
        raise PageOutOfRange(page, pages)

    start = (page - 1) * page_size
    end = min(start + page_size, count)
    return Page(
        players=tuple(players[start:end]),
        page=page,
        page_size=page_size,
        total_items=count,
        total_pages=pages,
    )


__all__ = ["Page", "PageOutOfRange", "clamp_page", "paginate", "total_pages"]
