"""
Search and tag filtering over the catalogue.

The ``FilterEngine`` owns the current search query and the set of active
tag filters, and recomputes the visible subset of works every time
either of them (or the works themselves) change. Recomputation is a
full pass, O(works x tags-per-work), which is fine for a locally stored
portfolio.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Sequence, Set

from ..models import Work
from .schemas import FilterState
from .tags import normalize_tag


logger = logging.getLogger(__name__)


def matches_search(work: Work, query: str) -> bool:
    """Case-insensitive substring match on title, description or author."""
    if query == "":
        return True
    needle = query.lower()
    return (
        needle in work.title.lower()
        or needle in work.description.lower()
        or needle in work.author.lower()
    )


def matches_tags(work: Work, active_filters: Set[str]) -> bool:
    """True when no filter is active or any normalized work tag is active."""
    if not active_filters:
        return True
    return any(normalize_tag(tag) in active_filters for tag in work.tags)


class FilterEngine:
    """Derive the filtered view of a collection of works.

    Parameters
    ----------
    source : Callable[[], Sequence[Work]]
        Returns the current works, in catalog order. It is called on
        every recomputation so the engine always reads the live
        collection instead of a copy.
    """

    def __init__(self, source: Callable[[], Sequence[Work]]) -> None:
        self._source = source
        self.search_query: str = ""
        self.active_filters: Set[str] = set()
        self.filtered_works: List[Work] = list(source())

    def apply_filters(self) -> List[Work]:
        query = self.search_query
        active = self.active_filters
        self.filtered_works = [
            work
            for work in self._source()
            if matches_search(work, query) and matches_tags(work, active)
        ]
        logger.debug(
            "Filters applied (query=%r, tags=%s): %d works visible",
            query,
            sorted(active),
            len(self.filtered_works),
        )
        return self.filtered_works

    def set_search_query(self, query: str) -> List[Work]:
        # Stored raw; only lowercased at match time.
        self.search_query = query
        return self.apply_filters()

    def toggle_filter(self, tag: str) -> List[Work]:
        normalized = normalize_tag(tag)
        if normalized in self.active_filters:
            self.active_filters.discard(normalized)
        else:
            self.active_filters.add(normalized)
        return self.apply_filters()

    def clear_filters(self) -> List[Work]:
        self.active_filters.clear()
        return self.apply_filters()

    @property
    def state(self) -> FilterState:
        return FilterState(
            search_query=self.search_query,
            active_filters=set(self.active_filters),
            filtered_works=list(self.filtered_works),
        )
