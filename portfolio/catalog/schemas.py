"""
Pydantic schema definitions for the catalog module.

``FilterState`` is the derived view owned by the filter engine; it is
never persisted. ``WorkListing`` bundles the visible works with the
state that produced them so that clients can render the grid and the
active filter chips from a single response.
"""

from typing import List, Set

from pydantic import BaseModel, Field

from ..models import Work


class FilterState(BaseModel):
    """Snapshot of the filter engine.

    ``search_query`` is the raw query as typed (an empty string matches
    every work). ``active_filters`` holds normalized tags (an empty set
    matches every work). ``filtered_works`` keeps the catalog order.
    """

    search_query: str = ""
    active_filters: Set[str] = Field(default_factory=set)
    filtered_works: List[Work] = Field(default_factory=list)


class WorkListing(BaseModel):
    """Response of the listing endpoints."""

    total: int
    search_query: str
    active_filters: List[str]
    items: List[Work]


class SearchRequest(BaseModel):
    query: str = ""


class FilterToggleRequest(BaseModel):
    tag: str
