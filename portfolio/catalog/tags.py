"""
Tag vocabulary helpers.

Tags are stored on a work exactly as the user selected them. They are
only normalized (stripped and lowercased) when matched against active
filters or when the catalogue's tag vocabulary is derived. The upload
form offers a fixed list of predefined tags, ``PREDEFINED_TAGS``, which
can be narrowed with ``search_predefined_tags()``.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..models import Work

PREDEFINED_TAGS: List[str] = [
    "Logo Design",
    "Brand Identity",
    "Logo Concept",
    "Rebranding",
    "Thumbnail Design",
    "Social Media Design",
    "Banner Design",
    "Ad Creative",
    "Preview Image",
    "Illustration",
    "Vector Illustration",
    "Flat Design",
    "Line Art",
    "UI Design",
    "Web Design",
    "Landing Page Design",
    "Website Mockup",
    "Poster Design",
    "Presentation Slide",
    "Minimal",
]


def normalize_tag(tag: str) -> str:
    """Return ``tag`` stripped of surrounding whitespace and lowercased."""
    return tag.strip().lower()


def collect_tags(works: Iterable[Work]) -> List[str]:
    """Derive the sorted, deduplicated tag vocabulary of ``works``.

    Parameters
    ----------
    works : Iterable[Work]
        The works whose tags are collected.

    Returns
    -------
    List[str]
        Every distinct normalized tag, sorted ascending. Nothing is
        cached: the works may change between calls.
    """
    tag_set = {normalize_tag(tag) for work in works for tag in work.tags}
    return sorted(tag_set)


def search_predefined_tags(query: Optional[str] = None) -> List[str]:
    """Return the predefined tags containing ``query`` (case-insensitive).

    The predefined order is kept. An empty or ``None`` query returns the
    whole vocabulary.
    """
    needle = (query or "").lower()
    return [tag for tag in PREDEFINED_TAGS if needle in tag.lower()]
