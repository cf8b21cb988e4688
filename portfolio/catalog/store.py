"""
Catalog store for the portfolio gallery.

``CatalogStore`` owns the three persisted collections (works, favourite
artists and saved work ids) and the filter engine that derives the
visible subset of works. Every mutator writes its collection back to
the injected blob store under its own key and, when works change,
triggers a recomputation of the filtered view.

Stores are built explicitly, either directly with a blob store (tests,
embedding in another application) or from configuration via
``create_store()``.
"""

from __future__ import annotations

import json
import logging
import threading
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional, Set

from pydantic import TypeAdapter, ValidationError

from ..config import Settings, get_settings
from ..models import ArtistDraft, FavoriteArtist, Work, WorkDraft
from ..storage import BlobStore, JsonFileBlobStore, MemoryBlobStore
from .errors import MalformedPersistedData, WorkValidationError
from .filters import FilterEngine
from .schemas import FilterState
from .tags import collect_tags


logger = logging.getLogger(__name__)

WORKS_KEY = "portfolioWorks"
FAVORITES_KEY = "favoriteArtists"
SAVED_WORKS_KEY = "savedWorks"

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _dedup_preserve_order(ids: List[int]) -> List[int]:
    out: List[int] = []
    seen = set()
    for i in ids:
        if i in seen:
            continue
        out.append(i)
        seen.add(i)
    return out


class CatalogStore:
    """In-memory catalogue backed by a key/value blob store.

    Parameters
    ----------
    blob_store : BlobStore
        Where each collection is persisted as a JSON string.
    clock : Callable[[], datetime], optional
        Source of the current time, used for work ids and the
        ``added_date`` of favourites. Defaults to UTC now.
    strict : bool
        When ``True`` (default) malformed persisted data raises
        ``MalformedPersistedData`` from the constructor. When ``False``
        the affected collection is loaded empty and a warning is logged.
    """

    def __init__(
        self,
        blob_store: BlobStore,
        clock: Optional[Clock] = None,
        strict: bool = True,
    ) -> None:
        self.blob_store = blob_store
        self.clock: Clock = clock or _utcnow
        self.strict = strict
        # Re-entrant: toggle_favorite goes through add_favorite/remove_favorite.
        self._lock = threading.RLock()

        self._works: List[Work] = self._load(WORKS_KEY, List[Work])
        self._favorites: List[FavoriteArtist] = self._load(FAVORITES_KEY, List[FavoriteArtist])
        self._saved_works: List[int] = _dedup_preserve_order(self._load(SAVED_WORKS_KEY, List[int]))
        # Ids are never handed out twice, even after the newest work is
        # deleted, so a new work cannot inherit a stale saved-work entry.
        self._last_id: int = max([w.id for w in self._works] + self._saved_works, default=0)

        self.filter_engine = FilterEngine(lambda: self._works)
        logger.info(
            "Catalog loaded: %d works, %d favourites, %d saved works",
            len(self._works),
            len(self._favorites),
            len(self._saved_works),
        )

    # ------------------------------------------------------------------
    # Persistence

    def _load(self, key: str, shape: Any) -> Any:
        raw = self.blob_store.get(key)
        if raw is None:
            return []
        try:
            return TypeAdapter(shape).validate_python(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as exc:
            if self.strict:
                raise MalformedPersistedData(key, str(exc)) from exc
            logger.warning("Ignoring malformed data under %r: %s", key, exc)
            return []

    def _dump(self, key: str, payload: Any) -> None:
        self.blob_store.set(key, json.dumps(payload, ensure_ascii=False))

    def _save_works(self) -> None:
        self._dump(WORKS_KEY, [w.model_dump(mode="json", by_alias=True) for w in self._works])

    def _save_favorites(self) -> None:
        self._dump(FAVORITES_KEY, [f.model_dump(mode="json", by_alias=True) for f in self._favorites])

    def _save_saved_works(self) -> None:
        self._dump(SAVED_WORKS_KEY, list(self._saved_works))

    # ------------------------------------------------------------------
    # Works

    @property
    def works(self) -> List[Work]:
        return list(self._works)

    def _next_id(self) -> int:
        stamp = int(self.clock().timestamp() * 1000)
        self._last_id = max(stamp, self._last_id + 1)
        return self._last_id

    def add_work(self, draft: WorkDraft) -> Work:
        """Add a work to the catalogue and return it with its new id.

        Field contents are not validated except for tags: at least one
        non-blank tag is required.

        Raises
        ------
        WorkValidationError
            If the draft carries no usable tag.
        """
        if not any(tag.strip() for tag in draft.tags):
            raise WorkValidationError("Please select at least one tag")

        with self._lock:
            work = Work(id=self._next_id(), **draft.model_dump())
            self._works.append(work)
            self._save_works()
            self.filter_engine.apply_filters()
        logger.info("Added work %d (%r by %r)", work.id, work.title, work.author)
        return work

    def get_work(self, work_id: int) -> Optional[Work]:
        return next((w for w in self._works if w.id == work_id), None)

    def delete_work(self, work_id: int) -> bool:
        with self._lock:
            remaining = [w for w in self._works if w.id != work_id]
            removed = len(remaining) != len(self._works)
            self._works = remaining
            self._save_works()
            self.filter_engine.apply_filters()
        if removed:
            logger.info("Deleted work %d", work_id)
        else:
            logger.debug("Delete of unknown work %d ignored", work_id)
        return removed

    def get_all_tags(self) -> List[str]:
        return collect_tags(self._works)

    # ------------------------------------------------------------------
    # Saved works

    @property
    def saved_works(self) -> List[int]:
        return list(self._saved_works)

    def toggle_save_work(self, work_id: int) -> bool:
        """Save ``work_id`` if it is not saved yet, unsave it otherwise.

        Returns the new saved state. The saved list is persisted on every
        call.
        """
        with self._lock:
            if work_id in self._saved_works:
                self._saved_works = [i for i in self._saved_works if i != work_id]
                saved = False
            else:
                self._saved_works.append(work_id)
                saved = True
            self._save_saved_works()
        logger.info("Work %d %s", work_id, "saved" if saved else "unsaved")
        return saved

    def is_work_saved(self, work_id: int) -> bool:
        return work_id in self._saved_works

    def get_saved_works(self) -> List[Work]:
        """Saved works still present in the catalogue, in saved order."""
        by_id = {w.id: w for w in self._works}
        return [by_id[i] for i in self._saved_works if i in by_id]

    # ------------------------------------------------------------------
    # Favourite artists

    @property
    def favorites(self) -> List[FavoriteArtist]:
        return list(self._favorites)

    def add_favorite(self, artist: ArtistDraft) -> bool:
        with self._lock:
            # Names are matched exactly, unlike tags.
            if self.is_favorited(artist.name):
                logger.debug("Artist %r already favourited", artist.name)
                return False
            self._favorites.append(
                FavoriteArtist(
                    name=artist.name,
                    work_count=artist.work_count,
                    added_date=self.clock(),
                )
            )
            self._save_favorites()
        logger.info("Favourited artist %r", artist.name)
        return True

    def remove_favorite(self, name: str) -> bool:
        with self._lock:
            remaining = [f for f in self._favorites if f.name != name]
            removed = len(remaining) != len(self._favorites)
            self._favorites = remaining
            self._save_favorites()
        if removed:
            logger.info("Unfavourited artist %r", name)
        return removed

    def is_favorited(self, name: str) -> bool:
        return any(f.name == name for f in self._favorites)

    def toggle_favorite(self, artist: ArtistDraft) -> bool:
        """Favourite ``artist`` or remove it; returns the new state."""
        with self._lock:
            if self.is_favorited(artist.name):
                self.remove_favorite(artist.name)
                return False
            self.add_favorite(artist)
            return True

    # ------------------------------------------------------------------
    # Filtering

    @property
    def filtered_works(self) -> List[Work]:
        return list(self.filter_engine.filtered_works)

    @property
    def search_query(self) -> str:
        return self.filter_engine.search_query

    @property
    def active_filters(self) -> Set[str]:
        return set(self.filter_engine.active_filters)

    @property
    def filter_state(self) -> FilterState:
        return self.filter_engine.state

    def apply_filters(self) -> List[Work]:
        with self._lock:
            return self.filter_engine.apply_filters()

    def set_search_query(self, query: str) -> List[Work]:
        with self._lock:
            return self.filter_engine.set_search_query(query)

    def toggle_filter(self, tag: str) -> List[Work]:
        with self._lock:
            return self.filter_engine.toggle_filter(tag)

    def clear_filters(self) -> List[Work]:
        with self._lock:
            return self.filter_engine.clear_filters()


def create_store(settings: Optional[Settings] = None) -> CatalogStore:
    """Build a ``CatalogStore`` from configuration."""
    settings = settings or get_settings()
    if settings.STORAGE == "memory":
        blob_store: BlobStore = MemoryBlobStore()
    else:
        blob_store = JsonFileBlobStore(settings.DATA_DIR)
    return CatalogStore(blob_store, strict=settings.STRICT_LOAD)
