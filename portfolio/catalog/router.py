"""
Route definitions for the catalogue API.

Endpoints under /api/catalog:
- GET    /works                 : visible works for the current query/filters
- POST   /works                 : add a work
- GET    /works/{work_id}       : get one work
- DELETE /works/{work_id}       : delete a work (idempotent)
- GET    /tags                  : tag vocabulary derived from the works
- GET    /tags/predefined       : predefined tags, optionally narrowed by ?q=
- PUT    /search                : set the search query
- POST   /filters/toggle        : toggle a tag filter
- DELETE /filters               : clear every tag filter
- GET    /saved                 : saved works
- POST   /saved/{work_id}/toggle: save/unsave a work
- GET    /favorites             : favourite artists
- POST   /favorites             : favourite an artist
- GET    /favorites/{name}      : is the artist favourited?
- DELETE /favorites/{name}      : unfavourite an artist
"""

from __future__ import annotations

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from ..models import ArtistDraft, FavoriteArtist, Work, WorkDraft
from .errors import WorkValidationError
from .schemas import FilterToggleRequest, SearchRequest, WorkListing
from .store import CatalogStore
from .tags import search_predefined_tags

router = APIRouter(prefix="/api/catalog", tags=["catalog"])


def get_store(request: Request) -> CatalogStore:
    return request.app.state.store


def _listing(store: CatalogStore) -> WorkListing:
    items = store.filtered_works
    return WorkListing(
        total=len(items),
        search_query=store.search_query,
        active_filters=sorted(store.active_filters),
        items=items,
    )


@router.get("/works", response_model=WorkListing)
def list_works(store: CatalogStore = Depends(get_store)) -> WorkListing:
    return _listing(store)


@router.post("/works", response_model=Work)
def add_work(draft: WorkDraft, store: CatalogStore = Depends(get_store)) -> Work:
    try:
        return store.add_work(draft)
    except WorkValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/works/{work_id}", response_model=Work)
def get_work(work_id: int, store: CatalogStore = Depends(get_store)) -> Work:
    work = store.get_work(work_id)
    if work is None:
        raise HTTPException(status_code=404, detail="Work not found")
    return work


@router.delete("/works/{work_id}")
def delete_work(work_id: int, store: CatalogStore = Depends(get_store)):
    store.delete_work(work_id)
    return {"status": "ok"}


@router.get("/tags", response_model=List[str])
def list_tags(store: CatalogStore = Depends(get_store)) -> List[str]:
    return store.get_all_tags()


@router.get("/tags/predefined", response_model=List[str])
def list_predefined_tags(
    q: Optional[str] = Query(default=None, description="Narrow the predefined tags"),
) -> List[str]:
    return search_predefined_tags(q)


@router.put("/search", response_model=WorkListing)
def set_search(body: SearchRequest, store: CatalogStore = Depends(get_store)) -> WorkListing:
    store.set_search_query(body.query)
    return _listing(store)


@router.post("/filters/toggle", response_model=WorkListing)
def toggle_filter(body: FilterToggleRequest, store: CatalogStore = Depends(get_store)) -> WorkListing:
    store.toggle_filter(body.tag)
    return _listing(store)


@router.delete("/filters", response_model=WorkListing)
def clear_filters(store: CatalogStore = Depends(get_store)) -> WorkListing:
    store.clear_filters()
    return _listing(store)


# ---------------------------------------------------------------------------
# Saved works and favourite artists
#
# Saved works are bookmarks of a single work by id. Favourites bookmark an
# artist by exact name, independently of any work.

@router.get("/saved", response_model=List[Work])
def list_saved(store: CatalogStore = Depends(get_store)) -> List[Work]:
    return store.get_saved_works()


@router.post("/saved/{work_id}/toggle")
def toggle_saved(work_id: int, store: CatalogStore = Depends(get_store)) -> Dict[str, bool]:
    return {"saved": store.toggle_save_work(work_id)}


@router.get("/favorites", response_model=List[FavoriteArtist])
def list_favorites(store: CatalogStore = Depends(get_store)) -> List[FavoriteArtist]:
    return store.favorites


@router.post("/favorites")
def add_favorite(artist: ArtistDraft, store: CatalogStore = Depends(get_store)):
    store.add_favorite(artist)
    return {"status": "ok"}


@router.get("/favorites/{name}")
def is_favorited(name: str, store: CatalogStore = Depends(get_store)) -> Dict[str, bool]:
    return {"favorited": store.is_favorited(name)}


@router.delete("/favorites/{name}")
def remove_favorite(name: str, store: CatalogStore = Depends(get_store)):
    store.remove_favorite(name)
    return {"status": "ok"}
