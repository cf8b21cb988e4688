# portfolio/models.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class WorkDraft(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image: str = ""
    title: str = ""
    description: str = ""
    author: str = ""
    tags: List[str] = Field(default_factory=list)
    instagram_url: Optional[str] = Field(default=None, alias="instagramUrl")


class Work(WorkDraft):
    # Works never change once created; deletion is the only mutation.
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int


class ArtistDraft(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    # Informational only, never recomputed from the catalog.
    work_count: int = Field(default=1, alias="workCount")


class FavoriteArtist(ArtistDraft):
    added_date: datetime = Field(alias="addedDate")
