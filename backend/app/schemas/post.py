from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional, List
from uuid import UUID


def _unique_tags(tags: Optional[List[str]]) -> Optional[List[str]]:
    if tags is None:
        return None
    out: List[str] = []
    seen = set()
    for tag in tags:
        clean = tag.strip()
        if clean and clean not in seen:
            out.append(clean)
            seen.add(clean)
    return out


class PostCreate(BaseModel):
    title: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1)
    excerpt: Optional[str] = ""
    content: Optional[str] = ""
    cover_image_path: Optional[str] = ""
    tags: List[str] = Field(default_factory=list)
    is_published: bool = False

    @field_validator("tags")
    @classmethod
    def dedupe_tags(cls, value):
        return _unique_tags(value)


class PostUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = Field(None, min_length=1)
    excerpt: Optional[str] = None
    content: Optional[str] = None
    cover_image_path: Optional[str] = None
    tags: Optional[List[str]] = None
    is_published: Optional[bool] = None

    @field_validator("tags")
    @classmethod
    def dedupe_tags(cls, value):
        return _unique_tags(value)


class PostOut(BaseModel):
    id: UUID
    slug: str
    title: str
    excerpt: Optional[str] = None
    content: Optional[str] = None
    cover_image_path: Optional[str] = None
    tags: List[str] = []
    is_published: bool
    published_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
