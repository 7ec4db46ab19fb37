from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional, List, Any
from uuid import UUID


class ProjectCreate(BaseModel):
    title: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1)
    summary: Optional[str] = ""
    content: Optional[str] = ""
    year: Optional[int] = None
    facts: Optional[dict] = None
    hero_image_path: Optional[str] = ""
    project_images: List[Any] = Field(default_factory=list)
    image_pairs: List[Any] = Field(default_factory=list)
    is_published: bool = False


class ProjectUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = Field(None, min_length=1)
    summary: Optional[str] = None
    content: Optional[str] = None
    year: Optional[int] = None
    facts: Optional[dict] = None
    hero_image_path: Optional[str] = None
    project_images: Optional[List[Any]] = None
    image_pairs: Optional[List[Any]] = None
    is_published: Optional[bool] = None


class ProjectOut(BaseModel):
    id: UUID
    slug: str
    title: str
    summary: Optional[str] = None
    content: Optional[str] = None
    year: Optional[int] = None
    facts: Optional[dict] = None
    hero_image_path: Optional[str] = None
    project_images: List[Any] = []
    image_pairs: List[Any] = []
    is_hero: bool
    is_published: bool
    published_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
