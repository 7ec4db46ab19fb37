from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional, Literal
from uuid import UUID


ListingStatus = Literal["coming_soon", "for_sale", "sold"]


class ListingCreate(BaseModel):
    title: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1)
    subtitle: Optional[str] = None
    description: Optional[str] = None
    facts: Optional[dict] = None
    location: Optional[dict] = None
    status: ListingStatus = "for_sale"
    hero_image_path: Optional[str] = None
    hero_video_url: Optional[str] = None
    brochure_pdf_path: Optional[str] = None
    is_published: bool = True


class ListingUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    slug: Optional[str] = Field(None, min_length=1)
    subtitle: Optional[str] = None
    description: Optional[str] = None
    facts: Optional[dict] = None
    location: Optional[dict] = None
    status: Optional[ListingStatus] = None
    hero_image_path: Optional[str] = None
    hero_video_url: Optional[str] = None
    brochure_pdf_path: Optional[str] = None
    is_published: Optional[bool] = None


class ListingOut(BaseModel):
    id: UUID
    slug: str
    title: str
    subtitle: Optional[str] = None
    description: Optional[str] = None
    facts: Optional[dict] = None
    location: Optional[dict] = None
    status: str
    hero_image_path: Optional[str] = None
    hero_video_url: Optional[str] = None
    brochure_pdf_path: Optional[str] = None
    is_published: bool
    published_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
