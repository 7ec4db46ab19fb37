from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class InstagramItem(BaseModel):
    id: str
    media_url: str
    permalink: Optional[str] = None
    caption: Optional[str] = None
    media_type: Optional[str] = None
    timestamp: Optional[datetime] = None


class InstagramOut(BaseModel):
    id: str
    media_url: str
    permalink: Optional[str] = None
    caption: str
    media_type: str
    timestamp: datetime
    fetched_at: datetime

    class Config:
        from_attributes = True
