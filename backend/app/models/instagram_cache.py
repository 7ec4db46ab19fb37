from __future__ import annotations

from datetime import datetime
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class InstagramCache(Base):
    __tablename__ = "instagram_cache"

    # media id as issued by Instagram
    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    media_url: Mapped[str] = mapped_column(String(1000), nullable=False)
    permalink: Mapped[str | None] = mapped_column(String(500), nullable=True)
    caption: Mapped[str] = mapped_column(Text, nullable=False, default="")
    media_type: Mapped[str] = mapped_column(String(20), nullable=False, default="IMAGE")
    timestamp: Mapped[datetime] = mapped_column(default=datetime.utcnow, nullable=False)
    fetched_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, nullable=False)
