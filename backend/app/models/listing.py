from __future__ import annotations

import uuid
from datetime import datetime
from sqlalchemy import String, Boolean, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, JSONType


LISTING_STATUSES = ("coming_soon", "for_sale", "sold")


class Listing(Base):
    __tablename__ = "listings"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    slug: Mapped[str] = mapped_column(String(200), unique=True, nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    subtitle: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    facts: Mapped[dict | None] = mapped_column(JSONType, nullable=True)  # bedrooms, bathrooms, built_area_sqm, ...
    location: Mapped[dict | None] = mapped_column(JSONType, nullable=True)  # latitude, longitude, address, ...
    status: Mapped[str] = mapped_column(String(20), default="for_sale", nullable=False, index=True)
    hero_image_path: Mapped[str | None] = mapped_column(String(500), nullable=True)
    hero_video_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    brochure_pdf_path: Mapped[str | None] = mapped_column(String(500), nullable=True)
    is_published: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)
    published_at: Mapped[datetime | None] = mapped_column(nullable=True)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
