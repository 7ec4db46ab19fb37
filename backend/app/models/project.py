from __future__ import annotations

import uuid
from datetime import datetime
from sqlalchemy import String, Integer, Boolean, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, JSONType


class Project(Base):
    __tablename__ = "projects"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    slug: Mapped[str] = mapped_column(String(200), unique=True, nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    year: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
    facts: Mapped[dict | None] = mapped_column(JSONType, nullable=True)
    hero_image_path: Mapped[str | None] = mapped_column(String(500), nullable=True)
    # ordered lists of storage paths / {before, after, caption} pairs
    project_images: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    image_pairs: Mapped[list] = mapped_column(JSONType, nullable=False, default=list)
    is_hero: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)
    is_published: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False, index=True)
    published_at: Mapped[datetime | None] = mapped_column(nullable=True)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
