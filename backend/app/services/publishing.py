from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import Base


logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Base)


def apply_publish_state(entity: Any, is_published: bool, now: Optional[datetime] = None) -> None:
    """Set is_published and derive published_at from the transition.

    Moving to published stamps the current time; an entity that is already
    published keeps its original stamp. Moving to draft clears it.
    """
    now = now or datetime.utcnow()
    if is_published:
        if not entity.is_published or entity.published_at is None:
            entity.published_at = now
    else:
        entity.published_at = None
    entity.is_published = is_published
    entity.updated_at = now


class PublishableService(Generic[T]):
    """CRUD for the slugged, publishable content tables (projects, posts, listings)."""

    model: Type[T]
    label: str = "Item"
    # columns that must never be written as NULL by a partial update
    required_fields: frozenset = frozenset({"title", "slug"})

    def __init__(self, db: Session) -> None:
        self.db = db

    def list(self, *, published_only: bool = False, limit: Optional[int] = None) -> List[T]:
        stmt = select(self.model)
        if published_only:
            stmt = stmt.where(self.model.is_published.is_(True))
        stmt = stmt.order_by(self.model.created_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    def get(self, entity_id: UUID) -> T:
        entity = self.db.get(self.model, entity_id)
        if not entity:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{self.label} not found")
        return entity

    def get_by_slug(self, slug: str, *, published_only: bool = True) -> T:
        stmt = select(self.model).where(self.model.slug == slug)
        if published_only:
            stmt = stmt.where(self.model.is_published.is_(True))
        entity = self.db.execute(stmt).scalar_one_or_none()
        if not entity:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{self.label} not found")
        return entity

    def _ensure_slug_free(self, slug: str, exclude_id: Optional[UUID] = None) -> None:
        stmt = select(self.model.id).where(self.model.slug == slug)
        if exclude_id is not None:
            stmt = stmt.where(self.model.id != exclude_id)
        if self.db.execute(stmt).first():
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Slug '{slug}' is already in use")

    def create(self, data: Dict[str, Any]) -> T:
        self._ensure_slug_free(data["slug"])
        now = datetime.utcnow()
        entity = self.model(**data)
        entity.published_at = now if data.get("is_published") else None
        entity.created_at = now
        entity.updated_at = now
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        logger.info("created %s id=%s slug=%s", self.label.lower(), entity.id, entity.slug)
        return entity

    def update(self, entity_id: UUID, data: Dict[str, Any]) -> T:
        entity = self.get(entity_id)
        changes = dict(data)
        is_published = changes.pop("is_published", None)
        if changes.get("slug") and changes["slug"] != entity.slug:
            self._ensure_slug_free(changes["slug"], exclude_id=entity.id)
        for key, value in changes.items():
            if value is None and key in self.required_fields:
                continue
            setattr(entity, key, value)
        if is_published is not None:
            apply_publish_state(entity, is_published)
        else:
            entity.updated_at = datetime.utcnow()
        self.db.commit()
        self.db.refresh(entity)
        logger.info("updated %s id=%s fields=%s", self.label.lower(), entity.id, sorted(data))
        return entity

    def set_published(self, entity_id: UUID, is_published: bool) -> T:
        entity = self.get(entity_id)
        apply_publish_state(entity, is_published)
        self.db.commit()
        self.db.refresh(entity)
        logger.info("%s id=%s is_published=%s", self.label.lower(), entity.id, entity.is_published)
        return entity

    def delete(self, entity_id: UUID) -> None:
        entity = self.get(entity_id)
        self.db.delete(entity)
        self.db.commit()
        logger.info("deleted %s id=%s", self.label.lower(), entity_id)
