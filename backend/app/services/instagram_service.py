from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Sequence

from fastapi import HTTPException, status
from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from ..config import settings
from ..models import InstagramCache
from ..schemas.instagram import InstagramItem, InstagramOut
from ..utils.redis_cache import INSTAGRAM_POSTS_KEY, cache_delete, cache_get_json, cache_set_json


logger = logging.getLogger(__name__)

FEED_LIMIT = 12


class InstagramService:
    """Local mirror of the Instagram feed."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def list_recent(self, limit: int = FEED_LIMIT) -> List[dict]:
        cached = cache_get_json(INSTAGRAM_POSTS_KEY)
        if isinstance(cached, list):
            return cached[:limit]
        # the mirror only holds the last refresh, so it is cached whole
        stmt = select(InstagramCache).order_by(InstagramCache.timestamp.desc(), InstagramCache.fetched_at.desc())
        rows = self.db.execute(stmt).scalars().all()
        items = [InstagramOut.model_validate(r).model_dump(mode="json") for r in rows]
        cache_set_json(INSTAGRAM_POSTS_KEY, items, ttl=settings.INSTAGRAM_CACHE_TTL_SECONDS)
        return items[:limit]

    def refresh(self, items: Sequence[InstagramItem]) -> List[InstagramCache]:
        """Replace the whole mirror: delete every row, then insert the new set.

        The two steps are committed separately, so a failure between them
        leaves the mirror empty until the next refresh.
        """
        self.db.execute(delete(InstagramCache))
        self.db.commit()

        now = datetime.utcnow()
        rows: List[InstagramCache] = []
        seen = set()
        for item in items:
            if item.id in seen:
                logger.warning("instagram refresh: duplicate media id %s skipped", item.id)
                continue
            seen.add(item.id)
            rows.append(
                InstagramCache(
                    id=item.id,
                    media_url=item.media_url,
                    permalink=item.permalink,
                    caption=item.caption or "",
                    media_type=item.media_type or "IMAGE",
                    timestamp=item.timestamp or now,
                    fetched_at=now,
                )
            )
        if rows:
            self.db.add_all(rows)
            self.db.commit()
        cache_delete(INSTAGRAM_POSTS_KEY)
        logger.info("instagram mirror refreshed with %s posts", len(rows))
        return rows

    def delete(self, media_id: str) -> None:
        row = self.db.get(InstagramCache, media_id)
        if not row:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Instagram post not found")
        self.db.delete(row)
        self.db.commit()
        cache_delete(INSTAGRAM_POSTS_KEY)
