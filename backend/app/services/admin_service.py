from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, List
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import select, update, delete
from sqlalchemy.orm import Session

from ..models import Project, Post


logger = logging.getLogger(__name__)

# storage prefixes used before images moved into the shared bucket
LEGACY_POST_IMAGE_PREFIX = "post-images/"
LEGACY_PROJECT_IMAGE_PREFIX = "project-images/"


class AdminService:
    def __init__(self, db: Session) -> None:
        self.db = db

    def set_hero_project(self, project_id: UUID) -> Project:
        """Flag one project as the homepage hero.

        Two separate commits: clear every flag, then set the new one. A failure
        in between leaves no hero until the next successful call.
        """
        project = self.db.get(Project, project_id)
        if not project:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")

        now = datetime.utcnow()
        self.db.execute(
            update(Project)
            .where(Project.is_hero.is_(True))
            .values(is_hero=False, updated_at=now)
        )
        self.db.commit()

        self.db.execute(
            update(Project)
            .where(Project.id == project_id)
            .values(is_hero=True, updated_at=now)
        )
        self.db.commit()
        self.db.refresh(project)
        logger.info("hero project set to id=%s slug=%s", project.id, project.slug)
        return project

    def cleanup_duplicates(self) -> Dict[str, Dict[str, object]]:
        post_ids: List[UUID] = list(
            self.db.execute(
                select(Post.id).where(Post.cover_image_path.startswith(LEGACY_POST_IMAGE_PREFIX, autoescape=True))
            ).scalars()
        )
        project_ids: List[UUID] = list(
            self.db.execute(
                select(Project.id).where(Project.hero_image_path.startswith(LEGACY_PROJECT_IMAGE_PREFIX, autoescape=True))
            ).scalars()
        )
        if post_ids:
            self.db.execute(delete(Post).where(Post.id.in_(post_ids)))
        if project_ids:
            self.db.execute(delete(Project).where(Project.id.in_(project_ids)))
        self.db.commit()
        logger.info("cleanup removed posts=%s projects=%s", len(post_ids), len(project_ids))
        return {
            "posts": {"count": len(post_ids), "ids": [str(i) for i in post_ids]},
            "projects": {"count": len(project_ids), "ids": [str(i) for i in project_ids]},
        }
