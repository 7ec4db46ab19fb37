from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import select

from ..models import Project
from .publishing import PublishableService


class ProjectsService(PublishableService[Project]):
    model = Project
    label = "Project"
    required_fields = frozenset({"title", "slug", "project_images", "image_pairs"})

    def create(self, data: Dict[str, Any]) -> Project:
        payload = dict(data)
        if payload.get("year") is None:
            payload["year"] = datetime.utcnow().year
        if payload.get("facts") is None:
            payload["facts"] = {}
        return super().create(payload)

    def hero(self) -> Optional[Project]:
        stmt = select(Project).where(Project.is_hero.is_(True)).order_by(Project.updated_at.desc()).limit(1)
        return self.db.execute(stmt).scalar_one_or_none()
