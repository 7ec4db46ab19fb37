from __future__ import annotations

import copy
from typing import Any, Dict, Iterable, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select

from ..models import SiteSetting


CONTENT_LIMITS_KEY = "content_limits"
INTEGRATIONS_KEY = "integrations"

DEFAULT_CONTENT_LIMITS: Dict[str, Any] = {
    "frontpage": {
        "projects": 3,
        "editorials": 10,
        "instagram": 3,
    }
}

DEFAULT_INTEGRATIONS: Dict[str, Any] = {
    "hubspot": {"enabled": False, "api_key": "", "portal_id": ""},
    "airtable": {"enabled": False, "api_key": "", "base_id": "", "table_id": ""},
    "google_analytics": {"enabled": False, "measurement_id": "", "tracking_id": ""},
}


def is_content_limits(value: Any) -> bool:
    if not isinstance(value, dict):
        return False
    frontpage = value.get("frontpage")
    if not isinstance(frontpage, dict):
        return False
    return all(
        isinstance(frontpage.get(k), int) and not isinstance(frontpage.get(k), bool)
        for k in ("projects", "editorials", "instagram")
    )


class ContentService:
    """Key/value site settings."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def content_map(self, keys: Optional[Iterable[str]] = None) -> Dict[str, Any]:
        query = select(SiteSetting)
        if keys:
            query = query.where(SiteSetting.key_name.in_(list(keys)))
        rows = self.db.execute(query).scalars().all()
        return {row.key_name: row.value for row in rows}

    def get_value(self, key: str, default: Any = None) -> Any:
        row = self.db.execute(
            select(SiteSetting).where(SiteSetting.key_name == key)
        ).scalar_one_or_none()
        if row is None:
            return default
        return row.value

    def upsert_content(self, key: str, value: Any, description: str | None = None) -> SiteSetting:
        existing = (
            self.db.execute(
                select(SiteSetting).where(SiteSetting.key_name == key)
            ).scalar_one_or_none()
        )
        if existing:
            existing.value = value
            if description is not None:
                existing.description = description
            entry = existing
        else:
            entry = SiteSetting(key_name=key, value=value, description=description)
            self.db.add(entry)
        self.db.commit()
        self.db.refresh(entry)
        return entry

    def content_limits(self) -> Dict[str, Any]:
        value = self.get_value(CONTENT_LIMITS_KEY)
        if not is_content_limits(value):
            return copy.deepcopy(DEFAULT_CONTENT_LIMITS)
        return value

    def set_content_limits(self, frontpage: Dict[str, int]) -> Dict[str, Any]:
        value = {"frontpage": dict(frontpage)}
        self.upsert_content(CONTENT_LIMITS_KEY, value, description="Homepage item counts")
        return value

    def integrations(self) -> Dict[str, Any]:
        value = self.get_value(INTEGRATIONS_KEY)
        if not isinstance(value, dict):
            return copy.deepcopy(DEFAULT_INTEGRATIONS)
        return value

    def set_integrations(self, value: Dict[str, Any]) -> Dict[str, Any]:
        self.upsert_content(INTEGRATIONS_KEY, value, description="Third-party integration settings")
        return value
