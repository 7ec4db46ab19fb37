from __future__ import annotations

import logging
from typing import List, Optional
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import Profile, ROLES


logger = logging.getLogger(__name__)


def _check_role(role: Optional[str]) -> str:
    if role not in ROLES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid role. Must be 'admin' or 'editor'",
        )
    return role


class ProfilesService:
    def __init__(self, db: Session) -> None:
        self.db = db

    def list(self) -> List[Profile]:
        return list(self.db.execute(select(Profile).order_by(Profile.created_at.asc())).scalars().all())

    def get(self, user_id: UUID) -> Profile:
        profile = self.db.get(Profile, user_id)
        if not profile:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return profile

    def create(self, user_id: UUID, email: Optional[str], role: Optional[str] = "editor") -> Profile:
        role = _check_role(role or "editor")
        if self.db.get(Profile, user_id):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already has a profile")
        profile = Profile(user_id=user_id, email=(email or "").strip().lower() or None, role=role)
        self.db.add(profile)
        self.db.commit()
        self.db.refresh(profile)
        logger.info("profile created user_id=%s role=%s", user_id, role)
        return profile

    def update_role(self, user_id: UUID, role: Optional[str]) -> Profile:
        role = _check_role(role)
        profile = self.get(user_id)
        profile.role = role
        self.db.commit()
        self.db.refresh(profile)
        logger.info("profile role changed user_id=%s role=%s", user_id, role)
        return profile

    def delete(self, user_id: UUID) -> None:
        profile = self.get(user_id)
        self.db.delete(profile)
        self.db.commit()
        logger.info("profile deleted user_id=%s", user_id)
