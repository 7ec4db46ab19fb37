from pydantic import BaseModel
from datetime import datetime
from typing import Optional
from uuid import UUID


class ProfileCreate(BaseModel):
    user_id: UUID
    email: Optional[str] = None
    role: Optional[str] = "editor"


class ProfileRoleIn(BaseModel):
    role: Optional[str] = None


class ProfileOut(BaseModel):
    user_id: UUID
    email: Optional[str] = None
    role: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
