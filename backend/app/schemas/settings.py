from pydantic import BaseModel, Field
from typing import Any, Optional


class SettingIn(BaseModel):
    key: str = Field(..., min_length=1)
    value: Any = None
    description: Optional[str] = None


class FrontpageLimits(BaseModel):
    projects: int = Field(..., ge=0)
    editorials: int = Field(..., ge=0)
    instagram: int = Field(..., ge=0)


class ContentLimits(BaseModel):
    frontpage: FrontpageLimits


class HeroProjectIn(BaseModel):
    project_id: Optional[str] = None


class PublishIn(BaseModel):
    is_published: Any = None


class EditorialPromptIn(BaseModel):
    prompt: Optional[str] = None
    title: Optional[str] = None
