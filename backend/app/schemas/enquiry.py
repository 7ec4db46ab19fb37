from pydantic import BaseModel
from datetime import datetime
from typing import Optional, Any, Dict
from uuid import UUID


class EnquiryCreate(BaseModel):
    # required fields are checked by EnquiriesService so blank strings are rejected too
    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None
    phone: Optional[str] = None
    source: Optional[str] = None
    project_type: Optional[str] = None
    budget: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    timeline: Optional[str] = None


class EnquiryOut(BaseModel):
    id: UUID
    name: str
    email: str
    phone: Optional[str] = None
    message: str
    context: Optional[Dict[str, Any]] = None
    source: str
    created_at: datetime

    class Config:
        from_attributes = True
