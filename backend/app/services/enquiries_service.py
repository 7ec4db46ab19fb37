from __future__ import annotations

import logging
from typing import List
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import Enquiry
from ..schemas.enquiry import EnquiryCreate


logger = logging.getLogger(__name__)

CONTEXT_FIELDS = ("project_type", "budget", "first_name", "last_name", "timeline")


class EnquiriesService:
    def __init__(self, db: Session) -> None:
        self.db = db

    def list(self) -> List[Enquiry]:
        stmt = select(Enquiry).order_by(Enquiry.created_at.desc())
        return list(self.db.execute(stmt).scalars().all())

    def create(self, payload: EnquiryCreate) -> Enquiry:
        name = (payload.name or "").strip()
        email = (payload.email or "").strip()
        message = (payload.message or "").strip()
        if not name or not email or not message:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Name, email, and message are required",
            )
        context = {field: getattr(payload, field) or None for field in CONTEXT_FIELDS}
        enquiry = Enquiry(
            name=name,
            email=email,
            phone=payload.phone or None,
            message=message,
            context=context,
            source=payload.source or "contact",
        )
        self.db.add(enquiry)
        self.db.commit()
        self.db.refresh(enquiry)
        logger.info("enquiry id=%s source=%s", enquiry.id, enquiry.source)
        return enquiry

    def delete(self, enquiry_id: UUID) -> None:
        enquiry = self.db.get(Enquiry, enquiry_id)
        if not enquiry:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Enquiry not found")
        self.db.delete(enquiry)
        self.db.commit()
