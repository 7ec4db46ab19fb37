from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..auth import require_admin, require_editor
from ..db import get_db
from ..models import Profile
from ..schemas.enquiry import EnquiryCreate, EnquiryOut
from ..services.enquiries_service import EnquiriesService


router = APIRouter(prefix="/api/enquiries", tags=["enquiries"])


@router.get("")
def list_enquiries(user: Profile = Depends(require_editor), db: Session = Depends(get_db)):
    items = EnquiriesService(db).list()
    return {"success": True, "enquiries": [EnquiryOut.model_validate(e) for e in items]}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_enquiry(payload: EnquiryCreate, db: Session = Depends(get_db)):
    enquiry = EnquiriesService(db).create(payload)
    return {"success": True, "enquiry": EnquiryOut.model_validate(enquiry)}


@router.delete("/{enquiry_id}")
def delete_enquiry(enquiry_id: UUID, user: Profile = Depends(require_admin), db: Session = Depends(get_db)):
    EnquiriesService(db).delete(enquiry_id)
    return {"success": True, "message": "Enquiry deleted successfully"}
