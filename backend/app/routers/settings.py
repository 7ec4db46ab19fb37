
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..auth import require_admin
from ..db import get_db
from ..models import Profile
from ..schemas.settings import ContentLimits, SettingIn
from ..services.content_service import ContentService


router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("")
def get_settings(user: Profile = Depends(require_admin), db: Session = Depends(get_db)):
    return {"success": True, "settings": ContentService(db).content_map()}


@router.post("")
def update_setting(payload: SettingIn, user: Profile = Depends(require_admin), db: Session = Depends(get_db)):
    if "value" not in payload.model_fields_set:
        raise HTTPException(status_code=400, detail="Key and value are required")
    ContentService(db).upsert_content(payload.key, payload.value, payload.description)
    return {"success": True}


@router.get("/content-limits")
def get_content_limits(db: Session = Depends(get_db)):
    return {"success": True, **ContentService(db).content_limits()}


@router.post("/content-limits")
def update_content_limits(payload: ContentLimits, user: Profile = Depends(require_admin), db: Session = Depends(get_db)):
    value = ContentService(db).set_content_limits(payload.frontpage.model_dump())
    return {"success": True, **value}
