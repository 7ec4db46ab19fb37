from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import TypeAdapter, ValidationError
from sqlalchemy.orm import Session

from ..auth import require_editor
from ..db import get_db
from ..models import Profile
from ..schemas.instagram import InstagramItem, InstagramOut
from ..services.instagram_service import InstagramService
from ..utils.redis_cache import INSTAGRAM_POSTS_KEY, cache_delete


router = APIRouter(prefix="/api/instagram", tags=["instagram"])

_items_adapter = TypeAdapter(list[InstagramItem])


@router.get("/posts")
def list_instagram_posts(db: Session = Depends(get_db)):
    return {"success": True, "posts": InstagramService(db).list_recent()}


@router.post("/posts")
def refresh_instagram_posts(
    payload: dict[str, Any] = Body(...),
    user: Profile = Depends(require_editor),
    db: Session = Depends(get_db),
):
    raw = payload.get("posts")
    if not isinstance(raw, list):
        raise HTTPException(status_code=400, detail="Posts must be an array")
    try:
        items = _items_adapter.validate_python(raw)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid post: {exc.errors()[0]['msg']}") from exc
    rows = InstagramService(db).refresh(items)
    return {
        "success": True,
        "count": len(rows),
        "posts": [InstagramOut.model_validate(r) for r in rows],
    }


@router.delete("/cache")
def clear_instagram_cache(user: Profile = Depends(require_editor)):
    cache_delete(INSTAGRAM_POSTS_KEY)
    return {"success": True, "message": "Instagram cache cleared successfully"}


@router.delete("/{media_id}")
def delete_instagram_post(media_id: str, user: Profile = Depends(require_editor), db: Session = Depends(get_db)):
    InstagramService(db).delete(media_id)
    return {"success": True}
