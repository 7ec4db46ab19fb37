from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..auth import get_current_user, require_editor
from ..db import get_db
from ..models import Profile
from ..schemas.post import PostCreate, PostOut, PostUpdate
from ..schemas.settings import PublishIn
from ..services.posts_service import PostsService


router = APIRouter(prefix="/api/editorials", tags=["editorials"])


@router.get("")
def list_editorials(user: Profile | None = Depends(get_current_user), db: Session = Depends(get_db)):
    items = PostsService(db).list(published_only=user is None)
    return {"success": True, "editorials": [PostOut.model_validate(e) for e in items]}


@router.get("/slug/{slug}")
def get_editorial_by_slug(slug: str, db: Session = Depends(get_db)):
    editorial = PostsService(db).get_by_slug(slug)
    return {"success": True, "editorial": PostOut.model_validate(editorial)}


@router.get("/{editorial_id}")
def get_editorial(editorial_id: UUID, user: Profile | None = Depends(get_current_user), db: Session = Depends(get_db)):
    editorial = PostsService(db).get(editorial_id)
    if user is None and not editorial.is_published:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Editorial not found")
    return {"success": True, "editorial": PostOut.model_validate(editorial)}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_editorial(payload: PostCreate, user: Profile = Depends(require_editor), db: Session = Depends(get_db)):
    editorial = PostsService(db).create(payload.model_dump())
    return {"success": True, "editorial": PostOut.model_validate(editorial)}


@router.put("/{editorial_id}")
def update_editorial(
    editorial_id: UUID,
    payload: PostUpdate,
    user: Profile = Depends(require_editor),
    db: Session = Depends(get_db),
):
    editorial = PostsService(db).update(editorial_id, payload.model_dump(exclude_unset=True))
    return {"success": True, "editorial": PostOut.model_validate(editorial)}


@router.patch("/{editorial_id}")
def set_editorial_published(
    editorial_id: UUID,
    payload: PublishIn,
    user: Profile = Depends(require_editor),
    db: Session = Depends(get_db),
):
    if not isinstance(payload.is_published, bool):
        raise HTTPException(status_code=400, detail="is_published must be provided as a boolean value")
    editorial = PostsService(db).set_published(editorial_id, payload.is_published)
    return {"success": True, "editorial": PostOut.model_validate(editorial)}


@router.delete("/{editorial_id}")
def delete_editorial(editorial_id: UUID, user: Profile = Depends(require_editor), db: Session = Depends(get_db)):
    PostsService(db).delete(editorial_id)
    return {"success": True, "message": "Editorial deleted successfully"}
