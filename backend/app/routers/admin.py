import uuid
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..auth import require_admin, require_editor, require_user
from ..db import get_db
from ..models import Profile
from ..schemas.profile import ProfileCreate, ProfileOut, ProfileRoleIn
from ..schemas.project import ProjectOut
from ..schemas.settings import HeroProjectIn
from ..services.admin_service import AdminService
from ..services.content_service import ContentService
from ..services.profiles_service import ProfilesService
from ..services.projects_service import ProjectsService


router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/hero-project")
def get_hero_project(db: Session = Depends(get_db)):
    project = ProjectsService(db).hero()
    return {"success": True, "project": ProjectOut.model_validate(project) if project else None}


@router.post("/hero-project")
def set_hero_project(payload: HeroProjectIn, user: Profile = Depends(require_editor), db: Session = Depends(get_db)):
    if not payload.project_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Project ID is required")
    try:
        project_id = uuid.UUID(payload.project_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Project ID is not a valid id")
    project = AdminService(db).set_hero_project(project_id)
    return {"success": True, "project": ProjectOut.model_validate(project)}


@router.post("/cleanup-duplicates")
def cleanup_duplicates(user: Profile = Depends(require_admin), db: Session = Depends(get_db)):
    deleted = AdminService(db).cleanup_duplicates()
    return {"success": True, "deleted": deleted}


@router.get("/current-user")
def current_user(user: Profile = Depends(require_user)):
    return {"success": True, "user_id": str(user.user_id), "email": user.email, "role": user.role}


@router.get("/integrations")
def get_integrations(user: Profile = Depends(require_admin), db: Session = Depends(get_db)):
    return {"success": True, "integrations": ContentService(db).integrations()}


@router.post("/integrations")
def save_integrations(
    payload: dict[str, Any] = Body(...),
    user: Profile = Depends(require_admin),
    db: Session = Depends(get_db),
):
    ContentService(db).set_integrations(payload)
    return {"success": True}


@router.get("/users")
def list_users(user: Profile = Depends(require_admin), db: Session = Depends(get_db)):
    return {"success": True, "users": [ProfileOut.model_validate(p) for p in ProfilesService(db).list()]}


@router.post("/users", status_code=status.HTTP_201_CREATED)
def create_user(payload: ProfileCreate, user: Profile = Depends(require_admin), db: Session = Depends(get_db)):
    profile = ProfilesService(db).create(payload.user_id, payload.email, payload.role)
    return {"success": True, "user": ProfileOut.model_validate(profile)}


@router.patch("/users/{user_id}")
def update_user_role(
    user_id: UUID,
    payload: ProfileRoleIn,
    user: Profile = Depends(require_admin),
    db: Session = Depends(get_db),
):
    profile = ProfilesService(db).update_role(user_id, payload.role)
    return {"success": True, "user": ProfileOut.model_validate(profile)}


@router.delete("/users/{user_id}")
def delete_user(user_id: UUID, user: Profile = Depends(require_admin), db: Session = Depends(get_db)):
    if user_id == user.user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="You cannot delete your own account")
    ProfilesService(db).delete(user_id)
    return {"success": True, "message": "User deleted successfully", "user_id": str(user_id)}
