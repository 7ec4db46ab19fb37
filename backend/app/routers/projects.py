from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..auth import get_current_user, require_editor
from ..db import get_db
from ..models import Profile
from ..schemas.project import ProjectCreate, ProjectOut, ProjectUpdate
from ..schemas.settings import PublishIn
from ..services.projects_service import ProjectsService


router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("")
def list_projects(user: Profile | None = Depends(get_current_user), db: Session = Depends(get_db)):
    items = ProjectsService(db).list(published_only=user is None)
    return {"success": True, "projects": [ProjectOut.model_validate(p) for p in items]}


@router.get("/slug/{slug}")
def get_project_by_slug(slug: str, db: Session = Depends(get_db)):
    project = ProjectsService(db).get_by_slug(slug)
    return {"success": True, "project": ProjectOut.model_validate(project)}


@router.get("/{project_id}")
def get_project(project_id: UUID, user: Profile | None = Depends(get_current_user), db: Session = Depends(get_db)):
    project = ProjectsService(db).get(project_id)
    if user is None and not project.is_published:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return {"success": True, "project": ProjectOut.model_validate(project)}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_project(payload: ProjectCreate, user: Profile = Depends(require_editor), db: Session = Depends(get_db)):
    project = ProjectsService(db).create(payload.model_dump())
    return {"success": True, "project": ProjectOut.model_validate(project)}


@router.put("/{project_id}")
def update_project(
    project_id: UUID,
    payload: ProjectUpdate,
    user: Profile = Depends(require_editor),
    db: Session = Depends(get_db),
):
    project = ProjectsService(db).update(project_id, payload.model_dump(exclude_unset=True))
    return {"success": True, "project": ProjectOut.model_validate(project)}


@router.patch("/{project_id}")
def set_project_published(
    project_id: UUID,
    payload: PublishIn,
    user: Profile = Depends(require_editor),
    db: Session = Depends(get_db),
):
    if not isinstance(payload.is_published, bool):
        raise HTTPException(status_code=400, detail="is_published must be provided as a boolean value")
    project = ProjectsService(db).set_published(project_id, payload.is_published)
    return {"success": True, "project": ProjectOut.model_validate(project)}


@router.delete("/{project_id}")
def delete_project(project_id: UUID, user: Profile = Depends(require_editor), db: Session = Depends(get_db)):
    ProjectsService(db).delete(project_id)
    return {"success": True, "message": "Project deleted successfully"}
