from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..db import get_db
from ..schemas.post import PostOut
from ..schemas.project import ProjectOut
from ..services.content_service import ContentService
from ..services.instagram_service import InstagramService
from ..services.posts_service import PostsService
from ..services.projects_service import ProjectsService


router = APIRouter(prefix="/api", tags=["public"])


@router.get("/home")
def home_content(db: Session = Depends(get_db)):
    """Everything the homepage shows, trimmed to the configured content limits."""
    limits = ContentService(db).content_limits()["frontpage"]
    projects_svc = ProjectsService(db)
    hero = projects_svc.hero()
    if hero is not None and not hero.is_published:
        hero = None
    projects = projects_svc.list(published_only=True, limit=limits["projects"])
    editorials = PostsService(db).list(published_only=True, limit=limits["editorials"])
    instagram = InstagramService(db).list_recent(limit=limits["instagram"])
    return {
        "success": True,
        "hero_project": ProjectOut.model_validate(hero) if hero else None,
        "projects": [ProjectOut.model_validate(p) for p in projects],
        "editorials": [PostOut.model_validate(e) for e in editorials],
        "instagram": instagram,
        "limits": limits,
    }
