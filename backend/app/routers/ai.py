from fastapi import APIRouter, Depends, HTTPException

from ..auth import require_editor
from ..models import Profile
from ..schemas.settings import EditorialPromptIn
from ..services.editorial_generator import generate_editorial


router = APIRouter(prefix="/api/ai", tags=["ai"])


@router.post("/generate-editorial")
def generate_editorial_draft(payload: EditorialPromptIn, user: Profile = Depends(require_editor)):
    if not payload.prompt or not payload.prompt.strip():
        raise HTTPException(status_code=400, detail="Prompt is required")
    content = generate_editorial(payload.prompt.strip(), payload.title)
    return {"success": True, "content": content, "message": "Editorial content generated successfully"}
