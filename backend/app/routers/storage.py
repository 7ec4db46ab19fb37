from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from pydantic import BaseModel

from ..auth import require_editor
from ..models import Profile
from ..services.storage_service import StorageService, get_storage_service


router = APIRouter(prefix="/api/storage", tags=["storage"])


class DeletePathIn(BaseModel):
    file_path: Optional[str] = None


class DeleteUrlIn(BaseModel):
    image_url: Optional[str] = None


@router.get("/stats")
def storage_stats(user: Profile = Depends(require_editor), storage: StorageService = Depends(get_storage_service)):
    return {"success": True, **storage.stats()}


@router.post("/upload")
def upload_file(
    file: UploadFile = File(...),
    folder: str = Form("uploads"),
    user: Profile = Depends(require_editor),
    storage: StorageService = Depends(get_storage_service),
):
    data = file.file.read()
    result = storage.upload(data, file.filename or "upload", file.content_type, folder)
    return {"success": True, **result}


@router.delete("/delete")
def delete_file(
    payload: DeletePathIn,
    user: Profile = Depends(require_editor),
    storage: StorageService = Depends(get_storage_service),
):
    if not payload.file_path:
        raise HTTPException(status_code=400, detail="File path is required")
    storage.delete(payload.file_path)
    return {"success": True, "message": "File deleted successfully"}


@router.post("/delete-image")
def delete_image(
    payload: DeleteUrlIn,
    user: Profile = Depends(require_editor),
    storage: StorageService = Depends(get_storage_service),
):
    if not payload.image_url:
        raise HTTPException(status_code=400, detail="Image URL is required")
    path = storage.delete_by_public_url(payload.image_url)
    return {"success": True, "message": "Image deleted successfully", "path": path}
