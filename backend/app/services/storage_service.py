from __future__ import annotations

import logging
import secrets
import time
from typing import Any, Dict, Iterable, Optional

from fastapi import HTTPException, status

from ..config import settings
from ..integrations.supabase_storage import StoredObject, SupabaseStorageClient, split_public_url


logger = logging.getLogger(__name__)

MB = 1024 * 1024


def usage_level(percentage: float) -> str:
    if percentage < 50:
        return "healthy"
    if percentage < 80:
        return "high"
    return "critical"


def summarize_objects(objects: Iterable[StoredObject], quota_mb: int) -> Dict[str, Any]:
    """Aggregate bucket contents: totals, per-extension counts and quota usage."""
    total_files = 0
    total_size = 0
    files_by_type: Dict[str, Dict[str, int]] = {}
    for obj in objects:
        total_files += 1
        total_size += obj.size
        bucket = files_by_type.setdefault(obj.extension, {"count": 0, "size": 0})
        bucket["count"] += 1
        bucket["size"] += obj.size

    total_size_mb = total_size / MB
    usage_percentage = (total_size_mb / quota_mb) * 100 if quota_mb else 0.0
    return {
        "total_files": total_files,
        "total_size": total_size,
        "total_size_mb": round(total_size_mb, 2),
        "usage_percentage": round(usage_percentage, 2),
        "usage_level": usage_level(usage_percentage),
        "files_by_type": files_by_type,
        "quota_mb": quota_mb,
        "remaining_mb": round(max(0.0, quota_mb - total_size_mb), 2),
    }


class StorageService:
    def __init__(self, client: SupabaseStorageClient, bucket: Optional[str] = None, quota_mb: Optional[int] = None) -> None:
        self.client = client
        self.bucket = bucket or settings.STORAGE_BUCKET
        self.quota_mb = quota_mb if quota_mb is not None else settings.STORAGE_QUOTA_MB

    def stats(self) -> Dict[str, Any]:
        objects = self.client.list_objects(self.bucket, limit=settings.STORAGE_LIST_LIMIT)
        return summarize_objects(objects, self.quota_mb)

    def upload(self, data: bytes, filename: str, content_type: Optional[str], folder: str = "uploads") -> Dict[str, Any]:
        ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else "bin"
        folder = folder.strip("/") or "uploads"
        path = f"{folder}/{int(time.time() * 1000)}-{secrets.token_hex(6)}.{ext}"
        self.client.upload(self.bucket, path, data, content_type)
        url = self.client.public_url(self.bucket, path)
        logger.info("uploaded %s as %s (%.2fKB)", filename, path, len(data) / 1024)
        return {"url": url, "path": path, "size": len(data), "type": content_type}

    def delete(self, path: str) -> None:
        self.client.remove(self.bucket, [path])
        logger.info("removed %s/%s", self.bucket, path)

    def delete_by_public_url(self, url: str) -> str:
        parsed = split_public_url(url)
        if not parsed:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid image URL format")
        bucket, path = parsed
        self.client.remove(bucket, [path])
        logger.info("removed %s/%s", bucket, path)
        return path


def get_storage_service() -> StorageService:
    client = SupabaseStorageClient(
        settings.SUPABASE_URL,
        settings.SUPABASE_SERVICE_ROLE_KEY,
        timeout=settings.STORAGE_REQUEST_TIMEOUT_SECONDS,
    )
    return StorageService(client)
