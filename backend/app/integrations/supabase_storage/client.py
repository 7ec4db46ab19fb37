from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

PUBLIC_PATH_MARKER = "/storage/v1/object/public/"


class StorageError(RuntimeError):
    pass


@dataclass
class StoredObject:
    name: str  # full path inside the bucket
    size: int
    mimetype: Optional[str] = None
    created_at: Optional[str] = None

    @property
    def extension(self) -> str:
        base = self.name.rsplit("/", 1)[-1]
        if "." not in base:
            return "unknown"
        return base.rsplit(".", 1)[-1].lower() or "unknown"


class SupabaseStorageClient:
    """
    Minimal client for the Supabase Storage REST API (list / upload / remove).
    """

    def __init__(
        self,
        base_url: str,
        service_key: Optional[str],
        *,
        timeout: int = 20,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.service_key = service_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def _headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        if not self.service_key:
            raise StorageError("SUPABASE_SERVICE_ROLE_KEY is not configured")
        headers = {
            "apikey": self.service_key,
            "Authorization": f"Bearer {self.service_key}",
        }
        if extra:
            headers.update(extra)
        return headers

    def _request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        url = f"{self.base_url}/storage/v1{path}"
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise StorageError(f"storage request failed: {exc}") from exc
        if resp.status_code >= 400:
            raise StorageError(f"storage {method} {path} -> {resp.status_code}: {resp.text[:300]}")
        return resp

    def _list_page(self, bucket: str, prefix: str, limit: int, offset: int) -> List[Dict[str, Any]]:
        resp = self._request(
            "POST",
            f"/object/list/{quote(bucket)}",
            headers=self._headers(),
            json={
                "prefix": prefix,
                "limit": limit,
                "offset": offset,
                "sortBy": {"column": "created_at", "order": "desc"},
            },
        )
        data = resp.json()
        if not isinstance(data, list):
            raise StorageError(f"unexpected list response: {data!r}")
        return data

    def list_objects(self, bucket: str, prefix: str = "", *, limit: int = 1000) -> List[StoredObject]:
        """Every object under prefix, descending into folders."""
        out: List[StoredObject] = []
        offset = 0
        while True:
            page = self._list_page(bucket, prefix, limit, offset)
            for entry in page:
                name = entry.get("name") or ""
                path = f"{prefix}/{name}" if prefix else name
                # folders come back without an id or metadata
                if entry.get("id") is None:
                    out.extend(self.list_objects(bucket, path, limit=limit))
                    continue
                meta = entry.get("metadata") or {}
                out.append(
                    StoredObject(
                        name=path,
                        size=int(meta.get("size") or 0),
                        mimetype=meta.get("mimetype"),
                        created_at=entry.get("created_at"),
                    )
                )
            if len(page) < limit:
                break
            offset += limit
        return out

    def upload(self, bucket: str, path: str, data: bytes, content_type: Optional[str]) -> str:
        self._request(
            "POST",
            f"/object/{quote(bucket)}/{quote(path)}",
            headers=self._headers(
                {
                    "Content-Type": content_type or "application/octet-stream",
                    "Cache-Control": "max-age=3600",
                    "x-upsert": "false",
                }
            ),
            data=data,
        )
        return path

    def remove(self, bucket: str, paths: Iterable[str]) -> None:
        self._request(
            "DELETE",
            f"/object/{quote(bucket)}",
            headers=self._headers(),
            json={"prefixes": list(paths)},
        )

    def public_url(self, bucket: str, path: str) -> str:
        return f"{self.base_url}{PUBLIC_PATH_MARKER}{bucket}/{path}"


def split_public_url(url: str) -> tuple[str, str] | None:
    """(bucket, path) from a public object URL, or None when it is not one."""
    parts = url.split(PUBLIC_PATH_MARKER)
    if len(parts) != 2:
        return None
    bucket, _, path = parts[1].partition("/")
    path = path.split("?", 1)[0]
    if not bucket or not path:
        return None
    return bucket, path


__all__ = ["StorageError", "StoredObject", "SupabaseStorageClient", "split_public_url"]
