from backend.app.integrations.supabase_storage import StoredObject, split_public_url
from backend.app.services.storage_service import summarize_objects, usage_level


def test_summarize_two_files():
    objects = [
        StoredObject(name="a.jpg", size=1024 * 1024),
        StoredObject(name="docs/b.pdf", size=2 * 1024 * 1024),
    ]
    stats = summarize_objects(objects, quota_mb=1024)
    assert stats["total_files"] == 2
    assert stats["total_size"] == 3 * 1024 * 1024
    assert stats["total_size_mb"] == 3.0
    assert stats["usage_percentage"] == 0.29
    assert stats["usage_level"] == "healthy"
    assert stats["files_by_type"] == {
        "jpg": {"count": 1, "size": 1024 * 1024},
        "pdf": {"count": 1, "size": 2 * 1024 * 1024},
    }
    assert stats["remaining_mb"] == 1021.0


def test_extension_fallback():
    assert StoredObject(name="folder/README", size=1).extension == "unknown"
    assert StoredObject(name="x/Photo.JPEG", size=1).extension == "jpeg"


def test_usage_levels():
    assert usage_level(49.9) == "healthy"
    assert usage_level(50) == "high"
    assert usage_level(79.99) == "high"
    assert usage_level(80) == "critical"


def test_empty_bucket():
    stats = summarize_objects([], quota_mb=1024)
    assert stats["total_files"] == 0
    assert stats["usage_percentage"] == 0
    assert stats["files_by_type"] == {}


def test_split_public_url():
    url = "https://x.supabase.co/storage/v1/object/public/images/uploads/a.jpg"
    assert split_public_url(url) == ("images", "uploads/a.jpg")
    assert split_public_url("https://x.supabase.co/other/a.jpg") is None
    assert split_public_url("https://x.supabase.co/storage/v1/object/public/images") is None


def test_stats_endpoint(client, editor_headers):
    resp = client.get("/api/storage/stats", headers=editor_headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["total_files"] == 2
    assert body["total_size_mb"] == 3.0
    assert set(body["files_by_type"]) == {"jpg", "pdf"}


def test_stats_requires_login(client):
    assert client.get("/api/storage/stats").status_code == 401


def test_upload(client, editor_headers, storage_client):
    resp = client.post(
        "/api/storage/upload",
        files={"file": ("photo.PNG", b"\x89PNG data", "image/png")},
        data={"folder": "projects"},
        headers=editor_headers,
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["path"].startswith("projects/")
    assert body["path"].endswith(".png")
    assert body["size"] == 9
    assert body["url"].endswith(body["path"])
    assert storage_client.uploaded[0][0] == "images"


def test_delete_by_path(client, editor_headers, storage_client):
    resp = client.request("DELETE", "/api/storage/delete", json={"file_path": "uploads/a.jpg"}, headers=editor_headers)
    assert resp.status_code == 200
    assert storage_client.removed == [("images", "uploads/a.jpg")]


def test_delete_image_bad_url(client, editor_headers, storage_client):
    resp = client.post("/api/storage/delete-image", json={"image_url": "https://elsewhere/a.jpg"}, headers=editor_headers)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid image URL format"}
    assert storage_client.removed == []


def test_delete_image_by_url(client, editor_headers, storage_client):
    url = "http://storage.test/storage/v1/object/public/images/uploads/a.jpg"
    resp = client.post("/api/storage/delete-image", json={"image_url": url}, headers=editor_headers)
    assert resp.json()["path"] == "uploads/a.jpg"
    assert storage_client.removed == [("images", "uploads/a.jpg")]


def test_upload_route_runs_in_threadpool():
    # the storage client blocks on requests, so the route must stay a plain def
    import inspect

    from backend.app.routers.storage import upload_file

    assert not inspect.iscoroutinefunction(upload_file)
