from sqlalchemy.exc import OperationalError

from backend.app.integrations.supabase_storage import StorageError
from backend.app.services.content_service import ContentService


def test_database_failure_surfaces_message(client, admin_headers, monkeypatch):
    def _boom(self, keys=None):
        raise OperationalError("SELECT 1", {}, Exception("connection refused by db host"))

    monkeypatch.setattr(ContentService, "content_map", _boom)
    resp = client.get("/api/settings", headers=admin_headers)
    assert resp.status_code == 500
    assert resp.json() == {"error": "connection refused by db host"}


def test_storage_failure_surfaces_message(client, editor_headers, storage_client, monkeypatch):
    def _boom(bucket, prefix="", *, limit=1000):
        raise StorageError("boom")

    monkeypatch.setattr(storage_client, "list_objects", _boom)
    resp = client.get("/api/storage/stats", headers=editor_headers)
    assert resp.status_code == 500
    assert resp.json() == {"error": "boom"}
