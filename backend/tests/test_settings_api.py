from backend.app.services.content_service import DEFAULT_CONTENT_LIMITS, is_content_limits


def test_content_limits_default(client):
    body = client.get("/api/settings/content-limits").json()
    assert body["frontpage"] == DEFAULT_CONTENT_LIMITS["frontpage"]


def test_save_content_limits(client, admin_headers):
    limits = {"frontpage": {"projects": 6, "editorials": 4, "instagram": 9}}
    resp = client.post("/api/settings/content-limits", json=limits, headers=admin_headers)
    assert resp.status_code == 200
    assert client.get("/api/settings/content-limits").json()["frontpage"] == limits["frontpage"]


def test_negative_limit_rejected(client, admin_headers):
    limits = {"frontpage": {"projects": -1, "editorials": 4, "instagram": 9}}
    resp = client.post("/api/settings/content-limits", json=limits, headers=admin_headers)
    assert resp.status_code == 400


def test_editors_cannot_change_limits(client, editor_headers):
    limits = {"frontpage": {"projects": 1, "editorials": 1, "instagram": 1}}
    assert client.post("/api/settings/content-limits", json=limits, headers=editor_headers).status_code == 403


def test_generic_settings(client, admin_headers):
    resp = client.post("/api/settings", json={"key": "footer_note", "value": {"text": "hi"}}, headers=admin_headers)
    assert resp.json() == {"success": True}
    settings = client.get("/api/settings", headers=admin_headers).json()["settings"]
    assert settings["footer_note"] == {"text": "hi"}


def test_is_content_limits_shape():
    assert is_content_limits({"frontpage": {"projects": 1, "editorials": 2, "instagram": 3}})
    assert not is_content_limits({"frontpage": {"projects": True, "editorials": 2, "instagram": 3}})
    assert not is_content_limits({"frontpage": {"projects": 1}})
    assert not is_content_limits([])


def test_setting_without_value_rejected(client, admin_headers):
    resp = client.post("/api/settings", json={"key": "site_title"}, headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Key and value are required"}
    assert "site_title" not in client.get("/api/settings", headers=admin_headers).json()["settings"]


def test_setting_with_null_value_is_stored(client, admin_headers):
    resp = client.post("/api/settings", json={"key": "banner", "value": None}, headers=admin_headers)
    assert resp.status_code == 200
    assert client.get("/api/settings", headers=admin_headers).json()["settings"] == {"banner": None}
