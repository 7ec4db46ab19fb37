import uuid


def _create(client, headers, **overrides):
    body = {"title": "Casa Azul", "slug": "casa-azul", "summary": "Sea views"}
    body.update(overrides)
    resp = client.post("/api/projects", json=body, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["project"]


def test_create_project_defaults(client, editor_headers):
    project = _create(client, editor_headers)
    assert project["is_published"] is False
    assert project["published_at"] is None
    assert project["facts"] == {}
    assert project["project_images"] == []
    assert project["year"] is not None


def test_create_requires_auth(client):
    resp = client.post("/api/projects", json={"title": "x", "slug": "x"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Not authenticated"}


def test_duplicate_slug_rejected(client, editor_headers):
    _create(client, editor_headers)
    resp = client.post("/api/projects", json={"title": "Other", "slug": "casa-azul"}, headers=editor_headers)
    assert resp.status_code == 400
    assert "already in use" in resp.json()["error"]


def test_missing_title_is_400(client, editor_headers):
    resp = client.post("/api/projects", json={"slug": "no-title"}, headers=editor_headers)
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_publish_toggle_round_trip(client, editor_headers):
    project = _create(client, editor_headers)
    url = f"/api/projects/{project['id']}"

    published = client.patch(url, json={"is_published": True}, headers=editor_headers).json()["project"]
    assert published["is_published"] is True
    assert published["published_at"] is not None

    again = client.patch(url, json={"is_published": True}, headers=editor_headers).json()["project"]
    assert again["published_at"] == published["published_at"]

    draft = client.patch(url, json={"is_published": False}, headers=editor_headers).json()["project"]
    assert draft["is_published"] is False
    assert draft["published_at"] is None


def test_publish_toggle_rejects_non_bool(client, editor_headers):
    project = _create(client, editor_headers)
    resp = client.patch(f"/api/projects/{project['id']}", json={"is_published": "yes"}, headers=editor_headers)
    assert resp.status_code == 400
    assert resp.json() == {"error": "is_published must be provided as a boolean value"}


def test_drafts_hidden_from_public(client, editor_headers):
    draft = _create(client, editor_headers)
    _create(client, editor_headers, slug="live", title="Live", is_published=True)

    public = client.get("/api/projects").json()["projects"]
    assert [p["slug"] for p in public] == ["live"]
    assert client.get(f"/api/projects/{draft['id']}").status_code == 404
    assert client.get("/api/projects/slug/casa-azul").status_code == 404

    admin_view = client.get("/api/projects", headers=editor_headers).json()["projects"]
    assert {p["slug"] for p in admin_view} == {"casa-azul", "live"}


def test_partial_update_keeps_other_fields(client, editor_headers):
    project = _create(client, editor_headers)
    resp = client.put(f"/api/projects/{project['id']}", json={"summary": "Updated"}, headers=editor_headers)
    assert resp.status_code == 200
    body = resp.json()["project"]
    assert body["summary"] == "Updated"
    assert body["title"] == "Casa Azul"


def test_delete_missing_project_is_404(client, editor_headers):
    resp = client.delete(f"/api/projects/{uuid.uuid4()}", headers=editor_headers)
    assert resp.status_code == 404
    assert resp.json() == {"error": "Project not found"}


def test_delete_project(client, editor_headers):
    project = _create(client, editor_headers)
    resp = client.delete(f"/api/projects/{project['id']}", headers=editor_headers)
    assert resp.json() == {"success": True, "message": "Project deleted successfully"}
    assert client.get(f"/api/projects/{project['id']}", headers=editor_headers).status_code == 404
