from backend.app.models import Enquiry


def test_enquiry_without_email_is_rejected(client, db_session):
    resp = client.post("/api/enquiries", json={"name": "Ana", "message": "Hello"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Name, email, and message are required"}
    assert db_session.query(Enquiry).count() == 0


def test_blank_fields_count_as_missing(client, db_session):
    resp = client.post("/api/enquiries", json={"name": "  ", "email": "a@b.c", "message": "Hi"})
    assert resp.status_code == 400
    assert db_session.query(Enquiry).count() == 0


def test_enquiry_stores_context(client, editor_headers):
    resp = client.post(
        "/api/enquiries",
        json={
            "name": "Ana Ruiz",
            "email": "ana@example.com",
            "message": "Interested in a renovation",
            "project_type": "renovation",
            "budget": "",
            "source": "project-enquiry",
        },
    )
    assert resp.status_code == 201
    enquiry = resp.json()["enquiry"]
    assert enquiry["source"] == "project-enquiry"
    assert enquiry["context"]["project_type"] == "renovation"
    assert enquiry["context"]["budget"] is None
    assert enquiry["context"]["timeline"] is None

    listed = client.get("/api/enquiries", headers=editor_headers).json()["enquiries"]
    assert [e["email"] for e in listed] == ["ana@example.com"]


def test_listing_enquiries_needs_login(client):
    assert client.get("/api/enquiries").status_code == 401


def test_delete_enquiry_is_admin_only(client, editor_headers, admin_headers):
    created = client.post(
        "/api/enquiries", json={"name": "A", "email": "a@b.c", "message": "m"}
    ).json()["enquiry"]
    url = f"/api/enquiries/{created['id']}"
    assert client.delete(url, headers=editor_headers).status_code == 403
    assert client.delete(url, headers=admin_headers).json()["success"] is True
    assert client.delete(url, headers=admin_headers).status_code == 404
