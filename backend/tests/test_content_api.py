def test_editorial_tags_are_deduplicated(client, editor_headers):
    resp = client.post(
        "/api/editorials",
        json={"title": "Light", "slug": "light", "tags": ["design", " design", "coast", ""]},
        headers=editor_headers,
    )
    assert resp.status_code == 201
    assert resp.json()["editorial"]["tags"] == ["design", "coast"]


def test_editorial_by_slug_only_when_published(client, editor_headers):
    created = client.post(
        "/api/editorials", json={"title": "Light", "slug": "light"}, headers=editor_headers
    ).json()["editorial"]
    assert client.get("/api/editorials/slug/light").status_code == 404

    client.patch(f"/api/editorials/{created['id']}", json={"is_published": True}, headers=editor_headers)
    resp = client.get("/api/editorials/slug/light")
    assert resp.status_code == 200
    assert resp.json()["editorial"]["title"] == "Light"


def test_listings_filter_by_status(client, editor_headers):
    for slug, status in (("a", "for_sale"), ("b", "sold"), ("c", "coming_soon")):
        resp = client.post(
            "/api/listings", json={"title": slug.upper(), "slug": slug, "status": status}, headers=editor_headers
        )
        assert resp.status_code == 201

    sold = client.get("/api/listings", params={"status": "sold"}).json()["listings"]
    assert [x["slug"] for x in sold] == ["b"]
    assert len(client.get("/api/listings").json()["listings"]) == 3


def test_listing_rejects_unknown_status(client, editor_headers):
    resp = client.post("/api/listings", json={"title": "X", "slug": "x", "status": "rented"}, headers=editor_headers)
    assert resp.status_code == 400
