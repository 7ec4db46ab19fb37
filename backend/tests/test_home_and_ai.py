from backend.app.models import Post, Project
from backend.app.services.editorial_generator import generate_editorial


def test_home_respects_content_limits(client, db_session, admin_headers):
    for i in range(4):
        db_session.add(Project(slug=f"p{i}", title=f"P{i}", is_published=True))
        db_session.add(Post(slug=f"e{i}", title=f"E{i}", is_published=True))
    db_session.add(Project(slug="draft", title="Draft", is_published=False, is_hero=True))
    db_session.commit()

    limits = {"frontpage": {"projects": 2, "editorials": 1, "instagram": 0}}
    client.post("/api/settings/content-limits", json=limits, headers=admin_headers)

    body = client.get("/api/home").json()
    assert len(body["projects"]) == 2
    assert len(body["editorials"]) == 1
    assert body["instagram"] == []
    assert body["hero_project"] is None


def test_generate_editorial_requires_prompt(client, editor_headers):
    resp = client.post("/api/ai/generate-editorial", json={"prompt": "  "}, headers=editor_headers)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Prompt is required"}


def test_generate_editorial(client, editor_headers):
    resp = client.post(
        "/api/ai/generate-editorial",
        json={"prompt": "Buyers want quieter homes.", "title": "Quiet Luxury"},
        headers=editor_headers,
    )
    body = resp.json()
    assert body["success"] is True
    assert body["content"].startswith("# Quiet Luxury")
    assert "Buyers want quieter homes." in body["content"]


def test_market_prompt_changes_subject():
    assert "luxury property market" in generate_editorial("How the market moved")
    assert "architectural landscape" in generate_editorial("Stone and light")


def test_home_instagram_limit_above_feed_size(client, admin_headers, editor_headers):
    posts = [
        {"id": str(i), "media_url": f"https://cdn.example.com/{i}.jpg", "timestamp": f"2024-01-{i + 1:02d}T10:00:00"}
        for i in range(15)
    ]
    client.post("/api/instagram/posts", json={"posts": posts}, headers=editor_headers)
    limits = {"frontpage": {"projects": 3, "editorials": 3, "instagram": 14}}
    client.post("/api/settings/content-limits", json=limits, headers=admin_headers)

    instagram = client.get("/api/home").json()["instagram"]
    assert len(instagram) == 14
    assert instagram[0]["id"] == "14"
    assert len(client.get("/api/instagram/posts").json()["posts"]) == 12
