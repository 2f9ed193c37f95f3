"""Tests for the posts API.

Tests cover:
- Acting-user resolution
- Post CRUD with ownership checks
- Visibility of private posts
- Calendar and tag filters
- Dev seed endpoint
"""

from app.models import Comment, Post, Reaction


def _payload(**overrides):
    payload = {
        "title": "Test Recipe",
        "description": "A test recipe",
        "ingredients": [{"name": "Flour", "amount": "2 cups", "id": "i1"}],
        "steps": [{"instruction": "Mix", "id": "s1"}],
        "tags": ["quick", "easy"],
        "category": "Dinner",
        "cooking_time": 30,
        "difficulty": "Easy",
        "is_public": True,
    }
    payload.update(overrides)
    return payload


def _create(client, user, **overrides):
    response = client.post("/api/posts", json=_payload(**overrides), headers={"X-User-Id": user.id})
    assert response.status_code == 201, response.text
    return response.json()


def test_ready_endpoint(client):
    response = client.get("/api/ready")
    assert response.status_code == 200
    assert response.json()["ok"] is True
    assert response.json()["db_ok"] is True


def test_create_post(client, user):
    data = _create(client, user)

    assert data["title"] == "Test Recipe"
    assert data["user_id"] == user.id
    assert data["ingredients"] == [{"name": "Flour", "amount": "2 cups", "id": "i1"}]
    assert data["steps"] == [{"instruction": "Mix", "id": "s1"}]
    assert data["tags"] == ["quick", "easy"]
    assert data["user"]["email"] == "cook@example.com"


def test_create_requires_user(client):
    response = client.post("/api/posts", json=_payload())
    assert response.status_code == 401


def test_unknown_user_header_is_404(client):
    response = client.post("/api/posts", json=_payload(), headers={"X-User-Id": "nobody"})
    assert response.status_code == 404
    assert "not found" in response.json()["detail"]


def test_user_header_accepts_email(client, user):
    response = client.post("/api/posts", json=_payload(), headers={"X-User-Id": user.email})
    assert response.status_code == 201


def test_create_validates_title(client, user):
    response = client.post("/api/posts", json=_payload(title=""), headers={"X-User-Id": user.id})
    assert response.status_code == 422


def test_create_validates_difficulty(client, user):
    response = client.post("/api/posts", json=_payload(difficulty="Extreme"), headers={"X-User-Id": user.id})
    assert response.status_code == 422


def test_get_post(client, user):
    post = _create(client, user)
    response = client.get(f"/api/posts/{post['id']}")
    assert response.status_code == 200
    assert response.json()["id"] == post["id"]


def test_get_missing_post(client):
    response = client.get("/api/posts/nonexistent-id")
    assert response.status_code == 404


def test_private_post_hidden_from_others(client, user, other_user):
    post = _create(client, user, is_public=False)

    assert client.get(f"/api/posts/{post['id']}", headers={"X-User-Id": user.id}).status_code == 200
    assert client.get(f"/api/posts/{post['id']}", headers={"X-User-Id": other_user.id}).status_code == 403
    assert client.get(f"/api/posts/{post['id']}").status_code == 403


def test_list_shows_public_and_own(client, user, other_user):
    _create(client, user, title="Mine private", is_public=False)
    _create(client, other_user, title="Theirs private", is_public=False)
    _create(client, other_user, title="Theirs public", is_public=True)

    titles = {p["title"] for p in client.get("/api/posts", headers={"X-User-Id": user.id}).json()}
    assert titles == {"Mine private", "Theirs public"}

    anonymous = {p["title"] for p in client.get("/api/posts").json()}
    assert anonymous == {"Theirs public"}


def test_list_mine(client, user, other_user):
    _create(client, user, title="Mine")
    _create(client, other_user, title="Theirs")

    response = client.get("/api/posts?mine=true", headers={"X-User-Id": user.id})
    assert [p["title"] for p in response.json()] == ["Mine"]
    assert client.get("/api/posts?mine=true").status_code == 401


def test_list_search_and_tag(client, user):
    _create(client, user, title="Lemon Tart", tags=["dessert"])
    _create(client, user, title="Pea Soup", tags=["quick", "vegan"])

    search = client.get("/api/posts?search=tart", headers={"X-User-Id": user.id}).json()
    assert [p["title"] for p in search] == ["Lemon Tart"]

    tagged = client.get("/api/posts?tag=vegan", headers={"X-User-Id": user.id}).json()
    assert [p["title"] for p in tagged] == ["Pea Soup"]


def test_list_calendar_range(client, user):
    _create(client, user, title="March", cooked_on="2026-03-10")
    _create(client, user, title="April", cooked_on="2026-04-02")
    _create(client, user, title="Never cooked")

    response = client.get(
        "/api/posts?cooked_from=2026-04-01&cooked_to=2026-04-30",
        headers={"X-User-Id": user.id},
    )
    assert [p["title"] for p in response.json()] == ["April"]


def test_put_replaces_post(client, user):
    post = _create(client, user)
    response = client.put(
        f"/api/posts/{post['id']}",
        json=_payload(title="Renamed", tags=[], cooking_time=None),
        headers={"X-User-Id": user.id},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Renamed"
    assert data["tags"] == []
    assert data["cooking_time"] is None


def test_patch_updates_only_given_fields(client, user):
    post = _create(client, user)
    response = client.patch(
        f"/api/posts/{post['id']}",
        json={"cooked_on": "2026-05-01", "steps": [{"instruction": "Bake", "id": "s9"}]},
        headers={"X-User-Id": user.id},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Test Recipe"
    assert data["cooked_on"] == "2026-05-01"
    assert data["steps"] == [{"instruction": "Bake", "id": "s9"}]


def test_patch_rejects_null_lists(client, user):
    post = _create(client, user)
    response = client.patch(f"/api/posts/{post['id']}", json={"tags": None}, headers={"X-User-Id": user.id})
    assert response.status_code == 400


def test_only_owner_or_admin_can_edit(client, user, other_user, admin_user):
    post = _create(client, user)

    response = client.patch(f"/api/posts/{post['id']}", json={"title": "Hijack"}, headers={"X-User-Id": other_user.id})
    assert response.status_code == 403

    response = client.patch(f"/api/posts/{post['id']}", json={"title": "Moderated"}, headers={"X-User-Id": admin_user.id})
    assert response.status_code == 200
    assert response.json()["title"] == "Moderated"


def test_delete_post_cascades(client, db_session, user, other_user):
    post = _create(client, user)
    client.post(f"/api/posts/{post['id']}/comments", json={"content": "Yum"}, headers={"X-User-Id": other_user.id})
    client.post(f"/api/posts/{post['id']}/reactions", json={"type": "LOVE"}, headers={"X-User-Id": other_user.id})

    assert client.delete(f"/api/posts/{post['id']}", headers={"X-User-Id": other_user.id}).status_code == 403

    response = client.delete(f"/api/posts/{post['id']}", headers={"X-User-Id": user.id})
    assert response.status_code == 204

    db_session.expire_all()
    assert db_session.query(Post).filter_by(id=post["id"]).first() is None
    assert db_session.query(Comment).count() == 0
    assert db_session.query(Reaction).count() == 0


def test_delete_post_not_found(client, user):
    response = client.delete("/api/posts/nonexistent-id", headers={"X-User-Id": user.id})
    assert response.status_code == 404


def test_seed_creates_user_and_recipes(client):
    response = client.post("/api/dev/seed")
    assert response.status_code == 200

    data = response.json()
    assert data["user"]["email"] == "local@recipeshare.dev"
    assert data["posts_created"] == 2

    # The seeded user is the default acting user
    posts = client.get("/api/posts").json()
    titles = {p["title"] for p in posts}
    assert titles == {"Easy Tomato Pasta", "Overnight Oats"}

    pasta = next(p for p in posts if p["title"] == "Easy Tomato Pasta")
    assert pasta["cooking_time"] == 20
    assert {"pasta", "vegetarian"} <= set(pasta["tags"])
    assert pasta["ingredients"][0]["amount"] == "200 g"


def test_seed_is_idempotent(client):
    client.post("/api/dev/seed")
    response = client.post("/api/dev/seed")
    assert response.status_code == 200
    assert response.json()["posts_created"] == 0
