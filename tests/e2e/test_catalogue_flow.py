"""End-to-end tests for the vehicle catalogue, blog and categories."""

import pytest
from fastapi.testclient import TestClient

from autohub.interface.api.app import create_app
from tests.di import build_test_container

ADMIN_EMAIL = "admin@autohub.test"


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("AUTH__SEED_ADMIN_EMAILS", f'["{ADMIN_EMAIL}"]')
    return create_app(container=build_test_container())


def register(app, name: str, email: str) -> TestClient:
    client = TestClient(app)
    response = client.post("/auth/register", json={"name": name, "email": email})
    assert response.status_code == 201
    return client


@pytest.fixture
def admin(app) -> TestClient:
    return register(app, "Root", ADMIN_EMAIL)


MX5 = {"name": "Mazda MX-5", "make": "Mazda", "model": "MX-5", "year": 2022}


class TestVehicleCatalogue:
    def test_reviewed_vehicle_shows_rating(self, app, admin):
        # Arrange
        vehicle_id = admin.post("/vehicles", json=MX5).json()["vehicle_id"]
        ann = register(app, "Ann", "ann@autohub.test")

        # Act
        review = ann.post(
            "/reviews",
            json={
                "item_type": "vehicle",
                "item_id": vehicle_id,
                "rating": 4,
                "text": "Tiny boot, huge grin",
            },
        )

        # Assert
        assert review.status_code == 201
        assert review.json()["item_title"] == "Mazda MX-5"
        vehicle = TestClient(app).get(f"/vehicles/{vehicle_id}").json()
        assert vehicle["review_count"] == 1
        assert vehicle["average_rating"] == 4

    def test_list_filters_by_make(self, app, admin):
        admin.post("/vehicles", json=MX5)
        admin.post(
            "/vehicles",
            json={"name": "Kia Sportage", "make": "Kia", "model": "Sportage", "year": 2024},
        )

        listing = TestClient(app).get("/vehicles", params={"make": "Kia"}).json()

        assert listing["total"] == 1
        assert listing["vehicles"][0]["name"] == "Kia Sportage"

    def test_user_cannot_add_vehicle(self, app):
        bob = register(app, "Bob", "bob@autohub.test")

        response = bob.post("/vehicles", json=MX5)

        assert response.status_code == 403

    def test_bulk_delete_reports_count(self, app, admin):
        ids = [admin.post("/vehicles", json=MX5).json()["vehicle_id"] for _ in range(2)]

        response = admin.post("/vehicles/bulk-delete", json={"vehicle_ids": ids})

        assert response.json() == {"deleted": 2}
        assert TestClient(app).get(f"/vehicles/{ids[0]}").status_code == 404

    def test_dashboard_counts_vehicles(self, admin):
        admin.post("/vehicles", json=MX5)

        dashboard = admin.get("/admin/dashboard").json()

        assert dashboard["vehicles"] == 1
        assert dashboard["blog_posts"] == 0


class TestBlog:
    def test_post_comment_and_reply(self, app, admin):
        # Arrange
        created = admin.post(
            "/blog",
            json={"title": "Winter Tyres", "content": "Fit them early.", "tags": ["tyres"]},
        )
        post = created.json()
        ann = register(app, "Ann", "ann@autohub.test")

        # Act
        read = TestClient(app).get(f"/blog/slug/{post['slug']}")
        comment = ann.post(f"/blog/{post['post_id']}/comments", json={"text": "Thanks!"})
        replied = admin.post(
            f"/blog/comments/{comment.json()['comment_id']}/replies",
            json={"text": "Glad it helped"},
        )

        # Assert
        assert created.status_code == 201
        assert post["slug"] == "winter-tyres"
        assert read.json()["views"] == 1
        assert comment.status_code == 201
        assert [r["text"] for r in replied.json()["replies"]] == ["Glad it helped"]
        comments = TestClient(app).get(f"/blog/{post['post_id']}/comments").json()
        assert comments[0]["author_name"] == "Ann"
        assert TestClient(app).get("/blog/tags").json() == ["tyres"]

    def test_duplicate_slug_conflicts(self, admin):
        body = {"title": "Winter Tyres", "content": "Fit them early."}
        admin.post("/blog", json=body)

        response = admin.post("/blog", json=body)

        assert response.status_code == 409

    def test_deleted_post_takes_comments_with_it(self, app, admin):
        post_id = admin.post(
            "/blog", json={"title": "Oil", "content": "Change it."}
        ).json()["post_id"]
        admin.post(f"/blog/{post_id}/comments", json={"text": "Noted"})

        deleted = admin.delete(f"/blog/{post_id}")

        assert deleted.json() == {"deleted": 1}
        assert admin.get("/blog/comments").json()["total"] == 0
        assert TestClient(app).get(f"/blog/{post_id}/comments").status_code == 404

    def test_comment_needs_login(self, app, admin):
        post_id = admin.post(
            "/blog", json={"title": "Oil", "content": "Change it."}
        ).json()["post_id"]

        response = TestClient(app).post(
            f"/blog/{post_id}/comments", json={"text": "Anonymous"}
        )

        assert response.status_code == 401


class TestCategories:
    def test_seed_then_duplicate_is_rejected(self, app, admin):
        seeded = admin.post("/categories/seed").json()["created"]

        duplicate = admin.post("/categories", json={"name": "dealerships"})

        assert seeded == len(TestClient(app).get("/categories").json())
        assert duplicate.status_code == 409
        assert admin.post("/categories/seed").json() == {"created": 0}
