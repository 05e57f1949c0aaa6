"""End-to-end tests for listings, moderation, claims and reviews."""

import pytest
from fastapi.testclient import TestClient

from autohub.interface.api.app import create_app
from tests.di import build_test_container

ADMIN_EMAIL = "admin@autohub.test"


@pytest.fixture
def app(monkeypatch):
    """App whose first administrator can register."""
    monkeypatch.setenv("AUTH__SEED_ADMIN_EMAILS", f'["{ADMIN_EMAIL}"]')
    return create_app(container=build_test_container())


def register(app, name: str, email: str) -> TestClient:
    client = TestClient(app)
    response = client.post("/auth/register", json={"name": name, "email": email})
    assert response.status_code == 201
    return client


@pytest.fixture
def admin(app) -> TestClient:
    client = register(app, "Root", ADMIN_EMAIL)
    assert client.get("/auth/me").json()["user"]["role"] == "Administrator"
    return client


class TestListingModeration:
    def test_user_listing_is_hidden_until_approved(self, app, admin):
        # Arrange
        bob = register(app, "Bob", "bob@autohub.test")
        created = bob.post(
            "/businesses", json={"title": "Bob's Garage", "category": "Repair"}
        )
        business_id = created.json()["business_id"]

        # Assert pending listing is not public
        assert created.status_code == 201
        assert created.json()["status"] == "pending"
        assert TestClient(app).get("/businesses").json()["total"] == 0
        assert [b["business_id"] for b in admin.get("/businesses/pending").json()] == [
            business_id
        ]

        # Act
        moderated = admin.post(
            f"/businesses/{business_id}/moderate",
            json={"status": "approved", "verified": True},
        )

        # Assert
        assert moderated.json()["status"] == "approved"
        public = TestClient(app).get("/businesses").json()
        assert public["total"] == 1
        assert public["businesses"][0]["verified"] is True

    def test_owner_edit_sends_listing_back_to_moderation(self, app, admin):
        bob = register(app, "Bob", "bob@autohub.test")
        business_id = bob.post(
            "/businesses", json={"title": "Bob's Garage", "category": "Repair"}
        ).json()["business_id"]
        admin.post(f"/businesses/{business_id}/moderate", json={"status": "approved"})

        edited = bob.patch(
            f"/businesses/{business_id}", json={"description": "Open Sundays"}
        )

        assert edited.status_code == 200
        assert edited.json()["status"] == "edit-pending"
        assert TestClient(app).get("/businesses").json()["total"] == 0

    def test_owner_cannot_edit_moderation_fields(self, app):
        bob = register(app, "Bob", "bob@autohub.test")
        business_id = bob.post(
            "/businesses", json={"title": "Bob's Garage", "category": "Repair"}
        ).json()["business_id"]

        response = bob.patch(f"/businesses/{business_id}", json={"verified": True})

        assert response.status_code == 422

    def test_user_cannot_moderate(self, app):
        bob = register(app, "Bob", "bob@autohub.test")
        business_id = bob.post(
            "/businesses", json={"title": "Bob's Garage", "category": "Repair"}
        ).json()["business_id"]

        response = bob.post(
            f"/businesses/{business_id}/moderate", json={"status": "approved"}
        )

        assert response.status_code == 403


class TestClaimsAndReviews:
    def test_claim_approval_transfers_listing(self, app, admin):
        # Arrange
        business_id = admin.post(
            "/businesses", json={"title": "Tyre Hut", "category": "Tyres"}
        ).json()["business_id"]
        carol = register(app, "Carol", "carol@autohub.test")
        claim = carol.post(
            "/claims",
            json={"business_id": business_id, "verification_details": "I own it"},
        )
        claim_id = claim.json()["claim_id"]

        # Act
        decided = admin.post(f"/claims/{claim_id}/decision", json={"decision": "approve"})

        # Assert
        assert claim.status_code == 201
        assert decided.json()["status"] == "approved"
        listing = carol.get(f"/businesses/{business_id}").json()
        assert listing["owner_name"] == "Carol"
        assert listing["verified"] is True
        assert carol.get("/auth/me").json()["user"]["role"] == "Business Owner"
        assert [b["business_id"] for b in carol.get("/businesses/mine").json()] == [
            business_id
        ]

        again = admin.post(f"/claims/{claim_id}/decision", json={"decision": "reject"})
        assert again.status_code == 409

    def test_reviews_feed_listing_rating(self, app, admin):
        business_id = admin.post(
            "/businesses", json={"title": "Tyre Hut", "category": "Tyres"}
        ).json()["business_id"]
        dave = register(app, "Dave", "dave@autohub.test")
        erin = register(app, "Erin", "erin@autohub.test")

        for client, rating in ((dave, 5), (erin, 2)):
            response = client.post(
                "/reviews",
                json={
                    "item_type": "business",
                    "item_id": business_id,
                    "rating": rating,
                    "text": "Visited last week",
                },
            )
            assert response.status_code == 201
            assert response.json()["item_title"] == "Tyre Hut"

        reviews = TestClient(app).get(f"/reviews/business/{business_id}").json()
        assert reviews["review_count"] == 2
        assert reviews["average_rating"] == 3.5
        assert TestClient(app).get(f"/businesses/{business_id}").json()[
            "average_rating"
        ] == 3.5

    def test_review_of_unknown_business_is_not_found(self, app):
        dave = register(app, "Dave", "dave@autohub.test")

        response = dave.post(
            "/reviews",
            json={
                "item_type": "business",
                "item_id": "00000000-0000-0000-0000-000000000000",
                "rating": 4,
                "text": "Where is it?",
            },
        )

        assert response.status_code == 404


class TestAdministration:
    def test_dashboard_counts(self, app, admin):
        bob = register(app, "Bob", "bob@autohub.test")
        bob.post("/businesses", json={"title": "Bob's Garage", "category": "Repair"})

        response = admin.get("/admin/dashboard")

        assert response.status_code == 200
        assert response.json()["users"] == 2
        assert response.json()["pending_listings"] == 1
        assert bob.get("/admin/dashboard").status_code == 403

    def test_closing_registration(self, app, admin):
        closed = admin.patch(
            "/admin/settings/security", json={"allow_registration": False}
        )

        response = TestClient(app).post(
            "/auth/register", json={"name": "Late", "email": "late@autohub.test"}
        )

        assert closed.json()["settings"]["allow_registration"] is False
        assert response.status_code == 409
        public = TestClient(app).get("/admin/settings/security").json()
        assert public["settings"]["allow_registration"] is False

    def test_invalid_default_role_is_unprocessable(self, admin):
        response = admin.patch(
            "/admin/settings/security", json={"default_user_role": "Administrator"}
        )

        assert response.status_code == 422

    def test_activity_log_records_actions(self, app, admin):
        register(app, "Bob", "bob@autohub.test")

        response = admin.get("/activities", params={"type": "user"})

        assert response.status_code == 200
        descriptions = [a["description"] for a in response.json()["activities"]]
        assert "New user registered: Bob" in descriptions
