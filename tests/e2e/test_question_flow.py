"""End-to-end tests for questions, answers and votes."""

import pytest
from fastapi.testclient import TestClient

from autohub.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def app():
    return create_app(container=build_test_container())


def signed_in(app, name: str) -> TestClient:
    """A client holding a fresh user's session cookie."""
    client = TestClient(app)
    response = client.post(
        "/auth/register", json={"name": name, "email": f"{name.lower()}@autohub.test"}
    )
    assert response.status_code == 201
    return client


class TestQuestionFlow:
    def test_ask_answer_vote_accept(self, app):
        # Arrange
        alice = signed_in(app, "Alice")
        bob = signed_in(app, "Bob")
        asked = alice.post(
            "/questions",
            json={
                "title": "Engine knocks uphill",
                "body": "Only under load.",
                "tags": ["Engine"],
            },
        )
        assert asked.status_code == 201
        question_id = asked.json()["question_id"]

        # Act
        answer = bob.post(f"/questions/{question_id}/answers", json={"body": "Try higher octane."})
        answer_id = answer.json()["answer_id"]
        vote = bob.post(f"/questions/{question_id}/vote", json={"direction": "up"})
        answer_vote = alice.post(
            f"/questions/{question_id}/answers/{answer_id}/vote", json={"direction": "up"}
        )
        accepted = alice.post(f"/questions/{question_id}/answers/{answer_id}/accept")

        # Assert
        assert answer.status_code == 201
        assert vote.json()["upvotes"] == 1
        assert vote.json()["my_vote"] == "up"
        assert answer_vote.json()["answers"][0]["upvotes"] == 1
        assert accepted.json()["answers"][0]["accepted"] is True

        listed = TestClient(app).get("/questions", params={"tag": "engine"}).json()
        assert listed["total"] == 1
        assert listed["questions"][0]["has_accepted_answer"] is True
        assert listed["questions"][0]["answer_count"] == 1

    def test_repeat_vote_toggles_off(self, app):
        alice = signed_in(app, "Alice")
        question_id = alice.post(
            "/questions", json={"title": "Brakes squeal", "body": "When cold."}
        ).json()["question_id"]

        alice.post(f"/questions/{question_id}/vote", json={"direction": "down"})
        response = alice.post(f"/questions/{question_id}/vote", json={"direction": "down"})

        assert response.json()["downvotes"] == 0
        assert response.json()["my_vote"] is None

    def test_viewing_counts_views(self, app):
        alice = signed_in(app, "Alice")
        question_id = alice.post(
            "/questions", json={"title": "Brakes squeal", "body": "When cold."}
        ).json()["question_id"]
        anonymous = TestClient(app)

        anonymous.get(f"/questions/{question_id}")
        response = anonymous.get(f"/questions/{question_id}")

        assert response.status_code == 200
        assert response.json()["views"] == 2

    def test_only_author_or_staff_may_accept(self, app):
        alice = signed_in(app, "Alice")
        bob = signed_in(app, "Bob")
        question_id = alice.post(
            "/questions", json={"title": "Brakes squeal", "body": "When cold."}
        ).json()["question_id"]
        answer_id = bob.post(
            f"/questions/{question_id}/answers", json={"body": "New pads."}
        ).json()["answer_id"]

        response = bob.post(f"/questions/{question_id}/answers/{answer_id}/accept")

        assert response.status_code == 403

    def test_anonymous_cannot_vote(self, app):
        alice = signed_in(app, "Alice")
        question_id = alice.post(
            "/questions", json={"title": "Brakes squeal", "body": "When cold."}
        ).json()["question_id"]

        response = TestClient(app).post(
            f"/questions/{question_id}/vote", json={"direction": "up"}
        )

        assert response.status_code == 401

    def test_missing_question_is_not_found(self, app):
        alice = signed_in(app, "Alice")

        response = alice.post(
            "/questions/00000000-0000-0000-0000-000000000000/vote",
            json={"direction": "up"},
        )

        assert response.status_code == 404

    def test_author_deletes_question(self, app):
        alice = signed_in(app, "Alice")
        question_id = alice.post(
            "/questions", json={"title": "Brakes squeal", "body": "When cold."}
        ).json()["question_id"]

        response = alice.delete(f"/questions/{question_id}")

        assert response.status_code == 200
        assert alice.get(f"/questions/{question_id}").status_code == 404
