"""
Integration tests for the HTTP API.
"""

import pytest
from fastapi.testclient import TestClient

from adoptmatch.api import create_app


@pytest.fixture
def client(repository):
    """Test client over the shared in-memory data set."""
    return TestClient(create_app(repository))


def as_user(user_id):
    return {"X-User-Id": user_id}


class TestHealth:
    """Health endpoint."""

    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "adoptmatch"}


class TestMatchScoreEndpoint:
    """GET /pets/{pet_id}/match-score"""

    def test_requires_user(self, client):
        response = client.get("/pets/pet_1/match-score", params={"adopterId": "ana"})

        assert response.status_code == 401

    def test_requires_adopter_id(self, client):
        response = client.get("/pets/pet_1/match-score", headers=as_user("tutor_1"))

        assert response.status_code == 422

    def test_tutor_gets_score(self, client):
        response = client.get(
            "/pets/pet_1/match-score", params={"adopterId": "ana"}, headers=as_user("tutor_1")
        )

        assert response.status_code == 200
        body = response.json()
        assert body["score"] == 100
        assert body["criteriaCount"] == 2
        assert body["concerns"] == []
        assert [c["label"] for c in body["criteria"]] == ["Moradia", "Quintal"]
        assert {c["status"] for c in body["criteria"]} == {"match"}

    def test_adopter_gets_own_score(self, client):
        response = client.get(
            "/pets/pet_1/match-score", params={"adopterId": "bruno"}, headers=as_user("bruno")
        )

        assert response.status_code == 200
        body = response.json()
        assert body["score"] == 50
        assert body["highlights"] == []
        assert body["concerns"] == []

    def test_pet_without_preferences(self, client):
        response = client.get(
            "/pets/pet_2/match-score", params={"adopterId": "ana"}, headers=as_user("ana")
        )

        assert response.status_code == 200
        assert response.json()["score"] is None
        assert response.json()["criteriaCount"] == 0

    def test_other_user_forbidden(self, client):
        response = client.get(
            "/pets/pet_1/match-score", params={"adopterId": "ana"}, headers=as_user("carla")
        )

        assert response.status_code == 403

    def test_unknown_pet(self, client):
        response = client.get(
            "/pets/ghost/match-score", params={"adopterId": "ana"}, headers=as_user("ana")
        )

        assert response.status_code == 404
        assert "ghost" in response.json()["detail"]

    def test_unknown_adopter(self, client):
        response = client.get(
            "/pets/pet_1/match-score", params={"adopterId": "ghost"}, headers=as_user("tutor_1")
        )

        assert response.status_code == 404


class TestPriorityEndpoint:
    """GET /priority-engine/pet/{pet_id}/adopters"""

    def test_requires_user(self, client):
        assert client.get("/priority-engine/pet/pet_1/adopters").status_code == 401

    def test_owner_gets_ranking(self, client):
        response = client.get("/priority-engine/pet/pet_1/adopters", headers=as_user("tutor_1"))

        assert response.status_code == 200
        body = response.json()
        assert [item["adopterId"] for item in body] == ["ana", "bruno", "carla"]
        assert [item["priorityScore"] for item in body] == [57, 45, 30]
        assert body[1]["hasConversation"] is True
        assert body[1]["conversationId"] == "conv_bruno"
        assert body[2]["profileCompleteness"] == 100
        assert body[0]["avatarUrl"] == "https://img.example/ana.png"

    def test_empty_ranking(self, client):
        response = client.get("/priority-engine/pet/pet_2/adopters", headers=as_user("tutor_1"))

        assert response.status_code == 200
        assert response.json() == []

    def test_non_owner_forbidden(self, client):
        response = client.get("/priority-engine/pet/pet_1/adopters", headers=as_user("ana"))

        assert response.status_code == 403

    def test_unknown_pet(self, client):
        response = client.get("/priority-engine/pet/ghost/adopters", headers=as_user("tutor_1"))

        assert response.status_code == 404


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
