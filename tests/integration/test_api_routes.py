"""
API integration tests using FastAPI TestClient.
"""
import pytest
from fastapi.testclient import TestClient

HISTORY = [
    {"role": "tutor", "text": "Tell me about yourself?"},
    {"role": "user", "text": "I am hard-working."},
]


def prompt_request(**overrides):
    body = {
        "scenario_id": "jobInterview",
        "level_id": "beginner",
        "mode": "guided",
        "context": {"student_name": "Maria", "conversation_history": HISTORY},
    }
    body.update(overrides)
    return body


@pytest.mark.integration
class TestHealthRoutes:
    def test_health(self, api_client: TestClient):
        response = api_client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["scenarios"] == 4


@pytest.mark.integration
class TestScenarioRoutes:
    def test_list_scenarios(self, api_client: TestClient):
        response = api_client.get("/api/scenarios")
        assert response.status_code == 200
        data = response.json()
        assert [s["id"] for s in data] == [
            "jobInterview",
            "atTheCafe",
            "dailySmallTalk",
            "meetingSomeoneNew",
        ]
        assert data[0]["rounds_per_level"] == {"beginner": 3, "intermediate": 3, "advanced": 3}

    def test_rounds_for_level(self, api_client: TestClient):
        response = api_client.get(
            "/api/scenarios/atTheCafe/rounds/beginner", params={"student_name": "Luca"}
        )
        assert response.status_code == 200
        rounds = response.json()
        assert [r["id"] for r in rounds] == [1, 2, 3]
        assert rounds[0]["title"] == "General Interaction"
        assert len(rounds[0]["questions"]) == len(rounds[0]["example_answers"])

    def test_rounds_unknown_scenario(self, api_client: TestClient):
        response = api_client.get("/api/scenarios/unknownX/rounds/beginner")
        assert response.status_code == 404

    def test_rounds_unknown_level(self, api_client: TestClient):
        response = api_client.get("/api/scenarios/atTheCafe/rounds/expert")
        assert response.status_code == 422


@pytest.mark.integration
class TestPromptRoutes:
    def test_guided_round_prompt(self, api_client: TestClient):
        response = api_client.post(
            "/api/prompts",
            json=prompt_request(predefined_question="What is your biggest strength?"),
        )
        assert response.status_code == 200
        data = response.json()
        assert "What is your biggest strength?" in data["user_prompt"]
        assert "BEGINNER" in data["system_prompt"]
        assert data["response_format"] == "structured"
        assert data["ends_session"] is False

    def test_free_mode_closing(self, api_client: TestClient):
        response = api_client.post(
            "/api/prompts",
            json=prompt_request(scenario_id="atTheCafe", level_id="advanced", mode="free", turn_number=10),
        )
        assert response.status_code == 200
        assert response.json()["ends_session"] is True

    def test_unknown_scenario(self, api_client: TestClient):
        response = api_client.post("/api/prompts", json=prompt_request(scenario_id="unknownX"))
        assert response.status_code == 404
        assert response.json()["detail"] == (
            "Session could not continue: Scenario unknownX not found"
        )

    def test_not_implemented(self, api_client: TestClient):
        response = api_client.post("/api/prompts", json=prompt_request(scenario_id="atTheCafe"))
        assert response.status_code == 501
        assert response.json()["detail"].startswith("Session could not continue: Prompt not implemented")

    def test_invalid_turn(self, api_client: TestClient):
        response = api_client.post(
            "/api/prompts", json=prompt_request(mode="free", turn_number=11)
        )
        assert response.status_code == 422
        assert "Turn number 11" in response.json()["detail"]

    def test_invalid_body(self, api_client: TestClient):
        response = api_client.post("/api/prompts", json={"scenario_id": "jobInterview"})
        assert response.status_code == 422


@pytest.mark.integration
class TestMessageRoutes:
    def test_chat_messages(self, api_client: TestClient):
        response = api_client.post(
            "/api/prompts/messages",
            json=prompt_request(predefined_question="What is your biggest strength?"),
        )
        assert response.status_code == 200
        messages = response.json()
        assert [m["role"] for m in messages] == ["system", "user"]
        assert "What is your biggest strength?" in messages[1]["content"]

    def test_chat_messages_unknown_scenario(self, api_client: TestClient):
        response = api_client.post(
            "/api/prompts/messages", json=prompt_request(scenario_id="unknownX")
        )
        assert response.status_code == 404


@pytest.mark.integration
class TestReplyRoutes:
    def test_reply_uses_camel_case(self, api_client: TestClient):
        completion = '{"tutorMessage": "Great answer!", "question": "Why?", "shouldEnd": false}'
        response = api_client.post("/api/replies", json={"completion": completion})
        assert response.status_code == 200
        data = response.json()
        assert data["tutorMessage"] == "Great answer!"
        assert data["question"] == "Why?"
        assert data["shouldEnd"] is False
        assert data["closingMessage"] is None

    def test_invalid_reply(self, api_client: TestClient):
        response = api_client.post("/api/replies", json={"completion": "Not JSON"})
        assert response.status_code == 422
        assert response.json()["detail"].startswith(
            "Session could not continue: Tutor reply could not be read"
        )
