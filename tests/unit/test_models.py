"""Unit tests for the prompt data models."""
import pytest
from langchain_core.messages import HumanMessage, SystemMessage
from pydantic import ValidationError

from roleplay.models.prompt import (
    ConversationContext,
    HistoryMessage,
    LevelId,
    PromptPayload,
    PromptRequest,
    ResponseFormat,
    TutorReply,
    wire_value,
)


@pytest.mark.unit
class TestConversationContext:
    def test_history_text(self):
        context = ConversationContext(
            student_name="Maria",
            conversation_history=[
                HistoryMessage(role="tutor", text="Hello!"),
                HistoryMessage(role="user", text="Hi."),
                HistoryMessage(role="feedback", text="Well said."),
            ],
        )
        assert context.history_text() == "Tutor: Hello!\nStudent: Hi.\nFeedback: Well said."

    def test_recent_user_message(self):
        context = ConversationContext(
            student_name="Maria",
            conversation_history=[
                HistoryMessage(role="user", text="first"),
                HistoryMessage(role="tutor", text="question"),
                HistoryMessage(role="user", text="second"),
            ],
        )
        assert context.recent_user_message() == "second"
        assert context.recent_user_message(2) == "first"
        assert context.recent_user_message(3) is None
        assert context.recent_user_message(0) is None

    def test_empty_history(self, empty_context):
        assert empty_context.history_text() == ""
        assert empty_context.recent_user_message() is None

    def test_context_is_frozen(self, context):
        with pytest.raises(ValidationError):
            context.student_name = "Other"

    def test_unknown_role_rejected(self):
        with pytest.raises(ValidationError):
            HistoryMessage(role="system", text="x")


@pytest.mark.unit
class TestPromptPayload:
    def test_defaults(self):
        payload = PromptPayload(system_prompt="s", user_prompt="u")
        assert payload.response_format == ResponseFormat.STRUCTURED
        assert payload.ends_session is False

    def test_to_messages(self):
        messages = PromptPayload(system_prompt="system", user_prompt="user").to_messages()
        assert isinstance(messages[0], SystemMessage)
        assert isinstance(messages[1], HumanMessage)
        assert [m.content for m in messages] == ["system", "user"]


@pytest.mark.unit
class TestTutorReply:
    def test_parses_camel_case(self):
        reply = TutorReply.model_validate(
            {"tutorMessage": "Bye!", "shouldEnd": True, "closingMessage": "Bye!", "question": None}
        )
        assert reply.tutor_message == "Bye!"
        assert reply.should_end is True
        assert reply.question is None

    def test_dumps_camel_case(self):
        data = TutorReply(feedback="Great!").model_dump(by_alias=True)
        assert data["shouldEnd"] is False
        assert data["feedback"] == "Great!"


@pytest.mark.unit
class TestPromptRequest:
    def test_parses_wire_values(self):
        request = PromptRequest.model_validate(
            {
                "scenario_id": "jobInterview",
                "level_id": "beginner",
                "mode": "free",
                "context": {"student_name": "Maria"},
            }
        )
        assert request.level_id is LevelId.BEGINNER
        assert request.turn_number is None

    def test_rejects_unknown_level(self):
        with pytest.raises(ValidationError):
            PromptRequest.model_validate(
                {
                    "scenario_id": "jobInterview",
                    "level_id": "expert",
                    "mode": "free",
                    "context": {"student_name": "Maria"},
                }
            )


@pytest.mark.unit
def test_wire_value():
    assert wire_value(LevelId.ADVANCED) == "advanced"
    assert wire_value("advanced") == "advanced"
