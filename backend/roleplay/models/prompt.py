"""Prompt request, context and payload models."""

from enum import Enum
from typing import Literal

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ScenarioId(str, Enum):
    """Built-in role-play scenarios."""

    JOB_INTERVIEW = "jobInterview"
    AT_THE_CAFE = "atTheCafe"
    DAILY_SMALL_TALK = "dailySmallTalk"
    MEETING_SOMEONE_NEW = "meetingSomeoneNew"


class LevelId(str, Enum):
    """Proficiency tiers."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class PracticeMode(str, Enum):
    """Available practice modes."""

    GUIDED = "guided"
    FREE = "free"


class ResponseFormat(str, Enum):
    """Completion format the LLM client should request."""

    STRUCTURED = "structured"  # JSON object
    PLAIN = "plain"


SPEAKER_LABELS = {
    "tutor": "Tutor",
    "user": "Student",
    "feedback": "Feedback",
}


class HistoryMessage(BaseModel):
    """A single conversation entry supplied by the caller."""

    model_config = ConfigDict(frozen=True)

    role: Literal["tutor", "user", "feedback"]
    text: str


class ConversationContext(BaseModel):
    """Per-request conversation state. Read-only inside the engine."""

    model_config = ConfigDict(frozen=True)

    student_name: str
    conversation_history: list[HistoryMessage] = Field(default_factory=list)
    turn_number: int | None = None
    round_number: int | None = None
    question_index: int | None = None
    predefined_question: str | None = None
    company_name: str | None = None
    position_name: str | None = None

    def history_text(self) -> str:
        """Render the history as `Speaker: text` lines."""
        return "\n".join(
            f"{SPEAKER_LABELS[msg.role]}: {msg.text}"
            for msg in self.conversation_history
        )

    def recent_user_message(self, n: int = 1) -> str | None:
        """
        Get the n-th most recent student message.

        @param n - 1 for the latest answer, 2 for the one before it
        @returns Message text, or None when the history is too short
        """
        user_messages = [
            msg.text for msg in self.conversation_history if msg.role == "user"
        ]
        if n < 1 or len(user_messages) < n:
            return None
        return user_messages[-n]


class PromptPayload(BaseModel):
    """Prompt pair handed to the LLM client."""

    system_prompt: str
    user_prompt: str
    response_format: ResponseFormat = ResponseFormat.STRUCTURED
    ends_session: bool = False

    def to_messages(self) -> list[BaseMessage]:
        """Convert the payload to chat messages for the LLM client."""
        return [
            SystemMessage(content=self.system_prompt),
            HumanMessage(content=self.user_prompt),
        ]


class TutorReply(BaseModel):
    """Structured tutor reply requested from the LLM."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    tutor_message: str | None = None
    question: str | None = None
    feedback: str | None = None
    should_end: bool = False
    closing_message: str | None = None


class ChatMessage(BaseModel):
    """Chat message in the role/content shape LLM chat endpoints take."""

    role: Literal["system", "user"]
    content: str


class CompletionRequest(BaseModel):
    """Raw LLM completion to read back as a tutor reply."""

    completion: str


class PromptRequest(BaseModel):
    """Request body for resolving a prompt."""

    scenario_id: str
    level_id: LevelId
    mode: PracticeMode
    context: ConversationContext
    predefined_question: str | None = None
    turn_number: int | None = None


def wire_value(value) -> str:
    """Normalize enum members and plain strings to the wire value."""
    return value.value if isinstance(value, Enum) else str(value)
