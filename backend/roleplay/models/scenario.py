"""Scenario, round and script configuration models."""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Callable, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from roleplay.models.prompt import LevelId


class Difficulty(str, Enum):
    """Question difficulty."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Question(BaseModel):
    """A predefined round question."""

    model_config = ConfigDict(frozen=True)

    letter: str
    template: str  # may contain {student_name}
    example_answer: str
    difficulty: Difficulty = Difficulty.MEDIUM
    topics: tuple[str, ...] = ()

    def render(self, student_name: str) -> str:
        """Fill the question template for a student."""
        return self.template.format(student_name=student_name)


class FeedbackOverrides(BaseModel):
    """Round-specific feedback adjustments."""

    model_config = ConfigDict(frozen=True)

    feedback_style: Literal["detailed", "brief", "encouraging"] | None = None
    focus_areas: tuple[str, ...] = ()


class Round(BaseModel):
    """A themed group of predefined questions."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    description: str | None = None
    questions: tuple[Question, ...] = Field(min_length=1)
    feedback_overrides: FeedbackOverrides | None = None


# Flat sequence (same rounds for every level) or rounds keyed by level
RoundCatalog = tuple[Round, ...] | Mapping[LevelId, tuple[Round, ...]]


def _check_unique_ids(rounds: tuple[Round, ...], where: str) -> None:
    ids = [r.id for r in rounds]
    duplicates = sorted({i for i in ids if ids.count(i) > 1})
    if duplicates:
        raise ValueError(f"Duplicate round ids {duplicates} in {where}")


class ScenarioConfig(BaseModel):
    """Static scenario metadata and its round catalog."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    rounds: RoundCatalog | None = None

    @field_validator("rounds")
    @classmethod
    def freeze_rounds(cls, rounds):
        """Level-keyed catalogs are exposed read-only."""
        if isinstance(rounds, Mapping):
            return MappingProxyType(dict(rounds))
        return rounds

    @model_validator(mode="after")
    def validate_rounds(self):
        """Round ids must be unique within a scenario and level."""
        if isinstance(self.rounds, tuple):
            _check_unique_ids(self.rounds, self.id)
        elif isinstance(self.rounds, Mapping):
            for level, rounds in self.rounds.items():
                _check_unique_ids(rounds, f"{self.id}/{level.value}")
        return self


class FreeModeScript(BaseModel):
    """Scenario text driving the ten-turn free conversation."""

    model_config = ConfigDict(frozen=True)

    simulation: str  # "job interview simulation"
    role_description: str
    topic_guidelines: tuple[str, ...]
    greeting: str  # completes "Greet the student <name> warmly ..."
    opening_questions: tuple[str, str]
    transition: Callable[[str, str], str]  # (first answer, second answer) -> sentence
    answer_placeholders: tuple[str, str]
    # Context fields that take precedence over history recall, per opening answer
    answer_fields: tuple[str | None, str | None] = (None, None)
    question_noun: str  # "interview question"
    question_focus: str  # "relevant to the position and company mentioned earlier"
    closing_message: str  # may contain {student_name}


class GuidedRoundScript(BaseModel):
    """Scenario text for feedback on predefined round questions."""

    model_config = ConfigDict(frozen=True)

    simulation: str  # "job interview simulation"
    practice_goal: str  # "practice job interviews"
    goal_setting: str = ""  # " in everyday café situations"
    setting: str  # "a job interview"
    question_kind: str  # "interview"
    recognition_examples: dict[LevelId, str]
    pronunciation_examples: dict[LevelId, str]


class GuidedScript(BaseModel):
    """Scenario text for guided practice without predefined rounds."""

    model_config = ConfigDict(frozen=True)

    simulation: str
    activity: str  # "conducting a job interview"
    role_description: str
    opening_lines: dict[LevelId, str]  # may contain {student_name}
    closing_message: str  # may contain {student_name}


class RoundView(BaseModel):
    """A round with question text rendered for a student."""

    id: int
    title: str
    description: str | None = None
    questions: list[str]
    example_answers: list[str]


class ScenarioSummary(BaseModel):
    """Scenario listing entry."""

    id: str
    title: str
    rounds_per_level: dict[LevelId, int]
