"""Unit tests for the guided-mode builders."""
import json

import pytest

from roleplay.models.prompt import ConversationContext, LevelId, ResponseFormat
from roleplay.models.scenario import FeedbackOverrides, Question, Round
from roleplay.prompts.builders import GuidedBuilder, GuidedRoundBuilder
from roleplay.scenarios import at_the_cafe, job_interview

QUESTION = "Could you tell me about a challenge you faced?"


def focus_round(round_id: int, overrides: FeedbackOverrides | None) -> Round:
    return Round(
        id=round_id,
        title="Problem Solving",
        questions=[Question(letter="A", template=QUESTION, example_answer="Once I...")],
        feedback_overrides=overrides,
    )


@pytest.mark.unit
class TestGuidedRoundBuilder:
    def test_feedback_only_prompt(self, context):
        builder = GuidedRoundBuilder(job_interview.GUIDED_ROUND_SCRIPT, LevelId.BEGINNER, ())
        payload = builder(context, QUESTION)

        assert payload.response_format == ResponseFormat.STRUCTURED
        assert "conducting a job interview simulation" in payload.system_prompt
        assert "You ONLY provide feedback, never the question" in payload.system_prompt
        assert "QUALITY GUIDELINES (BEGINNER LEVEL):" in payload.system_prompt
        assert "Tutor: Tell me about yourself?" in payload.user_prompt
        assert "Student: I am hard-working." in payload.user_prompt
        assert f'will be asked separately: "{QUESTION}"' in payload.user_prompt

    def test_response_shape_echoes_question(self, context):
        builder = GuidedRoundBuilder(at_the_cafe.GUIDED_ROUND_SCRIPT, LevelId.ADVANCED, ())
        payload = builder(context, QUESTION)

        body = payload.user_prompt.split("Return a JSON object with this structure:\n", 1)[1]
        shape = json.loads(body)
        assert shape["question"].endswith(QUESTION)
        assert shape["shouldEnd"] is False

    def test_level_specific_examples(self, context):
        builder = GuidedRoundBuilder(at_the_cafe.GUIDED_ROUND_SCRIPT, LevelId.BEGINNER, ())
        payload = builder(context, QUESTION)
        assert "You said 'please' correctly" in payload.user_prompt
        assert "/kɔːfi/" in payload.user_prompt
        assert "in everyday café situations" in payload.system_prompt

    def test_advanced_role_depth(self, context):
        builder = GuidedRoundBuilder(job_interview.GUIDED_ROUND_SCRIPT, LevelId.ADVANCED, ())
        payload = builder(context, QUESTION)
        assert "practice job interviews at an advanced level" in payload.system_prompt
        assert "sophisticated suggestions appropriate for advanced learners" in payload.system_prompt


@pytest.mark.unit
class TestRoundFocus:
    def test_overrides_add_round_focus(self, history):
        overrides = FeedbackOverrides(
            feedback_style="detailed",
            focus_areas=("past tense", "linking words"),
        )
        builder = GuidedRoundBuilder(
            job_interview.GUIDED_ROUND_SCRIPT,
            LevelId.INTERMEDIATE,
            (focus_round(2, overrides),),
        )
        context = ConversationContext(
            student_name="Maria", conversation_history=history, round_number=2
        )
        payload = builder(context, QUESTION)

        assert "ROUND FOCUS:" in payload.system_prompt
        assert "Feedback style for this round: detailed" in payload.system_prompt
        assert "Pay special attention to: past tense, linking words" in payload.system_prompt
        assert "Current round: 2 - Problem Solving" in payload.user_prompt

    def test_no_matching_round_leaves_prompt_unchanged(self, history):
        overrides = FeedbackOverrides(feedback_style="brief")
        builder = GuidedRoundBuilder(
            job_interview.GUIDED_ROUND_SCRIPT,
            LevelId.INTERMEDIATE,
            (focus_round(2, overrides),),
        )
        plain = GuidedRoundBuilder(job_interview.GUIDED_ROUND_SCRIPT, LevelId.INTERMEDIATE, ())
        context = ConversationContext(
            student_name="Maria", conversation_history=history, round_number=7
        )

        assert builder(context, QUESTION) == plain(context, QUESTION)

    def test_round_without_overrides(self, history):
        builder = GuidedRoundBuilder(
            job_interview.GUIDED_ROUND_SCRIPT,
            LevelId.BEGINNER,
            (focus_round(1, None),),
        )
        context = ConversationContext(
            student_name="Maria", conversation_history=history, round_number=1
        )
        payload = builder(context, QUESTION)
        assert "ROUND FOCUS:" not in payload.system_prompt
        assert "Current round: 1 - Problem Solving" in payload.user_prompt

    def test_answered_question_position(self, history):
        two_questions = Round(
            id=1,
            title="Problem Solving",
            questions=[
                Question(letter="A", template=QUESTION, example_answer="Once I..."),
                Question(letter="B", template="What did you learn?", example_answer="I learned..."),
            ],
        )
        builder = GuidedRoundBuilder(
            job_interview.GUIDED_ROUND_SCRIPT, LevelId.BEGINNER, (two_questions,)
        )
        context = ConversationContext(
            student_name="Maria",
            conversation_history=history,
            round_number=1,
            question_index=1,
        )
        payload = builder(context, "What did you learn?")
        assert "Current round: 1 - Problem Solving (question 2 of 2)" in payload.user_prompt

    def test_out_of_range_question_index_ignored(self, history):
        builder = GuidedRoundBuilder(
            job_interview.GUIDED_ROUND_SCRIPT, LevelId.BEGINNER, (focus_round(1, None),)
        )
        context = ConversationContext(
            student_name="Maria",
            conversation_history=history,
            round_number=1,
            question_index=5,
        )
        payload = builder(context, QUESTION)
        assert "Current round: 1 - Problem Solving\n" in payload.user_prompt


@pytest.mark.unit
class TestGuidedBuilder:
    @pytest.mark.parametrize(
        "level, opening",
        [
            (LevelId.BEGINNER, "Hello, Maria. Nice to see you today. Tell me about yourself."),
            (LevelId.INTERMEDIATE, "Welcome back, Maria! How many years have you been working?"),
            (LevelId.ADVANCED, "Welcome, Maria! What was your last job?"),
        ],
    )
    def test_opening_line_per_level(self, context, level, opening):
        payload = GuidedBuilder(job_interview.GUIDED_SCRIPT, level)(context, 1)
        assert opening in payload.user_prompt

    def test_prompt_contents(self, context):
        payload = GuidedBuilder(job_interview.GUIDED_SCRIPT, LevelId.ADVANCED)(context, 3)

        assert "FEEDBACK STRUCTURE (3-4 sentences in English):" in payload.system_prompt
        assert "QUALITY GUIDELINES (ADVANCED LEVEL):" in payload.system_prompt
        assert "with an advanced-level student named Maria" in payload.user_prompt
        assert "Current turn number: 3" in payload.user_prompt
        assert "Thank you for the interview, Maria." in payload.user_prompt
        assert '"tutorMessage"' in payload.user_prompt
        assert payload.ends_session is False
