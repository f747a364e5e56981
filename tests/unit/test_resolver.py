"""Unit tests for prompt resolution (no LLM)."""
import pytest

from roleplay.core.errors import (
    InvalidTurnNumberError,
    PromptNotImplementedError,
    UnknownScenarioError,
)
from roleplay.models.prompt import (
    ConversationContext,
    LevelId,
    PracticeMode,
    PromptPayload,
    ResponseFormat,
    ScenarioId,
)
from roleplay.models.scenario import ScenarioConfig
from roleplay.prompts.registry import PromptRegistry
from roleplay.prompts.resolver import PromptResolver, get_resolver, resolve_prompt
from roleplay.scenarios import at_the_cafe, job_interview

QUESTION = "What is your biggest strength?"


def fake_builder(label):
    """Builder that records what it was called with."""
    calls = []

    def build(context, arg):
        calls.append((context, arg))
        return PromptPayload(system_prompt=label, user_prompt=str(arg))

    build.calls = calls
    return build


@pytest.mark.unit
class TestGuidedRoundDispatch:
    def test_round_question_for_job_interview_beginner(self, resolver, context):
        payload = resolver.resolve(
            "jobInterview",
            "beginner",
            "guided",
            context,
            predefined_question=QUESTION,
        )
        assert QUESTION in payload.user_prompt
        assert "BEGINNER" in payload.system_prompt
        assert payload.response_format == ResponseFormat.STRUCTURED
        assert payload.ends_session is False

    def test_predefined_question_from_context(self, resolver, history):
        context = ConversationContext(
            student_name="Maria",
            conversation_history=history,
            predefined_question=QUESTION,
        )
        payload = resolver.resolve("jobInterview", "beginner", "guided", context)
        assert QUESTION in payload.user_prompt
        assert "[Find the last tutor question" in payload.user_prompt

    def test_enum_and_string_ids_are_interchangeable(self, resolver, context):
        by_string = resolver.resolve(
            "atTheCafe", "advanced", "guided", context, predefined_question=QUESTION
        )
        by_enum = resolver.resolve(
            ScenarioId.AT_THE_CAFE,
            LevelId.ADVANCED,
            PracticeMode.GUIDED,
            context,
            predefined_question=QUESTION,
        )
        assert by_string == by_enum

    def test_guided_without_question_uses_standard_builder(self, resolver, context):
        payload = resolver.resolve("jobInterview", "intermediate", "guided", context)
        assert "How many years have you been working?" in payload.user_prompt
        assert "Current turn number: 1" in payload.user_prompt

    def test_guided_without_question_not_implemented_for_cafe(self, resolver, context):
        with pytest.raises(PromptNotImplementedError) as exc_info:
            resolver.resolve("atTheCafe", "beginner", "guided", context)
        assert exc_info.value.scenario_id == "atTheCafe"
        assert exc_info.value.mode == "guided"


@pytest.mark.unit
class TestFallbacks:
    def test_missing_round_builder_falls_back_to_standard(self, context):
        registry = PromptRegistry()
        registry.register_scenario(job_interview.SCENARIO)
        standard = fake_builder("standard")
        registry.register_standard("jobInterview", "beginner", "guided", standard)

        payload = PromptResolver(registry).resolve(
            "jobInterview", "beginner", "guided", context, predefined_question=QUESTION
        )

        assert payload.system_prompt == "standard"
        assert standard.calls == [(context, 1)]

    def test_level_without_rounds_ignores_predefined_question(self, context):
        registry = PromptRegistry()
        registry.register_scenario(ScenarioConfig(id="jobInterview", title="Job Interview"))
        registry.register_standard("jobInterview", "beginner", "guided", fake_builder("standard"))
        registry.register_guided_round("jobInterview", "beginner", fake_builder("round"))
        resolver = PromptResolver(registry)

        with_question = resolver.resolve(
            "jobInterview", "beginner", "guided", context, predefined_question=QUESTION
        )
        without_question = resolver.resolve("jobInterview", "beginner", "guided", context)

        assert with_question == without_question
        assert with_question.system_prompt == "standard"

    def test_free_mode_ignores_predefined_question(self, resolver, empty_context):
        with_question = resolver.resolve(
            "atTheCafe", "beginner", "free", empty_context, predefined_question=QUESTION
        )
        without_question = resolver.resolve("atTheCafe", "beginner", "free", empty_context)
        assert with_question == without_question


@pytest.mark.unit
class TestTurnNumber:
    def test_defaults_to_first_turn(self, resolver, empty_context):
        payload = resolver.resolve("atTheCafe", "advanced", "free", empty_context)
        assert "This is the first turn" in payload.user_prompt

    def test_turn_from_context(self, resolver):
        context = ConversationContext(student_name="Luca", turn_number=10)
        payload = resolver.resolve("atTheCafe", "advanced", "free", context)
        assert payload.ends_session is True

    def test_explicit_turn_wins_over_context(self, resolver):
        context = ConversationContext(student_name="Luca", turn_number=10)
        payload = resolver.resolve("atTheCafe", "advanced", "free", context, turn_number=1)
        assert payload.ends_session is False
        assert "This is the first turn" in payload.user_prompt

    def test_turn_out_of_range(self, resolver, empty_context):
        with pytest.raises(InvalidTurnNumberError):
            resolver.resolve("atTheCafe", "advanced", "free", empty_context, turn_number=11)


@pytest.mark.unit
class TestErrors:
    def test_unknown_scenario(self, resolver, context):
        with pytest.raises(UnknownScenarioError) as exc_info:
            resolver.resolve("unknownX", "beginner", "free", context)
        assert exc_info.value.scenario_id == "unknownX"
        assert str(exc_info.value) == "Scenario unknownX not found"

    def test_unknown_scenario_checked_before_builders(self, context):
        registry = PromptRegistry()
        registry.register_standard("unknownX", "beginner", "free", fake_builder("x"))
        with pytest.raises(UnknownScenarioError):
            PromptResolver(registry).resolve("unknownX", "beginner", "free", context)

    def test_not_implemented_message(self, context):
        registry = PromptRegistry()
        registry.register_scenario(at_the_cafe.SCENARIO)
        with pytest.raises(PromptNotImplementedError) as exc_info:
            PromptResolver(registry).resolve("atTheCafe", "advanced", "free", context)
        assert str(exc_info.value) == (
            "Prompt not implemented for scenario: atTheCafe, level: advanced, mode: free"
        )


@pytest.mark.unit
class TestIdempotence:
    @pytest.mark.parametrize("turn", [1, 4, 7, 10])
    def test_free_mode_is_repeatable(self, resolver, context, turn):
        first = resolver.resolve("jobInterview", "advanced", "free", context, turn_number=turn)
        second = resolver.resolve("jobInterview", "advanced", "free", context, turn_number=turn)
        assert first.model_dump_json() == second.model_dump_json()

    def test_guided_round_is_repeatable(self, resolver, context):
        args = ("dailySmallTalk", "intermediate", "guided", context)
        first = resolver.resolve(*args, predefined_question=QUESTION)
        second = resolver.resolve(*args, predefined_question=QUESTION)
        assert first.model_dump_json() == second.model_dump_json()


@pytest.mark.unit
class TestScenarioRounds:
    def test_rounds_for_known_scenario(self, resolver):
        rounds = resolver.scenario_rounds("jobInterview", LevelId.BEGINNER)
        assert [r.id for r in rounds] == [1, 2, 3]

    def test_unknown_scenario_has_no_rounds(self, resolver):
        assert resolver.scenario_rounds("unknownX", "beginner") == ()

    def test_returned_rounds_cannot_be_mutated(self, resolver, context):
        rounds = resolver.scenario_rounds("jobInterview", "beginner")
        with pytest.raises(AttributeError):
            rounds.clear()

        assert len(resolver.scenario_rounds("jobInterview", "beginner")) == 3
        assert len(get_resolver().scenario_rounds("jobInterview", "beginner")) == 3
        payload = resolver.resolve(
            "jobInterview", "beginner", "guided", context, predefined_question=QUESTION
        )
        assert QUESTION in payload.user_prompt


@pytest.mark.unit
class TestSharedResolver:
    def test_shared_resolver_is_cached(self):
        assert get_resolver() is get_resolver()

    def test_resolve_prompt_uses_shared_resolver(self, context):
        payload = resolve_prompt(
            "jobInterview", "beginner", "guided", context, predefined_question=QUESTION
        )
        expected = get_resolver().resolve(
            "jobInterview", "beginner", "guided", context, predefined_question=QUESTION
        )
        assert payload == expected
