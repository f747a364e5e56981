"""Unit tests for the built-in scenario catalog and registry."""
import pytest
from pydantic import ValidationError

from roleplay.models.prompt import LevelId, PracticeMode, ScenarioId
from roleplay.models.scenario import Question, Round, ScenarioConfig
from roleplay.prompts.registry import PromptRegistry
from roleplay.prompts.rounds import rounds_for_level


@pytest.mark.unit
class TestDefaultRegistry:
    def test_all_scenarios_registered_in_order(self, registry):
        assert [s.id for s in registry.scenarios()] == [s.value for s in ScenarioId]

    @pytest.mark.parametrize("scenario_id", list(ScenarioId))
    @pytest.mark.parametrize("level", list(LevelId))
    def test_free_and_round_builders_everywhere(self, registry, scenario_id, level):
        assert registry.standard_builder(scenario_id, level, PracticeMode.FREE) is not None
        assert registry.guided_round_builder(scenario_id, level) is not None

    @pytest.mark.parametrize("level", list(LevelId))
    def test_guided_standard_only_for_job_interview(self, registry, level):
        assert registry.standard_builder("jobInterview", level, "guided") is not None
        for scenario_id in ("atTheCafe", "dailySmallTalk", "meetingSomeoneNew"):
            assert registry.standard_builder(scenario_id, level, "guided") is None

    def test_lookup_accepts_strings_and_enums(self, registry):
        assert registry.get_scenario("atTheCafe") is registry.get_scenario(ScenarioId.AT_THE_CAFE)
        assert registry.get_scenario("nope") is None


@pytest.mark.unit
class TestRoundCatalogIntegrity:
    @pytest.mark.parametrize("scenario_id", list(ScenarioId))
    @pytest.mark.parametrize("level", list(LevelId))
    def test_rounds_present_and_well_formed(self, registry, scenario_id, level):
        rounds = rounds_for_level(registry.get_scenario(scenario_id).rounds, level)
        assert len(rounds) == 3
        assert len({r.id for r in rounds}) == len(rounds)
        for r in rounds:
            assert r.questions
            letters = [q.letter for q in r.questions]
            assert len(set(letters)) == len(letters)
            for q in r.questions:
                assert q.render("Maria").strip()
                assert q.example_answer.strip()


@pytest.mark.unit
class TestScenarioValidation:
    def _round(self, round_id):
        return Round(
            id=round_id,
            title="Round",
            questions=[Question(letter="A", template="Hi, {student_name}?", example_answer="Hi.")],
        )

    def test_duplicate_round_ids_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate round ids"):
            ScenarioConfig(
                id="x",
                title="X",
                rounds={LevelId.BEGINNER: [self._round(1), self._round(1)]},
            )

    def test_same_id_in_different_levels_allowed(self):
        config = ScenarioConfig(
            id="x",
            title="X",
            rounds={LevelId.BEGINNER: [self._round(1)], LevelId.ADVANCED: [self._round(1)]},
        )
        assert len(rounds_for_level(config.rounds, "advanced")) == 1

    def test_level_catalog_is_read_only(self, registry):
        catalog = registry.get_scenario("jobInterview").rounds
        assert isinstance(catalog[LevelId.BEGINNER], tuple)
        with pytest.raises(TypeError):
            catalog[LevelId.BEGINNER] = ()

    def test_flat_catalog_stored_as_tuple(self):
        config = ScenarioConfig(id="x", title="X", rounds=[self._round(1)])
        assert isinstance(config.rounds, tuple)

    def test_round_without_questions_rejected(self):
        with pytest.raises(ValidationError):
            Round(id=1, title="Empty", questions=[])

    def test_question_render(self):
        assert self._round(1).questions[0].render("Maria") == "Hi, Maria?"


@pytest.mark.unit
class TestRegistry:
    def test_empty_registry_lookups(self):
        registry = PromptRegistry()
        assert registry.scenarios() == []
        assert registry.standard_builder("jobInterview", "beginner", "free") is None
        assert registry.guided_round_builder("jobInterview", "beginner") is None

    def test_register_with_enums_lookup_with_strings(self):
        registry = PromptRegistry()

        def builder(context, turn):
            return None

        registry.register_standard(
            ScenarioId.JOB_INTERVIEW, LevelId.ADVANCED, PracticeMode.FREE, builder
        )
        assert registry.standard_builder("jobInterview", "advanced", "free") is builder
