"""Built-in scenarios and their builder registrations."""

from roleplay.core.logging import get_logger
from roleplay.models.prompt import LevelId, PracticeMode
from roleplay.prompts.builders import GuidedBuilder, GuidedRoundBuilder
from roleplay.prompts.free_mode import FreeModeBuilder
from roleplay.prompts.registry import PromptRegistry
from roleplay.prompts.rounds import rounds_for_level
from roleplay.scenarios import (
    at_the_cafe,
    daily_small_talk,
    job_interview,
    meeting_someone_new,
)

logger = get_logger(__name__)

SCENARIO_MODULES = (
    job_interview,
    at_the_cafe,
    daily_small_talk,
    meeting_someone_new,
)


def build_default_registry() -> PromptRegistry:
    """
    Register every built-in scenario.

    Each scenario gets a free-mode builder and a predefined-question builder
    per level. Only the job interview has guided builders for conversations
    without round questions.

    @returns Populated registry
    """
    registry = PromptRegistry()

    for module in SCENARIO_MODULES:
        scenario = module.SCENARIO
        registry.register_scenario(scenario)

        for level in LevelId:
            registry.register_standard(
                scenario.id,
                level,
                PracticeMode.FREE,
                FreeModeBuilder(module.FREE_SCRIPT, level, scenario_id=scenario.id),
            )
            registry.register_guided_round(
                scenario.id,
                level,
                GuidedRoundBuilder(
                    module.GUIDED_ROUND_SCRIPT,
                    level,
                    rounds_for_level(scenario.rounds, level),
                ),
            )

            guided_script = getattr(module, "GUIDED_SCRIPT", None)
            if guided_script is not None:
                registry.register_standard(
                    scenario.id,
                    level,
                    PracticeMode.GUIDED,
                    GuidedBuilder(guided_script, level),
                )

    logger.info(f"Registered {len(registry.scenarios())} scenarios")
    return registry
