"""Prompt resolution: picks the builder for a request and runs it."""

from functools import lru_cache

from roleplay.core.errors import PromptNotImplementedError, UnknownScenarioError
from roleplay.core.logging import get_logger, prompt_context
from roleplay.models.prompt import (
    ConversationContext,
    LevelId,
    PracticeMode,
    PromptPayload,
    wire_value,
)
from roleplay.models.scenario import Round
from roleplay.prompts.registry import PromptRegistry
from roleplay.prompts.rounds import has_rounds, rounds_for_level
from roleplay.scenarios.catalog import build_default_registry

logger = get_logger(__name__)


class PromptResolver:
    """
    Single entry point for building prompts.

    Resolution order:
    1. Unknown scenario fails.
    2. Guided mode with a predefined question, on a level that has rounds,
       uses the round builder for the scenario and level when one exists.
    3. Everything else uses the standard builder for scenario, level and
       mode; free mode receives the turn number (default 1).
    """

    def __init__(self, registry: PromptRegistry):
        self.registry = registry

    def resolve(
        self,
        scenario_id: str,
        level_id: LevelId | str,
        mode: PracticeMode | str,
        context: ConversationContext,
        predefined_question: str | None = None,
        turn_number: int | None = None,
    ) -> PromptPayload:
        """
        Build the prompt payload for a request.

        @param scenario_id - Scenario id, e.g. "jobInterview"
        @param level_id - beginner, intermediate or advanced
        @param mode - guided or free
        @param context - Conversation context from the caller
        @param predefined_question - Next round question, if any
        @param turn_number - Free-mode turn; falls back to the context, then 1
        @returns Prompt payload
        @raises UnknownScenarioError - When the scenario is not registered
        @raises PromptNotImplementedError - When no builder matches
        @raises InvalidTurnNumberError - When a free-mode turn is out of range
        """
        scenario = self.registry.get_scenario(scenario_id)
        if scenario is None:
            raise UnknownScenarioError(wire_value(scenario_id))

        level = wire_value(level_id)
        mode = wire_value(mode)
        question = predefined_question or context.predefined_question
        turn = turn_number if turn_number is not None else context.turn_number
        if turn is None:
            turn = 1

        if (
            mode == PracticeMode.GUIDED.value
            and question
            and has_rounds(scenario.rounds, level)
        ):
            round_builder = self.registry.guided_round_builder(scenario.id, level)
            if round_builder is not None:
                logger.debug(
                    "Using round builder",
                    extra=prompt_context(scenario.id, level, mode),
                )
                return round_builder(context, question)
            logger.debug(
                "No round builder registered, falling back to guided builder",
                extra=prompt_context(scenario.id, level, mode),
            )

        builder = self.registry.standard_builder(scenario.id, level, mode)
        if builder is None:
            raise PromptNotImplementedError(scenario.id, level, mode)

        logger.debug(
            "Using standard builder",
            extra=prompt_context(scenario.id, level, mode, turn),
        )
        return builder(context, turn)

    def scenario_rounds(self, scenario_id: str, level_id: LevelId | str) -> tuple[Round, ...]:
        """Get the rounds for a scenario and level; empty for unknown scenarios."""
        scenario = self.registry.get_scenario(scenario_id)
        if scenario is None:
            return ()
        return rounds_for_level(scenario.rounds, wire_value(level_id))


@lru_cache
def get_resolver() -> PromptResolver:
    """Get the shared resolver over the built-in scenarios."""
    return PromptResolver(build_default_registry())


def resolve_prompt(
    scenario_id: str,
    level_id: LevelId | str,
    mode: PracticeMode | str,
    context: ConversationContext,
    predefined_question: str | None = None,
    turn_number: int | None = None,
) -> PromptPayload:
    """Resolve a prompt with the shared resolver."""
    return get_resolver().resolve(
        scenario_id,
        level_id,
        mode,
        context,
        predefined_question=predefined_question,
        turn_number=turn_number,
    )
