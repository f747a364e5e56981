"""Registry of scenarios and the builders that serve them."""

from typing import Callable

from roleplay.models.prompt import (
    ConversationContext,
    LevelId,
    PracticeMode,
    PromptPayload,
    wire_value,
)
from roleplay.models.scenario import ScenarioConfig

# (context, turn_number) -> payload
StandardBuilder = Callable[[ConversationContext, int], PromptPayload]
# (context, predefined_question) -> payload
RoundBuilder = Callable[[ConversationContext, str], PromptPayload]


class PromptRegistry:
    """
    Scenario configs and prompt builders keyed by scenario, level and mode.

    Populated once at startup and only read afterwards, so a single
    registry can be shared by concurrent callers.
    """

    def __init__(self):
        self._scenarios: dict[str, ScenarioConfig] = {}
        self._standard: dict[tuple[str, str, str], StandardBuilder] = {}
        self._guided_round: dict[tuple[str, str], RoundBuilder] = {}

    def register_scenario(self, config: ScenarioConfig) -> None:
        """Add a scenario config."""
        self._scenarios[config.id] = config

    def register_standard(
        self,
        scenario_id: str,
        level_id: LevelId | str,
        mode: PracticeMode | str,
        builder: StandardBuilder,
    ) -> None:
        """Register the builder for a scenario, level and mode."""
        key = (wire_value(scenario_id), wire_value(level_id), wire_value(mode))
        self._standard[key] = builder

    def register_guided_round(
        self,
        scenario_id: str,
        level_id: LevelId | str,
        builder: RoundBuilder,
    ) -> None:
        """Register the predefined-question builder for a scenario and level."""
        self._guided_round[(wire_value(scenario_id), wire_value(level_id))] = builder

    def get_scenario(self, scenario_id: str) -> ScenarioConfig | None:
        """Get a scenario config by id."""
        return self._scenarios.get(wire_value(scenario_id))

    def standard_builder(
        self,
        scenario_id: str,
        level_id: LevelId | str,
        mode: PracticeMode | str,
    ) -> StandardBuilder | None:
        """Get the builder for a scenario, level and mode."""
        key = (wire_value(scenario_id), wire_value(level_id), wire_value(mode))
        return self._standard.get(key)

    def guided_round_builder(self, scenario_id: str, level_id: LevelId | str) -> RoundBuilder | None:
        """Get the predefined-question builder for a scenario and level."""
        return self._guided_round.get((wire_value(scenario_id), wire_value(level_id)))

    def scenarios(self) -> list[ScenarioConfig]:
        """List scenario configs in registration order."""
        return list(self._scenarios.values())
