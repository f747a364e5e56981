"""Errors raised while resolving and building prompts."""


class PromptError(Exception):
    """Base class for prompt resolution failures."""


class UnknownScenarioError(PromptError):
    """Raised when a scenario id is not in the registry."""

    def __init__(self, scenario_id: str):
        self.scenario_id = scenario_id
        super().__init__(f"Scenario {scenario_id} not found")


class PromptNotImplementedError(PromptError):
    """Raised when no builder is registered for a scenario/level/mode."""

    def __init__(self, scenario_id: str, level_id: str, mode: str):
        self.scenario_id = scenario_id
        self.level_id = level_id
        self.mode = mode
        super().__init__(
            f"Prompt not implemented for scenario: {scenario_id}, "
            f"level: {level_id}, mode: {mode}"
        )


class InvalidTurnNumberError(PromptError):
    """Raised when a free-mode turn number falls outside the session."""

    def __init__(self, turn_number: int, first: int = 1, last: int = 10):
        self.turn_number = turn_number
        self.first = first
        self.last = last
        super().__init__(
            f"Turn number {turn_number} is outside the supported range {first}-{last}"
        )


class InvalidReplyError(PromptError):
    """Raised when an LLM completion does not match the tutor reply shape."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Tutor reply could not be read: {reason}")
