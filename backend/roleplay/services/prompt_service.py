"""Prompt service: resolves prompts and exposes the scenario catalog."""

import time

from langchain_core.messages import SystemMessage
from pydantic import ValidationError

from roleplay.core.errors import InvalidReplyError, PromptError
from roleplay.core.logging import get_logger, prompt_context
from roleplay.models.prompt import (
    ChatMessage,
    LevelId,
    PromptPayload,
    PromptRequest,
    TutorReply,
    wire_value,
)
from roleplay.models.scenario import RoundView, ScenarioSummary
from roleplay.prompts.resolver import PromptResolver, get_resolver
from roleplay.prompts.rounds import rounds_for_level

logger = get_logger(__name__)


class PromptService:
    """
    Front door for the HTTP layer.

    Wraps the shared resolver, times each resolution and logs the outcome.
    """

    def __init__(self, resolver: PromptResolver | None = None):
        self._resolver = resolver

    @property
    def resolver(self) -> PromptResolver:
        if self._resolver is None:
            self._resolver = get_resolver()
        return self._resolver

    def build_prompt(self, request: PromptRequest) -> PromptPayload:
        """
        Resolve the prompt for a request.

        @param request - Scenario, level, mode and conversation context
        @returns Prompt payload
        @raises PromptError - When the request cannot be served
        """
        log_extra = prompt_context(
            request.scenario_id,
            request.level_id,
            request.mode,
            request.turn_number or request.context.turn_number,
        )
        started = time.perf_counter()

        try:
            payload = self.resolver.resolve(
                request.scenario_id,
                request.level_id,
                request.mode,
                request.context,
                predefined_question=request.predefined_question,
                turn_number=request.turn_number,
            )
        except PromptError as e:
            logger.warning(f"Prompt resolution failed: {e}", extra=log_extra)
            raise

        latency_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.info(
            "Prompt resolved",
            extra={**log_extra, "latency_ms": latency_ms},
        )
        return payload

    def build_messages(self, request: PromptRequest) -> list[ChatMessage]:
        """
        Resolve the prompt and render it as chat messages.

        @param request - Scenario, level, mode and conversation context
        @returns System message followed by the user message
        @raises PromptError - When the request cannot be served
        """
        messages = []
        for msg in self.build_prompt(request).to_messages():
            role = "system" if isinstance(msg, SystemMessage) else "user"
            messages.append(ChatMessage(role=role, content=msg.content))
        return messages

    def parse_reply(self, completion: str) -> TutorReply:
        """
        Read an LLM completion back as a structured tutor reply.

        A markdown code fence around the JSON is tolerated.

        @param completion - Raw completion text
        @returns Parsed reply
        @raises InvalidReplyError - When the text is not a valid reply object
        """
        text = completion.strip()
        if text.startswith("```"):
            text = text.strip("`").removeprefix("json").strip()

        try:
            return TutorReply.model_validate_json(text)
        except ValidationError as e:
            reason = e.errors()[0]["msg"]
            logger.warning(f"Tutor reply rejected: {reason}")
            raise InvalidReplyError(reason) from e

    def list_scenarios(self) -> list[ScenarioSummary]:
        """List registered scenarios with their round counts per level."""
        return [
            ScenarioSummary(
                id=scenario.id,
                title=scenario.title,
                rounds_per_level={
                    level: len(rounds_for_level(scenario.rounds, level))
                    for level in LevelId
                },
            )
            for scenario in self.resolver.registry.scenarios()
        ]

    def round_views(
        self,
        scenario_id: str,
        level_id: LevelId | str,
        student_name: str = "Student",
    ) -> list[RoundView] | None:
        """
        Render the rounds of a scenario and level for a student.

        @param scenario_id - Scenario id
        @param level_id - Level id
        @param student_name - Name substituted into question templates
        @returns Round views, or None when the scenario is unknown
        """
        if self.resolver.registry.get_scenario(scenario_id) is None:
            return None

        rounds = self.resolver.scenario_rounds(scenario_id, wire_value(level_id))
        return [
            RoundView(
                id=r.id,
                title=r.title,
                description=r.description,
                questions=[q.render(student_name) for q in r.questions],
                example_answers=[q.example_answer for q in r.questions],
            )
            for r in rounds
        ]


# Global instance
prompt_service = PromptService()
