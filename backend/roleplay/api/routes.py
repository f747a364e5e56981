"""API routes for prompt resolution, the scenario catalog and health checks."""

from fastapi import APIRouter, HTTPException

from roleplay.core.config import get_settings
from roleplay.core.errors import (
    InvalidReplyError,
    InvalidTurnNumberError,
    PromptError,
    PromptNotImplementedError,
    UnknownScenarioError,
)
from roleplay.models.prompt import (
    ChatMessage,
    CompletionRequest,
    LevelId,
    PromptPayload,
    PromptRequest,
    TutorReply,
)
from roleplay.models.scenario import RoundView, ScenarioSummary
from roleplay.services.prompt_service import prompt_service

router = APIRouter()

ERROR_STATUS = {
    UnknownScenarioError: 404,
    PromptNotImplementedError: 501,
    InvalidTurnNumberError: 422,
    InvalidReplyError: 422,
}


def _http_error(error: PromptError) -> HTTPException:
    status_code = ERROR_STATUS.get(type(error), 400)
    return HTTPException(
        status_code=status_code,
        detail=f"Session could not continue: {error}",
    )


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": "0.1.0",
        "scenarios": len(prompt_service.list_scenarios()),
    }


@router.get("/scenarios", response_model=list[ScenarioSummary])
async def list_scenarios():
    """List available scenarios."""
    return prompt_service.list_scenarios()


@router.get("/scenarios/{scenario_id}/rounds/{level_id}", response_model=list[RoundView])
async def get_rounds(scenario_id: str, level_id: LevelId, student_name: str = "Student"):
    """Get the predefined rounds of a scenario for a level."""
    views = prompt_service.round_views(scenario_id, level_id, student_name)
    if views is None:
        raise HTTPException(status_code=404, detail=f"Scenario {scenario_id} not found")
    return views


@router.post("/prompts", response_model=PromptPayload)
async def build_prompt(request: PromptRequest):
    """Resolve the system and user prompt for the next tutor turn."""
    try:
        return prompt_service.build_prompt(request)
    except PromptError as e:
        raise _http_error(e) from e


@router.post("/prompts/messages", response_model=list[ChatMessage])
async def build_messages(request: PromptRequest):
    """Resolve the next tutor turn as chat messages for an LLM client."""
    try:
        return prompt_service.build_messages(request)
    except PromptError as e:
        raise _http_error(e) from e


@router.post("/replies", response_model=TutorReply)
async def parse_reply(request: CompletionRequest):
    """Read an LLM completion back as a structured tutor reply."""
    try:
        return prompt_service.parse_reply(request.completion)
    except PromptError as e:
        raise _http_error(e) from e
