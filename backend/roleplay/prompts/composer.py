"""Prompt composition: joins fragments in a fixed order."""

import json
from typing import Any

from pydantic import BaseModel

SECTION_SEPARATOR = "\n\n"


class PromptComponents(BaseModel):
    """Optional prompt sections. Field order is the output order."""

    role: str | None = None
    instructions: str | None = None
    feedback_structure: str | None = None
    guidelines: str | None = None
    context: str | None = None
    user_content: str | None = None


def compose_prompt(components: PromptComponents) -> str:
    """
    Join the present sections with one blank line between them.

    Missing or blank sections are skipped; each section is trimmed so the
    result never carries leading, trailing or doubled blank lines between
    sections.

    @param components - Sections to join
    @returns Composed prompt text
    """
    parts = []
    for name in PromptComponents.model_fields:
        text = getattr(components, name)
        if text and text.strip():
            parts.append(text.strip())
    return SECTION_SEPARATOR.join(parts)


def compose_system_prompt(
    role: str,
    instructions: str,
    feedback_structure: str | None = None,
    guidelines: str | None = None,
) -> str:
    """Compose a system message from role, instructions and feedback rules."""
    return compose_prompt(
        PromptComponents(
            role=role,
            instructions=instructions,
            feedback_structure=feedback_structure,
            guidelines=guidelines,
        )
    )


def compose_user_prompt(context: str | None, user_content: str | None) -> str:
    """Compose a user message from conversation context and the request."""
    return compose_prompt(PromptComponents(context=context, user_content=user_content))


def response_shape(fields: dict[str, Any], heading: str = "RESPONSE FORMAT (JSON):") -> str:
    """Render the JSON object the LLM is asked to return."""
    return f"{heading}\n{json.dumps(fields, indent=2, ensure_ascii=False)}"
