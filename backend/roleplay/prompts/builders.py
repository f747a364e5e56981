"""Guided-mode prompt builders."""

from roleplay.models.prompt import (
    ConversationContext,
    LevelId,
    PromptPayload,
    ResponseFormat,
)
from roleplay.models.scenario import GuidedRoundScript, GuidedScript, Round
from roleplay.prompts.composer import (
    compose_system_prompt,
    compose_user_prompt,
    response_shape,
)
from roleplay.prompts.fragments import (
    FEEDBACK_GUIDELINES,
    GUIDED_FEEDBACK_DEPTH,
    GUIDED_FEEDBACK_STRUCTURE,
    GUIDED_MODE_INSTRUCTIONS,
    GUIDED_QUESTION_STYLE,
    LANGUAGE_REGISTER,
    ROLE_DEPTH,
    ROLE_LEVEL,
    ROUNDS_INSTRUCTIONS,
    STUDENT_LEVEL_ARTICLE,
    role_block,
)
from roleplay.prompts.rounds import find_round

GUIDED_REPLY_SHAPE = """Return a JSON object with this structure:
{
  "tutorMessage": "string - The feedback in ENGLISH followed by the next question in English, or just the question if it's the first turn",
  "shouldEnd": boolean - true if the conversation should end,
  "closingMessage": "string - Optional closing message if shouldEnd is true"
}"""


class GuidedRoundBuilder:
    """
    Builds feedback-only prompts for predefined round questions.

    The LLM is told to locate the last tutor question and student answer in
    the history itself, and to echo the predefined question back unchanged.
    """

    def __init__(self, script: GuidedRoundScript, level: LevelId, rounds: tuple[Round, ...]):
        self.script = script
        self.level = level
        self.rounds = rounds

    def __call__(self, context: ConversationContext, predefined_question: str) -> PromptPayload:
        current_round = find_round(self.rounds, context.round_number)

        system_prompt = compose_system_prompt(
            self._role(),
            ROUNDS_INSTRUCTIONS,
            GUIDED_FEEDBACK_STRUCTURE,
            self._guidelines(current_round),
        )

        round_line = self._round_line(current_round, context.question_index)

        user_prompt = compose_user_prompt(
            f"""The student just answered your previous question in {self.script.setting}.
{round_line}
Conversation history so far:
{context.history_text()}

The question that was asked: [Find the last tutor question in the conversation history]

The student's answer: [Find the last student/user message in the conversation history]""",
            self._request(predefined_question),
        )

        return PromptPayload(
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            response_format=ResponseFormat.STRUCTURED,
        )

    def _round_line(self, current_round: Round | None, question_index: int | None) -> str:
        """Name the current round, and the answered question when the index is known."""
        if not current_round:
            return ""

        line = f"Current round: {current_round.id} - {current_round.title}"
        total = len(current_round.questions)
        if question_index is not None and 0 <= question_index < total:
            line += f" (question {question_index + 1} of {total})"
        return f"\n{line}\n"

    def _role(self) -> str:
        script = self.script
        return role_block(
            script.simulation,
            f"You are a patient, encouraging English teacher helping Italian learners "
            f"{script.practice_goal}{ROLE_LEVEL[self.level]}. You provide constructive "
            f"feedback that helps students improve their speaking skills"
            f"{script.goal_setting}{ROLE_DEPTH[self.level]}.",
        )

    def _guidelines(self, current_round: Round | None) -> str:
        guidelines = FEEDBACK_GUIDELINES[self.level]
        overrides = current_round.feedback_overrides if current_round else None
        if not overrides:
            return guidelines

        focus = ["ROUND FOCUS:"]
        if overrides.feedback_style:
            focus.append(f"- Feedback style for this round: {overrides.feedback_style}")
        if overrides.focus_areas:
            focus.append(f"- Pay special attention to: {', '.join(overrides.focus_areas)}")
        if len(focus) == 1:
            return guidelines
        return f"{guidelines}\n\n" + "\n".join(focus)

    def _request(self, predefined_question: str) -> str:
        script = self.script
        recognition = script.recognition_examples[self.level]
        pronunciation = script.pronunciation_examples[self.level]
        shape = response_shape(
            {
                "feedback": "string - Your helpful feedback in ENGLISH (3-4 sentences, no question)",
                "question": f"string - The predefined question exactly as provided: {predefined_question}",
                "shouldEnd": False,
            },
            heading="Return a JSON object with this structure:",
        )

        return f"""Now you need to:
1. Analyze their answer carefully - what did they say correctly? What needs improvement?
2. Provide helpful feedback in ENGLISH (3-4 sentences) following this structure:
   - Recognition: What they did well (be specific about words, phrases, or pronunciation - e.g., {recognition})
   - Specific Suggestion: ONE clear improvement tip with pronunciation guide if needed (use phonetic notation like /θ/, {pronunciation})
   - Example Response: ONE concrete example of a better way to respond, based on the question that was asked
   - Encouragement: A brief, motivating note

3. The next question is already defined and will be asked separately: "{predefined_question}"

IMPORTANT:
- Only provide feedback in ENGLISH so the avatar can pronounce it. Do NOT include the question in your response.
- The predefined question may contain an example answer (e.g., "Here is a possible answer: '...'"), but you should return it exactly as provided.
- Be specific: Instead of "good job", say exactly what was good (e.g., {recognition})
- Make pronunciation tips clear: Use phonetic notation AND explain in simple English
- Make examples relevant: Base them on the actual {script.question_kind} question that was asked
- {LANGUAGE_REGISTER[self.level]}

{shape}"""


class GuidedBuilder:
    """Builds question-and-feedback prompts for guided practice without rounds."""

    def __init__(self, script: GuidedScript, level: LevelId):
        self.script = script
        self.level = level

    def __call__(self, context: ConversationContext, turn_number: int) -> PromptPayload:
        script = self.script
        name = context.student_name

        system_prompt = compose_system_prompt(
            role_block(script.simulation, script.role_description),
            GUIDED_MODE_INSTRUCTIONS,
            GUIDED_FEEDBACK_STRUCTURE,
            FEEDBACK_GUIDELINES[self.level],
        )

        opening = script.opening_lines[self.level].format(student_name=name)
        closing = script.closing_message.format(student_name=name)

        user_prompt = compose_user_prompt(
            f"""You are {script.activity} in English with {STUDENT_LEVEL_ARTICLE[self.level]} student named {name}.

Current turn number: {turn_number}

Conversation history so far:
{context.history_text()}""",
            f"""Based on the conversation history, generate the NEXT question or response from the tutor.

IMPORTANT INSTRUCTIONS:
- If this is turn 1 and there's no greeting yet, start with: "{opening}"
- If the student just answered, provide feedback in ENGLISH (3-4 sentences) with {GUIDED_FEEDBACK_DEPTH[self.level]}, following the feedback structure, then ask the next natural follow-up question in English.
- {GUIDED_QUESTION_STYLE[self.level]}
- After 4-5 questions, you can start wrapping up the conversation.
- If it's time to end, provide a closing message like: "{closing}"

You must respond ONLY with valid JSON. Do not include any text before or after the JSON.

{GUIDED_REPLY_SHAPE}""",
        )

        return PromptPayload(
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            response_format=ResponseFormat.STRUCTURED,
        )
