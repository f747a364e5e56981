"""Free-mode prompts: a fixed ten-turn conversation."""

from enum import Enum

from roleplay.core.errors import InvalidTurnNumberError
from roleplay.core.logging import get_logger, prompt_context
from roleplay.models.prompt import (
    ConversationContext,
    LevelId,
    PromptPayload,
    ResponseFormat,
)
from roleplay.models.scenario import FreeModeScript
from roleplay.prompts.composer import (
    compose_system_prompt,
    compose_user_prompt,
    response_shape,
)
from roleplay.prompts.fragments import (
    DYNAMIC_QUESTION_STYLE,
    FIRST_QUESTION_STYLE,
    FREE_FEEDBACK_STRUCTURE,
    FREE_MODE_INSTRUCTIONS,
    QUESTION_LEVEL_GUIDELINES,
    role_block,
)

logger = get_logger(__name__)

FIRST_TURN = 1
LAST_TURN = 10
# Two opening questions, then one question per turn from 4 to 9
TOTAL_QUESTIONS = 8
ANSWER_PLACEHOLDER = "their answer"


class TurnStage(str, Enum):
    """Stages of a free-mode conversation."""

    GREETING = "greeting"
    FIRST_OPENING_QUESTION = "first_opening_question"
    SECOND_OPENING_QUESTION = "second_opening_question"
    TRANSITION = "transition"
    DYNAMIC_QUESTION = "dynamic_question"
    CLOSING = "closing"


TURN_STAGES = {
    1: TurnStage.GREETING,
    2: TurnStage.FIRST_OPENING_QUESTION,
    3: TurnStage.SECOND_OPENING_QUESTION,
    4: TurnStage.TRANSITION,
    **{turn: TurnStage.DYNAMIC_QUESTION for turn in range(5, LAST_TURN)},
    LAST_TURN: TurnStage.CLOSING,
}


def stage_for_turn(turn_number: int) -> TurnStage:
    """
    Map a turn number to its conversation stage.

    @param turn_number - Caller-maintained turn counter
    @returns Stage for the turn
    @raises InvalidTurnNumberError - When the turn is outside 1-10
    """
    stage = TURN_STAGES.get(turn_number)
    if stage is None:
        raise InvalidTurnNumberError(turn_number, FIRST_TURN, LAST_TURN)
    return stage


class FreeModeBuilder:
    """
    Builds free-mode prompts for one scenario and level.

    Nothing is remembered between calls: each prompt is derived from the
    turn number and the history the caller sends.
    """

    def __init__(
        self,
        script: FreeModeScript,
        level: LevelId,
        scenario_id: str | None = None,
    ):
        self.script = script
        self.level = level
        self.scenario_id = scenario_id

    def __call__(self, context: ConversationContext, turn_number: int) -> PromptPayload:
        stage = stage_for_turn(turn_number)

        if stage is TurnStage.GREETING:
            user_content = self._greeting(context)
        elif stage is TurnStage.FIRST_OPENING_QUESTION:
            user_content = self._first_opening_question()
        elif stage is TurnStage.SECOND_OPENING_QUESTION:
            user_content = self._second_opening_question()
        elif stage is TurnStage.TRANSITION:
            user_content = self._transition(context)
        elif stage is TurnStage.DYNAMIC_QUESTION:
            user_content = self._dynamic_question(context, turn_number)
        else:
            user_content = self._closing(context)

        return PromptPayload(
            system_prompt=self._system_prompt(),
            user_prompt=compose_user_prompt(None, user_content),
            response_format=ResponseFormat.STRUCTURED,
            ends_session=stage is TurnStage.CLOSING,
        )

    def _system_prompt(self) -> str:
        script = self.script
        guidelines = [
            "QUESTION GUIDELINES:",
            *script.topic_guidelines,
            *QUESTION_LEVEL_GUIDELINES[self.level],
            f"- Ask {TOTAL_QUESTIONS} questions in total (2 opening questions, then "
            f"{TOTAL_QUESTIONS - 2} {script.question_noun}s), then provide a closing message",
        ]
        return compose_system_prompt(
            role_block(script.simulation, script.role_description),
            FREE_MODE_INSTRUCTIONS,
            FREE_FEEDBACK_STRUCTURE,
            "\n".join(guidelines),
        )

    def _greeting(self, context: ConversationContext) -> str:
        shape = response_shape(
            {
                "tutorMessage": "Your greeting message here",
                "question": "Your greeting message here",
                "feedback": None,
                "shouldEnd": False,
            }
        )
        return f"""This is the first turn. Greet the student {context.student_name} warmly {self.script.greeting}.

IMPORTANT:
- Only greet the student. Do NOT ask a question yet and do NOT give feedback.

{shape}"""

    def _fixed_question(self, question: str, lead: str, no_reactions: bool) -> str:
        shape = response_shape(
            {
                "tutorMessage": question,
                "question": question,
                "feedback": None,
                "shouldEnd": False,
            }
        )
        reactions = ", no reactions" if no_reactions else ""
        return f"""{lead}Ask the student ONLY this question: "{question}"

IMPORTANT:
- Return ONLY the question, no feedback{reactions}, no additional comments
- Do NOT include any example or explanation
- Wait for the student's response before continuing

{shape}"""

    def _first_opening_question(self) -> str:
        return self._fixed_question(self.script.opening_questions[0], "", no_reactions=False)

    def _second_opening_question(self) -> str:
        return self._fixed_question(
            self.script.opening_questions[1],
            "The student just answered the first question. Now ",
            no_reactions=True,
        )

    def _opening_answer(self, context: ConversationContext, index: int) -> str:
        """
        Get the student's answer to an opening question.

        A named context field wins over history. Otherwise the answer to the
        first question is the second most recent student message and the
        answer to the second question is the most recent one.
        """
        field = self.script.answer_fields[index]
        if field:
            named = getattr(context, field, None)
            if named:
                return named

        answer = context.recent_user_message(2 - index)
        if answer is None:
            placeholder = self.script.answer_placeholders[index]
            logger.warning(
                "Missing answer to opening question %d, using placeholder '%s'",
                index + 1,
                placeholder,
                extra=prompt_context(self.scenario_id, self.level, turn_number=4),
            )
            return placeholder
        return answer

    def _transition(self, context: ConversationContext) -> str:
        script = self.script
        first_answer = self._opening_answer(context, 0)
        second_answer = self._opening_answer(context, 1)
        transition = script.transition(first_answer, second_answer)
        noun = script.question_noun

        shape = response_shape(
            {
                "tutorMessage": f"{transition} [Your first {noun} here]",
                "question": f"{transition} [Your first {noun} here]",
                "feedback": None,
                "shouldEnd": False,
            }
        )
        return f"""The student answered "{script.opening_questions[0]}" with: "{first_answer}"
and "{script.opening_questions[1]}" with: "{second_answer}".

Now you need to:
1. Say a brief transition like: "{transition}"
2. Immediately after the transition, ask the FIRST {noun} (question 3 of {TOTAL_QUESTIONS} total) {script.question_focus}.

IMPORTANT:
- Combine the transition and the first question in ONE message
- This is the FIRST dynamic {noun}
- {FIRST_QUESTION_STYLE[self.level]}
- Do NOT give feedback yet, just the transition + question

{shape}"""

    def _dynamic_question(self, context: ConversationContext, turn_number: int) -> str:
        script = self.script
        noun = script.question_noun
        last_answer = context.recent_user_message(1)
        if last_answer is None:
            logger.warning(
                "Missing latest student answer, using placeholder '%s'",
                ANSWER_PLACEHOLDER,
                extra=prompt_context(self.scenario_id, self.level, turn_number=turn_number),
            )
            last_answer = ANSWER_PLACEHOLDER

        question_number = turn_number - 1
        turns_left = LAST_TURN - turn_number

        shape = response_shape(
            {
                "tutorMessage": "[Feedback] [Question]",
                "feedback": "Your brief feedback here (1 sentence max)",
                "question": f"Your next {noun} here",
                "shouldEnd": False,
            }
        )
        return f"""The student just answered your previous {noun}: "{last_answer}"

Conversation history:
{context.history_text()}

Now you need to:
1. Give brief, friendly, and encouraging feedback (1 sentence maximum). Be specific and positive.
2. Ask the NEXT {noun} (question {question_number} of {TOTAL_QUESTIONS} total) {script.question_focus}.

IMPORTANT:
- This is question {question_number} ({turns_left} turn(s) left before the closing message)
- Base your question on the student's previous answers
- {DYNAMIC_QUESTION_STYLE[self.level]}
- Always be friendly, warm, and encouraging
- Keep feedback brief and specific (1 sentence max)

{shape}"""

    def _closing(self, context: ConversationContext) -> str:
        closing = self.script.closing_message.format(student_name=context.student_name)
        shape = response_shape(
            {
                "tutorMessage": closing,
                "question": None,
                "feedback": None,
                "shouldEnd": True,
                "closingMessage": closing,
            }
        )
        return f"""The student just answered your last {self.script.question_noun} (question {TOTAL_QUESTIONS}). You already gave feedback for that answer.

Now provide a closing message like: "{closing}"

IMPORTANT:
- This is the closing message
- Be warm and encouraging
- Do NOT ask any more questions
- Do NOT give feedback again

{shape}"""
