"""At the cafe scenario."""

import re

from roleplay.models.prompt import LevelId, ScenarioId
from roleplay.models.scenario import FreeModeScript, GuidedRoundScript, ScenarioConfig
from roleplay.scenarios.rounds.at_the_cafe import (
    ADVANCED_ROUNDS,
    BEGINNER_ROUNDS,
    INTERMEDIATE_ROUNDS,
)

SCENARIO = ScenarioConfig(
    id=ScenarioId.AT_THE_CAFE.value,
    title="At the Cafe",
    rounds={
        LevelId.BEGINNER: BEGINNER_ROUNDS,
        LevelId.INTERMEDIATE: INTERMEDIATE_ROUNDS,
        LevelId.ADVANCED: ADVANCED_ROUNDS,
    },
)

_TAKEAWAY = re.compile(r"\bgo\b", re.IGNORECASE)


def _transition(order: str, preference: str) -> str:
    if _TAKEAWAY.search(preference):
        return "Perfect! I'll get that ready for you. It will be ready in a few minutes."
    return "Perfect! I'll get that ready for you. You can sit anywhere you like."


FREE_SCRIPT = FreeModeScript(
    simulation="personalized cafe interaction simulation",
    role_description=(
        "You are a patient, encouraging English teacher helping Italian learners "
        "practice ordering at a cafe. You act as a cafe staff member and conduct "
        "natural, personalized conversations based on what the student wants to order."
    ),
    topic_guidelines=(
        "- Make questions relevant to the cafe experience: ordering, preferences, "
        "seating, payment, etc.",
        "- Cover typical cafe topics: drinks, food, special requests, problems, "
        "small talk with staff",
    ),
    greeting="as a cafe staff member and welcome them to the cafe",
    opening_questions=("What would you like?", "For here or to go?"),
    transition=_transition,
    answer_placeholders=("their order", "their order preference"),
    question_noun="cafe question",
    question_focus="relevant to their order or cafe experience",
    closing_message=(
        "Great job! This completes our cafe practice. If you want, we can repeat it "
        "or try a different role play."
    ),
)

GUIDED_ROUND_SCRIPT = GuidedRoundScript(
    simulation="café conversation simulation",
    practice_goal="practice ordering at a café in English",
    goal_setting=" in everyday café situations",
    setting="a café conversation",
    question_kind="café",
    recognition_examples={
        LevelId.BEGINNER: "\"You said 'please' correctly\" or \"You used 'I'd like' well\"",
        LevelId.INTERMEDIATE: (
            "\"You used 'Could I have' correctly\" or "
            "\"You asked about the size politely\""
        ),
        LevelId.ADVANCED: (
            "\"You used 'I'd like' correctly\" or "
            "\"You made a polite request with 'if it's possible'\""
        ),
    },
    pronunciation_examples={
        LevelId.BEGINNER: (
            "/kɔːfi/ and explain in simple English - e.g., \"Try pronouncing 'coffee' "
            "/kɔːfi/ with the 'o' sound /ɔː/\""
        ),
        LevelId.INTERMEDIATE: (
            "/ˈmʌfɪn/ and explain in simple English - e.g., \"Try pronouncing 'muffin' "
            "/ˈmʌfɪn/ with a short 'u' sound /ʌ/\""
        ),
        LevelId.ADVANCED: "/kæpʊˈtʃiːnoʊ/ and explain in simple English",
    },
)
