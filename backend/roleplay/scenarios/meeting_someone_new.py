"""Meeting someone new scenario."""

from roleplay.models.prompt import LevelId, ScenarioId
from roleplay.models.scenario import FreeModeScript, GuidedRoundScript, ScenarioConfig
from roleplay.scenarios.rounds.meeting_someone_new import (
    ADVANCED_ROUNDS,
    BEGINNER_ROUNDS,
    INTERMEDIATE_ROUNDS,
)

SCENARIO = ScenarioConfig(
    id=ScenarioId.MEETING_SOMEONE_NEW.value,
    title="Meeting Someone New",
    rounds={
        LevelId.BEGINNER: BEGINNER_ROUNDS,
        LevelId.INTERMEDIATE: INTERMEDIATE_ROUNDS,
        LevelId.ADVANCED: ADVANCED_ROUNDS,
    },
)


def _transition(name: str, origin: str) -> str:
    return (
        f"That's great! Nice to meet you, {name}. "
        f"It's nice to meet someone from {origin}."
    )


FREE_SCRIPT = FreeModeScript(
    simulation="personalized meeting someone new simulation",
    role_description=(
        "You are a patient, encouraging English teacher helping Italian learners "
        "practice meeting new people. You act as someone they just met at an event "
        "and conduct natural, personalized conversations to get to know them."
    ),
    topic_guidelines=(
        "- Make questions relevant to meeting someone new: introductions, background, "
        "interests, work, hobbies, etc.",
        "- Cover typical first-meeting topics: name, origin, work, interests, how they "
        "know people at the event, event-related questions",
    ),
    greeting="as someone you just met at an event and start the conversation",
    opening_questions=("Nice to meet you. What's your name?", "Where are you from?"),
    transition=_transition,
    answer_placeholders=("their name", "their origin"),
    question_noun="meeting question",
    question_focus="relevant to getting to know them",
    closing_message=(
        "Great job! This completes our meeting someone new practice. If you want, "
        "we can repeat it or try a different role play."
    ),
)

GUIDED_ROUND_SCRIPT = GuidedRoundScript(
    simulation="meeting someone new conversation simulation",
    practice_goal="practice meeting new people in English",
    goal_setting=" in social situations",
    setting="a first meeting at a social event",
    question_kind="introduction",
    recognition_examples={
        LevelId.BEGINNER: (
            "\"You said 'Nice to meet you' correctly\" or "
            "\"You used 'I'm from...' well\""
        ),
        LevelId.INTERMEDIATE: (
            "\"You used 'I work as...' correctly\" or "
            "\"You asked a friendly question back\""
        ),
        LevelId.ADVANCED: (
            "\"You used 'I've been living here for...' correctly\" or "
            "\"You shared details that kept the conversation going\""
        ),
    },
    pronunciation_examples={
        LevelId.BEGINNER: (
            "/miːt/ and explain in simple English - e.g., \"Try pronouncing 'meet' "
            "/miːt/ with a long 'ee' sound\""
        ),
        LevelId.INTERMEDIATE: (
            "/ˈhɒbi/ and explain in simple English - e.g., \"Try pronouncing 'hobby' "
            "/ˈhɒbi/ with a clear 'h' at the start\""
        ),
        LevelId.ADVANCED: "/ˌɪntrəˈdʌkʃn/ and explain in simple English",
    },
)
