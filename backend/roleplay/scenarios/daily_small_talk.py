"""Daily small talk scenario."""

from roleplay.models.prompt import LevelId, ScenarioId
from roleplay.models.scenario import FreeModeScript, GuidedRoundScript, ScenarioConfig
from roleplay.scenarios.rounds.daily_small_talk import (
    ADVANCED_ROUNDS,
    BEGINNER_ROUNDS,
    INTERMEDIATE_ROUNDS,
)

SCENARIO = ScenarioConfig(
    id=ScenarioId.DAILY_SMALL_TALK.value,
    title="Daily Small Talk",
    rounds={
        LevelId.BEGINNER: BEGINNER_ROUNDS,
        LevelId.INTERMEDIATE: INTERMEDIATE_ROUNDS,
        LevelId.ADVANCED: ADVANCED_ROUNDS,
    },
)

FREE_SCRIPT = FreeModeScript(
    simulation="personalized daily small talk simulation",
    role_description=(
        "You are a patient, encouraging English teacher helping Italian learners "
        "practice casual conversations. You act as a colleague or friendly neighbor "
        "and conduct natural, personalized small talk conversations."
    ),
    topic_guidelines=(
        "- Make questions relevant to daily small talk: greetings, weather, work, "
        "hobbies, weekend plans, etc.",
        "- Cover typical small talk topics: day-to-day life, interests, casual "
        "questions, friendly conversation",
    ),
    greeting="as a colleague or friendly neighbor and start a casual conversation",
    opening_questions=("How's your day going?", "Is this your first time here?"),
    transition=lambda day, first_time: (
        "That's nice! I'm glad to hear that. Let's chat a bit more."
    ),
    answer_placeholders=("their day", "their answer"),
    question_noun="small talk question",
    question_focus="relevant to daily conversation",
    closing_message=(
        "Great job! This completes our small talk practice. If you want, we can "
        "repeat it or try a different role play."
    ),
)

GUIDED_ROUND_SCRIPT = GuidedRoundScript(
    simulation="daily small talk conversation simulation",
    practice_goal="practice casual everyday conversations in English",
    goal_setting=" in friendly, informal situations",
    setting="a casual daily conversation",
    question_kind="small talk",
    recognition_examples={
        LevelId.BEGINNER: (
            "\"You said 'I'm fine' correctly\" or \"You answered with a full sentence\""
        ),
        LevelId.INTERMEDIATE: (
            "\"You used 'thanks' correctly\" or "
            "\"You structured your response well with 'I usually'\""
        ),
        LevelId.ADVANCED: (
            "\"You used 'to be honest' naturally\" or "
            "\"You kept the conversation going with a follow-up question\""
        ),
    },
    pronunciation_examples={
        LevelId.BEGINNER: (
            "/ˈwiːkend/ and explain in simple English - e.g., \"Try pronouncing "
            "'weekend' /ˈwiːkend/ with a long 'ee' sound\""
        ),
        LevelId.INTERMEDIATE: "/wel/ and explain in simple English",
        LevelId.ADVANCED: (
            "/ˈweðə(r)/ and explain in simple English - e.g., \"Try pronouncing "
            "'weather' /ˈweðə(r)/ with the soft 'th' sound /ð/\""
        ),
    },
)
