"""Job interview scenario."""

from roleplay.models.prompt import LevelId, ScenarioId
from roleplay.models.scenario import (
    FreeModeScript,
    GuidedRoundScript,
    GuidedScript,
    ScenarioConfig,
)
from roleplay.scenarios.rounds.job_interview import (
    ADVANCED_ROUNDS,
    BEGINNER_ROUNDS,
    INTERMEDIATE_ROUNDS,
)

SCENARIO = ScenarioConfig(
    id=ScenarioId.JOB_INTERVIEW.value,
    title="Job Interview",
    rounds={
        LevelId.BEGINNER: BEGINNER_ROUNDS,
        LevelId.INTERMEDIATE: INTERMEDIATE_ROUNDS,
        LevelId.ADVANCED: ADVANCED_ROUNDS,
    },
)


def _transition(company: str, position: str) -> str:
    return f"Great, I will help you practice an interview for {company}. Let's begin!"


FREE_SCRIPT = FreeModeScript(
    simulation="personalized job interview simulation",
    role_description=(
        "You are a patient, encouraging English teacher helping Italian learners "
        "practice job interviews. You conduct natural, personalized conversations "
        "based on the company and position the student mentions."
    ),
    topic_guidelines=(
        "- Make questions relevant to the specific company and position",
        "- Cover typical interview topics: experience, skills, motivation, teamwork, "
        "problem-solving, etc.",
    ),
    greeting="and welcome them to the interview practice session",
    opening_questions=(
        "What company are you going to apply to?",
        "What position are you going to apply for?",
    ),
    transition=_transition,
    answer_placeholders=("the company", "the position"),
    answer_fields=("company_name", "position_name"),
    question_noun="interview question",
    question_focus="relevant to the position and company the student mentioned",
    closing_message=(
        "Thank you for the interview practice, {student_name}. "
        "You did great! Keep practicing."
    ),
)

GUIDED_ROUND_SCRIPT = GuidedRoundScript(
    simulation="job interview simulation",
    practice_goal="practice job interviews",
    setting="a job interview",
    question_kind="interview",
    recognition_examples={
        LevelId.BEGINNER: (
            "\"You used the structure 'I am...' correctly\" or "
            "\"Your answer was clear and direct\""
        ),
        LevelId.INTERMEDIATE: (
            "\"You used 'I was responsible for' correctly\" or "
            "\"You gave a clear example from your experience\""
        ),
        LevelId.ADVANCED: (
            "\"You used professional vocabulary like 'streamline' correctly\" or "
            "\"You structured your answer well with clear examples\""
        ),
    },
    pronunciation_examples={
        LevelId.BEGINNER: (
            "/wɜːrk/ and explain in simple English - e.g., \"Try pronouncing 'work' "
            "/wɜːrk/ with a clear 'r' sound\""
        ),
        LevelId.INTERMEDIATE: (
            "/ɪkˈspɪəriəns/ and explain in simple English - e.g., \"Try pronouncing "
            "'experience' /ɪkˈspɪəriəns/ with the stress on the second syllable\""
        ),
        LevelId.ADVANCED: (
            "/strɪːmlaɪn/ and explain in simple English - e.g., \"Try pronouncing "
            "'streamline' /strɪːmlaɪn/ with emphasis on the first syllable\""
        ),
    },
)

GUIDED_SCRIPT = GuidedScript(
    simulation="job interview simulation",
    activity="conducting a job interview",
    role_description=(
        "You are a patient, encouraging English teacher helping Italian learners "
        "practice job interviews. You conduct natural conversations while providing "
        "constructive feedback."
    ),
    opening_lines={
        LevelId.BEGINNER: (
            "Hello, {student_name}. Nice to see you today. Tell me about yourself. "
            "Here is an answer you can use as a guide. Now why don't you try? "
            "'I am a positive person. I like working with people. I learn fast, "
            "and I enjoy doing a good job.'"
        ),
        LevelId.INTERMEDIATE: (
            "Welcome back, {student_name}! How many years have you been working?"
        ),
        LevelId.ADVANCED: "Welcome, {student_name}! What was your last job?",
    },
    closing_message=(
        "Thank you for the interview, {student_name}. You did great! Keep practicing."
    ),
)
