"""Meeting Someone New rounds for each level."""

from roleplay.models.scenario import Difficulty, Question, Round

BEGINNER_ROUNDS = (
    Round(
        id=1,
        title="General Interaction",
        description="Basic introductions and getting to know someone",
        questions=[
            Question(
                letter="A",
                template=(
                    "Nice to meet you. What's your name? Here is a possible answer: "
                    "'Nice to meet you too. I'm Alex.' Now please tell me your name."
                ),
                example_answer="Nice to meet you too. I'm Alex.",
                difficulty=Difficulty.EASY,
                topics=("introductions", "names", "greetings"),
            ),
            Question(
                letter="B",
                template=(
                    "Where are you from? Here is a possible answer: 'I'm from "
                    "Florence, but I live here now.' Now please tell me where you are "
                    "from."
                ),
                example_answer="I'm from Florence, but I live here now.",
                difficulty=Difficulty.EASY,
                topics=("origin", "location", "background"),
            ),
            Question(
                letter="C",
                template=(
                    "Is this your first time at this event? Here is a possible "
                    "answer: 'Yes, it is. It looks very nice.' Now please tell me if "
                    "this is your first time at this event."
                ),
                example_answer="Yes, it is. It looks very nice.",
                difficulty=Difficulty.EASY,
                topics=("first time", "events", "impressions"),
            ),
        ],
    ),
    Round(
        id=2,
        title="Social & Friendly Interaction",
        description="Getting to know someone better through friendly conversation",
        questions=[
            Question(
                letter="A",
                template=(
                    "What do you do for work? Here is a possible answer: 'I work in "
                    "marketing. I help with online content.' Now please tell me what "
                    "you do for work."
                ),
                example_answer="I work in marketing. I help with online content.",
                difficulty=Difficulty.EASY,
                topics=("work", "profession", "career"),
            ),
            Question(
                letter="B",
                template=(
                    "How do you know the host? Here is a possible answer: 'We met "
                    "through a friend some time ago.' Now please tell me how you know "
                    "the host."
                ),
                example_answer="We met through a friend some time ago.",
                difficulty=Difficulty.EASY,
                topics=("connections", "relationships", "social"),
            ),
            Question(
                letter="C",
                template=(
                    "What do you like doing in your free time? Here is a possible "
                    "answer: 'I like reading, walking, and meeting friends.' Now "
                    "please tell me what you like doing in your free time."
                ),
                example_answer="I like reading, walking, and meeting friends.",
                difficulty=Difficulty.EASY,
                topics=("hobbies", "interests", "free time"),
            ),
        ],
    ),
    Round(
        id=3,
        title="Handling Challenging Situations",
        description="Dealing with questions and maintaining conversation",
        questions=[
            Question(
                letter="A",
                template=(
                    "Can I ask why you came here today? Here is a possible answer: "
                    "'Sure. I wanted to meet new people and see the event.' Now "
                    "please tell me why you came here today."
                ),
                example_answer="Sure. I wanted to meet new people and see the event.",
                difficulty=Difficulty.EASY,
                topics=("reasons", "motivations", "intentions"),
            ),
            Question(
                letter="B",
                template=(
                    "Sorry, I didn't catch your name. Can you say it again? Here is a "
                    "possible answer: 'Of course! It's Alex.' Now please tell me your "
                    "name again."
                ),
                example_answer="Of course! It's Alex.",
                difficulty=Difficulty.EASY,
                topics=("clarification", "repetition", "politeness"),
            ),
            Question(
                letter="C",
                template=(
                    "Would you like to stay in touch? Here is a possible answer: "
                    "'Yes, that would be nice. I can give you my number or "
                    "Instagram.' Now please tell me if you would like to stay in "
                    "touch."
                ),
                example_answer=(
                    "Yes, that would be nice. I can give you my number or Instagram."
                ),
                difficulty=Difficulty.EASY,
                topics=("contact", "future plans", "social connections"),
            ),
        ],
    ),
)

INTERMEDIATE_ROUNDS = (
    Round(
        id=1,
        title="General Interaction",
        description="Basic introductions and getting to know someone",
        questions=[
            Question(
                letter="A",
                template=(
                    "Nice to meet you. What's your name? Here is a possible answer: "
                    "'Nice to meet you too. I'm Alex.' Now please tell me your name."
                ),
                example_answer="Nice to meet you too. I'm Alex.",
                difficulty=Difficulty.MEDIUM,
                topics=("introductions", "names", "greetings"),
            ),
            Question(
                letter="B",
                template=(
                    "Where are you from? Here is a possible answer: 'I'm from "
                    "Florence, but I live here now.' Now please tell me where you are "
                    "from."
                ),
                example_answer="I'm from Florence, but I live here now.",
                difficulty=Difficulty.MEDIUM,
                topics=("origin", "location", "background"),
            ),
            Question(
                letter="C",
                template=(
                    "Is this your first time at this event? Here is a possible "
                    "answer: 'Yes, it is. Everything looks really nice.' Now please "
                    "tell me if this is your first time at this event."
                ),
                example_answer="Yes, it is. Everything looks really nice.",
                difficulty=Difficulty.MEDIUM,
                topics=("first time", "events", "impressions"),
            ),
        ],
    ),
    Round(
        id=2,
        title="Social & Friendly Interaction",
        description="Getting to know someone better through friendly conversation",
        questions=[
            Question(
                letter="A",
                template=(
                    "What do you do for work? Here is a possible answer: 'I work in "
                    "marketing. I help with online content and communication.' Now "
                    "please tell me what you do for work."
                ),
                example_answer=(
                    "I work in marketing. I help with online content and "
                    "communication."
                ),
                difficulty=Difficulty.MEDIUM,
                topics=("work", "profession", "career"),
            ),
            Question(
                letter="B",
                template=(
                    "How do you know the host? Here is a possible answer: 'We met "
                    "through a friend some time ago.' Now please tell me how you know "
                    "the host."
                ),
                example_answer="We met through a friend some time ago.",
                difficulty=Difficulty.MEDIUM,
                topics=("connections", "relationships", "social"),
            ),
            Question(
                letter="C",
                template=(
                    "What do you like doing in your free time? Here is a possible "
                    "answer: 'I like reading, going for walks, and meeting friends.' "
                    "Now please tell me what you like doing in your free time."
                ),
                example_answer="I like reading, going for walks, and meeting friends.",
                difficulty=Difficulty.MEDIUM,
                topics=("hobbies", "interests", "free time"),
            ),
        ],
    ),
    Round(
        id=3,
        title="Handling Challenging Situations",
        description="Dealing with questions and maintaining conversation",
        questions=[
            Question(
                letter="A",
                template=(
                    "Can I ask what brought you here today? Here is a possible "
                    "answer: 'Sure. I wanted to meet new people and see what this "
                    "event is like.' Now please tell me what brought you here today."
                ),
                example_answer=(
                    "Sure. I wanted to meet new people and see what this event is "
                    "like."
                ),
                difficulty=Difficulty.MEDIUM,
                topics=("reasons", "motivations", "intentions"),
            ),
            Question(
                letter="B",
                template=(
                    "Sorry, I didn't catch your name. Could you say it again? Here is "
                    "a possible answer: 'Of course! It's Alex.' Now please tell me "
                    "your name again."
                ),
                example_answer="Of course! It's Alex.",
                difficulty=Difficulty.MEDIUM,
                topics=("clarification", "repetition", "politeness"),
            ),
            Question(
                letter="C",
                template=(
                    "Would you like to stay in touch? Here is a possible answer: "
                    "'Yes, that would be nice. I can give you my number or "
                    "Instagram.' Now please tell me if you would like to stay in "
                    "touch."
                ),
                example_answer=(
                    "Yes, that would be nice. I can give you my number or Instagram."
                ),
                difficulty=Difficulty.MEDIUM,
                topics=("contact", "future plans", "social connections"),
            ),
        ],
    ),
)

ADVANCED_ROUNDS = (
    Round(
        id=1,
        title="General Interaction",
        description="Advanced introductions and getting to know someone",
        questions=[
            Question(
                letter="A",
                template=(
                    "Nice to meet you. What's your name? Here is a possible answer: "
                    "'Nice to meet you too. I'm Alex.' Now please tell me your name."
                ),
                example_answer="Nice to meet you too. I'm Alex.",
                difficulty=Difficulty.HARD,
                topics=("introductions", "names", "greetings"),
            ),
            Question(
                letter="B",
                template=(
                    "Where are you from? Here is a possible answer: 'I'm from "
                    "Florence, but I've been living here for a few years.' Now please "
                    "tell me where you are from."
                ),
                example_answer=(
                    "I'm from Florence, but I've been living here for a few years."
                ),
                difficulty=Difficulty.HARD,
                topics=("origin", "location", "background"),
            ),
            Question(
                letter="C",
                template=(
                    "Is this your first time at this event? Here is a possible "
                    "answer: 'Yes, it is. I wasn't sure what to expect, but it seems "
                    "really nice.' Now please tell me if this is your first time at "
                    "this event."
                ),
                example_answer=(
                    "Yes, it is. I wasn't sure what to expect, but it seems really "
                    "nice."
                ),
                difficulty=Difficulty.HARD,
                topics=("first time", "events", "impressions"),
            ),
        ],
    ),
    Round(
        id=2,
        title="Social & Friendly Interaction",
        description=(
            "Advanced getting to know someone better through friendly conversation"
        ),
        questions=[
            Question(
                letter="A",
                template=(
                    "What do you do for work? Here is a possible answer: 'I work in "
                    "marketing. I focus mostly on digital communication and "
                    "strategy.' Now please tell me what you do for work."
                ),
                example_answer=(
                    "I work in marketing. I focus mostly on digital communication and "
                    "strategy."
                ),
                difficulty=Difficulty.HARD,
                topics=("work", "profession", "career"),
            ),
            Question(
                letter="B",
                template=(
                    "How do you know the host/organizer? Here is a possible answer: "
                    "'We met through a mutual friend a couple of years ago.' Now "
                    "please tell me how you know the host/organizer."
                ),
                example_answer="We met through a mutual friend a couple of years ago.",
                difficulty=Difficulty.HARD,
                topics=("connections", "relationships", "social"),
            ),
            Question(
                letter="C",
                template=(
                    "What do you usually enjoy doing in your free time? Here is a "
                    "possible answer: 'I like reading, going to exhibitions, and "
                    "walking around the city.' Now please tell me what you usually "
                    "enjoy doing in your free time."
                ),
                example_answer=(
                    "I like reading, going to exhibitions, and walking around the "
                    "city."
                ),
                difficulty=Difficulty.HARD,
                topics=("hobbies", "interests", "free time"),
            ),
        ],
    ),
    Round(
        id=3,
        title="Handling More Complex or Subtle Interaction",
        description="Advanced dealing with questions and maintaining conversation",
        questions=[
            Question(
                letter="A",
                template=(
                    "I hope I'm not asking too much — can I ask what brought you here "
                    "today? Here is a possible answer: 'Not at all. I came because "
                    "I'm interested in meeting new people and learning more about the "
                    "community.' Now please tell me what brought you here today."
                ),
                example_answer=(
                    "Not at all. I came because I'm interested in meeting new people "
                    "and learning more about the community."
                ),
                difficulty=Difficulty.HARD,
                topics=("reasons", "motivations", "intentions"),
            ),
            Question(
                letter="B",
                template=(
                    "I'm sorry, I didn't catch your name earlier. Could you repeat "
                    "it? Here is a possible answer: 'Of course — it's Alex. Don't "
                    "worry, it happens all the time.' Now please tell me your name "
                    "again."
                ),
                example_answer=(
                    "Of course — it's Alex. Don't worry, it happens all the time."
                ),
                difficulty=Difficulty.HARD,
                topics=("clarification", "repetition", "politeness"),
            ),
            Question(
                letter="C",
                template=(
                    "Would you like to stay in touch? Here is a possible answer: "
                    "'Yes, absolutely. Let me give you my number or Instagram — "
                    "whichever you prefer.' Now please tell me if you would like to "
                    "stay in touch."
                ),
                example_answer=(
                    "Yes, absolutely. Let me give you my number or Instagram — "
                    "whichever you prefer."
                ),
                difficulty=Difficulty.HARD,
                topics=("contact", "future plans", "social connections"),
            ),
        ],
    ),
)
