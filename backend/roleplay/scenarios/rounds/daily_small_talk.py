"""Daily Small Talk rounds for each level."""

from roleplay.models.scenario import Difficulty, Question, Round

BEGINNER_ROUNDS = (
    Round(
        id=1,
        title="General Interaction",
        description="Basic everyday conversation starters",
        questions=[
            Question(
                letter="A",
                template=(
                    "How's your day going? Here is a possible answer: 'It's going "
                    "well, thanks. A little busy, but not too bad.' Now please tell "
                    "me how your day is going."
                ),
                example_answer=(
                    "It's going well, thanks. A little busy, but not too bad."
                ),
                difficulty=Difficulty.EASY,
                topics=("daily life", "feelings", "polite responses"),
            ),
            Question(
                letter="B",
                template=(
                    "Is this your first time here? Here is a possible answer: 'Yes, "
                    "it is. I wanted to try this place today.' Now please tell me if "
                    "this is your first time here."
                ),
                example_answer="Yes, it is. I wanted to try this place today.",
                difficulty=Difficulty.EASY,
                topics=("first time", "location", "intentions"),
            ),
            Question(
                letter="C",
                template=(
                    "Are you having a good week so far? Here is a possible answer: "
                    "'Yes, so far it's been good. Just a little busy.' Now please "
                    "tell me how your week is going."
                ),
                example_answer="Yes, so far it's been good. Just a little busy.",
                difficulty=Difficulty.EASY,
                topics=("week", "progress", "feelings"),
            ),
        ],
    ),
    Round(
        id=2,
        title="Social & Small Talk",
        description="Casual social conversation topics",
        questions=[
            Question(
                letter="A",
                template=(
                    "What do you usually do on weekends? Here is a possible answer: "
                    "'I usually relax, meet friends, or watch something at home.' Now "
                    "please tell me what you usually do on weekends."
                ),
                example_answer=(
                    "I usually relax, meet friends, or watch something at home."
                ),
                difficulty=Difficulty.EASY,
                topics=("weekends", "activities", "habits"),
            ),
            Question(
                letter="B",
                template=(
                    "Have you seen any good movies or shows lately? Here is a "
                    "possible answer: 'Yes, I watched a nice movie last week. I "
                    "really liked it.' Now please tell me about movies or shows "
                    "you've seen."
                ),
                example_answer=(
                    "Yes, I watched a nice movie last week. I really liked it."
                ),
                difficulty=Difficulty.EASY,
                topics=("entertainment", "movies", "shows"),
            ),
            Question(
                letter="C",
                template=(
                    "Do you have any plans for later today? Here is a possible "
                    "answer: 'Nothing big. I might go for a walk or see a friend.' "
                    "Now please tell me about your plans for later today."
                ),
                example_answer="Nothing big. I might go for a walk or see a friend.",
                difficulty=Difficulty.EASY,
                topics=("plans", "future", "activities"),
            ),
        ],
    ),
    Round(
        id=3,
        title="Handling Problems & Requests",
        description="Dealing with interruptions and social situations",
        questions=[
            Question(
                letter="A",
                template=(
                    "Sorry, am I interrupting? Here is a possible answer: 'No, it's "
                    "okay. I'm not very busy.' Now please tell me if I'm "
                    "interrupting."
                ),
                example_answer="No, it's okay. I'm not very busy.",
                difficulty=Difficulty.EASY,
                topics=("interruptions", "politeness", "reassurance"),
            ),
            Question(
                letter="B",
                template=(
                    "I'm not sureâ€¦ have we met before? Here is a possible answer: "
                    "'Maybe! I think we met once, but I'm not sure.' Now please tell "
                    "me if we've met before."
                ),
                example_answer="Maybe! I think we met once, but I'm not sure.",
                difficulty=Difficulty.EASY,
                topics=("recognition", "uncertainty", "memory"),
            ),
            Question(
                letter="C",
                template=(
                    "Am I keeping you? Do you need to go? Here is a possible answer: "
                    "'No worries, I have a few minutes. It's fine.' Now please tell "
                    "me if I'm keeping you."
                ),
                example_answer="No worries, I have a few minutes. It's fine.",
                difficulty=Difficulty.EASY,
                topics=("time", "politeness", "reassurance"),
            ),
        ],
    ),
)

INTERMEDIATE_ROUNDS = (
    Round(
        id=1,
        title="General Interaction",
        description="Basic everyday conversation starters",
        questions=[
            Question(
                letter="A",
                template=(
                    "How's your day going? Here is a possible answer: 'It's going "
                    "well, thanks. A bit busy, but not too bad.' Now please tell me "
                    "how your day is going."
                ),
                example_answer="It's going well, thanks. A bit busy, but not too bad.",
                difficulty=Difficulty.MEDIUM,
                topics=("daily life", "feelings", "polite responses"),
            ),
            Question(
                letter="B",
                template=(
                    "Is this your first time here? Here is a possible answer: 'Yes, "
                    "it is. I wanted to try this place.' Now please tell me if this "
                    "is your first time here."
                ),
                example_answer="Yes, it is. I wanted to try this place.",
                difficulty=Difficulty.MEDIUM,
                topics=("first time", "location", "intentions"),
            ),
            Question(
                letter="C",
                template=(
                    "Are you having a good week so far? Here is a possible answer: "
                    "'Yes, so far it's been good. Just a little busy.' Now please "
                    "tell me how your week is going."
                ),
                example_answer="Yes, so far it's been good. Just a little busy.",
                difficulty=Difficulty.MEDIUM,
                topics=("week", "progress", "feelings"),
            ),
        ],
    ),
    Round(
        id=2,
        title="Social & Small Talk",
        description="Casual social conversation topics",
        questions=[
            Question(
                letter="A",
                template=(
                    "What do you usually do on weekends? Here is a possible answer: "
                    "'I usually relax, meet some friends, or watch something at "
                    "home.' Now please tell me what you usually do on weekends."
                ),
                example_answer=(
                    "I usually relax, meet some friends, or watch something at home."
                ),
                difficulty=Difficulty.MEDIUM,
                topics=("weekends", "activities", "habits"),
            ),
            Question(
                letter="B",
                template=(
                    "Have you seen any good movies or shows lately? Here is a "
                    "possible answer: 'Yes, I watched a nice movie last week. I "
                    "really enjoyed it.' Now please tell me about movies or shows "
                    "you've seen."
                ),
                example_answer=(
                    "Yes, I watched a nice movie last week. I really enjoyed it."
                ),
                difficulty=Difficulty.MEDIUM,
                topics=("entertainment", "movies", "shows"),
            ),
            Question(
                letter="C",
                template=(
                    "Do you have any plans for later today? Here is a possible "
                    "answer: 'Nothing big. I might go for a walk or meet a friend.' "
                    "Now please tell me about your plans for later today."
                ),
                example_answer="Nothing big. I might go for a walk or meet a friend.",
                difficulty=Difficulty.MEDIUM,
                topics=("plans", "future", "activities"),
            ),
        ],
    ),
    Round(
        id=3,
        title="Handling Problems & Requests",
        description="Dealing with interruptions and social situations",
        questions=[
            Question(
                letter="A",
                template=(
                    "Sorry, am I interrupting? Here is a possible answer: 'No, it's "
                    "okay. I'm not too busy.' Now please tell me if I'm interrupting."
                ),
                example_answer="No, it's okay. I'm not too busy.",
                difficulty=Difficulty.MEDIUM,
                topics=("interruptions", "politeness", "reassurance"),
            ),
            Question(
                letter="B",
                template=(
                    "I'm not sureâ€¦ have we met before? Here is a possible answer: "
                    "'Maybe! I think we met once, but I'm not sure either.' Now "
                    "please tell me if we've met before."
                ),
                example_answer="Maybe! I think we met once, but I'm not sure either.",
                difficulty=Difficulty.MEDIUM,
                topics=("recognition", "uncertainty", "memory"),
            ),
            Question(
                letter="C",
                template=(
                    "Am I keeping you? Do you need to go? Here is a possible answer: "
                    "'No worries, I have a few minutes. It's fine.' Now please tell "
                    "me if I'm keeping you."
                ),
                example_answer="No worries, I have a few minutes. It's fine.",
                difficulty=Difficulty.MEDIUM,
                topics=("time", "politeness", "reassurance"),
            ),
        ],
    ),
)

ADVANCED_ROUNDS = (
    Round(
        id=1,
        title="General Interaction",
        description="Advanced everyday conversation starters",
        questions=[
            Question(
                letter="A",
                template=(
                    "How's your day going? Here is a possible answer: 'Pretty well, "
                    "thanks. It's busy, but I'm managing.' Now please tell me how "
                    "your day is going."
                ),
                example_answer="Pretty well, thanks. It's busy, but I'm managing.",
                difficulty=Difficulty.HARD,
                topics=("daily life", "feelings", "polite responses"),
            ),
            Question(
                letter="B",
                template=(
                    "Is this your first time here? Here is a possible answer: 'Yes, "
                    "it is. I've heard good things, so I thought I'd stop by and "
                    "check it out.' Now please tell me if this is your first time "
                    "here."
                ),
                example_answer=(
                    "Yes, it is. I've heard good things, so I thought I'd stop by and "
                    "check it out."
                ),
                difficulty=Difficulty.HARD,
                topics=("first time", "location", "intentions"),
            ),
            Question(
                letter="C",
                template=(
                    "Are you having a good week so far? Here is a possible answer: "
                    "'Yes, it's been good so far—busy, but good.' Now please tell me "
                    "how your week is going."
                ),
                example_answer="Yes, it's been good so far—busy, but good.",
                difficulty=Difficulty.HARD,
                topics=("week", "progress", "feelings"),
            ),
        ],
    ),
    Round(
        id=2,
        title="Social & Small Talk",
        description="Advanced casual social conversation topics",
        questions=[
            Question(
                letter="A",
                template=(
                    "What do you usually do on weekends? Here is a possible answer: "
                    "'I usually try to relax, spend time with friends, and catch up "
                    "on things I didn't finish during the week.' Now please tell me "
                    "what you usually do on weekends."
                ),
                example_answer=(
                    "I usually try to relax, spend time with friends, and catch up on "
                    "things I didn't finish during the week."
                ),
                difficulty=Difficulty.HARD,
                topics=("weekends", "activities", "habits"),
            ),
            Question(
                letter="B",
                template=(
                    "Have you seen any good movies or shows lately? Here is a "
                    "possible answer: 'Yes, actually. I watched a great series last "
                    "week—really well written and surprisingly funny.' Now please "
                    "tell me about movies or shows you've seen."
                ),
                example_answer=(
                    "Yes, actually. I watched a great series last week—really well "
                    "written and surprisingly funny."
                ),
                difficulty=Difficulty.HARD,
                topics=("entertainment", "movies", "shows"),
            ),
            Question(
                letter="C",
                template=(
                    "Do you have any plans for today after this? Here is a possible "
                    "answer: 'Nothing special. I might go for a walk or grab a coffee "
                    "with a friend if they're free.' Now please tell me about your "
                    "plans for today after this."
                ),
                example_answer=(
                    "Nothing special. I might go for a walk or grab a coffee with a "
                    "friend if they're free."
                ),
                difficulty=Difficulty.HARD,
                topics=("plans", "future", "activities"),
            ),
        ],
    ),
    Round(
        id=3,
        title="Handling Problems & Requests",
        description="Advanced dealing with interruptions and social situations",
        questions=[
            Question(
                letter="A",
                template=(
                    "Sorry, may I ask you something—am I interrupting anything? Here "
                    "is a possible answer: 'Not at all. I'm just finishing something, "
                    "but I can take a break.' Now please tell me if I'm interrupting "
                    "anything."
                ),
                example_answer=(
                    "Not at all. I'm just finishing something, but I can take a "
                    "break."
                ),
                difficulty=Difficulty.HARD,
                topics=("interruptions", "politeness", "reassurance"),
            ),
            Question(
                letter="B",
                template=(
                    "I'm terrible with names… have we met before? Here is a possible "
                    "answer: 'Don't worry, it happens to everyone. Yes, we met "
                    "briefly last month at a charity event.' Now please tell me if "
                    "we've met before."
                ),
                example_answer=(
                    "Don't worry, it happens to everyone. Yes, we met briefly last "
                    "month at a charity event."
                ),
                difficulty=Difficulty.HARD,
                topics=("recognition", "uncertainty", "memory"),
            ),
            Question(
                letter="C",
                template=(
                    "I hope I'm not keeping you — were you leaving? Here is a "
                    "possible answer: 'I have a few minutes left, no problem. But "
                    "thank you for asking.' Now please tell me if I'm keeping you."
                ),
                example_answer=(
                    "I have a few minutes left, no problem. But thank you for asking."
                ),
                difficulty=Difficulty.HARD,
                topics=("time", "politeness", "reassurance"),
            ),
        ],
    ),
)
