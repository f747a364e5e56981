"""At the Café rounds for each level."""

from roleplay.models.scenario import Difficulty, Question, Round

BEGINNER_ROUNDS = (
    Round(
        id=1,
        title="General Interaction",
        description="Basic ordering and interaction at the café",
        questions=[
            Question(
                letter="A",
                template=(
                    "What would you like? What can I get you? Here is a possible "
                    "answer: 'I'd like a coffee, please.' Now please tell me what you "
                    "would like."
                ),
                example_answer="I'd like a coffee, please.",
                difficulty=Difficulty.EASY,
                topics=("ordering", "requests", "polite expressions"),
            ),
            Question(
                letter="B",
                template=(
                    "For here or to go? Here is a possible answer: 'For here, "
                    "please.' Now please tell me if it's for here or to go."
                ),
                example_answer="For here, please.",
                difficulty=Difficulty.EASY,
                topics=("preferences", "location", "polite responses"),
            ),
            Question(
                letter="C",
                template=(
                    "Do you need anything else? Here is a possible answer: 'No, thank "
                    "you.' Now please tell me if you need anything else."
                ),
                example_answer="No, thank you.",
                difficulty=Difficulty.EASY,
                topics=("politeness", "declining", "gratitude"),
            ),
        ],
    ),
    Round(
        id=2,
        title="Social & Small Talk",
        description="Casual conversation while at the café",
        questions=[
            Question(
                letter="A",
                template=(
                    "Are you from here? Here is a possible answer: 'No, I'm not from "
                    "here.' Now please tell me if you are from here."
                ),
                example_answer="No, I'm not from here.",
                difficulty=Difficulty.EASY,
                topics=("origin", "location", "personal information"),
            ),
            Question(
                letter="B",
                template=(
                    "Do you come here often? Here is a possible answer: 'Yes, I come "
                    "sometimes.' Now please tell me if you come here often."
                ),
                example_answer="Yes, I come sometimes.",
                difficulty=Difficulty.EASY,
                topics=("frequency", "habits", "social interaction"),
            ),
            Question(
                letter="C",
                template=(
                    "Are you working or relaxing? Here is a possible answer: 'I'm "
                    "relaxing.' Now please tell me if you are working or relaxing."
                ),
                example_answer="I'm relaxing.",
                difficulty=Difficulty.EASY,
                topics=("activities", "state", "leisure"),
            ),
        ],
    ),
    Round(
        id=3,
        title="Handling Problems & Requests",
        description="Dealing with issues and special requests at the café",
        questions=[
            Question(
                letter="A",
                template=(
                    "Sorry, the Wi-Fi is not working. Is that okay? Here is a "
                    "possible answer: 'It's okay.' Now please tell me if that's okay."
                ),
                example_answer="It's okay.",
                difficulty=Difficulty.EASY,
                topics=("understanding", "acceptance", "reassurance"),
            ),
            Question(
                letter="B",
                template=(
                    "We don't have oat milk. Would you like something else? Here is a "
                    "possible answer: 'Regular milk is fine.' Now please tell me what "
                    "you would like instead."
                ),
                example_answer="Regular milk is fine.",
                difficulty=Difficulty.EASY,
                topics=("alternatives", "flexibility", "preferences"),
            ),
            Question(
                letter="C",
                template=(
                    "It's crowded. Would you like another table? Here is a possible "
                    "answer: 'Yes, thank you.' Now please tell me if you would like "
                    "another table."
                ),
                example_answer="Yes, thank you.",
                difficulty=Difficulty.EASY,
                topics=("accepting offers", "gratitude", "preferences"),
            ),
        ],
    ),
)

INTERMEDIATE_ROUNDS = (
    Round(
        id=1,
        title="General Interaction",
        description="Basic ordering and interaction at the café",
        questions=[
            Question(
                letter="A",
                template=(
                    "What would you like? What can I get you? Here is a possible "
                    "answer: 'I'd like a cappuccino, please. And could I have a "
                    "croissant as well?' Now please tell me what you would like."
                ),
                example_answer=(
                    "I'd like a cappuccino, please. And could I have a croissant as "
                    "well?"
                ),
                difficulty=Difficulty.MEDIUM,
                topics=("ordering", "requests", "polite expressions"),
            ),
            Question(
                letter="B",
                template=(
                    "For here or to go? Here is a possible answer: 'For here, please. "
                    "I want to sit for a bit and relax.' Now please tell me if it's "
                    "for here or to go."
                ),
                example_answer="For here, please. I want to sit for a bit and relax.",
                difficulty=Difficulty.MEDIUM,
                topics=("preferences", "location", "polite responses"),
            ),
            Question(
                letter="C",
                template=(
                    "Do you need anything else? Here is a possible answer: 'No, thank "
                    "you. That's all for now.' Now please tell me if you need "
                    "anything else."
                ),
                example_answer="No, thank you. That's all for now.",
                difficulty=Difficulty.MEDIUM,
                topics=("politeness", "declining", "gratitude"),
            ),
        ],
    ),
    Round(
        id=2,
        title="Social & Small Talk",
        description="Casual conversation while at the café",
        questions=[
            Question(
                letter="A",
                template=(
                    "Are you from around here? Here is a possible answer: 'No, I'm "
                    "not from here, but I moved nearby recently. I like this "
                    "neighbourhood.' Now please tell me if you are from around here."
                ),
                example_answer=(
                    "No, I'm not from here, but I moved nearby recently. I like this "
                    "neighbourhood."
                ),
                difficulty=Difficulty.MEDIUM,
                topics=("origin", "location", "personal information"),
            ),
            Question(
                letter="B",
                template=(
                    "Do you come here often? Here is a possible answer: 'Yes, I come "
                    "here a few times a week. The café is really nice and "
                    "comfortable.' Now please tell me if you come here often."
                ),
                example_answer=(
                    "Yes, I come here a few times a week. The café is really nice and "
                    "comfortable."
                ),
                difficulty=Difficulty.MEDIUM,
                topics=("frequency", "habits", "social interaction"),
            ),
            Question(
                letter="C",
                template=(
                    "Are you working or just relaxing today? Here is a possible "
                    "answer: 'I'm working a little, but I'm also taking a break.' Now "
                    "please tell me if you are working or just relaxing today."
                ),
                example_answer="I'm working a little, but I'm also taking a break.",
                difficulty=Difficulty.MEDIUM,
                topics=("activities", "state", "leisure"),
            ),
        ],
    ),
    Round(
        id=3,
        title="Solving Problems & Special Requests",
        description="Dealing with issues and special requests at the café",
        questions=[
            Question(
                letter="A",
                template=(
                    "Sorry, the Wi-Fi isn't working right now. Is that okay? Here is "
                    "a possible answer: 'That's okay. I can use my mobile data for "
                    "now.' Now please tell me if that's okay."
                ),
                example_answer="That's okay. I can use my mobile data for now.",
                difficulty=Difficulty.MEDIUM,
                topics=("understanding", "acceptance", "reassurance"),
            ),
            Question(
                letter="B",
                template=(
                    "We're out of oat milk. Would you like something else? Here is a "
                    "possible answer: 'No problem. Regular milk is fine.' Now please "
                    "tell me what you would like instead."
                ),
                example_answer="No problem. Regular milk is fine.",
                difficulty=Difficulty.MEDIUM,
                topics=("alternatives", "flexibility", "preferences"),
            ),
            Question(
                letter="C",
                template=(
                    "It's getting crowded. Would you like to move to another table? "
                    "Here is a possible answer: 'Sure, that's okay. Thank you.' Now "
                    "please tell me if you would like to move to another table."
                ),
                example_answer="Sure, that's okay. Thank you.",
                difficulty=Difficulty.MEDIUM,
                topics=("accepting offers", "gratitude", "preferences"),
            ),
        ],
    ),
)

ADVANCED_ROUNDS = (
    Round(
        id=1,
        title="General Interaction",
        description="Advanced ordering and interaction at the café",
        questions=[
            Question(
                letter="A",
                template=(
                    "What would you like? What can I get you? Here is an answer you "
                    "can use as a guide. Now why don't you try? 'Thanks, I'll have a "
                    "cappuccino with oat milk, please. If it's possible, I'd also "
                    "like a slice of your almond cake - I've heard it's excellent.' "
                    "what you would like."
                ),
                example_answer=(
                    "Thanks, I'll have a cappuccino with oat milk, please. If it's "
                    "possible, I'd also like a slice of your almond cake - I've heard "
                    "it's excellent."
                ),
                difficulty=Difficulty.HARD,
                topics=("ordering", "requests", "polite expressions"),
            ),
            Question(
                letter="B",
                template=(
                    "For here or to go? Here is an answer you can use as a guide. Now "
                    "why don't you try? 'For here. I have some work to finish, and "
                    "this seems like the perfect place to focus.' if it's for here or "
                    "to go."
                ),
                example_answer=(
                    "For here. I have some work to finish, and this seems like the "
                    "perfect place to focus."
                ),
                difficulty=Difficulty.HARD,
                topics=("preferences", "location", "polite responses"),
            ),
            Question(
                letter="C",
                template=(
                    "Do you need anything else? Here is an answer you can use as a "
                    "guide. Now why don't you try? 'Not for now, thank you. But if "
                    "you don't mind, could you let me know when the Wi-Fi is working "
                    "again?' if you need anything else."
                ),
                example_answer=(
                    "Not for now, thank you. But if you don't mind, could you let me "
                    "know when the Wi-Fi is working again?"
                ),
                difficulty=Difficulty.HARD,
                topics=("politeness", "requests", "gratitude"),
            ),
        ],
    ),
    Round(
        id=2,
        title="Social & Small Talk",
        description="Advanced casual conversation while at the café",
        questions=[
            Question(
                letter="A",
                template=(
                    "Are you from around here? Here is an answer you can use as a "
                    "guide. Now why don't you try? 'Not originally, but I've been "
                    "living in this area for a couple of years. I love the energy "
                    "here. It's lively without being overwhelming.' if you are from "
                    "around here."
                ),
                example_answer=(
                    "Not originally, but I've been living in this area for a couple "
                    "of years. I love the energy here. It's lively without being "
                    "overwhelming."
                ),
                difficulty=Difficulty.HARD,
                topics=("origin", "location", "personal information"),
            ),
            Question(
                letter="B",
                template=(
                    "Do you come here often? Here is an answer you can use as a "
                    "guide. Now why don't you try? 'Quite often, actually. I enjoy "
                    "the atmosphere - it's friendly, calm, and great for getting work "
                    "done.' if you come here often."
                ),
                example_answer=(
                    "Quite often, actually. I enjoy the atmosphere - it's friendly, "
                    "calm, and great for getting work done."
                ),
                difficulty=Difficulty.HARD,
                topics=("frequency", "habits", "social interaction"),
            ),
            Question(
                letter="C",
                template=(
                    "Are you working or just relaxing today? Here is an answer you "
                    "can use as a guide. Now why don't you try? 'A bit of both. I'm "
                    "finishing a few tasks, but I'm also trying to enjoy a slower "
                    "morning.' if you are working or just relaxing today."
                ),
                example_answer=(
                    "A bit of both. I'm finishing a few tasks, but I'm also trying to "
                    "enjoy a slower morning."
                ),
                difficulty=Difficulty.HARD,
                topics=("activities", "state", "leisure"),
            ),
        ],
    ),
    Round(
        id=3,
        title="Solving Problems & Requests",
        description="Advanced dealing with issues and special requests at the café",
        questions=[
            Question(
                letter="A",
                template=(
                    "Sorry, the Wi-Fi isn't working at the moment. Is that okay? Here "
                    "is an answer you can use as a guide. Now why don't you try? 'No "
                    "problem at all. I can work offline or use my hotspot for a while "
                    "- just let me know when it's back.' if that's okay."
                ),
                example_answer=(
                    "No problem at all. I can work offline or use my hotspot for a "
                    "while - just let me know when it's back."
                ),
                difficulty=Difficulty.HARD,
                topics=("understanding", "acceptance", "reassurance"),
            ),
            Question(
                letter="B",
                template=(
                    "We're out of oat milk. Would you like something else? We have "
                    "whole or skim milk. Here is an answer you can use as a guide. "
                    "Now why don't you try? 'That's totally fine. I'll take whole "
                    "milk instead - thanks for letting me know.' what you would like "
                    "instead."
                ),
                example_answer=(
                    "That's totally fine. I'll take whole milk instead - thanks for "
                    "letting me know."
                ),
                difficulty=Difficulty.HARD,
                topics=("alternatives", "flexibility", "preferences"),
            ),
            Question(
                letter="C",
                template=(
                    "It is getting crowded here. Would you like to move to another "
                    "table? Here is an answer you can use as a guide. Now why don't "
                    "you try? 'If there's another spot available, that would be "
                    "great. Thank you for offering.' if you would like to move to "
                    "another table."
                ),
                example_answer=(
                    "If there's another spot available, that would be great. Thank "
                    "you for offering."
                ),
                difficulty=Difficulty.HARD,
                topics=("accepting offers", "gratitude", "preferences"),
            ),
        ],
    ),
)
