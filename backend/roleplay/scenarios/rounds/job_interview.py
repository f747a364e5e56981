"""Job Interview rounds for each level."""

from roleplay.models.scenario import Difficulty, Question, Round

BEGINNER_ROUNDS = (
    Round(
        id=1,
        title="General Questions",
        description="Basic questions about the candidate's background and motivation",
        questions=[
            Question(
                letter="A",
                template=(
                    "Tell me about yourself? Here is a simple example answer: 'I am a "
                    "hard-working person. I like learning and working with others.' "
                    "Now please tell me about yourself."
                ),
                example_answer=(
                    "I am a hard-working person. I like learning and working with "
                    "others."
                ),
                difficulty=Difficulty.EASY,
                topics=("background", "personality", "skills"),
            ),
            Question(
                letter="B",
                template=(
                    "Why do you want this job? Here is a possible answer: 'I think "
                    "this job is good for my skills, and I want to grow.' Now please "
                    "tell me why you want this job."
                ),
                example_answer=(
                    "I think this job is good for my skills, and I want to grow."
                ),
                difficulty=Difficulty.EASY,
                topics=("motivation", "career goals", "company fit"),
            ),
            Question(
                letter="C",
                template=(
                    "What are your strengths? Here is a possible answer: 'I am "
                    "organized, calm, and I finish my work on time.' Now please tell "
                    "me about your strengths."
                ),
                example_answer="I am organized, calm, and I finish my work on time.",
                difficulty=Difficulty.EASY,
                topics=("strengths", "skills", "abilities"),
            ),
            Question(
                letter="D",
                template=(
                    "What is your weakness? Here is a possible answer: 'Sometimes I "
                    "take too many tasks, but I am learning to manage my time "
                    "better.' Now please tell me about your weakness."
                ),
                example_answer=(
                    "Sometimes I take too many tasks, but I am learning to manage my "
                    "time better."
                ),
                difficulty=Difficulty.EASY,
                topics=("self-awareness", "improvement", "growth"),
            ),
            Question(
                letter="E",
                template=(
                    "Where do you see yourself in one year? Here is a possible "
                    "answer: 'I want to be more confident and take more "
                    "responsibility.' Now please tell me where you see yourself in "
                    "one year."
                ),
                example_answer=(
                    "I want to be more confident and take more responsibility."
                ),
                difficulty=Difficulty.EASY,
                topics=("future plans", "career goals", "aspirations"),
            ),
        ],
    ),
    Round(
        id=2,
        title="Behavioral & Problem-Solving",
        description="Questions about past experiences and problem-solving abilities",
        questions=[
            Question(
                letter="A",
                template=(
                    "Tell me about a problem you solved at work? Here is a possible "
                    "answer: 'Two colleagues had a misunderstanding. I listened and "
                    "helped them understand each other.' Now please tell me about a "
                    "problem you solved at work."
                ),
                example_answer=(
                    "Two colleagues had a misunderstanding. I listened and helped "
                    "them understand each other."
                ),
                difficulty=Difficulty.EASY,
                topics=("problem-solving", "conflict resolution", "teamwork"),
            ),
            Question(
                letter="B",
                template=(
                    "How do you work in a team? Here is a possible answer: 'I listen, "
                    "I share ideas, and I stay respectful.' Now please tell me how "
                    "you work in a team."
                ),
                example_answer="I listen, I share ideas, and I stay respectful.",
                difficulty=Difficulty.EASY,
                topics=("teamwork", "collaboration", "communication"),
            ),
            Question(
                letter="C",
                template=(
                    "Tell me about a time you worked under pressure? Here is a "
                    "possible answer: 'I had many tasks. I organized them and "
                    "finished everything on time.' Now please tell me about a time "
                    "you worked under pressure."
                ),
                example_answer=(
                    "I had many tasks. I organized them and finished everything on "
                    "time."
                ),
                difficulty=Difficulty.EASY,
                topics=("stress management", "time management", "resilience"),
            ),
            Question(
                letter="D",
                template=(
                    "A client is unhappy. What do you do? Here is a possible answer: "
                    "'I listen, explain the solution clearly, and try to help while "
                    "following company rules.' Now please tell me what you would do "
                    "if a client is unhappy."
                ),
                example_answer=(
                    "I listen, explain the solution clearly, and try to help while "
                    "following company rules."
                ),
                difficulty=Difficulty.EASY,
                topics=("customer service", "conflict resolution", "professionalism"),
            ),
            Question(
                letter="E",
                template=(
                    "How do you handle changes at work? Here is a possible answer: 'I "
                    "stay flexible, ask questions, and learn the new process.' Now "
                    "please tell me how you handle changes at work."
                ),
                example_answer=(
                    "I stay flexible, ask questions, and learn the new process."
                ),
                difficulty=Difficulty.EASY,
                topics=("adaptability", "flexibility", "change management"),
            ),
        ],
    ),
    Round(
        id=3,
        title="Salary, Bonuses, Vacation",
        description="Questions about compensation and benefits expectations",
        questions=[
            Question(
                letter="A",
                template=(
                    "What was your salary in your last job? Here is a possible "
                    "answer: 'I prefer to focus on this job. What is the salary range "
                    "for this role?' Now please answer this question."
                ),
                example_answer=(
                    "I prefer to focus on this job. What is the salary range for this "
                    "role?"
                ),
                difficulty=Difficulty.EASY,
                topics=("salary negotiation", "professionalism", "tact"),
            ),
            Question(
                letter="B",
                template=(
                    "What salary are you expecting? Here is a possible answer: 'I "
                    "want a fair salary for the responsibilities. What is the range "
                    "you offer?' Now please tell me what salary you are expecting."
                ),
                example_answer=(
                    "I want a fair salary for the responsibilities. What is the range "
                    "you offer?"
                ),
                difficulty=Difficulty.EASY,
                topics=("salary expectations", "negotiation", "professionalism"),
            ),
            Question(
                letter="C",
                template=(
                    "How do bonuses fit into your expectations? Here is a possible "
                    "answer: 'I am open to bonuses. I would like to know how they "
                    "work here.' Now please tell me about bonuses."
                ),
                example_answer=(
                    "I am open to bonuses. I would like to know how they work here."
                ),
                difficulty=Difficulty.EASY,
                topics=("compensation", "benefits", "bonuses"),
            ),
            Question(
                letter="D",
                template=(
                    "What are your vacation expectations? Here is a possible answer: "
                    "'I follow the company policy. I just need clear information.' "
                    "Now please tell me about your vacation expectations."
                ),
                example_answer=(
                    "I follow the company policy. I just need clear information."
                ),
                difficulty=Difficulty.EASY,
                topics=("vacation", "work-life balance", "benefits"),
            ),
            Question(
                letter="E",
                template=(
                    "Why should we choose you? Here is a possible answer: 'I work "
                    "hard, I am reliable, and I care about doing a good job.' Now "
                    "please tell me why we should choose you."
                ),
                example_answer=(
                    "I work hard, I am reliable, and I care about doing a good job."
                ),
                difficulty=Difficulty.EASY,
                topics=("self-promotion", "value proposition", "closing"),
            ),
        ],
    ),
)

INTERMEDIATE_ROUNDS = (
    Round(
        id=1,
        title="General Questions",
        description="Basic questions about the candidate's background and motivation",
        questions=[
            Question(
                letter="A",
                template=(
                    "Tell me about yourself? Here is a possible answer: 'I am a "
                    "motivated person, and I like learning new skills. I work well "
                    "with others, and I always try to be proactive. I enjoy "
                    "contributing to projects and helping the team move forward.' Now "
                    "please tell me about yourself."
                ),
                example_answer=(
                    "I am a motivated person, and I like learning new skills. I work "
                    "well with others, and I always try to be proactive. I enjoy "
                    "contributing to projects and helping the team move forward."
                ),
                difficulty=Difficulty.MEDIUM,
                topics=("background", "personality", "skills"),
            ),
            Question(
                letter="B",
                template=(
                    "Why do you want this job? Here is a possible answer: 'I find "
                    "this job matches my skills, and I believe I can grow while also "
                    "contributing to the company.' Now please tell me why you want "
                    "this job."
                ),
                example_answer=(
                    "I find this job matches my skills, and I believe I can grow "
                    "while also contributing to the company."
                ),
                difficulty=Difficulty.MEDIUM,
                topics=("motivation", "career goals", "company fit"),
            ),
            Question(
                letter="C",
                template=(
                    "What are your strengths? Here is a possible answer: 'My main "
                    "strengths are communication skills and being responsible. I stay "
                    "calm under pressure, I listen before taking action, and I "
                    "complete my work on time. I can also help support the team when "
                    "needed.' Now please tell me about your strengths."
                ),
                example_answer=(
                    "My main strengths are communication skills and being "
                    "responsible. I stay calm under pressure, I listen before taking "
                    "action, and I complete my work on time. I can also help support "
                    "the team when needed."
                ),
                difficulty=Difficulty.MEDIUM,
                topics=("strengths", "skills", "abilities"),
            ),
            Question(
                letter="D",
                template=(
                    "What is your main weakness? Here is a possible answer: 'I "
                    "sometimes say yes to too many tasks because I like helping "
                    "others, but I'm learning to manage my time and delegate more "
                    "effectively.' Now please tell me about your main weakness."
                ),
                example_answer=(
                    "I sometimes say yes to too many tasks because I like helping "
                    "others, but I'm learning to manage my time and delegate more "
                    "effectively."
                ),
                difficulty=Difficulty.MEDIUM,
                topics=("self-awareness", "improvement", "growth"),
            ),
            Question(
                letter="E",
                template=(
                    "Where do you see yourself in one year? Here is a possible "
                    "answer: 'In one year, I hope to be more confident in my role, "
                    "understand the company well, and take on more responsibilities.' "
                    "Now please tell me where you see yourself in one year."
                ),
                example_answer=(
                    "In one year, I hope to be more confident in my role, understand "
                    "the company well, and take on more responsibilities."
                ),
                difficulty=Difficulty.MEDIUM,
                topics=("future plans", "career goals", "aspirations"),
            ),
        ],
    ),
    Round(
        id=2,
        title="Behavioral & Problem-Solving",
        description="Questions about past experiences and problem-solving abilities",
        questions=[
            Question(
                letter="A",
                template=(
                    "Tell me about a problem you solved at work? Here is a possible "
                    "answer: 'There was a misunderstanding between two colleagues. I "
                    "listened to both sides, explained the information clearly, and "
                    "helped the team work together and move forward.' Now please tell "
                    "me about a problem you solved at work."
                ),
                example_answer=(
                    "There was a misunderstanding between two colleagues. I listened "
                    "to both sides, explained the information clearly, and helped the "
                    "team work together and move forward."
                ),
                difficulty=Difficulty.MEDIUM,
                topics=("problem-solving", "conflict resolution", "teamwork"),
            ),
            Question(
                letter="B",
                template=(
                    "How do you work with a team? Here is a possible answer: 'I share "
                    "ideas, listen to others, and stay respectful. When there is a "
                    "disagreement, I try to understand the reasons and help find a "
                    "solution. I let colleagues know when I am available so they can "
                    "reach out if they need something.' Now please tell me how you "
                    "work with a team."
                ),
                example_answer=(
                    "I share ideas, listen to others, and stay respectful. When there "
                    "is a disagreement, I try to understand the reasons and help find "
                    "a solution. I let colleagues know when I am available so they "
                    "can reach out if they need something."
                ),
                difficulty=Difficulty.MEDIUM,
                topics=("teamwork", "collaboration", "communication"),
            ),
            Question(
                letter="C",
                template=(
                    "Tell me about a time you worked under pressure? Here is a "
                    "possible answer: 'I had many tasks to complete before an "
                    "important deadline. I organized my work, asked questions when "
                    "needed, and completed everything on time. I am good at managing "
                    "stressful situations.' Now please tell me about a time you "
                    "worked under pressure."
                ),
                example_answer=(
                    "I had many tasks to complete before an important deadline. I "
                    "organized my work, asked questions when needed, and completed "
                    "everything on time. I am good at managing stressful situations."
                ),
                difficulty=Difficulty.MEDIUM,
                topics=("stress management", "time management", "resilience"),
            ),
            Question(
                letter="D",
                template=(
                    "A client is unhappy. What do you do? Here is a possible answer: "
                    "'I listen to the client, show that I understand the problem, and "
                    "explain clearly what we can do. I try to keep the client "
                    "satisfied while respecting company rules.' Now please tell me "
                    "what you would do if a client is unhappy."
                ),
                example_answer=(
                    "I listen to the client, show that I understand the problem, and "
                    "explain clearly what we can do. I try to keep the client "
                    "satisfied while respecting company rules."
                ),
                difficulty=Difficulty.MEDIUM,
                topics=("customer service", "conflict resolution", "professionalism"),
            ),
            Question(
                letter="E",
                template=(
                    "How do you handle changes at work? Here is a possible answer: 'I "
                    "try to stay flexible. I ask questions, learn the new process, "
                    "and keep a positive attitude. I focus on my tasks and try not to "
                    "worry about things I cannot control.' Now please tell me how you "
                    "handle changes at work."
                ),
                example_answer=(
                    "I try to stay flexible. I ask questions, learn the new process, "
                    "and keep a positive attitude. I focus on my tasks and try not to "
                    "worry about things I cannot control."
                ),
                difficulty=Difficulty.MEDIUM,
                topics=("adaptability", "flexibility", "change management"),
            ),
        ],
    ),
    Round(
        id=3,
        title="Salary, Bonuses, Vacation",
        description="Questions about compensation and benefits expectations",
        questions=[
            Question(
                letter="A",
                template=(
                    "What was your salary in your last job? Here is a possible "
                    "answer: 'I prefer to focus on this position rather than my past "
                    "salary. Could you tell me the salary range for this role?' Now "
                    "please answer this question."
                ),
                example_answer=(
                    "I prefer to focus on this position rather than my past salary. "
                    "Could you tell me the salary range for this role?"
                ),
                difficulty=Difficulty.MEDIUM,
                topics=("salary negotiation", "professionalism", "tact"),
            ),
            Question(
                letter="B",
                template=(
                    "What salary are you expecting? Here is a possible answer: 'I am "
                    "looking for a fair salary based on the responsibilities of the "
                    "role. Could you share the range your company offers for this "
                    "position?' Now please tell me what salary you are expecting."
                ),
                example_answer=(
                    "I am looking for a fair salary based on the responsibilities of "
                    "the role. Could you share the range your company offers for this "
                    "position?"
                ),
                difficulty=Difficulty.MEDIUM,
                topics=("salary expectations", "negotiation", "professionalism"),
            ),
            Question(
                letter="C",
                template=(
                    "How do bonuses fit into your overall compensation expectations? "
                    "Here is a possible answer: 'I am open to discussing bonuses. I "
                    "would like to know how your company gives bonuses and how they "
                    "work here.' Now please tell me about bonuses."
                ),
                example_answer=(
                    "I am open to discussing bonuses. I would like to know how your "
                    "company gives bonuses and how they work here."
                ),
                difficulty=Difficulty.MEDIUM,
                topics=("compensation", "benefits", "bonuses"),
            ),
            Question(
                letter="D",
                template=(
                    "What are your expectations in terms of vacation? Here is a "
                    "possible answer: 'I am open to the company policy. I simply "
                    "appreciate clarity about the company's vacation policy.' Now "
                    "please tell me about your vacation expectations."
                ),
                example_answer=(
                    "I am open to the company policy. I simply appreciate clarity "
                    "about the company's vacation policy."
                ),
                difficulty=Difficulty.MEDIUM,
                topics=("vacation", "work-life balance", "benefits"),
            ),
            Question(
                letter="E",
                template=(
                    "Why should we choose you? Here is a possible answer: 'I believe "
                    "I am an ideal candidate because I am hard-working, organized and "
                    "I care about the quality of my work. I am a reliable person and "
                    "I am eager to grow.' Now please tell me why we should choose "
                    "you."
                ),
                example_answer=(
                    "I believe I am an ideal candidate because I am hard-working, "
                    "organized and I care about the quality of my work. I am a "
                    "reliable person and I am eager to grow."
                ),
                difficulty=Difficulty.MEDIUM,
                topics=("self-promotion", "value proposition", "closing"),
            ),
        ],
    ),
)

ADVANCED_ROUNDS = (
    Round(
        id=1,
        title="General Questions",
        description=(
            "Advanced questions about the candidate's background and motivation"
        ),
        questions=[
            Question(
                letter="A",
                template=(
                    "Tell me about yourself. Here is a possible answer: 'I have seven "
                    "years of experience in corporate operations, with a focus on "
                    "streamlining processes and improving cross-team communication. I "
                    "enjoy solving operational bottlenecks and creating systems that "
                    "help teams work more efficiently. In my last role, I moved into "
                    "a more strategic position where I could contribute to long-term "
                    "planning and company-wide initiatives.' Now please tell me about "
                    "yourself."
                ),
                example_answer=(
                    "I have seven years of experience in corporate operations, with a "
                    "focus on streamlining processes and improving cross-team "
                    "communication. I enjoy solving operational bottlenecks and "
                    "creating systems that help teams work more efficiently. In my "
                    "last role, I moved into a more strategic position where I could "
                    "contribute to long-term planning and company-wide initiatives."
                ),
                difficulty=Difficulty.HARD,
                topics=("background", "experience", "strategic thinking"),
            ),
            Question(
                letter="B",
                template=(
                    "Why do you want this job? Here is a possible answer: 'I'm drawn "
                    "to your emphasis on sustainable growth and your investment in "
                    "employee development. The part that resonates with me is how you "
                    "balance innovation with responsible governance. I was impressed "
                    "by your recent expansion strategy, which reinforces your "
                    "long-term vision.' Now please tell me why you want this job."
                ),
                example_answer=(
                    "I'm drawn to your emphasis on sustainable growth and your "
                    "investment in employee development. The part that resonates with "
                    "me is how you balance innovation with responsible governance. I "
                    "was impressed by your recent expansion strategy, which "
                    "reinforces your long-term vision."
                ),
                difficulty=Difficulty.HARD,
                topics=("motivation", "company research", "strategic alignment"),
            ),
            Question(
                letter="C",
                template=(
                    "What are your strengths? Here is a possible answer: 'My "
                    "strongest assets are structured thinking and diplomatic "
                    "communication. I'm able to bring clarity to complex situations "
                    "and keep stakeholders aligned, even when priorities shift.' Now "
                    "please tell me about your strengths."
                ),
                example_answer=(
                    "My strongest assets are structured thinking and diplomatic "
                    "communication. I'm able to bring clarity to complex situations "
                    "and keep stakeholders aligned, even when priorities shift."
                ),
                difficulty=Difficulty.HARD,
                topics=("strengths", "leadership", "communication"),
            ),
            Question(
                letter="D",
                template=(
                    "What is one weakness? Here is a possible answer: 'I used to take "
                    "on too many commitments at once. I've learned to prioritize more "
                    "rigorously and to set clearer boundaries. As a result, the "
                    "quality of my output is consistently high without last-minute "
                    "pressure.' Now please tell me about one weakness."
                ),
                example_answer=(
                    "I used to take on too many commitments at once. I've learned to "
                    "prioritize more rigorously and to set clearer boundaries. As a "
                    "result, the quality of my output is consistently high without "
                    "last-minute pressure."
                ),
                difficulty=Difficulty.HARD,
                topics=("self-awareness", "growth", "improvement"),
            ),
            Question(
                letter="E",
                template=(
                    "Describe your ideal working environment. Here is a possible "
                    "answer: 'I thrive in environments that value accountability, "
                    "open communication, and clear goals. I help keep the atmosphere "
                    "constructive by being transparent, reliable, and proactive.' Now "
                    "please describe your ideal working environment."
                ),
                example_answer=(
                    "I thrive in environments that value accountability, open "
                    "communication, and clear goals. I help keep the atmosphere "
                    "constructive by being transparent, reliable, and proactive."
                ),
                difficulty=Difficulty.HARD,
                topics=("work culture", "values", "team dynamics"),
            ),
            Question(
                letter="F",
                template=(
                    "Tell me about a time you worked under pressure. Here is a "
                    "possible answer: 'We had a last-minute client request that "
                    "required rapid coordination. I created a quick escalation plan, "
                    "delegated tasks based on strengths, and kept communication "
                    "tight. We delivered on time, and I learned the value of staying "
                    "calm and structured.' Now please tell me about a time you worked "
                    "under pressure."
                ),
                example_answer=(
                    "We had a last-minute client request that required rapid "
                    "coordination. I created a quick escalation plan, delegated tasks "
                    "based on strengths, and kept communication tight. We delivered "
                    "on time, and I learned the value of staying calm and structured."
                ),
                difficulty=Difficulty.HARD,
                topics=("stress management", "leadership", "problem-solving"),
            ),
        ],
    ),
    Round(
        id=2,
        title="Behavioral & Problem-Solving",
        description=(
            "Advanced questions about past experiences and problem-solving abilities"
        ),
        questions=[
            Question(
                letter="A",
                template=(
                    "Tell me about a time you influenced a decision without having "
                    "direct authority. Here is a possible answer: 'I focused first on "
                    "understanding the stakeholders' concerns. Once I acknowledged "
                    "their priorities, I reframed my proposal to show how it aligned "
                    "with their goals. This created trust and shifted the discussion "
                    "from positions to shared outcomes.' Now please tell me about a "
                    "time you influenced a decision without having direct authority."
                ),
                example_answer=(
                    "I focused first on understanding the stakeholders' concerns. "
                    "Once I acknowledged their priorities, I reframed my proposal to "
                    "show how it aligned with their goals. This created trust and "
                    "shifted the discussion from positions to shared outcomes."
                ),
                difficulty=Difficulty.HARD,
                topics=("influence", "stakeholder management", "negotiation"),
            ),
            Question(
                letter="B",
                template=(
                    "Describe a situation where the team was divided. What did you "
                    "do? Here is a possible answer: 'I brought everyone together for "
                    "a focused conversation, clarified what was fact versus "
                    "assumption, and identified the shared goal. Once the common "
                    "objective was visible, disagreements became much easier to "
                    "reconcile.' Now please describe a situation where the team was "
                    "divided and what you did."
                ),
                example_answer=(
                    "I brought everyone together for a focused conversation, "
                    "clarified what was fact versus assumption, and identified the "
                    "shared goal. Once the common objective was visible, "
                    "disagreements became much easier to reconcile."
                ),
                difficulty=Difficulty.HARD,
                topics=("conflict resolution", "team leadership", "mediation"),
            ),
            Question(
                letter="C",
                template=(
                    "Tell me about a project where the scope suddenly changed. Here "
                    "is a possible answer: 'I documented the impact of the new "
                    "requirements, including risks and trade-offs, and then scheduled "
                    "a quick decision call. Presenting structured scenarios helped "
                    "leadership choose a realistic plan.' Now please tell me about a "
                    "project where the scope suddenly changed."
                ),
                example_answer=(
                    "I documented the impact of the new requirements, including risks "
                    "and trade-offs, and then scheduled a quick decision call. "
                    "Presenting structured scenarios helped leadership choose a "
                    "realistic plan."
                ),
                difficulty=Difficulty.HARD,
                topics=("change management", "risk assessment", "project management"),
            ),
            Question(
                letter="D",
                template=(
                    "Describe a time you had limited information but had to decide "
                    "quickly. Here is a possible answer: 'I identified what was "
                    "absolutely essential, gathered the fastest reliable data "
                    "available, and acted based on probability rather than "
                    "perfection. Then I communicated early that adjustments might be "
                    "needed.' Now please describe a time you had limited information "
                    "but had to decide quickly."
                ),
                example_answer=(
                    "I identified what was absolutely essential, gathered the fastest "
                    "reliable data available, and acted based on probability rather "
                    "than perfection. Then I communicated early that adjustments "
                    "might be needed."
                ),
                difficulty=Difficulty.HARD,
                topics=("decision-making", "uncertainty", "risk management"),
            ),
            Question(
                letter="E",
                template=(
                    "How do you handle someone who consistently resists change? Here "
                    "is a possible answer: 'I try to understand the underlying "
                    "fear—loss of control, increased workload, lack of clarity. Once "
                    "you address the real concern, resistance decreases. If needed, I "
                    "set clear expectations and timelines.' Now please tell me how "
                    "you handle someone who consistently resists change."
                ),
                example_answer=(
                    "I try to understand the underlying fear—loss of control, "
                    "increased workload, lack of clarity. Once you address the real "
                    "concern, resistance decreases. If needed, I set clear "
                    "expectations and timelines."
                ),
                difficulty=Difficulty.HARD,
                topics=("change management", "people management", "empathy"),
            ),
        ],
    ),
    Round(
        id=3,
        title="Salary, Bonuses, Vacation",
        description="Advanced questions about compensation and benefits expectations",
        questions=[
            Question(
                letter="A",
                template=(
                    "What was your salary in your last job? Here is a possible "
                    "answer: 'I prefer to focus on the responsibilities and "
                    "expectations of this role. I'm sure your compensation range is "
                    "aligned with the market, so I would love to understand how "
                    "you've structured the range for this position.' Now please "
                    "answer this question."
                ),
                example_answer=(
                    "I prefer to focus on the responsibilities and expectations of "
                    "this role. I'm sure your compensation range is aligned with the "
                    "market, so I would love to understand how you've structured the "
                    "range for this position."
                ),
                difficulty=Difficulty.HARD,
                topics=("salary negotiation", "professionalism", "tact"),
            ),
            Question(
                letter="B",
                template=(
                    "What salary are you expecting? Here is a possible answer: 'Based "
                    "on my experience and the industry benchmarks, I'm looking for a "
                    "competitive package. Could you share the range you've budgeted "
                    "for the role so I can position myself accurately?' Now please "
                    "tell me what salary you are expecting."
                ),
                example_answer=(
                    "Based on my experience and the industry benchmarks, I'm looking "
                    "for a competitive package. Could you share the range you've "
                    "budgeted for the role so I can position myself accurately?"
                ),
                difficulty=Difficulty.HARD,
                topics=("salary expectations", "negotiation", "market research"),
            ),
            Question(
                letter="C",
                template=(
                    "We need a number. What is your minimum? Here is a possible "
                    "answer: 'I'd like to understand the full compensation package "
                    "(base salary, bonuses, benefits, vacation, and growth "
                    "opportunities) before giving a figure, because each company "
                    "structures compensation differently.' Now please answer this "
                    "question."
                ),
                example_answer=(
                    "I'd like to understand the full compensation package (base "
                    "salary, bonuses, benefits, vacation, and growth opportunities) "
                    "before giving a figure, because each company structures "
                    "compensation differently."
                ),
                difficulty=Difficulty.HARD,
                topics=("salary negotiation", "total compensation", "professionalism"),
            ),
            Question(
                letter="D",
                template=(
                    "How do bonuses fit into your overall compensation expectations? "
                    "Here is a possible answer: 'I value bonuses that are tied to "
                    "clear, measurable objectives. They reinforce alignment between "
                    "personal performance and company results.' Now please tell me "
                    "about bonuses."
                ),
                example_answer=(
                    "I value bonuses that are tied to clear, measurable objectives. "
                    "They reinforce alignment between personal performance and "
                    "company results."
                ),
                difficulty=Difficulty.HARD,
                topics=("compensation", "performance metrics", "alignment"),
            ),
            Question(
                letter="E",
                template=(
                    "What are your expectations in terms of vacation? Here is a "
                    "possible answer: 'I believe time off is essential for long-term "
                    "productivity and well-being. I'm flexible, but I do value a "
                    "policy that allows for proper work-life balance.' Now please "
                    "tell me about your vacation expectations."
                ),
                example_answer=(
                    "I believe time off is essential for long-term productivity and "
                    "well-being. I'm flexible, but I do value a policy that allows "
                    "for proper work-life balance."
                ),
                difficulty=Difficulty.HARD,
                topics=("work-life balance", "wellness", "benefits"),
            ),
        ],
    ),
)
