"""
Response templates for the dialogue engine.

RANDOM_POOLS hold interchangeable answers picked at random; their only
slots are job/candidate fields that always have a fallback value.
The data-dependent templates are filled deterministically, with a
`*_FALLBACK` variant for when the candidate data is empty.
"""
from types import MappingProxyType

from core.dialogue.intents import Intent

# Data-dependent
EXPERIENCE = (
    "My most recent experience includes {experiences}. Throughout these roles, "
    "I've developed strong skills in problem-solving, collaboration, and delivering "
    "results. I believe these experiences have prepared me well for this position."
)
EXPERIENCE_FALLBACK = (
    "I have been developing my skills through various projects and self-study. "
    "While I may not have extensive formal experience, I am a quick learner and am "
    "confident in my ability to contribute effectively."
)
EXPERIENCE_JOINER = " Prior to that, "

SKILLS = (
    "My core technical skills include {skills}. I've applied these skills in various "
    "projects and roles to deliver impactful results. I'm also constantly learning "
    "and adding to my skill set."
)
SKILLS_FALLBACK = (
    "I have a diverse skill set that includes technical and soft skills. I'm "
    "particularly good at adapting to new environments and technologies quickly."
)

SALARY = (
    "Based on my experience and skills, I'm looking for a salary in the range of "
    "{salary_min} to {salary_max}. However, I'm also considering the entire "
    "compensation package including benefits and growth opportunities."
)
SALARY_FALLBACK = (
    "I'm more focused on finding the right opportunity where I can contribute and "
    "grow. I'm flexible regarding compensation and would be happy to discuss what "
    "you have in mind for this role."
)

WHY_INTERESTED = (
    "I'm particularly interested in the {title} role at {company} because it aligns "
    "perfectly with my career goals and skills. I'm impressed by {company}'s "
    "reputation in the industry and the impact you're making. The opportunity to "
    "work on challenging projects while continuing to grow professionally is very "
    "appealing to me."
)
WHY_INTERESTED_FALLBACK = (
    "I'm particularly interested in this role because it aligns perfectly with my "
    "career goals and skills. The opportunity to work on challenging projects while "
    "continuing to grow professionally is very appealing to me."
)

GENERIC = (
    "That's a great question. Based on my experience and skills, I would say that "
    "{statement}. I'm always focused on continuous learning and growth in my career."
)
GENERIC_STATEMENT = "my experience with {skill} would be valuable for {position}"
GENERIC_STATEMENT_FALLBACK = "my experience with relevant technologies would be valuable for {position}"

STRENGTH_FOCUS = "apply my knowledge of {skill} to solve complex problems"
STRENGTH_FOCUS_FALLBACK = "quickly learn and adapt to new technologies and situations"

# Randomly selected
RANDOM_POOLS = MappingProxyType({
    Intent.WEAKNESS: (
        "One area I'm actively working on improving is my public speaking skills. "
        "I've been taking opportunities to present at team meetings to build my confidence.",
        "I sometimes tend to focus too much on details, which can impact my efficiency. "
        "I've been working on better prioritization and time management to address this.",
        "In the past, I found it difficult to delegate tasks. I've been working on "
        "building trust in team environments and have improved significantly in this area.",
    ),
    Intent.STRENGTH: (
        "My greatest strength is my ability to {strength_focus}.",
        "I excel at collaborating with cross-functional teams to deliver projects on "
        "time and within scope.",
        "My analytical thinking and attention to detail allow me to identify and "
        "solve problems efficiently.",
        "I'm particularly good at communicating complex technical concepts to "
        "non-technical stakeholders.",
    ),
    Intent.TEAMWORK: (
        "I thrive in collaborative environments. In my previous roles, I've worked with "
        "cross-functional teams to deliver projects successfully. I value diverse "
        "perspectives and believe the best solutions come from combining different "
        "viewpoints. I'm comfortable both leading initiatives when needed and supporting "
        "team members to achieve our shared goals.",
        "I see teamwork as shared ownership of the outcome. I make a point of keeping "
        "communication open, asking for feedback early, and stepping in to help "
        "teammates when a deadline is at risk.",
    ),
    Intent.PROJECT: (
        "One project I'm particularly proud of involved developing a new system that "
        "improved efficiency by 30%. I led a team of five people, overcoming significant "
        "technical challenges and tight deadlines. The project was delivered on time and "
        "received excellent feedback from stakeholders. This experience taught me valuable "
        "lessons about project management, problem-solving, and effective communication.",
        "An achievement I'm proud of is taking over a struggling project, clarifying its "
        "requirements with stakeholders, and bringing it back on schedule. It taught me "
        "how much careful planning and clear communication matter.",
    ),
    Intent.AVAILABILITY: (
        "I could be available to start within two to three weeks after receiving an "
        "offer. I'm committed to ensuring a smooth transition from my current "
        "responsibilities and am excited about the possibility of joining your team soon.",
        "I can start after a standard notice period of about a month. I'd use that time "
        "to hand over my current work properly so I can fully focus on this role.",
    ),
    Intent.CANDIDATE_QUESTION: (
        "Could you tell me more about the team I would be working with at {company}?",
        "What would success look like in this role during the first 90 days?",
        "How would you describe the company culture at {company}?",
        "What are the biggest challenges facing the team right now?",
        "Could you share more about the growth opportunities for this position?",
    ),
})
