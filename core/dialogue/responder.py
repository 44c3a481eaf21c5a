#!/usr/bin/env python3
"""
Response Generator - Answer an interview question as the candidate.

Interchangeable answers (weakness, strength, teamwork, project,
availability, candidate questions) are drawn at random from a small pool
using an injected random.Random, so tests can seed it. Answers that
depend on the candidate's data (experience, skills, salary, motivation,
generic) are filled deterministically and fall back to generic phrasing
when the data is empty.
"""
import random
from typing import Optional, Sequence
import logging

from core.dialogue import templates
from core.dialogue.intents import Intent
from core.matcher.models import CandidateProfile, ConversationTurn, JobPosting

logger = logging.getLogger(__name__)

MAX_EXPERIENCES = 2
MAX_SKILLS = 3
DEFAULT_COMPANY = "your company"


class ResponseGenerator:
    """Template-based answer generation for each Intent."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def generate(
        self,
        intent: Intent,
        job: JobPosting,
        candidate: CandidateProfile,
        history: Optional[Sequence[ConversationTurn]] = None
    ) -> str:
        """
        Produce a single response string for the given intent.

        history is accepted for interface parity with a stateful dialogue
        system; it is not read.
        """
        if intent in templates.RANDOM_POOLS:
            return self._pick(intent, job, candidate)
        if intent is Intent.EXPERIENCE:
            return self.experience_response(candidate)
        if intent is Intent.SKILLS:
            return self.skills_response(job, candidate)
        if intent is Intent.SALARY:
            return self.salary_response(candidate)
        if intent is Intent.WHY_INTERESTED:
            return self.why_interested_response(job)
        return self.generic_response(job, candidate)

    def _pick(self, intent: Intent, job: JobPosting, candidate: CandidateProfile) -> str:
        template = self.rng.choice(templates.RANDOM_POOLS[intent])
        return template.format(
            company=job.company.strip() or DEFAULT_COMPANY,
            strength_focus=self._strength_focus(candidate),
        )

    @staticmethod
    def _strength_focus(candidate: CandidateProfile) -> str:
        skills = [s.strip() for s in candidate.skills if s.strip()]
        if skills:
            return templates.STRENGTH_FOCUS.format(skill=skills[0])
        return templates.STRENGTH_FOCUS_FALLBACK

    def experience_response(self, candidate: CandidateProfile) -> str:
        entries = [e.strip() for e in candidate.experience_entries if e.strip()]
        if not entries:
            return templates.EXPERIENCE_FALLBACK

        recent = entries[:MAX_EXPERIENCES]
        return templates.EXPERIENCE.format(
            experiences=templates.EXPERIENCE_JOINER.join(recent)
        )

    def skills_response(self, job: JobPosting, candidate: CandidateProfile) -> str:
        skills = [s.strip() for s in candidate.skills if s.strip()]
        if not skills:
            return templates.SKILLS_FALLBACK

        description = job.description.lower()
        relevant = [s for s in skills if s.lower() in description]
        highlight = (relevant or skills)[:MAX_SKILLS]
        return templates.SKILLS.format(skills=", ".join(highlight))

    def salary_response(self, candidate: CandidateProfile) -> str:
        salary = candidate.preferences.salary
        if not salary.is_stated:
            return templates.SALARY_FALLBACK

        return templates.SALARY.format(
            salary_min=f"${salary.min:,}",
            salary_max=f"${salary.max:,}",
        )

    def why_interested_response(self, job: JobPosting) -> str:
        title = job.title.strip()
        company = job.company.strip()
        if not title or not company:
            return templates.WHY_INTERESTED_FALLBACK
        return templates.WHY_INTERESTED.format(title=title, company=company)

    def generic_response(self, job: JobPosting, candidate: CandidateProfile) -> str:
        title = job.title.strip()
        position = f"this {title} position" if title else "this position"
        skills = [s.strip() for s in candidate.skills if s.strip()]
        if skills:
            statement = templates.GENERIC_STATEMENT.format(skill=skills[0], position=position)
        else:
            statement = templates.GENERIC_STATEMENT_FALLBACK.format(position=position)
        return templates.GENERIC.format(statement=statement)
