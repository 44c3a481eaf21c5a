#!/usr/bin/env python3
"""
Application Generator - Draft application documents from fixed templates.

Supported documents:
- cover_letter: full letter built from experience, skills and motivation paragraphs
- email: short application email
- follow_up: follow-up email after applying

Unknown document types fall back to a cover letter.
"""
from enum import Enum
from typing import Optional
import logging

from core.matcher.models import CandidateProfile, JobPosting
from core.matcher.patterns import REMOTE_MARKER
from core.scorer.service import CandidateInput, JobInput, coerce_candidate, coerce_job

logger = logging.getLogger(__name__)

MAX_SKILLS = 3


class ApplicationKind(str, Enum):
    COVER_LETTER = "cover_letter"
    EMAIL = "email"
    FOLLOW_UP = "follow_up"

    @classmethod
    def parse(cls, value: Optional[str]) -> "ApplicationKind":
        try:
            return cls(value)
        except ValueError:
            if value:
                logger.warning(f"Unknown application type {value!r}, using cover_letter")
            return cls.COVER_LETTER


COVER_LETTER = """Dear Hiring Manager,

I am writing to apply for the {title} position at {company}.

{experience_paragraph}

{skills_paragraph}

{motivation_paragraph}

{closing_paragraph}

Sincerely,
[Your Name]"""

EMAIL = """Subject: Application for the {title} position at {company}

Dear Hiring Manager,

I hope this message finds you well. I am reaching out to apply for the {title} position at {company}, which I found on your careers page.

Please find attached my resume and cover letter for your consideration. I am very enthusiastic about the opportunity to contribute to {company} and would welcome the chance to discuss how my skills and experience match your needs.

Thank you for considering my application. I look forward to hearing from you.

Best regards,
[Your Name]
[Your Phone]
[Your Email]"""

FOLLOW_UP = """Subject: Following up on my application for the {title} position at {company}

Dear Hiring Manager,

I hope this message finds you well. I recently applied for the {title} position at {company} and wanted to follow up to reiterate my interest in the role.

I remain very excited about the prospect of joining your team and am confident that my skills and experience would be a strong addition. If you need any further information from me, please let me know.

Thank you for your time and consideration. I look forward to the opportunity to discuss my qualifications further.

Best regards,
[Your Name]
[Your Phone]
[Your Email]"""


class ApplicationGenerator:
    """Fill application templates from a job posting and candidate profile."""

    def generate(
        self,
        kind: Optional[str],
        job: Optional[JobInput],
        candidate: Optional[CandidateInput]
    ) -> str:
        """
        Render the requested document.

        Raises:
            MissingInputError: job or candidate is missing
        """
        job_posting = coerce_job(job)
        profile = coerce_candidate(candidate)
        application_kind = ApplicationKind.parse(kind)

        logger.info(
            f"Application generation request: title={job_posting.title!r}, "
            f"type={application_kind.value}"
        )

        if application_kind is ApplicationKind.EMAIL:
            return self.email(job_posting)
        if application_kind is ApplicationKind.FOLLOW_UP:
            return self.follow_up(job_posting)
        return self.cover_letter(job_posting, profile)

    @staticmethod
    def _names(job: JobPosting):
        return job.title.strip() or "advertised", job.company.strip() or "your company"

    def cover_letter(self, job: JobPosting, candidate: CandidateProfile) -> str:
        title, company = self._names(job)
        return COVER_LETTER.format(
            title=title,
            company=company,
            experience_paragraph=self.experience_paragraph(job, candidate),
            skills_paragraph=self.skills_paragraph(job, candidate),
            motivation_paragraph=self.motivation_paragraph(job, candidate),
            closing_paragraph=(
                f"I am excited about the opportunity to bring my skills and experience "
                f"to {company} and to contribute to its continued success. I would "
                f"welcome the chance to discuss how I can make an immediate impact on your team."
            ),
        )

    def email(self, job: JobPosting) -> str:
        title, company = self._names(job)
        return EMAIL.format(title=title, company=company)

    def follow_up(self, job: JobPosting) -> str:
        title, company = self._names(job)
        return FOLLOW_UP.format(title=title, company=company)

    def experience_paragraph(self, job: JobPosting, candidate: CandidateProfile) -> str:
        title, _ = self._names(job)
        entries = [e.strip() for e in candidate.experience_entries if e.strip()]
        if not entries:
            return (
                f"Throughout my career, I have developed skills that I believe "
                f"transfer well to the {title} role."
            )
        return (
            f"Most recently, I worked as {entries[0]}. This experience prepared me well "
            f"for the {title} role, as I developed strong skills in problem-solving, "
            f"collaboration, and delivering high-quality results."
        )

    def skills_paragraph(self, job: JobPosting, candidate: CandidateProfile) -> str:
        skills = [s.strip() for s in candidate.skills if s.strip()]
        if not skills:
            return (
                "I am particularly good at adapting to new environments and "
                "learning new technologies quickly."
            )

        description = job.description.lower()
        relevant = [s for s in skills if s.lower() in description]
        highlight = (relevant or skills)[:MAX_SKILLS]
        return (
            f"I am particularly proficient in {', '.join(highlight)}, skills I understand "
            f"to be essential for this position. Throughout my career, I have consistently "
            f"applied them to achieve impactful results."
        )

    def motivation_paragraph(self, job: JobPosting, candidate: CandidateProfile) -> str:
        title, company = self._names(job)
        if candidate.preferences.remote and REMOTE_MARKER in job.location.lower():
            attraction = "your flexible approach to work that supports a healthy work-life balance"
        else:
            attraction = "your reputation for excellence and innovation in the industry"
        return (
            f"What particularly attracts me to {company} is {attraction}. The {title} "
            f"position is an ideal opportunity for me to contribute to your goals while "
            f"continuing to grow professionally."
        )
