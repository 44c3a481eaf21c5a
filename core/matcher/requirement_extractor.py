#!/usr/bin/env python3
"""
Requirement Extractor - Parse a job description into structured requirements.

Skills are vocabulary terms found as substrings of the lower-cased
description; required years come from the first "N+ years of experience"
phrase.
"""
from typing import Optional
import logging

from core.matcher.models import JobRequirements
from core.matcher.patterns import PATTERNS, SKILL_VOCABULARY

logger = logging.getLogger(__name__)


class RequirementExtractor:
    """Extract skills and required years of experience from job text."""

    def extract(self, description: Optional[str]) -> JobRequirements:
        """
        Extract requirements from a job description.

        Empty or None descriptions yield no requirements.
        """
        if not description:
            return JobRequirements()

        text_lower = str(description).lower()

        skills = frozenset(
            term for term in SKILL_VOCABULARY if term in text_lower
        )
        experience_years = self.extract_years(text_lower)

        logger.debug(
            f"Extracted {len(skills)} skill(s) and {experience_years} required year(s)"
        )
        return JobRequirements(skills=skills, experience_years=experience_years)

    @staticmethod
    def extract_years(text: str) -> int:
        """Return the first "N years experience" figure, or 0."""
        if not text:
            return 0
        match = PATTERNS['required_years'].search(text.lower())
        if match:
            return int(match.group(1))
        return 0
