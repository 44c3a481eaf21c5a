#!/usr/bin/env python3
"""
Intent Classifier - Assign an interview question to an intent by keywords.

Keyword groups are checked in a fixed priority order and the first group
with a keyword inside the lower-cased question wins, so a question about
both salary and teamwork is a Salary question.
"""
from enum import Enum
from typing import Optional, Tuple
import logging

logger = logging.getLogger(__name__)


class Intent(str, Enum):
    EXPERIENCE = "experience"
    SKILLS = "skills"
    SALARY = "salary"
    WEAKNESS = "weakness"
    STRENGTH = "strength"
    WHY_INTERESTED = "why_interested"
    TEAMWORK = "teamwork"
    PROJECT = "project"
    AVAILABILITY = "availability"
    CANDIDATE_QUESTION = "candidate_question"
    GENERIC = "generic"


# Priority order matters
INTENT_KEYWORDS: Tuple[Tuple[Intent, Tuple[str, ...]], ...] = (
    (Intent.EXPERIENCE, ("experience", "background", "worked", "previous")),
    (Intent.SKILLS, ("skill", "technology", "proficient", "familiar")),
    (Intent.SALARY, ("salary", "compensation", "pay", "package", "benefits")),
    (Intent.WEAKNESS, ("weakness", "challenge", "difficult", "struggle")),
    (Intent.STRENGTH, ("strength", "good at", "excel")),
    (Intent.WHY_INTERESTED, ("why", "reason", "interested", "apply")),
    (Intent.TEAMWORK, ("team", "collaborate", "work with others")),
    (Intent.PROJECT, ("project", "achievement", "proud")),
    (Intent.AVAILABILITY, ("start", "available", "notice period")),
    (Intent.CANDIDATE_QUESTION, ("question", "ask", "anything")),
)


class IntentClassifier:
    """Keyword-based question classifier; stateless and deterministic."""

    def classify(self, question: Optional[str]) -> Intent:
        if not question:
            return Intent.GENERIC

        question_lower = question.lower()
        for intent, keywords in INTENT_KEYWORDS:
            if any(keyword in question_lower for keyword in keywords):
                return intent

        return Intent.GENERIC
