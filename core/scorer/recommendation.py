#!/usr/bin/env python3
"""
Recommendation Classifier - Map a compatibility score to an advice tier.

Tiers are ordered from best to worst; a higher score never lands in a
worse tier than a lower score.
"""

from enum import Enum
from typing import Optional
import logging

from core.config_loader import RecommendationThresholds

logger = logging.getLogger(__name__)


class RecommendationTier(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    WEAK = "weak"

    @property
    def rank(self) -> int:
        """0 is best."""
        return list(RecommendationTier).index(self)


RECOMMENDATION_TEXT = {
    RecommendationTier.EXCELLENT: (
        "This job is an excellent match for your profile. Consider applying "
        "immediately with a customized application to highlight your relevant experience."
    ),
    RecommendationTier.GOOD: (
        "This job is a good match for your profile. Apply with a strong cover "
        "letter highlighting your relevant skills and experience."
    ),
    RecommendationTier.FAIR: (
        "This job is a fair match. Consider addressing the identified weaknesses "
        "in your application and emphasize your strengths."
    ),
    RecommendationTier.WEAK: (
        "This job may not be an ideal match for your profile. Consider improving "
        "your skills in the areas mentioned before applying."
    ),
}


class RecommendationClassifier:
    """Threshold lookup from score to recommendation."""

    def __init__(self, thresholds: Optional[RecommendationThresholds] = None):
        self.thresholds = thresholds or RecommendationThresholds()

    def tier(self, score: int) -> RecommendationTier:
        if score >= self.thresholds.excellent:
            return RecommendationTier.EXCELLENT
        if score >= self.thresholds.good:
            return RecommendationTier.GOOD
        if score >= self.thresholds.fair:
            return RecommendationTier.FAIR
        return RecommendationTier.WEAK

    def classify(self, score: int) -> str:
        return RECOMMENDATION_TEXT[self.tier(score)]
