#!/usr/bin/env python3
"""
Scoring Module - Compatibility score aggregation.

Public API:
- CompatibilityService: analysis orchestrator
- MatchResult: result dataclass

- models.py: Data structures (MatchResult, DetailedAnalysis)
- aggregator.py: Weighted score and strengths/weaknesses
- recommendation.py: Score -> recommendation tier
- service.py: CompatibilityService orchestrator
"""

from core.scorer.models import MatchResult, DetailedAnalysis, NO_WEAKNESSES
from core.scorer.aggregator import ScoreAggregator
from core.scorer.recommendation import RecommendationClassifier, RecommendationTier
from core.scorer.service import CompatibilityService

__all__ = [
    'CompatibilityService', 'ScoreAggregator', 'RecommendationClassifier',
    'RecommendationTier', 'MatchResult', 'DetailedAnalysis', 'NO_WEAKNESSES'
]
