#!/usr/bin/env python3
"""
Score Aggregator - Combine factor sub-scores into a compatibility score.

Formula: skills * 0.5 + experience * 0.3 + location * 0.1 + salary * 0.1
(weights from ScoringWeights).

Also derives qualitative strengths and weaknesses. Strengths may be empty;
weaknesses always carry at least the NO_WEAKNESSES sentinel.
"""

from typing import List, Optional
import logging

from core.config_loader import EngineConfig
from core.matcher import factors
from core.matcher.experience_estimator import ExperienceEstimator
from core.matcher.models import CandidateProfile, JobPosting, JobRequirements
from core.scorer.models import DetailedAnalysis, MatchResult, NO_WEAKNESSES
from core.utils import clamp_score

logger = logging.getLogger(__name__)

STRONG_SKILLS_RATIO = 0.7
GOOD_SKILLS_RATIO = 0.5


class ScoreAggregator:
    """Weighted aggregation plus strengths/weaknesses derivation."""

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        estimator: Optional[ExperienceEstimator] = None
    ):
        self.config = config or EngineConfig()
        self.estimator = estimator or ExperienceEstimator()

    def aggregate(
        self,
        job: JobPosting,
        requirements: JobRequirements,
        candidate: CandidateProfile
    ) -> MatchResult:
        """
        Score a candidate against extracted job requirements.

        The recommendation is left empty; RecommendationClassifier fills it.
        """
        candidate_years = self.estimator.estimate_years(candidate.experience_entries)
        neutral = self.config.neutral

        analysis = DetailedAnalysis(
            skills_match=factors.skills_match(requirements.skills, candidate.skills),
            experience_match=factors.experience_match(
                requirements.experience_years, candidate_years
            ),
            location_match=factors.location_match(
                job.location, candidate.preferences.locations, neutral
            ),
            salary_match=factors.salary_match(
                job.salary_range, candidate.preferences.salary, neutral
            ),
        )

        return MatchResult(
            score=self.weighted_score(analysis),
            strengths=self.identify_strengths(job, requirements, candidate, candidate_years),
            weaknesses=self.identify_weaknesses(requirements, candidate, candidate_years),
            detailed_analysis=analysis,
        )

    def weighted_score(self, analysis: DetailedAnalysis) -> int:
        weights = self.config.weights
        return clamp_score(
            analysis.skills_match * weights.skills +
            analysis.experience_match * weights.experience +
            analysis.location_match * weights.location +
            analysis.salary_match * weights.salary
        )

    def identify_strengths(
        self,
        job: JobPosting,
        requirements: JobRequirements,
        candidate: CandidateProfile,
        candidate_years: int
    ) -> List[str]:
        strengths = []

        matched, _ = factors.split_skills(requirements.skills, candidate.skills)
        required_total = len(requirements.skills)
        if matched:
            if len(matched) == required_total:
                strengths.append("All required skills match")
            elif len(matched) >= required_total * STRONG_SKILLS_RATIO:
                strengths.append("Strong skills match")
            elif len(matched) >= required_total * GOOD_SKILLS_RATIO:
                strengths.append("Good skills match")
            else:
                strengths.append(f"Matching skills: {', '.join(matched)}")

        required_years = requirements.experience_years
        if candidate_years > 0 and candidate_years >= required_years:
            if required_years > 0:
                surplus = candidate_years - required_years
                strengths.append(
                    f"{candidate_years} years of experience "
                    f"({surplus} more than the {required_years} years required)"
                )
            else:
                strengths.append(f"{candidate_years} years of experience")

        if self._has_location_hit(job, candidate):
            strengths.append("Location preference match")

        return strengths

    @staticmethod
    def _has_location_hit(job: JobPosting, candidate: CandidateProfile) -> bool:
        targets = [t.strip().lower() for t in (candidate.location, job.location) if t and t.strip()]
        for preferred in candidate.preferences.locations:
            preferred_lower = preferred.strip().lower()
            if not preferred_lower:
                continue
            for target in targets:
                if preferred_lower in target or target in preferred_lower:
                    return True
        return False

    def identify_weaknesses(
        self,
        requirements: JobRequirements,
        candidate: CandidateProfile,
        candidate_years: int
    ) -> List[str]:
        weaknesses = []

        _, missing = factors.split_skills(requirements.skills, candidate.skills)
        if missing:
            weaknesses.append(f"Missing skills: {', '.join(missing)}")

        if candidate_years < requirements.experience_years:
            gap = requirements.experience_years - candidate_years
            weaknesses.append(
                f"Experience gap: {gap} more years of experience required"
            )

        # Flags any stated preference, not only ones that conflict with the job range
        if candidate.preferences.salary.is_stated:
            weaknesses.append("Salary expectations may not align with job offer")

        return weaknesses if weaknesses else [NO_WEAKNESSES]
