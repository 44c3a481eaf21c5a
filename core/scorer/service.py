#!/usr/bin/env python3
"""
Compatibility Service - Job/candidate compatibility analysis.

Pipeline:
1. RequirementExtractor: job description -> skills + required years
2. ScoreAggregator: factor sub-scores -> weighted score, strengths, weaknesses
3. RecommendationClassifier: score -> recommendation

Stateless: the same inputs always produce the same MatchResult, and the
service holds no per-request state, so one instance can serve concurrent
requests.
"""

from typing import Any, Dict, Optional, Union
import logging

from core.config_loader import EngineConfig
from core.exceptions import MissingInputError
from core.matcher.models import CandidateProfile, JobPosting
from core.matcher.requirement_extractor import RequirementExtractor
from core.scorer.aggregator import ScoreAggregator
from core.scorer.models import MatchResult
from core.scorer.recommendation import RecommendationClassifier

logger = logging.getLogger(__name__)

JobInput = Union[JobPosting, Dict[str, Any]]
CandidateInput = Union[CandidateProfile, Dict[str, Any]]


def coerce_job(job: Optional[JobInput]) -> JobPosting:
    """Build a JobPosting from a payload, failing fast when it is absent."""
    if job is None:
        raise MissingInputError("jobData")
    if isinstance(job, JobPosting):
        return job
    return JobPosting.from_dict(job)


def coerce_candidate(candidate: Optional[CandidateInput]) -> CandidateProfile:
    """Build a CandidateProfile from a payload, failing fast when it is absent."""
    if candidate is None:
        raise MissingInputError("personaData")
    if isinstance(candidate, CandidateProfile):
        return candidate
    return CandidateProfile.from_dict(candidate)


class CompatibilityService:
    """Orchestrates requirement extraction, scoring and recommendation."""

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self.extractor = RequirementExtractor()
        self.aggregator = ScoreAggregator(self.config)
        self.classifier = RecommendationClassifier(self.config.thresholds)

    def analyze(
        self,
        job: Optional[JobInput],
        candidate: Optional[CandidateInput]
    ) -> MatchResult:
        """
        Analyze how well a candidate matches a job.

        Args:
            job: JobPosting or its JSON-shaped dict (jobData)
            candidate: CandidateProfile or its JSON-shaped dict (personaData)

        Returns:
            MatchResult with score, strengths, weaknesses, recommendation
            and per-factor breakdown

        Raises:
            MissingInputError: job or candidate is missing
        """
        job_posting = coerce_job(job)
        profile = coerce_candidate(candidate)

        logger.info(
            f"Job match analysis request: title={job_posting.title!r}, "
            f"skills={len(profile.skills)}"
        )

        requirements = self.extractor.extract(job_posting.description)
        result = self.aggregator.aggregate(job_posting, requirements, profile)
        result.recommendation = self.classifier.classify(result.score)

        logger.debug(
            f"Scored {job_posting.title!r}: {result.score} "
            f"({result.detailed_analysis.to_dict()})"
        )
        return result
