"""Matcher Module - Requirement extraction and factor sub-scores."""
from core.matcher.models import (
    JobPosting, CandidateProfile, CandidatePreferences, SalaryPreference,
    JobRequirements, ConversationTurn
)
from core.matcher.requirement_extractor import RequirementExtractor
from core.matcher.experience_estimator import ExperienceEstimator
from core.matcher import factors

__all__ = [
    'RequirementExtractor', 'ExperienceEstimator', 'factors',
    'JobPosting', 'CandidateProfile', 'CandidatePreferences', 'SalaryPreference',
    'JobRequirements', 'ConversationTurn'
]
