#!/usr/bin/env python3
"""
Scoring Models - Data structures for compatibility results.
"""

from typing import List, Dict, Any
from dataclasses import dataclass, field

NO_WEAKNESSES = "No significant weaknesses identified"


@dataclass
class DetailedAnalysis:
    """Per-factor sub-scores, each in [0, 100]."""
    skills_match: int = 0
    experience_match: int = 0
    location_match: int = 0
    salary_match: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            'skillsMatch': self.skills_match,
            'experienceMatch': self.experience_match,
            'locationMatch': self.location_match,
            'salaryMatch': self.salary_match,
        }


@dataclass
class MatchResult:
    """Complete compatibility result for one job/candidate pair."""
    score: int = 0
    strengths: List[str] = field(default_factory=list)
    weaknesses: List[str] = field(default_factory=lambda: [NO_WEAKNESSES])
    recommendation: str = ""
    detailed_analysis: DetailedAnalysis = field(default_factory=DetailedAnalysis)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys the recruiting app expects."""
        return {
            'score': self.score,
            'strengths': list(self.strengths),
            'weaknesses': list(self.weaknesses),
            'recommendation': self.recommendation,
            'detailedAnalysis': self.detailed_analysis.to_dict(),
        }
