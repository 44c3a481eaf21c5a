#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List


class DetailedAnalysisResponse(BaseModel):
    """Per-factor sub-scores."""
    skillsMatch: int = Field(ge=0, le=100)
    experienceMatch: int = Field(ge=0, le=100)
    locationMatch: int = Field(ge=0, le=100)
    salaryMatch: int = Field(ge=0, le=100)


class MatchAnalysisResponse(BaseModel):
    """Compatibility analysis result."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "score": 90,
                "strengths": [
                    "All required skills match",
                    "4 years of experience (1 more than the 3 years required)"
                ],
                "weaknesses": ["No significant weaknesses identified"],
                "recommendation": "This job is an excellent match for your profile. ...",
                "detailedAnalysis": {
                    "skillsMatch": 100,
                    "experienceMatch": 100,
                    "locationMatch": 50,
                    "salaryMatch": 50
                }
            }
        }
    )

    score: int = Field(ge=0, le=100)
    strengths: List[str]
    weaknesses: List[str] = Field(min_length=1)
    recommendation: str
    detailedAnalysis: DetailedAnalysisResponse


class DialogueResponse(BaseModel):
    """Simulated candidate answer."""
    response: str


class ApplicationResponse(BaseModel):
    """Drafted application document."""
    content: str
