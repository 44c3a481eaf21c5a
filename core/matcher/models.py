#!/usr/bin/env python3
"""
Matcher Models - Data structures for compatibility matching.

Inputs (JobPosting, CandidateProfile) are frozen and built from the
JSON-shaped payloads the recruiting app sends; from_dict accepts both the
camelCase keys of the app and snake_case keys.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional, Tuple

from core.utils import as_int, as_text, as_text_list


def _pick(data: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return None


@dataclass(frozen=True)
class JobPosting:
    """Job record owned by the recruiting app."""
    title: str = ""
    description: str = ""
    location: str = ""
    salary_range: str = ""
    company: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "JobPosting":
        data = data or {}
        return cls(
            title=as_text(data.get('title')),
            description=as_text(data.get('description')),
            location=as_text(data.get('location')),
            salary_range=as_text(_pick(data, 'salary_range', 'salaryRange')),
            company=as_text(data.get('company')),
        )


@dataclass(frozen=True)
class SalaryPreference:
    """Desired salary band; 0/0 means no stated preference."""
    min: int = 0
    max: int = 0

    @property
    def is_stated(self) -> bool:
        return self.min > 0 or self.max > 0

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SalaryPreference":
        data = data or {}
        return cls(min=as_int(data.get('min')), max=as_int(data.get('max')))


@dataclass(frozen=True)
class CandidatePreferences:
    job_types: Tuple[str, ...] = ()
    locations: Tuple[str, ...] = ()
    salary: SalaryPreference = field(default_factory=SalaryPreference)
    remote: bool = False

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "CandidatePreferences":
        data = data or {}
        return cls(
            job_types=tuple(as_text_list(_pick(data, 'job_types', 'jobTypes'))),
            locations=tuple(as_text_list(data.get('locations'))),
            salary=SalaryPreference.from_dict(data.get('salary')),
            remote=bool(data.get('remote', False)),
        )


@dataclass(frozen=True)
class CandidateProfile:
    """Candidate persona: skills, free-text experience entries, preferences."""
    skills: Tuple[str, ...] = ()
    experience_entries: Tuple[str, ...] = ()
    preferences: CandidatePreferences = field(default_factory=CandidatePreferences)
    location: str = ""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "CandidateProfile":
        data = data or {}
        return cls(
            skills=tuple(as_text_list(data.get('skills'))),
            experience_entries=tuple(as_text_list(
                _pick(data, 'experience', 'experience_entries', 'experienceEntries')
            )),
            preferences=CandidatePreferences.from_dict(data.get('preferences')),
            location=as_text(data.get('location')),
        )


@dataclass(frozen=True)
class JobRequirements:
    """Requirements derived from a job description; never persisted."""
    skills: FrozenSet[str] = frozenset()
    experience_years: int = 0


@dataclass(frozen=True)
class ConversationTurn:
    role: str
    content: str

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ConversationTurn":
        data = data or {}
        return cls(role=as_text(data.get('role')), content=as_text(data.get('content')))
