#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests are pure unit tests (the engine has no I/O) and can be run with
standard Python tools:

    # Run all tests
    uv run python -m pytest tests/ -v

    # Skip the HTTP layer tests
    uv run python -m pytest tests/ -v -m "not web"

Shared payloads below mirror what the recruiting app sends as jobData and
personaData.
"""

import copy
from typing import Any, Dict

REACT_JOB: Dict[str, Any] = {
    "title": "Frontend Developer",
    "company": "Acme",
    "description": "Looking for a React developer with 3+ years experience",
    "location": "Paris, France",
    "salary_range": "$50,000 - $80,000",
}

REACT_CANDIDATE: Dict[str, Any] = {
    "skills": ["React", "CSS"],
    "experience": ["Frontend Dev (2019-2023)"],
    "preferences": {
        "jobTypes": [],
        "locations": [],
        "salary": {"min": 0, "max": 0},
        "remote": False,
    },
}

EMPTY_CANDIDATE: Dict[str, Any] = {
    "skills": [],
    "experience": [],
    "preferences": {"locations": [], "salary": {"min": 0, "max": 0}},
}


def payload(data: Dict[str, Any], **overrides: Any) -> Dict[str, Any]:
    """Deep copy of a shared payload with top-level overrides applied."""
    result = copy.deepcopy(data)
    result.update(overrides)
    return result
