"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For shared payloads, see tests/__init__.py
"""

import random
import pytest

from core.matcher.models import CandidateProfile, JobPosting
from tests import REACT_CANDIDATE, REACT_JOB, payload


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "web: marks tests that exercise the HTTP layer (deselect with '-m \"not web\"')"
    )


@pytest.fixture
def react_job() -> JobPosting:
    return JobPosting.from_dict(payload(REACT_JOB))


@pytest.fixture
def react_candidate() -> CandidateProfile:
    return CandidateProfile.from_dict(payload(REACT_CANDIDATE))


@pytest.fixture
def seeded_rng() -> random.Random:
    """Random source with a fixed seed so template picks are reproducible."""
    return random.Random(1234)
