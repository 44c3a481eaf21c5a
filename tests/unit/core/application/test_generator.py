#!/usr/bin/env python3
"""
Test suite for application document generation.
"""

import pytest

from core.application import ApplicationGenerator, ApplicationKind
from core.exceptions import MissingInputError
from tests import REACT_CANDIDATE, REACT_JOB, payload


@pytest.fixture
def generator():
    return ApplicationGenerator()


def test_cover_letter(generator):
    letter = generator.generate("cover_letter", payload(REACT_JOB), payload(REACT_CANDIDATE))

    assert letter.startswith("Dear Hiring Manager,")
    assert "the Frontend Developer position at Acme" in letter
    assert "Most recently, I worked as Frontend Dev (2019-2023)." in letter
    # only skills mentioned in the description are highlighted
    assert "proficient in React," in letter
    assert "CSS" not in letter
    assert "reputation for excellence" in letter
    assert letter.rstrip().endswith("[Your Name]")


def test_cover_letter_remote_motivation(generator):
    job = payload(REACT_JOB, location="Remote (EU)")
    candidate = payload(REACT_CANDIDATE, preferences={"remote": True})
    letter = generator.generate("cover_letter", job, candidate)
    assert "flexible approach to work" in letter


def test_cover_letter_with_empty_candidate(generator):
    letter = generator.generate("cover_letter", payload(REACT_JOB), {})
    assert "transfer well to the Frontend Developer role" in letter
    assert "learning new technologies quickly" in letter


@pytest.mark.parametrize("kind, subject", [
    ("email", "Subject: Application for the Frontend Developer position at Acme"),
    ("follow_up", "Subject: Following up on my application for the Frontend Developer position at Acme"),
])
def test_emails(generator, kind, subject):
    content = generator.generate(kind, payload(REACT_JOB), payload(REACT_CANDIDATE))
    assert content.splitlines()[0] == subject


@pytest.mark.parametrize("kind", [None, "", "telegram"])
def test_unknown_kind_falls_back_to_cover_letter(generator, kind):
    content = generator.generate(kind, payload(REACT_JOB), payload(REACT_CANDIDATE))
    assert content == generator.generate("cover_letter", payload(REACT_JOB), payload(REACT_CANDIDATE))


def test_blank_job_fields(generator):
    content = generator.generate("email", {}, {})
    assert "the advertised position at your company" in content
    assert "{" not in content


def test_parse_kind():
    assert ApplicationKind.parse("follow_up") is ApplicationKind.FOLLOW_UP
    assert ApplicationKind.parse("bogus") is ApplicationKind.COVER_LETTER


def test_missing_inputs(generator):
    with pytest.raises(MissingInputError):
        generator.generate("email", None, payload(REACT_CANDIDATE))
    with pytest.raises(MissingInputError):
        generator.generate("email", payload(REACT_JOB), None)
