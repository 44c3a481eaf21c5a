#!/usr/bin/env python3
"""
Factor Matchers - Independent 0-100 sub-scores for the compatibility score.

- skills_match: share of required skills covered by the candidate
- experience_match: candidate years relative to required years
- location_match: job location against preferred locations
- salary_match: job salary range against the preferred band

Missing or unparsable data yields a neutral score rather than an error.
"""
from typing import Iterable, List, Optional, Tuple
import logging

from core.config_loader import NeutralScores
from core.matcher.models import SalaryPreference
from core.matcher.patterns import PATTERNS, REMOTE_MARKER
from core.utils import clamp_score, round_half_up

logger = logging.getLogger(__name__)

_DEFAULT_NEUTRAL = NeutralScores()


def skill_covered(required_skill: str, candidate_skills: Iterable[str]) -> bool:
    """True if any candidate skill contains the requirement or vice versa."""
    required_lower = required_skill.lower()
    for candidate_skill in candidate_skills:
        candidate_lower = candidate_skill.strip().lower()
        if not candidate_lower:
            continue
        if candidate_lower in required_lower or required_lower in candidate_lower:
            return True
    return False


def split_skills(
    required_skills: Iterable[str],
    candidate_skills: Iterable[str]
) -> Tuple[List[str], List[str]]:
    """Partition required skills into (matched, missing), both sorted."""
    candidate = list(candidate_skills)
    matched, missing = [], []
    for skill in sorted(required_skills):
        if skill_covered(skill, candidate):
            matched.append(skill)
        else:
            missing.append(skill)
    return matched, missing


def skills_match(required_skills: Iterable[str], candidate_skills: Iterable[str]) -> int:
    required = list(required_skills)
    if not required:
        return 100

    matched, _ = split_skills(required, candidate_skills)
    return clamp_score(len(matched) / len(required) * 100)


def experience_match(required_years: int, candidate_years: int) -> int:
    if required_years <= 0:
        return 100
    return clamp_score(min(100, round_half_up(candidate_years / required_years * 100)))


def location_match(
    job_location: Optional[str],
    preferred_locations: Iterable[str],
    neutral: NeutralScores = _DEFAULT_NEUTRAL
) -> int:
    """
    Score the job location against preferred locations.

    No preference scores neutral.location_no_preference; a location that
    matches none of the preferences scores neutral.location_miss.
    """
    preferences = [loc for loc in preferred_locations if loc and loc.strip()]
    if not preferences:
        return neutral.location_no_preference

    job_loc = (job_location or '').strip().lower()
    if job_loc:
        for preferred in preferences:
            preferred_lower = preferred.strip().lower()
            if preferred_lower in job_loc or job_loc in preferred_lower:
                return 100

        if REMOTE_MARKER in job_loc and any(REMOTE_MARKER in p.lower() for p in preferences):
            return 100

    return neutral.location_miss


def parse_salary_range(salary_text: Optional[str]) -> Optional[Tuple[int, int]]:
    """
    Parse the first two numeric groups of a salary text.

    "$50,000 - $80,000" -> (50000, 80000). Returns None when fewer than two
    numbers are present.
    """
    if not salary_text:
        return None

    amounts = []
    for raw in PATTERNS['salary_amount'].findall(salary_text):
        digits = raw.replace(',', '')
        if digits:
            amounts.append(int(digits))
        if len(amounts) == 2:
            break

    if len(amounts) < 2:
        return None

    low, high = amounts
    return (low, high) if low <= high else (high, low)


def salary_match(
    job_salary_text: Optional[str],
    preferred: Optional[SalaryPreference],
    neutral: NeutralScores = _DEFAULT_NEUTRAL
) -> int:
    """
    Score the job salary range against the preferred band.

    Overlapping ranges score the covered share of the preferred band.
    Disjoint ranges start from the neutral score and lose one point per
    percent of gap relative to the preferred midpoint.
    """
    if preferred is None or not preferred.is_stated:
        return neutral.salary_no_preference

    job_range = parse_salary_range(job_salary_text)
    if job_range is None:
        logger.debug(f"Unparsable salary range: {job_salary_text!r}")
        return neutral.salary_no_preference

    job_min, job_max = job_range
    overlap_start = max(job_min, preferred.min)
    overlap_end = min(job_max, preferred.max)

    if overlap_start <= overlap_end:
        preferred_size = preferred.max - preferred.min
        if preferred_size <= 0:
            return 100
        return clamp_score((overlap_end - overlap_start) / preferred_size * 100)

    if preferred.min > job_max:
        gap = preferred.min - job_max
    else:
        gap = job_min - preferred.max

    preferred_mid = (preferred.min + preferred.max) / 2
    if preferred_mid <= 0:
        gap_percentage = 100
    else:
        gap_percentage = min(100, round_half_up(gap / preferred_mid * 100))

    return clamp_score(max(0, neutral.salary_no_preference - gap_percentage))
