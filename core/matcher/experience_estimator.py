#!/usr/bin/env python3
"""
Experience Estimator - Estimate total years of experience from free-text entries.

Each entry contributes through the first pattern that matches:
1. Year range ("Software Engineer at X (2020-2023)") -> end - start
2. Explicit duration ("Analyst, 2 years") -> N
3. Anything else -> 1 (one entry is roughly one year)
"""
from typing import Iterable, Optional
import logging

from core.matcher.patterns import PATTERNS

logger = logging.getLogger(__name__)

DEFAULT_YEARS_PER_ENTRY = 1


class ExperienceEstimator:
    """Estimate a candidate's total years of experience."""

    def estimate_years(self, entries: Optional[Iterable[str]]) -> int:
        """Sum estimated years across all entries; never negative."""
        if not entries:
            return 0

        total = 0
        for entry in entries:
            if not isinstance(entry, str):
                continue
            total += self.estimate_entry(entry)

        return max(0, total)

    def estimate_entry(self, entry: str) -> int:
        """Estimate years for a single experience entry."""
        range_match = PATTERNS['year_range'].search(entry)
        if range_match:
            start, end = int(range_match.group(1)), int(range_match.group(2))
            if end < start:
                logger.debug(f"Reversed year range in entry: {entry[:50]}")
                return 0
            return end - start

        years_match = PATTERNS['explicit_years'].search(entry)
        if years_match:
            return int(years_match.group(1))

        return DEFAULT_YEARS_PER_ENTRY
