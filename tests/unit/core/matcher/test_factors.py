#!/usr/bin/env python3
"""
Test suite for the four factor matchers.
"""

import unittest

from core.config_loader import NeutralScores
from core.matcher import factors
from core.matcher.models import SalaryPreference


class TestSkillsMatch(unittest.TestCase):

    def test_no_requirements_is_full_match(self):
        self.assertEqual(factors.skills_match([], ["anything"]), 100)
        self.assertEqual(factors.skills_match(frozenset(), []), 100)

    def test_partial_and_case_insensitive(self):
        self.assertEqual(factors.skills_match({"react", "node"}, ["React"]), 50)

    def test_substring_either_way(self):
        # candidate skill inside requirement
        self.assertEqual(factors.skills_match({"postgresql"}, ["SQL"]), 100)
        # requirement inside candidate skill
        self.assertEqual(factors.skills_match({"python"}, ["Python 3"]), 100)

    def test_no_candidate_skills(self):
        self.assertEqual(factors.skills_match({"react", "python"}, []), 0)

    def test_blank_candidate_skill_never_matches(self):
        self.assertEqual(factors.skills_match({"react"}, ["", "  "]), 0)

    def test_rounds_half_up(self):
        required = {"python", "docker", "kubernetes", "azure", "scrum", "react", "vue", "rust"}
        # 1 of 8 = 12.5
        self.assertEqual(factors.skills_match(required, ["Python"]), 13)
        # 2 of 3 = 66.67
        self.assertEqual(factors.skills_match({"python", "docker", "aws"}, ["python", "docker"]), 67)

    def test_split_skills_is_sorted(self):
        matched, missing = factors.split_skills({"vue", "react", "docker", "aws"}, ["React", "AWS"])
        self.assertEqual(matched, ["aws", "react"])
        self.assertEqual(missing, ["docker", "vue"])


class TestExperienceMatch(unittest.TestCase):

    def test_no_requirement_is_full_match(self):
        self.assertEqual(factors.experience_match(0, 0), 100)
        self.assertEqual(factors.experience_match(0, 12), 100)

    def test_capped_at_100(self):
        self.assertEqual(factors.experience_match(3, 4), 100)

    def test_ratio(self):
        self.assertEqual(factors.experience_match(4, 3), 75)
        self.assertEqual(factors.experience_match(3, 1), 33)
        self.assertEqual(factors.experience_match(8, 1), 13)
        self.assertEqual(factors.experience_match(5, 0), 0)


class TestLocationMatch(unittest.TestCase):

    def test_no_preference_is_neutral(self):
        self.assertEqual(factors.location_match("Paris", []), 50)
        self.assertEqual(factors.location_match("Paris", ["", " "]), 50)

    def test_substring_either_way(self):
        self.assertEqual(factors.location_match("Paris, France", ["paris"]), 100)
        self.assertEqual(factors.location_match("Paris", ["Paris, France"]), 100)

    def test_remote_on_both_sides(self):
        self.assertEqual(factors.location_match("Fully remote (EU)", ["Remote only"]), 100)

    def test_miss_is_penalized_not_zeroed(self):
        self.assertEqual(factors.location_match("Berlin", ["Paris"]), 30)
        self.assertEqual(factors.location_match("Remote", ["Paris"]), 30)

    def test_missing_job_location(self):
        self.assertEqual(factors.location_match("", ["Paris"]), 30)
        self.assertEqual(factors.location_match(None, ["Paris"]), 30)

    def test_custom_neutral_scores(self):
        neutral = NeutralScores(location_no_preference=60, location_miss=10)
        self.assertEqual(factors.location_match("Berlin", [], neutral), 60)
        self.assertEqual(factors.location_match("Berlin", ["Paris"], neutral), 10)


class TestSalaryMatch(unittest.TestCase):

    def test_no_preference_is_neutral(self):
        self.assertEqual(factors.salary_match("$50,000 - $80,000", SalaryPreference(0, 0)), 50)
        self.assertEqual(factors.salary_match("$50,000 - $80,000", None), 50)

    def test_unparsable_range_is_neutral(self):
        preferred = SalaryPreference(60000, 90000)
        self.assertEqual(factors.salary_match("Competitive", preferred), 50)
        self.assertEqual(factors.salary_match("$50,000", preferred), 50)
        self.assertEqual(factors.salary_match("", preferred), 50)
        self.assertEqual(factors.salary_match(None, preferred), 50)

    def test_partial_overlap(self):
        # overlap 60k-80k over a 30k preferred band
        self.assertEqual(
            factors.salary_match("$50,000 - $80,000", SalaryPreference(60000, 90000)), 67
        )

    def test_job_range_covers_preference(self):
        self.assertEqual(
            factors.salary_match("$40,000 - $100,000", SalaryPreference(60000, 90000)), 100
        )

    def test_zero_width_preference_inside_range(self):
        self.assertEqual(
            factors.salary_match("$50,000 - $80,000", SalaryPreference(70000, 70000)), 100
        )

    def test_gap_below_preference(self):
        # gap 20k against a 75k midpoint -> 27%
        self.assertEqual(
            factors.salary_match("$30,000 - $40,000", SalaryPreference(60000, 90000)), 23
        )

    def test_gap_above_preference(self):
        # gap 20k against a 70k midpoint -> 29%
        self.assertEqual(
            factors.salary_match("$100,000 - $120,000", SalaryPreference(60000, 80000)), 21
        )

    def test_large_gap_floors_at_zero(self):
        self.assertEqual(
            factors.salary_match("$10,000 - $20,000", SalaryPreference(100000, 120000)), 0
        )

    def test_parse_salary_range(self):
        self.assertEqual(factors.parse_salary_range("$50,000 - $80,000"), (50000, 80000))
        self.assertEqual(factors.parse_salary_range("80000 to 50000 EUR"), (50000, 80000))
        self.assertEqual(factors.parse_salary_range("45k-60k"), (45, 60))
        self.assertIsNone(factors.parse_salary_range("negotiable"))


class TestFactorProperties(unittest.TestCase):
    """Determinism and bounds across a spread of inputs."""

    JOB_LOCATIONS = ["Paris", "Remote", "", "New York, NY", "remote - EU"]
    PREFERENCES = [[], ["paris"], ["Remote"], ["Tokyo", "Berlin"]]
    SALARIES = ["$50,000 - $80,000", "1 - 1000000", "n/a", "$200,000 - $250,000"]
    BANDS = [SalaryPreference(0, 0), SalaryPreference(1, 2), SalaryPreference(60000, 90000),
             SalaryPreference(50000, 0), SalaryPreference(0, 40000)]

    def test_bounds_and_determinism(self):
        for job_loc in self.JOB_LOCATIONS:
            for prefs in self.PREFERENCES:
                first = factors.location_match(job_loc, prefs)
                self.assertEqual(first, factors.location_match(job_loc, prefs))
                self.assertTrue(0 <= first <= 100)

        for text in self.SALARIES:
            for band in self.BANDS:
                first = factors.salary_match(text, band)
                self.assertEqual(first, factors.salary_match(text, band))
                self.assertTrue(0 <= first <= 100, f"{text!r} vs {band}: {first}")

        for required in range(0, 12):
            for candidate in range(0, 40, 3):
                score = factors.experience_match(required, candidate)
                self.assertTrue(0 <= score <= 100)


if __name__ == '__main__':
    unittest.main()
