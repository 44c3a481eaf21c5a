#!/usr/bin/env python3
"""
Test suite for the CompatibilityService end-to-end analysis.
"""

import copy
import unittest

from core.exceptions import MissingInputError
from core.matcher.models import CandidateProfile, JobPosting
from core.scorer import CompatibilityService, RecommendationTier
from core.scorer.models import NO_WEAKNESSES
from tests import EMPTY_CANDIDATE, REACT_CANDIDATE, REACT_JOB, payload


class TestCompatibilityService(unittest.TestCase):

    def setUp(self):
        self.service = CompatibilityService()

    def test_react_scenario(self):
        result = self.service.analyze(payload(REACT_JOB), payload(REACT_CANDIDATE))

        self.assertEqual(result.detailed_analysis.skills_match, 100)
        self.assertEqual(result.detailed_analysis.experience_match, 100)
        self.assertEqual(result.detailed_analysis.location_match, 50)
        self.assertEqual(result.detailed_analysis.salary_match, 50)
        self.assertEqual(result.score, 90)
        self.assertGreaterEqual(result.score, 75)

        tier = self.service.classifier.tier(result.score)
        self.assertIn(tier, (RecommendationTier.EXCELLENT, RecommendationTier.GOOD))
        self.assertEqual(result.recommendation, self.service.classifier.classify(result.score))

        self.assertIn("All required skills match", result.strengths)
        self.assertEqual(result.weaknesses, [NO_WEAKNESSES])

    def test_empty_candidate_scenario(self):
        job = payload(REACT_JOB, description="Python, Docker and AWS engineer")
        result = self.service.analyze(job, payload(EMPTY_CANDIDATE))

        self.assertEqual(result.detailed_analysis.skills_match, 0)
        missing = [w for w in result.weaknesses if w.startswith("Missing skills:")]
        self.assertEqual(len(missing), 1)
        for skill in ("aws", "docker", "python"):
            self.assertIn(skill, missing[0])

    def test_output_shape(self):
        data = self.service.analyze(payload(REACT_JOB), payload(REACT_CANDIDATE)).to_dict()
        self.assertEqual(
            set(data),
            {"score", "strengths", "weaknesses", "recommendation", "detailedAnalysis"}
        )
        self.assertEqual(
            set(data["detailedAnalysis"]),
            {"skillsMatch", "experienceMatch", "locationMatch", "salaryMatch"}
        )

    def test_deterministic(self):
        first = self.service.analyze(payload(REACT_JOB), payload(REACT_CANDIDATE)).to_dict()
        second = self.service.analyze(payload(REACT_JOB), payload(REACT_CANDIDATE)).to_dict()
        self.assertEqual(first, second)

    def test_does_not_mutate_inputs(self):
        job = payload(REACT_JOB)
        candidate = payload(REACT_CANDIDATE)
        job_before, candidate_before = copy.deepcopy(job), copy.deepcopy(candidate)

        self.service.analyze(job, candidate)

        self.assertEqual(job, job_before)
        self.assertEqual(candidate, candidate_before)

    def test_accepts_domain_objects(self):
        job = JobPosting.from_dict(payload(REACT_JOB))
        candidate = CandidateProfile.from_dict(payload(REACT_CANDIDATE))
        from_objects = self.service.analyze(job, candidate).to_dict()
        from_dicts = self.service.analyze(payload(REACT_JOB), payload(REACT_CANDIDATE)).to_dict()
        self.assertEqual(from_objects, from_dicts)

    def test_missing_job(self):
        with self.assertRaises(MissingInputError) as ctx:
            self.service.analyze(None, payload(REACT_CANDIDATE))
        self.assertEqual(ctx.exception.field_name, "jobData")
        self.assertIn("jobData", str(ctx.exception))

    def test_missing_persona(self):
        with self.assertRaises(MissingInputError) as ctx:
            self.service.analyze(payload(REACT_JOB), None)
        self.assertEqual(ctx.exception.field_name, "personaData")

    def test_sparse_payloads_degrade_gracefully(self):
        result = self.service.analyze({}, {})
        self.assertEqual(result.score, 90)
        self.assertEqual(result.weaknesses, [NO_WEAKNESSES])

        result = self.service.analyze(
            {"description": None, "salary_range": None},
            {"skills": None, "preferences": {"salary": None}}
        )
        self.assertTrue(0 <= result.score <= 100)

    def test_salary_range_camel_case_key(self):
        candidate = payload(REACT_CANDIDATE, preferences={"salary": {"min": 60000, "max": 90000}})
        job = payload(REACT_JOB)
        del job["salary_range"]
        job["salaryRange"] = "$50,000 - $80,000"

        result = self.service.analyze(job, candidate)
        self.assertEqual(result.detailed_analysis.salary_match, 67)


if __name__ == '__main__':
    unittest.main()
