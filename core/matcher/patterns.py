"""
Pattern table for free-text extraction.

Every regex and vocabulary the extractors use lives here, keyed by the
field it populates, so extraction rules can be tested apart from scoring.
"""
import re
from types import MappingProxyType
from typing import Tuple

SKILL_VOCABULARY: Tuple[str, ...] = (
    "javascript", "typescript", "react", "angular", "vue", "node", "python",
    "java", "c#", "php", "ruby", "go", "rust", "sql", "nosql", "mongodb",
    "postgresql", "mysql", "aws", "azure", "gcp", "docker", "kubernetes",
    "ci/cd", "agile", "scrum", "kanban", "leadership", "communication",
    "teamwork", "problem-solving", "critical-thinking",
)

# field -> compiled pattern
PATTERNS = MappingProxyType({
    # "3+ years of experience" in a job description -> required years
    'required_years': re.compile(r'(\d+)\+?\s*years?(?:\s*of)?\s*experience', re.IGNORECASE),
    # "Engineer at X (2019-2023)" -> year range
    'year_range': re.compile(r'(\d{4})[^\d]+(\d{4})'),
    # "Analyst, 2 years" -> explicit duration
    'explicit_years': re.compile(r'(\d+)\s+years?', re.IGNORECASE),
    # "$50,000 - $80,000" -> numeric groups
    'salary_amount': re.compile(r'(\d[\d,]*)'),
})

REMOTE_MARKER = "remote"
