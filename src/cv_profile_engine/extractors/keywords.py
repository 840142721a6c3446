"""Presence-only detectors for education and projects."""

from __future__ import annotations

from collections.abc import Sequence

from cv_profile_core.constants import EDUCATION_KEYWORDS, PROJECT_KEYWORDS
from cv_profile_core.models.profile import Education, Projects


def find_keywords(text: str, keywords: Sequence[str]) -> tuple[str, ...]:
    """Return the keywords contained in text (case-insensitive), in vocabulary order."""
    lowered = text.lower()
    return tuple(keyword for keyword in keywords if keyword.lower() in lowered)


def extract_education(text: str) -> Education:
    found = find_keywords(text, EDUCATION_KEYWORDS)
    return Education(has_education_section=bool(found), education_mentioned=found)


def extract_projects(text: str) -> Projects:
    found = find_keywords(text, PROJECT_KEYWORDS)
    return Projects(has_projects_section=bool(found), project_keywords_found=found)
