"""Surface-level heuristics turning document text into profile fragments."""

from cv_profile_engine.extractors.experience import extract_experience
from cv_profile_engine.extractors.keywords import extract_education, extract_projects
from cv_profile_engine.extractors.personal_info import extract_personal_info
from cv_profile_engine.extractors.technical_skills import extract_technical_skills

__all__ = [
    "extract_education",
    "extract_experience",
    "extract_personal_info",
    "extract_projects",
    "extract_technical_skills",
]
