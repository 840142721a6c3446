"""Technology vocabulary matching and skills-section capture."""

from __future__ import annotations

import re

from cv_profile_core.constants import SKILLS_KEYWORDS
from cv_profile_core.models.profile import TechnicalSkills

# Header, then everything up to a blank line or the next line starting with a letter.
# IGNORECASE makes [A-Z] match any letter.
SECTION_PATTERN = re.compile(
    r"(compétences|skills|technologies|techniques?)[:\s]*(.*?)(?=\n\n|\n[A-Z]|\Z)",
    re.IGNORECASE | re.DOTALL,
)


def extract_technical_skills(text: str) -> TechnicalSkills:
    """Match the skills vocabulary and capture every skills-like section."""
    lowered = text.lower()
    found = tuple(skill for skill in SKILLS_KEYWORDS if skill.lower() in lowered)
    sections = tuple(m.group(2).strip() for m in SECTION_PATTERN.finditer(text))
    return TechnicalSkills(identified_skills=found, technical_sections=sections)
