"""Contact details: first email, first phone-like run, first line as name."""

from __future__ import annotations

import re

from cv_profile_core.constants import NOT_FOUND, PERSONAL_SECTION_LINES
from cv_profile_core.models.profile import PersonalInfo

EMAIL_PATTERN = re.compile(r"[\w.-]+@[\w.-]+\.\w+", re.ASCII)
PHONE_PATTERN = re.compile(r"\+?[0-9\s\-()]{10,}")


def extract_personal_info(text: str) -> PersonalInfo:
    """Extract name, email and phone from raw text.

    The first match of each pattern wins, skipping phone-like runs that are
    only whitespace; nothing is validated. Resumes usually open with the
    candidate's name, so the first non-blank line is taken as the name.
    """
    email = EMAIL_PATTERN.search(text)
    phone = next(
        (run for m in PHONE_PATTERN.finditer(text) if (run := m.group(0).strip())),
        NOT_FOUND,
    )
    lines = [line.strip() for line in text.splitlines() if line.strip()]

    return PersonalInfo(
        name=lines[0] if lines else NOT_FOUND,
        email=email.group(0) if email else NOT_FOUND,
        phone=phone,
        raw_personal_section="\n".join(lines[:PERSONAL_SECTION_LINES]) or NOT_FOUND,
    )
