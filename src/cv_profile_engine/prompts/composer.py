"""Render a prompt kind against a profile and caller arguments."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import assert_never

from cv_profile_core.constants import NONE_IDENTIFIED, NONE_PROVIDED, UNSPECIFIED
from cv_profile_core.models.catalog import PromptKind
from cv_profile_core.models.profile import CVProfile
from cv_profile_engine.prompts import templates

# Argument names as advertised to clients
ARG_TARGET_ROLE = "target-role"
ARG_TARGET_COMPANY = "target-company"
ARG_JOB_DESCRIPTION = "job-description"


def compose_prompt(
    kind: PromptKind,
    profile: CVProfile,
    arguments: Mapping[str, str] | None = None,
) -> str:
    """Render the message body for kind.

    Missing arguments render as placeholders rather than failing.
    """
    args = arguments or {}
    personal = profile.personal_info
    skills = profile.technical_skills
    experience = profile.experience

    match kind:
        case PromptKind.PERSONAL_INFO:
            return templates.PERSONAL_INFO.format(
                name=personal.name,
                email=personal.email,
                phone=personal.phone,
                raw_personal_section=personal.raw_personal_section,
            )
        case PromptKind.TECHNICAL_SKILLS:
            return templates.TECHNICAL_SKILLS.format(
                skills=_join(skills.identified_skills),
                sections=_join(skills.technical_sections, "\n\n"),
                skills_count=skills.skills_count,
            )
        case PromptKind.EXPERIENCE:
            return templates.EXPERIENCE.format(
                periods=_join(experience.experience_periods, "\n"),
                years=experience.experience_years,
            )
        case PromptKind.FULL_PROFILE:
            return templates.FULL_PROFILE.format(
                personal_info=personal.to_json(),
                technical_skills=skills.to_json(),
                experience=experience.to_json(),
                education=profile.education.to_json(),
            )
        case PromptKind.COVER_LETTER:
            return templates.COVER_LETTER.format(
                target_role=_arg(args, ARG_TARGET_ROLE, UNSPECIFIED),
                target_company=_arg(args, ARG_TARGET_COMPANY, UNSPECIFIED),
                name=personal.name,
                skills=_join(skills.identified_skills),
                years=experience.experience_years,
            )
        case PromptKind.COMPATIBILITY_ANALYSIS:
            return templates.COMPATIBILITY_ANALYSIS.format(
                job_description=_arg(args, ARG_JOB_DESCRIPTION, NONE_PROVIDED),
                skills=_join(skills.identified_skills),
                years=experience.experience_years,
                education=_join(profile.education.education_mentioned),
            )
        case _:
            assert_never(kind)


def _arg(args: Mapping[str, str], name: str, placeholder: str) -> str:
    """Caller argument, or placeholder when absent or blank."""
    value = args.get(name)
    if value is None or not str(value).strip():
        return placeholder
    return str(value)


def _join(items: Iterable[str], sep: str = ", ") -> str:
    """Join items, or NONE_IDENTIFIED when there are none."""
    return sep.join(items) or NONE_IDENTIFIED
