"""CV profile model and its extracted fragments."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from cv_profile_core.constants import (
    NOT_AVAILABLE,
    UNAVAILABLE_PERSONAL_SECTION,
    UNAVAILABLE_RAW_TEXT,
)


class ProfileFragment(BaseModel):
    """Immutable base; serializes with camelCase keys."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> str:
        """Serialize with camelCase keys, indented for prompt bodies."""
        return self.model_dump_json(by_alias=True, indent=2)


class PersonalInfo(ProfileFragment):
    """Contact details found at the top of the document."""

    name: str = Field(description="First non-blank line of the document")
    email: str = Field(description="First email-like token")
    phone: str = Field(description="First phone-like run of characters")
    raw_personal_section: str = Field(description="First five non-blank lines")


class TechnicalSkills(ProfileFragment):
    """Vocabulary skills found anywhere plus raw skills sections."""

    identified_skills: tuple[str, ...] = Field(
        default=(), description="Vocabulary terms present in the document"
    )
    technical_sections: tuple[str, ...] = Field(
        default=(), description="Text following each skills-like header, in document order"
    )

    @computed_field(alias="skillsCount")  # type: ignore[prop-decorator]
    @property
    def skills_count(self) -> int:
        """Number of identified skills."""
        return len(self.identified_skills)


class Experience(ProfileFragment):
    """Year ranges and the total years derived from them."""

    experience_periods: tuple[str, ...] = Field(
        default=(), description="Matched year-range tokens, in document order"
    )
    experience_years: int = Field(default=0, ge=0, description="Sum of per-period durations")


class Education(ProfileFragment):
    """Presence of education-related keywords."""

    has_education_section: bool = Field(default=False, description="Any keyword found")
    education_mentioned: tuple[str, ...] = Field(
        default=(), description="Keywords found, in vocabulary order"
    )


class Projects(ProfileFragment):
    """Presence of project-related keywords."""

    has_projects_section: bool = Field(default=False, description="Any keyword found")
    project_keywords_found: tuple[str, ...] = Field(
        default=(), description="Keywords found, in vocabulary order"
    )


class CVProfile(ProfileFragment):
    """Structured profile extracted from one source document."""

    raw_text: str = Field(description="Full decoded document text")
    extracted_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="When extraction ran"
    )
    personal_info: PersonalInfo
    technical_skills: TechnicalSkills
    experience: Experience
    education: Education
    projects: Projects

    @classmethod
    def empty(cls) -> CVProfile:
        """Well-formed placeholder used when the document cannot be read."""
        return cls(
            raw_text=UNAVAILABLE_RAW_TEXT,
            personal_info=PersonalInfo(
                name=NOT_AVAILABLE,
                email=NOT_AVAILABLE,
                phone=NOT_AVAILABLE,
                raw_personal_section=UNAVAILABLE_PERSONAL_SECTION,
            ),
            technical_skills=TechnicalSkills(),
            experience=Experience(),
            education=Education(),
            projects=Projects(),
        )
