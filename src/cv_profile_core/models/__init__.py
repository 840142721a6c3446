"""Domain models for cv-profile-server."""

from cv_profile_core.models.catalog import (
    PromptArgument,
    PromptDescriptor,
    PromptKind,
    PromptMessage,
    PromptResult,
    ResourceContents,
    ResourceDescriptor,
    ResourceKind,
)
from cv_profile_core.models.profile import (
    CVProfile,
    Education,
    Experience,
    PersonalInfo,
    Projects,
    TechnicalSkills,
)

__all__ = [
    "CVProfile",
    "Education",
    "Experience",
    "PersonalInfo",
    "Projects",
    "PromptArgument",
    "PromptDescriptor",
    "PromptKind",
    "PromptMessage",
    "PromptResult",
    "ResourceContents",
    "ResourceDescriptor",
    "ResourceKind",
    "TechnicalSkills",
]
