"""Static prompt and resource descriptors."""

from __future__ import annotations

from cv_profile_core.constants import MIME_JSON, MIME_TEXT
from cv_profile_core.models.catalog import (
    PromptArgument,
    PromptDescriptor,
    PromptKind,
    ResourceDescriptor,
    ResourceKind,
)
from cv_profile_engine.prompts.composer import (
    ARG_JOB_DESCRIPTION,
    ARG_TARGET_COMPANY,
    ARG_TARGET_ROLE,
)

PROMPT_CATALOG: dict[PromptKind, PromptDescriptor] = {
    PromptKind.PERSONAL_INFO: PromptDescriptor(
        name=PromptKind.PERSONAL_INFO,
        description="Personal information extracted from the CV",
    ),
    PromptKind.TECHNICAL_SKILLS: PromptDescriptor(
        name=PromptKind.TECHNICAL_SKILLS,
        description="Technical skills and technologies mastered",
    ),
    PromptKind.EXPERIENCE: PromptDescriptor(
        name=PromptKind.EXPERIENCE,
        description="Professional experience periods and computed years of experience",
    ),
    PromptKind.FULL_PROFILE: PromptDescriptor(
        name=PromptKind.FULL_PROFILE,
        description="Complete professional profile summary",
    ),
    PromptKind.COVER_LETTER: PromptDescriptor(
        name=PromptKind.COVER_LETTER,
        description="Personalized cover letter",
        arguments=[
            PromptArgument(name=ARG_TARGET_ROLE, description="The targeted role", required=True),
            PromptArgument(name=ARG_TARGET_COMPANY, description="The company name", required=True),
        ],
    ),
    PromptKind.COMPATIBILITY_ANALYSIS: PromptDescriptor(
        name=PromptKind.COMPATIBILITY_ANALYSIS,
        description="Compatibility analysis against a job offer",
        arguments=[
            PromptArgument(
                name=ARG_JOB_DESCRIPTION, description="The job offer description", required=True
            ),
        ],
    ),
}

RESOURCE_CATALOG: dict[ResourceKind, ResourceDescriptor] = {
    ResourceKind.RAW_TEXT: ResourceDescriptor(
        uri=ResourceKind.RAW_TEXT,
        name="CV raw text",
        description="Full text content extracted from the document",
        mime_type=MIME_TEXT,
    ),
    ResourceKind.STRUCTURED_DATA: ResourceDescriptor(
        uri=ResourceKind.STRUCTURED_DATA,
        name="CV structured data",
        description="Data extracted from the CV and organized by section",
        mime_type=MIME_JSON,
    ),
}
