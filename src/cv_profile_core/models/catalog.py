"""Prompt and resource identifiers, descriptors and rendered outputs."""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, Field


class PromptKind(StrEnum):
    """The six prompts exposed to clients."""

    PERSONAL_INFO = "personal-info"
    TECHNICAL_SKILLS = "technical-skills"
    EXPERIENCE = "experience"
    FULL_PROFILE = "full-profile"
    COVER_LETTER = "cover-letter"
    COMPATIBILITY_ANALYSIS = "compatibility-analysis"


class ResourceKind(StrEnum):
    """The two resources exposed to clients, keyed by URI."""

    RAW_TEXT = "cv://raw-text"
    STRUCTURED_DATA = "cv://structured-data"


class PromptArgument(BaseModel):
    """A named argument a prompt accepts."""

    name: str = Field(description="Argument name")
    description: str = Field(description="What the caller should supply")
    required: bool = Field(default=False, description="Advertised as required to clients")


class PromptDescriptor(BaseModel):
    """Static description of a prompt."""

    name: PromptKind = Field(description="Prompt identifier")
    description: str = Field(description="What the prompt renders")
    arguments: list[PromptArgument] = Field(default_factory=list, description="Accepted arguments")


class ResourceDescriptor(BaseModel):
    """Static description of a resource."""

    uri: ResourceKind = Field(description="Resource URI")
    name: str = Field(description="Human-readable name")
    description: str = Field(description="What the resource contains")
    mime_type: str = Field(description="MIME type of the content")


class PromptMessage(BaseModel):
    """One message of a rendered prompt."""

    role: Literal["user", "assistant"] = Field(default="user", description="Message author")
    text: str = Field(description="Message body")


class PromptResult(BaseModel):
    """A rendered prompt ready to hand to a language-model client."""

    name: PromptKind = Field(description="Prompt identifier")
    description: str = Field(description="Prompt description")
    messages: list[PromptMessage] = Field(description="Rendered messages")


class ResourceContents(BaseModel):
    """Content of a read resource."""

    uri: ResourceKind = Field(description="Resource URI")
    mime_type: str = Field(description="MIME type of text")
    text: str = Field(description="Resource body")
