"""Request-facing facade: list/get prompts, list/read resources."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

import structlog

from cv_profile_core.exceptions import UnknownPromptError, UnknownResourceError
from cv_profile_core.models.catalog import (
    PromptDescriptor,
    PromptKind,
    PromptMessage,
    PromptResult,
    ResourceContents,
    ResourceDescriptor,
    ResourceKind,
)
from cv_profile_engine.aggregator import ProfileAggregator
from cv_profile_engine.catalog import PROMPT_CATALOG, RESOURCE_CATALOG
from cv_profile_engine.prompts.composer import compose_prompt
from cv_profile_engine.resources import compose_resource

if TYPE_CHECKING:
    from cv_profile_core.config.settings import Settings
    from cv_profile_core.interfaces.decoder import DocumentDecoder
    from cv_profile_core.models.profile import CVProfile

logger = structlog.get_logger()


class CVProfileService:
    """Expose the profile as prompts and resources.

    Shared by every entry adapter (MCP server, CLI). Unknown prompt names
    and resource URIs raise RequestError subclasses.
    """

    def __init__(
        self,
        settings: Settings,
        aggregator: ProfileAggregator | None = None,
        decoder: DocumentDecoder | None = None,
    ) -> None:
        """Initialize with settings and optional collaborators."""
        self.settings = settings
        self.aggregator = aggregator or ProfileAggregator(settings, decoder=decoder)

    def list_prompts(self) -> list[PromptDescriptor]:
        return list(PROMPT_CATALOG.values())

    def list_resources(self) -> list[ResourceDescriptor]:
        return list(RESOURCE_CATALOG.values())

    async def ensure_profile(self) -> CVProfile:
        """Extract the profile if needed and return it."""
        return await self.aggregator.ensure_extracted()

    async def get_prompt(
        self, name: str, arguments: Mapping[str, str] | None = None
    ) -> PromptResult:
        """Render the named prompt against the profile.

        Raises:
            UnknownPromptError: If name is not in the catalog.
        """
        kind = parse_prompt_kind(name)
        logger.info("prompt_requested", prompt=str(kind), arguments=sorted(arguments or {}))
        profile = await self.ensure_profile()
        text = compose_prompt(kind, profile, arguments)
        return PromptResult(
            name=kind,
            description=PROMPT_CATALOG[kind].description,
            messages=[PromptMessage(role="user", text=text)],
        )

    async def read_resource(self, uri: str) -> ResourceContents:
        """Render the resource at uri.

        Raises:
            UnknownResourceError: If uri is not in the catalog.
        """
        kind = parse_resource_kind(uri)
        logger.info("resource_requested", uri=str(kind))
        profile = await self.ensure_profile()
        return compose_resource(kind, profile)


def parse_prompt_kind(name: str) -> PromptKind:
    """Map a client-supplied name onto a PromptKind."""
    try:
        return PromptKind(name)
    except ValueError:
        logger.warning("unknown_prompt", prompt=name)
        msg = f"Unknown prompt: {name!r}"
        raise UnknownPromptError(msg) from None


def parse_resource_kind(uri: str) -> ResourceKind:
    """Map a client-supplied URI onto a ResourceKind."""
    try:
        return ResourceKind(uri)
    except ValueError:
        logger.warning("unknown_resource", uri=uri)
        msg = f"Unknown resource: {uri!r}"
        raise UnknownResourceError(msg) from None
