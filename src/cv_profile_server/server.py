"""Expose CVProfileService over the Model Context Protocol (stdio)."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import mcp.types as types
import structlog
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server

from cv_profile_engine.observability import bind_request_context, clear_request_context
from cv_profile_engine.service import CVProfileService

if TYPE_CHECKING:
    from pydantic import AnyUrl

    from cv_profile_core.config.settings import Settings
    from cv_profile_core.models.catalog import (
        PromptDescriptor,
        PromptResult,
        ResourceDescriptor,
    )

logger = structlog.get_logger()


def to_mcp_prompt(descriptor: PromptDescriptor) -> types.Prompt:
    """Convert a catalog descriptor to the MCP wire type."""
    return types.Prompt(
        name=str(descriptor.name),
        description=descriptor.description,
        arguments=[
            types.PromptArgument(name=a.name, description=a.description, required=a.required)
            for a in descriptor.arguments
        ],
    )


def to_mcp_resource(descriptor: ResourceDescriptor) -> types.Resource:
    """Convert a catalog descriptor to the MCP wire type."""
    return types.Resource(
        uri=str(descriptor.uri),  # type: ignore[arg-type]
        name=descriptor.name,
        description=descriptor.description,
        mimeType=descriptor.mime_type,
    )


def to_mcp_prompt_result(result: PromptResult) -> types.GetPromptResult:
    """Convert a rendered prompt to the MCP wire type."""
    return types.GetPromptResult(
        description=result.description,
        messages=[
            types.PromptMessage(
                role=m.role,
                content=types.TextContent(type="text", text=m.text),
            )
            for m in result.messages
        ],
    )


def build_server(service: CVProfileService) -> Server:
    """Register prompt and resource handlers backed by service.

    RequestError raised by the service propagates so the transport answers
    with a protocol error instead of message content.
    """
    server: Server = Server(service.settings.server_name, version=service.settings.server_version)

    @server.list_prompts()
    async def list_prompts() -> list[types.Prompt]:
        return [to_mcp_prompt(d) for d in service.list_prompts()]

    @server.get_prompt()
    async def get_prompt(name: str, arguments: dict[str, str] | None) -> types.GetPromptResult:
        bind_request_context(name)
        try:
            result = await service.get_prompt(name, arguments)
        finally:
            clear_request_context()
        return to_mcp_prompt_result(result)

    @server.list_resources()
    async def list_resources() -> list[types.Resource]:
        return [to_mcp_resource(d) for d in service.list_resources()]

    @server.read_resource()
    async def read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
        bind_request_context(str(uri))
        try:
            contents = await service.read_resource(str(uri))
        finally:
            clear_request_context()
        return [ReadResourceContents(content=contents.text, mime_type=contents.mime_type)]

    return server


async def serve(settings: Settings) -> None:
    """Run the MCP server on stdio until the client disconnects.

    Extraction starts in the background right away; requests that arrive
    first wait on the same in-flight extraction.
    """
    service = CVProfileService(settings)
    server = build_server(service)
    logger.info("server_start", name=settings.server_name, cv_path=str(settings.pdf_path))

    preload = asyncio.create_task(service.ensure_profile())
    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        if not preload.done():
            preload.cancel()
        logger.info("server_stop", name=settings.server_name)
