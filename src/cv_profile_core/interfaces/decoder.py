"""Abstract document decoder interface."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path


@runtime_checkable
class DocumentDecoder(Protocol):
    """Turns a source document into plain text."""

    async def extract_text(self, path: Path) -> str:
        """Return the document text, or raise a DocumentError subclass."""
        ...
