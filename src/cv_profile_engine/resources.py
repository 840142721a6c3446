"""Render a resource kind from a profile."""

from __future__ import annotations

from typing import assert_never

from cv_profile_core.constants import MIME_JSON, MIME_TEXT
from cv_profile_core.models.catalog import ResourceContents, ResourceKind
from cv_profile_core.models.profile import CVProfile


def compose_resource(kind: ResourceKind, profile: CVProfile) -> ResourceContents:
    """Raw text verbatim, or the whole profile as camelCase JSON."""
    match kind:
        case ResourceKind.RAW_TEXT:
            return ResourceContents(uri=kind, mime_type=MIME_TEXT, text=profile.raw_text)
        case ResourceKind.STRUCTURED_DATA:
            return ResourceContents(uri=kind, mime_type=MIME_JSON, text=profile.to_json())
        case _:
            assert_never(kind)
