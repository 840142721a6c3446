"""Profile aggregator: runs the extractors once and caches the profile."""

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING

import structlog

from cv_profile_core.exceptions import CVProfileError
from cv_profile_core.models.profile import CVProfile
from cv_profile_engine.extractors import (
    extract_education,
    extract_experience,
    extract_personal_info,
    extract_projects,
    extract_technical_skills,
)
from cv_profile_engine.tools.document_parser import DocumentParser

if TYPE_CHECKING:
    from cv_profile_core.config.settings import Settings
    from cv_profile_core.interfaces.decoder import DocumentDecoder

logger = structlog.get_logger()


def build_profile(text: str) -> CVProfile:
    """Run the five extractors over text and stamp the result."""
    return CVProfile(
        raw_text=text,
        personal_info=extract_personal_info(text),
        technical_skills=extract_technical_skills(text),
        experience=extract_experience(text),
        education=extract_education(text),
        projects=extract_projects(text),
    )


class ProfileAggregator:
    """Owns the one CVProfile of this process.

    The first ensure_extracted() call starts a single extraction task; every
    caller, concurrent or later, awaits that same task. Decoding failures
    are logged and replaced by CVProfile.empty().
    """

    def __init__(self, settings: Settings, decoder: DocumentDecoder | None = None) -> None:
        """Initialize with settings and an optional decoder override."""
        self.settings = settings
        self._decoder = decoder or DocumentParser(max_size_mb=settings.max_document_size_mb)
        self._profile: CVProfile | None = None
        self._task: asyncio.Task[CVProfile] | None = None

    @property
    def profile(self) -> CVProfile | None:
        """The cached profile, or None before extraction completes."""
        return self._profile

    @property
    def is_extracted(self) -> bool:
        return self._profile is not None

    async def ensure_extracted(self) -> CVProfile:
        """Return the cached profile, extracting it on first use."""
        if self._profile is not None:
            return self._profile
        if self._task is None:
            self._task = asyncio.create_task(self._extract())
        # cancelling one waiter leaves the shared task running
        return await asyncio.shield(self._task)

    async def _extract(self) -> CVProfile:
        path = self.settings.pdf_path
        logger.info("cv_extraction_start", path=str(path))
        start = time.monotonic()

        try:
            text = await asyncio.wait_for(
                self._decoder.extract_text(path),
                timeout=self.settings.extraction_timeout_seconds,
            )
        except (CVProfileError, OSError, TimeoutError) as e:
            logger.error(
                "cv_extraction_failed",
                path=str(path),
                error=str(e) or type(e).__name__,
                error_type=type(e).__name__,
            )
            profile = CVProfile.empty()
        else:
            profile = build_profile(text)
            logger.info(
                "cv_extraction_complete",
                path=str(path),
                chars=len(text),
                skills_count=profile.technical_skills.skills_count,
                experience_years=profile.experience.experience_years,
                duration_seconds=round(time.monotonic() - start, 2),
            )

        self._profile = profile
        return profile
