"""End-to-end service flow against a real CV file on disk."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pytest

from cv_profile_core.constants import NOT_AVAILABLE, UNAVAILABLE_RAW_TEXT
from cv_profile_engine.service import CVProfileService
from cv_profile_engine.tools.document_parser import DocumentParser
from tests.mocks.mock_settings import make_real_settings
from tests.mocks.mock_tools import load_resume_text


class CountingParser(DocumentParser):
    """Real parser that counts how often the CV is decoded."""

    def __init__(self) -> None:
        super().__init__()
        self.calls = 0

    async def extract_text(self, path: Path) -> str:
        self.calls += 1
        return await super().extract_text(path)


@pytest.fixture
def cv_path(tmp_path: Path) -> Path:
    path = tmp_path / "cv.txt"
    path.write_text(load_resume_text(), encoding="utf-8")
    return path


@pytest.mark.integration
class TestServicePipeline:
    """Full service flow with real Settings and DocumentParser."""

    @pytest.mark.asyncio
    async def test_prompts_and_resources_from_text_cv(self, cv_path: Path) -> None:
        service = CVProfileService(make_real_settings(cv_path))

        skills = await service.get_prompt("technical-skills")
        structured = await service.read_resource("cv://structured-data")
        raw = await service.read_resource("cv://raw-text")

        assert "- Number of identified technologies: 7" in skills.messages[0].text
        data = json.loads(structured.text)
        assert data["personalInfo"]["email"] == "jane.doe@example.com"
        assert data["experience"]["experiencePeriods"] == ["2015-2018", "2018 - present"]
        assert raw.text == load_resume_text()

    @pytest.mark.asyncio
    async def test_concurrent_requests_decode_once(self, cv_path: Path) -> None:
        parser = CountingParser()
        service = CVProfileService(make_real_settings(cv_path), decoder=parser)

        results = await asyncio.gather(
            service.get_prompt("personal-info"),
            service.get_prompt("experience"),
            service.read_resource("cv://raw-text"),
            service.ensure_profile(),
        )

        assert parser.calls == 1
        assert "Jane Doe" in results[0].messages[0].text

    @pytest.mark.asyncio
    async def test_missing_cv_serves_empty_profile(self, tmp_path: Path) -> None:
        service = CVProfileService(make_real_settings(tmp_path / "missing.pdf"))

        raw = await service.read_resource("cv://raw-text")
        prompt = await service.get_prompt("personal-info")

        assert raw.text == UNAVAILABLE_RAW_TEXT
        assert f"- Name: {NOT_AVAILABLE}" in prompt.messages[0].text

    @pytest.mark.asyncio
    async def test_environment_selects_cv(
        self, cv_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from cv_profile_core.config.settings import Settings

        monkeypatch.setenv("CV_PDF_PATH", str(cv_path))
        service = CVProfileService(Settings(_env_file=None))  # type: ignore[call-arg]

        profile = await service.ensure_profile()

        assert profile.personal_info.name == "Jane Doe"
