"""Tests for the document parser tool."""

from __future__ import annotations

import unicodedata
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from cv_profile_core.exceptions import EncryptedPDFError, InvalidFileError, ScannedPDFError
from cv_profile_core.interfaces.decoder import DocumentDecoder
from cv_profile_engine.tools.document_parser import DocumentParser


def _mock_pdfplumber(*page_texts: str | None) -> MagicMock:
    """Build a pdfplumber.open() return value with the given page texts."""
    mock_pdf = MagicMock()
    pages = []
    for text in page_texts:
        page = MagicMock()
        page.extract_text.return_value = text
        pages.append(page)
    mock_pdf.pages = pages
    mock_pdf.__enter__ = MagicMock(return_value=mock_pdf)
    mock_pdf.__exit__ = MagicMock(return_value=False)
    return mock_pdf


@pytest.mark.unit
class TestDocumentParser:
    """Test DocumentParser validation and fallback chain."""

    def test_satisfies_decoder_protocol(self) -> None:
        assert isinstance(DocumentParser(), DocumentDecoder)

    @pytest.mark.asyncio
    async def test_nonexistent_file_raises(self) -> None:
        """Non-existent file raises InvalidFileError."""
        parser = DocumentParser()
        with pytest.raises(InvalidFileError, match="File not found"):
            await parser.extract_text(Path("/nonexistent/resume.pdf"))

    @pytest.mark.asyncio
    async def test_directory_raises(self, tmp_path: Path) -> None:
        """A directory is not a document."""
        with pytest.raises(InvalidFileError, match="File not found"):
            await DocumentParser().extract_text(tmp_path)

    @pytest.mark.asyncio
    async def test_unsupported_extension_raises(self, tmp_path: Path) -> None:
        """Unsupported suffixes raise InvalidFileError."""
        path = tmp_path / "resume.docx"
        path.write_bytes(b"not a pdf")
        with pytest.raises(InvalidFileError, match="Expected PDF or text"):
            await DocumentParser().extract_text(path)

    @pytest.mark.asyncio
    async def test_text_file_read_directly(self, tmp_path: Path) -> None:
        """Plain-text CVs skip the PDF backends."""
        path = tmp_path / "cv.txt"
        path.write_text("Jane Doe\nPython", encoding="utf-8")
        with patch("pdfplumber.open") as mock_open:
            result = await DocumentParser().extract_text(path)
        assert result == "Jane Doe\nPython"
        mock_open.assert_not_called()

    @pytest.mark.asyncio
    async def test_text_is_nfc_normalized(self, tmp_path: Path) -> None:
        """Decomposed accents are composed."""
        path = tmp_path / "cv.md"
        path.write_text(unicodedata.normalize("NFD", "Université"), encoding="utf-8")
        result = await DocumentParser().extract_text(path)
        assert result == unicodedata.normalize("NFC", "Université")

    def test_check_size_warns_for_large_file(self, tmp_path: Path) -> None:
        """_check_size warns above max_size_mb."""
        parser = DocumentParser(max_size_mb=1)
        large_pdf = tmp_path / "large.pdf"
        large_pdf.write_bytes(b"0" * (2 * 1024 * 1024))
        with patch("cv_profile_engine.tools.document_parser.logger") as mock_logger:
            parser._check_size(large_pdf)
            mock_logger.warning.assert_called_once()

    def test_check_size_no_warning_for_small_file(self, tmp_path: Path) -> None:
        """_check_size does not warn for small documents."""
        parser = DocumentParser()
        small_pdf = tmp_path / "small.pdf"
        small_pdf.write_bytes(b"0" * 100)
        with patch("cv_profile_engine.tools.document_parser.logger") as mock_logger:
            parser._check_size(small_pdf)
            mock_logger.warning.assert_not_called()

    @pytest.mark.asyncio
    async def test_pdfplumber_success(self, tmp_path: Path) -> None:
        """extract_text returns pdfplumber result when text > 50 chars."""
        pdf_path = tmp_path / "test.pdf"
        pdf_path.write_bytes(b"%PDF-1.4 fake")
        long_text = "A" * 60

        with patch("pdfplumber.open", return_value=_mock_pdfplumber(long_text)):
            result = await DocumentParser().extract_text(pdf_path)

        assert result == long_text

    @pytest.mark.asyncio
    async def test_pdfplumber_short_text_falls_to_pypdf(self, tmp_path: Path) -> None:
        """extract_text falls to pypdf when pdfplumber returns short text."""
        pdf_path = tmp_path / "test.pdf"
        pdf_path.write_bytes(b"%PDF-1.4 fake")
        long_text = "B" * 60

        mock_reader = MagicMock()
        mock_reader.is_encrypted = False
        mock_pypdf_page = MagicMock()
        mock_pypdf_page.extract_text.return_value = long_text
        mock_reader.pages = [mock_pypdf_page]

        with (
            patch("pdfplumber.open", return_value=_mock_pdfplumber("short")),
            patch("pypdf.PdfReader", return_value=mock_reader),
        ):
            result = await DocumentParser().extract_text(pdf_path)

        assert result == long_text

    @pytest.mark.asyncio
    async def test_pdfplumber_encrypted_raises(self, tmp_path: Path) -> None:
        """Encrypted PDF in pdfplumber raises EncryptedPDFError."""
        pdf_path = tmp_path / "test.pdf"
        pdf_path.write_bytes(b"%PDF-1.4 fake")

        with patch("pdfplumber.open", side_effect=Exception("password required")):
            with pytest.raises(EncryptedPDFError, match="password-protected"):
                await DocumentParser()._try_pdfplumber(pdf_path)

    @pytest.mark.asyncio
    async def test_pdfplumber_generic_error_returns_none(self, tmp_path: Path) -> None:
        """Non-password pdfplumber error returns None for fallback."""
        pdf_path = tmp_path / "test.pdf"
        pdf_path.write_bytes(b"%PDF-1.4 fake")

        with patch("pdfplumber.open", side_effect=RuntimeError("corrupted")):
            result = await DocumentParser()._try_pdfplumber(pdf_path)

        assert result is None

    @pytest.mark.asyncio
    async def test_pypdf_encrypted_raises(self, tmp_path: Path) -> None:
        """Encrypted PDF in pypdf raises EncryptedPDFError."""
        pdf_path = tmp_path / "test.pdf"
        pdf_path.write_bytes(b"%PDF-1.4 fake")

        mock_reader = MagicMock()
        mock_reader.is_encrypted = True

        with patch("pypdf.PdfReader", return_value=mock_reader):
            with pytest.raises(EncryptedPDFError, match="password-protected"):
                await DocumentParser()._try_pypdf(pdf_path)

    @pytest.mark.asyncio
    async def test_pypdf_multi_page_extraction(self, tmp_path: Path) -> None:
        """pypdf joins pages with blank lines."""
        pdf_path = tmp_path / "test.pdf"
        pdf_path.write_bytes(b"%PDF-1.4 fake")

        mock_reader = MagicMock()
        mock_reader.is_encrypted = False
        page1 = MagicMock()
        page1.extract_text.return_value = "A" * 30
        page2 = MagicMock()
        page2.extract_text.return_value = "B" * 30
        mock_reader.pages = [page1, page2]

        with patch("pypdf.PdfReader", return_value=mock_reader):
            result = await DocumentParser()._try_pypdf(pdf_path)

        assert result == ("A" * 30) + "\n\n" + ("B" * 30)

    @pytest.mark.asyncio
    async def test_both_extractors_fail_raises_scanned(self, tmp_path: Path) -> None:
        """ScannedPDFError raised when both extractors return empty text."""
        parser = DocumentParser()
        pdf_path = tmp_path / "test.pdf"
        pdf_path.write_bytes(b"%PDF-1.4 fake")

        with (
            patch.object(parser, "_try_pdfplumber", new_callable=AsyncMock, return_value=None),
            patch.object(parser, "_try_pypdf", new_callable=AsyncMock, return_value=None),
        ):
            with pytest.raises(ScannedPDFError):
                await parser.extract_text(pdf_path)

    @pytest.mark.asyncio
    async def test_pdfplumber_page_with_none_text(self, tmp_path: Path) -> None:
        """pdfplumber pages that return None text are skipped."""
        pdf_path = tmp_path / "test.pdf"
        pdf_path.write_bytes(b"%PDF-1.4 fake")

        with patch("pdfplumber.open", return_value=_mock_pdfplumber(None, "C" * 60)):
            result = await DocumentParser()._try_pdfplumber(pdf_path)

        assert result == "C" * 60
