"""Document text extraction: pdfplumber -> pypdf for PDFs, direct read for text."""

from __future__ import annotations

import asyncio
import unicodedata
from pathlib import Path

import structlog

from cv_profile_core.exceptions import EncryptedPDFError, InvalidFileError, ScannedPDFError

logger = structlog.get_logger()

MAX_DOCUMENT_SIZE_MB = 10
MIN_PDF_TEXT_CHARS = 50
TEXT_SUFFIXES = frozenset({".txt", ".md"})
SUPPORTED_SUFFIXES = TEXT_SUFFIXES | {".pdf"}


class DocumentParser:
    """Extract text from a CV document with fallback strategies for PDFs."""

    def __init__(self, max_size_mb: int = MAX_DOCUMENT_SIZE_MB) -> None:
        """Initialize with the size above which a warning is logged."""
        self.max_size_mb = max_size_mb

    async def extract_text(self, path: Path) -> str:
        """Extract NFC-normalized text from a PDF or plain-text file.

        PDFs try pdfplumber first, then pypdf.

        Raises:
            InvalidFileError: If the file is missing or of an unsupported type.
            EncryptedPDFError: If the PDF is password-protected.
            ScannedPDFError: If the PDF has no text layer.
        """
        self._validate_file(path)
        self._check_size(path)

        if path.suffix.lower() in TEXT_SUFFIXES:
            text = await asyncio.to_thread(path.read_text, encoding="utf-8", errors="replace")
            return _normalize(text)

        text = await self._try_pdfplumber(path)
        if text and len(text.strip()) > MIN_PDF_TEXT_CHARS:
            return _normalize(text)

        text = await self._try_pypdf(path)
        if text and len(text.strip()) > MIN_PDF_TEXT_CHARS:
            return _normalize(text)

        msg = f"PDF appears to be scanned/image-only with no extractable text: {path}"
        raise ScannedPDFError(msg)

    def _validate_file(self, path: Path) -> None:
        """Validate that the file exists and has a supported suffix."""
        if not path.is_file():
            msg = f"File not found: {path}"
            raise InvalidFileError(msg)
        if path.suffix.lower() not in SUPPORTED_SUFFIXES:
            msg = f"Expected PDF or text file, got: {path.suffix or '(no suffix)'}"
            raise InvalidFileError(msg)

    def _check_size(self, path: Path) -> None:
        """Warn if the document is larger than max_size_mb."""
        size_mb = path.stat().st_size / (1024 * 1024)
        if size_mb > self.max_size_mb:
            logger.warning("large_document", path=str(path), size_mb=round(size_mb, 1))

    async def _try_pdfplumber(self, path: Path) -> str | None:
        """Try extracting text with pdfplumber."""
        try:
            import pdfplumber

            def _extract() -> str:
                pages_text: list[str] = []
                with pdfplumber.open(str(path)) as pdf:
                    for page in pdf.pages:
                        text = page.extract_text()
                        if text:
                            pages_text.append(text)
                return "\n\n".join(pages_text)

            return await asyncio.to_thread(_extract)
        except Exception as e:
            if "password" in str(e).lower() or "encrypted" in str(e).lower():
                msg = f"PDF is password-protected: {path}"
                raise EncryptedPDFError(msg) from e
            logger.debug("pdfplumber_fallback", error=str(e))
            return None

    async def _try_pypdf(self, path: Path) -> str | None:
        """Try extracting text with pypdf (lightweight fallback)."""
        try:
            from pypdf import PdfReader

            def _extract() -> str:
                reader = PdfReader(str(path))
                if reader.is_encrypted:
                    msg = f"PDF is password-protected: {path}"
                    raise EncryptedPDFError(msg)
                pages_text: list[str] = []
                for page in reader.pages:
                    text = page.extract_text()
                    if text:
                        pages_text.append(text)
                return "\n\n".join(pages_text)

            return await asyncio.to_thread(_extract)
        except EncryptedPDFError:
            raise
        except Exception as e:
            logger.debug("pypdf_fallback", error=str(e))
            return None


def _normalize(text: str) -> str:
    """Compose accented characters so keyword matching sees 'é', not 'e' + accent."""
    return unicodedata.normalize("NFC", text)
