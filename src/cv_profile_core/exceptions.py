"""Custom exception hierarchy for cv-profile-server."""

from __future__ import annotations


class CVProfileError(Exception):
    """Base exception for all cv-profile-server errors."""


class DocumentError(CVProfileError):
    """Raised when the source document cannot be decoded to text."""


class InvalidFileError(DocumentError):
    """Raised when the input file is missing or of an unsupported type."""


class EncryptedPDFError(DocumentError):
    """Raised when a PDF is password-protected."""


class ScannedPDFError(DocumentError):
    """Raised when a PDF has no text layer (scanned/image-only)."""


class RequestError(CVProfileError):
    """Raised when a caller asks for something the server does not expose."""


class UnknownPromptError(RequestError):
    """Raised when a prompt name is not part of the catalog."""


class UnknownResourceError(RequestError):
    """Raised when a resource URI is not part of the catalog."""
