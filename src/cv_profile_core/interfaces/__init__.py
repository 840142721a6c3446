"""Public interface re-exports for cv_profile_core."""

from cv_profile_core.interfaces.decoder import DocumentDecoder

__all__ = ["DocumentDecoder"]
