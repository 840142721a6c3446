"""Model Context Protocol adapter for cv-profile-server."""

from cv_profile_server.server import build_server, serve

__all__ = ["build_server", "serve"]
