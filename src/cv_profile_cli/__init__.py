"""Command-line entry point for cv-profile-server."""
