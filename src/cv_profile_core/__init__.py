"""Core domain types for cv-profile-server."""
