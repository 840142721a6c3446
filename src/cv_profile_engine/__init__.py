"""Extraction and composition engine for cv-profile-server."""
