"""Shared constants: sentinels and extraction vocabularies."""

from __future__ import annotations

# Sentinels interpolated in place of absent values
NOT_FOUND = "not found"
NOT_AVAILABLE = "not available"
UNSPECIFIED = "unspecified"
NONE_PROVIDED = "none provided"
NONE_IDENTIFIED = "none identified"

# Empty profile substituted when the document cannot be decoded
UNAVAILABLE_RAW_TEXT = "CV not available - read error"
UNAVAILABLE_PERSONAL_SECTION = "Error reading the CV"

# Number of leading non-blank lines kept as the raw personal section
PERSONAL_SECTION_LINES = 5

# Technology vocabulary, in output order
SKILLS_KEYWORDS: tuple[str, ...] = (
    "JavaScript", "TypeScript", "Python", "Java", "C++", "C#", "Go", "Rust",
    "React", "Vue", "Angular", "Node.js", "Express", "Django", "Flask",
    "Docker", "Kubernetes", "AWS", "Azure", "GCP", "Git", "Linux",
    "MySQL", "PostgreSQL", "MongoDB", "Redis", "GraphQL", "REST API",
)

# Institution/degree terms (French and English)
EDUCATION_KEYWORDS: tuple[str, ...] = (
    "université", "école", "master", "licence", "bac", "diplôme",
    "university", "college", "degree", "bachelor", "formation",
)

PROJECT_KEYWORDS: tuple[str, ...] = ("projet", "project", "réalisation", "développement")

# Markers for an open-ended experience period ("2020 - present")
PRESENT_MARKERS: tuple[str, ...] = ("présent", "present", "aujourd'hui")

# Resource MIME types
MIME_TEXT = "text/plain"
MIME_JSON = "application/json"
