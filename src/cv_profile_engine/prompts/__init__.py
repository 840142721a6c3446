"""Prompt templates and composition."""

from cv_profile_engine.prompts.composer import compose_prompt

__all__ = ["compose_prompt"]
