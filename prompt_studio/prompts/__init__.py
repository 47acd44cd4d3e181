"""Seed data and prompt text for the engine and the enhancement adapter."""

from prompt_studio.prompts.catalog import TEMPLATE_CATALOG
from prompt_studio.prompts.enhancement import (
    CATEGORY_KEYWORDS,
    build_system_prompt,
    build_user_prompt,
)

__all__ = [
    "TEMPLATE_CATALOG",
    "CATEGORY_KEYWORDS",
    "build_system_prompt",
    "build_user_prompt",
]
