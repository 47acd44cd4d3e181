"""Input normalization and length validation for raw prompts."""

import re
from dataclasses import dataclass
from typing import Optional

from prompt_studio.utils.logger import get_logger

logger = get_logger()

MIN_PROMPT_LENGTH = 2  # characters, after trimming
MAX_PROMPT_LENGTH = 5000  # characters

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_WHITESPACE = re.compile(r"\s+")


class SanitizationError(Exception):
    """Raised when a prompt cannot be accepted."""

    pass


class InputTooShortError(SanitizationError):
    """Raised when the trimmed prompt is shorter than the minimum length."""

    def __init__(self, length: int, min_length: int = MIN_PROMPT_LENGTH):
        super().__init__(
            f"Prompt too short to transform ({length} characters, minimum {min_length})"
        )
        self.length = length
        self.min_length = min_length


class InputTooLongError(SanitizationError):
    """Raised when the prompt exceeds the maximum length."""

    def __init__(self, length: int, max_length: int = MAX_PROMPT_LENGTH):
        super().__init__(
            f"Prompt too long to enhance ({length} characters, maximum {max_length})"
        )
        self.length = length
        self.max_length = max_length


@dataclass
class NormalizedPrompt:
    """A trimmed prompt with metadata about what changed."""

    original: str
    text: str
    was_modified: bool


def normalize_prompt(text: str) -> NormalizedPrompt:
    """Trim whitespace and drop control characters (newlines are kept).

    Args:
        text: The raw prompt.

    Returns:
        NormalizedPrompt with the cleaned text.
    """
    cleaned = _CONTROL_CHARS.sub("", text or "").strip()
    return NormalizedPrompt(
        original=text,
        text=cleaned,
        was_modified=cleaned != text,
    )


def validate_prompt_length(
    text: str,
    min_length: int = MIN_PROMPT_LENGTH,
    max_length: Optional[int] = None,
) -> str:
    """Return the trimmed prompt, raising when it is out of bounds.

    Args:
        text: The raw prompt.
        min_length: Minimum trimmed length.
        max_length: Optional maximum trimmed length.

    Returns:
        The trimmed prompt.

    Raises:
        InputTooShortError: If the trimmed prompt is too short.
        InputTooLongError: If max_length is given and exceeded.
    """
    trimmed = (text or "").strip()
    if len(trimmed) < min_length:
        raise InputTooShortError(len(trimmed), min_length)
    if max_length is not None and len(trimmed) > max_length:
        logger.warning(f"Rejected prompt of {len(trimmed)} characters")
        raise InputTooLongError(len(trimmed), max_length)
    return trimmed


def cache_key(text: str) -> str:
    """Build the normalized cache key for a prompt."""
    return "prompt_" + _WHITESPACE.sub("_", text.lower().strip())
