"""Tests for input sanitization and caching utilities."""

import pytest

from prompt_studio.utils.cache import ResultCache
from prompt_studio.utils.sanitization import (
    normalize_prompt,
    validate_prompt_length,
    cache_key,
    InputTooLongError,
    InputTooShortError,
    NormalizedPrompt,
    SanitizationError,
    MAX_PROMPT_LENGTH,
    MIN_PROMPT_LENGTH,
)


class TestNormalizePrompt:
    """Tests for normalize_prompt function."""

    def test_returns_normalized_prompt(self):
        """Test clean input is unchanged."""
        result = normalize_prompt("Hello world")

        assert isinstance(result, NormalizedPrompt)
        assert result.text == "Hello world"
        assert result.was_modified is False

    def test_strips_whitespace(self):
        """Test whitespace is stripped."""
        result = normalize_prompt("  Hello world  ")

        assert result.text == "Hello world"
        assert result.was_modified is True

    def test_removes_control_characters(self):
        """Test control characters are removed but newlines kept."""
        result = normalize_prompt("Hello\x00 wor\x07ld\nnext line")

        assert result.text == "Hello world\nnext line"

    def test_none_is_empty(self):
        """Test None normalizes to an empty string."""
        assert normalize_prompt(None).text == ""


class TestValidatePromptLength:
    """Tests for validate_prompt_length function."""

    def test_returns_trimmed(self):
        """Test the trimmed prompt is returned."""
        assert validate_prompt_length("  ab  ") == "ab"

    def test_too_short(self):
        """Test one character is rejected."""
        with pytest.raises(InputTooShortError) as exc_info:
            validate_prompt_length(" a ")

        assert exc_info.value.length == 1
        assert exc_info.value.min_length == MIN_PROMPT_LENGTH
        assert isinstance(exc_info.value, SanitizationError)

    def test_empty(self):
        """Test empty and blank input is rejected."""
        with pytest.raises(InputTooShortError):
            validate_prompt_length("")
        with pytest.raises(InputTooShortError):
            validate_prompt_length("   ")

    def test_too_long(self):
        """Test the maximum applies only when given."""
        text = "x" * (MAX_PROMPT_LENGTH + 1)

        assert validate_prompt_length(text) == text
        with pytest.raises(InputTooLongError) as exc_info:
            validate_prompt_length(text, max_length=MAX_PROMPT_LENGTH)
        assert exc_info.value.length == MAX_PROMPT_LENGTH + 1


class TestCacheKey:
    """Tests for cache_key function."""

    def test_normalizes_case_and_whitespace(self):
        """Test case and whitespace runs do not change the key."""
        assert cache_key("Write  a\tPoem ") == cache_key("write a poem")
        assert cache_key("write a poem") == "prompt_write_a_poem"

    def test_different_prompts_differ(self):
        """Test different text gives different keys."""
        assert cache_key("write a poem") != cache_key("write a song")


class TestResultCache:
    """Tests for ResultCache."""

    def test_get_and_set(self):
        """Test a stored value is returned."""
        cache = ResultCache(ttl_seconds=60)
        cache.set("k", "v")

        assert cache.get("k") == "v"
        assert cache.get("missing") is None
        assert len(cache) == 1

    def test_entries_expire(self):
        """Test entries are evicted once the TTL passes."""
        now = [100.0]
        cache = ResultCache(ttl_seconds=60, clock=lambda: now[0])
        cache.set("k", "v")

        now[0] = 159.0
        assert cache.get("k") == "v"
        now[0] = 160.0
        assert cache.get("k") is None
        assert len(cache) == 0

    def test_last_write_wins(self):
        """Test overwriting a key replaces the value."""
        cache = ResultCache()
        cache.set("k", 1)
        cache.set("k", 2)

        assert cache.get("k") == 2

    def test_set_sweeps_expired_entries(self):
        """Test writing a key drops every expired entry, not just the one read."""
        now = [0.0]
        cache = ResultCache(ttl_seconds=1, clock=lambda: now[0])
        for i in range(1000):
            cache.set(f"key-{i}", i)
        assert len(cache) == 1000

        now[0] = 100.0
        cache.set("fresh", "v")

        assert len(cache) == 1
        assert cache.get("fresh") == "v"

    def test_clear(self):
        """Test clear drops every entry."""
        cache = ResultCache()
        cache.set("a", 1)
        cache.clear()

        assert len(cache) == 0
