"""Utility modules for Prompt Studio."""

from prompt_studio.utils.cache import ResultCache
from prompt_studio.utils.config import Settings, get_settings
from prompt_studio.utils.logger import PipelineLogger, get_logger, setup_logging
from prompt_studio.utils.metrics import PhaseTimer, TokenUsage, UsageMetrics
from prompt_studio.utils.resilience import (
    CircuitBreaker,
    CircuitBreakerConfig,
    CircuitOpenError,
    RetryConfig,
    with_retry,
)
from prompt_studio.utils.sanitization import (
    InputTooLongError,
    InputTooShortError,
    SanitizationError,
    cache_key,
    normalize_prompt,
    validate_prompt_length,
)
from prompt_studio.utils.storage import InMemoryUsageStore, JsonUsageStore, UsageStore

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Logging
    "get_logger",
    "setup_logging",
    "PipelineLogger",
    # Resilience
    "RetryConfig",
    "CircuitBreaker",
    "CircuitBreakerConfig",
    "with_retry",
    "CircuitOpenError",
    # Sanitization
    "SanitizationError",
    "InputTooShortError",
    "InputTooLongError",
    "normalize_prompt",
    "validate_prompt_length",
    "cache_key",
    # Metrics
    "TokenUsage",
    "UsageMetrics",
    "PhaseTimer",
    # Storage
    "ResultCache",
    "UsageStore",
    "InMemoryUsageStore",
    "JsonUsageStore",
]
