"""Remote enhancement adapters."""

from prompt_studio.adapters.base import (
    BaseEnhancementAdapter,
    FailureKind,
    PromptCategory,
    RemoteAdapterError,
    RemoteCompletion,
    RemoteFailure,
    RemoteSuccess,
    detect_category,
)
from prompt_studio.adapters.openrouter_adapter import OpenRouterAdapter, classify_error

__all__ = [
    "BaseEnhancementAdapter",
    "FailureKind",
    "OpenRouterAdapter",
    "PromptCategory",
    "RemoteAdapterError",
    "RemoteCompletion",
    "RemoteFailure",
    "RemoteSuccess",
    "classify_error",
    "detect_category",
]
