"""Base adapter for remote prompt enhancement."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from prompt_studio.prompts.enhancement import CATEGORY_KEYWORDS
from prompt_studio.utils.logger import get_logger
from prompt_studio.utils.metrics import TokenUsage
from prompt_studio.utils.resilience import RetryConfig


class PromptCategory(str, Enum):
    """Target AI system a prompt is enhanced for."""

    IMAGE_GENERATION = "image_generation"
    TEXT_AI = "text_ai"
    CODE_GENERATION = "code_generation"
    CREATIVE_WRITING = "creative_writing"
    ANALYSIS = "analysis"
    RESEARCH = "research"


class FailureKind(str, Enum):
    """Why a remote enhancement did not produce text."""

    NETWORK_ERROR = "network_error"
    AUTH_ERROR = "auth_error"
    MALFORMED_RESPONSE = "malformed_response"
    RATE_LIMITED = "rate_limited"


RETRYABLE_FAILURES = frozenset({FailureKind.NETWORK_ERROR, FailureKind.RATE_LIMITED})


class RemoteAdapterError(Exception):
    """Raised inside an adapter; converted to ``RemoteFailure`` at its boundary."""

    def __init__(self, kind: FailureKind, message: str = ""):
        super().__init__(message or kind.value)
        self.kind = kind
        self.message = message or kind.value

    @property
    def retryable(self) -> bool:
        return self.kind in RETRYABLE_FAILURES


@dataclass(frozen=True)
class RemoteSuccess:
    """Enhanced prompt text returned by the remote model."""

    text: str
    model: str
    usage: TokenUsage = field(default_factory=TokenUsage, compare=False)


@dataclass(frozen=True)
class RemoteFailure:
    """A remote call that did not produce usable text."""

    kind: FailureKind
    message: str = ""


RemoteCompletion = Union[RemoteSuccess, RemoteFailure]


def detect_category(text: str) -> PromptCategory:
    """Pick the target category by keyword; the first matching category wins.

    Args:
        text: The raw request.

    Returns:
        The detected PromptCategory, ``text_ai`` when nothing matches.
    """
    lowered = (text or "").lower()
    for category, keywords in CATEGORY_KEYWORDS.items():
        if any(keyword in lowered for keyword in keywords):
            return PromptCategory(category)
    return PromptCategory.TEXT_AI


class BaseEnhancementAdapter(ABC):
    """Abstract base class for remote enhancement adapters.

    Implementations never raise for remote failures: every outcome is
    returned as a ``RemoteCompletion``.
    """

    def __init__(
        self,
        model_name: str,
        api_key: Optional[str] = None,
        fallback_models: Optional[list[str]] = None,
        retry_config: Optional[RetryConfig] = None,
    ):
        """Initialize the adapter.

        Args:
            model_name: Name of the primary model to use.
            api_key: API key for authentication.
            fallback_models: Model names to try when the primary fails.
            retry_config: Configuration for retry behavior.
        """
        self.model_name = model_name
        self.api_key = api_key
        self.fallback_models = fallback_models or []
        self.retry_config = retry_config
        self.logger = get_logger()

    @property
    def is_configured(self) -> bool:
        """True when an API key is available."""
        return bool(self.api_key and self.api_key.strip())

    @abstractmethod
    async def enhance(self, prompt: str, category: PromptCategory) -> RemoteCompletion:
        """Enhance a prompt for a target category.

        Args:
            prompt: The prompt to enhance.
            category: The target AI system category.

        Returns:
            RemoteSuccess with the enhanced text, or RemoteFailure.
        """
        pass

    def get_model_chain(self) -> list[str]:
        """Get the full model chain including fallbacks.

        Returns:
            List of model names to try in order.
        """
        return [self.model_name] + self.fallback_models

    def _log_request(self, prompt: str, category: PromptCategory) -> None:
        """Log an API request."""
        self.logger.debug(
            f"[{self.__class__.__name__}] Request to {self.model_name}: "
            f"prompt_len={len(prompt)}, category={category.value}"
        )

    def _log_response(self, text: str, usage: Optional[TokenUsage] = None) -> None:
        """Log an API response with usage metrics."""
        usage_info = ""
        if usage:
            usage_info = (
                f", tokens_in={usage.input_tokens}, "
                f"tokens_out={usage.output_tokens}"
            )
        self.logger.debug(
            f"[{self.__class__.__name__}] Response from {usage.model if usage else self.model_name}: "
            f"response_len={len(text)}{usage_info}"
        )

    def _log_fallback(self, from_model: str, to_model: str, reason: str) -> None:
        """Log a fallback to another model."""
        self.logger.warning(
            f"[{self.__class__.__name__}] Falling back from {from_model} to "
            f"{to_model}: {reason}"
        )
