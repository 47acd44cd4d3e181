"""OpenRouter adapter for remote prompt enhancement."""

import asyncio
from dataclasses import replace
from typing import Optional

import httpx
import openai
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from prompt_studio.adapters.base import (
    BaseEnhancementAdapter,
    FailureKind,
    PromptCategory,
    RemoteAdapterError,
    RemoteCompletion,
    RemoteFailure,
    RemoteSuccess,
)
from prompt_studio.prompts.enhancement import build_system_prompt, build_user_prompt
from prompt_studio.utils.config import get_settings
from prompt_studio.utils.metrics import TokenUsage
from prompt_studio.utils.resilience import (
    CircuitBreaker,
    CircuitBreakerConfig,
    CircuitOpenError,
    RetryConfig,
    with_retry,
)


def classify_error(error: Exception) -> RemoteAdapterError:
    """Map a client exception onto a remote failure kind.

    Args:
        error: Exception raised while calling the remote model.

    Returns:
        RemoteAdapterError carrying the failure kind.
    """
    if isinstance(error, RemoteAdapterError):
        return error
    if isinstance(error, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return RemoteAdapterError(FailureKind.AUTH_ERROR, str(error))
    if isinstance(error, openai.RateLimitError):
        return RemoteAdapterError(FailureKind.RATE_LIMITED, str(error))
    if isinstance(error, (openai.APIConnectionError, openai.InternalServerError)):
        # APITimeoutError is a subclass of APIConnectionError
        return RemoteAdapterError(FailureKind.NETWORK_ERROR, str(error))
    if isinstance(error, openai.APIStatusError):
        kind = FailureKind.NETWORK_ERROR if error.status_code >= 500 else FailureKind.MALFORMED_RESPONSE
        return RemoteAdapterError(kind, str(error))
    if isinstance(error, (httpx.HTTPError, asyncio.TimeoutError, ConnectionError)):
        return RemoteAdapterError(FailureKind.NETWORK_ERROR, str(error) or error.__class__.__name__)
    return RemoteAdapterError(FailureKind.MALFORMED_RESPONSE, str(error) or error.__class__.__name__)


def _is_retryable(error: Exception) -> bool:
    return isinstance(error, RemoteAdapterError) and error.retryable


class OpenRouterAdapter(BaseEnhancementAdapter):
    """Enhances prompts through OpenRouter's OpenAI-compatible API."""

    # Shared circuit breaker for the OpenRouter API
    _circuit_breaker = CircuitBreaker(CircuitBreakerConfig(
        failure_threshold=5,
        recovery_timeout=60.0,
    ))

    def __init__(
        self,
        model_name: Optional[str] = None,
        api_key: Optional[str] = None,
        fallback_models: Optional[list[str]] = None,
        retry_config: Optional[RetryConfig] = None,
        circuit_breaker: Optional[CircuitBreaker] = None,
    ):
        """Initialize the OpenRouter adapter.

        Args:
            model_name: Model name (defaults to settings).
            api_key: API key (defaults to settings).
            fallback_models: Fallback model names (defaults to settings).
            retry_config: Retry behavior (defaults to settings).
            circuit_breaker: Breaker to use instead of the shared one.
        """
        settings = get_settings()

        if retry_config is None:
            retry_config = RetryConfig(
                max_attempts=settings.retry_max_attempts,
                base_delay=settings.retry_base_delay,
                max_delay=settings.retry_max_delay,
            )
        retry_config = replace(retry_config, should_retry=_is_retryable)

        super().__init__(
            model_name=model_name or settings.enhancement_model,
            api_key=api_key or settings.openrouter_api_key,
            fallback_models=(
                fallback_models if fallback_models is not None else settings.fallback_models()
            ),
            retry_config=retry_config,
        )
        self.base_url = settings.openrouter_base_url
        self.temperature = settings.enhancement_temperature
        self.max_tokens = settings.enhancement_max_tokens
        self.request_timeout = settings.enhancement_request_timeout
        self.circuit_breaker = circuit_breaker or self._circuit_breaker
        self._clients: dict[str, ChatOpenAI] = {}

    def _get_client(self, model: str) -> ChatOpenAI:
        """Get or create a ChatOpenAI client for a model."""
        if model not in self._clients:
            self._clients[model] = ChatOpenAI(
                model=model,
                api_key=self.api_key,
                base_url=self.base_url,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                timeout=self.request_timeout,
                max_retries=0,
                default_headers={"X-Title": "Prompt Studio"},
            )
        return self._clients[model]

    def _extract_usage(self, response, model: str) -> TokenUsage:
        """Extract token usage from an OpenRouter response."""
        usage = TokenUsage(model=model)

        metadata = getattr(response, "response_metadata", None) or {}
        if "token_usage" in metadata and metadata["token_usage"]:
            token_usage = metadata["token_usage"]
            usage.input_tokens = token_usage.get("prompt_tokens", 0) or 0
            usage.output_tokens = token_usage.get("completion_tokens", 0) or 0
        elif getattr(response, "usage_metadata", None):
            usage.input_tokens = response.usage_metadata.get("input_tokens", 0)
            usage.output_tokens = response.usage_metadata.get("output_tokens", 0)

        return usage

    async def _complete(self, model: str, system_prompt: str, user_prompt: str) -> tuple[str, TokenUsage]:
        """Call one model with retry, raising RemoteAdapterError on failure."""

        @with_retry(self.retry_config, self.circuit_breaker)
        async def _generate() -> tuple[str, TokenUsage]:
            messages = [
                SystemMessage(content=system_prompt),
                HumanMessage(content=user_prompt),
            ]
            client = self._get_client(model)
            try:
                response = await client.ainvoke(messages)
            except Exception as e:
                raise classify_error(e) from e

            content = getattr(response, "content", None)
            if not isinstance(content, str) or not content.strip():
                raise RemoteAdapterError(
                    FailureKind.MALFORMED_RESPONSE, f"Empty or non-text response from {model}"
                )
            return content.strip(), self._extract_usage(response, model)

        try:
            return await _generate()
        except CircuitOpenError as e:
            raise RemoteAdapterError(FailureKind.NETWORK_ERROR, str(e)) from e

    async def enhance(self, prompt: str, category: PromptCategory) -> RemoteCompletion:
        """Enhance a prompt, trying each model in the chain.

        Auth failures stop the chain since every model shares the key.

        Args:
            prompt: The prompt to enhance.
            category: The target AI system category.

        Returns:
            RemoteSuccess with the enhanced text, or RemoteFailure.
        """
        if not self.is_configured:
            return RemoteFailure(FailureKind.AUTH_ERROR, "OpenRouter API key not configured")

        self._log_request(prompt, category)
        system_prompt = build_system_prompt(category.value)
        user_prompt = build_user_prompt(prompt, category.value)

        models = self.get_model_chain()
        last_error: Optional[RemoteAdapterError] = None

        for i, model in enumerate(models):
            if i > 0:
                self._log_fallback(models[i - 1], model, last_error.message)
            try:
                text, usage = await self._complete(model, system_prompt, user_prompt)
            except RemoteAdapterError as e:
                last_error = e
                if e.kind == FailureKind.AUTH_ERROR:
                    break
                continue

            self._log_response(text, usage)
            return RemoteSuccess(text=text, model=model, usage=usage)

        self.logger.error(f"OpenRouter enhancement failed: {last_error.kind.value}: {last_error.message}")
        return RemoteFailure(last_error.kind, last_error.message)
