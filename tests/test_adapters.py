"""Tests for the remote enhancement adapter."""

import asyncio
import time

import httpx
import openai
import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from langchain_core.messages import AIMessage

from prompt_studio.adapters import (
    FailureKind,
    OpenRouterAdapter,
    PromptCategory,
    RemoteAdapterError,
    RemoteFailure,
    RemoteSuccess,
    classify_error,
    detect_category,
)
from prompt_studio.utils.config import Settings
from prompt_studio.utils.resilience import (
    CircuitBreaker,
    CircuitBreakerConfig,
    CircuitState,
    RetryConfig,
)

URL = "https://openrouter.ai/api/v1/chat/completions"


def _response(status: int) -> httpx.Response:
    return httpx.Response(status, request=httpx.Request("POST", URL))


def _auth_error() -> openai.AuthenticationError:
    return openai.AuthenticationError("invalid key", response=_response(401), body=None)


def _connection_error() -> openai.APIConnectionError:
    return openai.APIConnectionError(request=httpx.Request("POST", URL))


def _message(content: str) -> AIMessage:
    return AIMessage(
        content=content,
        response_metadata={"token_usage": {"prompt_tokens": 10, "completion_tokens": 20}},
    )


@pytest.fixture
def adapter():
    """Adapter with one fallback model, no retry delay and its own breaker."""
    return OpenRouterAdapter(
        model_name="primary",
        api_key="test-key",
        fallback_models=["backup"],
        retry_config=RetryConfig(max_attempts=2, base_delay=0, jitter=False),
        circuit_breaker=CircuitBreaker(),
    )


def _mock_client(*responses):
    client = MagicMock()
    client.ainvoke = AsyncMock(side_effect=list(responses))
    return client


class TestClassifyError:
    """Tests for mapping client errors to failure kinds."""

    def test_auth_errors(self):
        """Test 401 and 403 map to auth_error."""
        assert classify_error(_auth_error()).kind == FailureKind.AUTH_ERROR
        denied = openai.PermissionDeniedError("denied", response=_response(403), body=None)
        assert classify_error(denied).kind == FailureKind.AUTH_ERROR

    def test_rate_limited(self):
        """Test 429 maps to rate_limited."""
        error = openai.RateLimitError("slow down", response=_response(429), body=None)
        assert classify_error(error).kind == FailureKind.RATE_LIMITED

    def test_network_errors(self):
        """Test connection, server and transport errors map to network_error."""
        server = openai.InternalServerError("boom", response=_response(500), body=None)
        unavailable = openai.APIStatusError("down", response=_response(503), body=None)

        for error in (
            _connection_error(),
            server,
            unavailable,
            httpx.ConnectError("refused"),
            asyncio.TimeoutError(),
        ):
            assert classify_error(error).kind == FailureKind.NETWORK_ERROR

    def test_malformed_response(self):
        """Test client errors and unexpected exceptions map to malformed_response."""
        bad_request = openai.APIStatusError("bad", response=_response(400), body=None)

        assert classify_error(bad_request).kind == FailureKind.MALFORMED_RESPONSE
        assert classify_error(ValueError("odd")).kind == FailureKind.MALFORMED_RESPONSE

    def test_retryable_kinds(self):
        """Test only network and rate-limit failures are retryable."""
        assert RemoteAdapterError(FailureKind.NETWORK_ERROR).retryable
        assert RemoteAdapterError(FailureKind.RATE_LIMITED).retryable
        assert not RemoteAdapterError(FailureKind.AUTH_ERROR).retryable
        assert not RemoteAdapterError(FailureKind.MALFORMED_RESPONSE).retryable


class TestDetectCategory:
    """Tests for target category detection."""

    def test_categories(self):
        """Test keyword-based category selection."""
        assert detect_category("a photo of a sunset") == PromptCategory.IMAGE_GENERATION
        assert detect_category("debug my python function") == PromptCategory.CODE_GENERATION
        assert detect_category("write a blog post about cats") == PromptCategory.TEXT_AI

    def test_default_category(self):
        """Test unmatched text defaults to text_ai."""
        assert detect_category("xyz") == PromptCategory.TEXT_AI
        assert detect_category("") == PromptCategory.TEXT_AI


class TestOpenRouterAdapter:
    """Tests for the OpenRouter adapter."""

    def test_adapter_initialization(self, adapter):
        """Test adapter initializes correctly."""
        assert adapter.model_name == "primary"
        assert adapter.api_key == "test-key"
        assert adapter.get_model_chain() == ["primary", "backup"]
        assert adapter.is_configured

    def test_client_cached_per_model(self, adapter):
        """Test one client is built per model."""
        client = adapter._get_client("primary")

        assert adapter._get_client("primary") is client
        assert adapter._get_client("backup") is not client
        assert client.model_name == "primary"

    def test_per_call_timeout_from_settings(self):
        """Test each model call uses the per-request timeout, not the pipeline deadline."""
        settings = Settings(
            _env_file=None, enhancement_request_timeout=7.5, enhancement_timeout=30.0
        )
        with patch("prompt_studio.adapters.openrouter_adapter.get_settings", return_value=settings):
            adapter = OpenRouterAdapter(api_key="test-key", circuit_breaker=CircuitBreaker())

        assert adapter.request_timeout == 7.5
        assert adapter._get_client(adapter.model_name).request_timeout == 7.5

    def test_default_call_timeout_fits_pipeline_deadline(self):
        """Test the default per-call timeout leaves room for a retry inside the deadline."""
        settings = Settings(_env_file=None)
        assert settings.enhancement_request_timeout * 2 < settings.enhancement_timeout

    @pytest.mark.asyncio
    async def test_success(self, adapter):
        """Test a successful call returns trimmed text and usage."""
        client = _mock_client(_message("  Better prompt  "))
        with patch.object(adapter, "_get_client", return_value=client):
            result = await adapter.enhance("prompt", PromptCategory.TEXT_AI)

        assert isinstance(result, RemoteSuccess)
        assert result.text == "Better prompt"
        assert result.model == "primary"
        assert result.usage.input_tokens == 10
        assert result.usage.output_tokens == 20

    @pytest.mark.asyncio
    async def test_network_error_retried(self, adapter):
        """Test a transient error is retried on the same model."""
        client = _mock_client(_connection_error(), _message("ok"))
        with patch.object(adapter, "_get_client", return_value=client):
            result = await adapter.enhance("prompt", PromptCategory.TEXT_AI)

        assert isinstance(result, RemoteSuccess)
        assert result.model == "primary"
        assert client.ainvoke.await_count == 2

    @pytest.mark.asyncio
    async def test_malformed_response_falls_back(self, adapter):
        """Test an empty response is not retried but the next model is tried."""
        client = _mock_client(_message(""), _message("from backup"))
        with patch.object(adapter, "_get_client", return_value=client):
            result = await adapter.enhance("prompt", PromptCategory.TEXT_AI)

        assert isinstance(result, RemoteSuccess)
        assert result.model == "backup"
        assert result.text == "from backup"
        assert client.ainvoke.await_count == 2

    @pytest.mark.asyncio
    async def test_auth_error_stops_chain(self, adapter):
        """Test an auth failure is neither retried nor sent to fallbacks."""
        client = _mock_client(_auth_error())
        with patch.object(adapter, "_get_client", return_value=client):
            result = await adapter.enhance("prompt", PromptCategory.TEXT_AI)

        assert isinstance(result, RemoteFailure)
        assert result.kind == FailureKind.AUTH_ERROR
        assert client.ainvoke.await_count == 1

    @pytest.mark.asyncio
    async def test_all_models_fail(self, adapter):
        """Test the last failure kind is reported after every model is tried."""
        client = _mock_client(*[_connection_error() for _ in range(4)])
        with patch.object(adapter, "_get_client", return_value=client):
            result = await adapter.enhance("prompt", PromptCategory.TEXT_AI)

        assert isinstance(result, RemoteFailure)
        assert result.kind == FailureKind.NETWORK_ERROR
        assert client.ainvoke.await_count == 4

    @pytest.mark.asyncio
    async def test_open_circuit_is_network_error(self):
        """Test an open breaker fails fast without calling the model."""
        breaker = CircuitBreaker(
            config=CircuitBreakerConfig(recovery_timeout=60),
            state=CircuitState.OPEN,
            last_failure_time=time.time(),
        )
        adapter = OpenRouterAdapter(
            model_name="primary",
            api_key="test-key",
            fallback_models=[],
            circuit_breaker=breaker,
        )
        client = _mock_client(_message("never"))
        with patch.object(adapter, "_get_client", return_value=client):
            result = await adapter.enhance("prompt", PromptCategory.TEXT_AI)

        assert result == RemoteFailure(FailureKind.NETWORK_ERROR, result.message)
        client.ainvoke.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_key(self):
        """Test a blank key fails with auth_error without a request."""
        adapter = OpenRouterAdapter(model_name="primary", api_key="   ", fallback_models=[])

        result = await adapter.enhance("prompt", PromptCategory.TEXT_AI)

        assert isinstance(result, RemoteFailure)
        assert result.kind == FailureKind.AUTH_ERROR
