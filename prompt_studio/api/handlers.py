"""Wiring of the engine components shared by the API routes."""

from pathlib import Path
from typing import Optional

from prompt_studio.adapters import OpenRouterAdapter
from prompt_studio.api.rate_limiter import ClientRateLimiter, RateLimitConfig
from prompt_studio.engine import (
    MetaPromptTransformer,
    PromptAnalyzer,
    PromptPipeline,
    PromptQualityValidator,
    TemplateLibrary,
    TemplateMatcher,
)
from prompt_studio.utils.cache import ResultCache
from prompt_studio.utils.config import Settings, get_settings
from prompt_studio.utils.logger import get_logger
from prompt_studio.utils.metrics import UsageMetrics
from prompt_studio.utils.storage import InMemoryUsageStore, JsonUsageStore, UsageStore

logger = get_logger()


class EngineServices:
    """One set of engine components built from settings.

    Components share the same template library, usage store and cache so
    usage counts and cached results are consistent across endpoints.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Build the components.

        Args:
            settings: Application settings (defaults to the cached settings).
        """
        self.settings = settings or get_settings()

        usage_store: UsageStore
        if self.settings.usage_store_path:
            usage_store = JsonUsageStore(Path(self.settings.usage_store_path))
        else:
            usage_store = InMemoryUsageStore()

        if self.settings.template_seed_path:
            self.library = TemplateLibrary.from_file(
                Path(self.settings.template_seed_path), usage_store=usage_store
            )
        else:
            self.library = TemplateLibrary(usage_store=usage_store)

        self.analyzer = PromptAnalyzer()
        self.matcher = TemplateMatcher(self.library)
        self.transformer = MetaPromptTransformer(self.analyzer, self.library)
        self.validator = PromptQualityValidator()
        self.usage_metrics = UsageMetrics()

        adapter = None
        if self.settings.validate_api_keys()["openrouter"]:
            adapter = OpenRouterAdapter()
        else:
            logger.warning("OpenRouter API key not configured; enhancement runs locally only")

        self.pipeline = PromptPipeline(
            transformer=self.transformer,
            validator=self.validator,
            adapter=adapter,
            cache=ResultCache(self.settings.cache_ttl_seconds),
            settings=self.settings,
            usage_metrics=self.usage_metrics,
        )
        self.rate_limiter = ClientRateLimiter(
            per_client_config=RateLimitConfig(
                requests_per_minute=self.settings.rate_limit_per_client_per_minute,
                requests_per_hour=self.settings.rate_limit_per_client_per_hour,
            ),
            global_config=RateLimitConfig(
                requests_per_minute=self.settings.rate_limit_global_per_minute,
                requests_per_hour=self.settings.rate_limit_global_per_hour,
                burst_size=15,
            ),
        )
        logger.info(
            f"Engine ready: {len(self.library)} templates, "
            f"remote enhancement {'on' if adapter else 'off'}"
        )


# Global services instance, built on first use
_services: Optional[EngineServices] = None


def get_services() -> EngineServices:
    """Get the global engine services instance."""
    global _services
    if _services is None:
        _services = EngineServices()
    return _services


def reset_services() -> None:
    """Drop the global instance so the next call rebuilds it."""
    global _services
    _services = None
