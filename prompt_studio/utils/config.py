"""Configuration management using pydantic-settings."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Keys
    openrouter_api_key: Optional[str] = None

    # Remote Enhancement
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    enhancement_model: str = "meta-llama/llama-3.2-3b-instruct:free"
    enhancement_fallback_models: str = (
        "microsoft/phi-3-mini-128k-instruct:free,google/gemma-2-9b-it:free"
    )
    enhancement_temperature: float = 0.7
    enhancement_max_tokens: int = 2000
    enhancement_request_timeout: float = 20.0  # per model call
    enhancement_timeout: float = 60.0  # whole remote step, including retries and fallbacks

    # Retry Settings
    retry_max_attempts: int = 2
    retry_base_delay: float = 1.0
    retry_max_delay: float = 10.0

    # Engine Settings
    cache_ttl_seconds: int = 30 * 60
    max_prompt_length: int = 5000
    template_seed_path: Optional[str] = None
    usage_store_path: Optional[str] = None

    # Rate Limiting (remote enhancement endpoint)
    rate_limit_per_client_per_minute: int = 20
    rate_limit_per_client_per_hour: int = 200
    rate_limit_global_per_minute: int = 60
    rate_limit_global_per_hour: int = 1000

    # Application Settings
    debug: bool = False
    log_level: str = "INFO"

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    def validate_api_keys(self) -> dict[str, bool]:
        """Check which API keys are configured."""
        return {
            "openrouter": bool(self.openrouter_api_key and self.openrouter_api_key.strip()),
        }

    def fallback_models(self) -> list[str]:
        """Parse the comma-separated fallback model chain."""
        return [m.strip() for m in self.enhancement_fallback_models.split(",") if m.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
