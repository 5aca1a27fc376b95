from functools import lru_cache
from pathlib import Path
from typing import Dict

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.services.catalog import DEFAULT_PACKAGES

_APP_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG,
    EXCHANGE_API_BASE_URL, EXCHANGE_RATE_PROVIDER, DEFAULT_CURRENCIES).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "International Pricing JSON Creator"
    debug: bool = False
    version: str = "0.1.0"

    # Exchange rates
    base_currency: str = "USD"
    exchange_api_base_url: str = "https://api.exchangerate-api.com/v4/latest"  # base currency appended as last path segment
    http_timeout_seconds: float = 10.0
    # Allowed: 'exchangerate-api' (live HTTP), 'static' (fixed offline table)
    exchange_rate_provider: str = "exchangerate-api"

    # Form defaults for a fresh converter
    default_currencies: str = "AED, ARS, AUD"
    default_packages: Dict[str, float] = dict(DEFAULT_PACKAGES)

    templates_dir: Path = _APP_DIR / "templates"

    def init_post_load(self) -> None:
        """Normalize derived fields and validate the provider choice."""
        self.base_currency = self.base_currency.strip().upper()
        self.exchange_api_base_url = self.exchange_api_base_url.rstrip("/")
        allowed = {"exchangerate-api", "static"}
        if self.exchange_rate_provider not in allowed:
            raise ValueError(
                f"Unsupported exchange_rate_provider '{self.exchange_rate_provider}'. Allowed: {allowed}"
            )


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
