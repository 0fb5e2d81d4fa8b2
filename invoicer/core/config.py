from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

ALLOWED_RATE_PROVIDERS = {"exchangeratesapi", "static"}


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variables use the INVOICER_ prefix (e.g. INVOICER_DEBUG,
    INVOICER_RATE_PROVIDER, INVOICER_RATES_CACHE_TTL_SECONDS).
    """

    model_config = SettingsConfigDict(
        env_prefix="INVOICER_", env_file=".env", case_sensitive=False
    )

    # Logging
    debug: bool = False
    json_logs: bool = True

    # Input
    invoice_path: Path = Path("data/invoice.json")

    # Exchange rates
    rates_api_base_url: str = "https://api.exchangeratesapi.io"
    rates_api_access_key: Optional[str] = None
    http_timeout_seconds: float = 5.0

    # 'exchangeratesapi' (HTTP) or 'static' (uses static_rates, no network)
    rate_provider: str = "exchangeratesapi"
    static_rates: Dict[str, float] = {}

    # 0 disables the in-memory cache
    rates_cache_ttl_seconds: int = 3600

    def init_post_load(self) -> None:
        """Validate derived fields."""
        if self.rate_provider not in ALLOWED_RATE_PROVIDERS:
            raise ValueError(
                f"Unsupported rate_provider '{self.rate_provider}'. Allowed: {ALLOWED_RATE_PROVIDERS}"
            )
        if self.rates_cache_ttl_seconds < 0:
            raise ValueError("rates_cache_ttl_seconds must be >= 0")


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
