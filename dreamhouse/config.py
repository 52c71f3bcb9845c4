from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


_REPO_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # --- Runtime ---
    ENV: str = "dev"  # dev|test|prod
    DREAMHOUSE_DB_URL: str = "sqlite+aiosqlite:///./dreamhouse.db"
    LOG_LEVEL: str = "INFO"

    # --- Markets / catalogs ---
    DEFAULT_MARKET: str = "seattle"
    SEED_PROPERTIES_PATH: str = str(_REPO_ROOT / "data" / "seed_properties.json")
    # written by the (external) King County ingestion run; absent until first run
    INGESTED_PROPERTIES_PATH: str = str(_REPO_ROOT / "data" / "real_properties.json")
    PROPERTY_SOURCE_LIMIT: int = 1000

    # --- Intent service (text -> ParsedIntent, external) ---
    INTENT_SERVICE_URL: str | None = None
    INTENT_SERVICE_API_KEY: str | None = None
    INTENT_MAX_TEXT_CHARS: int = 2000

    # --- Outbound HTTP resilience ---
    HTTP_TIMEOUT_S: float = 20.0
    HTTP_MAX_RETRIES: int = 2
    HTTP_BACKOFF_BASE_S: float = 0.5
    HTTP_RATE_LIMIT_RPS: float = 0.0  # 0 disables
    HTTP_CIRCUIT_FAIL_THRESHOLD: int = 5
    HTTP_CIRCUIT_RESET_S: float = 60.0


settings = Settings()
