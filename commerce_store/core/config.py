"""
Centralized application configuration
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings, read from the environment and .env"""

    APP_NAME: str = "commerce-store"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # Demo
    EXPENSIVE_PRICE_THRESHOLD: float = 2000.0

    # Container benchmark
    # list/deque membership probes are O(N) each, keep N * PROBES modest
    BENCHMARK_ENABLED: bool = True
    BENCHMARK_SIZE: int = 20_000
    BENCHMARK_PROBES: int = 2_000
    BENCHMARK_WARMUP_ROUNDS: int = 2
    BENCHMARK_SEED: Optional[int] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
