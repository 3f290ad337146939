import os
from dataclasses import dataclass
from functools import lru_cache

import structlog
from dotenv import load_dotenv

load_dotenv()

logger = structlog.get_logger(__name__)

DEFAULT_PORT = 8080


def _port_from_env() -> int:
    """Read PORT from the environment, falling back to the default port."""
    raw = os.getenv("PORT")
    try:
        port = int(raw) if raw is not None else None
    except ValueError:
        port = None

    if port is None or not 0 < port < 65536:
        logger.warning("Invalid or missing PORT env value, defaulting", default=DEFAULT_PORT)
        return DEFAULT_PORT
    return port


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # PokeAPI (description source)
    pokeapi_endpoint: str = os.getenv("POKEAPI_ENDPOINT", "https://pokeapi.co/api/v2/")
    pokeapi_cache_size: int = int(os.getenv("POKEAPI_CACHE_SIZE", "128"))
    pokeapi_language: str = os.getenv("POKEAPI_LANGUAGE", "en")

    # Shakespeare translator
    shakespeare_translator_endpoint: str = os.getenv(
        "SHAKESPEARE_TRANSLATOR_ENDPOINT",
        "https://api.funtranslations.com/",
    )

    # Shared by both upstream clients
    upstream_timeout: float = float(os.getenv("UPSTREAM_TIMEOUT", "10.0"))

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = _port_from_env()
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "info")
    log_format: str = os.getenv("LOG_FORMAT", "console")

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.pokeapi_cache_size < 0:
            raise ValueError(
                f"POKEAPI_CACHE_SIZE must be zero or positive, got {self.pokeapi_cache_size}"
            )

        if self.upstream_timeout <= 0:
            raise ValueError(f"UPSTREAM_TIMEOUT must be positive, got {self.upstream_timeout}")

        if self.log_format not in ("console", "json"):
            raise ValueError(f"LOG_FORMAT must be 'console' or 'json', got {self.log_format!r}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
