"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
Internal domain logic should use entities from the entities package.
"""

from .responses import (
    CacheStatsResponse,
    ErrorResponse,
    HealthCheckResponse,
    PokemonResponse,
)

__all__ = [
    "PokemonResponse",
    "ErrorResponse",
    "CacheStatsResponse",
    "HealthCheckResponse",
]
