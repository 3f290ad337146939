"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class PokemonResponse(BaseModel):
    """Response DTO for ``GET /pokemon/{name}``."""

    name: str = Field(..., description="The name as requested by the client")
    description: str = Field(..., description="The Shakespearean description")


class ErrorResponse(BaseModel):
    """Error envelope shared by every non-2xx answer."""

    message: str = Field(..., description="Human-readable status message")


class CacheStatsResponse(BaseModel):
    """Response DTO for result cache statistics."""

    capacity: int = Field(..., description="Maximum number of cached entries", ge=0)
    size: int = Field(..., description="Current number of cached entries", ge=0)
    hits: int = Field(..., description="Lookups served from the cache", ge=0)
    misses: int = Field(..., description="Lookups that reached the upstreams", ge=0)
    hit_rate: float = Field(..., description="hits / (hits + misses)", ge=0.0, le=1.0)


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status")
