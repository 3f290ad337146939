"""Prometheus counters exposed on ``GET /metrics``."""

from prometheus_client import CONTENT_TYPE_LATEST, Counter, generate_latest

POKEAPI_REQUESTS = Counter(
    "pokespeare_pokeapi_requests",
    "Requests to the PokeAPI service",
)

SHAKESPEARE_REQUESTS = Counter(
    "pokespeare_shakespeare_requests",
    "Requests to the Shakespeare Translator service",
)

CACHE_HITS = Counter(
    "pokespeare_cache_hits",
    "Number of cache hits",
)

CACHE_MISSES = Counter(
    "pokespeare_cache_misses",
    "Number of cache misses",
)


def render_latest() -> tuple[bytes, str]:
    """Render the default registry in the Prometheus text format.

    Returns:
        Tuple of (payload, content type)
    """
    return generate_latest(), CONTENT_TYPE_LATEST
