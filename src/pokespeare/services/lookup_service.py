"""Lookup service for core business logic.

This service orchestrates a lookup by coordinating the result cache,
the description client and the translation client.
"""

import structlog

from pokespeare import metrics
from pokespeare.cache import ResultCache
from pokespeare.config import settings
from pokespeare.entities import Failed, Found, LookupOutcome, NotFound
from pokespeare.exceptions import NoUsableContentError, UpstreamError
from pokespeare.protocols import DescriptionClient, TranslationClient

logger = structlog.get_logger(__name__)

NO_DESCRIPTION_REASON = "no description available"


def lookup_key(name: str) -> str:
    """Derive the cache key for a creature name.

    The key is also the name sent upstream, so a cached entry always
    belongs to the resource that a cold lookup would have fetched.
    """
    return name.strip().casefold()


class LookupService:
    """Core lookup orchestration service.

    This service depends on PROTOCOLS, not concrete implementations:
    - DescriptionClient: PokeAPI by default
    - TranslationClient: Shakespeare translator by default

    Only successful translations are cached. Not-found and failed lookups
    always reach the upstreams again on the next call. Each upstream is
    called at most once per ``resolve``.

    Example:
        ```python
        service = LookupService.create(
            description_client=PokeApiClient.create(),
            translation_client=ShakespeareClient.create(),
        )
        outcome = await service.resolve("Pikachu")
        ```
    """

    def __init__(
        self,
        description_client: DescriptionClient,
        translation_client: TranslationClient,
        cache: ResultCache,
    ) -> None:
        """Initialize the lookup service.

        Args:
            description_client: Source of creature descriptions (required).
            translation_client: Translator for the descriptions (required).
            cache: Result cache shared by all requests (required).
        """
        self._descriptions = description_client
        self._translator = translation_client
        self._cache = cache

    @classmethod
    def create(
        cls,
        description_client: DescriptionClient,
        translation_client: TranslationClient,
        cache_size: int | None = None,
    ) -> "LookupService":
        """Factory method building the service with its own result cache.

        Args:
            description_client: Source of creature descriptions (required).
            translation_client: Translator for the descriptions (required).
            cache_size: Cache capacity. If None, uses settings.pokeapi_cache_size.

        Returns:
            Configured LookupService instance
        """
        if cache_size is None:
            cache_size = settings.pokeapi_cache_size
        return cls(
            description_client=description_client,
            translation_client=translation_client,
            cache=ResultCache(cache_size),
        )

    async def resolve(self, name: str) -> LookupOutcome:
        """Resolve a creature name into its translated description.

        Business logic:
        1. Probe the cache with the normalized key
        2. On miss, fetch the description for that same key
        3. Translate the description
        4. Cache and return the translation

        Args:
            name: The creature name, in any case

        Returns:
            Found, NotFound or Failed
        """
        key = lookup_key(name)

        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit", key=key)
            metrics.CACHE_HITS.inc()
            return Found(cached)

        logger.debug("Cache miss", key=key)
        metrics.CACHE_MISSES.inc()

        try:
            description = await self._descriptions.fetch(key)
            if description is None:
                logger.info("Creature not found", key=key)
                return NotFound()

            translated = await self._translator.translate(description)
        except NoUsableContentError as e:
            return self._failed(key, e, reason=NO_DESCRIPTION_REASON)
        except UpstreamError as e:
            return self._failed(key, e)

        self._cache.put(key, translated)
        return Found(translated)

    def _failed(self, key: str, error: UpstreamError, reason: str | None = None) -> Failed:
        logger.error(
            "Lookup failed",
            key=key,
            kind=error.kind,
            upstream=error.upstream,
            error=error.message,
        )
        return Failed(reason=reason or error.message, kind=error.kind)

    def get_stats(self) -> dict:
        """Get cache statistics."""
        return self._cache.stats()

    @property
    def cache(self) -> ResultCache:
        """Get the underlying result cache (for testing)."""
        return self._cache

    @property
    def description_client(self) -> DescriptionClient:
        return self._descriptions

    @property
    def translation_client(self) -> TranslationClient:
        return self._translator
