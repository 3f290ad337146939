"""PokeAPI-based description client.

Fetches ``/pokemon-species/{name}`` and selects the first flavor text
written in the configured language.

Status mapping:
- 404 -> None (no such creature)
- 5xx -> UpstreamServerError
- any other non-2xx -> UpstreamRejectedError (the body is not decoded)
"""

import re
from urllib.parse import quote

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from pokespeare import metrics
from pokespeare.config import settings
from pokespeare.exceptions import (
    NoUsableContentError,
    UpstreamDataError,
    UpstreamRejectedError,
    UpstreamServerError,
    UpstreamUnavailableError,
)

logger = structlog.get_logger(__name__)

UPSTREAM = "pokeapi"

_WHITESPACE = re.compile(r"\s+")


class PokemonLanguage(BaseModel):
    name: str


class PokemonFlavorTextEntry(BaseModel):
    flavor_text: str
    language: PokemonLanguage


class PokemonSpecies(BaseModel):
    """The subset of the PokeAPI species payload we rely on."""

    flavor_text_entries: list[PokemonFlavorTextEntry]


class PokeApiClient:
    """PokeAPI implementation of the DescriptionClient protocol.

    This class satisfies the DescriptionClient protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        client = PokeApiClient.create()
        description = await client.fetch("Pikachu")
        ```
    """

    def __init__(
        self,
        base_url: str | None = None,
        language: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the PokeAPI client.

        Args:
            base_url: PokeAPI base URL. Defaults to settings.pokeapi_endpoint.
            language: Flavor text language. Defaults to settings.pokeapi_language.
            timeout: Request timeout in seconds. Defaults to settings.upstream_timeout.
            client: Pre-built async HTTP client (tests inject a mock transport).
        """
        base_url = base_url or settings.pokeapi_endpoint
        if not base_url.endswith("/"):
            base_url += "/"

        self._base_url = httpx.URL(base_url)
        self._language = language or settings.pokeapi_language
        self._timeout = timeout or settings.upstream_timeout
        self._client = client

    @classmethod
    def create(
        cls,
        base_url: str | None = None,
        language: str | None = None,
    ) -> "PokeApiClient":
        """Factory method to create PokeApiClient with defaults.

        Args:
            base_url: PokeAPI base URL. If None, uses settings.
            language: Flavor text language. If None, uses settings.

        Returns:
            Configured PokeApiClient
        """
        return cls(base_url=base_url, language=language)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=True,
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            )
        return self._client

    def species_url(self, name: str) -> httpx.URL:
        """Build the species endpoint URL for a creature name."""
        return self._base_url.join(f"pokemon-species/{quote(name.casefold(), safe='')}")

    async def fetch(self, name: str) -> str | None:
        """Retrieve the description of the creature with the given name.

        Args:
            name: The creature name, in any case

        Returns:
            The first description in the configured language, or None if
            no creature has been found

        Raises:
            UpstreamUnavailableError: If the request cannot be sent
            UpstreamServerError: On a 5xx response
            UpstreamRejectedError: On any other non-2xx response but 404
            UpstreamDataError: If the body cannot be parsed
            NoUsableContentError: If no description in the language exists
        """
        url = self.species_url(name)

        logger.debug("Sending HTTP request", upstream=UPSTREAM, url=str(url))
        metrics.POKEAPI_REQUESTS.inc()

        try:
            response = await self.client.get(url)
        except httpx.HTTPError as e:
            raise UpstreamUnavailableError(f"Cannot send request to Pokemon API: {e}", UPSTREAM) from e

        logger.debug("Got HTTP response", upstream=UPSTREAM, status=response.status_code)

        if response.status_code == 404:
            return None
        if response.is_server_error:
            raise UpstreamServerError(response.status_code, UPSTREAM)
        if not response.is_success:
            raise UpstreamRejectedError(response.status_code, UPSTREAM)

        try:
            species = PokemonSpecies.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise UpstreamDataError(f"Cannot parse response from Pokemon API: {e}", UPSTREAM) from e

        for entry in species.flavor_text_entries:
            if entry.language.name != self._language:
                continue
            # Flavor texts embed the game's line breaks and form feeds
            text = _WHITESPACE.sub(" ", entry.flavor_text).strip()
            if text:
                return text

        raise NoUsableContentError(
            f"No {self._language} description is available", UPSTREAM
        )

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
