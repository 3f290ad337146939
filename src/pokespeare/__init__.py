"""Pokespeare - Shakespearean Pokemon descriptions behind an LRU cache.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (DescriptionClient, TranslationClient)
    - repositories: Upstream HTTP clients (PokeAPI, Shakespeare translator)
    - services: Lookup orchestration
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Lookup outcomes (internal)

Usage:
    ```python
    from pokespeare.repositories import PokeApiClient, ShakespeareClient
    from pokespeare.services import LookupService

    service = LookupService.create(
        description_client=PokeApiClient.create(),
        translation_client=ShakespeareClient.create(),
        cache_size=128,
    )
    outcome = await service.resolve("pikachu")
    ```

For HTTP API:
    ```python
    from pokespeare.api.app import app
    ```
"""

__version__ = "0.1.0"

from pokespeare.cache import ResultCache
from pokespeare.config import get_settings, settings
from pokespeare.entities import Failed, Found, LookupOutcome, NotFound
from pokespeare.exceptions import UpstreamError
from pokespeare.handlers import PokemonHandler
from pokespeare.protocols import DescriptionClient, TranslationClient
from pokespeare.repositories import PokeApiClient, ShakespeareClient
from pokespeare.services import LookupService

__all__ = [
    "__version__",
    # Configuration
    "settings",
    "get_settings",
    # Protocols (interfaces)
    "DescriptionClient",
    "TranslationClient",
    # Services (business logic)
    "LookupService",
    "ResultCache",
    # Handlers (HTTP)
    "PokemonHandler",
    # Repositories (upstream access)
    "PokeApiClient",
    "ShakespeareClient",
    # Entities (domain models)
    "Found",
    "NotFound",
    "Failed",
    "LookupOutcome",
    # Errors
    "UpstreamError",
]
