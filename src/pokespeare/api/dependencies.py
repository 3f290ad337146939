"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Clients, service and handler created in lifespan, stored in app.state
    - Dependency functions retrieve from request.app.state
    - The result cache lives exactly as long as the app
"""

from contextlib import asynccontextmanager
from typing import Annotated

import structlog
from fastapi import Depends, FastAPI, Request

from pokespeare.config import settings
from pokespeare.handlers import PokemonHandler
from pokespeare.repositories import PokeApiClient, ShakespeareClient
from pokespeare.services import LookupService

logger = structlog.get_logger(__name__)


def get_lookup_service(request: Request) -> LookupService:
    """Return the lookup service that owns the process-wide result cache.

    Used by the stats route, which reads the cache without resolving.

    Raises:
        RuntimeError: If called before the lifespan has wired the app
    """
    service = getattr(request.app.state, "lookup_service", None)
    if service is None:
        raise RuntimeError("Lookup service is missing from app.state; was the lifespan run?")
    return service


def get_handler(request: Request) -> PokemonHandler:
    """Return the handler serving ``GET /pokemon/{name}``.

    Tests replace this dependency to run the route against fake upstreams.
    """
    handler = getattr(request.app.state, "pokemon_handler", None)
    if handler is None:
        raise RuntimeError("Pokemon handler is missing from app.state; was the lifespan run?")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores them in app.state:
    1. Upstream clients (PokeAPI, Shakespeare translator)
    2. Service with its result cache - app.state.lookup_service
    3. Handler - app.state.pokemon_handler

    Cleanup:
        Closes the upstream HTTP clients and removes everything from app.state
    """
    logger.info(
        "Starting pokespeare",
        pokeapi=settings.pokeapi_endpoint,
        translator=settings.shakespeare_translator_endpoint,
        cache_size=settings.pokeapi_cache_size,
    )

    pokeapi_client = PokeApiClient.create()
    shakespeare_client = ShakespeareClient.create()

    lookup_service = LookupService.create(
        description_client=pokeapi_client,
        translation_client=shakespeare_client,
    )
    pokemon_handler = PokemonHandler(lookup_service=lookup_service)

    app.state.pokeapi_client = pokeapi_client
    app.state.shakespeare_client = shakespeare_client
    app.state.lookup_service = lookup_service
    app.state.pokemon_handler = pokemon_handler

    yield

    logger.info("Received shutdown, closing upstream clients")
    await pokeapi_client.close()
    await shakespeare_client.close()

    del app.state.pokemon_handler
    del app.state.lookup_service
    del app.state.shakespeare_client
    del app.state.pokeapi_client
    logger.info("Application successfully terminated")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[PokemonHandler, Depends(get_handler)]
ServiceDep = Annotated[LookupService, Depends(get_lookup_service)]
