"""HTTP handlers for creature lookups.

Handlers convert lookup outcomes into DTOs and HTTP status codes.
"""

from fastapi import HTTPException, status

from pokespeare.dto import PokemonResponse
from pokespeare.entities import Found, NotFound
from pokespeare.services import LookupService


class PokemonHandler:
    """HTTP handlers for lookup operations.

    Outcome mapping:
    - Found -> 200 with name and description
    - NotFound -> 404
    - Failed -> 500; the reason has already been logged by the service
      and is never echoed to the client

    Example:
        ```python
        handler = PokemonHandler(lookup_service=service)

        @app.get("/pokemon/{name}", response_model=PokemonResponse)
        async def get_pokemon(name: str):
            return await handler.get_pokemon(name)
        ```
    """

    def __init__(self, lookup_service: LookupService) -> None:
        """Initialize the handler.

        Args:
            lookup_service: The lookup service for business logic (required).
        """
        self._lookup = lookup_service

    async def get_pokemon(self, name: str) -> PokemonResponse:
        """Handle GET /pokemon/{name} requests.

        Args:
            name: The creature name from the path

        Returns:
            PokemonResponse with the requested name and translated description

        Raises:
            HTTPException: 404 if the creature does not exist, 500 on failure
        """
        outcome = await self._lookup.resolve(name)

        if isinstance(outcome, Found):
            return PokemonResponse(name=name, description=outcome.description)

        if isinstance(outcome, NotFound):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error",
        )
