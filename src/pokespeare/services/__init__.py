"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete clients,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Upstream access)

Usage:
    ```python
    from pokespeare.services import LookupService

    service = LookupService.create(
        description_client=PokeApiClient.create(),
        translation_client=ShakespeareClient.create(),
    )
    ```
"""

from .lookup_service import LookupService, lookup_key

__all__ = [
    "LookupService",
    "lookup_key",
]
