"""Repository layer for upstream data access.

This layer hides the upstream HTTP APIs behind the protocol-based
interfaces in ``pokespeare.protocols``. The clients are protocol-based
(structural typing), not inheritance-based.
"""

from pokespeare.protocols import DescriptionClient, TranslationClient

from .pokeapi_client import PokeApiClient
from .shakespeare_client import ShakespeareClient

__all__ = [
    "DescriptionClient",
    "TranslationClient",
    "PokeApiClient",
    "ShakespeareClient",
]
