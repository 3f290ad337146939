"""Handler layer for HTTP endpoints.

Handlers depend on services (business logic), not directly on the
upstream clients.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Upstream access)
"""

from .pokemon_handler import PokemonHandler

__all__ = [
    "PokemonHandler",
]
