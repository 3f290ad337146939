"""Protocol interfaces for the upstream capabilities.

The lookup service depends on these protocols, not on the HTTP clients,
so tests can hand it in-memory fakes.

Usage:
    ```python
    from pokespeare.protocols import DescriptionClient, TranslationClient

    descriptions: DescriptionClient = PokeApiClient.create()
    translator: TranslationClient = ShakespeareClient.create()
    ```
"""

from .description_client import DescriptionClient
from .translation_client import TranslationClient

__all__ = [
    "DescriptionClient",
    "TranslationClient",
]
