"""Description client protocol.

Defines the interface for any data service that can return a textual
description of a creature given its name.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class DescriptionClient(Protocol):
    """Protocol for description sources (PokeAPI by default)."""

    async def fetch(self, name: str) -> str | None:
        """Fetch the description of a creature.

        Args:
            name: The creature name, in any case

        Returns:
            The description text, or None if no such creature exists

        Raises:
            UpstreamError: If the upstream fails or has no usable text
        """
        ...
