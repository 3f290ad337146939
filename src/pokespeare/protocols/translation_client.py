"""Translation client protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class TranslationClient(Protocol):
    """Protocol for text translators (Shakespeare translator by default)."""

    async def translate(self, text: str) -> str:
        """Translate a text.

        Args:
            text: The text to translate

        Returns:
            The translated text

        Raises:
            UpstreamError: If the translator fails or rejects the input
        """
        ...
