"""Shared test fixtures for pokespeare."""

import pytest
import structlog
from structlog.testing import capture_logs

from pokespeare.exceptions import UpstreamError
from pokespeare.services import lookup_service
from pokespeare.services import LookupService


class FakeDescriptionClient:
    """In-memory DescriptionClient.

    ``entries`` maps a lower-cased name to a description, or to an
    exception instance that ``fetch`` raises. Unknown names are not found.
    """

    def __init__(self, entries: dict[str, str | UpstreamError] | None = None) -> None:
        self.entries = entries or {}
        self.calls: list[str] = []

    async def fetch(self, name: str) -> str | None:
        self.calls.append(name)
        entry = self.entries.get(name.lower())
        if isinstance(entry, UpstreamError):
            raise entry
        return entry


class FakeTranslationClient:
    """In-memory TranslationClient that upper-cases its input.

    Set ``error`` to make every call raise it.
    """

    def __init__(self, error: UpstreamError | None = None) -> None:
        self.error = error
        self.calls: list[str] = []

    async def translate(self, text: str) -> str:
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return f"Verily, {text.upper()}"


@pytest.fixture
def descriptions() -> FakeDescriptionClient:
    return FakeDescriptionClient(
        {
            "pikachu": "When several of these Pokemon gather, their electricity could build.",
            "bulbasaur": "A strange seed was planted on its back at birth.",
        }
    )


@pytest.fixture
def translator() -> FakeTranslationClient:
    return FakeTranslationClient()


@pytest.fixture
def service(descriptions, translator) -> LookupService:
    return LookupService.create(
        description_client=descriptions,
        translation_client=translator,
        cache_size=10,
    )


@pytest.fixture
def captured_logs(monkeypatch):
    """Capture events logged by the lookup service.

    The module logger may already be cached by the application's logging
    setup, so a fresh one is swapped in while capturing.
    """
    with capture_logs() as logs:
        monkeypatch.setattr(lookup_service, "logger", structlog.get_logger(lookup_service.__name__))
        yield logs
