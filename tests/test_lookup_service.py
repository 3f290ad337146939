"""
Tests for the lookup orchestration service.
"""

import asyncio

from pokespeare.entities import Failed, Found, NotFound
from pokespeare.exceptions import (
    NoUsableContentError,
    TranslationRejectedError,
    UpstreamDataError,
    UpstreamServerError,
    UpstreamUnavailableError,
)
from pokespeare.services import LookupService, lookup_key


def test_lookup_key_is_case_insensitive():
    assert lookup_key("Pikachu") == lookup_key("pikachu") == "pikachu"
    assert lookup_key("  BULBASAUR ") == "bulbasaur"
    assert lookup_key("FLABÉBÉ") == lookup_key("flabébé")
    assert lookup_key("Straße") == "strasse"


async def test_resolve_found(service, descriptions, translator):
    outcome = await service.resolve("pikachu")

    assert outcome == Found(
        "Verily, WHEN SEVERAL OF THESE POKEMON GATHER, THEIR ELECTRICITY COULD BUILD."
    )
    assert descriptions.calls == ["pikachu"]
    assert translator.calls == [descriptions.entries["pikachu"]]


async def test_resolve_twice_uses_cache(service, descriptions, translator):
    first = await service.resolve("pikachu")
    second = await service.resolve("pikachu")

    assert first == second
    assert isinstance(second, Found)
    assert len(descriptions.calls) == 1
    assert len(translator.calls) == 1
    assert service.cache.hit_count() == 1


async def test_resolve_is_case_insensitive(service, descriptions):
    first = await service.resolve("Pikachu")
    second = await service.resolve("pikachu")
    third = await service.resolve("PIKACHU")

    assert first == second == third
    assert len(descriptions.calls) == 1
    assert len(service.cache) == 1


async def test_not_found_is_not_cached(service, descriptions, translator):
    first = await service.resolve("missingno")
    second = await service.resolve("missingno")

    assert first == NotFound()
    assert second == NotFound()
    assert descriptions.calls == ["missingno", "missingno"]
    assert translator.calls == []
    assert service.cache.get("missingno") is None


async def test_no_usable_description(service, descriptions, translator):
    descriptions.entries["pikachu"] = NoUsableContentError(
        "No en description is available", "pokeapi"
    )

    outcome = await service.resolve("pikachu")

    assert outcome == Failed("no description available", kind="no_usable_content")
    assert translator.calls == []
    assert len(service.cache) == 0


async def test_translation_rejected_is_not_cached(service, descriptions, translator):
    translator.error = TranslationRejectedError(
        "Too Many Requests: Rate limit of 5 requests per hour exceeded.",
        "shakespeare",
        code=429,
    )

    outcome = await service.resolve("pikachu")

    assert isinstance(outcome, Failed)
    assert outcome.kind == "translation_rejected"
    assert "Rate limit" in outcome.reason
    assert descriptions.entries["pikachu"] not in outcome.reason
    assert len(service.cache) == 0

    # A recovered translator is called again on the next lookup
    translator.error = None
    outcome = await service.resolve("pikachu")
    assert isinstance(outcome, Found)
    assert len(descriptions.calls) == 2
    assert len(translator.calls) == 2


async def test_upstream_errors_collapse_to_failed(service, descriptions):
    errors = {
        "a": UpstreamUnavailableError("Cannot send request to Pokemon API", "pokeapi"),
        "b": UpstreamServerError(503, "pokeapi"),
        "c": UpstreamDataError("Cannot parse response from Pokemon API", "pokeapi"),
    }
    descriptions.entries.update(errors)

    for name, error in errors.items():
        outcome = await service.resolve(name)
        assert outcome == Failed(error.message, kind=error.kind)

    assert len(service.cache) == 0


async def test_failed_translation_server_error(service, translator):
    translator.error = UpstreamServerError(500, "shakespeare")

    outcome = await service.resolve("bulbasaur")

    assert outcome == Failed("HTTP error: 500", kind="upstream_server_error")


async def test_capacity_one_upstream_call_counts(descriptions, translator):
    service = LookupService.create(
        description_client=descriptions,
        translation_client=translator,
        cache_size=1,
    )

    counts = []
    for name in ["pikachu", "pikachu", "bulbasaur", "bulbasaur", "pikachu"]:
        outcome = await service.resolve(name)
        assert isinstance(outcome, Found)
        counts.append((len(descriptions.calls), len(translator.calls)))

    assert counts == [(1, 1), (1, 1), (2, 2), (2, 2), (3, 3)]


async def test_zero_capacity_always_calls_upstream(descriptions, translator):
    service = LookupService.create(
        description_client=descriptions,
        translation_client=translator,
        cache_size=0,
    )

    await service.resolve("pikachu")
    await service.resolve("pikachu")

    assert len(descriptions.calls) == 2
    assert len(translator.calls) == 2


async def test_concurrent_resolves_share_cache(service, descriptions):
    outcomes = await asyncio.gather(*(service.resolve("Bulbasaur") for _ in range(5)))

    assert len(set(outcomes)) == 1
    assert isinstance(outcomes[0], Found)
    # Concurrent misses may all reach upstream, but the cache holds one entry
    assert 1 <= len(descriptions.calls) <= 5
    assert len(service.cache) == 1

    await service.resolve("bulbasaur")
    assert service.cache.hit_count() >= 1


def test_get_stats(service):
    stats = service.get_stats()
    assert stats["capacity"] == 10
    assert stats["size"] == 0


async def test_padded_name_resolves_same_from_cold_and_warm_cache(descriptions, translator):
    cold = LookupService.create(
        description_client=descriptions,
        translation_client=translator,
        cache_size=10,
    )
    cold_outcome = await cold.resolve("  Pikachu ")

    warm = LookupService.create(
        description_client=descriptions,
        translation_client=translator,
        cache_size=10,
    )
    await warm.resolve("pikachu")
    warm_outcome = await warm.resolve("  Pikachu ")

    assert isinstance(cold_outcome, Found)
    assert cold_outcome == warm_outcome
    # Upstream always sees the normalized name the cache is keyed on
    assert descriptions.calls == ["pikachu", "pikachu"]


async def test_failures_log_distinct_kind(service, descriptions, translator, captured_logs):
    descriptions.entries["porygon"] = UpstreamUnavailableError(
        "Cannot send request to Pokemon API", "pokeapi"
    )
    await service.resolve("porygon")

    translator.error = TranslationRejectedError("Too Many Requests", "shakespeare", code=429)
    await service.resolve("bulbasaur")

    failures = [entry for entry in captured_logs if entry["event"] == "Lookup failed"]
    assert [(entry["kind"], entry["upstream"], entry["key"]) for entry in failures] == [
        ("upstream_unavailable", "pokeapi", "porygon"),
        ("translation_rejected", "shakespeare", "bulbasaur"),
    ]
    assert all(entry["log_level"] == "error" for entry in failures)
