#!/usr/bin/env python3
"""
Demo script for pokespeare.

Resolves a few Pokemon against the live PokeAPI and Shakespeare translator
and shows how the result cache absorbs repeated lookups. The public
translator allows only a handful of requests per hour, so expect
"translation_rejected" failures when running it repeatedly.
"""

import asyncio
import time

from pokespeare.entities import Failed, Found, NotFound
from pokespeare.repositories import PokeApiClient, ShakespeareClient
from pokespeare.services import LookupService


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def demo_lookups(service: LookupService) -> None:
    """Resolve names, including a repeated one and a missing one."""
    print_section("Lookups")

    for name in ["pikachu", "Pikachu", "bulbasaur", "missingno", "charizard"]:
        start = time.time()
        outcome = await service.resolve(name)
        duration_ms = (time.time() - start) * 1000

        print(f"\n  Name: {name} ({duration_ms:.1f}ms)")
        if isinstance(outcome, Found):
            print(f"  ✓ {outcome.description}")
        elif isinstance(outcome, NotFound):
            print("  ✗ Not found")
        elif isinstance(outcome, Failed):
            print(f"  ✗ Failed [{outcome.kind}]: {outcome.reason}")


def demo_stats(service: LookupService) -> None:
    """Show result cache statistics."""
    print_section("Cache Statistics")

    for key, value in service.get_stats().items():
        print(f"  {key}: {value}")


async def main() -> None:
    pokeapi_client = PokeApiClient.create()
    shakespeare_client = ShakespeareClient.create()
    service = LookupService.create(
        description_client=pokeapi_client,
        translation_client=shakespeare_client,
        cache_size=2,
    )

    try:
        await demo_lookups(service)
        demo_stats(service)
    finally:
        await pokeapi_client.close()
        await shakespeare_client.close()


if __name__ == "__main__":
    asyncio.run(main())
