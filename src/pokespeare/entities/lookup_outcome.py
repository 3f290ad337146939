"""Lookup outcome domain entities."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Found:
    """The creature exists and its translated description is available.

    Attributes:
        description: The translated description
    """

    description: str


@dataclass(frozen=True)
class NotFound:
    """The data service has no creature with the requested name."""


@dataclass(frozen=True)
class Failed:
    """The lookup could not be completed.

    Attributes:
        reason: Human-readable reason, logged but never sent to clients
        kind: Error kind that caused the failure (see exceptions module)
    """

    reason: str
    kind: str = "upstream_error"


LookupOutcome = Found | NotFound | Failed
