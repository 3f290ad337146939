"""Domain entities for internal representation.

These are pure frozen dataclasses used by the service layer. They are NOT
used for API contracts - use DTOs from the dto package for that.
"""

from .lookup_outcome import Failed, Found, LookupOutcome, NotFound

__all__ = ["Failed", "Found", "LookupOutcome", "NotFound"]
