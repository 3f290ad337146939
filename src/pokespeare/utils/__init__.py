"""Utility modules for pokespeare."""

from .logging import configure_logging

__all__ = [
    "configure_logging",
]
