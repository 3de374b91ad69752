"""Utility functions for the Spider Rainbow service."""

from .validation import validate_destination

__all__ = [
    "validate_destination",
]
