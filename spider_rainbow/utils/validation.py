"""Validation utility functions for the Spider Rainbow service."""

from __future__ import annotations

from typing import Tuple
from urllib.parse import urlparse

ALLOWED_SCHEMES = ("http", "https")


def validate_destination(destination: str) -> Tuple[bool, str]:
    """Validate a navigation destination before opening it.

    Args:
        destination: URL chosen by a zone policy.

    Returns:
        Tuple of (is_valid, error_message).
    """
    if not isinstance(destination, str) or not destination.strip():
        return False, "Destination must be a non-empty string"

    parsed = urlparse(destination)
    if parsed.scheme not in ALLOWED_SCHEMES:
        return False, f"Unsupported destination scheme: {parsed.scheme or '<none>'}"

    if not parsed.netloc:
        return False, "Destination missing host"

    return True, ""
