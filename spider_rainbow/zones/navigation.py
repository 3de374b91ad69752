"""Navigators: the side effect that opens a chosen destination."""

from __future__ import annotations

import webbrowser
from typing import List, Protocol

from ..core.logger import log
from ..utils.validation import validate_destination
from .models import Destination, NavigationRequest


class Navigator(Protocol):
    """Capability to open a destination in a new, isolated browsing context."""

    def open(self, destination: Destination) -> bool:
        """Request navigation. Returns False when the request was blocked."""
        ...


class BrowserNavigator:
    """Open destinations in a new tab of the host's desktop browser.

    The browser runs as a separate process, so the new page gets no opener
    and no referrer.
    """

    def open(self, destination: Destination) -> bool:
        is_valid, error = validate_destination(destination)
        if not is_valid:
            log.warning(f"Refusing to open {destination!r}: {error}")
            return False
        return webbrowser.open_new_tab(destination)


class CollectingNavigator:
    """Record navigation requests instead of performing them."""

    def __init__(self, blocked: bool = False):
        self.blocked = blocked
        self.requests: List[NavigationRequest] = []

    def open(self, destination: Destination) -> bool:
        if self.blocked:
            return False
        self.requests.append(NavigationRequest(url=destination))
        return True

    @property
    def last_request(self) -> NavigationRequest | None:
        return self.requests[-1] if self.requests else None
