"""Click-zone mapping: turn a click inside an element into a destination."""

from __future__ import annotations

import math
from typing import Callable, Optional, Tuple

from ..core.logger import log
from .models import Destination, PointerEvent, RelativePosition, ZonePolicy
from .navigation import BrowserNavigator, Navigator

ZoneHandler = Callable[[PointerEvent], Optional[Destination]]

POPUP_BLOCKED_WARNING = "Popup blocked: Please allow popups to open external links"


def _percent(offset: float, extent: float) -> float:
    """Return ``offset / extent * 100`` with IEEE semantics for a zero extent."""
    if extent == 0:
        if offset == 0 or math.isnan(offset):
            return math.nan
        return math.copysign(math.inf, offset)
    return offset / extent * 100


def compute_relative_position(event: PointerEvent) -> RelativePosition:
    """Locate a click within the element the handler is bound to.

    The bounding rect is read from ``event.current_target`` on every call;
    the element may have been resized since the last click.

    Args:
        event: Click event carrying absolute client coordinates.

    Returns:
        Relative position in percent. Values fall outside [0, 100] for clicks
        outside the element and are non-finite for zero-sized elements.
    """
    rect = event.current_target.get_bounding_client_rect()
    click_x = event.client_x - rect.left
    click_y = event.client_y - rect.top

    if rect.is_degenerate:
        log.warning(f"Zero-sized click target {rect}; relative position is undefined")

    return RelativePosition(_percent(click_x, rect.width), _percent(click_y, rect.height))


def resolve_click(
    policy: ZonePolicy,
    navigator: Navigator,
    event: PointerEvent,
) -> Tuple[RelativePosition, Optional[Destination]]:
    """Apply ``policy`` to a click and open the destination it chooses.

    A blocked or failing navigator is logged as a warning and never raised.
    Exceptions from the policy itself propagate to the caller.
    """
    position = compute_relative_position(event)
    destination = policy(position.percent_x, position.percent_y)
    if not destination:
        return position, None

    try:
        opened = navigator.open(destination)
    except Exception as e:
        log.debug(f"Navigator failed for {destination}: {e}")
        opened = False

    if not opened:
        log.warning(POPUP_BLOCKED_WARNING)
    return position, destination


def create_zone_handler(policy: ZonePolicy, navigator: Navigator | None = None) -> ZoneHandler:
    """Create a click handler that routes clicks through a zone policy.

    Args:
        policy: Maps ``(percent_x, percent_y)`` to a destination or None.
        navigator: Opens the chosen destination. Defaults to the desktop browser.

    Returns:
        Handler taking a PointerEvent and returning the destination it opened
        (or attempted to open), or None when the policy chose no action.
    """
    nav = navigator if navigator is not None else BrowserNavigator()

    def handle_click(event: PointerEvent) -> Optional[Destination]:
        _, destination = resolve_click(policy, nav, event)
        return destination

    return handle_click
