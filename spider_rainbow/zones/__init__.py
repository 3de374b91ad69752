"""Click-zone mapping for the Spider Rainbow page.

This sub-package turns a click inside an image into a navigation target:
- Relative position math over a live element rect
- Reusable zone policies (vertical split, quadrants)
- Navigators that open or record the chosen destination
"""

from .mapper import compute_relative_position, create_zone_handler, resolve_click
from .models import BoundingRect, MeasuredElement, NavigationRequest, PointerEvent, RelativePosition
from .navigation import BrowserNavigator, CollectingNavigator, Navigator
from .policies import build_zone_policies, quadrants, vertical_split

__all__ = [
    "BoundingRect",
    "BrowserNavigator",
    "CollectingNavigator",
    "MeasuredElement",
    "NavigationRequest",
    "Navigator",
    "PointerEvent",
    "RelativePosition",
    "build_zone_policies",
    "compute_relative_position",
    "create_zone_handler",
    "quadrants",
    "resolve_click",
    "vertical_split",
]
