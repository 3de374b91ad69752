"""Data models for the click-zone subsystem."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

Destination = str
ZonePolicy = Callable[[float, float], Optional[Destination]]

BLANK_TARGET = "_blank"
ISOLATION_FEATURES = "noopener,noreferrer"


@dataclass(frozen=True, slots=True)
class BoundingRect:
    """Element position and size (left, top, width, height) in client coordinates."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def is_degenerate(self) -> bool:
        """True when the element has no area to map clicks onto."""
        return self.width == 0 or self.height == 0


class Element(Protocol):
    """Anything a zone handler can be bound to."""

    def get_bounding_client_rect(self) -> BoundingRect: ...


class MeasuredElement:
    """Element whose rect is supplied by the rendering layer and may change."""

    def __init__(self, rect: BoundingRect):
        self.rect = rect

    def resize(self, width: float, height: float) -> None:
        """Update the element size, keeping its top-left corner."""
        self.rect = BoundingRect(self.rect.left, self.rect.top, width, height)

    def get_bounding_client_rect(self) -> BoundingRect:
        return self.rect


@dataclass(frozen=True, slots=True)
class PointerEvent:
    """A click in absolute client coordinates on the element the handler is bound to."""

    client_x: float
    client_y: float
    current_target: Element


@dataclass(frozen=True, slots=True)
class RelativePosition:
    """Click position as percentages of the element's width and height."""

    percent_x: float
    percent_y: float

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.percent_x) and math.isfinite(self.percent_y)


@dataclass(frozen=True, slots=True)
class NavigationRequest:
    """Request to open a destination in an isolated new browsing context."""

    url: Destination
    target: str = BLANK_TARGET
    features: str = ISOLATION_FEATURES
