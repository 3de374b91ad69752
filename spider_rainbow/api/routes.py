"""API route definitions for the Spider Rainbow service."""

from __future__ import annotations

import math
from typing import Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ..core.config import config
from ..core.logger import log
from ..zones import (
    BoundingRect,
    CollectingNavigator,
    MeasuredElement,
    PointerEvent,
    build_zone_policies,
    resolve_click,
)
from ..zones.models import ZonePolicy

# Create router instances
zone_router = APIRouter()

# Named zone policies for the page
zone_policies: Optional[Dict[str, ZonePolicy]] = None


def get_zone_policies() -> Dict[str, ZonePolicy]:
    """Get or build the page's named zone policies."""
    global zone_policies
    if zone_policies is None:
        zone_policies = build_zone_policies(config)
    return zone_policies


# Pydantic models for request/response
class RectModel(BaseModel):
    """Bounding rect of the clicked element, measured at click time."""
    left: float
    top: float
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)


class ClickRequest(BaseModel):
    """Request model for a click on a zoned element."""
    client_x: float
    client_y: float
    rect: RectModel


class NavigationModel(BaseModel):
    """Navigation the page should perform."""
    url: str
    target: str
    features: str


class ClickResponse(BaseModel):
    """Response model for a resolved click."""
    zone: str
    percent_x: Optional[float] = None
    percent_y: Optional[float] = None
    navigation: Optional[NavigationModel] = None


class ZoneListResponse(BaseModel):
    """Response model for the zone listing."""
    zones: List[str]


def _finite_or_none(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


@zone_router.get("", response_model=ZoneListResponse)
async def list_zones():
    """List the names of clickable zone layouts."""
    return ZoneListResponse(zones=sorted(get_zone_policies()))


@zone_router.post("/{name}/click", response_model=ClickResponse)
async def click_zone(name: str, request: ClickRequest):
    """Resolve a click on a zoned element to the navigation it triggers."""
    policy = get_zone_policies().get(name)
    if policy is None:
        raise HTTPException(status_code=404, detail=f"Unknown zone: {name}")

    element = MeasuredElement(BoundingRect(**request.rect.model_dump()))
    event = PointerEvent(request.client_x, request.client_y, element)
    navigator = CollectingNavigator()

    position, destination = resolve_click(policy, navigator, event)
    log.log_zone_click(name, position.percent_x, position.percent_y, destination)

    request_made = navigator.last_request
    return ClickResponse(
        zone=name,
        percent_x=_finite_or_none(position.percent_x),
        percent_y=_finite_or_none(position.percent_y),
        navigation=NavigationModel(
            url=request_made.url,
            target=request_made.target,
            features=request_made.features,
        ) if request_made else None,
    )
