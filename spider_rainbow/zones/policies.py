"""Zone policies used by the page's clickable images."""

from __future__ import annotations

import math
from typing import Dict, Optional

from ..core.config import Config
from .models import Destination, ZonePolicy

CENTER = 50.0


def vertical_split(top: Destination, bottom: Destination, threshold: float = CENTER) -> ZonePolicy:
    """Two zones stacked vertically: above ``threshold`` percent is ``top``."""

    def policy(percent_x: float, percent_y: float) -> Optional[Destination]:
        if not (math.isfinite(percent_x) and math.isfinite(percent_y)):
            return None
        return top if percent_y < threshold else bottom

    return policy


def quadrants(
    top_left: Destination,
    top_right: Destination,
    bottom_left: Destination,
    bottom_right: Destination,
) -> ZonePolicy:
    """Four zones split at the element's center on both axes."""

    def policy(percent_x: float, percent_y: float) -> Optional[Destination]:
        if not (math.isfinite(percent_x) and math.isfinite(percent_y)):
            return None
        if percent_y < CENTER:
            return top_left if percent_x < CENTER else top_right
        return bottom_left if percent_x < CENTER else bottom_right

    return policy


def build_zone_policies(cfg: Config) -> Dict[str, ZonePolicy]:
    """Build the named zone policies for the page from configuration."""
    policies: Dict[str, ZonePolicy] = {
        "spider": vertical_split(cfg.spider_top_url, cfg.spider_bottom_url, cfg.spider_split_percent),
    }
    if len(cfg.surprise_spider_urls) == 4:
        policies["surprise-spider"] = quadrants(*cfg.surprise_spider_urls)
    return policies
