"""Scan-day estimate from area footage and historical throughput."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from scanquote.config import MIN_SCAN_DAYS
from scanquote.models.scan import ScanMetrics
from scanquote.models.scope import AreaInput

logger = logging.getLogger(__name__)


def sqft_per_scan_day(building_type: str, metrics: ScanMetrics) -> float:
    """Throughput for *building_type*, or the overall average when unknown."""
    group = metrics.by_building_type.get(building_type.strip())
    if group is not None and group.avg_sqft_per_day > 0:
        return group.avg_sqft_per_day
    return metrics.avg_sqft_per_scan_day


def estimate_scan_days(areas: Iterable[AreaInput], metrics: ScanMetrics) -> int:
    """Field days needed to scan *areas*.

    Each area's footage is divided by the throughput recorded for its
    building type.  The fractional days are summed and rounded up, with a
    minimum of one day.  Areas with no usable throughput add nothing.
    """
    days = 0.0
    for area in areas:
        rate = sqft_per_scan_day(area.area_type, metrics)
        if rate <= 0:
            logger.debug("No scan throughput for %r; area %s not counted", area.area_type, area.id)
            continue
        days += area.square_footage / rate
    return max(MIN_SCAN_DAYS, math.ceil(days))
