"""Travel cost from one-way distance, field days and crew size.

  miles <= local_max_miles             -> local flat fee
  miles >  airfare_threshold_miles     -> flight
  otherwise                            -> drive

Drives beyond ``overnight_threshold_miles`` make one trip and stay over.
Shorter drives are a round trip every scan day.
"""

from __future__ import annotations

import logging
from enum import Enum

from scanquote.models.pricing import TravelParams
from scanquote.rounding import round_half_up

logger = logging.getLogger(__name__)


class TravelBand(str, Enum):
    LOCAL = "local"
    DRIVE = "drive"
    FLIGHT = "flight"


def travel_band(miles: float, params: TravelParams) -> TravelBand:
    if miles <= params.local_max_miles:
        return TravelBand.LOCAL
    if miles > params.airfare_threshold_miles:
        return TravelBand.FLIGHT
    return TravelBand.DRIVE


def compute_travel_cost(
    params: TravelParams,
    miles: float,
    scan_days: int,
    num_techs: int = 1,
) -> float:
    """Travel cost for a trip of *miles* one way.

    Returns 0 when *miles* is not positive.
    """
    if scan_days < 1 or num_techs < 1:
        raise ValueError(f"scan_days and num_techs must be at least 1, got {scan_days} and {num_techs}")
    if miles <= 0:
        return 0.0

    band = travel_band(miles, params)
    if band is TravelBand.LOCAL:
        cost = params.local_flat_single_day if scan_days <= 1 else params.local_flat_multi_day
    elif band is TravelBand.DRIVE:
        if miles > params.overnight_threshold_miles:
            cost = miles * params.mileage_rate + _stay(params, scan_days)
        else:
            cost = miles * params.mileage_rate * scan_days
    else:
        cost = (
            params.airfare_per_tech * num_techs
            # one extra rental day for the travel day
            + params.car_rental_per_day * (scan_days + 1)
            + params.airport_parking
            + _stay(params, scan_days)
        )

    cost = round_half_up(cost, 2)
    logger.debug(
        "Travel %s for %.1f mi, %d days, %d techs -> %.2f",
        band.value,
        miles,
        scan_days,
        num_techs,
        cost,
    )
    return cost


def _stay(params: TravelParams, scan_days: int) -> float:
    return (params.hotel_per_night + params.per_diem) * scan_days
