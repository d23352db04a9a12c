"""Pricing configuration resolver — overhead, allocations and the COGS multiplier.

If allocations take 65% of revenue, COGS can only be 35% of revenue, so every
$1 of COGS must be billed at ``100 / 35 = 2.86``.  That multiplier prices the
primary line item.  Add-ons use their own lean markup instead.
"""

from __future__ import annotations

import logging

from scanquote.config import (
    MAX_COGS_MULTIPLIER,
    MIN_COGS_ROOM_PCT,
    OVERHEAD_NO_DATA_PCT,
    OVERHEAD_NO_REVENUE_PCT,
)
from scanquote.models.pricing import AddOnService, Multiplier, OverheadConfig, PricingConfig
from scanquote.rounding import round_half_up

logger = logging.getLogger(__name__)


def overhead_percent(overhead: OverheadConfig) -> float:
    """Overhead as a percent of revenue.

    A manual override wins outright.  Otherwise the rolling average of the
    most recent ``rolling_months`` entries is used.
    """
    if overhead.manual_override_pct is not None:
        return overhead.manual_override_pct
    return rolling_overhead_percent(overhead)


def rolling_overhead_percent(overhead: OverheadConfig) -> float:
    """Rolling-window overhead percent, ignoring any manual override.

    Returns 20 when there are no entries and 50 when average revenue is not
    positive.
    """
    entries = overhead.monthly_entries[-overhead.rolling_months:]
    if not entries:
        logger.debug("No monthly entries; overhead defaults to %s%%", OVERHEAD_NO_DATA_PCT)
        return OVERHEAD_NO_DATA_PCT

    avg_revenue = sum(e.revenue for e in entries) / len(entries)
    avg_overhead = sum(e.overhead for e in entries) / len(entries)

    if avg_revenue <= 0:
        logger.warning(
            "Average revenue %.2f over %d months; overhead set to %s%%",
            avg_revenue,
            len(entries),
            OVERHEAD_NO_REVENUE_PCT,
        )
        return OVERHEAD_NO_REVENUE_PCT
    return round_half_up(avg_overhead / avg_revenue * 100.0, 1)


def personnel_percent(config: PricingConfig) -> float:
    return sum(p.pct for p in config.personnel_allocations)


def profit_percent(config: PricingConfig) -> float:
    return sum(p.pct for p in config.profit_allocations)


def total_allocated_percent(config: PricingConfig) -> float:
    """Percent of revenue committed before COGS: personnel + profit + overhead."""
    return personnel_percent(config) + profit_percent(config) + overhead_percent(config.overhead)


def multiplier_for_allocation(allocated_pct: float) -> float:
    """COGS multiplier for a given total allocation percent."""
    room = 100.0 - allocated_pct
    if room <= MIN_COGS_ROOM_PCT:
        logger.warning(
            "COGS room %.1f%% is at or below %.1f%%; multiplier capped at %.0fx",
            room,
            MIN_COGS_ROOM_PCT,
            MAX_COGS_MULTIPLIER,
        )
        return MAX_COGS_MULTIPLIER
    return round_half_up(100.0 / room, 2)


def cogs_multiplier(config: PricingConfig) -> float:
    """Factor turning raw COGS into the primary line item's client price."""
    return multiplier_for_allocation(total_allocated_percent(config))


def primary_price(cost: float, config: PricingConfig) -> float:
    """Client price for a primary (architecture) line with COGS *cost*."""
    if cost < 0:
        raise ValueError(f"Cost cannot be negative: {cost}")
    return round_half_up(cost * cogs_multiplier(config), 2)


def add_on_unit_price(service: AddOnService) -> float:
    """Client price per unit for a lean add-on service."""
    return service.vendor_cost_per_unit * service.markup_factor


def apply_situational_multipliers(total: float, multipliers: list[Multiplier]) -> float:
    """Apply each multiplier's factor to a final quote total."""
    for m in multipliers:
        total *= m.factor
    return round_half_up(total, 2)


def apply_minimum(total: float, config: PricingConfig) -> float:
    """Bump *total* up to the configured minimum project value."""
    if total < config.minimum_project_value:
        logger.info(
            "Quote total %.2f below minimum %.2f; raised to minimum",
            total,
            config.minimum_project_value,
        )
        return config.minimum_project_value
    return total
