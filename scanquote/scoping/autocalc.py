"""Auto-calculated prices for derived line items.

Two lines are derived from other lines' prices:

1. Expedited surcharge: a percentage of every priced modeling and add-on
   line (travel and custom excluded).
2. Below floor: a fraction of the same area's architecture rate per SF.

These are suggestions.  A line the user just edited by hand (``edited_id``)
is never overwritten.
"""

from __future__ import annotations

import logging

from scanquote.config import (
    BELOW_FLOOR_RATE_FRACTION,
    EXPEDITED_SURCHARGE_PCT,
    VENDOR_COST_FALLBACK_RATIO,
)
from scanquote.models.line_item import LineItemCategory, LineItemShell, ServiceGroup
from scanquote.rounding import round_half_up

logger = logging.getLogger(__name__)


def apply_auto_calc(
    items: list[LineItemShell],
    edited_id: str | None = None,
    *,
    expedited_pct: float = EXPEDITED_SURCHARGE_PCT,
    below_floor_fraction: float = BELOW_FLOOR_RATE_FRACTION,
    vendor_cost_ratio: float = VENDOR_COST_FALLBACK_RATIO,
) -> list[LineItemShell]:
    """Return a new list with auto-calculated prices applied.

    The input list and its items are not modified.
    """
    result = list(items)
    result = _apply_expedited(result, edited_id, expedited_pct)
    result = _apply_below_floor(result, edited_id, below_floor_fraction, vendor_cost_ratio)
    return result


def _expedited_base(items: list[LineItemShell]) -> float:
    return sum(
        li.price or 0.0
        for li in items
        if li.category is not LineItemCategory.EXPEDITED
        and li.group in (ServiceGroup.MODELING, ServiceGroup.ADD_ON)
    )


def _apply_expedited(
    items: list[LineItemShell],
    edited_id: str | None,
    pct: float,
) -> list[LineItemShell]:
    idx = next(
        (i for i, li in enumerate(items) if li.category is LineItemCategory.EXPEDITED),
        None,
    )
    if idx is None or items[idx].id == edited_id:
        return items

    base = _expedited_base(items)
    price = round_half_up(base * pct, 2) if base > 0 else None
    items[idx] = items[idx].model_copy(update={"price": price, "cost": 0.0})
    logger.debug("Expedited surcharge on %.2f base -> %s", base, price)
    return items


def _apply_below_floor(
    items: list[LineItemShell],
    edited_id: str | None,
    fraction: float,
    vendor_cost_ratio: float,
) -> list[LineItemShell]:
    for i, li in enumerate(items):
        if li.category is not LineItemCategory.BELOW_FLOOR or not li.area_id:
            continue
        if li.id == edited_id:
            continue

        arch = next(
            (
                a
                for a in items
                if a.area_id == li.area_id
                and a.category is LineItemCategory.ARCHITECTURE
                and a.price is not None
                and a.price > 0
            ),
            None,
        )
        if arch is None or not arch.square_feet or arch.square_feet <= 0:
            continue

        arch_rate = arch.price / arch.square_feet
        sqft = li.square_feet or arch.square_feet
        if arch.cost is not None:
            arch_cost_rate = arch.cost / arch.square_feet
        else:
            arch_cost_rate = arch_rate * vendor_cost_ratio

        items[i] = li.model_copy(
            update={
                "price": round_half_up(arch_rate * fraction * sqft, 2),
                "cost": round_half_up(arch_cost_rate * fraction * sqft, 2),
            }
        )
    return items
