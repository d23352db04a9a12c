"""Quote totals and the margin integrity gate.

  margin <  40%            -> blocked
  40% <= margin < 45%      -> warning
  margin >= 45%            -> passed

Any line without both a cost and a price blocks the quote regardless of
margin.  The status is recomputed from scratch on every call.
"""

from __future__ import annotations

import logging
import math

from scanquote.config import MARGIN_FLOOR_PCT, MARGIN_TARGET_PCT
from scanquote.models.line_item import IntegrityStatus, LineItemShell, QuoteTotals
from scanquote.rounding import round_half_up

logger = logging.getLogger(__name__)


def margin_percent(price: float, cost: float) -> float:
    """``(price - cost) / price * 100``; zero unless price is positive."""
    if price <= 0:
        return 0.0
    return (price - cost) / price * 100.0


def classify_margin(percent: float) -> IntegrityStatus:
    """Status for a fully priced quote at *percent* gross margin."""
    if not math.isfinite(percent) or percent < MARGIN_FLOOR_PCT:
        return IntegrityStatus.BLOCKED
    if percent < MARGIN_TARGET_PCT:
        return IntegrityStatus.WARNING
    return IntegrityStatus.PASSED


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def _amount(value: float | None) -> float | None:
    """*value*, or *None* when it is unset or not a finite number."""
    if value is None or not math.isfinite(value):
        return None
    return value


def compute_quote_totals(items: list[LineItemShell]) -> QuoteTotals:
    """Aggregate *items* and classify the quote's margin health.

    Unset prices and costs count as zero in the sums and are reported in
    ``integrity_flags``.  A NaN or infinite amount is treated as unset.
    The quote is blocked while anything is unpriced or while the total
    price is not positive.
    """
    total_price = 0.0
    total_cost = 0.0
    unpriced = 0
    negative = 0

    for item in items:
        price, cost = _amount(item.price), _amount(item.cost)
        total_price += price or 0.0
        total_cost += cost or 0.0
        if price is None or cost is None:
            unpriced += 1
        elif price < cost:
            negative += 1

    flags: list[str] = []
    if not (math.isfinite(total_price) and math.isfinite(total_cost)):
        flags.append("Quote totals overflow")
        total_price = total_cost = 0.0

    gross_margin = total_price - total_cost
    percent = margin_percent(total_price, total_cost)

    if unpriced:
        flags.append(f"{unpriced} line {_plural(unpriced, 'item', 'items')} not yet priced")
    if total_price <= 0:
        if not unpriced:
            flags.append(f"Total price {total_price:.2f} is not positive")
    elif percent < MARGIN_FLOOR_PCT:
        flags.append(f"Margin {percent:.1f}% is below {MARGIN_FLOOR_PCT:g}% minimum")
    elif percent < MARGIN_TARGET_PCT:
        flags.append(f"Margin {percent:.1f}% is below {MARGIN_TARGET_PCT:g}% target")
    if negative:
        flags.append(
            f"{negative} line {_plural(negative, 'item has', 'items have')} negative margin"
        )

    if unpriced or total_price <= 0:
        status = IntegrityStatus.BLOCKED
    else:
        status = classify_margin(percent)

    logger.debug(
        "Quote totals: price=%.2f cost=%.2f margin=%.2f%% status=%s",
        total_price,
        total_cost,
        percent,
        status.value,
    )

    return QuoteTotals(
        total_price=round_half_up(total_price, 2),
        total_cost=round_half_up(total_cost, 2),
        gross_margin=round_half_up(gross_margin, 2),
        gross_margin_percent=round_half_up(percent, 2),
        integrity_status=status,
        integrity_flags=flags,
        unpriced_count=unpriced,
    )
