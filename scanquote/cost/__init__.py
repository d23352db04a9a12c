"""Cost — pricing resolver, integrity gate, travel and the quote engine."""

from scanquote.cost.engine import QuoteEngine
from scanquote.cost.report import QuoteReport, pricing_config_to_prompt
from scanquote.cost.schedule import estimate_scan_days
from scanquote.cost.totals import compute_quote_totals
from scanquote.cost.travel import compute_travel_cost

__all__ = [
    "QuoteEngine",
    "QuoteReport",
    "compute_quote_totals",
    "compute_travel_cost",
    "estimate_scan_days",
    "pricing_config_to_prompt",
]
