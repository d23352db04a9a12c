"""scanquote — quote generation and margin-integrity engine for scan-to-BIM work."""

__version__ = "0.1.0"

from scanquote.analytics.scan_metrics import calc_scan_metrics
from scanquote.cost.engine import QuoteEngine
from scanquote.cost.pricing import cogs_multiplier, overhead_percent, total_allocated_percent
from scanquote.cost.report import QuoteReport, pricing_config_to_prompt
from scanquote.cost.totals import compute_quote_totals
from scanquote.models import (
    IntegrityStatus,
    LineItemCategory,
    LineItemShell,
    PricingConfig,
    ProjectInput,
    QuoteTotals,
    ScanMetrics,
    ScanRecord,
    ScopeValidationError,
)
from scanquote.scoping import IdSequence, apply_auto_calc, generate_line_item_shells

__all__ = [
    "IdSequence",
    "IntegrityStatus",
    "LineItemCategory",
    "LineItemShell",
    "PricingConfig",
    "ProjectInput",
    "QuoteEngine",
    "QuoteReport",
    "QuoteTotals",
    "ScanMetrics",
    "ScanRecord",
    "ScopeValidationError",
    "apply_auto_calc",
    "calc_scan_metrics",
    "cogs_multiplier",
    "compute_quote_totals",
    "generate_line_item_shells",
    "overhead_percent",
    "pricing_config_to_prompt",
    "total_allocated_percent",
]
