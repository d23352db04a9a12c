"""Plain data models exchanged with the calling layer."""

from scanquote.models.line_item import (
    IntegrityStatus,
    LineItemCategory,
    LineItemShell,
    QuoteTotals,
    ServiceGroup,
)
from scanquote.models.pricing import PricingConfig
from scanquote.models.scan import ScanMetrics, ScanRecord
from scanquote.models.scope import AreaInput, ProjectInput, ScopeValidationError

__all__ = [
    "AreaInput",
    "IntegrityStatus",
    "LineItemCategory",
    "LineItemShell",
    "PricingConfig",
    "ProjectInput",
    "QuoteTotals",
    "ScanMetrics",
    "ScanRecord",
    "ScopeValidationError",
    "ServiceGroup",
]
