"""Analytics — historical scan performance."""

from scanquote.analytics.scan_metrics import calc_scan_metrics

__all__ = ["calc_scan_metrics"]
