"""Scan intelligence aggregator.

Turns completed scan records into throughput averages used to estimate scan
days for new work.  Ratios are sum-over-sum (total sqft / total scan days,
not the mean of per-job ratios) and are rounded half up to whole numbers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from scanquote.config import COMPLEXITY_SCORES, UNGROUPED_LABEL
from scanquote.models.scan import BuildingTypeMetrics, GroupMetrics, ScanMetrics, ScanRecord
from scanquote.rounding import round_half_up

logger = logging.getLogger(__name__)


def _ratio(numerator: float, denominator: float) -> float:
    if denominator <= 0:
        return 0.0
    return round_half_up(numerator / denominator)


def _group_key(value: str) -> str:
    value = (value or "").strip()
    return value or UNGROUPED_LABEL


def _ratios(records: list[ScanRecord]) -> dict[str, float]:
    sqft = sum(r.square_footage for r in records)
    days = sum(r.scan_days for r in records)
    positions = sum(r.num_scan_positions for r in records)
    minutes = sum(r.total_scan_minutes for r in records)
    return {
        "avg_sqft_per_day": _ratio(sqft, days),
        "avg_positions_per_day": _ratio(positions, days),
        "avg_minutes_per_position": _ratio(minutes, positions),
    }


def _group_by(records: list[ScanRecord], attr: str) -> dict[str, list[ScanRecord]]:
    groups: dict[str, list[ScanRecord]] = {}
    for r in records:
        groups.setdefault(_group_key(getattr(r, attr)), []).append(r)
    return {key: groups[key] for key in sorted(groups)}


def avg_complexity(records: list[ScanRecord]) -> float:
    """Mean complexity score (Low=1, Medium=2, High=3) to one decimal."""
    if not records:
        return 0.0
    total = sum(COMPLEXITY_SCORES[r.complexity.value] for r in records)
    return round_half_up(total / len(records), 1)


def calc_scan_metrics(records: Iterable[ScanRecord | dict]) -> ScanMetrics:
    """Aggregate *records* into a :class:`ScanMetrics`.

    Dict records are validated into :class:`ScanRecord` first.  An empty
    input yields all-zero metrics with empty groups.
    """
    parsed = [r if isinstance(r, ScanRecord) else ScanRecord.model_validate(r) for r in records]
    if not parsed:
        return ScanMetrics()

    overall = _ratios(parsed)

    by_building_type = {
        key: BuildingTypeMetrics(count=len(group), avg_complexity=avg_complexity(group), **_ratios(group))
        for key, group in _group_by(parsed, "building_type").items()
    }
    by_deliverable_type = {
        key: GroupMetrics(count=len(group), **_ratios(group))
        for key, group in _group_by(parsed, "deliverable_type").items()
    }

    logger.info(
        "Scan metrics from %d records: %d building types, %d deliverable types",
        len(parsed),
        len(by_building_type),
        len(by_deliverable_type),
    )

    return ScanMetrics(
        total_projects=len(parsed),
        avg_sqft_per_scan_day=overall["avg_sqft_per_day"],
        avg_scan_positions_per_day=overall["avg_positions_per_day"],
        avg_minutes_per_scan_position=overall["avg_minutes_per_position"],
        by_building_type=by_building_type,
        by_deliverable_type=by_deliverable_type,
    )
