"""Tests for quote totals and the margin integrity gate."""

from __future__ import annotations

import pytest

from scanquote.cost.totals import classify_margin, compute_quote_totals, margin_percent
from scanquote.models.line_item import IntegrityStatus, LineItemCategory, LineItemShell


def _line(n: int, price: float | None, cost: float | None,
          category: LineItemCategory = LineItemCategory.ARCHITECTURE) -> LineItemShell:
    return LineItemShell(id=f"li-{n}", category=category, price=price, cost=cost)


# ---------------------------------------------------------------------------
# Margin percent
# ---------------------------------------------------------------------------

class TestMarginPercent:
    """(price - cost) / price * 100 with a zero-price guard."""

    def test_basic(self):
        assert margin_percent(10000, 4000) == pytest.approx(60.0)

    def test_zero_price(self):
        assert margin_percent(0, 500) == 0.0

    def test_negative_price(self):
        assert margin_percent(-1000, 900) == 0.0

    def test_negative_margin(self):
        assert margin_percent(100, 150) == pytest.approx(-50.0)


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

class TestIntegrityGate:
    """Status thresholds at 40% and 45%."""

    @pytest.mark.parametrize(
        "cost,expected",
        [
            (7000, IntegrityStatus.BLOCKED),   # 30%
            (5800, IntegrityStatus.WARNING),   # 42%
            (5000, IntegrityStatus.PASSED),    # 50%
            (6000, IntegrityStatus.WARNING),   # exactly 40%
            (5500, IntegrityStatus.PASSED),    # exactly 45%
        ],
    )
    def test_boundary_table(self, cost, expected):
        totals = compute_quote_totals([_line(1, 10000, cost)])
        assert totals.integrity_status is expected

    def test_classify_exact_boundaries(self):
        assert classify_margin(39.99) is IntegrityStatus.BLOCKED
        assert classify_margin(40.0) is IntegrityStatus.WARNING
        assert classify_margin(44.99) is IntegrityStatus.WARNING
        assert classify_margin(45.0) is IntegrityStatus.PASSED

    def test_nan_percent_blocked(self):
        assert classify_margin(float("nan")) is IntegrityStatus.BLOCKED

    def test_unrounded_percent_is_classified(self):
        # 44.996% displays as 45.0 but is still below target
        totals = compute_quote_totals([_line(1, 100000, 55004)])
        assert totals.gross_margin_percent == pytest.approx(45.0)
        assert totals.integrity_status is IntegrityStatus.WARNING


class TestQuoteTotals:
    """Sums, margin and flags."""

    def test_worked_example(self):
        items = [
            _line(1, 2000, 1000, LineItemCategory.TRAVEL),
            _line(2, 10000, 4000),
        ]
        totals = compute_quote_totals(items)
        assert totals.total_price == 12000
        assert totals.total_cost == 5000
        assert totals.gross_margin == 7000
        assert totals.gross_margin_percent == pytest.approx(58.33, abs=0.01)
        assert totals.integrity_status is IntegrityStatus.PASSED
        assert totals.integrity_flags == []

    @pytest.mark.parametrize(
        "price,cost",
        [(None, 100.0), (100.0, None), (None, None)],
    )
    def test_any_unset_field_blocks(self, price, cost):
        items = [_line(1, 100000, 1000), _line(2, price, cost)]
        totals = compute_quote_totals(items)
        assert totals.integrity_status is IntegrityStatus.BLOCKED
        assert totals.unpriced_count == 1
        assert "1 line item not yet priced" in totals.integrity_flags

    def test_unset_counts_as_zero_in_sums(self):
        totals = compute_quote_totals([_line(1, 1000, 400), _line(2, 500, None)])
        assert totals.total_price == 1500
        assert totals.total_cost == 400

    def test_plural_unpriced_flag(self):
        totals = compute_quote_totals([_line(1, None, None), _line(2, None, None)])
        assert totals.integrity_flags == ["2 line items not yet priced"]
        assert totals.unpriced_count == 2

    def test_below_floor_flag(self):
        totals = compute_quote_totals([_line(1, 1000, 700)])
        assert totals.integrity_flags == ["Margin 30.0% is below 40% minimum"]

    def test_below_target_flag(self):
        totals = compute_quote_totals([_line(1, 1000, 580)])
        assert totals.integrity_flags == ["Margin 42.0% is below 45% target"]

    def test_negative_line_flag(self):
        items = [_line(1, 10000, 1000), _line(2, 100, 300)]
        totals = compute_quote_totals(items)
        assert "1 line item has negative margin" in totals.integrity_flags
        assert totals.integrity_status is IntegrityStatus.PASSED

    def test_empty_quote(self):
        totals = compute_quote_totals([])
        assert totals.total_price == 0
        assert totals.gross_margin_percent == 0
        assert totals.integrity_status is IntegrityStatus.BLOCKED
        assert totals.integrity_flags == ["Total price 0.00 is not positive"]

    def test_zero_price_no_division_error(self):
        totals = compute_quote_totals([_line(1, 0.0, 0.0)])
        assert totals.gross_margin_percent == 0.0
        assert totals.integrity_status is IntegrityStatus.BLOCKED

    def test_recomputed_each_call(self):
        items = [_line(1, 1000, None)]
        assert compute_quote_totals(items).integrity_status is IntegrityStatus.BLOCKED
        items[0] = items[0].model_copy(update={"cost": 300.0})
        assert compute_quote_totals(items).integrity_status is IntegrityStatus.PASSED

    def test_outputs_rounded(self):
        totals = compute_quote_totals([_line(1, 100.005, 33.333)])
        assert totals.total_cost == 33.33
        assert totals.gross_margin_percent == round(totals.gross_margin_percent, 2)

    def test_half_cent_rounds_up(self):
        totals = compute_quote_totals([_line(1, 0.125, 0.0)])
        assert totals.total_price == 0.13


class TestGateGuards:
    """Quotes that must never pass whatever their margin looks like."""

    def test_negative_total_blocked(self):
        items = [
            _line(1, 1000.0, 900.0),
            _line(2, -2000.0, 0.0, LineItemCategory.CUSTOM),
        ]
        totals = compute_quote_totals(items)
        assert totals.total_price == -1000.0
        assert totals.gross_margin_percent == 0.0
        assert totals.integrity_status is IntegrityStatus.BLOCKED
        assert "Total price -1000.00 is not positive" in totals.integrity_flags

    def test_zero_total_with_everything_priced_blocked(self):
        items = [_line(1, 500.0, 0.0), _line(2, -500.0, 0.0, LineItemCategory.CUSTOM)]
        assert compute_quote_totals(items).integrity_status is IntegrityStatus.BLOCKED

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_price_treated_as_unpriced(self, bad):
        item = LineItemShell.model_construct(
            id="li-1", category=LineItemCategory.ARCHITECTURE, price=bad, cost=100.0
        )
        totals = compute_quote_totals([item])
        assert totals.integrity_status is IntegrityStatus.BLOCKED
        assert totals.unpriced_count == 1
        assert totals.gross_margin_percent == 0.0
        assert totals.total_price == 0.0

    def test_non_finite_cost_does_not_poison_sums(self):
        good = _line(1, 10000.0, 4000.0)
        bad = LineItemShell.model_construct(
            id="li-2", category=LineItemCategory.TRAVEL, price=500.0, cost=float("nan")
        )
        totals = compute_quote_totals([good, bad])
        assert totals.total_price == 10500.0
        assert totals.total_cost == 4000.0
        assert totals.integrity_status is IntegrityStatus.BLOCKED

    def test_overflowing_totals_blocked(self):
        items = [_line(1, 1e308, 0.0), _line(2, 1e308, 0.0)]
        totals = compute_quote_totals(items)
        assert totals.integrity_status is IntegrityStatus.BLOCKED
        assert "Quote totals overflow" in totals.integrity_flags
        assert totals.total_price == 0.0
