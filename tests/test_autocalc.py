"""Tests for auto-calculated expedited and below-floor prices."""

from __future__ import annotations

import pytest

from scanquote.models.line_item import LineItemCategory, LineItemShell
from scanquote.scoping.autocalc import apply_auto_calc


def _line(id_: str, category: LineItemCategory, price=None, cost=None,
          area_id: str | None = "a1", square_feet: float | None = None) -> LineItemShell:
    return LineItemShell(
        id=id_,
        area_id=area_id,
        category=category,
        price=price,
        cost=cost,
        square_feet=square_feet,
    )


# ---------------------------------------------------------------------------
# Expedited surcharge
# ---------------------------------------------------------------------------

class TestExpedited:
    """Surcharge on modeling and add-on lines."""

    def _items(self, expedited_price=None):
        return [
            _line("li-1", LineItemCategory.ARCHITECTURE, 10000, 4000, square_feet=10000),
            _line("li-2", LineItemCategory.STRUCTURAL, 2000, 800, square_feet=10000),
            _line("li-3", LineItemCategory.TRAVEL, 1000, 500, area_id=None),
            _line("li-4", LineItemCategory.EXPEDITED, expedited_price, None, area_id=None),
            _line("li-5", LineItemCategory.CUSTOM, 500, 100),
        ]

    def test_surcharge_excludes_travel_and_custom(self):
        result = apply_auto_calc(self._items())
        expedited = result[3]
        assert expedited.price == pytest.approx(2400.0)
        assert expedited.cost == 0.0

    def test_custom_percentage(self):
        result = apply_auto_calc(self._items(), expedited_pct=0.5)
        assert result[3].price == pytest.approx(6000.0)

    def test_no_base_leaves_price_unset(self):
        items = [
            _line("li-1", LineItemCategory.ARCHITECTURE, square_feet=10000),
            _line("li-2", LineItemCategory.TRAVEL, 1000, 500, area_id=None),
            _line("li-3", LineItemCategory.EXPEDITED, area_id=None),
        ]
        result = apply_auto_calc(items)
        assert result[2].price is None
        assert result[2].cost == 0.0

    def test_edited_line_not_overwritten(self):
        result = apply_auto_calc(self._items(expedited_price=999.0), edited_id="li-4")
        assert result[3].price == 999.0
        assert result[3].cost is None

    def test_input_not_mutated(self):
        items = self._items()
        apply_auto_calc(items)
        assert items[3].price is None

    def test_no_expedited_line(self):
        items = self._items()
        del items[3]
        result = apply_auto_calc(items)
        assert [li.model_dump() for li in result] == [li.model_dump() for li in items]

    def test_half_cent_rounds_up(self):
        items = [
            _line("li-1", LineItemCategory.ARCHITECTURE, 0.25, 0.1, square_feet=1),
            _line("li-2", LineItemCategory.EXPEDITED, area_id=None),
        ]
        assert apply_auto_calc(items, expedited_pct=0.5)[1].price == 0.13


# ---------------------------------------------------------------------------
# Below floor
# ---------------------------------------------------------------------------

class TestBelowFloor:
    """Half the architecture rate per square foot."""

    def test_price_and_cost_from_architecture(self):
        items = [
            _line("li-1", LineItemCategory.ARCHITECTURE, 10000, 4000, square_feet=10000),
            _line("li-2", LineItemCategory.BELOW_FLOOR, square_feet=5000),
        ]
        result = apply_auto_calc(items)
        assert result[1].price == pytest.approx(2500.0)
        assert result[1].cost == pytest.approx(1000.0)

    def test_cost_falls_back_to_vendor_ratio(self):
        items = [
            _line("li-1", LineItemCategory.ARCHITECTURE, 10000, None, square_feet=10000),
            _line("li-2", LineItemCategory.BELOW_FLOOR, square_feet=5000),
        ]
        result = apply_auto_calc(items)
        assert result[1].cost == pytest.approx(1625.0)

    def test_unpriced_architecture_skipped(self):
        items = [
            _line("li-1", LineItemCategory.ARCHITECTURE, None, None, square_feet=10000),
            _line("li-2", LineItemCategory.BELOW_FLOOR, square_feet=5000),
        ]
        result = apply_auto_calc(items)
        assert result[1].price is None

    def test_other_area_not_used(self):
        items = [
            _line("li-1", LineItemCategory.ARCHITECTURE, 10000, 4000, area_id="a1", square_feet=10000),
            _line("li-2", LineItemCategory.BELOW_FLOOR, area_id="a2", square_feet=5000),
        ]
        result = apply_auto_calc(items)
        assert result[1].price is None

    def test_edited_line_not_overwritten(self):
        items = [
            _line("li-1", LineItemCategory.ARCHITECTURE, 10000, 4000, square_feet=10000),
            _line("li-2", LineItemCategory.BELOW_FLOOR, 123.0, 45.0, square_feet=5000),
        ]
        result = apply_auto_calc(items, edited_id="li-2")
        assert result[1].price == 123.0
        assert result[1].cost == 45.0

    def test_below_floor_feeds_expedited_base(self):
        items = [
            _line("li-1", LineItemCategory.ARCHITECTURE, 10000, 4000, square_feet=10000),
            _line("li-2", LineItemCategory.BELOW_FLOOR, 1000, 400, square_feet=5000),
            _line("li-3", LineItemCategory.EXPEDITED, area_id=None),
        ]
        result = apply_auto_calc(items)
        # expedited runs first, on the below-floor price as it stood
        assert result[2].price == pytest.approx(2200.0)
        assert result[1].price == pytest.approx(2500.0)
