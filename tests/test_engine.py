"""Tests for QuoteEngine — the end-to-end quote flow."""

from __future__ import annotations

import pytest

from scanquote.cost.engine import QuoteEngine
from scanquote.cost.report import QuoteReport
from scanquote.models.line_item import IntegrityStatus, LineItemCategory, QuoteTotals
from scanquote.models.pricing import Multiplier, OverheadConfig, PricingConfig
from scanquote.scoping.ids import IdSequence


def _project(**overrides):
    project = {
        "dispatch_location": "Troy, NY",
        "one_way_miles": 40,
        "travel_mode": "Truck",
        "expedited": True,
        "areas": [
            {
                "id": "a1",
                "area_type": "Office",
                "square_footage": 10000,
                "project_scope": "Full",
                "lod": "300",
                "structural": {"enabled": True},
                "below_floor": {"enabled": True},
            }
        ],
    }
    project.update(overrides)
    return project


@pytest.fixture
def engine() -> QuoteEngine:
    return QuoteEngine()


# ---------------------------------------------------------------------------
# Resolver access
# ---------------------------------------------------------------------------

class TestResolver:
    """Multiplier, overhead and scan metrics from the engine's config."""

    def test_defaults_to_seed_config(self, engine):
        assert engine.multiplier() == pytest.approx(4.78)
        assert engine.overhead() == pytest.approx(20.1)
        assert engine.scan_metrics().total_projects == 4

    def test_custom_config(self):
        engine = QuoteEngine(PricingConfig(overhead=OverheadConfig(manual_override_pct=50.0)))
        assert engine.overhead() == 50.0
        assert engine.multiplier() == pytest.approx(2.0)
        assert engine.scan_metrics().total_projects == 0

    def test_engines_do_not_share_config(self):
        first = QuoteEngine()
        first.config.overhead.manual_override_pct = 90.0
        assert QuoteEngine().overhead() == pytest.approx(20.1)


# ---------------------------------------------------------------------------
# Pricing lines
# ---------------------------------------------------------------------------

class TestPricing:
    """Primary and add-on pricing of shells."""

    def test_generate(self, engine):
        shells = engine.generate(_project())
        assert [s.category for s in shells] == [
            LineItemCategory.ARCHITECTURE,
            LineItemCategory.STRUCTURAL,
            LineItemCategory.BELOW_FLOOR,
            LineItemCategory.TRAVEL,
            LineItemCategory.EXPEDITED,
        ]

    def test_generate_with_sequence(self, engine):
        ids = IdSequence(start=100)
        shells = engine.generate(_project(), ids)
        assert shells[0].id == "li-101"

    def test_price_primary(self, engine):
        arch = engine.generate(_project())[0]
        priced = engine.price_primary(arch, 4000.0)
        assert priced.cost == 4000.0
        assert priced.price == pytest.approx(19120.0)
        assert arch.price is None

    def test_price_add_on_by_id(self, engine):
        structural = engine.generate(_project())[1]
        priced = engine.price_add_on(structural, "ao-1")
        assert priced.cost == pytest.approx(800.0)
        assert priced.price == pytest.approx(1000.0)

    def test_price_add_on_by_label(self, engine):
        structural = engine.generate(_project())[1]
        priced = engine.price_add_on(structural, "structural modeling", quantity=2000)
        assert priced.cost == pytest.approx(160.0)
        assert priced.price == pytest.approx(200.0)

    def test_price_add_on_unknown(self, engine):
        structural = engine.generate(_project())[1]
        with pytest.raises(KeyError):
            engine.price_add_on(structural, "Laser Show")

    def test_price_add_on_needs_quantity(self, engine):
        travel = engine.generate(_project())[3]
        with pytest.raises(ValueError):
            engine.price_add_on(travel, "ao-5")

    def test_price_add_on_flat_quantity(self, engine):
        travel = engine.generate(_project())[3]
        priced = engine.price_add_on(travel, "ao-5", quantity=1)
        assert priced.price == pytest.approx(1500.0)


# ---------------------------------------------------------------------------
# Evaluate
# ---------------------------------------------------------------------------

class TestEvaluate:
    """Auto-calc, totals and the integrity verdict together."""

    def test_unpriced_quote_blocked(self, engine):
        report = engine.evaluate(engine.generate(_project()))
        assert isinstance(report, QuoteReport)
        assert report.totals.integrity_status is IntegrityStatus.BLOCKED
        assert not report.can_send

    def test_full_flow(self, engine):
        shells = engine.generate(_project())
        shells[0] = engine.price_primary(shells[0], 2000.0)
        shells[1] = engine.price_add_on(shells[1], "ao-1")
        shells[3] = shells[3].model_copy(update={"cost": 300.0, "price": 500.0})

        report = engine.evaluate(shells, title="Office")
        items = {s.category: s for s in report.items}

        assert items[LineItemCategory.BELOW_FLOOR].price == pytest.approx(4780.0)
        assert items[LineItemCategory.BELOW_FLOOR].cost == pytest.approx(1000.0)
        # surcharge on architecture + structural; below floor was unpriced when it ran
        assert items[LineItemCategory.EXPEDITED].price == pytest.approx(2112.0)
        assert report.totals.unpriced_count == 0
        assert report.totals.integrity_status is IntegrityStatus.PASSED
        assert report.can_send

    def test_second_evaluate_includes_below_floor(self, engine):
        shells = engine.generate(_project())
        shells[0] = engine.price_primary(shells[0], 2000.0)
        shells[1] = engine.price_add_on(shells[1], "ao-1")
        shells[3] = shells[3].model_copy(update={"cost": 300.0, "price": 500.0})

        first = engine.evaluate(shells)
        second = engine.evaluate(first.items)
        expedited = second.items[4]
        assert expedited.price == pytest.approx((9560.0 + 1000.0 + 4780.0) * 0.2)

    def test_edited_line_respected(self, engine):
        shells = engine.generate(_project())
        shells[4] = shells[4].model_copy(update={"cost": 0.0, "price": 50.0})
        report = engine.evaluate(shells, edited_id=shells[4].id)
        assert report.items[4].price == 50.0

    def test_totals(self, engine):
        shells = engine.generate(_project())
        totals = engine.totals(shells)
        assert totals.unpriced_count == len(shells)


class TestFinalTotal:
    """Situational multipliers and the minimum."""

    def test_minimum_applied(self, engine):
        assert engine.final_total(QuoteTotals(total_price=1000.0)) == 2500.0

    def test_named_multiplier(self, engine):
        totals = QuoteTotals(total_price=10000.0)
        assert engine.final_total(totals, ["Rush (< 1 week)"]) == pytest.approx(15000.0)

    def test_multiplier_by_id_and_object(self, engine):
        totals = QuoteTotals(total_price=10000.0)
        result = engine.final_total(totals, ["mul-3", Multiplier(name="Custom", factor=0.5)])
        assert result == pytest.approx(6500.0)

    def test_unknown_multiplier(self, engine):
        with pytest.raises(KeyError):
            engine.final_total(QuoteTotals(total_price=10000.0), ["Full Moon"])

    def test_to_prompt(self, engine):
        assert "COGS MULTIPLIER: 4.78x" in engine.to_prompt()


# ---------------------------------------------------------------------------
# Travel
# ---------------------------------------------------------------------------

class TestTravel:
    """Scan days from the seed history and the travel estimate."""

    def test_scan_days(self, engine):
        assert engine.scan_days(_project()) == 1

    def test_scan_days_multi_day(self, engine):
        project = _project()
        project["areas"][0]["square_footage"] = 40000
        assert engine.scan_days(project) == 3

    def test_travel_cost_round_trip(self, engine):
        assert engine.travel_cost(_project()) == 160.0

    def test_explicit_scan_days(self, engine):
        assert engine.travel_cost(_project(), scan_days=3) == 480.0

    def test_project_mileage_rate(self, engine):
        assert engine.travel_cost(_project(mileage_rate=0.67)) == pytest.approx(26.8)

    def test_custom_travel_cost_wins(self, engine):
        assert engine.travel_cost(_project(custom_travel_cost=350, mileage_rate=0.67)) == 350.0

    def test_no_miles(self, engine):
        assert engine.travel_cost(_project(one_way_miles=0)) == 0.0
