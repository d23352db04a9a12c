"""QuoteEngine — main entry point for scoping, pricing and the integrity gate.

Usage::

    from scanquote.cost import QuoteEngine

    engine = QuoteEngine()
    shells = engine.generate(project)
    shells[0] = engine.price_primary(shells[0], cost=4000.0)
    report = engine.evaluate(shells)
"""

from __future__ import annotations

import logging
from typing import Any

from scanquote.analytics.scan_metrics import calc_scan_metrics
from scanquote.cost.pricing import (
    add_on_unit_price,
    apply_minimum,
    apply_situational_multipliers,
    cogs_multiplier,
    overhead_percent,
    primary_price,
)
from scanquote.cost.report import QuoteReport, pricing_config_to_prompt
from scanquote.cost.schedule import estimate_scan_days
from scanquote.cost.seed_data import default_pricing_config
from scanquote.cost.totals import compute_quote_totals
from scanquote.cost.travel import compute_travel_cost
from scanquote.models.line_item import LineItemShell, QuoteTotals
from scanquote.models.pricing import AddOnService, Multiplier, PricingConfig
from scanquote.models.scan import ScanMetrics
from scanquote.models.scope import ProjectInput
from scanquote.rounding import round_half_up
from scanquote.scoping.autocalc import apply_auto_calc
from scanquote.scoping.generator import generate_line_item_shells
from scanquote.scoping.ids import IdSequence

logger = logging.getLogger(__name__)


class QuoteEngine:
    """Quote generation and margin-integrity engine.

    Parameters
    ----------
    config:
        Pricing configuration.  Defaults to the embedded seed data.
    """

    def __init__(self, config: PricingConfig | None = None) -> None:
        self.config = config or default_pricing_config()

    # -- scoping ------------------------------------------------------------

    def generate(
        self,
        project: ProjectInput | dict[str, Any],
        ids: IdSequence | None = None,
    ) -> list[LineItemShell]:
        """Generate unpriced line item shells for *project*."""
        return generate_line_item_shells(project, ids)

    # -- pricing ------------------------------------------------------------

    def multiplier(self) -> float:
        return cogs_multiplier(self.config)

    def overhead(self) -> float:
        return overhead_percent(self.config.overhead)

    def scan_metrics(self) -> ScanMetrics:
        return calc_scan_metrics(self.config.scan_intelligence.records)

    def price_primary(self, item: LineItemShell, cost: float) -> LineItemShell:
        """Return a copy of *item* priced at ``cost`` times the COGS multiplier."""
        return item.model_copy(
            update={"cost": round_half_up(cost, 2), "price": primary_price(cost, self.config)}
        )

    def price_add_on(
        self,
        item: LineItemShell,
        service: AddOnService | str,
        quantity: float | None = None,
    ) -> LineItemShell:
        """Return a copy of *item* priced with the lean add-on markup.

        *service* may be an :class:`AddOnService` or an id/label known to the
        configuration.  *quantity* defaults to the line's square feet.

        Raises
        ------
        KeyError
            If *service* names an add-on the configuration does not have.
        ValueError
            If no quantity is given and the line carries no square feet.
        """
        if isinstance(service, str):
            found = self.config.find_add_on(service)
            if found is None:
                raise KeyError(f"Unknown add-on service: {service!r}")
            service = found

        if quantity is None:
            quantity = item.square_feet
        if quantity is None or quantity < 0:
            raise ValueError(f"Add-on quantity must be a non-negative number, got {quantity!r}")

        cost = round_half_up(service.vendor_cost_per_unit * quantity, 2)
        price = round_half_up(add_on_unit_price(service) * quantity, 2)
        logger.debug("Priced %s with %s x %s: cost=%.2f price=%.2f", item.id, service.label, quantity, cost, price)
        return item.model_copy(update={"cost": cost, "price": price})

    def final_total(
        self,
        totals: QuoteTotals,
        multipliers: list[Multiplier | str] | None = None,
    ) -> float:
        """Client-facing total after situational multipliers and the minimum.

        String entries in *multipliers* are matched against configured
        multiplier ids or names.
        """
        resolved: list[Multiplier] = []
        for m in multipliers or []:
            if isinstance(m, Multiplier):
                resolved.append(m)
                continue
            match = next((c for c in self.config.multipliers if m in (c.id, c.name)), None)
            if match is None:
                raise KeyError(f"Unknown multiplier: {m!r}")
            resolved.append(match)

        total = apply_situational_multipliers(totals.total_price, resolved)
        return apply_minimum(total, self.config)

    # -- travel -------------------------------------------------------------

    def scan_days(self, project: ProjectInput | dict[str, Any]) -> int:
        """Estimated field days for *project* from the scan history."""
        project = ProjectInput.coerce(project)
        return estimate_scan_days(project.areas, self.scan_metrics())

    def travel_cost(
        self,
        project: ProjectInput | dict[str, Any],
        scan_days: int | None = None,
        num_techs: int = 1,
    ) -> float:
        """Travel cost for *project*.

        A custom travel cost on the project wins outright.  Otherwise the
        cost is computed from the one-way miles, with the project's mileage
        rate replacing the configured one when given.  *scan_days* defaults
        to :meth:`scan_days`.
        """
        project = ProjectInput.coerce(project)
        if project.custom_travel_cost is not None:
            return project.custom_travel_cost

        params = self.config.travel
        if project.mileage_rate is not None:
            params = params.model_copy(update={"mileage_rate": project.mileage_rate})
        if scan_days is None:
            scan_days = self.scan_days(project)
        return compute_travel_cost(params, project.one_way_miles, scan_days, num_techs)

    # -- integrity gate -----------------------------------------------------

    def totals(self, items: list[LineItemShell]) -> QuoteTotals:
        return compute_quote_totals(items)

    def evaluate(
        self,
        items: list[LineItemShell],
        edited_id: str | None = None,
        *,
        title: str = "",
    ) -> QuoteReport:
        """Apply auto-calculated prices, then total and classify *items*."""
        priced = apply_auto_calc(items, edited_id)
        totals = compute_quote_totals(priced)
        logger.info(
            "Evaluated %d line items: %s at %.2f%% margin",
            len(priced),
            totals.integrity_status.value,
            totals.gross_margin_percent,
        )
        return QuoteReport(items=priced, totals=totals, title=title)

    def to_prompt(self) -> str:
        """Pricing configuration rendered as assistant context."""
        return pricing_config_to_prompt(self.config)
