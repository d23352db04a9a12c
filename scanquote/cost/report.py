"""QuoteReport model and text rendering of quotes and pricing configuration."""

from __future__ import annotations

import json
from typing import Any

from scanquote.analytics.scan_metrics import calc_scan_metrics
from scanquote.cost.pricing import (
    add_on_unit_price,
    cogs_multiplier,
    overhead_percent,
    personnel_percent,
    profit_percent,
    total_allocated_percent,
)
from scanquote.models.line_item import IntegrityStatus, LineItemShell, QuoteTotals
from scanquote.models.pricing import CostInput, PricingConfig


def _money(value: float | None) -> str:
    if value is None:
        return "—"
    return f"${value:,.2f}"


class QuoteReport:
    """Priced line items together with their totals and integrity verdict."""

    def __init__(
        self,
        items: list[LineItemShell] | None = None,
        totals: QuoteTotals | None = None,
        title: str = "",
    ) -> None:
        self.items = items or []
        self.totals = totals or QuoteTotals()
        self.title = title

    @property
    def status(self) -> str:
        return self.totals.integrity_status.value

    @property
    def can_send(self) -> bool:
        """A blocked quote must not go to the client."""
        return self.totals.integrity_status is not IntegrityStatus.BLOCKED

    def to_markdown(self) -> str:
        """Generate QUOTE.md content."""
        lines: list[str] = []

        lines.append(f"# Quote — {self.title or 'Untitled'}")
        lines.append("")
        lines.append(f"**Integrity:** {self.status.upper()}")
        lines.append("")

        lines.append("## Line Items")
        lines.append("")
        lines.append("| # | Area | Description | Cost | Price |")
        lines.append("|---|------|-------------|------|-------|")
        for n, item in enumerate(self.items, start=1):
            lines.append(
                f"| {n} | {item.area_name} | {item.description} "
                f"| {_money(item.cost)} | {_money(item.price)} |"
            )
        lines.append("")

        t = self.totals
        lines.append("## Totals")
        lines.append("")
        lines.append("| Measure | Value |")
        lines.append("|---------|-------|")
        lines.append(f"| Total Cost | {_money(t.total_cost)} |")
        lines.append(f"| Total Price | {_money(t.total_price)} |")
        lines.append(f"| Gross Margin | {_money(t.gross_margin)} |")
        lines.append(f"| **Gross Margin %** | **{t.gross_margin_percent:.2f}%** |")
        lines.append("")

        if t.integrity_flags:
            lines.append("## Flags")
            lines.append("")
            for flag in t.integrity_flags:
                lines.append(f"- {flag}")
            lines.append("")

        return "\n".join(lines)

    def to_json(self) -> str:
        """Return structured JSON for audit trail."""
        return json.dumps(self.to_dict(), indent=2, default=str)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "items": [item.model_dump(mode="json") for item in self.items],
            "totals": self.totals.model_dump(mode="json"),
        }


# ---------------------------------------------------------------------------
# Pricing configuration as assistant context
# ---------------------------------------------------------------------------


def _cost_line(c: CostInput) -> str:
    line = f"  - {c.label}: ${c.cost_per_unit:g} per {c.unit} ({c.vendor})"
    if c.notes:
        line += f" — {c.notes}"
    return line


def _scan_intelligence_section(config: PricingConfig) -> list[str]:
    metrics = calc_scan_metrics(config.scan_intelligence.records)
    if metrics.total_projects == 0:
        return []

    lines = [
        "─── SCAN INTELLIGENCE (Historical Performance Data) ───",
        f"Based on {metrics.total_projects} completed projects:",
        "",
        "Overall Averages:",
        f"  - Average sq ft covered per scan day: {metrics.avg_sqft_per_scan_day:,.0f}",
        f"  - Average scan positions per day: {metrics.avg_scan_positions_per_day:g}",
        f"  - Average minutes per scan position: {metrics.avg_minutes_per_scan_position:g}",
        "",
        "Performance by Building Type:",
    ]
    for name, bt in metrics.by_building_type.items():
        lines.append(
            f"  - {name}: {bt.count} projects, avg {bt.avg_sqft_per_day:,.0f} sqft/day, "
            f"avg {bt.avg_positions_per_day:g} positions/day, complexity {bt.avg_complexity:g}/3"
        )
    lines.append("")
    lines.append("Performance by Deliverable Type:")
    for name, dt in metrics.by_deliverable_type.items():
        lines.append(f"  - {name}: {dt.count} projects, avg {dt.avg_sqft_per_day:,.0f} sqft/day")
    lines.extend([
        "",
        "USE THESE METRICS to estimate scan days more accurately:",
        "- Match the project to the closest building type above.",
        "- Use that building type's avg sqft/day to estimate scan days needed.",
        "- Adjust up for higher complexity (more rooms, MEP-heavy, restricted access).",
        "- Adjust down for simpler open-plan spaces or repeat projects.",
        "- If the building type isn't in the data, use the overall average.",
        "",
    ])
    return lines


def pricing_config_to_prompt(config: PricingConfig) -> str:
    """Render *config* and its derived figures as plain-text assistant context."""
    overhead_pct = overhead_percent(config.overhead)
    allocated = total_allocated_percent(config)
    multiplier = cogs_multiplier(config)
    minimum = f"{config.minimum_project_value:g}"

    lines: list[str] = [
        "=== SCAN PRICING ENGINE — PROFIT-FIRST MODEL (CONFIDENTIAL) ===",
        "",
        "STRUCTURE:",
        "The primary line item (architectural scan-to-BIM) carries ALL the profit.",
        "Add-on services are priced lean: vendor cost × small markup.",
        "",
        "─── COST OF GOODS SOLD (COGS) ───",
        "",
        "Scanning Costs:",
    ]
    lines.extend(_cost_line(c) for c in config.scan_costs)
    lines.append("")
    lines.append("Modeling / Vendor Costs:")
    lines.extend(_cost_line(c) for c in config.modeling_costs)
    lines.append("")

    lines.append("─── PERSONNEL ALLOCATIONS (% of revenue) ───")
    lines.extend(f"  - {p.name} ({p.role}): {p.pct:g}%" for p in config.personnel_allocations)
    lines.append(f"  Personnel subtotal: {personnel_percent(config):g}%")
    lines.append("")

    lines.append("─── ABOVE-THE-LINE ALLOCATIONS (% of revenue) ───")
    for p in config.profit_allocations:
        line = f"  - {p.label}: {p.pct:g}%"
        if p.flexible:
            line += " (flexible)"
        if p.notes:
            line += f" — {p.notes}"
        lines.append(line)
    lines.append(f"  Above-the-line subtotal: {profit_percent(config):g}%")
    lines.append("")

    lines.append("─── OVERHEAD ───")
    lines.append(f"  Rolling {config.overhead.rolling_months}-month average: {overhead_pct:g}% of revenue")
    if config.overhead.manual_override_pct is not None:
        lines.append(f"  (Manual override active: {config.overhead.manual_override_pct:g}%)")
    else:
        lines.append("  (Calculated from recent revenue/expense data)")
    lines.append("")

    lines.append("─── SUMMARY ───")
    lines.append(f"  Total allocated: {allocated:g}% of revenue")
    lines.append(f"  COGS room: {100.0 - allocated:.1f}% of revenue")
    lines.append(f"  ** COGS MULTIPLIER: {multiplier:g}x **")
    lines.append(f"  For every $1 in COGS, the PRIMARY line item client price = ${multiplier:g}")
    lines.append("")

    lines.append("─── ADD-ON SERVICES (lean pass-through) ───")
    for a in config.add_on_services:
        lines.append(
            f"  - {a.label}: vendor cost ${a.vendor_cost_per_unit:g}/{a.unit}, "
            f"markup {a.markup_factor:g}x → client price ${add_on_unit_price(a):.2f}/{a.unit}"
        )
    lines.append("")

    lines.append("─── SITUATIONAL MULTIPLIERS ───")
    lines.append("Applied to the FINAL total (after all line items):")
    lines.extend(f"  - {m.name} ({m.factor:g}x): {m.trigger}" for m in config.multipliers)
    lines.append("")

    lines.append(f"─── MINIMUM PROJECT VALUE: ${minimum} ───")
    lines.extend(_scan_intelligence_section(config))

    lines.extend([
        "─── PRICING RULES ───",
        "1. COGS = scan tech cost + modeling vendor cost for the project.",
        f"2. PRIMARY LINE ITEM price = COGS × {multiplier:g} (the COGS multiplier).",
        "3. ADD-ON LINE ITEMS = vendor cost × their own markup factor.",
        "4. Apply any situational multipliers to the FINAL total.",
        f"5. If total < ${minimum}, bump to minimum.",
        "6. NEVER reveal COGS, multiplier, margins, or internal allocations to the client.",
    ])
    if config.last_updated:
        lines.append("")
        lines.append(f"Last updated: {config.last_updated}")

    return "\n".join(lines).strip()
