"""PricingConfig — the profit-first pricing model.

The model:
  1. COGS is the scan tech cost plus the modeling vendor cost.
  2. Personnel, profit-first reserves and rolling overhead are each a
     percentage of revenue.  Whatever is left is the room for COGS, and
     ``100 / room`` is the multiplier on COGS for the primary line item.
  3. Add-on services are priced lean: vendor cost times a small markup.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from scanquote.config import DEFAULT_MINIMUM_PROJECT_VALUE, DEFAULT_ROLLING_MONTHS
from scanquote.models.scan import ScanRecord


class _ConfigModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False)


class CostInput(_ConfigModel):
    """A direct variable cost (scan day rate, modeling $/sqft, ...)."""

    id: str = ""
    label: str
    unit: str
    cost_per_unit: float = Field(ge=0)
    vendor: str = ""
    notes: str = ""


class PersonnelAllocation(_ConfigModel):
    id: str = ""
    name: str
    role: str = ""
    pct: float
    """Percent of revenue."""


class ProfitAllocation(_ConfigModel):
    id: str = ""
    label: str
    pct: float
    """Percent of revenue."""

    notes: str = ""
    flexible: bool = False


class MonthlyEntry(_ConfigModel):
    month: str
    """``YYYY-MM``."""

    revenue: float
    overhead: float


class OverheadConfig(_ConfigModel):
    monthly_entries: list[MonthlyEntry] = Field(default_factory=list)
    rolling_months: int = Field(default=DEFAULT_ROLLING_MONTHS, ge=1)
    manual_override_pct: float | None = None
    """When set, used verbatim as the overhead percent."""


class AddOnService(_ConfigModel):
    id: str = ""
    label: str
    unit: str
    vendor_cost_per_unit: float = Field(ge=0)
    markup_factor: float = Field(ge=0)
    vendor: str = ""
    notes: str = ""


class Multiplier(_ConfigModel):
    """Situational multiplier applied to a final quote total."""

    id: str = ""
    name: str
    trigger: str = ""
    factor: float = Field(gt=0)


class TravelParams(_ConfigModel):
    """Rates for the travel cost estimate.

    Trips of at most ``local_max_miles`` are billed a flat fee, trips beyond
    ``airfare_threshold_miles`` fly, everything between drives.
    """

    mileage_rate: float = Field(default=4.0, ge=0)
    """Dollars per mile driven."""

    local_max_miles: float = Field(default=20.0, ge=0)
    overnight_threshold_miles: float = Field(default=75.0, ge=0)
    airfare_threshold_miles: float = Field(default=300.0, ge=0)
    local_flat_single_day: float = Field(default=150.0, ge=0)
    local_flat_multi_day: float = Field(default=300.0, ge=0)
    hotel_per_night: float = Field(default=250.0, ge=0)
    per_diem: float = Field(default=75.0, ge=0)
    airfare_per_tech: float = Field(default=500.0, ge=0)
    car_rental_per_day: float = Field(default=125.0, ge=0)
    airport_parking: float = Field(default=150.0, ge=0)


class ScanIntelligenceConfig(_ConfigModel):
    records: list[ScanRecord] = Field(default_factory=list)
    last_synced_from_field_app: str | None = None


class PricingConfig(_ConfigModel):
    """All pricing variables the resolver reads."""

    scan_costs: list[CostInput] = Field(default_factory=list)
    modeling_costs: list[CostInput] = Field(default_factory=list)
    personnel_allocations: list[PersonnelAllocation] = Field(default_factory=list)
    profit_allocations: list[ProfitAllocation] = Field(default_factory=list)
    overhead: OverheadConfig = Field(default_factory=OverheadConfig)
    add_on_services: list[AddOnService] = Field(default_factory=list)
    multipliers: list[Multiplier] = Field(default_factory=list)
    travel: TravelParams = Field(default_factory=TravelParams)
    scan_intelligence: ScanIntelligenceConfig = Field(default_factory=ScanIntelligenceConfig)
    minimum_project_value: float = Field(default=DEFAULT_MINIMUM_PROJECT_VALUE, ge=0)
    last_updated: str = ""

    def find_add_on(self, key: str) -> AddOnService | None:
        """Look up an add-on service by id, or by label (case-insensitive)."""
        for svc in self.add_on_services:
            if svc.id == key:
                return svc
        lowered = key.lower()
        for svc in self.add_on_services:
            if svc.label.lower() == lowered:
                return svc
        return None
