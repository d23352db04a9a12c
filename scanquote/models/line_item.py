"""LineItemShell and QuoteTotals — the generator's output and the gate's verdict.

A shell is an unpriced line item produced by rule application.  It becomes a
priced line item once ``cost`` and ``price`` are attached downstream.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class LineItemCategory(str, Enum):
    """The closed set of rules that can emit a line item.

    Declaration order is the emission order of the generator.
    """

    ARCHITECTURE = "architecture"
    STRUCTURAL = "structural"
    MEPF = "mepf"
    CAD = "cad"
    ACT = "act"
    BELOW_FLOOR = "below_floor"
    TRAVEL = "travel"
    GEOREFERENCING = "georeferencing"
    EXPEDITED = "expedited"
    LANDSCAPE = "landscape"
    SCAN_REG_ONLY = "scan_reg_only"
    CUSTOM = "custom"


class ServiceGroup(str, Enum):
    """Billing group a category rolls up into."""

    MODELING = "modeling"
    ADD_ON = "add_on"
    TRAVEL = "travel"
    CUSTOM = "custom"


class IntegrityStatus(str, Enum):
    PASSED = "passed"
    WARNING = "warning"
    BLOCKED = "blocked"


_SERVICE_GROUPS: dict[LineItemCategory, ServiceGroup] = {
    LineItemCategory.ARCHITECTURE: ServiceGroup.MODELING,
    LineItemCategory.STRUCTURAL: ServiceGroup.MODELING,
    LineItemCategory.MEPF: ServiceGroup.MODELING,
    LineItemCategory.CAD: ServiceGroup.ADD_ON,
    LineItemCategory.ACT: ServiceGroup.ADD_ON,
    LineItemCategory.BELOW_FLOOR: ServiceGroup.ADD_ON,
    LineItemCategory.TRAVEL: ServiceGroup.TRAVEL,
    LineItemCategory.GEOREFERENCING: ServiceGroup.ADD_ON,
    LineItemCategory.EXPEDITED: ServiceGroup.ADD_ON,
    LineItemCategory.LANDSCAPE: ServiceGroup.MODELING,
    LineItemCategory.SCAN_REG_ONLY: ServiceGroup.ADD_ON,
    LineItemCategory.CUSTOM: ServiceGroup.CUSTOM,
}

_DISCIPLINES: dict[LineItemCategory, str] = {
    LineItemCategory.ARCHITECTURE: "architecture",
    LineItemCategory.STRUCTURAL: "structural",
    LineItemCategory.MEPF: "mepf",
    LineItemCategory.CAD: "cad",
    LineItemCategory.ACT: "act",
    LineItemCategory.BELOW_FLOOR: "below-floor",
    LineItemCategory.TRAVEL: "travel",
    LineItemCategory.GEOREFERENCING: "georeferencing",
    LineItemCategory.EXPEDITED: "expedited",
    LineItemCategory.LANDSCAPE: "landscape",
    LineItemCategory.SCAN_REG_ONLY: "scan-reg",
    LineItemCategory.CUSTOM: "custom",
}

# Both tables must cover every category.
_missing = (set(LineItemCategory) - set(_SERVICE_GROUPS)) | (set(LineItemCategory) - set(_DISCIPLINES))
if _missing:
    raise RuntimeError(f"Line item tables missing categories: {sorted(c.value for c in _missing)}")


def service_group(category: LineItemCategory) -> ServiceGroup:
    """Return the billing group for *category*."""
    return _SERVICE_GROUPS[LineItemCategory(category)]


def discipline_for(category: LineItemCategory) -> str:
    """Return the discipline slug shown to users for *category*."""
    return _DISCIPLINES[LineItemCategory(category)]


class LineItemShell(BaseModel):
    """A single quote line.

    ``cost`` and ``price`` start as *None* and are filled by a human or by
    the pricing resolver.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    id: str
    area_id: str | None = None
    """Source area id, *None* for project-level lines."""

    area_name: str = ""
    category: LineItemCategory
    discipline: str = ""
    description: str = ""
    building_type: str = ""
    square_feet: float | None = None
    lod: str | None = None
    scope: str | None = None

    cost: float | None = None
    """Vendor/internal cost.  *None* means not yet priced."""

    price: float | None = None
    """Client price.  *None* means not yet priced."""

    @property
    def group(self) -> ServiceGroup:
        return service_group(self.category)

    @property
    def is_priced(self) -> bool:
        return self.cost is not None and self.price is not None


class QuoteTotals(BaseModel):
    """Aggregated totals and margin-integrity verdict for a set of line items."""

    model_config = ConfigDict(allow_inf_nan=False)

    total_price: float = 0.0
    total_cost: float = 0.0
    gross_margin: float = 0.0
    gross_margin_percent: float = 0.0
    integrity_status: IntegrityStatus = IntegrityStatus.BLOCKED
    integrity_flags: list[str] = Field(default_factory=list)
    unpriced_count: int = 0
