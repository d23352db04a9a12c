"""Embedded default pricing data — no external files required.

Cost basis, allocations and overhead history used when no pricing
configuration is supplied.  Historical scan records seed the scan
intelligence model.
"""

from __future__ import annotations

from typing import Any

from scanquote.models.pricing import PricingConfig

# Scan costs: direct field costs for the primary line item
SEED_SCAN_COSTS: list[dict[str, Any]] = [
    {"id": "sc-1", "label": "Scan Tech (Day Rate)", "unit": "day", "cost_per_unit": 600.0,
     "vendor": "Contract Tech", "notes": "Per scan tech per day on site"},
    {"id": "sc-2", "label": "Equipment / Consumables", "unit": "day", "cost_per_unit": 75.0,
     "vendor": "Internal", "notes": "Scanner wear, targets, batteries"},
    {"id": "sc-3", "label": "Travel / Mobilization", "unit": "trip", "cost_per_unit": 500.0,
     "vendor": "Internal", "notes": "Per site visit within 100mi"},
]

# Modeling costs: vendor cost per unit
SEED_MODELING_COSTS: list[dict[str, Any]] = [
    {"id": "mc-1", "label": "Scan-to-CAD (2D Plans)", "unit": "sq ft", "cost_per_unit": 0.06,
     "vendor": "UpTeam", "notes": "2D floor plans, elevations"},
    {"id": "mc-2", "label": "Scan-to-BIM (LOD 200)", "unit": "sq ft", "cost_per_unit": 0.10,
     "vendor": "UpTeam", "notes": "Basic architectural BIM"},
    {"id": "mc-3", "label": "Scan-to-BIM (LOD 300)", "unit": "sq ft", "cost_per_unit": 0.16,
     "vendor": "UpTeam", "notes": "Detailed architectural BIM"},
    {"id": "mc-4", "label": "Point Cloud Processing", "unit": "scan", "cost_per_unit": 75.0,
     "vendor": "Internal", "notes": "Registration, cleanup per scan position"},
]

# Personnel allocations: percent of revenue
SEED_PERSONNEL: list[dict[str, Any]] = [
    {"id": "pa-1", "name": "Operations Lead", "role": "Operations / PM", "pct": 5.0},
    {"id": "pa-2", "name": "Delivery Lead", "role": "Project Delivery", "pct": 4.0},
    {"id": "pa-3", "name": "QC Lead", "role": "Quality Control", "pct": 2.0},
    {"id": "pa-4", "name": "Coordinator", "role": "Coordination", "pct": 3.0},
]

# Profit-first allocations: percent of revenue
SEED_PROFIT_ALLOCATIONS: list[dict[str, Any]] = [
    {"id": "pr-1", "label": "Taxes", "pct": 15.0, "notes": "Tax reserve"},
    {"id": "pr-2", "label": "Sales & Marketing", "pct": 10.0, "notes": "Reserve for growth spend"},
    {"id": "pr-3", "label": "Owner's Draw", "pct": 10.0,
     "notes": "Can adjust based on performance", "flexible": True},
    {"id": "pr-4", "label": "Savings / Reserve", "pct": 10.0,
     "notes": "Can dial down to 5% if needed", "flexible": True},
]

SEED_OVERHEAD: dict[str, Any] = {
    "monthly_entries": [
        {"month": "2025-12", "revenue": 45000.0, "overhead": 8500.0},
        {"month": "2026-01", "revenue": 38000.0, "overhead": 8200.0},
        {"month": "2026-02", "revenue": 42000.0, "overhead": 8400.0},
    ],
    "rolling_months": 3,
    "manual_override_pct": None,
}

SEED_ADD_ONS: list[dict[str, Any]] = [
    {"id": "ao-1", "label": "Structural Modeling", "unit": "sq ft", "vendor_cost_per_unit": 0.08,
     "markup_factor": 1.25, "vendor": "UpTeam", "notes": "Steel/concrete structural overlay"},
    {"id": "ao-2", "label": "MEP Modeling", "unit": "sq ft", "vendor_cost_per_unit": 0.08,
     "markup_factor": 1.25, "vendor": "UpTeam", "notes": "Mechanical, Electrical, Plumbing"},
    {"id": "ao-3", "label": "Fire Protection Modeling", "unit": "sq ft", "vendor_cost_per_unit": 0.04,
     "markup_factor": 1.25, "vendor": "UpTeam", "notes": "Sprinkler / fire suppression"},
    {"id": "ao-4", "label": "LOD Upgrade (300 → 350)", "unit": "sq ft", "vendor_cost_per_unit": 0.06,
     "markup_factor": 1.25, "vendor": "UpTeam", "notes": "Coordination-level detail upgrade"},
    {"id": "ao-5", "label": "As-Built Documentation Package", "unit": "project",
     "vendor_cost_per_unit": 1200.0, "markup_factor": 1.25, "vendor": "Internal",
     "notes": "Final deliverable compilation & QC"},
]

SEED_MULTIPLIERS: list[dict[str, Any]] = [
    {"id": "mul-1", "name": "Rush (< 1 week)", "trigger": "Delivery within 5 business days", "factor": 1.5},
    {"id": "mul-2", "name": "Expedited (1-2 weeks)", "trigger": "Delivery within 10 business days", "factor": 1.25},
    {"id": "mul-3", "name": "Complex Geometry",
     "trigger": "Curved surfaces, multi-level MEP, industrial piping", "factor": 1.3},
    {"id": "mul-4", "name": "Hazardous / Restricted", "trigger": "Special PPE, clearances, off-hours", "factor": 1.4},
    {"id": "mul-5", "name": "Multi-Building Discount", "trigger": "3+ buildings in same engagement", "factor": 0.9},
]

# Completed jobs feeding the scan intelligence model
SEED_SCAN_RECORDS: list[dict[str, Any]] = [
    {"id": "si-1", "project_name": "Downtown Office Tower", "building_type": "Commercial",
     "square_footage": 45000, "num_floors": 3, "scan_days": 3, "total_scan_minutes": 1440,
     "travel_days": 1, "num_scan_positions": 85, "deliverable_type": "BIM LOD300",
     "complexity": "Medium", "completed_date": "2025-11-15"},
    {"id": "si-2", "project_name": "Regional Hospital Wing", "building_type": "Healthcare",
     "square_footage": 28000, "num_floors": 2, "scan_days": 3, "total_scan_minutes": 1380,
     "travel_days": 1, "num_scan_positions": 95, "deliverable_type": "BIM LOD300",
     "complexity": "High", "completed_date": "2025-12-01"},
    {"id": "si-3", "project_name": "Warehouse Conversion", "building_type": "Industrial",
     "square_footage": 60000, "num_floors": 1, "scan_days": 2, "total_scan_minutes": 900,
     "travel_days": 1, "num_scan_positions": 45, "deliverable_type": "2D Plans",
     "complexity": "Low", "completed_date": "2026-01-10"},
    {"id": "si-4", "project_name": "Elementary School", "building_type": "Education",
     "square_footage": 35000, "num_floors": 2, "scan_days": 3, "total_scan_minutes": 1320,
     "travel_days": 1, "num_scan_positions": 72, "deliverable_type": "BIM LOD200",
     "complexity": "Medium", "completed_date": "2026-01-28"},
]

SEED_MINIMUM_PROJECT_VALUE = 2500.0


def default_pricing_config() -> PricingConfig:
    """Return a fresh PricingConfig built from the seed data."""
    return PricingConfig.model_validate(
        {
            "scan_costs": SEED_SCAN_COSTS,
            "modeling_costs": SEED_MODELING_COSTS,
            "personnel_allocations": SEED_PERSONNEL,
            "profit_allocations": SEED_PROFIT_ALLOCATIONS,
            "overhead": SEED_OVERHEAD,
            "add_on_services": SEED_ADD_ONS,
            "multipliers": SEED_MULTIPLIERS,
            "scan_intelligence": {"records": SEED_SCAN_RECORDS},
            "minimum_project_value": SEED_MINIMUM_PROJECT_VALUE,
        }
    )
