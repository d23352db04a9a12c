"""ScanRecord and ScanMetrics — historical field performance."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Complexity(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class ScanRecord(BaseModel):
    """One completed scan job."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False)

    id: str = ""
    project_name: str = ""
    building_type: str = ""
    """Commercial, Industrial, Healthcare, Residential, Education, ..."""

    square_footage: float = Field(ge=0)
    num_floors: int = Field(default=1, ge=0)
    scan_days: float = Field(ge=0)
    """Scan-tech days on site."""

    total_scan_minutes: float = Field(default=0.0, ge=0)
    travel_days: float = Field(default=0.0, ge=0)
    num_scan_positions: int = Field(default=0, ge=0)
    deliverable_type: str = ""
    """2D Plans, BIM LOD200, BIM LOD300, ..."""

    complexity: Complexity = Complexity.MEDIUM
    completed_date: str = ""
    notes: str | None = None


class GroupMetrics(BaseModel):
    count: int = 0
    avg_sqft_per_day: float = 0.0
    avg_positions_per_day: float = 0.0
    avg_minutes_per_position: float = 0.0


class BuildingTypeMetrics(GroupMetrics):
    avg_complexity: float = 0.0
    """1 = Low, 2 = Medium, 3 = High."""


class ScanMetrics(BaseModel):
    """Aggregate performance derived from a set of :class:`ScanRecord`."""

    total_projects: int = 0
    avg_sqft_per_scan_day: float = 0.0
    avg_scan_positions_per_day: float = 0.0
    avg_minutes_per_scan_position: float = 0.0
    by_building_type: dict[str, BuildingTypeMetrics] = Field(default_factory=dict)
    by_deliverable_type: dict[str, GroupMetrics] = Field(default_factory=dict)
