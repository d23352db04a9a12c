"""ProjectInput / AreaInput — the scoping description the shell generator consumes.

Inputs arrive as plain dicts from the scoping-form subsystem (camelCase keys)
or are built directly in Python (snake_case names).  Both are accepted.
Validation happens once here, at the boundary: anything that would let the
generator emit a zero-sized or mis-scoped line is rejected.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

_SUB_SCOPE_SQFT_KEYS = ("square_footage", "squareFootage", "sqft")


class ScopeValidationError(ValueError):
    """Raised when a scoping description is structurally invalid."""


class ProjectScope(str, Enum):
    FULL = "Full"
    INT_ONLY = "Int Only"
    EXT_ONLY = "Ext Only"
    MIXED = "Mixed"

    @property
    def label(self) -> str:
        return _SCOPE_LABELS[self]


_SCOPE_LABELS = {
    ProjectScope.FULL: "Full Scope",
    ProjectScope.INT_ONLY: "Interior Only",
    ProjectScope.EXT_ONLY: "Exterior Only",
    ProjectScope.MIXED: "Mixed Scope",
}


class ScanRegMode(str, Enum):
    """Scan-and-registration-only engagement size."""

    NONE = "none"
    HALF_DAY = "half_day"
    FULL_DAY = "full_day"

    @property
    def label(self) -> str:
        return "Full Day" if self is ScanRegMode.FULL_DAY else "Half Day"


class _InputModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        allow_inf_nan=False,
    )


class SubScope(_InputModel):
    """An *enabled* sub-scope.  Disabled sub-scopes are represented by *None*."""

    square_footage: float | None = Field(default=None, gt=0)
    """Footage for this discipline; filled from the area when not given."""


class CustomLineItem(_InputModel):
    description: str = Field(min_length=1)
    amount: float = Field(default=0.0, ge=0)

    @field_validator("amount", mode="before")
    @classmethod
    def _blank_amount(cls, value: Any) -> Any:
        return 0.0 if value in (None, "") else value


def _parse_sub_scope(value: Any, field_name: str) -> SubScope | None:
    """Turn the raw ``{enabled, sqft}`` shape into ``SubScope`` or *None*."""
    if value is None or isinstance(value, SubScope):
        return value
    if not isinstance(value, dict):
        raise ValueError(
            f"{field_name} must be an object with an 'enabled' flag, got {type(value).__name__}"
        )
    enabled = value.get("enabled")
    if not isinstance(enabled, bool):
        raise ValueError(f"{field_name}.enabled must be true or false, got {enabled!r}")
    if not enabled:
        return None

    sqft = None
    for key in _SUB_SCOPE_SQFT_KEYS:
        if value.get(key) is not None:
            sqft = value[key]
            break
    if isinstance(sqft, bool) or (sqft is not None and not isinstance(sqft, (int, float))):
        raise ValueError(f"{field_name} square footage must be a number, got {sqft!r}")
    if sqft is not None and sqft < 0:
        raise ValueError(f"{field_name} square footage cannot be negative, got {sqft}")
    # 0 means "same as the area", matching the scoping form's blank input
    return SubScope(square_footage=sqft or None)


class AreaInput(_InputModel):
    """One physical zone of the project."""

    id: str | int
    area_type: str = Field(min_length=1)
    area_name: str | None = None
    square_footage: float = Field(gt=0)
    project_scope: ProjectScope
    lod: str = Field(min_length=1)
    mixed_interior_lod: str | None = None
    mixed_exterior_lod: str | None = None

    structural: SubScope | None = None
    mepf: SubScope | None = None
    act: SubScope | None = None
    below_floor: SubScope | None = None

    cad_deliverable: str = "No"
    custom_line_items: list[CustomLineItem] = Field(default_factory=list)

    @field_validator("structural", "mepf", "act", "below_floor", mode="before")
    @classmethod
    def _sub_scope(cls, value: Any, info: Any) -> SubScope | None:
        return _parse_sub_scope(value, info.field_name)

    @field_validator("lod", "mixed_interior_lod", "mixed_exterior_lod", mode="before")
    @classmethod
    def _lod_as_text(cls, value: Any) -> Any:
        # LoD is often entered as a bare number (300)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("cad_deliverable", mode="before")
    @classmethod
    def _cad_default(cls, value: Any) -> Any:
        return "No" if value in (None, "") else value

    @field_validator("custom_line_items", mode="before")
    @classmethod
    def _no_custom_items(cls, value: Any) -> Any:
        return [] if value is None else value

    @model_validator(mode="after")
    def _fill_sub_scope_footage(self) -> AreaInput:
        for name in ("structural", "mepf", "act", "below_floor"):
            sub = getattr(self, name)
            if sub is not None and sub.square_footage is None:
                setattr(self, name, SubScope(square_footage=self.square_footage))
        return self

    @property
    def display_name(self) -> str:
        return self.area_name or self.area_type

    @property
    def wants_cad(self) -> bool:
        return bool(self.cad_deliverable) and self.cad_deliverable != "No"


class ProjectInput(_InputModel):
    """Project-level scoping: travel, project add-ons and the ordered areas."""

    dispatch_location: str = Field(min_length=1)
    one_way_miles: float = Field(ge=0)
    travel_mode: str = Field(min_length=1)
    mileage_rate: float | None = Field(default=None, ge=0)
    custom_travel_cost: float | None = Field(default=None, ge=0)

    georeferencing: bool = False
    expedited: bool = False
    scan_reg_only: ScanRegMode = ScanRegMode.NONE

    landscape_modeling: str | None = None
    landscape_acres: float | None = Field(default=None, ge=0)
    landscape_terrain: str | None = None

    areas: list[AreaInput] = Field(default_factory=list)

    @field_validator("mileage_rate", "custom_travel_cost", "landscape_acres", mode="before")
    @classmethod
    def _blank_number(cls, value: Any) -> Any:
        return None if value == "" else value

    @field_validator("scan_reg_only", mode="before")
    @classmethod
    def _scan_reg_default(cls, value: Any) -> Any:
        return ScanRegMode.NONE if value in (None, "") else value

    @property
    def wants_landscape(self) -> bool:
        return bool(self.landscape_modeling) and self.landscape_modeling != "No"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProjectInput:
        """Validate raw scoping data, raising :class:`ScopeValidationError`."""
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ScopeValidationError(_describe(exc)) from exc

    @classmethod
    def coerce(cls, value: ProjectInput | dict[str, Any]) -> ProjectInput:
        if isinstance(value, cls):
            return value
        if isinstance(value, dict):
            return cls.from_dict(value)
        raise ScopeValidationError(
            f"Expected ProjectInput or dict, got {type(value).__name__}"
        )


def _describe(exc: ValidationError) -> str:
    """Flatten pydantic errors into 'field.path: message; ...'."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', 'invalid')}" if loc else err.get("msg", "invalid"))
    return "Invalid scoping input: " + "; ".join(parts)
