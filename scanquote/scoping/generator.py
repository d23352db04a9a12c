"""Line item shell generator.

Usage::

    from scanquote.scoping import generate_line_item_shells

    shells = generate_line_item_shells(project)

Per area, in input order: architecture, structural, MEPF, CAD, ACT,
below-floor.  Then once per project: travel, georeferencing, expedited,
landscape, scan-and-registration-only.  Custom lines from every area come
last.  All shells are unpriced except custom lines that carry an amount.
"""

from __future__ import annotations

import logging
from typing import Any

from scanquote.config import EXPEDITED_SURCHARGE_PCT, PROJECT_LEVEL_AREA_NAME
from scanquote.models.line_item import LineItemCategory, LineItemShell, discipline_for
from scanquote.models.scope import AreaInput, ProjectInput, ProjectScope, ScanRegMode
from scanquote.rounding import round_half_up
from scanquote.scoping.ids import IdSequence

logger = logging.getLogger(__name__)

# (category, attribute on AreaInput, description label)
_MODELING_SUB_SCOPES: tuple[tuple[LineItemCategory, str, str], ...] = (
    (LineItemCategory.STRUCTURAL, "structural", "Structural"),
    (LineItemCategory.MEPF, "mepf", "MEPF"),
)
_ADD_ON_SUB_SCOPES: tuple[tuple[LineItemCategory, str, str], ...] = (
    (LineItemCategory.ACT, "act", "Above Ceiling Tile"),
    (LineItemCategory.BELOW_FLOOR, "below_floor", "Below Floor"),
)


def format_sf(sqft: float) -> str:
    """``25000`` -> ``'25,000'``; fractions keep up to three decimals, trailing zeros dropped."""
    value = round_half_up(sqft, 3)
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0")


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def generate_line_item_shells(
    project: ProjectInput | dict[str, Any],
    ids: IdSequence | None = None,
    *,
    expedited_pct: float = EXPEDITED_SURCHARGE_PCT,
) -> list[LineItemShell]:
    """Generate the ordered line item shells for *project*.

    Parameters
    ----------
    project:
        A validated :class:`ProjectInput`, or a raw dict which is validated
        first (raising :class:`~scanquote.models.scope.ScopeValidationError`).
    ids:
        Id sequence for this run.  A fresh sequence is used when omitted.
        The caller owns the sequence; it is not reset here.
    expedited_pct:
        Surcharge fraction quoted in the expedited line's description.

    Returns
    -------
    list[LineItemShell]
    """
    project = ProjectInput.coerce(project)
    ids = ids if ids is not None else IdSequence()

    shells: list[LineItemShell] = []
    for area in project.areas:
        shells.extend(_area_shells(area, ids))
    shells.extend(_project_shells(project, ids, expedited_pct))
    shells.extend(_custom_shells(project, ids))

    logger.info(
        "Generated %d line item shells for %d areas", len(shells), len(project.areas)
    )
    return shells


def _area_shell(
    ids: IdSequence,
    area: AreaInput,
    category: LineItemCategory,
    description: str,
    square_feet: float,
) -> LineItemShell:
    return LineItemShell(
        id=ids.next(),
        area_id=str(area.id),
        area_name=area.display_name,
        category=category,
        discipline=discipline_for(category),
        description=description,
        building_type=area.area_type,
        square_feet=square_feet,
        lod=area.lod,
        scope=area.project_scope.value,
    )


def _area_shells(area: AreaInput, ids: IdSequence) -> list[LineItemShell]:
    shells: list[LineItemShell] = []
    sf = format_sf(area.square_footage)
    base = f"{area.area_type} — {sf} SF — LoD {_lod_text(area)} — {area.project_scope.label}"

    shells.append(
        _area_shell(ids, area, LineItemCategory.ARCHITECTURE, f"Architecture — {base}", area.square_footage)
    )

    shells.extend(_sub_scope_shells(area, ids, _MODELING_SUB_SCOPES))

    if area.wants_cad:
        shells.append(
            _area_shell(
                ids,
                area,
                LineItemCategory.CAD,
                f"CAD Deliverable ({area.cad_deliverable}) — {area.area_type} — {sf} SF",
                area.square_footage,
            )
        )

    shells.extend(_sub_scope_shells(area, ids, _ADD_ON_SUB_SCOPES))

    logger.debug("Area %s produced %d shells", area.id, len(shells))
    return shells


def _sub_scope_shells(
    area: AreaInput,
    ids: IdSequence,
    rules: tuple[tuple[LineItemCategory, str, str], ...],
) -> list[LineItemShell]:
    shells: list[LineItemShell] = []
    for category, attr, label in rules:
        sub = getattr(area, attr)
        if sub is None:
            continue
        shells.append(
            _area_shell(
                ids,
                area,
                category,
                f"{label} — {area.area_type} — {format_sf(sub.square_footage)} SF",
                sub.square_footage,
            )
        )
    return shells


def _lod_text(area: AreaInput) -> str:
    if area.project_scope is ProjectScope.MIXED and (area.mixed_interior_lod or area.mixed_exterior_lod):
        interior = area.mixed_interior_lod or area.lod
        exterior = area.mixed_exterior_lod or area.lod
        return f"{interior} Int / {exterior} Ext"
    return area.lod


def _project_shell(
    ids: IdSequence,
    category: LineItemCategory,
    description: str,
) -> LineItemShell:
    return LineItemShell(
        id=ids.next(),
        area_id=None,
        area_name=PROJECT_LEVEL_AREA_NAME,
        category=category,
        discipline=discipline_for(category),
        description=description,
    )


def _travel_description(project: ProjectInput) -> str:
    desc = (
        f"Travel — {project.dispatch_location} to {_format_number(project.one_way_miles)} mi"
        f" — {project.travel_mode}"
    )
    if project.custom_travel_cost is not None:
        return f"{desc} — flat ${project.custom_travel_cost:,.2f}"
    if project.mileage_rate is not None:
        return f"{desc} — ${_format_number(project.mileage_rate)}/mi"
    return desc


def _project_shells(
    project: ProjectInput,
    ids: IdSequence,
    expedited_pct: float,
) -> list[LineItemShell]:
    shells = [_project_shell(ids, LineItemCategory.TRAVEL, _travel_description(project))]

    if project.georeferencing:
        shells.append(
            _project_shell(ids, LineItemCategory.GEOREFERENCING, "Georeferencing — per structure")
        )

    if project.expedited:
        shells.append(
            _project_shell(
                ids,
                LineItemCategory.EXPEDITED,
                f"Expedited Surcharge — +{_format_number(round_half_up(expedited_pct * 100, 2))}% on BIM modeling items",
            )
        )

    if project.wants_landscape:
        desc = f"Landscape ({project.landscape_modeling})"
        if project.landscape_acres:
            desc += f" — {_format_number(project.landscape_acres)} acres"
        if project.landscape_terrain:
            desc += f" — {project.landscape_terrain}"
        shells.append(_project_shell(ids, LineItemCategory.LANDSCAPE, desc))

    if project.scan_reg_only is not ScanRegMode.NONE:
        shells.append(
            _project_shell(
                ids,
                LineItemCategory.SCAN_REG_ONLY,
                f"Scan & Registration Only — {project.scan_reg_only.label}",
            )
        )

    return shells


def _custom_shells(project: ProjectInput, ids: IdSequence) -> list[LineItemShell]:
    shells: list[LineItemShell] = []
    for area in project.areas:
        for item in area.custom_line_items:
            shells.append(
                LineItemShell(
                    id=ids.next(),
                    area_id=str(area.id),
                    area_name=area.display_name,
                    category=LineItemCategory.CUSTOM,
                    discipline=discipline_for(LineItemCategory.CUSTOM),
                    description=item.description,
                    building_type=area.area_type,
                    price=item.amount or None,
                )
            )
    return shells
