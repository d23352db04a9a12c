"""Scoping — turns a project description into ordered line item shells."""

from scanquote.scoping.autocalc import apply_auto_calc
from scanquote.scoping.generator import generate_line_item_shells
from scanquote.scoping.ids import IdSequence

__all__ = ["IdSequence", "apply_auto_calc", "generate_line_item_shells"]
