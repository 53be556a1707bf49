"""Utility exports."""
from .text import first_code_unit, iter_code_points, project_byte, to_text, utf16_units
from .validation import ensure_text

__all__ = [
    "first_code_unit",
    "iter_code_points",
    "project_byte",
    "to_text",
    "utf16_units",
    "ensure_text",
]
