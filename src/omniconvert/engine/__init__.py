"""Conversion engine: linear and temperature conversion, formatting."""

from omniconvert.engine.converter import (
    TEMPERATURE_UNIT_IDS,
    convert,
    convert_value,
    resolve_units,
)
from omniconvert.engine.formatting import (
    format_number,
    format_result,
    parse_value,
)
from omniconvert.engine.reference import ReferenceRow, reference_table

__all__ = [
    "TEMPERATURE_UNIT_IDS",
    "ReferenceRow",
    "convert",
    "convert_value",
    "format_number",
    "format_result",
    "parse_value",
    "reference_table",
    "resolve_units",
]
