"""Quick reference table: a conversion computed for a few sample values."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from omniconvert.catalog.registry import DEFAULT_CATALOG, UnitCatalog
from omniconvert.constants import REFERENCE_VALUES
from omniconvert.engine.converter import convert_value, resolve_units
from omniconvert.engine.formatting import format_result


@dataclass(frozen=True)
class ReferenceRow:
    """One sample conversion, e.g. ``5 mi = 8.04672 km``."""

    value: str
    from_symbol: str
    result: str
    to_symbol: str

    def __str__(self) -> str:
        return (
            f"{self.value} {self.from_symbol} = "
            f"{self.result} {self.to_symbol}"
        )


def reference_table(
    category_name: str,
    from_unit_id: str,
    to_unit_id: str,
    *,
    values: Iterable[float] = REFERENCE_VALUES,
    catalog: UnitCatalog = DEFAULT_CATALOG,
) -> list[ReferenceRow]:
    """Convert each sample value; empty if either unit is unknown."""
    category = catalog.category_or_default(category_name)
    units = resolve_units(category, from_unit_id, to_unit_id)
    if units is None:
        return []
    from_unit, to_unit = units
    return [
        ReferenceRow(
            value=format_result(v),
            from_symbol=from_unit.symbol,
            result=format_result(
                convert_value(category, float(v), from_unit, to_unit)
            ),
            to_symbol=to_unit.symbol,
        )
        for v in values
    ]
