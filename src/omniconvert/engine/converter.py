"""Conversion between units of one category.

Two disjoint branches:

- linear: ``value * from.factor / to.factor`` for every category
  except Temperature;
- affine: Temperature goes through Celsius, dispatched on the unit
  ids ``c``, ``f`` and ``k``. That id set is closed; a temperature
  unit outside it is treated as unknown.

Nothing here raises for bad input. Unparseable values produce
``NO_RESULT`` and unknown units produce ``None``.
"""

from __future__ import annotations

from collections.abc import Callable

from omniconvert.catalog.models import CategoryDefinition, UnitDefinition
from omniconvert.catalog.registry import DEFAULT_CATALOG, UnitCatalog
from omniconvert.constants import (
    CELSIUS_ID,
    FAHRENHEIT_ID,
    FAHRENHEIT_OFFSET,
    KELVIN_ID,
    KELVIN_OFFSET,
    NO_RESULT,
    UnitCategory,
)
from omniconvert.engine.formatting import format_result, parse_value

_TO_CELSIUS: dict[str, Callable[[float], float]] = {
    CELSIUS_ID: lambda v: v,
    FAHRENHEIT_ID: lambda v: (v - FAHRENHEIT_OFFSET) * (5 / 9),
    KELVIN_ID: lambda v: v - KELVIN_OFFSET,
}

_FROM_CELSIUS: dict[str, Callable[[float], float]] = {
    CELSIUS_ID: lambda c: c,
    FAHRENHEIT_ID: lambda c: c * 9 / 5 + FAHRENHEIT_OFFSET,
    KELVIN_ID: lambda c: c + KELVIN_OFFSET,
}

TEMPERATURE_UNIT_IDS = frozenset(_TO_CELSIUS)


def is_affine(category: CategoryDefinition) -> bool:
    return category.name == UnitCategory.TEMPERATURE


def supports_unit(
    category: CategoryDefinition, unit: UnitDefinition
) -> bool:
    """True if the engine can convert to and from ``unit``."""
    if is_affine(category):
        return unit.id in TEMPERATURE_UNIT_IDS
    return True


def convert_value(
    category: CategoryDefinition,
    value: float,
    from_unit: UnitDefinition,
    to_unit: UnitDefinition,
) -> float:
    """Convert a finite number between two units of ``category``.

    Raises ``ValueError`` for a temperature unit outside the
    ``c``/``f``/``k`` set; ``convert`` screens those out first.
    """
    if from_unit.id == to_unit.id:
        return value
    if is_affine(category):
        return _convert_temperature(value, from_unit.id, to_unit.id)
    return (value * from_unit.factor) / to_unit.factor


def _convert_temperature(value: float, from_id: str, to_id: str) -> float:
    try:
        to_celsius = _TO_CELSIUS[from_id]
        from_celsius = _FROM_CELSIUS[to_id]
    except KeyError as exc:
        msg = f"Unsupported temperature unit: {exc.args[0]!r}"
        raise ValueError(msg) from exc
    return from_celsius(to_celsius(value))


def resolve_units(
    category: CategoryDefinition,
    from_unit_id: str,
    to_unit_id: str,
) -> tuple[UnitDefinition, UnitDefinition] | None:
    """Look up both units; ``None`` if either is missing or unsupported."""
    from_unit = category.get_unit(from_unit_id)
    to_unit = category.get_unit(to_unit_id)
    if from_unit is None or to_unit is None:
        return None
    if not (
        supports_unit(category, from_unit)
        and supports_unit(category, to_unit)
    ):
        return None
    return from_unit, to_unit


def convert(
    category_name: str,
    value: str | float | int | None,
    from_unit_id: str,
    to_unit_id: str,
    *,
    catalog: UnitCatalog = DEFAULT_CATALOG,
) -> str | None:
    """Convert and format in one step.

    Returns the formatted result, ``NO_RESULT`` ("---") when
    ``value`` is not a finite number, or ``None`` when a unit id is
    not defined in the category. An unknown category name falls
    back to the catalog's first category.
    """
    category = catalog.category_or_default(category_name)
    number = parse_value(value)
    if number is None:
        return NO_RESULT

    units = resolve_units(category, from_unit_id, to_unit_id)
    if units is None:
        return None
    from_unit, to_unit = units
    return format_result(convert_value(category, number, from_unit, to_unit))
