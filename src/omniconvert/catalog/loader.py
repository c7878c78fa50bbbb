"""Load a unit catalog from a YAML (or JSON) file.

File layout: a mapping of category name to its base unit and
ordered unit list::

    Length:
      base_unit: m
      units:
        - {id: m, name: Meter, symbol: m, factor: 1}
        - {id: ft, name: Foot, symbol: ft, factor: 0.3048}
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, cast

import yaml
from pydantic import ValidationError

from omniconvert.catalog.models import CategoryDefinition, UnitDefinition
from omniconvert.catalog.registry import DEFAULT_CATALOG, UnitCatalog
from omniconvert.config import Settings

logger = logging.getLogger(__name__)


def load_catalog(path: Path) -> UnitCatalog:
    """Read and validate a catalog file.

    Raises ``FileNotFoundError`` if the file doesn't exist and
    ``ValueError`` if it is not valid YAML or breaks a catalog
    invariant (empty category, duplicate ids, unknown base unit,
    non-positive factor).
    """
    if not path.exists():
        msg = f"Catalog file not found: {path}"
        raise FileNotFoundError(msg)

    try:
        raw: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        msg = f"Catalog file {path} is not valid YAML: {exc}"
        raise ValueError(msg) from exc

    if not isinstance(raw, dict) or not raw:
        msg = f"Catalog file {path} must map category names to units"
        raise ValueError(msg)

    categories = [
        _parse_category(str(name), body)
        for name, body in cast(dict[Any, Any], raw).items()
    ]
    catalog = UnitCatalog(categories)
    logger.info(
        "event=catalog_loaded path=%s categories=%d",
        path,
        len(catalog),
    )
    return catalog


def _parse_category(name: str, body: Any) -> CategoryDefinition:
    if not isinstance(body, dict):
        msg = f"Category {name!r} must be a mapping"
        raise ValueError(msg)
    section = cast(dict[str, Any], body)

    units_raw = section.get("units", [])
    if not isinstance(units_raw, list):
        msg = f"Category {name!r}: 'units' must be a list"
        raise ValueError(msg)

    try:
        units = tuple(
            UnitDefinition.model_validate(u)
            for u in cast(list[Any], units_raw)
        )
        return CategoryDefinition(
            name=name,
            base_unit_id=str(section.get("base_unit", "")),
            units=units,
        )
    except ValidationError as exc:
        msg = f"Category {name!r} is invalid: {exc}"
        raise ValueError(msg) from exc


def get_catalog(settings: Settings | None = None) -> UnitCatalog:
    """Return the catalog selected by settings (built-in by default)."""
    if settings is None or settings.catalog_file is None:
        return DEFAULT_CATALOG
    return load_catalog(settings.catalog_file)
