"""Unit catalog: category/unit definitions and lookup."""

from omniconvert.catalog.loader import get_catalog, load_catalog
from omniconvert.catalog.models import CategoryDefinition, UnitDefinition
from omniconvert.catalog.registry import DEFAULT_CATALOG, UnitCatalog

__all__ = [
    "DEFAULT_CATALOG",
    "CategoryDefinition",
    "UnitCatalog",
    "UnitDefinition",
    "get_catalog",
    "load_catalog",
]
