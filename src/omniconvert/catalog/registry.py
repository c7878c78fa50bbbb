"""Immutable registry of unit categories."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from omniconvert.catalog.data import DEFAULT_CATEGORIES
from omniconvert.catalog.models import CategoryDefinition, UnitDefinition


class UnitCatalog:
    """Ordered, read-only collection of categories.

    Lookups never raise: unknown names return ``None`` and
    ``category_or_default`` falls back to the first category.
    """

    def __init__(self, categories: Iterable[CategoryDefinition]) -> None:
        self._categories = tuple(categories)
        if not self._categories:
            msg = "A unit catalog needs at least one category"
            raise ValueError(msg)

        self._by_name: dict[str, CategoryDefinition] = {}
        for category in self._categories:
            if category.name in self._by_name:
                msg = f"Duplicate category name: {category.name!r}"
                raise ValueError(msg)
            self._by_name[category.name] = category

    def __iter__(self) -> Iterator[CategoryDefinition]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def list_categories(self) -> tuple[CategoryDefinition, ...]:
        return self._categories

    def category_names(self) -> list[str]:
        return [str(c.name) for c in self._categories]

    def find_category(self, name: str) -> CategoryDefinition | None:
        return self._by_name.get(name)

    def category_or_default(self, name: str) -> CategoryDefinition:
        """Return the named category, or the first one if unknown."""
        return self._by_name.get(name, self._categories[0])

    def find_unit(
        self, category: str | CategoryDefinition, unit_id: str
    ) -> UnitDefinition | None:
        if isinstance(category, CategoryDefinition):
            return category.get_unit(unit_id)
        found = self.find_category(category)
        if found is None:
            return None
        return found.get_unit(unit_id)

    def categories_with_unit(
        self, unit_id: str
    ) -> list[CategoryDefinition]:
        """Categories that define ``unit_id``, in catalog order."""
        return [
            c for c in self._categories if c.get_unit(unit_id) is not None
        ]


DEFAULT_CATALOG = UnitCatalog(DEFAULT_CATEGORIES)
