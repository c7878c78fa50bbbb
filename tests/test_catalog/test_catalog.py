"""Tests for catalog models, the built-in table and the registry."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from omniconvert.catalog import (
    DEFAULT_CATALOG,
    CategoryDefinition,
    UnitCatalog,
    UnitDefinition,
)
from omniconvert.constants import UnitCategory


def _unit(unit_id: str, factor: float = 1.0) -> UnitDefinition:
    return UnitDefinition(
        id=unit_id, name=unit_id.upper(), symbol=unit_id, factor=factor
    )


class TestUnitDefinition:
    def test_zero_factor_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _unit("x", factor=0)

    def test_negative_factor_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _unit("x", factor=-2)

    def test_frozen(self) -> None:
        unit = _unit("x")
        with pytest.raises(ValidationError):
            unit.factor = 2  # type: ignore[misc]

    def test_offset_defaults_to_zero(self) -> None:
        assert _unit("x").offset == 0.0


class TestCategoryDefinition:
    def test_valid_category(self) -> None:
        cat = CategoryDefinition(
            name="Widgets",
            base_unit_id="a",
            units=(_unit("a"), _unit("b", 2)),
        )
        assert cat.base_unit.id == "a"
        assert cat.unit_ids == ("a", "b")

    def test_empty_units_rejected(self) -> None:
        with pytest.raises(ValueError, match="no units"):
            CategoryDefinition(name="Empty", base_unit_id="a", units=())

    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(ValueError, match="duplicate unit ids: a"):
            CategoryDefinition(
                name="Dupes",
                base_unit_id="a",
                units=(_unit("a"), _unit("a", 3)),
            )

    def test_unknown_base_unit_rejected(self) -> None:
        with pytest.raises(ValueError, match="base unit 'z'"):
            CategoryDefinition(
                name="NoBase", base_unit_id="z", units=(_unit("a"),)
            )

    def test_base_unit_lookup_error_when_unvalidated(self) -> None:
        cat = CategoryDefinition.model_construct(
            name="Broken", base_unit_id="z", units=(_unit("a"),)
        )
        with pytest.raises(LookupError, match="base unit 'z'"):
            _ = cat.base_unit

    def test_get_unit_missing_returns_none(self) -> None:
        cat = CategoryDefinition(
            name="One", base_unit_id="a", units=(_unit("a"),)
        )
        assert cat.get_unit("nope") is None


class TestBuiltInTable:
    def test_required_categories_present(self) -> None:
        names = DEFAULT_CATALOG.category_names()
        for required in (
            "Length",
            "Mass",
            "Volume",
            "Temperature",
            "Time",
            "Digital Storage",
        ):
            assert required in names

    def test_every_enum_member_has_data(self) -> None:
        for member in UnitCategory:
            assert DEFAULT_CATALOG.find_category(member) is not None

    def test_first_category_is_length(self) -> None:
        assert DEFAULT_CATALOG.list_categories()[0].name == "Length"

    @pytest.mark.parametrize(
        ("category", "unit_id", "factor"),
        [
            ("Length", "mi", 1609.344),
            ("Length", "nmi", 1852),
            ("Mass", "lb", 0.45359237),
            ("Volume", "gal_us", 3.78541),
            ("Time", "y", 31_557_600),
            ("Digital Storage", "kb", 1024),
            ("Digital Storage", "mb", 1_048_576),
            ("Digital Storage", "gb", 1_073_741_824),
            ("Digital Storage", "tb", 1_099_511_627_776),
            ("Digital Storage", "bit", 0.125),
        ],
    )
    def test_authoritative_factors(
        self, category: str, unit_id: str, factor: float
    ) -> None:
        unit = DEFAULT_CATALOG.find_unit(category, unit_id)
        assert unit is not None
        assert unit.factor == factor

    def test_base_units_have_factor_one(self) -> None:
        for category in DEFAULT_CATALOG:
            assert category.base_unit.factor == 1

    def test_temperature_ids_are_c_f_k(self) -> None:
        temp = DEFAULT_CATALOG.find_category("Temperature")
        assert temp is not None
        assert set(temp.unit_ids) == {"c", "f", "k"}


class TestUnitCatalog:
    def test_find_category(self) -> None:
        cat = DEFAULT_CATALOG.find_category("Mass")
        assert cat is not None
        assert cat.base_unit_id == "kg"

    def test_find_category_unknown(self) -> None:
        assert DEFAULT_CATALOG.find_category("Luminosity") is None

    def test_category_or_default_falls_back_to_first(self) -> None:
        cat = DEFAULT_CATALOG.category_or_default("Luminosity")
        assert cat is DEFAULT_CATALOG.list_categories()[0]

    def test_find_unit_by_name_and_definition(self) -> None:
        length = DEFAULT_CATALOG.find_category("Length")
        assert length is not None
        assert DEFAULT_CATALOG.find_unit("Length", "ft") is not None
        assert DEFAULT_CATALOG.find_unit(length, "ft") is not None

    def test_find_unit_missing(self) -> None:
        assert DEFAULT_CATALOG.find_unit("Length", "kg") is None
        assert DEFAULT_CATALOG.find_unit("Nope", "m") is None

    def test_categories_with_unit(self) -> None:
        assert [
            c.name for c in DEFAULT_CATALOG.categories_with_unit("min")
        ] == ["Time"]
        assert DEFAULT_CATALOG.categories_with_unit("zz") == []

    def test_empty_catalog_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least one category"):
            UnitCatalog([])

    def test_duplicate_category_rejected(self) -> None:
        cat = CategoryDefinition(
            name="X", base_unit_id="a", units=(_unit("a"),)
        )
        with pytest.raises(ValueError, match="Duplicate category"):
            UnitCatalog([cat, cat])

    def test_injected_catalog_order_preserved(self) -> None:
        a = CategoryDefinition(name="A", base_unit_id="a", units=(_unit("a"),))
        b = CategoryDefinition(name="B", base_unit_id="b", units=(_unit("b"),))
        catalog = UnitCatalog([b, a])
        assert catalog.category_names() == ["B", "A"]
        assert len(catalog) == 2
