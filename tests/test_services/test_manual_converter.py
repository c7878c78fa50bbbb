"""Tests for the manual converter form."""

from __future__ import annotations

from omniconvert.catalog import (
    DEFAULT_CATALOG,
    CategoryDefinition,
    UnitCatalog,
    UnitDefinition,
)
from omniconvert.constants import NO_RESULT
from omniconvert.history import HistoryLedger
from omniconvert.services import ManualConverter


class TestInitialState:
    def test_defaults_to_first_category(self, ledger: HistoryLedger) -> None:
        manual = ManualConverter(ledger)
        assert manual.category.name == "Length"
        assert manual.from_unit_id == "km"
        assert manual.to_unit_id == "m"
        assert manual.input_value == "1"
        assert manual.output == "1000"

    def test_named_category(self, ledger: HistoryLedger) -> None:
        manual = ManualConverter(ledger, category="Temperature")
        assert manual.category.name == "Temperature"
        assert (manual.from_unit_id, manual.to_unit_id) == ("c", "f")
        assert manual.output == "33.8"

    def test_nothing_recorded_until_commit(
        self, ledger: HistoryLedger
    ) -> None:
        manual = ManualConverter(ledger)
        manual.set_input("5")
        manual.set_to_unit("cm")
        assert len(ledger) == 0


class TestActions:
    def test_set_input_recomputes(self, ledger: HistoryLedger) -> None:
        manual = ManualConverter(ledger)
        assert manual.set_input("2.5") == "2500"
        assert manual.output == "2500"

    def test_invalid_input_shows_no_result(
        self, ledger: HistoryLedger
    ) -> None:
        manual = ManualConverter(ledger)
        assert manual.set_input("") == NO_RESULT
        assert manual.set_input("abc") == NO_RESULT

    def test_select_category_resets_units(
        self, ledger: HistoryLedger
    ) -> None:
        manual = ManualConverter(ledger)
        manual.select_category("Digital Storage")
        assert (manual.from_unit_id, manual.to_unit_id) == ("tb", "gb")
        assert manual.output == "1024"

    def test_unknown_category_selects_first(
        self, ledger: HistoryLedger
    ) -> None:
        manual = ManualConverter(ledger, category="Mass")
        category = manual.select_category("Luminosity")
        assert category is DEFAULT_CATALOG.list_categories()[0]

    def test_swap(self, ledger: HistoryLedger) -> None:
        manual = ManualConverter(ledger)
        assert manual.swap() == "0.001"
        assert (manual.from_unit_id, manual.to_unit_id) == ("m", "km")

    def test_unknown_unit_keeps_previous_output(
        self, ledger: HistoryLedger
    ) -> None:
        manual = ManualConverter(ledger)
        manual.set_input("3")
        assert manual.set_to_unit("kg") == "3000"
        assert manual.to_unit is None

    def test_change_both_units(self, ledger: HistoryLedger) -> None:
        manual = ManualConverter(ledger)
        manual.set_from_unit("mi")
        assert manual.set_to_unit("ft") == "5280"


class TestCommit:
    def test_commit_records_symbols(self, ledger: HistoryLedger) -> None:
        manual = ManualConverter(ledger)
        manual.set_from_unit("mi")
        manual.set_to_unit("km")
        manual.set_input("5")
        record = manual.commit()
        assert record is not None
        assert record.from_value == "5"
        assert record.from_unit == "mi"
        assert record.to_value == "8.04672"
        assert record.to_unit == "km"
        assert record.category == "Length"
        assert record.is_ai_generated is False
        assert ledger.list() == [record]

    def test_temperature_record_uses_degree_symbols(
        self, ledger: HistoryLedger
    ) -> None:
        manual = ManualConverter(ledger, category="Temperature")
        manual.set_input("100")
        record = manual.commit()
        assert record is not None
        assert (record.from_unit, record.to_value, record.to_unit) == (
            "°C",
            "212",
            "°F",
        )

    def test_repeat_commit_collapsed(self, ledger: HistoryLedger) -> None:
        manual = ManualConverter(ledger)
        assert manual.commit() is not None
        assert manual.commit() is None
        assert len(ledger) == 1

    def test_invalid_input_not_recorded(self, ledger: HistoryLedger) -> None:
        manual = ManualConverter(ledger)
        manual.set_input("abc")
        assert manual.commit() is None
        assert len(ledger) == 0

    def test_unknown_unit_not_recorded(self, ledger: HistoryLedger) -> None:
        manual = ManualConverter(ledger)
        manual.set_to_unit("kg")
        assert manual.commit() is None
        assert len(ledger) == 0

    def test_unsupported_temperature_unit_not_recorded(
        self, ledger: HistoryLedger
    ) -> None:
        temp = CategoryDefinition(
            name="Temperature",
            base_unit_id="c",
            units=(
                UnitDefinition(id="c", name="Celsius", symbol="°C", factor=1),
                UnitDefinition(
                    id="r", name="Rankine", symbol="°R", factor=5 / 9
                ),
            ),
        )
        manual = ManualConverter(
            ledger, UnitCatalog([temp]), category="Temperature"
        )
        manual.set_input("7")
        assert manual.set_to_unit("c") == "7"

        # c -> r has no formula, so the previous output is left in place
        assert manual.set_to_unit("r") == "7"
        assert manual.commit() is None
        assert len(ledger) == 0

    def test_reference_for_current_pair(self, ledger: HistoryLedger) -> None:
        manual = ManualConverter(ledger)
        rows = manual.reference()
        assert str(rows[0]) == "1 km = 1000 m"
        assert len(rows) == 5
