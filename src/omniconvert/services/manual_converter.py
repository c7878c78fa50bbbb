"""Manual (table-driven) converter state: category, units, input, output."""

from __future__ import annotations

import logging

from omniconvert.catalog.models import CategoryDefinition, UnitDefinition
from omniconvert.catalog.registry import DEFAULT_CATALOG, UnitCatalog
from omniconvert.constants import DEFAULT_INPUT, NO_RESULT
from omniconvert.engine.converter import convert, resolve_units
from omniconvert.engine.reference import ReferenceRow, reference_table
from omniconvert.history.ledger import HistoryLedger
from omniconvert.history.records import ConversionRecord, manual_record

logger = logging.getLogger(__name__)


class ManualConverter:
    """One manual conversion form bound to a history ledger.

    Every change recomputes ``output``. A unit id the category does
    not define leaves the previous output untouched. Nothing reaches
    history until ``commit()``.
    """

    def __init__(
        self,
        ledger: HistoryLedger,
        catalog: UnitCatalog = DEFAULT_CATALOG,
        category: str | None = None,
    ) -> None:
        self._ledger = ledger
        self._catalog = catalog
        self._category = catalog.category_or_default(category or "")
        self._input = DEFAULT_INPUT
        self._from_unit_id = ""
        self._to_unit_id = ""
        self._output = ""
        self._reset_units()
        self._recompute()

    # ── State ──────────────────────────────────────────────

    @property
    def category(self) -> CategoryDefinition:
        return self._category

    @property
    def input_value(self) -> str:
        return self._input

    @property
    def from_unit_id(self) -> str:
        return self._from_unit_id

    @property
    def to_unit_id(self) -> str:
        return self._to_unit_id

    @property
    def output(self) -> str:
        return self._output

    @property
    def from_unit(self) -> UnitDefinition | None:
        return self._category.get_unit(self._from_unit_id)

    @property
    def to_unit(self) -> UnitDefinition | None:
        return self._category.get_unit(self._to_unit_id)

    # ── Actions ────────────────────────────────────────────

    def select_category(self, name: str) -> CategoryDefinition:
        """Switch category; unknown names select the first category.

        Units reset to the first two of the category (or its only
        unit on both sides).
        """
        self._category = self._catalog.category_or_default(name)
        self._reset_units()
        self._recompute()
        return self._category

    def set_input(self, text: str) -> str:
        self._input = text
        return self._recompute()

    def set_from_unit(self, unit_id: str) -> str:
        self._from_unit_id = unit_id
        return self._recompute()

    def set_to_unit(self, unit_id: str) -> str:
        self._to_unit_id = unit_id
        return self._recompute()

    def swap(self) -> str:
        self._from_unit_id, self._to_unit_id = (
            self._to_unit_id,
            self._from_unit_id,
        )
        return self._recompute()

    def commit(self) -> ConversionRecord | None:
        """Write the current conversion to history.

        Returns the new record, or None when either unit cannot be
        converted, the input is not a number, or the ledger collapsed
        it into its head.
        """
        units = resolve_units(
            self._category, self._from_unit_id, self._to_unit_id
        )
        if units is None:
            return None
        from_unit, to_unit = units
        if self._output in (NO_RESULT, ""):
            return None

        record = manual_record(
            from_value=self._input,
            from_unit=from_unit.symbol,
            to_value=self._output,
            to_unit=to_unit.symbol,
            category=self._category.name,
        )
        if not self._ledger.record(record):
            logger.debug(
                "event=history_repeat_collapsed from=%s %s to=%s",
                record.from_value,
                record.from_unit,
                record.to_unit,
            )
            return None
        return record

    def reference(self) -> list[ReferenceRow]:
        """Quick reference for the current unit pair."""
        return reference_table(
            self._category.name,
            self._from_unit_id,
            self._to_unit_id,
            catalog=self._catalog,
        )

    # ── Internals ──────────────────────────────────────────

    def _reset_units(self) -> None:
        units = self._category.units
        self._from_unit_id = units[0].id
        self._to_unit_id = units[1].id if len(units) >= 2 else units[0].id

    def _recompute(self) -> str:
        result = convert(
            self._category.name,
            self._input,
            self._from_unit_id,
            self._to_unit_id,
            catalog=self._catalog,
        )
        if result is not None:
            self._output = result
        return self._output
