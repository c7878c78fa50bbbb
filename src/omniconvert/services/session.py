"""Converter session: the explicit owner of one history ledger."""

from __future__ import annotations

from omniconvert.catalog.loader import get_catalog
from omniconvert.catalog.registry import UnitCatalog
from omniconvert.config import Settings
from omniconvert.constants import ConverterMode
from omniconvert.history.ledger import HistoryLedger
from omniconvert.history.records import ConversionRecord
from omniconvert.logger import RequestLogger
from omniconvert.services.ai_converter import AIConverter, is_available
from omniconvert.services.manual_converter import ManualConverter


class ConverterSession:
    """Everything one user interaction needs, created at start-up.

    Both converters write to the same ledger. History lives as long
    as the session and is never persisted.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        catalog: UnitCatalog | None = None,
        *,
        request_logger: RequestLogger | None = None,
    ) -> None:
        self.settings = settings if settings is not None else Settings()
        self.catalog = (
            catalog if catalog is not None else get_catalog(self.settings)
        )
        self.ledger = HistoryLedger()
        self.manual = ManualConverter(self.ledger, self.catalog)
        self.ai = AIConverter(
            self.ledger, self.settings, request_logger=request_logger
        )
        self._mode = ConverterMode.MANUAL

    @property
    def ai_available(self) -> bool:
        return is_available(self.settings)

    @property
    def mode(self) -> ConverterMode:
        return self._mode

    def set_mode(self, mode: str) -> ConverterMode:
        """Switch input mode; AI mode needs credentials."""
        new_mode = ConverterMode(mode)
        if new_mode is ConverterMode.AI and not self.ai_available:
            msg = "AI mode is unavailable: no API key configured"
            raise ValueError(msg)
        self._mode = new_mode
        return new_mode

    def history(self) -> list[ConversionRecord]:
        return self.ledger.list()

    def clear_history(self) -> None:
        self.ledger.clear()
