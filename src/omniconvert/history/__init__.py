"""History ledger and its record type."""

from omniconvert.history.ledger import HistoryLedger
from omniconvert.history.records import (
    ConversionRecord,
    manual_record,
    now_ms,
)

__all__ = [
    "ConversionRecord",
    "HistoryLedger",
    "manual_record",
    "now_ms",
]
