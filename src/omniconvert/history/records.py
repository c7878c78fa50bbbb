"""History entries: frozen snapshots of committed conversions.

A record holds display strings only. It keeps no reference to the
catalog, so it stays valid if the catalog it came from is replaced.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any


def now_ms() -> int:
    """Milliseconds since the epoch."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class ConversionRecord:
    """One committed conversion, manual or AI-generated."""

    from_value: str
    from_unit: str  # symbol
    to_value: str
    to_unit: str  # symbol
    category: str
    timestamp: int  # ms since epoch
    explanation: str | None = None
    is_ai_generated: bool = False

    def repeats(self, other: ConversionRecord) -> bool:
        """True if ``other`` is the same request (value and unit pair)."""
        return (
            self.from_value == other.from_value
            and self.from_unit == other.from_unit
            and self.to_unit == other.to_unit
        )

    def to_dict(self) -> dict[str, Any]:
        """camelCase mapping for JSON output."""
        data: dict[str, Any] = {
            "fromValue": self.from_value,
            "fromUnit": self.from_unit,
            "toValue": self.to_value,
            "toUnit": self.to_unit,
            "category": self.category,
            "timestamp": self.timestamp,
        }
        if self.explanation is not None:
            data["explanation"] = self.explanation
        if self.is_ai_generated:
            data["isAiGenerated"] = True
        return data

    def __str__(self) -> str:
        tag = " [AI]" if self.is_ai_generated else ""
        return (
            f"{self.from_value} {self.from_unit} → "
            f"{self.to_value} {self.to_unit} ({self.category}){tag}"
        )


def manual_record(
    from_value: str,
    from_unit: str,
    to_value: str,
    to_unit: str,
    category: str,
    *,
    timestamp: int | None = None,
) -> ConversionRecord:
    """Build a record for a manual (table-driven) conversion."""
    return ConversionRecord(
        from_value=from_value,
        from_unit=from_unit,
        to_value=to_value,
        to_unit=to_unit,
        category=str(category),
        timestamp=now_ms() if timestamp is None else timestamp,
    )
