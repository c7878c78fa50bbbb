"""Pydantic models for AI conversion output and the adapter's outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from omniconvert.ai.errors import FailureReason, is_retryable, user_message
from omniconvert.constants import AI_DEFAULT_CATEGORY, AI_ERROR_UNIT
from omniconvert.engine.formatting import format_number
from omniconvert.history.records import ConversionRecord, now_ms

_FIELD_DESCRIPTIONS: dict[str, tuple[str, str]] = {
    "sourceValue": (
        "number",
        "The numeric value extracted from the source.",
    ),
    "sourceUnit": ("string", "The unit of the source value."),
    "targetValue": (
        "number",
        "The calculated converted numeric value.",
    ),
    "targetUnit": ("string", "The unit converted to."),
    "category": (
        "string",
        "The category of the unit (e.g., Length, Mass, Custom).",
    ),
    "explanation": (
        "string",
        "A brief, friendly explanation of the conversion or context.",
    ),
    "formula": (
        "string",
        "The mathematical formula used for this conversion "
        "(e.g. x * 2.2).",
    ),
}

# JSON schema sent as the structured-output constraint.
RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        name: {"type": kind, "description": desc}
        for name, (kind, desc) in _FIELD_DESCRIPTIONS.items()
    },
    "required": list(_FIELD_DESCRIPTIONS),
    "additionalProperties": False,
}


class AIConversionResult(BaseModel):
    """Structured conversion returned by the model.

    All seven fields are required. Strict mode rejects numbers sent
    as strings. ``source_unit == "Error"`` marks a query the model
    could not read as a conversion.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    source_value: float
    source_unit: str
    target_value: float
    target_unit: str
    category: str
    explanation: str
    formula: str

    @property
    def is_semantic_error(self) -> bool:
        return self.source_unit == AI_ERROR_UNIT

    def to_record(self, *, timestamp: int | None = None) -> ConversionRecord:
        """Snapshot for the history ledger."""
        return ConversionRecord(
            from_value=format_number(self.source_value),
            from_unit=self.source_unit,
            to_value=format_number(self.target_value),
            to_unit=self.target_unit,
            category=self.category or AI_DEFAULT_CATEGORY,
            timestamp=now_ms() if timestamp is None else timestamp,
            explanation=self.explanation,
            is_ai_generated=True,
        )


# ── Outcomes ─────────────────────────────────────────────


@dataclass(frozen=True)
class AISuccess:
    result: AIConversionResult


@dataclass(frozen=True)
class AISemanticError:
    """The model answered, but the query was not a conversion."""

    result: AIConversionResult

    @property
    def message(self) -> str:
        return (
            self.result.explanation
            if self.result.explanation
            and self.result.explanation != AI_ERROR_UNIT
            else "That doesn't look like a conversion request."
        )


@dataclass(frozen=True)
class AITransportFailure:
    """No structured result could be produced."""

    reason: FailureReason
    detail: str = ""

    @property
    def message(self) -> str:
        return user_message(self.reason)

    @property
    def retryable(self) -> bool:
        return is_retryable(self.reason)


AIOutcome: TypeAlias = AISuccess | AISemanticError | AITransportFailure
