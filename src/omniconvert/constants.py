"""Shared constants: single source of truth for cross-module values.

StrEnum members are str-compatible, so category names compare equal
to the plain strings stored in history records and catalog files.
"""

from __future__ import annotations

from enum import StrEnum

# ── String Enums ─────────────────────────────────────────


class UnitCategory(StrEnum):
    """Built-in unit categories, in display order."""

    LENGTH = "Length"
    MASS = "Mass"
    TEMPERATURE = "Temperature"
    VOLUME = "Volume"
    AREA = "Area"
    TIME = "Time"
    DIGITAL = "Digital Storage"
    SPEED = "Speed"


class ConverterMode(StrEnum):
    """Input modes offered to the user."""

    MANUAL = "manual"
    AI = "ai"


# ── Sentinels ────────────────────────────────────────────

# Display value for unparseable or non-finite input.
NO_RESULT = "---"

# Unit the AI returns when a query is not a conversion request.
AI_ERROR_UNIT = "Error"

# Category recorded for AI results that name no category.
AI_DEFAULT_CATEGORY = "AI Custom"

# ── Temperature ──────────────────────────────────────────

CELSIUS_ID = "c"
FAHRENHEIT_ID = "f"
KELVIN_ID = "k"

KELVIN_OFFSET = 273.15
FAHRENHEIT_OFFSET = 32

# ── History ──────────────────────────────────────────────

HISTORY_CAPACITY = 10

# ── Formatting ───────────────────────────────────────────

RESULT_DECIMALS = 6

# Sample values for the quick reference table.
REFERENCE_VALUES: tuple[float, ...] = (1, 5, 10, 50, 100)

# ── Manual converter defaults ────────────────────────────

DEFAULT_INPUT = "1"

# ── Circuit Breaker Configuration ────────────────────────

CB_LLM_FAILURE_THRESHOLD = 5
CB_LLM_RECOVERY_TIMEOUT = 30

# ── Retry Strategy ───────────────────────────────────────

RETRY_MAX_ATTEMPTS = 3
RETRY_INITIAL_WAIT = 2
RETRY_MAX_WAIT = 30

# ── LLM Output ───────────────────────────────────────────

LLM_MAX_OUTPUT_TOKENS = 1024
LLM_TEMPERATURE = 0.1

# ── Misc ─────────────────────────────────────────────────

ERROR_TRUNCATION_CHARS = 200
