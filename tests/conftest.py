"""Shared test fixtures: demo credentials, fresh ledgers and sessions."""

import os

# Force demo API keys for all tests; no real LLM calls.
# Set at import time so any Settings() created during collection
# or in tests sees them, whatever the shell environment holds.
os.environ["GEMINI_API_KEY"] = "for-demo-purposes-only"
os.environ["OPENAI_API_KEY"] = "for-demo-purposes-only"
os.environ["ANTHROPIC_API_KEY"] = "for-demo-purposes-only"
os.environ.pop("CATALOG_FILE", None)
os.environ.pop("LITELLM_MODEL_CHAIN", None)

from pathlib import Path

import pytest

from omniconvert.ai.schemas import AIConversionResult
from omniconvert.config import Settings
from omniconvert.history.ledger import HistoryLedger
from omniconvert.history.records import ConversionRecord, manual_record
from omniconvert.services.session import ConverterSession


def make_record(
    from_value: str = "1",
    from_unit: str = "km",
    to_unit: str = "m",
    *,
    to_value: str = "1000",
    category: str = "Length",
    timestamp: int = 1_700_000_000_000,
) -> ConversionRecord:
    """Build a manual record with sensible defaults."""
    return manual_record(
        from_value=from_value,
        from_unit=from_unit,
        to_value=to_value,
        to_unit=to_unit,
        category=category,
        timestamp=timestamp,
    )


def make_ai_result(**overrides: object) -> AIConversionResult:
    """Build a valid AI result; keyword overrides use field names."""
    data: dict[str, object] = {
        "source_value": 5.0,
        "source_unit": "mi",
        "target_value": 8.04672,
        "target_unit": "km",
        "category": "Length",
        "explanation": "One mile is 1.609344 kilometers.",
        "formula": "x * 1.609344",
    }
    data.update(overrides)
    return AIConversionResult(**data)  # type: ignore[arg-type]


@pytest.fixture
def ledger() -> HistoryLedger:
    return HistoryLedger()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        gemini_api_key="test-key",
        litellm_model_chain=["gemini/gemini-2.5-flash"],
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def session(settings: Settings) -> ConverterSession:
    return ConverterSession(settings)
