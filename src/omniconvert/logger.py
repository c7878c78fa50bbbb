"""Structured JSON logger for AI conversion requests."""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from omniconvert.constants import ERROR_TRUNCATION_CHARS
from omniconvert.logging_config import LOG_DATEFMT, LOG_FORMAT

__all__ = ["RequestLogger", "LOG_FORMAT", "LOG_DATEFMT"]


class RequestLogger:
    """Writes one JSON line per AI request or failure to ``ai.log``."""

    def __init__(self, log_dir: Path, level: str = "INFO") -> None:
        self._log_dir = log_dir
        self._log_dir.mkdir(parents=True, exist_ok=True)
        self._logger = logging.getLogger("omniconvert.requests")
        self._logger.setLevel(getattr(logging, level.upper()))
        self._logger.propagate = False

        log_file = (log_dir / "ai.log").resolve()
        for existing in list(self._logger.handlers):
            if (
                isinstance(existing, logging.FileHandler)
                and Path(existing.baseFilename) != log_file
            ):
                self._logger.removeHandler(existing)
                existing.close()

        if not self._logger.handlers:
            handler = logging.FileHandler(log_file)
            handler.setFormatter(logging.Formatter("%(message)s"))
            self._logger.addHandler(handler)

    def log_request(
        self,
        request_id: str,
        query: str,
        model: str,
        outcome: str,
        tokens: int,
        duration_ms: float,
    ) -> None:
        self._logger.info(
            json.dumps({
                "type": "request",
                "timestamp": datetime.now(UTC).isoformat(),
                "request_id": request_id,
                "query": query[:ERROR_TRUNCATION_CHARS],
                "model": model,
                "outcome": outcome,
                "tokens": tokens,
                "duration_ms": duration_ms,
            })
        )

    def log_error(
        self,
        request_id: str,
        reason: str,
        error: str,
    ) -> None:
        self._logger.error(
            json.dumps({
                "type": "error",
                "timestamp": datetime.now(UTC).isoformat(),
                "request_id": request_id,
                "reason": reason,
                "error": error[:ERROR_TRUNCATION_CHARS],
            })
        )
