"""AI converter: submits free-text queries and records successes."""

from __future__ import annotations

import logging

from omniconvert.ai.adapter import convert_with_ai
from omniconvert.ai.schemas import AIOutcome, AISuccess
from omniconvert.config import Settings
from omniconvert.history.ledger import HistoryLedger
from omniconvert.logger import RequestLogger

logger = logging.getLogger(__name__)


def is_available(settings: Settings) -> bool:
    """Whether AI mode can be offered (some model has credentials)."""
    return settings.has_ai_credentials


class AIConverter:
    """Natural-language conversion bound to a history ledger.

    Only ``AISuccess`` outcomes are recorded. One request may be in
    flight per instance; a second ``submit`` while busy raises
    ``RuntimeError``.
    """

    def __init__(
        self,
        ledger: HistoryLedger,
        settings: Settings | None = None,
        *,
        request_logger: RequestLogger | None = None,
    ) -> None:
        self._ledger = ledger
        self._settings = settings if settings is not None else Settings()
        self._request_logger = request_logger
        self._busy = False
        self.last_outcome: AIOutcome | None = None

    @property
    def is_busy(self) -> bool:
        return self._busy

    async def submit(self, query: str) -> AIOutcome:
        if self._busy:
            msg = "An AI conversion is already in progress"
            raise RuntimeError(msg)

        self._busy = True
        try:
            outcome = await convert_with_ai(
                query,
                self._settings,
                request_logger=self._request_logger,
            )
        finally:
            self._busy = False

        if isinstance(outcome, AISuccess):
            self._ledger.record(outcome.result.to_record())
        else:
            logger.info(
                "event=ai_result_not_recorded outcome=%s",
                type(outcome).__name__,
            )
        self.last_outcome = outcome
        return outcome
