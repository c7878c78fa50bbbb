"""Classification of AI transport failures.

Callers only need "the conversion could not be produced", but the
reason picks the message shown to the user and whether trying
again is worthwhile.
"""

from __future__ import annotations

import asyncio
from enum import StrEnum

from circuitbreaker import CircuitBreakerError


class FailureReason(StrEnum):
    MISSING_CREDENTIALS = "missing_credentials"
    AUTH = "auth"  # 401, 403
    RATE_LIMIT = "rate_limit"  # 429
    TIMEOUT = "timeout"
    NETWORK = "network"
    SERVER = "server"  # 5xx
    REJECTED = "rejected"  # other 4xx
    UNAVAILABLE = "unavailable"  # circuit open
    MALFORMED = "malformed"  # unparseable or schema-violating reply
    UNKNOWN = "unknown"


class MalformedResponseError(ValueError):
    """The model's reply is not a valid conversion record."""


_MESSAGES: dict[FailureReason, str] = {
    FailureReason.MISSING_CREDENTIALS: (
        "AI conversion is not configured: no API key found."
    ),
    FailureReason.AUTH: (
        "The AI service rejected the configured API key."
    ),
    FailureReason.REJECTED: (
        "The AI service could not handle this request."
    ),
}

_RETRY_MESSAGE = "Failed to process conversion. Please try again."

_RETRYABLE = frozenset({
    FailureReason.RATE_LIMIT,
    FailureReason.TIMEOUT,
    FailureReason.NETWORK,
    FailureReason.SERVER,
    FailureReason.UNAVAILABLE,
    FailureReason.MALFORMED,
    FailureReason.UNKNOWN,
})


def classify_failure(error: BaseException) -> FailureReason:
    """Map an exception raised while calling the model to a reason.

    Checks our own types first, then a structured ``status_code``
    (litellm, httpx, openai), then falls back to message text.
    """
    if isinstance(error, MalformedResponseError):
        return FailureReason.MALFORMED
    if isinstance(error, CircuitBreakerError):
        return FailureReason.UNAVAILABLE
    if isinstance(error, (TimeoutError, asyncio.TimeoutError)):
        return FailureReason.TIMEOUT

    status_code = getattr(error, "status_code", None)
    if isinstance(status_code, int):
        if status_code in (401, 403):
            return FailureReason.AUTH
        if status_code == 429:
            return FailureReason.RATE_LIMIT
        if status_code == 408:
            return FailureReason.TIMEOUT
        if 400 <= status_code < 500:
            return FailureReason.REJECTED
        if 500 <= status_code < 600:
            return FailureReason.SERVER

    msg = str(error).lower()
    if "timeout" in msg or "timed out" in msg:
        return FailureReason.TIMEOUT
    if "429" in msg or "rate limit" in msg or "rate_limit" in msg:
        return FailureReason.RATE_LIMIT
    if "api key" in msg or "api_key" in msg or "unauthorized" in msg:
        return FailureReason.AUTH
    if "econnrefused" in msg or "connection" in msg:
        return FailureReason.NETWORK
    if any(code in msg for code in ("500", "502", "503", "504")):
        return FailureReason.SERVER

    return FailureReason.UNKNOWN


def is_retryable(reason: FailureReason) -> bool:
    """True if asking again may succeed without a config change."""
    return reason in _RETRYABLE


def user_message(reason: FailureReason) -> str:
    return _MESSAGES.get(reason, _RETRY_MESSAGE)
