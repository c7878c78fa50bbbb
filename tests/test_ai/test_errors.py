"""Tests for AI failure classification."""

from __future__ import annotations

import asyncio

import pytest
from circuitbreaker import CircuitBreaker, CircuitBreakerError

from omniconvert.ai.errors import (
    FailureReason,
    MalformedResponseError,
    classify_failure,
    is_retryable,
    user_message,
)


class _StatusError(Exception):
    def __init__(self, status_code: int, message: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code


class TestClassifyFailure:
    def test_malformed(self) -> None:
        assert (
            classify_failure(MalformedResponseError("bad"))
            is FailureReason.MALFORMED
        )

    def test_circuit_open(self) -> None:
        breaker = CircuitBreaker(name="test_classify")
        assert (
            classify_failure(CircuitBreakerError(breaker))
            is FailureReason.UNAVAILABLE
        )

    def test_timeout_types(self) -> None:
        assert classify_failure(TimeoutError()) is FailureReason.TIMEOUT
        assert (
            classify_failure(asyncio.TimeoutError())
            is FailureReason.TIMEOUT
        )

    @pytest.mark.parametrize(
        ("status", "reason"),
        [
            (401, FailureReason.AUTH),
            (403, FailureReason.AUTH),
            (408, FailureReason.TIMEOUT),
            (429, FailureReason.RATE_LIMIT),
            (400, FailureReason.REJECTED),
            (404, FailureReason.REJECTED),
            (500, FailureReason.SERVER),
            (503, FailureReason.SERVER),
        ],
    )
    def test_status_codes(self, status: int, reason: FailureReason) -> None:
        assert classify_failure(_StatusError(status)) is reason

    @pytest.mark.parametrize(
        ("message", "reason"),
        [
            ("Request timed out", FailureReason.TIMEOUT),
            ("HTTP 429 Too Many Requests", FailureReason.RATE_LIMIT),
            ("Invalid API key provided", FailureReason.AUTH),
            ("connect ECONNREFUSED 127.0.0.1", FailureReason.NETWORK),
            ("upstream returned 502", FailureReason.SERVER),
            ("something odd", FailureReason.UNKNOWN),
        ],
    )
    def test_message_fallback(
        self, message: str, reason: FailureReason
    ) -> None:
        assert classify_failure(RuntimeError(message)) is reason


class TestRetryableAndMessages:
    def test_config_problems_not_retryable(self) -> None:
        assert not is_retryable(FailureReason.MISSING_CREDENTIALS)
        assert not is_retryable(FailureReason.AUTH)
        assert not is_retryable(FailureReason.REJECTED)

    def test_transient_problems_retryable(self) -> None:
        for reason in (
            FailureReason.RATE_LIMIT,
            FailureReason.TIMEOUT,
            FailureReason.SERVER,
            FailureReason.UNAVAILABLE,
        ):
            assert is_retryable(reason)

    def test_generic_retry_message(self) -> None:
        assert user_message(FailureReason.SERVER) == (
            "Failed to process conversion. Please try again."
        )

    def test_missing_credentials_message(self) -> None:
        assert "no API key" in user_message(
            FailureReason.MISSING_CREDENTIALS
        )
