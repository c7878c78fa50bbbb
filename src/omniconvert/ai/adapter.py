"""Natural-language conversion through a hosted language model."""

from __future__ import annotations

import json
import logging
import time
import uuid

from pydantic import ValidationError

from omniconvert.ai._llm_call import guarded_llm_call
from omniconvert.ai.errors import (
    FailureReason,
    MalformedResponseError,
    classify_failure,
)
from omniconvert.ai.prompts import build_messages
from omniconvert.ai.schemas import (
    RESPONSE_SCHEMA,
    AIConversionResult,
    AIOutcome,
    AISemanticError,
    AISuccess,
    AITransportFailure,
)
from omniconvert.config import PROVIDER_KEY_FIELDS, Settings
from omniconvert.constants import ERROR_TRUNCATION_CHARS
from omniconvert.logger import RequestLogger

logger = logging.getLogger(__name__)


def parse_ai_response(raw: str) -> AIConversionResult:
    """Validate a model reply against the seven-field schema.

    Raises ``MalformedResponseError`` for empty replies, invalid JSON
    or schema violations.
    """
    if not raw.strip():
        msg = "Empty response from model"
        raise MalformedResponseError(msg)
    try:
        return AIConversionResult.model_validate_json(raw)
    except ValidationError as exc:
        msg = f"Response does not match the conversion schema: {exc}"
        raise MalformedResponseError(msg) from exc


def usable_models(settings: Settings) -> list[str]:
    """Models in the chain whose provider has a key configured.

    Providers we hold no key field for are kept; litellm reads their
    credentials from the environment itself.
    """
    models: list[str] = []
    for model in settings.litellm_model_chain:
        provider = model.split("/", 1)[0] if "/" in model else ""
        if provider in PROVIDER_KEY_FIELDS and not settings.api_key_for(model):
            logger.debug("event=model_skipped_no_key model=%s", model)
            continue
        models.append(model)
    return models


async def convert_with_ai(
    query: str,
    settings: Settings | None = None,
    *,
    request_logger: RequestLogger | None = None,
) -> AIOutcome:
    """Ask the model to interpret and perform a conversion.

    Tries each usable model in the chain until one returns a valid
    record. Never raises for transport or parse problems; those come
    back as ``AITransportFailure``. Raises ``ValueError`` for a blank
    query.
    """
    if not query.strip():
        msg = "query must be a non-empty string"
        raise ValueError(msg)
    if settings is None:
        settings = Settings()

    request_id = uuid.uuid4().hex[:12]
    models = usable_models(settings)
    if not models:
        logger.warning(
            "event=ai_no_credentials request_id=%s chain=%s",
            request_id,
            ",".join(settings.litellm_model_chain),
        )
        failure = AITransportFailure(
            FailureReason.MISSING_CREDENTIALS,
            "No API key for any model in the chain",
        )
        if request_logger is not None:
            request_logger.log_error(
                request_id, failure.reason, failure.detail
            )
        return failure

    messages = build_messages(query)
    last_failure = AITransportFailure(FailureReason.UNKNOWN)

    for model in models:
        started = time.perf_counter()
        try:
            call = await guarded_llm_call(
                model,
                messages,
                settings.llm_timeout_seconds,
                response_schema=RESPONSE_SCHEMA,
                api_key=settings.api_key_for(model),
                temperature=settings.llm_temperature,
            )
            result = parse_ai_response(call.content)
        except Exception as exc:
            reason = classify_failure(exc)
            logger.warning(
                "event=ai_convert_failed request_id=%s model=%s reason=%s",
                request_id,
                model,
                reason,
                exc_info=True,
            )
            last_failure = AITransportFailure(
                reason, str(exc)[:ERROR_TRUNCATION_CHARS]
            )
            if request_logger is not None:
                request_logger.log_error(request_id, reason, str(exc))
            continue

        duration_ms = round((time.perf_counter() - started) * 1000, 1)
        outcome: AIOutcome = (
            AISemanticError(result)
            if result.is_semantic_error
            else AISuccess(result)
        )
        logger.info(
            "event=ai_convert_done request_id=%s model=%s "
            "semantic_error=%s duration_ms=%.1f",
            request_id,
            model,
            result.is_semantic_error,
            duration_ms,
        )
        if request_logger is not None:
            request_logger.log_request(
                request_id,
                query,
                model,
                "semantic_error" if result.is_semantic_error else "success",
                call.total_tokens,
                duration_ms,
            )
        return outcome

    return last_failure


def outcome_to_dict(outcome: AIOutcome) -> dict[str, object]:
    """JSON-ready view of an outcome, tagged by ``status``."""
    match outcome:
        case AISuccess(result=result):
            return {
                "status": "success",
                "result": result.model_dump(by_alias=True),
            }
        case AISemanticError(result=result):
            return {
                "status": "semantic_error",
                "message": outcome.message,
                "result": result.model_dump(by_alias=True),
            }
        case AITransportFailure(reason=reason):
            return {
                "status": "failure",
                "reason": str(reason),
                "message": outcome.message,
            }


def dumps_outcome(outcome: AIOutcome) -> str:
    return json.dumps(outcome_to_dict(outcome), indent=2)
