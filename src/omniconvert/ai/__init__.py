"""AI conversion adapter: free text in, structured conversion out."""

from omniconvert.ai._llm_call import LLMCallResult, guarded_llm_call
from omniconvert.ai.adapter import (
    convert_with_ai,
    dumps_outcome,
    outcome_to_dict,
    parse_ai_response,
)
from omniconvert.ai.errors import (
    FailureReason,
    MalformedResponseError,
    classify_failure,
    is_retryable,
)
from omniconvert.ai.schemas import (
    RESPONSE_SCHEMA,
    AIConversionResult,
    AIOutcome,
    AISemanticError,
    AISuccess,
    AITransportFailure,
)

__all__ = [
    "RESPONSE_SCHEMA",
    "AIConversionResult",
    "AIOutcome",
    "AISemanticError",
    "AISuccess",
    "AITransportFailure",
    "FailureReason",
    "LLMCallResult",
    "MalformedResponseError",
    "classify_failure",
    "convert_with_ai",
    "dumps_outcome",
    "guarded_llm_call",
    "is_retryable",
    "outcome_to_dict",
    "parse_ai_response",
]
