"""Logging for the omniconvert CLI.

Conversion results go to stdout and diagnostics to stderr, so the
root logger stays at WARNING unless ``--verbose`` asks for the
``event=...`` lines from the AI adapter and catalog loader.

litellm is pulled in by ``omniconvert.ai`` and configures its own
logging at import time, hence two steps:

1. ``setup_logging()`` before anything imports ``omniconvert.ai``:
   pins ``LITELLM_LOG`` and the root handler.
2. ``cleanup_third_party_handlers()`` once imports are done: drops
   the handlers litellm attached so its records are not printed
   twice.

``set_log_level()`` raises or lowers verbosity afterwards without
touching the litellm/httpx loggers, which stay at WARNING.
"""

import logging
import os

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"

# HTTP client and litellm chatter is never useful on a conversion CLI
_SUPPRESSED_LOGGERS = (
    "LiteLLM",
    "LiteLLM Router",
    "LiteLLM Proxy",
    "httpx",
    "httpcore",
)

_phase1_done = False
_phase2_done = False


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root stderr handler; a second call is a no-op."""
    global _phase1_done  # noqa: PLW0603
    if _phase1_done:
        return
    _phase1_done = True

    # litellm._logging reads this at import time.
    os.environ.setdefault("LITELLM_LOG", "WARNING")

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )

    for name in _SUPPRESSED_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def set_log_level(level: str) -> None:
    """Change root verbosity, e.g. ``"INFO"`` for ``--verbose``."""
    logging.getLogger().setLevel(getattr(logging, level.upper()))
    for name in _SUPPRESSED_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def cleanup_third_party_handlers() -> None:
    """Detach litellm's own handlers and let its records reach root."""
    global _phase2_done  # noqa: PLW0603
    if _phase2_done:
        return
    _phase2_done = True

    for name in ("LiteLLM", "LiteLLM Router", "LiteLLM Proxy"):
        lg = logging.getLogger(name)
        lg.handlers.clear()
        lg.propagate = True
