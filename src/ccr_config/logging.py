"""Diagnostic logging setup - masks secrets automatically."""

import logging
import re
import sys

import structlog

# Patterns that indicate sensitive values in log entries
_SENSITIVE_KEYS = re.compile(
    r"(api_key|api[-_]?secret|token|password|secret|credential|auth)",
    re.IGNORECASE,
)


def _mask_sensitive_values(
    logger: object, method_name: str, event_dict: dict,
) -> dict:
    """Structlog processor that masks values for sensitive-looking keys."""
    for key in list(event_dict.keys()):
        if _SENSITIVE_KEYS.search(key):
            val = event_dict[key]
            if isinstance(val, str) and len(val) > 8:
                event_dict[key] = val[:4] + "***" + val[-4:]
            elif isinstance(val, str):
                event_dict[key] = "***"
    return event_dict


def setup_logging(level: str = "WARNING") -> None:
    """Configure structured logging on stderr so it never mixes with prompts."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _mask_sensitive_values,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
