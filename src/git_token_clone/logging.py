"""Logging configuration with credential redaction."""

import logging
import re
import sys
from typing import Any, Dict, Iterable, List

import structlog

_BEARER_RE = re.compile(r"(?i)(bearer\s+)([^\s\"',]+)")
_URL_CREDS_RE = re.compile(r"(https?://[^/\s:@]+:)([^@\s/]+)(@)")

_secrets: List[str] = []


def register_secret(value: str) -> None:
    """Mask ``value`` wherever it appears in later log events."""
    if value and value not in _secrets:
        _secrets.append(value)


def clear_secrets() -> None:
    _secrets.clear()


def redact(text: str, secrets: Iterable[str] = ()) -> str:
    """Remove bearer values, URL passwords and known secrets from ``text``."""
    out = _BEARER_RE.sub(r"\1***", text)
    out = _URL_CREDS_RE.sub(r"\1***\3", out)
    for secret in (*_secrets, *secrets):
        if secret:
            out = out.replace(secret, "***")
    return out


def _redact_value(value: Any) -> Any:
    if isinstance(value, str):
        return redact(value)
    if isinstance(value, (list, tuple)):
        return type(value)(_redact_value(v) for v in value)
    if isinstance(value, dict):
        return {k: _redact_value(v) for k, v in value.items()}
    return value


def redact_processor(_logger: Any, _method: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """structlog processor that scrubs credentials from every field."""
    return {k: _redact_value(v) for k, v in event_dict.items()}


def configure_logging(level: str = "WARNING", structured: bool = False) -> None:
    """Configure logging for the CLI.

    Logs go to stderr so that stdout only carries git output and status lines.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        structured: Whether to render JSON instead of console lines
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    renderer: Any
    if structured:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            redact_processor,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.handlers[:] = [handler]
    root.setLevel(log_level)

    # GitPython logs full command lines at DEBUG
    logging.getLogger("git").setLevel(max(log_level, logging.INFO))


def get_logger(name: str, **context: Any) -> Any:
    """Get a logger instance with optional bound context.

    Args:
        name: Logger name
        **context: Additional context to bind to the logger

    Returns:
        structlog bound logger
    """
    logger = structlog.get_logger(name)
    if context:
        logger = logger.bind(**context)
    return logger
