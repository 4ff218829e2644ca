"""
structlog setup for idkit

Generators and the codec never configure logging themselves; the CLI and the
metrics server call configure_logging() once at startup. Records go to stderr
so that ids printed on stdout can be piped without filtering.

Every record carries a correlation_id so that the lines belonging to one
command (issue, decode, search, ...) can be grouped. The id lives in
structlog's contextvars, so it follows threads started through contextvars
copies and asyncio tasks.
"""

import logging
import secrets
import sys
import time
from typing import Any

import structlog

_CORRELATION_KEY = "correlation_id"


def get_correlation_id() -> str:
    """Return the correlation id of the current context, creating one on first use"""
    cid = structlog.contextvars.get_contextvars().get(_CORRELATION_KEY)
    if not cid:
        cid = secrets.token_urlsafe(16)
        set_correlation_id(cid)
    return cid


def set_correlation_id(correlation_id: str) -> None:
    structlog.contextvars.bind_contextvars(**{_CORRELATION_KEY: correlation_id})


def _ensure_correlation_id(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    event_dict.setdefault(_CORRELATION_KEY, get_correlation_id())
    return event_dict


def configure_logging(*, json_output: bool = False, log_level: str = "INFO") -> None:
    """
    Route idkit's structlog events through stdlib logging on stderr

    Args:
        json_output: One JSON object per line instead of console text
        log_level: Threshold name, e.g. "WARNING" (the CLI default) or "DEBUG"
            to see every issued id and counter wrap
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
    )

    if json_output:
        renderers: list[structlog.types.Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderers = [
            structlog.processors.ExceptionRenderer(),
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            _ensure_correlation_id,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            *renderers,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


class LogOperation:
    """
    Time one idkit operation and log its outcome

    Success is logged at DEBUG as "<operation> completed"; an exception is
    logged at WARNING as "<operation> failed" with the error text and is
    re-raised unchanged.

    Example:
        >>> with LogOperation(logger, "issue", kind="random"):
        ...     issued = service.issue_random()
    """

    def __init__(
        self, logger: structlog.stdlib.BoundLogger, operation: str, **context: Any
    ):
        self.log = logger.bind(operation=operation, **context)
        self.operation = operation
        self.started = 0.0

    def __enter__(self) -> "LogOperation":
        self.started = time.perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        elapsed_ms = round((time.perf_counter() - self.started) * 1000, 2)
        if exc_type is None:
            self.log.debug(f"{self.operation} completed", duration_ms=elapsed_ms)
        else:
            self.log.warning(
                f"{self.operation} failed", duration_ms=elapsed_ms, error=str(exc_val)
            )
