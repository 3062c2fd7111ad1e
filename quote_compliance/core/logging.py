"""
Quote Compliance logging system.

Features:
- Structured output (JSON) for production, colored console output in debug
- Request-ID tracing through a context variable
- Separate audit and performance loggers
- Optional rotating log files

Usage:
    from quote_compliance.core.logging import get_logger, LogContext

    logger = get_logger(__name__)
    logger.info("Analysis started", extra={"locale": "fr-BE"})

    with LogContext(logger, "quote analysis", locale="fr-BE"):
        ...
"""

import json
import logging
import sys
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler, TimedRotatingFileHandler
from typing import Any

from .config import settings

# Context variable: thread/task-safe request ID
request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)


def get_request_id() -> str:
    """
    Return the current request ID.

    Returns:
        str: Request ID ("no-request-id" when unset)
    """
    return request_id_var.get() or "no-request-id"


def set_request_id(request_id: str | None = None) -> str:
    """
    Set the request ID for the current context.

    Args:
        request_id: Request ID to set (generated when None)

    Returns:
        str: The request ID that was set
    """
    if request_id is None:
        request_id = str(uuid.uuid4())[:8]
    request_id_var.set(request_id)
    return request_id


class RequestIdFilter(logging.Filter):
    """Attach the current request ID to every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id()
        return True


class JSONFormatter(logging.Formatter):
    """
    Format log records as single-line JSON.

    Only whitelisted ``extra`` fields are emitted so quote text never ends
    up in the logs by accident.
    """

    EXTRA_FIELDS = (
        "locale",
        "sensitivity",
        "field",
        "risk_id",
        "pattern_id",
        "mention_id",
        "total_risks",
        "score",
        "duration_ms",
        "status_code",
        "method",
        "path",
        "error_code",
        "event_type",
    )

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", "no-request-id"),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for field in self.EXTRA_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class ColoredFormatter(logging.Formatter):
    """Console formatter colouring the level name (development only)."""

    COLORS = {
        "DEBUG": "\033[36m",  # cyan
        "INFO": "\033[32m",  # green
        "WARNING": "\033[33m",  # yellow
        "ERROR": "\033[31m",  # red
        "CRITICAL": "\033[35m",  # magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        request_id = getattr(record, "request_id", "no-request-id")

        formatted = (
            f"{color}{record.levelname:8}{self.RESET} "
            f"[{request_id}] "
            f"{record.name}: "
            f"{record.getMessage()}"
        )

        if record.exc_info:
            formatted += f"\n{self.formatException(record.exc_info)}"

        return formatted


def setup_logging() -> None:
    """
    Configure logging for the whole application.

    Sets up:
    - the root logger (console, plus rotating files when ``log_to_file``)
    - the audit logger (``quote_compliance.audit``)
    - the performance logger (``quote_compliance.performance``)
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    request_id_filter = RequestIdFilter()

    # ========================================
    # Console handler
    # ========================================
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.addFilter(request_id_filter)

    if settings.debug:
        console_handler.setFormatter(ColoredFormatter())
    else:
        console_handler.setFormatter(JSONFormatter())

    root_logger.addHandler(console_handler)

    audit_logger = logging.getLogger("quote_compliance.audit")
    audit_logger.setLevel(logging.INFO)

    perf_logger = logging.getLogger("quote_compliance.performance")
    perf_logger.setLevel(logging.INFO)

    if settings.log_to_file:
        settings.ensure_log_dir()

        # ========================================
        # Main log file (rotating)
        # ========================================
        main_file_handler = RotatingFileHandler(
            filename=settings.log_dir / "quote_compliance.log",
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=10,
            encoding="utf-8",
        )
        main_file_handler.setLevel(log_level)
        main_file_handler.addFilter(request_id_filter)
        main_file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(main_file_handler)

        # ========================================
        # Audit log (daily rotation)
        # ========================================
        audit_logger.propagate = False
        audit_handler = TimedRotatingFileHandler(
            filename=settings.log_dir / "quote_compliance_audit.log",
            when="midnight",
            interval=1,
            backupCount=90,
            encoding="utf-8",
        )
        audit_handler.addFilter(request_id_filter)
        audit_handler.setFormatter(JSONFormatter())
        audit_logger.addHandler(audit_handler)

        # ========================================
        # Performance log
        # ========================================
        perf_logger.propagate = False
        perf_handler = RotatingFileHandler(
            filename=settings.log_dir / "quote_compliance_performance.log",
            maxBytes=50 * 1024 * 1024,  # 50MB
            backupCount=5,
            encoding="utf-8",
        )
        perf_handler.addFilter(request_id_filter)
        perf_handler.setFormatter(JSONFormatter())
        perf_logger.addHandler(perf_handler)

    # Third-party noise
    logging.getLogger("uvicorn").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Return the logger for ``name`` (usually ``__name__``).

    Args:
        name: Logger name

    Returns:
        logging.Logger: Logger instance
    """
    return logging.getLogger(name)


# Special-purpose logger aliases
audit_log = logging.getLogger("quote_compliance.audit")
perf_log = logging.getLogger("quote_compliance.performance")


class LogContext:
    """
    Context manager logging start, end and duration of an operation.

    Usage:
        with LogContext(logger, "quote analysis", locale="fr-BE"):
            ...
    """

    def __init__(
        self,
        logger: logging.Logger,
        operation: str,
        level: int = logging.INFO,
        **context: Any,
    ):
        self.logger = logger
        self.operation = operation
        self.level = level
        self.context = context
        self.start_time: datetime | None = None

    def __enter__(self) -> "LogContext":
        self.start_time = datetime.now()
        self.logger.log(self.level, f"{self.operation} started", extra=self.context)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        duration_ms = (datetime.now() - self.start_time).total_seconds() * 1000

        if exc_type is not None:
            self.logger.error(
                f"{self.operation} failed",
                extra={**self.context, "duration_ms": duration_ms},
                exc_info=True,
            )
        else:
            self.logger.log(
                self.level,
                f"{self.operation} completed",
                extra={**self.context, "duration_ms": duration_ms},
            )

        perf_log.info(
            f"{self.operation}",
            extra={
                **self.context,
                "duration_ms": duration_ms,
                "success": exc_type is None,
            },
        )
