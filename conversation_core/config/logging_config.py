import logging
from logging.handlers import RotatingFileHandler
import io
import sys
from pathlib import Path
from contextvars import ContextVar
from conversation_core.config.settings import Config

NO_CORRELATION_ID = "NO Correlation ID"

# Context variable to store correlation ID across async boundaries
correlation_id_var: ContextVar[str] = ContextVar(
    "correlation_id", default=NO_CORRELATION_ID
)


class CorrelationIdFilter(logging.Filter):
    """Logging filter to add correlation ID to log records."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get()
        return True


class SafeFormatter(logging.Formatter):
    """Formatter that ensures correlation_id always exists."""

    def format(self, record):
        if not hasattr(record, "correlation_id"):
            record.correlation_id = NO_CORRELATION_ID
        return super().format(record)


# Loggers that stay at WARNING even when the service runs at DEBUG
NOISY_LOGGERS = ("prisma", "httpx", "httpcore", "uvicorn.access", "asyncio")


def setup_logging(level: str = "INFO", log_file: str | None = None):
    """
    Configure root handlers once per process.

    Only the conversation_core logger follows `level`; everything else is held
    at WARNING.
    """
    root = logging.getLogger()
    root.setLevel(logging.WARNING)
    if any(isinstance(h.formatter, SafeFormatter) for h in root.handlers):
        # Already configured (uvicorn --reload re-imports main)
        return root

    formatter = SafeFormatter(Config.LOG_FORMAT)
    handlers = [
        logging.StreamHandler(io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8"))
    ]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=5)
        )
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(CorrelationIdFilter())
        root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    service_logger = logging.getLogger("conversation_core")
    service_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    service_logger.info(
        f"Logging is set up: level={level}, file={log_file or 'stdout only'}"
    )
    return root
