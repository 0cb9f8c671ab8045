"""Logging configuration for MCP Jira.

Log records carry a per-thread context (operation name, trace id, ...) so
that the lines belonging to one tool call can be grepped together. The
context store is shared by every logger, so a context set through
``log_function`` on the ``mcp-jira`` logger also tags the records of the
module loggers.
Console output goes to stderr because stdout is the MCP stdio channel.
"""

import logging
import os
import sys
import threading
import time
import types
import uuid
from collections.abc import Callable, Mapping
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, TypeVar, cast

T = TypeVar("T")

DEFAULT_LOGGER_NAME = "mcp-jira"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [%(context)s] %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_DIRECTORY = "logs"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5

_context_data = threading.local()


def _context_string() -> str:
    context_data = getattr(_context_data, "data", {})
    if not context_data:
        return "no-context"
    return ",".join(f"{k}={v}" for k, v in context_data.items())


class ContextualLogger(logging.Logger):
    """Logger that attaches the thread-local context to every record."""

    _context_data = _context_data

    def _get_context_str(self) -> str:
        return _context_string()

    def _log(
        self,
        level: int,
        msg: object,
        args: tuple[object, ...] | Mapping[str, object],
        exc_info: Any = None,
        extra: Mapping[str, object] | None = None,
        stack_info: bool = False,
        stacklevel: int = 1,
    ) -> None:
        extra = dict(extra or {})
        extra.setdefault("context", self._get_context_str())
        super()._log(level, msg, args, exc_info, extra, stack_info, stacklevel + 1)

    def get_context(self) -> dict[str, Any]:
        """Return a copy of the current thread's context."""
        return dict(getattr(self._context_data, "data", {}))

    def set_context(self, **kwargs: Any) -> None:
        """
        Set context values for the current thread.

        Args:
            **kwargs: Key-value pairs to add to the context
        """
        if not hasattr(self._context_data, "data"):
            self._context_data.data = {}
        self._context_data.data.update(kwargs)

    def restore_context(self, context: dict[str, Any]) -> None:
        """Replace the current thread's context."""
        self._context_data.data = context

    def clear_context(self) -> None:
        """Remove all context data from the current thread."""
        self._context_data.data = {}


class _ContextFilter(logging.Filter):
    """Fills in ``context`` for records from plain (non-contextual) loggers."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = _context_string()
        return True


class LoggingContextManager:
    """Context manager that logs the start, end and duration of an operation."""

    def __init__(
        self, logger: ContextualLogger, operation: str, **context: Any
    ) -> None:
        """
        Args:
            logger: Contextual logger
            operation: Name of the operation being executed
            **context: Additional context data
        """
        self.logger = logger
        self.operation = operation
        self.context = context.copy()
        self.trace_id = context.get("trace_id", str(uuid.uuid4())[:8])
        self.start_time = 0.0
        self.old_context: dict[str, Any] = {}

    def __enter__(self) -> "LoggingContextManager":
        self.start_time = time.time()
        self.old_context = self.logger.get_context()
        self.context["operation"] = self.operation
        self.context["trace_id"] = self.trace_id
        self.logger.set_context(**self.context)
        self.logger.debug(f"Operation started: {self.operation}")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        duration = time.time() - self.start_time
        if exc_type:
            self.logger.error(
                f"Operation failed: {self.operation} after {duration:.3f}s - {exc_val}"
            )
        else:
            self.logger.debug(
                f"Operation completed: {self.operation} in {duration:.3f}s"
            )
        self.logger.restore_context(self.old_context)


def setup_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: str | None = None,
    log_to_file: bool = False,
    log_dir: str | None = None,
    log_format: str | None = None,
) -> ContextualLogger:
    """
    Configure and return a contextual logger.

    Calling this again for the same name replaces the previous handlers, so
    the CLI can reconfigure loggers created at import time.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, etc.); defaults to ``LOG_LEVEL``
        log_to_file: If True, also log to a rotating file
        log_dir: Directory for log files; defaults to ``LOG_DIR``
        log_format: Log format; defaults to ``LOG_FORMAT``

    Returns:
        Configured contextual logger
    """
    logging.setLoggerClass(ContextualLogger)
    logger = logging.getLogger(name)

    log_level = level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(log_format or os.getenv("LOG_FORMAT", DEFAULT_FORMAT))
    context_filter = _ContextFilter()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(context_filter)
    logger.addHandler(console_handler)

    if log_to_file:
        log_directory = Path(log_dir or os.getenv("LOG_DIR", DEFAULT_LOG_DIRECTORY))
        log_directory.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_directory / f"{name}.log",
            maxBytes=MAX_LOG_SIZE,
            backupCount=LOG_BACKUP_COUNT,
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(context_filter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return cast(ContextualLogger, logger)


def log_operation(
    logger: ContextualLogger, operation: str, **context: Any
) -> LoggingContextManager:
    """
    Create a context manager for operation logging.

    Args:
        logger: Contextual logger
        operation: Name of the operation
        **context: Additional context data

    Returns:
        Context manager configured for operation logging
    """
    return LoggingContextManager(logger, operation, **context)


def log_function(
    operation: str | None = None, **context: Any
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator that runs a function inside a logging operation context.

    The logger is the ``mcp-jira`` logger; if it has not been configured as
    a ContextualLogger the function runs unwrapped.

    Args:
        operation: Operation name (default: function name)
        **context: Additional context data

    Returns:
        Configured decorator
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        op_name = operation or func.__name__

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            logger = logging.getLogger(DEFAULT_LOGGER_NAME)
            if not isinstance(logger, ContextualLogger):
                return func(*args, **kwargs)
            with LoggingContextManager(logger, op_name, **context):
                return func(*args, **kwargs)

        return wrapper

    return decorator
