"""Logfire-backed logging helpers.

Logging is NOT configured at import time. Call `setup_logging()` from the
entrypoint (main.py) before relying on log output.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Awaitable, Callable
from functools import wraps
from types import CodeType
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

import logfire


if TYPE_CHECKING:
    from card_offer_finder.core.config import Settings


__all__ = [
    "async_log_with_context",
    "get_logger",
    "setup_logging",
]

P = ParamSpec("P")
R = TypeVar("R")

QUIET_LOGGERS = ("httpx", "httpcore")


class _LoggingState:
    """Track whether logging has been configured (avoids global statement)."""

    configured: bool = False


_logging_state = _LoggingState()


def setup_logging(settings: Settings) -> None:
    """Configure Logfire to emit to the console without sending data out.

    Safe to call multiple times; subsequent calls are no-ops.

    Args:
        settings: Application settings carrying the log level and
            console switch.
    """
    if _logging_state.configured:
        return

    os.environ.setdefault("LOGFIRE_SEND_TO_LOGFIRE", "false")
    os.environ.setdefault(
        "LOGFIRE_CONSOLE", "true" if settings.log_console else "false"
    )
    logfire.configure()

    root_logger = logging.getLogger()
    if not any(
        isinstance(handler, logfire.LogfireLoggingHandler)
        for handler in root_logger.handlers
    ):
        root_logger.addHandler(logfire.LogfireLoggingHandler())

    root_logger.setLevel(_resolve_log_level(settings.log_level))

    # Dataset URLs may carry tokens in query strings.
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _logging_state.configured = True


def _expects_logger_arg(func: Callable[..., Any]) -> bool:
    code_object = getattr(func, "__code__", None)
    if not isinstance(code_object, CodeType):
        return False
    return "logger" in code_object.co_varnames[: code_object.co_argcount]


def async_log_with_context(
    **context: Any,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Give a coroutine a LoggerAdapter tagged with `context`.

    The adapter is passed as the `logger` keyword when the coroutine
    declares one. Exceptions are logged once, with traceback and the
    `operation` tag, then re-raised for the caller to handle.
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        expects_logger = _expects_logger_arg(func)
        func_name = getattr(func, "__name__", "unknown")
        operation = context.get("operation", func_name)

        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            adapter = logging.LoggerAdapter(
                logging.getLogger(getattr(func, "__module__", "unknown")),
                {"operation": operation, "function": func_name, **context},
            )
            if expects_logger:
                kwargs["logger"] = adapter
            try:
                return await func(*args, **kwargs)
            except Exception as error:
                adapter.exception(
                    "[%s] Error in %s: %s",
                    operation.upper(),
                    func_name,
                    error,
                )
                raise

        return wrapper

    return decorator


def _resolve_log_level(level_name: str) -> int:
    """Translate log level names into logging constants."""
    numeric_level = getattr(logging, level_name.upper(), None)
    if isinstance(numeric_level, int):
        return numeric_level
    return logging.INFO


def get_logger(name: str) -> logging.Logger:
    """Return a standard logger for the given name (typically __name__)."""
    return logging.getLogger(name)


logging.getLogger("card_offer_finder").addHandler(logging.NullHandler())
