"""Structured logging for result-extensions.

Package loggers are structlog loggers wrapping stdlib loggers under the
``result_extensions`` namespace. Nothing global is touched: structlog is not
configured process-wide and the root logger is left alone, so events flow to
whatever handlers the host application installed.

configure_logging() (or init(log_level=...)) opts in to the package's own
output: it attaches a ProcessorFormatter handler to the ``result_extensions``
logger only and stops propagation to the root.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'PACKAGE_LOGGER',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
    'reset_logging',
]

PACKAGE_LOGGER = 'result_extensions'

_handler: logging.Handler | None = None


def _event_processors() -> list[Any]:
    """Processors applied to the package's own events."""
    return [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _hook_processor,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.render_to_log_kwargs,
    ]


def _formatter(json_output: bool) -> structlog.stdlib.ProcessorFormatter:
    renderer: Any
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt='iso'),
            structlog.stdlib.ExtraAdder(),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )


def _package_logger(name: str) -> logging.Logger:
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + '.'):
        name = f'{PACKAGE_LOGGER}.{name}'
    return logging.getLogger(name)


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Send the package's log events to stderr at the given level.

    Only the ``result_extensions`` logger is configured. Calling this again
    replaces the previously installed handler.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use console output.
    """
    global _handler  # noqa: PLW0603

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(_formatter(json_output))
    logger.addHandler(_handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False


def reset_logging() -> None:
    """Undo configure_logging(): remove the handler and propagate to the root again."""
    global _handler  # noqa: PLW0603

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler = None
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def get_logger(name: str = PACKAGE_LOGGER) -> Any:
    """Get a structlog logger inside the ``result_extensions`` namespace.

    Names outside the namespace are nested under it, so every package event
    is governed by configure_logging().

    Args:
        name: Logger name, usually ``__name__``.

    Returns:
        A structlog BoundLogger.
    """
    return structlog.wrap_logger(
        _package_logger(name),
        processors=_event_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


# --- Logging Hooks ---

_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a hook called with a copy of each enabled package log event.

    Args:
        hook: Callable that receives the event dict.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()


def _hook_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in list(_log_hooks):
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: S112
            continue  # a broken hook must not break logging
    return event_dict
