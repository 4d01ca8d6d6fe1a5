"""Package configuration: ExtensionsConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Literal

from result_extensions._logging import configure_logging

__all__ = [
    'ExtensionsConfig',
    'JsonOrder',
    'get_config',
    'init',
    'reset_config',
]

type JsonOrder = Literal['deterministic', 'sorted']

_ORDERS: tuple[str, ...] = ('deterministic', 'sorted')
_TRUTHY = ('1', 'true', 'yes', 'on')
_FALSY = ('0', 'false', 'no', 'off')


@dataclass(frozen=True)
class ExtensionsConfig:
    """Configuration for result-extensions.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_output: Emit JSON logs (True) or console logs (False).
        json_strict: Reject type coercions such as "1" -> 1 when decoding.
        json_order: Key ordering used when encoding ("deterministic", "sorted" or None).
    """

    log_level: str | None = None
    json_output: bool = True
    json_strict: bool = True
    json_order: JsonOrder | None = None


# Active configuration (set by init() or resolved lazily from the environment)
_config: ExtensionsConfig | None = None


def _env_log_level() -> str | None:
    return os.environ.get('RESULT_EXTENSIONS_LOG_LEVEL') or None


def _env_strict() -> bool:
    raw = os.environ.get('RESULT_EXTENSIONS_JSON_STRICT', '').strip().lower()
    if not raw or raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    logging.warning("Unknown RESULT_EXTENSIONS_JSON_STRICT value '%s', defaulting to strict", raw)
    return True


def _env_order() -> JsonOrder | None:
    raw = os.environ.get('RESULT_EXTENSIONS_JSON_ORDER', '').strip().lower()
    if not raw:
        return None
    if raw in _ORDERS:
        return raw  # type: ignore[return-value]
    logging.warning("Unknown RESULT_EXTENSIONS_JSON_ORDER value '%s', ignoring", raw)
    return None


def init(
    log_level: str | None = None,
    *,
    json_output: bool = True,
    json_strict: bool | None = None,
    json_order: JsonOrder | None = None,
) -> ExtensionsConfig:
    """Initialize result-extensions with the given configuration.

    Explicit arguments win over RESULT_EXTENSIONS_* environment variables,
    which win over the defaults. The shared JSON codec is rebuilt on the
    next use.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_output: JSON (True) or console (False) log rendering.
        json_strict: Strict type matching when decoding JSON.
        json_order: Key ordering when encoding JSON.

    Returns:
        The ExtensionsConfig that was set.

    Raises:
        ValueError: If json_order is not a known ordering.

    Example:
        ```python
        from result_extensions import init

        init(log_level='DEBUG', json_order='sorted')
        ```
    """
    global _config  # noqa: PLW0603

    if json_order is not None and json_order not in _ORDERS:
        msg = f'json_order must be one of {_ORDERS}, got {json_order!r}'
        raise ValueError(msg)

    _config = ExtensionsConfig(
        log_level=log_level if log_level is not None else _env_log_level(),
        json_output=json_output,
        json_strict=json_strict if json_strict is not None else _env_strict(),
        json_order=json_order if json_order is not None else _env_order(),
    )

    from result_extensions.codec import reset_codec

    reset_codec()

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_output)

    return _config


def get_config() -> ExtensionsConfig:
    """Get the active configuration.

    If init() has not been called, the configuration is resolved from the
    environment without touching logging.

    Returns:
        The current ExtensionsConfig.
    """
    global _config  # noqa: PLW0603
    if _config is None:
        _config = ExtensionsConfig(
            log_level=_env_log_level(),
            json_strict=_env_strict(),
            json_order=_env_order(),
        )
    return _config


def reset_config() -> None:
    """Forget the active configuration so the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603
    _config = None

    from result_extensions.codec import reset_codec

    reset_codec()
