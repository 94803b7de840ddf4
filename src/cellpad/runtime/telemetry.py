"""Telemetry services built on the standard logging package.

This module exposes a narrow surface area for the rest of the editor:

``configure(...)`` -- override or preset the logging configuration
``get_logger(name)`` -- fetch (and cache) a configured logger
``record_event(name, ...)`` -- emit structured events at a chosen level
``span(name, ...)`` -- context manager timing a block and tagging its component
"""

from __future__ import annotations

import logging
import os
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional

from rich.console import Console
from rich.logging import RichHandler

ENV_PREFIX = "CELLPAD_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "cellpad")
DEFAULT_LOG_FILE = os.getenv(f"{ENV_PREFIX}LOG_FILE", "")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_LOGGER_CACHE: MutableMapping[str, logging.Logger] = {}
_ACTIVE_CONFIG: Optional["TelemetryConfig"] = None
_INSTALLED_HANDLERS: list[logging.Handler] = []


@dataclass(frozen=True, slots=True)
class TelemetryConfig:
    """Resolved logging settings for the ``cellpad`` logger tree."""

    level: str = "INFO"
    console: bool = True
    colored: bool = True
    log_file: str = ""


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _format_pairs(data: Dict[str, Any]) -> str:
    return " ".join(f"{key}={_stringify(value)}" for key, value in data.items())


def _resolve_level() -> str:
    return (_env("LOG_LEVEL") or "INFO").upper()


def _level_number(level: str | int) -> int:
    if isinstance(level, int):
        return level
    number = logging.getLevelName(str(level).upper())
    if not isinstance(number, int):
        raise ValueError(f"Unsupported log level '{level}'.")
    return number


def _build_preset_config(preset: str) -> TelemetryConfig:
    key = preset.lower()

    if key == "development":
        return TelemetryConfig(level="DEBUG", console=True, colored=True)
    if key == "production":
        log_path = _env("LOG_FILE", DEFAULT_LOG_FILE) or "cellpad.log"
        return TelemetryConfig(level="INFO", console=False, log_file=log_path)
    if key == "quiet":
        return TelemetryConfig(level="WARNING", console=False)
    raise ValueError(f"Unknown preset '{preset}'.")


def _build_default_config() -> TelemetryConfig:
    return TelemetryConfig(
        level=_resolve_level(),
        console=not _env_flag("DISABLE_CONSOLE", False),
        colored=not _env_flag("NO_COLOR", False),
        log_file=_env("LOG_FILE") or DEFAULT_LOG_FILE,
    )


def _install_handlers(config: TelemetryConfig) -> None:
    root = logging.getLogger(DEFAULT_LOGGER_NAME)
    for handler in _INSTALLED_HANDLERS:
        root.removeHandler(handler)
        handler.close()
    _INSTALLED_HANDLERS.clear()

    if config.console:
        console = Console(stderr=True, no_color=not config.colored)
        _INSTALLED_HANDLERS.append(
            RichHandler(console=console, show_path=False, markup=False)
        )
    if config.log_file:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        _INSTALLED_HANDLERS.append(file_handler)
    if not _INSTALLED_HANDLERS:
        _INSTALLED_HANDLERS.append(logging.NullHandler())

    for handler in _INSTALLED_HANDLERS:
        root.addHandler(handler)
    root.setLevel(_level_number(config.level))


def configure(
    *, config: Optional[TelemetryConfig] = None, preset: Optional[str] = None
) -> TelemetryConfig:
    """Override the active logging configuration.

    Parameters
    ----------
    config:
        Explicit ``TelemetryConfig`` instance to adopt.
    preset:
        Named preset (``"development"``, ``"production"``, ``"quiet"``).
        ``config`` and ``preset`` are mutually exclusive.
    """

    global _ACTIVE_CONFIG
    if config and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = _build_preset_config(preset)
    elif config is None:
        config = _build_default_config()

    _install_handlers(config)
    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()
    return config


def active_config() -> TelemetryConfig:
    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = configure()
    return _ACTIVE_CONFIG


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a cached logger living under the ``cellpad`` logger tree."""

    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = logging.getLogger(logger_name)
    return _LOGGER_CACHE[logger_name]


def record_event(
    name: str,
    *,
    level: str | int = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit a structured ``event::<name>`` line with key/value pairs."""

    log = get_logger(logger_name)
    payload = {"event": name, **(data or {})}
    log.log(_level_number(level), "event::%s %s", name, _format_pairs(payload))


@dataclass
class SpanHandle:
    """Handle returned from ``span`` for optional metadata updates."""

    logger: logging.Logger
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    started_at: float = field(default_factory=time.perf_counter)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    @property
    def elapsed_ms(self) -> float:
        return (time.perf_counter() - self.started_at) * 1000.0

    def _emit(
        self, level: str, message: str, extra: Optional[Dict[str, Any]] = None
    ) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        if extra:
            payload.update({key: _stringify(val) for key, val in extra.items()})
        self.logger.log(_level_number(level), "%s %s", message, _format_pairs(payload))

    def fail(self, reason: str) -> None:
        self._emit("error", "span::fail", {"reason": reason})


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Time a code block and (optionally) tag it with a component name.

    Parameters
    ----------
    name:
        Operation name written as ``span=<name>``.
    logger_name:
        Target logger; defaults to the editor logger.
    component:
        If ``True`` use the same name as the span; if a string, use it as the
        component identifier.
    metadata:
        Optional key/value pairs attached to every line the span emits.
    """

    log = get_logger(logger_name)
    component_name = None
    if component is True:
        component_name = name
    elif isinstance(component, str):
        component_name = component

    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=component_name,
        metadata={key: _stringify(value) for key, value in (metadata or {}).items()},
    )
    try:
        yield handle
    except Exception as exc:
        handle.fail(str(exc))
        raise
    if log.isEnabledFor(logging.DEBUG):
        handle._emit("debug", "span::end", {"elapsed_ms": f"{handle.elapsed_ms:.3f}"})


# Initialize the module-level logger once the config is ready.
configure()
logger = get_logger()

__all__ = [
    "SpanHandle",
    "TelemetryConfig",
    "active_config",
    "configure",
    "get_logger",
    "record_event",
    "span",
    "logger",
]
