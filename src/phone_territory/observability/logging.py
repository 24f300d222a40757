"""Observability – structlog configuration and the ``get_logger`` helper.

The library only emits events; applications opt into rendering by calling
:func:`configure_logging` once at startup.
"""
from __future__ import annotations

import logging
from typing import Any

import structlog

from phone_territory.config.loaders import load_settings
from phone_territory.config.settings import PhoneTerritorySettings

_HANDLER_NAME = "phone_territory"


def configure_logging(settings: PhoneTerritorySettings | None = None) -> None:
    """Route structlog through stdlib logging with a JSON or console renderer.

    Installs a single named handler on the ``phone_territory`` logger, so
    calling it again replaces the previous handler instead of stacking one.
    Without *settings*, the ``PHONE_TERRITORY_LOG_*`` variables apply.
    """
    settings = settings or load_settings()

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger("phone_territory")
    for existing in list(package_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(settings.log_level_number)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["configure_logging", "get_logger"]
