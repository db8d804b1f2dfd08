"""Structured Logging for formkit

- Colored, human-readable dev output
- JSON structured production output
- Context propagation through contextvars
- Redaction of sensitive keys before rendering

The validation engine itself never logs; only boundary helpers emit events.
Those events go through the stdlib ``formkit`` logger, which carries a
``NullHandler`` until ``configure_logging`` installs a real one; an
unconfigured host only sees them through its own root handlers.
"""
import logging
import sys

import structlog
from structlog.types import EventDict, Processor

SENSITIVE_KEYS = frozenset({"password", "token", "secret", "authorization", "cookie", "api_key"})

logging.getLogger("formkit").addHandler(logging.NullHandler())


def _censor_sensitive_keys(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor that redacts sensitive information."""

    def _redact(obj: dict | list | str, depth: int = 0) -> dict | list | str:
        if depth > 5:
            return obj
        if isinstance(obj, dict):
            return {
                k: "[REDACTED]" if str(k).lower() in SENSITIVE_KEYS else _redact(v, depth + 1)
                for k, v in obj.items()
            }
        if isinstance(obj, list):
            return [_redact(item, depth + 1) for item in obj]
        return obj

    return _redact(event_dict)


def _add_library_info(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor that tags events with the emitting library."""
    event_dict.setdefault("library", "formkit")
    return event_dict


def get_shared_processors() -> list[Processor]:
    """Processors used in both dev and prod configurations."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_library_info,
        _censor_sensitive_keys,
    ]


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Configure the logging system.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to ``Settings.LOG_LEVEL``.
        json_logs: If True, output JSON format. If False, colored console output.
            Defaults to ``Settings.LOG_JSON``.
    """
    from formkit.config import get_settings

    settings = get_settings()
    level = level or settings.LOG_LEVEL
    json_logs = settings.LOG_JSON if json_logs is None else json_logs
    log_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors = get_shared_processors()

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    lib_logger = logging.getLogger("formkit")
    lib_logger.handlers = [handler]
    lib_logger.setLevel(log_level)
    lib_logger.propagate = False


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ from the calling module)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def bind_context(**kwargs) -> None:
    """Bind key-value pairs to the current logging context.

    These will appear in all subsequent log messages within this context.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


def unbind_context(*keys: str) -> None:
    """Remove specific keys from the logging context."""
    structlog.contextvars.unbind_contextvars(*keys)


class LoggerRegistry:
    """Registry of pre-configured loggers for library domains.

    These always bridge to stdlib logging, independent of the global structlog
    configuration, so the ``formkit`` logger's handlers decide what is shown.
    """

    _loggers: dict[str, structlog.stdlib.BoundLogger] = {}

    @classmethod
    def get(cls, name: str) -> structlog.stdlib.BoundLogger:
        """Get or create a logger for the given domain."""
        if name not in cls._loggers:
            cls._loggers[name] = structlog.wrap_logger(
                logging.getLogger(f"formkit.{name}"),
                processors=[
                    *get_shared_processors(),
                    structlog.processors.format_exc_info,
                    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
                ],
                wrapper_class=structlog.stdlib.BoundLogger,
            )
        return cls._loggers[name]


def validation_logger() -> structlog.stdlib.BoundLogger:
    """Logger for validation events."""
    return LoggerRegistry.get("validation")


def boundary_logger() -> structlog.stdlib.BoundLogger:
    """Logger for boundary parsing events."""
    return LoggerRegistry.get("boundary")
