"""Structured logging for problem responses.

The encoder and the installed handlers emit a small, fixed set of events:

- ``problem_raised`` (warning): a ``ProblemError`` was turned into a response
- ``request_validation_failed`` (info): FastAPI rejected the request input
- ``problem_serialization_failed`` (error): ``encode`` fell back to the static 500
- ``unhandled_exception`` (error): the catch-all handler answered with the static 500

Events are rendered by structlog through stdlib logging. Context the host app
binds with ``structlog.contextvars`` (a request id, say) is merged into each one.
"""

import logging
import logging.config
import sys
from datetime import UTC, datetime
from typing import Any

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from structlog.stdlib import BoundLogger


def _add_timestamp(
    _logger: object,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    event_dict["timestamp"] = datetime.now(UTC).isoformat()
    return event_dict


class LoggingSettings(BaseSettings):
    """Log level and output format, from ``LOG_LEVEL`` and ``LOG_JSON``."""

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=True, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


def _shared_processors() -> list[Any]:
    # Also applied to records from plain stdlib loggers (uvicorn, starlette).
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _add_timestamp,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Route problem events to stdout, as JSON lines or console text.

    The host application calls this once at startup; importing the package
    leaves logging configuration alone. ``problem_serialization_failed`` and
    ``unhandled_exception`` carry the traceback in ``exception``.
    """
    settings = settings or LoggingSettings()
    processors = _shared_processors()
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "problem": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "processor": renderer,
                    "foreign_pre_chain": processors,
                },
            },
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "formatter": "problem",
                    "stream": sys.stdout,
                },
            },
            "loggers": {
                "": {"handlers": ["stdout"], "level": settings.log_level},
            },
        }
    )


def get_logger(name: str) -> BoundLogger:
    """Return the structlog logger used by ``problem_details`` modules.

    Example:
        logger = get_logger(__name__)
        logger.warning("problem_raised", problem_type="not_found", status=404)
        # {"event": "problem_raised", "problem_type": "not_found", "status": 404, ...}
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
