import logging.config
import re

import structlog
from decouple import config

DEBUG = config("DEBUG", default=False, cast=bool)

SERVICE_NAME = config("SERVICE_NAME", default="orders")

LOG_LEVEL = config("LOG_LEVEL", default="DEBUG" if DEBUG else "INFO").upper()

# "json" for log shippers, "console" for local development
LOG_FORMAT = config("LOG_FORMAT", default="console" if DEBUG else "json").lower()

# ---------------------------------------------------------------------------
# Structured Logging (structlog + stdlib LOGGING)
# ---------------------------------------------------------------------------
SENSITIVE_PATTERN = re.compile(
    r"([A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,})"  # e-mail
    r"|(password|passwd|secret|token|authorization)"
    r"""([=:]\s*["']?)([^\s,}"']+)""",
    re.IGNORECASE,
)


def mask_sensitive_data(_, __, event_dict):
    """Processor that masks e-mails, passwords and tokens in log values."""
    for key, value in list(event_dict.items()):
        if isinstance(value, str):
            event_dict[key] = SENSITIVE_PATTERN.sub("***MASKED***", value)
    return event_dict


def add_service_name(_, __, event_dict):
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


# Shared processors used by both structlog and stdlib logging
_shared_processors = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    add_service_name,
    mask_sensitive_data,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _renderer():
    if LOG_FORMAT == "console":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "structured": {
            "()": structlog.stdlib.ProcessorFormatter,
            "processors": [
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(),
            ],
            "foreign_pre_chain": _shared_processors,
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "structured",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
}


def configure_logging() -> None:
    """Route structlog through stdlib logging with the configured renderer.

    Call once at process start-up, before the first log line.
    """
    logging.config.dictConfig(LOGGING)
    structlog.configure(
        processors=[
            *_shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
