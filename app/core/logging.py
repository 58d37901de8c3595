"""
Logging configuration for the application and request access log.
"""

import logging

LOGGER_NAME = "app"
ACCESS_LOGGER_NAME = "app.access"

_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the ``app`` logger tree."""
    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(level)
    app_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    app_logger.addHandler(handler)
    app_logger.propagate = False
    return app_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_api_access(
    method: str,
    path: str,
    status_code: int | None = None,
    response_time: float | None = None,
    error: str | None = None,
) -> None:
    log_parts = [
        f"method={method}",
        f"path={path}",
        f"status={status_code or 'N/A'}",
    ]

    if response_time is not None:
        log_parts.append(f"response_time={response_time:.3f}s")

    if error:
        log_parts.append(f"error={error}")

    logging.getLogger(ACCESS_LOGGER_NAME).info(" | ".join(log_parts))
