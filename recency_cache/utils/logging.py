import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Union

import structlog

from ..domain.events import EvictionEvent, PutEvent


def setup_logging(
    log_level: str = "INFO",
    log_to_file: bool = False,
    logs_dir: Union[str, Path] = "logs",
) -> None:
    """Set up logging configuration for the cache and its drivers.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Whether to log to a rotating file in addition to console
        logs_dir: Directory for the log file, created when needed
    """
    level = getattr(logging, log_level.upper())

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.set_exc_info,
            # JSON formatting for file logs
            (
                structlog.processors.JSONRenderer()
                if log_to_file
                else structlog.dev.ConsoleRenderer()
            ),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_to_file:
        logs_path = Path(logs_dir)
        logs_path.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            logs_path / "recency_cache.log",
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
            )
        )
        root_logger.addHandler(file_handler)


def get_event_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """Get a structured logger for cache events.

    Args:
        name: Logger name (defaults to "recency_cache.events")

    Returns:
        Structured logger
    """
    if name is None:
        name = "recency_cache.events"
    return structlog.get_logger(name)


def log_eviction_event(
    event: EvictionEvent, logger: Optional[structlog.BoundLogger] = None
) -> None:
    """Log an eviction event. Usable directly as an eviction listener."""
    if logger is None:
        logger = get_event_logger()

    logger.info(
        "Cache entry evicted",
        key=event.key,
        value=event.value,
        timestamp=event.timestamp.isoformat(),
    )


def log_put_event(event: PutEvent, logger: Optional[structlog.BoundLogger] = None) -> None:
    """Log a put event. Usable directly as a put listener."""
    if logger is None:
        logger = get_event_logger()

    logger.info(
        "Cache entry updated" if event.is_update else "Cache entry inserted",
        key=event.key,
        value=event.value,
        previous_value=event.previous_value if event.is_update else None,
        is_update=event.is_update,
        timestamp=event.timestamp.isoformat(),
    )
