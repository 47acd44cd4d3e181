"""Logging utilities for observability."""

import logging
import sys
from datetime import datetime
from typing import Optional

# Global logger instance
_logger: Optional[logging.Logger] = None


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for different log levels."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with colors."""
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Set up logging configuration."""
    global _logger

    logger = logging.getLogger("prompt_studio")
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, level.upper()))
    console_handler.setFormatter(
        ColoredFormatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)  # Log everything to file
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """Get the global logger instance."""
    global _logger
    if _logger is None:
        _logger = setup_logging()
    return _logger


class PipelineLogger:
    """Records the steps of one enhancement request."""

    def __init__(self, request_id: str):
        self.request_id = request_id
        self.logger = get_logger()
        self.events: list[dict] = []

    def log_event(
        self,
        event_type: str,
        message: str = "",
        metadata: Optional[dict] = None,
    ) -> None:
        """Log a pipeline event."""
        self.events.append(
            {
                "timestamp": datetime.now().isoformat(),
                "request_id": self.request_id,
                "event_type": event_type,
                "message": message,
                "metadata": metadata or {},
            }
        )
        self.logger.debug(f"[{self.request_id}] {event_type}: {message}")

    def log_transformation(self, template_used: str, quality_score: int) -> None:
        """Log a completed local transformation."""
        self.log_event(
            "transformed",
            message=f"template={template_used} score={quality_score}",
        )

    def log_cache_hit(self, key: str) -> None:
        """Log a result served from cache."""
        self.log_event("cache_hit", message=key[:80])

    def log_fallback(self, kind: str, detail: str = "") -> None:
        """Log a fallback to the local-only result."""
        self.log_event("enhancement_fallback", message=kind, metadata={"detail": detail})
        self.logger.warning(f"[{self.request_id}] Remote enhancement unavailable ({kind}), using local result")

    def get_events(self) -> list[dict]:
        """Get all logged events."""
        return self.events.copy()
