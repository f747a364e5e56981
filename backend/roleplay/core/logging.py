"""Structured logging configuration."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

# Extra fields that prompt resolution attaches to log records
CONTEXT_FIELDS = ("scenario_id", "level_id", "mode", "turn_number", "latency_ms")


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add extra fields
        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        # Add exception info
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add location
        if record.levelno >= logging.WARNING:
            log_data["location"] = f"{record.filename}:{record.lineno}"

        return json.dumps(log_data)


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter for development."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"
    CONTEXT_LABELS = {
        "scenario_id": "scenario",
        "level_id": "level",
        "mode": "mode",
        "turn_number": "turn",
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        timestamp = datetime.now(timezone.utc).strftime("%H:%M:%S")

        # Build prefix
        prefix = f"{color}[{timestamp}] {record.levelname:<8}{self.RESET}"

        # Add context if available
        context = ""
        for field, label in self.CONTEXT_LABELS.items():
            if hasattr(record, field):
                context += f" {label}={getattr(record, field)}"

        message = record.getMessage()
        if hasattr(record, "latency_ms"):
            message += f" ({record.latency_ms}ms)"
        return f"{prefix}{context} {message}"


def setup_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """
    Configure application logging.

    @param log_level - Logging level (DEBUG, INFO, WARNING, ERROR)
    @param json_logs - Use JSON format (for production)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Create handler
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, log_level.upper()))

    # Set formatter
    if json_logs:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(ConsoleFormatter())

    root_logger.addHandler(handler)

    # Reduce noise from libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    return logging.getLogger(name)


def prompt_context(scenario_id, level_id, mode=None, turn_number=None) -> dict[str, Any]:
    """
    Build the `extra` mapping for prompt resolution log records.

    Enum members are logged by value; unset fields are left out.

    @param scenario_id - Scenario id
    @param level_id - Level id
    @param mode - Practice mode
    @param turn_number - Free-mode turn
    @returns Extra fields for the logger call
    """
    values = {
        "scenario_id": scenario_id,
        "level_id": level_id,
        "mode": mode,
        "turn_number": turn_number,
    }
    return {
        field: getattr(value, "value", value)
        for field, value in values.items()
        if value is not None
    }
