"""Application and command audit logging setup.

This module centralizes logging configuration. It provides:

- A simple JSON formatter (opt-in via LOG_JSON) or a human-readable formatter.
- Timed rotation of log files for both application logs (app.log) and the
  command audit trail (audit.log), honoring retention and timezone options.
- ``audit_command`` which records one JSON line per processed command
  (source, intent, confidence, approval, status, duration) with basic PII
  scrubbing of the source details.

Environment variables: LOG_DIR, LOG_LEVEL, LOG_JSON, LOG_RETENTION_DAYS,
LOG_ROTATE_UTC.
"""

from __future__ import annotations

import json
import logging
import os
from logging.handlers import TimedRotatingFileHandler
from typing import Any

from .schemas import Command, CommandInterpretation, ExecutionResult

APP_LOGGER = "adam"
AUDIT_LOGGER = "adam.audit"


class JsonFormatter(logging.Formatter):
    """Minimal JSON log formatter used when LOG_JSON=true."""

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "level": record.levelname,
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record)


def _get_formatter(log_json: bool) -> logging.Formatter:
    if log_json:
        return JsonFormatter()
    return logging.Formatter("[%(asctime)s] %(levelname)s in %(name)s: %(message)s")


SENSITIVE_FIELDS = {
    "caller_id",
    "contact_id",
    "phone",
    "email",
    "authorization",
    "token",
    "password",
}


def _scrub(data: object) -> object:
    """Recursively scrub sensitive fields from dictionaries and lists."""

    if isinstance(data, dict):
        return {
            k: ("***" if k.lower() in SENSITIVE_FIELDS else _scrub(v))
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [_scrub(v) for v in data]
    return data


def get_log_config() -> dict[str, Any]:
    """Return the effective logging configuration derived from the environment."""

    log_dir = os.getenv("LOG_DIR", "logs")
    log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()
    log_json = os.getenv("LOG_JSON", "false").lower() == "true"
    retention_days = int(os.getenv("LOG_RETENTION_DAYS", "7"))
    rotate_utc = os.getenv("LOG_ROTATE_UTC", "false").lower() == "true"

    log_level = getattr(logging, log_level_str, logging.INFO)

    return {
        "log_dir": os.path.abspath(log_dir),
        "log_level": logging.getLevelName(log_level),
        "log_json": log_json,
        "retention_days": retention_days,
        "rotate_utc": rotate_utc,
    }


def init_logging() -> None:
    """Initialise the application and audit loggers."""

    config = get_log_config()
    log_dir = config["log_dir"]
    os.makedirs(log_dir, exist_ok=True)

    formatter = _get_formatter(config["log_json"])
    log_level = getattr(logging, config["log_level"], logging.INFO)

    app_logger = logging.getLogger(APP_LOGGER)
    if not app_logger.handlers:
        handler = TimedRotatingFileHandler(
            os.path.join(log_dir, "app.log"),
            when="midnight",
            backupCount=config["retention_days"],
            utc=config["rotate_utc"],
        )
        handler.setFormatter(formatter)
        app_logger.addHandler(handler)
    app_logger.setLevel(log_level)

    audit_logger = logging.getLogger(AUDIT_LOGGER)
    audit_logger.handlers.clear()
    handler = TimedRotatingFileHandler(
        os.path.join(log_dir, "audit.log"),
        when="midnight",
        backupCount=config["retention_days"],
        utc=config["rotate_utc"],
    )
    handler.setFormatter(formatter)
    audit_logger.addHandler(handler)
    audit_logger.setLevel(log_level)
    # Audit lines go to audit.log only, not app.log as well.
    audit_logger.propagate = False


def audit_command(
    command: Command,
    interpretation: CommandInterpretation,
    result: ExecutionResult,
) -> None:
    """Write one audit line describing how ``command`` was handled."""

    log_data = {
        "command_id": command.id,
        "source": _scrub(command.source.model_dump()),
        "location_id": command.context.location_id,
        "priority": command.context.priority,
        "intent": interpretation.intent.kind,
        "confidence": round(interpretation.confidence, 4),
        "requires_approval": interpretation.requires_approval,
        "status": result.status.state,
        "duration_ms": result.duration,
    }
    logging.getLogger(AUDIT_LOGGER).info(json.dumps(log_data, default=str))
