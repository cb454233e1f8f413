# ============================================================================
# src/medication_safety/utils/logging.py
# ============================================================================
"""
Logging setup for the medication safety engine.

Records go to stderr (stdout is reserved for CLI output). Prescription
context (ids, medication) travels as record attributes so the JSON
formatter can emit it as top-level fields.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime, timezone
import json

from ..config import logging_settings

# Record attributes copied into JSON output when present
CONTEXT_FIELDS = ('prescription_id', 'patient_id', 'item_id', 'medication_name')

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    format_json: Optional[bool] = None
) -> None:
    """
    Configure the root logger.

    Args:
        level: Logging level name; defaults to LOG_LEVEL setting
        log_file: Optional file path for logging
        format_json: Emit JSON lines; defaults to LOG_JSON setting
    """
    if level is None:
        level = logging_settings.LOG_LEVEL
    if format_json is None:
        format_json = logging_settings.LOG_JSON

    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_json:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    handlers = [logging.StreamHandler(sys.stderr)]

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(
        level=log_level,
        handlers=handlers,
        force=True
    )


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with prescription context fields."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        for key in CONTEXT_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        # Spanish medication names stay readable
        return json.dumps(log_data, ensure_ascii=False)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class LogAdapter(logging.LoggerAdapter):
    """Logger adapter that merges fixed context into every record's extra."""

    def process(self, msg, kwargs):
        kwargs['extra'] = {**self.extra, **kwargs.get('extra', {})}
        return msg, kwargs


def prescription_logger(logger: logging.Logger, prescription, **context) -> LogAdapter:
    """
    Adapter carrying a prescription's ids.

    Args:
        logger: Module logger
        prescription: Object with id and patient_id
        **context: Extra fields (e.g. item_id, medication_name)
    """
    extra = {
        'prescription_id': prescription.id,
        'patient_id': prescription.patient_id,
    }
    extra.update(context)
    return LogAdapter(logger, extra)
