"""Structured JSON logging helpers.

Log lines are JSON objects so they can be shipped to the same log pipeline as
the upload API. Security notes:
- Does NOT log employee names or file contents
- Logs ids, category ids, confidence tiers and counts only
"""

import json
import logging
import sys
import time
from typing import IO, Any, Dict, Optional


def configure_logging(level: str = "INFO", stream: Optional[IO[str]] = None) -> None:
    """Configure the root logger for JSON lines (stdout unless ``stream`` is given)."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(message)s',  # We'll format as JSON ourselves
        stream=stream or sys.stdout,
        force=True,
    )


def log_event(logger: logging.Logger, level: int, message: str, **fields: Any) -> None:
    """Emit one structured log line if ``level`` is enabled for ``logger``."""
    if not logger.isEnabledFor(level):
        return
    log_data: Dict[str, Any] = {
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "logger": logger.name,
        "message": message,
        **fields,
    }
    logger.log(level, json.dumps(log_data, default=str))
