"""Logging setup driven by ObservabilityConfig.

Modules log through ``logging.getLogger(__name__)`` and pass context in
``extra={...}``. ``configure_logging`` installs one stream handler on the
package logger; in structured mode each record is emitted as a JSON line
that includes those extra fields.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .config import ObservabilityConfig, get_config

PACKAGE_LOGGER = "woosmap_geocoder"

# Attributes every LogRecord has; anything else came from `extra=`.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime", "taskName"}

_KEY_PARAM = re.compile(r"([?&](?:key|private_key)=)[^&]*")


def mask_credentials(url: str) -> str:
    """Hide API key values in a request URL before logging it."""
    return _KEY_PARAM.sub(r"\1***", url)


class JsonFormatter(logging.Formatter):
    """Format records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Configure the package logger.

    Calling it again replaces the previously installed handler.

    Args:
        config: Logging options, defaults to the global configuration.

    Returns:
        The configured package logger.
    """
    config = config or get_config().observability
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        if getattr(handler, "_woosmap_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler._woosmap_handler = True  # type: ignore[attr-defined]
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))

    logger.addHandler(handler)
    logger.setLevel(config.level.upper())
    return logger
