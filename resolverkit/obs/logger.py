"""Structured JSON logging to stdout.

Low overhead, minimal dependencies, safe for production stdout collectors.
"""

from typing import Any, Dict
from datetime import datetime, timezone
import json

from resolverkit.config import settings
from resolverkit.obs.context import request_id_var


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


def _enabled(level: str) -> bool:
    return _LEVELS.get(level, 20) >= _LEVELS.get(settings.LOG_LEVEL, 20)


def log_event(event: str, **fields: Any) -> None:
    level = str(fields.pop("level", "INFO")).upper()
    if not _enabled(level):
        return
    payload: Dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "level": level,
        "event": event,
        "request_id": request_id_var.get(),
    }
    payload.update(fields)

    try:
        print(json.dumps(payload, separators=(",", ":"), default=str))
    except (TypeError, ValueError):
        # As a last resort, avoid crashing the app due to logging
        pass
