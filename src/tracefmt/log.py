from __future__ import annotations

import json
import os
import sys
from typing import Optional


def _enabled_from_env() -> bool:
    return os.environ.get("TRACEFMT_LOG_EVENTS", "false").lower() in ("true", "1", "yes")


def log_event(msg: str, enabled: Optional[bool] = None, **extra) -> None:
    """Write one structured log line to stderr.

    ``enabled=None`` defers to TRACEFMT_LOG_EVENTS.
    """
    if enabled is None:
        enabled = _enabled_from_env()
    if not enabled:
        return
    entry = {"msg": msg}
    entry.update(extra)
    print(json.dumps(entry, default=str), file=sys.stderr)
