from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class RequestLog:
    """Append-only request log; has no effect on responses."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path

    def record(self, event_type: str, data: dict[str, Any]) -> None:
        entry = {
            "timestamp": time.time(),
            "event": event_type,
            **data,
        }
        logger.debug("%s %s", event_type, data)
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(entry, default=str, ensure_ascii=False) + "\n")
