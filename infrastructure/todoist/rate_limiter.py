import logging
import time
from threading import Lock
from typing import Any, Dict, Optional

logger = logging.getLogger("td.api")


class RateLimiter:
    """Thread-safe limiter that honours Todoist ``Retry-After`` hints."""

    def __init__(self, default_backoff: float = 60.0) -> None:
        self._lock = Lock()
        self._next_ts = 0.0
        self.default_backoff = default_backoff
        self.last_wait: float = 0.0

    def acquire(self) -> None:
        while True:
            with self._lock:
                wait = self._next_ts - time.time()
            if wait <= 0:
                return
            time.sleep(min(wait, 2.0))

    def update(self, headers: Dict[str, Any], status_code: int = 200, body: Optional[Dict[str, Any]] = None) -> None:
        retry_after = headers.get("Retry-After") or headers.get("retry-after")
        if retry_after is None and body:
            retry_after = (body.get("error_extra") or {}).get("retry_after")
        with self._lock:
            now = time.time()
            delay = None
            if retry_after is not None:
                try:
                    delay = float(retry_after)
                except (TypeError, ValueError):
                    delay = None
            if delay is None and status_code == 429:
                delay = self.default_backoff
            if delay is not None:
                self._next_ts = max(self._next_ts, now + delay)
                logger.warning("Todoist asked to slow down, waiting %.0fs", delay)
            self.last_wait = max(0.0, self._next_ts - now)


__all__ = ["RateLimiter"]
