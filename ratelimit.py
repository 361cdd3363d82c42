"""Sliding-window rate limiting for public and admin form actions.

Each logical action (``"nominate"``, ``"edit"``) has its own window.  The
limiter is a Flask extension: hit timestamps live in ``app.extensions`` so
every application instance (and every test) starts with a clean slate.
"""

import logging
import threading
import time
from collections import deque
from typing import Callable, Deque, Dict

from flask import Flask, current_app

logger = logging.getLogger(__name__)


class SlidingWindow:
    """At most ``limit`` hits per ``window`` seconds for each identifier."""

    def __init__(self, limit: int = 1, window: float = 10.0,
                 clock: Callable[[], float] = time.monotonic) -> None:
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.limit = limit
        self.window = window
        self.clock = clock
        self._hits: Dict[str, Deque[float]] = {}
        self._lock = threading.Lock()

    def _prune(self, identifier: str, now: float) -> Deque[float]:
        hits = self._hits.setdefault(identifier, deque())
        while hits and now - hits[0] >= self.window:
            hits.popleft()
        return hits

    def hit(self, identifier: str) -> bool:
        """Record an attempt; return ``False`` when the window is already full."""
        with self._lock:
            now = self.clock()
            hits = self._prune(identifier, now)
            if len(hits) >= self.limit:
                return False
            hits.append(now)
            return True

    def remaining(self, identifier: str) -> int:
        with self._lock:
            return self.limit - len(self._prune(identifier, self.clock()))

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()


class RateLimiter:
    """Flask extension wrapping one :class:`SlidingWindow` per app."""

    def __init__(self, app: Flask | None = None) -> None:
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        app.config.setdefault("RATELIMIT_ENABLED", True)
        app.config.setdefault("RATELIMIT_LIMIT", 1)
        app.config.setdefault("RATELIMIT_WINDOW", 10.0)
        app.extensions["rate_limiter"] = SlidingWindow(
            limit=app.config["RATELIMIT_LIMIT"],
            window=app.config["RATELIMIT_WINDOW"],
        )

    @property
    def window(self) -> SlidingWindow:
        return current_app.extensions["rate_limiter"]

    def limit(self, identifier: str) -> bool:
        """``True`` if the action may proceed."""
        if not current_app.config["RATELIMIT_ENABLED"]:
            return True
        allowed = self.window.hit(identifier)
        if not allowed:
            logger.info("Rate limit exceeded for %r", identifier)
        return allowed
