"""Debounced calls.

``Debouncer.trigger()`` may be called any number of times; the wrapped
callable runs once, ``delay_ms`` after the last call.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Optional, Protocol

logger = logging.getLogger(__name__)


class Cancellable(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay_seconds: float, callback: Callable[[], Any]) -> Cancellable: ...


class TimerScheduler:
    """Runs callbacks on daemon ``threading.Timer`` threads."""

    def call_later(self, delay_seconds: float, callback: Callable[[], Any]) -> threading.Timer:
        timer = threading.Timer(delay_seconds, callback)
        timer.daemon = True
        timer.start()
        return timer


class Debouncer:
    def __init__(self, delay_ms: int, callback: Callable[[], Any], *, scheduler: Optional[Scheduler] = None):
        self._delay_seconds = max(delay_ms, 0) / 1000.0
        self._callback = callback
        self._scheduler = scheduler or TimerScheduler()
        self._lock = threading.Lock()
        self._handle: Optional[Cancellable] = None
        # A timer that fires while being cancelled must not run the callback.
        self._token = 0

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._handle is not None

    def trigger(self) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.cancel()
            self._token += 1
            token = self._token
            self._handle = self._scheduler.call_later(self._delay_seconds, lambda: self._fire(token))

    def cancel(self) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.cancel()
                self._handle = None
            self._token += 1

    def flush(self) -> None:
        """Run a pending call now instead of waiting for the quiet period."""
        with self._lock:
            if self._handle is None:
                return
            self._handle.cancel()
            self._handle = None
            self._token += 1
        self._run()

    def _fire(self, token: int) -> None:
        with self._lock:
            if token != self._token:
                return
            self._handle = None
        self._run()

    def _run(self) -> None:
        try:
            self._callback()
        except Exception:
            logger.exception("Debounced call failed")
