"""Countdown timer driven by frame deltas."""

from __future__ import annotations

from typing import Callable, List


class Timer:
    """Fires its callbacks once the accumulated time passes ``timeout``, then stops."""

    def __init__(self, timeout: float = 1.0, auto_start: bool = False) -> None:
        self._timeout = timeout
        self._started = auto_start
        self._time_passed = 0.0
        self._callbacks: List[Callable[[], None]] = []

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def time_passed(self) -> float:
        return self._time_passed

    @property
    def started(self) -> bool:
        return self._started

    def start(self) -> None:
        self._started = True

    def pause(self) -> None:
        self._started = False

    def stop(self) -> None:
        self._started = False
        self._time_passed = 0.0

    def update(self, delta: float) -> None:
        if not self._started:
            return
        self._time_passed += delta
        if self._time_passed > self._timeout:
            for callback in list(self._callbacks):
                callback()
            self.stop()

    def on_timeout(self, func: Callable[[], None]) -> None:
        self._callbacks.append(func)