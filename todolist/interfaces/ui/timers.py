# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Protocol


class Cancellable(Protocol):
    def start(self) -> None: ...
    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], Cancellable]


def thread_timer(delay: float, callback: Callable[[], None]) -> Cancellable:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    return timer


class ScopedTimer:
    """One-shot timer owned by a component.

    ``cancel`` is idempotent and wins over a callback that is already due:
    once it returns, the callback will not run.
    """

    def __init__(
        self,
        delay: float,
        callback: Callable[[], None],
        *,
        factory: TimerFactory = thread_timer,
    ) -> None:
        self._delay = delay
        self._callback = callback
        self._factory = factory
        self._timer: Cancellable | None = None
        self._lock = threading.Lock()
        self._cancelled = False
        self._fired = False

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None and not (self._cancelled or self._fired)

    def start(self) -> None:
        with self._lock:
            if self._timer is not None:
                raise RuntimeError("ScopedTimer can only be started once")
            self._timer = self._factory(self._delay, self._fire)
        self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            self._cancelled = True
            timer = self._timer
        if timer is not None:
            timer.cancel()

    def _fire(self) -> None:
        with self._lock:
            if self._cancelled or self._fired:
                return
            self._fired = True
        self._callback()


__all__ = ["Cancellable", "ScopedTimer", "TimerFactory", "thread_timer"]
