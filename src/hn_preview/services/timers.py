"""Cancellable timers driven by an event loop scheduler."""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

_logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    """Handle returned by a scheduler for a delayed callback."""

    def cancel(self) -> None:
        """Prevent the callback from running."""


class Scheduler(Protocol):
    """Runs callbacks after a delay."""

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> TimerHandle:
        """Schedule a callback and return a cancellable handle."""


@dataclass
class AsyncioScheduler(Scheduler):
    """Scheduler backed by an asyncio event loop."""

    loop: asyncio.AbstractEventLoop | None = None

    def call_later(
        self, delay_seconds: float, callback: Callable[[], None]
    ) -> asyncio.TimerHandle:
        loop = self.loop or asyncio.get_running_loop()
        return loop.call_later(delay_seconds, callback)


@dataclass
class CancellableTimer:
    """A single-slot timer: starting it again replaces the pending run."""

    scheduler: Scheduler
    delay_ms: int
    name: str = "timer"
    _handle: TimerHandle | None = field(default=None, init=False, repr=False)

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def start(self, callback: Callable[[], None]) -> None:
        """Schedule ``callback`` after the delay, cancelling any pending run."""
        self.cancel()

        def fire() -> None:
            self._handle = None
            callback()

        self._handle = self.scheduler.call_later(self.delay_ms / 1000, fire)

    def cancel(self) -> None:
        """Cancel the pending run, if any."""
        if self._handle is None:
            return
        self._handle.cancel()
        self._handle = None
        _logger.debug("Cancelled %s timer", self.name)
