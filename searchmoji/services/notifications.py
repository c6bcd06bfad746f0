"""
Single-slot toast notifications with timed auto-dismissal.

Every `show()` bumps an epoch and schedules a hide tagged with it. When a hide
fires it only takes effect if its epoch is still the visible one, so a timer
left over from an earlier toast can never hide a newer toast. Superseded
timers are not cancelled; they fire as no-ops.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional

from ..config.constants import TOAST_DURATION_SECONDS

logger = logging.getLogger(__name__)

Scheduler = Callable[[float, Callable[[], None]], Any]


@dataclass(frozen=True)
class NotificationState:
    """Hidden when ``message`` is None, otherwise Visible(message, epoch)."""

    message: Optional[str] = None
    epoch: int = 0

    @property
    def is_visible(self) -> bool:
        return self.message is not None


def asyncio_scheduler(delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
    """Schedule ``callback`` on the running event loop."""
    return asyncio.get_running_loop().call_later(delay, callback)


class NotificationScheduler:
    """Timed Hidden/Visible state machine for the copy confirmation toast.

    Args:
        schedule: ``schedule(delay_seconds, callback)`` registers a deferred
            callback with the event loop. Defaults to ``loop.call_later``.
        duration: Seconds a toast stays visible.
        on_change: Called with the new state after every transition.
    """

    def __init__(
        self,
        schedule: Scheduler | None = None,
        duration: float = TOAST_DURATION_SECONDS,
        on_change: Callable[[NotificationState], None] | None = None,
    ) -> None:
        self._schedule = schedule or asyncio_scheduler
        self.duration = duration
        self.on_change = on_change
        self._state = NotificationState()
        self._epoch = 0

    @property
    def state(self) -> NotificationState:
        return self._state

    def show(self, message: str) -> int:
        """Show ``message``, replacing any visible toast. Returns its epoch."""
        self._epoch += 1
        epoch = self._epoch
        self._set_state(NotificationState(message=message, epoch=epoch))
        self._schedule(self.duration, lambda: self._hide_if_current(epoch))
        return epoch

    def dismiss(self) -> None:
        """Hide immediately; the pending timer will fire as a no-op."""
        if self._state.is_visible:
            self._set_state(NotificationState(message=None, epoch=self._state.epoch))

    def _hide_if_current(self, epoch: int) -> None:
        if self._state.is_visible and self._state.epoch == epoch:
            self._set_state(NotificationState(message=None, epoch=epoch))
        else:
            logger.debug("Ignoring stale hide for epoch %d (current %d)", epoch, self._state.epoch)

    def _set_state(self, state: NotificationState) -> None:
        self._state = state
        if self.on_change:
            self.on_change(state)
