"""
Presenter for the Picker Screen.

Routes input changes to the filter, clicks to the clipboard, and successful
copies to the toast notification. Decision logic lives in the services.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from ...config.constants import COPY_CONFIRMATION, TOAST_DURATION_SECONDS
from ...exceptions import RecordLoadError
from ...models.records import Record
from ...services.clipboard import ClipboardController, ClipboardWriter, CopyOutcome
from ...services.filtering import filter_records
from ...services.notifications import NotificationScheduler, NotificationState, Scheduler
from ...services.record_source import fetch_records
from ...services.record_store import RecordStore

logger = logging.getLogger(__name__)


@dataclass
class PickerStateVM:
    """Complete picker state for the UI."""

    query: str = ""
    visible: list[Record] = field(default_factory=list)
    total_count: int = 0
    notification: NotificationState = field(default_factory=NotificationState)
    is_loading: bool = False
    load_error: str | None = None
    status_text: str = ""


class PickerPresenter:
    """
    Handles picker business logic.

    Features:
    - One startup load task publishing into the record store
    - Filtering recomputed on every query change
    - Independent concurrent copies; success shows the confirmation toast
    """

    def __init__(
        self,
        source: str,
        clipboard: ClipboardWriter | None = None,
        schedule: Scheduler | None = None,
        toast_duration: float = TOAST_DURATION_SECONDS,
        on_state_update: Callable[[PickerStateVM], None] | None = None,
    ):
        self.source = source
        self.on_state_update = on_state_update
        self.store = RecordStore()
        self.clipboard = ClipboardController(clipboard)
        self.notifications = NotificationScheduler(
            schedule=schedule,
            duration=toast_duration,
            on_change=self._on_notification_change,
        )
        self._state = PickerStateVM()
        self._load_task: asyncio.Task[None] | None = None
        self._copy_tasks: set[asyncio.Task[CopyOutcome]] = set()

    @property
    def state(self) -> PickerStateVM:
        """Get current state."""
        return self._state

    def _notify_update(self) -> None:
        """Notify listeners of state change."""
        if self.on_state_update:
            self.on_state_update(self._state)

    def start_loading(self) -> asyncio.Task[None]:
        """Launch the one-time startup load; later calls return the same task."""
        if self._load_task is None:
            self._state.is_loading = True
            self._refresh_visible()
            self._notify_update()
            self._load_task = asyncio.create_task(self._load())
        return self._load_task

    async def _load(self) -> None:
        try:
            records = await fetch_records(self.source)
        except RecordLoadError as e:
            logger.error(f"Error loading records: {e}")
            self._fail_load(e)
        except Exception as e:
            logger.exception(f"Unexpected error loading records: {e}")
            self._fail_load(RecordLoadError(f"Unexpected error: {e}", source=self.source))
        else:
            self.store.publish(records)

        self._state.is_loading = False
        self._refresh_visible()
        self._notify_update()

    def _fail_load(self, error: RecordLoadError) -> None:
        self.store.mark_failed(error)
        self._state.load_error = str(error)

    def set_query(self, query: str) -> None:
        """Update the query and recompute the visible records."""
        self._state.query = query
        self._refresh_visible()
        self._notify_update()

    def _refresh_visible(self) -> None:
        self._state.visible = filter_records(self.store.records, self._state.query)
        self._state.total_count = len(self.store)
        self._state.status_text = self._status_text()

    def _status_text(self) -> str:
        if self._state.is_loading:
            return "Loading emojis..."
        if self._state.load_error:
            return "Could not load emojis"
        shown = len(self._state.visible)
        if self._state.query and not shown:
            return f"No emojis match '{self._state.query}'"
        return f"{shown} of {self._state.total_count} emojis | click or Enter to copy"

    async def copy_symbol(self, symbol: str) -> CopyOutcome:
        """Copy ``symbol``; show the confirmation only when the write succeeds."""
        outcome = await self.clipboard.copy(symbol)
        if outcome.success:
            self.notifications.show(COPY_CONFIRMATION)
        return outcome

    def request_copy(self, symbol: str) -> asyncio.Task[CopyOutcome]:
        """Start a copy without waiting for it (used by click handlers)."""
        task = asyncio.create_task(self.copy_symbol(symbol))
        self._copy_tasks.add(task)
        task.add_done_callback(self._copy_tasks.discard)
        return task

    def dismiss_notification(self) -> None:
        self.notifications.dismiss()

    def _on_notification_change(self, state: NotificationState) -> None:
        self._state.notification = state
        self._notify_update()
