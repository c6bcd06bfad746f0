"""
Picker Screen - live emoji search with click-to-copy.

Features:
- Persistent search bar at top
- Grid of matching emojis, filtered on every keystroke
- Click (or Enter on a focused tile) copies the emoji
- Toast confirmation that hides itself after two seconds
"""

import logging
from collections.abc import Callable
from typing import Any

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Grid, VerticalScroll
from textual.message import Message
from textual.timer import Timer
from textual.widget import Widget
from textual.widgets import Input, Static

from ...config.constants import TOAST_DURATION_SECONDS
from ...models.records import Record
from ...services.clipboard import ClipboardWriter
from .picker_presenter import PickerPresenter, PickerStateVM

logger = logging.getLogger(__name__)


class RecordTile(Static, can_focus=True):
    """A single emoji in the grid."""

    BINDINGS = [
        Binding("enter", "select", "Copy", show=False),
    ]

    class Selected(Message):
        """Posted when the tile is clicked or activated."""

        def __init__(self, symbol: str) -> None:
            self.symbol = symbol
            super().__init__()

    def __init__(self, record: Record, **kwargs: Any) -> None:
        super().__init__(record.symbol, classes="record-tile", markup=False, **kwargs)
        self.record = record
        self.tooltip = Text(record.name)

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.post_message(self.Selected(self.record.symbol))

    def action_select(self) -> None:
        self.post_message(self.Selected(self.record.symbol))


class PickerScreen(Widget):
    """
    Full-screen picker widget.

    Layout:
    - Title and record count at top
    - Search input
    - Scrollable grid of matching emojis
    - Toast and status bar at bottom
    """

    BINDINGS = [
        Binding("slash", "focus_search", "Search"),
        Binding("escape", "dismiss_toast", "Dismiss", show=False),
    ]

    DEFAULT_CSS = """
    PickerScreen {
        layout: vertical;
        height: 1fr;
    }

    #picker-title {
        text-align: center;
        text-style: bold;
        padding: 1 0 0 0;
    }

    #picker-subtitle {
        text-align: center;
        color: $text-muted;
    }

    #search-input {
        margin: 1 2;
        border: solid $primary-darken-1;
    }

    #search-input:focus {
        border: solid $primary;
    }

    #grid-scroll {
        height: 1fr;
        scrollbar-gutter: stable;
    }

    #record-grid {
        grid-size: 8;
        grid-gutter: 1 2;
        grid-rows: 3;
        height: auto;
        padding: 0 2;
    }

    .record-tile {
        height: 3;
        content-align: center middle;
        background: $surface;
    }

    .record-tile:hover {
        background: $surface-lighten-1;
    }

    .record-tile:focus {
        background: $primary-darken-2;
    }

    #toast {
        dock: bottom;
        height: 3;
        margin: 0 0 1 0;
        padding: 1 3;
        width: auto;
        background: $success;
        color: $text;
        text-style: bold;
        display: none;
    }

    #picker-status {
        dock: bottom;
        height: 1;
        background: $surface-darken-1;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        source: str,
        clipboard: ClipboardWriter | None = None,
        toast_duration: float = TOAST_DURATION_SECONDS,
        *args: Any,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.presenter = PickerPresenter(
            source,
            clipboard=clipboard,
            schedule=self._schedule_hide,
            toast_duration=toast_duration,
            on_state_update=self._on_state_update,
        )
        self._rendered: tuple[Record, ...] | None = None

    def compose(self) -> ComposeResult:
        yield Static("Searchmoji 😀", id="picker-title")
        yield Static("Search for emojis by name or keywords. Click to copy!", id="picker-subtitle")
        yield Static("Total emojis: 0", id="picker-total")
        yield Input(placeholder="Search emojis...", id="search-input")
        with VerticalScroll(id="grid-scroll"):
            yield Grid(id="record-grid")
        yield Static("", id="picker-status")
        yield Static("", id="toast")

    def on_mount(self) -> None:
        """Focus the search bar and launch the startup load."""
        logger.info("PickerScreen mounted")
        self.query_one("#search-input", Input).focus()
        self.presenter.start_loading()

    def _schedule_hide(self, delay: float, callback: Callable[[], None]) -> Timer:
        return self.set_timer(delay, callback)

    def _on_state_update(self, state: PickerStateVM) -> None:
        """Handle state updates from presenter."""
        self.call_later(self._render_state, state)

    async def _render_state(self, state: PickerStateVM) -> None:
        """Render the current state to the UI."""
        self.query_one("#picker-total", Static).update(f"Total emojis: [bold]{state.total_count}[/bold]")
        self._render_toast(state)

        # Status text may echo the query, so it is never parsed as markup
        status = Text(state.status_text, style="red" if state.load_error else "")
        self.query_one("#picker-status", Static).update(status)

        visible = tuple(state.visible)
        if visible != self._rendered:
            self._rendered = visible
            await self._render_grid(visible)

    def _render_toast(self, state: PickerStateVM) -> None:
        toast = self.query_one("#toast", Static)
        notification = state.notification
        if notification.is_visible:
            toast.update(Text(notification.message or ""))
        toast.display = notification.is_visible

    async def _render_grid(self, records: tuple[Record, ...]) -> None:
        grid = self.query_one("#record-grid", Grid)
        await grid.remove_children()
        if records:
            await grid.mount_all([RecordTile(record) for record in records])

    def on_input_changed(self, event: Input.Changed) -> None:
        """Forward the full search text to the presenter."""
        if event.input.id != "search-input":
            return
        self.presenter.set_query(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter in the search bar moves focus to the first tile."""
        if event.input.id == "search-input":
            tiles = self.query(RecordTile)
            if tiles:
                tiles.first().focus()

    def on_record_tile_selected(self, event: RecordTile.Selected) -> None:
        self.presenter.request_copy(event.symbol)

    def action_focus_search(self) -> None:
        """Focus the search input."""
        self.query_one("#search-input", Input).focus()

    def action_dismiss_toast(self) -> None:
        self.presenter.dismiss_notification()
