"""
Textual application hosting the picker.
"""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer

from ..config.constants import TOAST_DURATION_SECONDS
from ..services.clipboard import ClipboardWriter
from .picker import PickerScreen

logger = logging.getLogger(__name__)


class SearchmojiApp(App[None]):
    """Emoji picker: type to filter, click to copy."""

    TITLE = "Searchmoji"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    CSS = """
    Screen {
        layout: vertical;
    }
    """

    def __init__(
        self,
        source: str,
        clipboard: ClipboardWriter | None = None,
        toast_duration: float = TOAST_DURATION_SECONDS,
    ) -> None:
        super().__init__()
        self.source = source
        self.clipboard_writer = clipboard
        self.toast_duration = toast_duration

    def compose(self) -> ComposeResult:
        yield PickerScreen(
            self.source,
            clipboard=self.clipboard_writer,
            toast_duration=self.toast_duration,
            id="picker",
        )
        yield Footer()


def run_app(source: str) -> None:
    """Run the picker until the user quits."""
    logger.info("Searchmoji starting up - source: %s", source)
    SearchmojiApp(source).run()
