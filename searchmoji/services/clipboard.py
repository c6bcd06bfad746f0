"""
Asynchronous clipboard writes.

The host clipboard sits behind the small `ClipboardWriter` protocol so the
controller and the tests can substitute their own implementation.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import pyperclip

from ..exceptions import ClipboardWriteError

logger = logging.getLogger(__name__)


class ClipboardWriter(Protocol):
    """Protocol for clipboard implementations."""

    async def write_text(self, text: str) -> None:
        """Write plain text to the clipboard.

        Raises:
            Exception: Any failure; the controller treats it as a rejected write.
        """
        ...


class PyperclipClipboard:
    """System clipboard via pyperclip (pbcopy, xclip/xsel, wl-copy, win32)."""

    name = "pyperclip"

    async def write_text(self, text: str) -> None:
        try:
            # pyperclip shells out on most platforms; keep it off the event loop
            await asyncio.to_thread(pyperclip.copy, text)
        except pyperclip.PyperclipException as e:
            raise ClipboardWriteError(str(e), backend=self.name) from e


@dataclass(frozen=True)
class CopyOutcome:
    """Result of a single copy request."""

    symbol: str
    success: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls, symbol: str) -> CopyOutcome:
        return cls(symbol=symbol, success=True)

    @classmethod
    def failed(cls, symbol: str, error: Exception) -> CopyOutcome:
        return cls(symbol=symbol, success=False, error=str(error))


class ClipboardController:
    """Copies symbols to the clipboard and reports the outcome.

    Each call is independent: concurrent copies do not cancel each other,
    and a rejected write is logged rather than raised.
    """

    def __init__(self, writer: Optional[ClipboardWriter] = None) -> None:
        self.writer: ClipboardWriter = writer or PyperclipClipboard()

    async def copy(self, symbol: str) -> CopyOutcome:
        try:
            await self.writer.write_text(symbol)
        except Exception as e:
            logger.warning("❌ Clipboard error copying %r: %s", symbol, e)
            return CopyOutcome.failed(symbol, e)
        logger.debug("Copied %r to clipboard", symbol)
        return CopyOutcome.ok(symbol)
