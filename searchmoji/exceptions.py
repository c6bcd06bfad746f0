"""Custom exception hierarchy for searchmoji.

Exception Hierarchy:
    SearchmojiError (base)
    ├── RecordLoadError - initial record collection could not be loaded
    ├── RecordFormatError - payload is not a list of well-formed records
    ├── StoreAlreadyLoadedError - record collection published twice
    ├── ClipboardWriteError - the host clipboard rejected a write
    └── ConfigurationError - settings/environment issues

Usage:
    from searchmoji.exceptions import RecordLoadError

    try:
        payload = read_payload(source)
    except OSError as e:
        raise RecordLoadError("Failed to read records", source=source) from e
"""

from typing import Any


class SearchmojiError(Exception):
    """Base exception for all searchmoji errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., sources, symbols)
        retryable: Whether this error might succeed on retry
    """

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = False,
        **context: Any,
    ) -> None:
        self.message = message
        self.context = context
        self.retryable = retryable
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Record Errors
# =============================================================================


class RecordLoadError(SearchmojiError):
    """The record collection could not be read from its source."""

    def __init__(
        self,
        message: str = "Failed to load records",
        *,
        source: str | None = None,
        **context: Any,
    ) -> None:
        if source:
            context["source"] = source
        super().__init__(message, **context)


class RecordFormatError(SearchmojiError):
    """A payload did not have the expected record shape."""

    def __init__(
        self,
        message: str = "Malformed record payload",
        *,
        index: int | None = None,
        **context: Any,
    ) -> None:
        if index is not None:
            context["index"] = index
        super().__init__(message, **context)


class StoreAlreadyLoadedError(SearchmojiError):
    """The record store only accepts a single published collection."""

    def __init__(self, message: str = "Record collection is already loaded", **context: Any) -> None:
        super().__init__(message, **context)


# =============================================================================
# Clipboard Errors
# =============================================================================


class ClipboardWriteError(SearchmojiError):
    """Writing to the system clipboard failed."""

    def __init__(
        self,
        message: str = "Clipboard write failed",
        *,
        backend: str | None = None,
        **context: Any,
    ) -> None:
        if backend:
            context["backend"] = backend
        super().__init__(message, **context)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(SearchmojiError):
    """Invalid settings or environment variables."""

    def __init__(
        self,
        message: str = "Invalid configuration",
        *,
        setting: str | None = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
