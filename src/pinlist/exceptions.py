"""pinlist exception hierarchy.

All pinlist-specific exceptions inherit from PinListError.

Pin actions never raise for bad input (unknown ids, full capacity,
out-of-range indices are no-ops). Exceptions are reserved for
configuration mistakes caught when a PinList is built.
"""


class PinListError(Exception):
    """Base exception for all pinlist errors."""


class PinListConfigError(PinListError):
    """Raised when PinList options are invalid or inconsistent."""

    def __init__(self, message: str, *, option: str | None = None) -> None:
        self.option = option
        if option is not None:
            message = f"Invalid option '{option}': {message}"
        super().__init__(message)
