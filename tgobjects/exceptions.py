"""Exception hierarchy for Telegram response objects."""

from __future__ import annotations


class TelegramSDKError(Exception):
    """Base class for errors raised by response objects."""


class UnknownFieldError(TelegramSDKError, AttributeError):
    """Raised when assigning to a field the object does not have.

    Attributes:
        field: Name of the missing field.
    """

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Property [{field}] does not exist on this object instance.")


class UnknownMethodError(TelegramSDKError, AttributeError):
    """Raised when a delegated collection method is not supported.

    Attributes:
        method: Name of the requested method.
    """

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Method [{method}] does not exist.")
