"""Exceptions raised when runtime checks and assertions fail."""

from __future__ import annotations


class AssertionException(Exception):
    """Raised when a debug assertion does not hold."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class IllegalStateException(Exception):
    """Raised when an object is found to be in an invalid state."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message