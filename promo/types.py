"""Shared exception types for promo."""

from __future__ import annotations


class PromoError(Exception):
    """Base class for errors that end the program with exit code 1."""


class UsageError(PromoError):
    """Raised when the command line is missing the duration argument."""


class ParseError(PromoError, ValueError):
    """Raised when a duration string cannot be parsed."""

    def __init__(self, text: str, message: str) -> None:
        self.text = text
        super().__init__(message)


class HomeDirError(PromoError):
    """Raised when the user's home directory cannot be resolved."""


class ConfigError(PromoError):
    """Raised when the config file exists but cannot be read or decoded."""

    def __init__(self, path: object, message: str) -> None:
        self.path = path
        super().__init__(message)


class RenderLoopError(PromoError):
    """Raised when the event loop fails unexpectedly."""
