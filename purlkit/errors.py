"""Exceptions raised by purlkit."""

from __future__ import annotations

from typing import Optional


class PurlError(Exception):
    """Base class for all purlkit errors."""


class InvalidPackageURLError(PurlError, ValueError):
    """Raised when a string is not a well-formed package URL.

    Attributes:
        text: The string that failed to parse.
        reason: A short, human readable description of what is wrong with it.
    """

    def __init__(self, text: str, reason: Optional[str] = None):
        self.text = text
        self.reason = reason
        message = f"invalid package url: {text!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
