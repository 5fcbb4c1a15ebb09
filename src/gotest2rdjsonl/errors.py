"""Exceptions raised by gotest2rdjsonl."""

from __future__ import annotations


class Gotest2RdjsonlError(Exception):
    """Base class for all gotest2rdjsonl errors."""


class EventDecodeError(Gotest2RdjsonlError):
    """A record in the event stream could not be decoded.

    Fatal for the whole stream: nothing after the bad record is processed.
    """

    def __init__(self, lineno: int, reason: str):
        self.lineno = lineno
        self.reason = reason
        super().__init__(f"line {lineno}: {reason}")


class ConfigError(Gotest2RdjsonlError):
    """The settings file is missing or malformed."""
