"""Exception types raised by the texture streamer."""

from __future__ import annotations

from typing import Any


class StreamerError(Exception):
    """Base class for errors raised by this package."""


class OutOfRangeError(StreamerError, IndexError):
    """A named value lies outside an inclusive range."""

    def __init__(self, name: str, value: Any, min_value: Any, max_value: Any) -> None:
        self.name = name
        self.value = value
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(
            f"Value {name}={value} is out of range [{min_value}, {max_value}]"
        )