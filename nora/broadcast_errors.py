"""Errors raised by the broadcast channel."""

from __future__ import annotations

from typing import Any

__all__ = ["ChannelError", "DisconnectedError", "EmptyError", "FullError"]


class ChannelError(Exception):
    """Base class for every broadcast channel error."""


class DisconnectedError(ChannelError):
    """The other side of the channel is gone.

    When raised by a send, ``value`` holds the message that could not be delivered.
    """

    def __init__(self, value: Any = None) -> None:
        super().__init__("Channel Disconnected")
        self.value = value


class EmptyError(ChannelError):
    """No new message is available yet."""

    def __init__(self) -> None:
        super().__init__("Channel Empty")


class FullError(ChannelError):
    """The channel has no free seat; ``value`` holds the rejected message."""

    def __init__(self, value: Any) -> None:
        super().__init__("Channel Full")
        self.value = value