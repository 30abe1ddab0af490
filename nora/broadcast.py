"""A multi-producer, multi-consumer broadcast channel.

Every message sent on a :class:`Channel` is delivered once to every
:class:`Receiver` that existed when it was sent. A receiver that is not read
from holds back the writers once the ring buffer is full.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar

from .broadcast_errors import DisconnectedError, EmptyError, FullError

__all__ = ["Channel", "Receiver"]

T = TypeVar("T")


@dataclass
class _Seat(Generic[T]):
    """A slot in the ring buffer holding a value and its read bookkeeping."""

    num_reads: int = 0
    required_reads: int = 0
    val: Any = None

    def take(self) -> T:
        if self.num_reads >= self.required_reads:
            raise RuntimeError(
                f"num_reads: {self.num_reads}, req: {self.required_reads}"
            )
        value = self.val
        if self.num_reads + 1 == self.required_reads:
            self.val = None
        self.num_reads += 1
        return value

    def pending(self) -> int:
        return max(self.required_reads - self.num_reads, 0)

    def __str__(self) -> str:
        return (
            f"Seat {{ num_reads: {self.num_reads}, "
            f"state: MutSeatState({self.required_reads}) }}"
        )


class _State(Generic[T]):
    """State shared between every handle of one channel."""

    def __init__(self, capacity: int) -> None:
        # one padding seat separates the tail from the oldest unread seat
        self.length = capacity + 1
        self.ring: list[_Seat[T]] = [_Seat() for _ in range(self.length)]
        self.tail = 0
        self.num_writers = 0
        self.num_readers = 0
        self.cond = threading.Condition(threading.RLock())

    def advance(self, index: int) -> int:
        return (index + 1) % self.length

    def fence_clear(self) -> bool:
        return self.ring[self.advance(self.tail)].pending() == 0


class Channel(Generic[T]):
    """Sending handle of a broadcast channel."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("Capacity needs to be greater than 0")
        self._attach(_State(capacity))

    @classmethod
    def _from_state(cls, state: _State[T]) -> "Channel[T]":
        channel = cls.__new__(cls)
        channel._attach(state)
        return channel

    def _attach(self, state: _State[T]) -> None:
        self._state = state
        self._closed = False
        with state.cond:
            state.num_writers += 1

    def spawn_rx(self) -> "Receiver[T]":
        """Create a receiver that sees every message sent from now on."""
        return Receiver(self._state)

    def _write(self, value: T) -> None:
        state = self._state
        seat = state.ring[state.tail]
        seat.val = value
        seat.required_reads = state.num_readers
        seat.num_reads = 0
        state.tail = state.advance(state.tail)
        state.cond.notify_all()

    def send(self, value: T) -> None:
        """Send a message.

        Raises DisconnectedError when there are no receivers and FullError
        when the ring buffer has no free seat.
        """
        state = self._state
        with state.cond:
            if state.num_readers == 0:
                raise DisconnectedError(value)
            if not state.fence_clear():
                raise FullError(value)
            self._write(value)

    def blocking_send(self, value: T) -> None:
        """Send a message, waiting while the channel is full.

        Raises DisconnectedError when there are no receivers.
        """
        state = self._state
        with state.cond:
            if state.num_readers == 0:
                raise DisconnectedError(value)
            while not state.fence_clear():
                state.cond.wait()
            self._write(value)

    def clone(self) -> "Channel[T]":
        """Another sending handle on the same channel."""
        return Channel._from_state(self._state)

    def close(self) -> None:
        """Release this sending handle; receivers disconnect once all are released."""
        if self._closed:
            return
        self._closed = True
        with self._state.cond:
            self._state.num_writers -= 1
            self._state.cond.notify_all()

    def debug_state(self) -> str:
        """A text dump of the tail, reader count and every seat."""
        state = self._state
        with state.cond:
            lines = [f"Tail: {state.tail}\nnum readers: {state.num_readers}\n"]
            lines.extend(f"Seat({i}): {seat}\n" for i, seat in enumerate(state.ring))
        return "".join(lines)

    def __enter__(self) -> "Channel[T]":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class Receiver(Generic[T]):
    """Receiving handle of a broadcast channel.

    A receiver that is never read from blocks writers once the buffer fills.
    """

    def __init__(self, state: _State[T]) -> None:
        self._state = state
        self._released = False
        with state.cond:
            state.num_readers += 1
            self._closed = state.num_writers == 0
            self._head = state.tail

    def clone_channel(self) -> Channel[T]:
        """A new sending handle on this receiver's channel."""
        return Channel._from_state(self._state)

    def clone(self) -> "Receiver[T]":
        """A new receiver starting at the current tail."""
        return Receiver(self._state)

    def _take(self) -> T:
        state = self._state
        value = state.ring[self._head].take()
        self._head = state.advance(self._head)
        state.cond.notify_all()
        return value

    def try_recv(self) -> T:
        """Receive a message without waiting.

        Raises EmptyError when nothing new is available and DisconnectedError
        when every sender is gone and everything has been read.
        """
        state = self._state
        with state.cond:
            if self._closed or self._released:
                raise DisconnectedError()
            if state.tail != self._head:
                return self._take()
            if state.num_writers == 0:
                self._closed = True
                raise DisconnectedError()
            raise EmptyError()

    def recv(self) -> T:
        """Receive a message, waiting until one is available.

        Raises DisconnectedError when every sender is gone and everything has been read.
        """
        state = self._state
        with state.cond:
            if self._closed or self._released:
                raise DisconnectedError()
            while state.tail == self._head:
                if state.num_writers == 0:
                    self._closed = True
                    raise DisconnectedError()
                state.cond.wait()
            return self._take()

    def close(self) -> None:
        """Release this receiver, marking its unread messages as read."""
        if self._released:
            return
        self._released = True
        state = self._state
        with state.cond:
            state.num_readers -= 1
            cur = self._head
            while cur != state.tail:
                state.ring[cur].num_reads += 1
                cur = state.advance(cur)
            state.cond.notify_all()

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.recv()
            except DisconnectedError:
                return

    def __enter__(self) -> "Receiver[T]":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()