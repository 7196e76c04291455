"""Protocols for marshalling work onto the state-owning context."""

from collections.abc import Callable
from typing import Protocol


class Dispatcher(Protocol):
    """Interface for running state mutations on a single logical context.

    Network completions arrive on executor threads. The lookup client hands
    every mutation to a dispatcher so that LookupState has exactly one writer
    at a time (a lock, a GUI main thread, etc).
    """

    def dispatch(self, callback: Callable[[], None]) -> None:
        """Run a callback on the owning context.

        Calls made from the owning context itself should run synchronously.

        Args:
            callback: Zero-argument callable that mutates state
        """
        ...


class ScheduledTask(Protocol):
    """A one-shot delayed callback that can be cancelled before it fires."""

    def start(self) -> None:
        """Start the countdown."""
        ...

    def cancel(self) -> None:
        """Stop the countdown. Has no effect once the callback has fired."""
        ...


# (delay_seconds, callback) -> ScheduledTask that has not been started yet
TimerFactory = Callable[[float, Callable[[], None]], ScheduledTask]
