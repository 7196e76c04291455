"""Blocking observer that lets synchronous CLI commands wait for async lookups."""

import threading
from collections.abc import Callable

from nerdbook.models import LookupState


class StateWaiter:
    """Observer that blocks the caller until a published state matches a predicate.

    Implements LookupObserver protocol.
    """

    def __init__(self, predicate: Callable[[LookupState], bool]):
        """Initialize the waiter.

        Args:
            predicate: Returns True for the first state worth waiting for
        """
        self._predicate = predicate
        self._event = threading.Event()
        self._state: LookupState | None = None

    def on_state_changed(self, state: LookupState) -> None:
        """Record the state and wake the waiting thread if it matches."""
        if not self._event.is_set() and self._predicate(state):
            self._state = state
            self._event.set()

    def wait(self, timeout: float) -> LookupState | None:
        """Block until a matching state arrives.

        Args:
            timeout: Maximum seconds to wait

        Returns:
            The matching state, or None on timeout
        """
        if self._event.wait(timeout):
            return self._state
        return None
