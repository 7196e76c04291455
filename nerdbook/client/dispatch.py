"""Default dispatcher and debounce timer for non-GUI callers."""

import threading
from collections.abc import Callable


class InlineDispatcher:
    """Run callbacks immediately, serialized by a re-entrant lock.

    Implements Dispatcher protocol. Callbacks run on whichever thread
    dispatches them, but never two at once, so LookupState still has a
    single writer. Re-entrancy lets a callback publish to observers that
    call back into the client.
    """

    def __init__(self):
        self._lock = threading.RLock()

    def dispatch(self, callback: Callable[[], None]) -> None:
        """Run a callback while holding the dispatcher lock."""
        with self._lock:
            callback()


def threading_timer_factory(delay: float, callback: Callable[[], None]) -> threading.Timer:
    """Create an unstarted daemon timer for debouncing.

    Args:
        delay: Seconds to wait before firing
        callback: Zero-argument callable to run once

    Returns:
        threading.Timer (satisfies the ScheduledTask protocol)
    """
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    return timer
