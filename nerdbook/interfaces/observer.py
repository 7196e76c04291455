"""Observer protocol for lookup state changes."""

from typing import Protocol

from nerdbook.models import LookupState


class LookupObserver(Protocol):
    """Interface for anything that renders or reacts to LookupState.

    Observers get read-only snapshots; only the lookup client mutates state.
    """

    def on_state_changed(self, state: LookupState) -> None:
        """Called after every published change.

        Args:
            state: The new immutable state snapshot
        """
        ...
