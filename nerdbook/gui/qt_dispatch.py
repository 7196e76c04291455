"""Qt dispatcher, debounce timer and observer using signals for thread-safe delivery."""

from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer, pyqtSignal, pyqtSlot

from nerdbook.client import LookupClient
from nerdbook.config import NerdBookConfig
from nerdbook.models import LookupState


class QtDispatcher(QObject):
    """Run state mutations on the thread that owns this object.

    Implements Dispatcher protocol through structural subtyping (duck typing).
    Create it on the GUI main thread. Callbacks dispatched from executor
    threads are queued onto the main thread's event loop; callbacks
    dispatched from the main thread run immediately.
    """

    _invoke = pyqtSignal(object)  # Callable[[], None]

    def __init__(self, parent=None):
        """Initialize the dispatcher.

        Args:
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self._invoke.connect(self._run)

    def dispatch(self, callback: Callable[[], None]) -> None:
        """Run a callback on the owning thread.

        Args:
            callback: Zero-argument callable that mutates state
        """
        self._invoke.emit(callback)

    @pyqtSlot(object)
    def _run(self, callback: Callable[[], None]) -> None:
        callback()


class QtSingleShotTimer(QObject):
    """Debounce timer backed by a single-shot QTimer.

    Implements ScheduledTask protocol. Must be started and cancelled from
    a thread running a Qt event loop.
    """

    def __init__(self, delay: float, callback: Callable[[], None], parent=None):
        """Initialize the timer.

        Args:
            delay: Seconds to wait before firing
            callback: Zero-argument callable to run once
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(int(delay * 1000))
        self._timer.timeout.connect(callback)

    def start(self) -> None:
        """Start (or restart) the countdown."""
        self._timer.start()

    def cancel(self) -> None:
        """Stop the countdown if it has not fired yet."""
        self._timer.stop()

    @property
    def is_active(self) -> bool:
        """Check if the countdown is running."""
        return self._timer.isActive()


def qt_timer_factory(delay: float, callback: Callable[[], None]) -> QtSingleShotTimer:
    """TimerFactory producing QtSingleShotTimer instances."""
    return QtSingleShotTimer(delay, callback)


class QtStateObserver(QObject):
    """Forward lookup state changes to widgets as a Qt signal.

    Implements LookupObserver protocol. Connect state_changed to the slots
    that refresh the synonym lists, suggestion popup and definition label.
    """

    state_changed = pyqtSignal(object)  # LookupState

    def __init__(self, parent=None):
        super().__init__(parent)

    def on_state_changed(self, state: LookupState) -> None:
        """Emit the new state snapshot.

        Args:
            state: The new immutable state snapshot
        """
        self.state_changed.emit(state)


def create_qt_client(
    config: NerdBookConfig | None = None,
    parent=None,
) -> tuple[LookupClient, QtStateObserver]:
    """Create a lookup client wired for use from the Qt main thread.

    Args:
        config: Optional configuration
        parent: Optional parent QObject for the dispatcher and observer

    Returns:
        Tuple of (client, observer) with the observer already subscribed
    """
    dispatcher = QtDispatcher(parent)
    observer = QtStateObserver(parent)
    client = LookupClient(
        config=config,
        dispatcher=dispatcher,
        timer_factory=qt_timer_factory,
    )
    client.subscribe(observer)
    return client, observer
