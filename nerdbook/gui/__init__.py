"""PyQt6 adapters for running the lookup client inside a Qt application."""

from .qt_dispatch import (
    QtDispatcher,
    QtSingleShotTimer,
    QtStateObserver,
    create_qt_client,
    qt_timer_factory,
)

__all__ = [
    "QtDispatcher",
    "QtSingleShotTimer",
    "QtStateObserver",
    "qt_timer_factory",
    "create_qt_client",
]
