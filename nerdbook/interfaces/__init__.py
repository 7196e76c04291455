"""Interface protocols for NerdBook."""

from .dispatcher import Dispatcher, ScheduledTask, TimerFactory
from .observer import LookupObserver
from .presenter import PresenterProtocol

__all__ = ["Dispatcher", "ScheduledTask", "TimerFactory", "LookupObserver", "PresenterProtocol"]
