"""Lookup client owning the observable lookup state."""

from .dispatch import InlineDispatcher, threading_timer_factory
from .lookup_client import LookupClient

__all__ = ["LookupClient", "InlineDispatcher", "threading_timer_factory"]
