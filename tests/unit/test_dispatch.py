"""Tests for the default dispatcher and debounce timer."""

import threading

from nerdbook.client.dispatch import InlineDispatcher, threading_timer_factory


class TestInlineDispatcher:
    """Tests for InlineDispatcher."""

    def test_runs_callback_synchronously(self):
        calls = []
        InlineDispatcher().dispatch(lambda: calls.append("ran"))
        assert calls == ["ran"]

    def test_reentrant_dispatch(self):
        """A callback that dispatches again should not deadlock."""
        dispatcher = InlineDispatcher()
        calls = []

        def outer():
            calls.append("outer")
            dispatcher.dispatch(lambda: calls.append("inner"))

        dispatcher.dispatch(outer)
        assert calls == ["outer", "inner"]

    def test_serializes_callbacks_across_threads(self):
        """Concurrent dispatches should never overlap."""
        dispatcher = InlineDispatcher()
        active = []
        overlaps = []

        def callback():
            active.append(1)
            if len(active) > 1:
                overlaps.append(len(active))
            active.pop()

        threads = [
            threading.Thread(target=lambda: [dispatcher.dispatch(callback) for _ in range(200)])
            for _ in range(4)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert overlaps == []


class TestThreadingTimerFactory:
    """Tests for threading_timer_factory."""

    def test_fires_once_after_delay(self):
        fired = threading.Event()
        timer = threading_timer_factory(0.01, fired.set)
        timer.start()
        assert fired.wait(2.0) is True

    def test_cancel_before_fire(self):
        fired = threading.Event()
        timer = threading_timer_factory(0.5, fired.set)
        timer.start()
        timer.cancel()
        assert fired.wait(0.7) is False

    def test_is_daemon(self):
        timer = threading_timer_factory(1.0, lambda: None)
        assert timer.daemon is True
