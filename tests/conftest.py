"""Pytest configuration and shared fixtures."""

import json
from concurrent.futures import Executor, Future
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from nerdbook.client import InlineDispatcher, LookupClient
from nerdbook.config import NerdBookConfig
from nerdbook.models import WordRecord
from nerdbook.presenters import NullPresenter

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str):
    """Load a recorded Datamuse JSON response from tests/fixtures."""
    return json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8"))


def make_response(payload=None, status_code=200, json_error=None):
    """Create a mock requests.Response returning the given JSON payload."""
    response = MagicMock()
    response.status_code = status_code
    response.raise_for_status.return_value = None
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


class ImmediateExecutor(Executor):
    """Executor that runs every submitted call synchronously."""

    def submit(self, fn, /, *args, **kwargs):
        future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except BaseException as e:
            future.set_exception(e)
        return future


class DeferredExecutor(Executor):
    """Executor that holds submitted calls until a test releases them."""

    def __init__(self):
        self.pending = []

    def submit(self, fn, /, *args, **kwargs):
        future = Future()
        self.pending.append((future, fn, args, kwargs))
        return future

    @property
    def submitted_args(self):
        """First positional argument of every pending call (the request URL)."""
        return [args[0] for _, _, args, _ in self.pending]

    def run(self, index: int) -> None:
        """Complete the pending call at index."""
        future, fn, args, kwargs = self.pending.pop(index)
        try:
            future.set_result(fn(*args, **kwargs))
        except BaseException as e:
            future.set_exception(e)

    def run_for(self, arg) -> None:
        """Complete the pending call whose first argument is arg."""
        for index, (_, _, args, _) in enumerate(self.pending):
            if args and args[0] == arg:
                self.run(index)
                return
        raise AssertionError(f"No pending call for {arg!r}")

    def run_all(self) -> None:
        """Complete every pending call in submission order."""
        while self.pending:
            self.run(0)


class ManualTimer:
    """ScheduledTask that fires only when a test calls fire()."""

    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        """Run the callback the way an elapsed timer would, ignoring cancellation."""
        self.callback()


class ManualTimerFactory:
    """TimerFactory that records every ManualTimer it creates."""

    def __init__(self):
        self.timers = []

    def __call__(self, delay, callback):
        timer = ManualTimer(delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def active(self):
        """Timers that were started and not cancelled."""
        return [t for t in self.timers if t.started and not t.cancelled]


class RecordingObserver:
    """A real LookupObserver implementation that records every published state."""

    def __init__(self):
        self.states = []

    def on_state_changed(self, state) -> None:
        self.states.append(state)

    @property
    def last(self):
        return self.states[-1] if self.states else None


@pytest.fixture
def test_config():
    """Provide a test configuration pointing at a fake host."""
    return NerdBookConfig(
        api_base_url="https://datamuse.test",
        request_timeout=1.0,
        debounce_delay=0.5,
        max_workers=2,
    )


@pytest.fixture
def deferred_executor():
    """Provide an executor whose futures complete on demand."""
    return DeferredExecutor()


@pytest.fixture
def timer_factory():
    """Provide a timer factory whose timers fire on demand."""
    return ManualTimerFactory()


@pytest.fixture
def recording_observer():
    """Provide an observer that records all published states."""
    return RecordingObserver()


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def mock_service():
    """Provide a DatamuseService double with real-looking URL builders."""
    service = MagicMock()
    service.build_synonyms_url.side_effect = lambda q: f"syn:{q}"
    service.build_definition_url.side_effect = lambda q: f"def:{q}"
    service.build_suggestions_url.side_effect = lambda t: f"sug:{t}"
    return service


@pytest.fixture
def make_client(test_config, mock_service, deferred_executor, timer_factory, recording_observer):
    """Factory fixture for a LookupClient wired to deterministic test doubles."""

    def _make(service=None, executor=None):
        client = LookupClient(
            config=test_config,
            service=service or mock_service,
            dispatcher=InlineDispatcher(),
            executor=executor or deferred_executor,
            timer_factory=timer_factory,
        )
        client.subscribe(recording_observer)
        return client

    return _make


@pytest.fixture
def make_word_record():
    """Factory fixture for creating WordRecord instances with sensible defaults."""

    def _make(text="glad", syllable_count=1, frequency=10.0, definitions=None):
        return WordRecord(
            text=text,
            syllable_count=syllable_count,
            frequency=frequency,
            definitions=definitions,
        )

    return _make


@pytest.fixture(name="load_fixture")
def load_fixture_fixture():
    """Provide the JSON fixture loader."""
    return load_fixture


@pytest.fixture(name="make_response")
def make_response_fixture():
    """Provide the mock response factory."""
    return make_response
