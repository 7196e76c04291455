"""Integration tests for the lookup pipeline with real threads and timers."""

import threading
from unittest.mock import patch

import pytest

from nerdbook.cli.waiter import StateWaiter
from nerdbook.client import LookupClient
from nerdbook.config import NerdBookConfig


@pytest.fixture
def fast_config():
    """Config with a short debounce so timers fire quickly."""
    return NerdBookConfig(api_base_url="https://datamuse.test", debounce_delay=0.05)


@pytest.fixture
def fake_datamuse(load_fixture, make_response):
    """Patch requests.get with recorded Datamuse responses."""
    calls = []
    lock = threading.Lock()

    def fake_get(url, **kwargs):
        with lock:
            calls.append(url)
        if "rel_syn=" in url:
            return make_response(load_fixture("synonyms_happy.json"))
        if "sp=" in url:
            return make_response(load_fixture("definition_happy.json"))
        return make_response(load_fixture("suggestions_hap.json"))

    with patch("nerdbook.services.datamuse_service.requests.get", side_effect=fake_get):
        yield calls


class TestLookupPipeline:
    """Integration tests using the default thread pool, dispatcher and timers."""

    def test_synonyms_and_definition(self, fast_config, fake_datamuse):
        waiter = StateWaiter(
            lambda s: not s.is_loading and s.current_definition is not None
        )

        with LookupClient(fast_config) as client:
            client.subscribe(waiter)
            client.request_synonyms("happy")
            state = waiter.wait(5.0)

        assert state is not None
        assert state.network_available is True
        assert [r.text for r in state.primary_synonyms][0] == "glad"
        assert [r.text for r in state.pretentious_synonyms][0] == "felicitous"
        assert state.current_definition == "enjoying or showing or marked by joy or pleasure"
        assert len(fake_datamuse) == 2

    def test_debounced_suggestions_fire_once(self, fast_config, fake_datamuse):
        waiter = StateWaiter(lambda s: len(s.suggestions) > 0)

        with LookupClient(fast_config) as client:
            client.subscribe(waiter)
            for text in ("h", "ha", "hap"):
                client.request_suggestions(text)
            state = waiter.wait(5.0)

        assert state is not None
        assert state.suggestions == ("happy", "happen", "happiness")
        assert len(fake_datamuse) == 1
        assert "s=hap" in fake_datamuse[0]

    def test_empty_input_never_fetches(self, fast_config, fake_datamuse):
        waiter = StateWaiter(lambda s: True)

        with LookupClient(fast_config) as client:
            client.subscribe(waiter)
            client.request_suggestions("")
            state = waiter.wait(1.0)

        assert state is not None
        assert state.suggestions == ()
        assert fake_datamuse == []
