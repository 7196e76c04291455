"""Lookup client that owns query state and talks to the Datamuse API."""

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import replace
from functools import partial

from nerdbook.client.dispatch import InlineDispatcher, threading_timer_factory
from nerdbook.config import NerdBookConfig, create_default_config
from nerdbook.exceptions import LookupFailure, UrlConstructionError
from nerdbook.interfaces import Dispatcher, LookupObserver, ScheduledTask, TimerFactory
from nerdbook.models import LookupState
from nerdbook.services import DatamuseService, extract_gloss
from nerdbook.utils.sort_utils import lyrical_order, pretentious_order

logger = logging.getLogger(__name__)


class LookupClient:
    """Fetch synonyms, definitions and autocomplete suggestions for a word.

    The client is the only writer of its LookupState. Public operations
    return immediately; HTTP requests run on an executor and their
    completions are funnelled back through the dispatcher, so every
    mutation happens on one logical context. Observers receive a fresh
    immutable snapshot after each mutation.

    Each synonym query and each suggestion schedule is stamped with a
    generation number. Completions from an older generation are dropped,
    so a slow response can never overwrite the results of a newer query.
    """

    def __init__(
        self,
        config: NerdBookConfig | None = None,
        service: DatamuseService | None = None,
        dispatcher: Dispatcher | None = None,
        executor: Executor | None = None,
        timer_factory: TimerFactory | None = None,
    ):
        """Initialize the lookup client.

        Args:
            config: Configuration (defaults to create_default_config())
            service: Datamuse service used to build URLs and fetch results
            dispatcher: Context that state mutations run on (defaults to InlineDispatcher)
            executor: Executor for HTTP requests (defaults to an owned thread pool)
            timer_factory: Factory for debounce timers (defaults to threading.Timer)
        """
        self.config = config or create_default_config()
        self._service = service or DatamuseService(self.config)
        self._dispatcher = dispatcher or InlineDispatcher()
        self._timer_factory = timer_factory or threading_timer_factory

        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=self.config.max_workers,
            thread_name_prefix="nerdbook-lookup",
        )

        self._state = LookupState()
        self._observers: list[LookupObserver] = []
        self._debounce_task: ScheduledTask | None = None
        self._synonym_generation = 0
        self._suggestion_generation = 0
        self._closed = False

    @property
    def state(self) -> LookupState:
        """Current immutable state snapshot."""
        return self._state

    def subscribe(self, observer: LookupObserver) -> None:
        """Register an observer for state changes."""
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: LookupObserver) -> None:
        """Remove a previously registered observer."""
        if observer in self._observers:
            self._observers.remove(observer)

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def request_synonyms(self, query: str) -> None:
        """Start a synonym and definition lookup for a word.

        Clears the previous results and suggestions, then fires the synonym
        and definition requests concurrently. If the query cannot be encoded
        into a URL, network_available is set to False and nothing is sent.

        Args:
            query: Word or phrase to look up
        """
        self._ensure_open()
        self._dispatcher.dispatch(partial(self._start_synonym_query, query))

    def request_suggestions(self, text: str) -> None:
        """Schedule a debounced autocomplete lookup for the current input.

        Call on every change of the search field. Any pending lookup is
        cancelled; empty input clears suggestions without scheduling.

        Args:
            text: Current raw text of the search field
        """
        self._ensure_open()
        self._dispatcher.dispatch(partial(self._schedule_suggestions, text))

    def select_suggestion(self, text: str) -> None:
        """Accept a suggestion: hide the list and look the word up.

        Args:
            text: The selected suggestion
        """
        self._ensure_open()
        self._dispatcher.dispatch(partial(self._select_suggestion, text))

    def dismiss_suggestions(self) -> None:
        """Hide suggestions and cancel any pending autocomplete lookup."""
        self._ensure_open()
        self._dispatcher.dispatch(self._dismiss_suggestions)

    def close(self) -> None:
        """Cancel pending work and release the owned executor.

        In-flight requests are not interrupted; their results are ignored.
        """
        if self._closed:
            return

        self._dispatcher.dispatch(self._invalidate_all)
        self._closed = True

        if self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)

    def __enter__(self) -> "LookupClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Synonym and definition lookups (run on the dispatcher)
    # ------------------------------------------------------------------

    def _start_synonym_query(self, query: str) -> None:
        self._invalidate_suggestions()

        if not query.strip():
            logger.debug("Ignoring blank synonym query")
            return

        try:
            synonyms_url = self._service.build_synonyms_url(query)
            definition_url = self._service.build_definition_url(query)
        except UrlConstructionError as e:
            logger.warning(f"Cannot build lookup URL for {query!r}: {e}")
            self._update(network_available=False)
            return

        self._synonym_generation += 1
        generation = self._synonym_generation

        self._update(
            network_available=True,
            is_loading=True,
            primary_synonyms=(),
            lyrical_synonyms=(),
            pretentious_synonyms=(),
            suggestions=(),
        )

        self._submit(
            self._service.fetch_word_records,
            definition_url,
            partial(self._on_definition_done, generation),
        )
        self._submit(
            self._service.fetch_word_records,
            synonyms_url,
            partial(self._on_synonyms_done, generation),
        )

    def _on_definition_done(self, generation: int, future: Future) -> None:
        if generation != self._synonym_generation:
            logger.debug(f"Discarding stale definition response (generation {generation})")
            return

        try:
            gloss = extract_gloss(future.result())
        except LookupFailure as e:
            logger.debug(f"Definition lookup failed: {e}")
            gloss = None

        self._update(
            current_definition=gloss if gloss is not None else self.config.definition_placeholder
        )

    def _on_synonyms_done(self, generation: int, future: Future) -> None:
        if generation != self._synonym_generation:
            logger.debug(f"Discarding stale synonym response (generation {generation})")
            return

        try:
            records = future.result()
        except LookupFailure as e:
            logger.warning(f"Error fetching synonyms: {e}")
            self._update(is_loading=False, network_available=False)
            return

        self._update(
            primary_synonyms=tuple(records),
            lyrical_synonyms=tuple(lyrical_order(records)),
            pretentious_synonyms=tuple(pretentious_order(records)),
            is_loading=False,
        )

    # ------------------------------------------------------------------
    # Suggestions (run on the dispatcher)
    # ------------------------------------------------------------------

    def _schedule_suggestions(self, text: str) -> None:
        self._invalidate_suggestions()

        if not text:
            self._update(suggestions=())
            return

        generation = self._suggestion_generation
        self._debounce_task = self._timer_factory(
            self.config.debounce_delay,
            partial(self._on_debounce_elapsed, generation, text),
        )
        self._debounce_task.start()

    def _on_debounce_elapsed(self, generation: int, text: str) -> None:
        # Called by the debounce timer, possibly on its own thread
        self._dispatcher.dispatch(partial(self._fetch_suggestions, generation, text))

    def _fetch_suggestions(self, generation: int, text: str) -> None:
        if generation != self._suggestion_generation:
            logger.debug(f"Debounce timer for {text!r} fired after being replaced")
            return

        try:
            url = self._service.build_suggestions_url(text)
        except UrlConstructionError as e:
            logger.debug(f"Skipping suggestions for {text!r}: {e}")
            return

        self._submit(
            self._service.fetch_suggestions,
            url,
            partial(self._on_suggestions_done, generation),
        )

    def _on_suggestions_done(self, generation: int, future: Future) -> None:
        if generation != self._suggestion_generation:
            logger.debug(f"Discarding stale suggestions (generation {generation})")
            return

        try:
            entries = future.result()
        except LookupFailure as e:
            logger.warning(f"Error fetching suggestions: {e}")
            self._update(network_available=False)
            return

        self._update(suggestions=tuple(entry.text for entry in entries))

    def _select_suggestion(self, text: str) -> None:
        self._dismiss_suggestions()
        self._start_synonym_query(text)

    def _dismiss_suggestions(self) -> None:
        self._invalidate_suggestions()
        self._update(suggestions=())

    def _invalidate_suggestions(self) -> None:
        """Cancel the debounce timer and orphan any in-flight suggestion fetch."""
        if self._debounce_task is not None:
            self._debounce_task.cancel()
            self._debounce_task = None
        self._suggestion_generation += 1

    def _invalidate_all(self) -> None:
        self._invalidate_suggestions()
        self._synonym_generation += 1

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _submit(self, fetch, url: str, on_done) -> None:
        """Run fetch(url) on the executor and deliver the future via the dispatcher."""
        future = self._executor.submit(fetch, url)
        future.add_done_callback(partial(self._deliver, on_done))

    def _deliver(self, on_done, future: Future) -> None:
        # Called on the executor thread that completed the future
        if future.cancelled():
            return
        self._dispatcher.dispatch(partial(on_done, future))

    def _update(self, **changes) -> None:
        """Replace the state snapshot and notify observers."""
        self._state = replace(self._state, **changes)
        self._publish()

    def _publish(self) -> None:
        state = self._state
        for observer in list(self._observers):
            try:
                observer.on_state_changed(state)
            except Exception:
                logger.exception(f"Observer {observer!r} failed to handle state change")

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("LookupClient has been closed")
