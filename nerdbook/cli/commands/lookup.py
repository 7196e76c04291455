"""CLI command for looking up synonyms and a definition of a word."""

from nerdbook.cli.waiter import StateWaiter
from nerdbook.client import LookupClient
from nerdbook.config import create_default_config
from nerdbook.models import LookupState, SynonymView
from nerdbook.presenters import ConsolePresenter


def _lookup_finished(state: LookupState) -> bool:
    """Both requests have completed, or the service is unreachable."""
    if not state.network_available:
        return True
    return not state.is_loading and state.current_definition is not None


def lookup_command(args) -> int:
    """Execute the lookup subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter(limit=args.max or 20)

    word = args.word.strip()
    if not word:
        presenter.show_error("Nothing to look up")
        return 1

    config = create_default_config(max_results=args.max)
    timeout = args.timeout if args.timeout is not None else config.request_timeout + 1.0
    waiter = StateWaiter(_lookup_finished)

    with LookupClient(config) as client:
        client.subscribe(waiter)
        client.request_synonyms(word)
        state = waiter.wait(timeout)

    if state is None:
        presenter.show_error(f"Timed out after {timeout:.0f}s waiting for Datamuse")
        return 1

    if not state.network_available:
        presenter.show_error("Could not reach Datamuse. Check your connection and try again.")
        return 1

    presenter.show_lookup_result(word, state, SynonymView(args.view))
    return 0
