"""CLI command for autocomplete suggestions."""

from nerdbook.cli.waiter import StateWaiter
from nerdbook.client import LookupClient
from nerdbook.config import create_default_config
from nerdbook.presenters import ConsolePresenter


def suggest_command(args) -> int:
    """Execute the suggest subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = create_default_config(max_results=args.max)
    presenter = ConsolePresenter(limit=args.max or 20)
    timeout = config.debounce_delay + config.request_timeout + 1.0

    # Any publish after scheduling is the suggestion result (or an empty-input clear)
    waiter = StateWaiter(lambda state: True)

    with LookupClient(config) as client:
        client.subscribe(waiter)
        client.request_suggestions(args.text)
        state = waiter.wait(timeout)

    if state is None:
        presenter.show_error(f"No suggestions received within {timeout:.0f}s")
        return 1

    if not state.network_available:
        presenter.show_error("Could not reach Datamuse. Check your connection and try again.")
        return 1

    presenter.show_suggestions(args.text, list(state.suggestions))
    return 0
