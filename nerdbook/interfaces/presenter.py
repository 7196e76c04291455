"""Presenter protocol for output abstraction."""

from typing import Protocol

from nerdbook.models import LookupState, SynonymView


class PresenterProtocol(Protocol):
    """Interface for presenting lookup output to the user (CLI, GUI, etc).

    This protocol abstracts all output operations, allowing the same
    lookup flow to work with different presentation layers.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_lookup_result(self, query: str, state: LookupState, view: SynonymView) -> None:
        """Display the definition and synonyms of a completed lookup.

        Args:
            query: The word that was looked up
            state: Snapshot holding the results
            view: Which synonym ordering to show
        """
        ...

    def show_suggestions(self, text: str, suggestions: list[str]) -> None:
        """Display autocomplete suggestions.

        Args:
            text: The partial input the suggestions are for
            suggestions: Suggested words in service order
        """
        ...
