"""Null presenter for testing (no output)."""

from nerdbook.models import LookupState, SynonymView


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_lookup_result(self, query: str, state: LookupState, view: SynonymView) -> None:
        """Display a lookup result (no-op)."""
        pass

    def show_suggestions(self, text: str, suggestions: list[str]) -> None:
        """Display suggestions (no-op)."""
        pass
