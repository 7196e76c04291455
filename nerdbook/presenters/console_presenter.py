"""Console presenter for CLI output."""

from nerdbook.models import LookupState, SynonymView


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def __init__(self, limit: int = 20):
        """Initialize the presenter.

        Args:
            limit: Maximum number of synonyms or suggestions to print
        """
        self.limit = limit

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_lookup_result(self, query: str, state: LookupState, view: SynonymView) -> None:
        """Display the definition and synonyms of a completed lookup."""
        print(f"\n{query}")
        print("=" * 60)

        if state.current_definition is not None:
            print(f"Def. {state.current_definition}")

        synonyms = state.synonyms_for(view)
        print(f"\nSynonyms ({view.value}, {len(synonyms)} words):")

        if not synonyms:
            print("  (none)")
            return

        for i, record in enumerate(synonyms[: self.limit], 1):
            syllables = record.syllable_count if record.syllable_count is not None else "?"
            frequency = f"{record.frequency:.2f}" if record.frequency is not None else "?"
            print(f"{i:3d}. {record.text:20s} syllables={syllables} freq={frequency}")

        if len(synonyms) > self.limit:
            print(f"... and {len(synonyms) - self.limit} more words")

    def show_suggestions(self, text: str, suggestions: list[str]) -> None:
        """Display autocomplete suggestions."""
        print(f"\nSuggestions for '{text}':")

        if not suggestions:
            print("  (none)")
            return

        for suggestion in suggestions[: self.limit]:
            print(f"  {suggestion}")
