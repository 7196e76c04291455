"""Observable lookup state published by the lookup client."""

from dataclasses import dataclass, field
from enum import Enum

from .word import WordRecord


class SynonymView(Enum):
    """The three orderings a presentation layer can switch between."""

    NORMAL = "normal"
    LYRICAL = "lyrical"
    PRETENTIOUS = "pretentious"


@dataclass(frozen=True)
class LookupState:
    """Immutable snapshot of everything a presentation layer renders.

    A new snapshot is published after every change, so observers never see
    the synonym orderings from two different queries at once.
    """

    primary_synonyms: tuple[WordRecord, ...] = field(default_factory=tuple)
    lyrical_synonyms: tuple[WordRecord, ...] = field(default_factory=tuple)
    pretentious_synonyms: tuple[WordRecord, ...] = field(default_factory=tuple)
    suggestions: tuple[str, ...] = field(default_factory=tuple)
    current_definition: str | None = None
    is_loading: bool = False
    network_available: bool = True

    def synonyms_for(self, view: SynonymView) -> tuple[WordRecord, ...]:
        """Get the synonym ordering for a view.

        Args:
            view: Which ordering to return

        Returns:
            Tuple of word records in that view's order
        """
        if view is SynonymView.LYRICAL:
            return self.lyrical_synonyms
        if view is SynonymView.PRETENTIOUS:
            return self.pretentious_synonyms
        return self.primary_synonyms

    @property
    def has_results(self) -> bool:
        """Check if the last synonym query produced any words."""
        return len(self.primary_synonyms) > 0
