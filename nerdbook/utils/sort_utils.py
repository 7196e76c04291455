"""Sorting utilities for ranking synonyms by syllables and frequency."""

import sys
from collections.abc import Iterable
from dataclasses import dataclass

from nerdbook.models import WordRecord


@dataclass(frozen=True)
class RankDefaults:
    """Values substituted for metadata the service did not return."""

    syllable_count: int = 0
    frequency: float = 0.0


# Unknown frequency ranks lowest when sorting ascending
LYRICAL_DEFAULTS = RankDefaults(syllable_count=0, frequency=0.0)

# Unknown frequency ranks as the most common word, so it sorts last when descending
PRETENTIOUS_DEFAULTS = RankDefaults(syllable_count=0, frequency=sys.float_info.max)


def rank_key(record: WordRecord, defaults: RankDefaults) -> tuple[int, float]:
    """Generate a (syllables, frequency) sort key for a word.

    Args:
        record: Word to rank
        defaults: Substitutes for missing syllable count or frequency

    Returns:
        Tuple compared lexicographically

    Example:
        rank_key(WordRecord("glad", 1, 10.0), LYRICAL_DEFAULTS)
        # Returns: (1, 10.0)
    """
    syllables = record.syllable_count if record.syllable_count is not None else defaults.syllable_count
    frequency = record.frequency if record.frequency is not None else defaults.frequency
    return (syllables, frequency)


def sort_by_rank(
    records: Iterable[WordRecord],
    defaults: RankDefaults,
    descending: bool = False,
) -> list[WordRecord]:
    """Sort words by rank_key under a default-substitution policy.

    The sort is stable: words with equal keys keep service order.
    """
    return sorted(records, key=lambda r: rank_key(r, defaults), reverse=descending)


def lyrical_order(records: Iterable[WordRecord]) -> list[WordRecord]:
    """Short, rare-first ordering: ascending by syllables then frequency."""
    return sort_by_rank(records, LYRICAL_DEFAULTS)


def pretentious_order(records: Iterable[WordRecord]) -> list[WordRecord]:
    """Long words first: descending by syllables then frequency."""
    return sort_by_rank(records, PRETENTIOUS_DEFAULTS, descending=True)
