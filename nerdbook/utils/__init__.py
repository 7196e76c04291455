"""Utility functions for NerdBook."""

from .sort_utils import (
    LYRICAL_DEFAULTS,
    PRETENTIOUS_DEFAULTS,
    RankDefaults,
    lyrical_order,
    pretentious_order,
    rank_key,
    sort_by_rank,
)

__all__ = [
    "RankDefaults",
    "LYRICAL_DEFAULTS",
    "PRETENTIOUS_DEFAULTS",
    "rank_key",
    "sort_by_rank",
    "lyrical_order",
    "pretentious_order",
]
