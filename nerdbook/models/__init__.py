"""Data models for NerdBook."""

from .state import LookupState, SynonymView
from .word import SuggestionEntry, WordRecord

__all__ = [
    "WordRecord",
    "SuggestionEntry",
    "LookupState",
    "SynonymView",
]
