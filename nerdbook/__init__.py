"""
NerdBook - Synonym, Suggestion and Definition Lookup

A thin client for the Datamuse word-association service that ranks synonyms
as plain, lyrical or pretentious and powers debounced autocomplete.
"""

__version__ = "1.0.0"
__author__ = "NerdBook Contributors"
