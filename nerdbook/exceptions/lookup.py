"""Lookup and Datamuse API related exceptions."""

from .base import NerdBookException


class LookupFailure(NerdBookException):
    """Raised when a word lookup cannot be completed."""

    pass


class UrlConstructionError(LookupFailure):
    """Raised when a query cannot be encoded into a request URL."""

    pass


class TransportError(LookupFailure):
    """Raised when the service is unreachable, times out or returns an error status."""

    pass


class DecodeError(LookupFailure):
    """Raised when a response body does not match the expected shape."""

    pass
