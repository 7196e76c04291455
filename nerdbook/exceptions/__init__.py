"""Custom exceptions for NerdBook."""

from .base import NerdBookException
from .lookup import DecodeError, LookupFailure, TransportError, UrlConstructionError

__all__ = [
    "NerdBookException",
    "LookupFailure",
    "UrlConstructionError",
    "TransportError",
    "DecodeError",
]
