"""Base exception classes for NerdBook."""


class NerdBookException(Exception):
    """Base exception for all NerdBook errors.

    All custom exceptions in the nerdbook package should inherit
    from this base class for consistent error handling.
    """

    pass
