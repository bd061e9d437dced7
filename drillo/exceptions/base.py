"""Base exception classes for Drillo."""


class DrilloException(Exception):
    """Base exception for all Drillo errors.

    All custom exceptions in the drillo package should inherit
    from this base class for consistent error handling.
    """

    pass
