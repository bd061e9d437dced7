"""Custom exceptions for Drillo."""

from .base import DrilloException
from .state import DuplicateEntryError, InvalidStateError, ValidationError
from .storage import DataIntegrityError, PersistenceError

__all__ = [
    "DrilloException",
    "InvalidStateError",
    "DuplicateEntryError",
    "ValidationError",
    "PersistenceError",
    "DataIntegrityError",
]
