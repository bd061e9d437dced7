"""Durable storage exceptions."""

from .base import DrilloException


class PersistenceError(DrilloException):
    """Raised when the durable store cannot be read or written."""

    pass


class DataIntegrityError(DrilloException):
    """Raised when stored rows cannot be decoded into valid models."""

    pass
