"""Session state and vocabulary exceptions."""

from .base import DrilloException


class InvalidStateError(DrilloException):
    """Raised when an operation is attempted on inconsistent session state.

    Examples are selecting from an empty vocabulary or scoring an entry
    with negative attempt counters.
    """

    pass


class DuplicateEntryError(DrilloException):
    """Raised when a source text already exists (case-insensitively)."""

    def __init__(self, source_text: str):
        super().__init__(f"Duplicate entry: '{source_text}' is already in the vocabulary")
        self.source_text = source_text


class ValidationError(DrilloException):
    """Raised when user-supplied values fail validation."""

    pass
