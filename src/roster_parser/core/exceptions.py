class RosterError(Exception):
    """Base exception for roster_parser failures."""


class StoreError(RosterError):
    """Raised when the document store cannot satisfy a request."""


class ValidationError(RosterError):
    """Raised when validation fails."""


class ImportExecutionError(RosterError):
    """Raised when an import pipeline run fails."""
