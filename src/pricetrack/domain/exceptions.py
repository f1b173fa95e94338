"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CorruptDataError(DomainException):
    """A persisted record could not be turned back into a domain object."""

    def __init__(self, collection: str, detail: str) -> None:
        super().__init__(f"Corrupt record in '{collection}': {detail}")
        self.collection = collection
