"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was rejected before any storage access was attempted."""


class EntityNotFoundError(DomainException):
    """A requested item or batch does not exist."""


class RepositoryError(DomainException):
    """The underlying store could not be read or written."""
