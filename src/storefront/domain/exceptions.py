"""Domain-level exceptions.

All rejected commands are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Neither is fatal: a rejected command leaves the prior state in place.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidInput(DomainException):
    """A product name or price failed validation."""


class UnknownProduct(DomainException):
    """A product identifier is not in the catalog."""
