"""Domain-specific exceptions

The projection engine itself never raises for malformed financial data; it
degrades instead. These are raised at the service boundary only.
"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidSnapshotError(DomainException):
    """Stored payload cannot be read as a projection snapshot"""

    pass
