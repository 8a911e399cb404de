"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException):
    """Customer, transaction or reward query failed validation"""

    pass


class NotFoundError(DomainException):
    """Customer or transactions for the requested window do not exist"""

    pass
