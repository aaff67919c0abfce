"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException, ValueError):
    """Numeric input is negative, non-finite or otherwise outside the usable range"""

    pass


class UnknownCategoryError(DomainException, ValueError):
    """Risk level, risk tolerance or investment status is not a known category"""

    pass
