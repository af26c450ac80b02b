"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidDomainInputError(DomainException):
    """Calculator input is outside its numeric domain (negative, NaN, infinite)"""

    pass


class GenerationAPIError(DomainException):
    """Text generation API returned an error or is unavailable"""

    pass


class LeadNotFoundError(DomainException):
    """Requested lead does not exist"""

    pass


class ArticleNotFoundError(DomainException):
    """Requested article does not exist"""

    pass
