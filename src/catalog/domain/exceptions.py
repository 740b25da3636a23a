"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer (or any other caller) can catch them uniformly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidPageError(ValidationError):
    """A page number below 1 was requested."""

    def __init__(self, page_num: int) -> None:
        super().__init__(f"Page number must be 1 or greater, got {page_num}")
        self.page_num = page_num


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):
    """No product matches the lookup key (id, alias, or a required category)."""

    def __init__(self, message: str, key: object = None) -> None:
        super().__init__(message)
        self.key = key
