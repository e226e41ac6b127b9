"""
Domain layer exceptions.

Raised when a progress record would break one of its rules. They reach the
caller unchanged; the use cases do not translate them.
"""


class DomainError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str, **context: object) -> None:
        self.message = message
        self.context = context
        super().__init__(message)


class ValidationError(DomainError):
    """An argument is not acceptable for the operation, e.g. an unknown card index."""

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        super().__init__(message, field=field, value=value)
        self.field = field
        self.value = value


class InvariantViolationError(DomainError):
    """A record would be left in a state its rules forbid, e.g. a card level of 7."""

    def __init__(self, aggregate: str, invariant: str) -> None:
        super().__init__(f"{aggregate} invariant violated: {invariant}", aggregate=aggregate)
        self.aggregate = aggregate
        self.invariant = invariant
