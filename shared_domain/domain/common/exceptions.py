"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or arguments fail their preconditions.
They are never recovered inside the domain layer; the application
layer catches and translates them.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions inherit from this class so they can be
    caught and handled uniformly. The optional error code is meant
    for structured, client-facing error mapping.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, object] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class BusinessRuleViolationError(DomainError):
    """
    Raised when a business rule is violated.

    Example: Trying to ship an order that has not been paid.
    """

    def __init__(
        self, rule: str, message: str | None = None, error_code: str | None = None
    ) -> None:
        msg = message or f"Business rule violated: {rule}"
        super().__init__(msg, error_code, {"rule": rule})
        self.rule = rule


class InvalidArgumentError(DomainError, ValueError):
    """
    Raised by guard clauses when an argument fails a precondition.

    Example: A quantity outside its allowed range, a blank name.
    """

    def __init__(self, message: str, param_name: str | None = None) -> None:
        super().__init__(message)
        self.param_name = param_name

    def __str__(self) -> str:
        if self.param_name:
            return f"{self.message} (parameter '{self.param_name}')"
        return self.message


class MissingArgumentError(InvalidArgumentError):
    """Raised by guard clauses when a required argument is None."""

    def __init__(self, param_name: str | None = None, message: str | None = None) -> None:
        super().__init__(message or "Value cannot be None.", param_name)
