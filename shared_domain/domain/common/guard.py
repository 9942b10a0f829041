"""
Guard clauses for validating arguments and domain invariants.

Every check is either a no-op or raises. Argument failures raise
InvalidArgumentError (MissingArgumentError for None). The
``against`` check also accepts a factory so callers can raise their
own domain errors carrying an error code.

Python cannot capture the call-site expression, so the offending
parameter name is passed explicitly.

Example:
    from shared_domain.domain.common import guard

    def rename(self, name: str) -> None:
        guard.not_none_or_whitespace(name, "name")
        guard.against(
            self.is_archived,
            lambda: DomainError("Archived projects cannot be renamed", "PROJECT_ARCHIVED"),
        )
        self.name = name.strip()
"""

from __future__ import annotations

from collections.abc import Callable, Collection
from typing import TYPE_CHECKING, TypeVar

from .exceptions import InvalidArgumentError, MissingArgumentError

if TYPE_CHECKING:
    from _typeshed import SupportsRichComparison

T = TypeVar("T")
ComparableT = TypeVar("ComparableT", bound="SupportsRichComparison")


def against(
    condition: bool,
    error: str | Callable[[], Exception],
    param_name: str | None = None,
) -> None:
    """
    Fail when ``condition`` is true.

    Args:
        condition: The failure condition
        error: Either a message for InvalidArgumentError, or a zero-argument
            factory whose exception is raised as-is
        param_name: Name of the offending parameter (message form only)

    Raises:
        InvalidArgumentError: If condition is true and error is a message
        Exception: Whatever the factory returns, if error is a factory
    """
    if not condition:
        return
    if callable(error):
        raise error()
    raise InvalidArgumentError(error, param_name)


def is_true(value: bool, message: str, param_name: str | None = None) -> None:
    """Fail when ``value`` is false."""
    if not value:
        raise InvalidArgumentError(message, param_name)


def is_false(value: bool, message: str, param_name: str | None = None) -> None:
    """Fail when ``value`` is true."""
    if value:
        raise InvalidArgumentError(message, param_name)


def not_none(value: object | None, param_name: str | None = None) -> None:
    """
    Fail when ``value`` is None.

    Raises:
        MissingArgumentError: If value is None
    """
    if value is None:
        raise MissingArgumentError(param_name)


def not_none_or_empty(value: str | None, param_name: str | None = None) -> None:
    """Fail when ``value`` is None or the empty string."""
    if not value:
        raise InvalidArgumentError("Value cannot be None or empty.", param_name)


def not_none_or_whitespace(value: str | None, param_name: str | None = None) -> None:
    """Fail when ``value`` is None, empty or only whitespace."""
    if value is None or not value.strip():
        raise InvalidArgumentError("Value cannot be None or whitespace.", param_name)


def must_satisfy(
    value: T,
    predicate: Callable[[T], bool],
    message: str,
    param_name: str | None = None,
) -> None:
    """Fail when ``predicate(value)`` is false."""
    if not predicate(value):
        raise InvalidArgumentError(message, param_name)


def must_not_satisfy(
    value: T,
    predicate: Callable[[T], bool],
    message: str,
    param_name: str | None = None,
) -> None:
    """Fail when ``predicate(value)`` is true."""
    if predicate(value):
        raise InvalidArgumentError(message, param_name)


def between(
    value: ComparableT,
    lower_bound: ComparableT,
    upper_bound: ComparableT,
    message: str,
    param_name: str | None = None,
) -> None:
    """
    Fail when ``value`` is outside the inclusive range.

    Both bounds are allowed: ``between(100, 0, 100, ...)`` passes.
    """
    if value < lower_bound or value > upper_bound:
        raise InvalidArgumentError(message, param_name)


def greater_than(
    value: ComparableT, bound: ComparableT, message: str, param_name: str | None = None
) -> None:
    """Fail unless ``value > bound``."""
    if value <= bound:
        raise InvalidArgumentError(message, param_name)


def greater_than_or_equal_to(
    value: ComparableT, bound: ComparableT, message: str, param_name: str | None = None
) -> None:
    """Fail unless ``value >= bound``."""
    if value < bound:
        raise InvalidArgumentError(message, param_name)


def less_than(
    value: ComparableT, bound: ComparableT, message: str, param_name: str | None = None
) -> None:
    """Fail unless ``value < bound``."""
    if value >= bound:
        raise InvalidArgumentError(message, param_name)


def less_than_or_equal_to(
    value: ComparableT, bound: ComparableT, message: str, param_name: str | None = None
) -> None:
    """Fail unless ``value <= bound``."""
    if value > bound:
        raise InvalidArgumentError(message, param_name)


def not_empty(collection: Collection[object] | None, param_name: str | None = None) -> None:
    """Fail when ``collection`` is None or has no items."""
    if collection is None or len(collection) == 0:
        raise InvalidArgumentError("Collection cannot be None or empty.", param_name)
