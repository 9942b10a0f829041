"""
Base class for Value Objects.

Value Objects are immutable objects that are defined by their attributes
rather than by identity. Two value objects are equal if they are of the
same class and their equality components are equal, in order.

Example:
    @dataclass(frozen=True, eq=False)
    class Money(ValueObject):
        amount: Decimal
        currency: str

        def __post_init__(self) -> None:
            guard.not_none_or_whitespace(self.currency, "currency")

Dataclass subclasses compare their fields in declaration order. Other
subclasses override ``_equality_components``.
"""

from collections.abc import Iterable
from dataclasses import fields, is_dataclass
from itertools import zip_longest

_HASH_SEED = 17
_HASH_FACTOR = 31
_HASH_MASK = (1 << 64) - 1

# Pads the shorter sequence so a length mismatch never compares equal
_MISSING = object()


class ValueObject:
    """
    Base class for Value Objects in the domain model.

    Value Objects are:
    - Immutable (use frozen=True in dataclass)
    - Compared by value (equality components must match in order)
    - Self-validating (validation in __post_init__)

    Subclasses should be decorated with @dataclass(frozen=True, eq=False)
    so the generated __eq__ does not replace the one defined here.
    """

    def _equality_components(self) -> Iterable[object]:
        """
        Return the ordered values that define equality.

        Defaults to the compared fields of a dataclass subclass.
        """
        if is_dataclass(self):
            return (getattr(self, f.name) for f in fields(self) if f.compare)
        raise NotImplementedError(
            f"{self.__class__.__name__} must define _equality_components()"
        )

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, ValueObject) or type(other) is not type(self):
            return False
        return all(
            left is not _MISSING and right is not _MISSING and left == right
            for left, right in zip_longest(
                self._equality_components(), other._equality_components(), fillvalue=_MISSING
            )
        )

    def __hash__(self) -> int:
        result = _HASH_SEED
        for component in self._equality_components():
            component_hash = 0 if component is None else hash(component)
            result = (result * _HASH_FACTOR + component_hash) & _HASH_MASK
        return result

    def __repr__(self) -> str:
        attrs = ", ".join(repr(c) for c in self._equality_components())
        return f"{self.__class__.__name__}({attrs})"
