"""Tests for the ValueObject base class."""

from collections.abc import Iterable
from dataclasses import FrozenInstanceError, dataclass
from decimal import Decimal

import pytest

from shared_domain.domain.common import InvalidArgumentError, ValueObject, guard


@dataclass(frozen=True, eq=False)
class Money(ValueObject):
    amount: Decimal
    currency: str

    def __post_init__(self) -> None:
        guard.not_none_or_whitespace(self.currency, "currency")


@dataclass(frozen=True, eq=False)
class Price(ValueObject):
    amount: Decimal
    currency: str


@dataclass(frozen=True, eq=False)
class Note(ValueObject):
    text: str | None


class EmptyValueObject(ValueObject):
    def _equality_components(self) -> Iterable[object]:
        return ()


class Path(ValueObject):
    """Value object with a variable number of components."""

    def __init__(self, *parts: str | None) -> None:
        self.parts = parts

    def _equality_components(self) -> Iterable[object]:
        yield from self.parts


class MissingComponents(ValueObject):
    pass


class TestValueObjectEquality:
    """Test suite for structural equality."""

    def test_equal_values_are_equal(self) -> None:
        a = Money(Decimal("10.00"), "EUR")
        b = Money(Decimal("10.00"), "EUR")

        assert a == b
        assert not (a != b)

    def test_different_values_are_not_equal(self) -> None:
        a = Money(Decimal("10.00"), "EUR")
        b = Money(Decimal("20.00"), "EUR")

        assert a != b

    def test_same_components_different_kind_are_not_equal(self) -> None:
        money = Money(Decimal("10.00"), "EUR")
        price = Price(Decimal("10.00"), "EUR")

        assert money != price
        assert price != money

    def test_comparison_with_none_is_false(self) -> None:
        a = Money(Decimal("10.00"), "EUR")

        assert a != None  # noqa: E711
        assert not a.__eq__(None)

    def test_comparison_with_other_type_is_false(self) -> None:
        assert Money(Decimal("10.00"), "EUR") != (Decimal("10.00"), "EUR")

    def test_same_instance_is_equal(self) -> None:
        a = Money(Decimal("1"), "USD")
        assert a == a

    def test_empty_components_are_all_equal(self) -> None:
        a = EmptyValueObject()
        b = EmptyValueObject()

        assert a == b
        assert hash(a) == hash(b)

    def test_none_components_are_equal(self) -> None:
        a = Note(None)
        b = Note(None)

        assert a == b
        assert hash(a) == hash(b)

    def test_none_component_differs_from_value(self) -> None:
        assert Note(None) != Note("text")

    def test_different_length_components_are_not_equal(self) -> None:
        assert Path("a", "b") != Path("a")
        assert Path("a") != Path("a", "b")

    def test_trailing_none_component_is_not_ignored(self) -> None:
        assert Path("a") != Path("a", None)

    def test_component_order_matters(self) -> None:
        assert Path("a", "b") != Path("b", "a")

    def test_missing_components_raise(self) -> None:
        with pytest.raises(NotImplementedError, match="MissingComponents"):
            _ = MissingComponents() == MissingComponents()


class TestValueObjectHash:
    """Test suite for hash construction."""

    def test_equal_values_have_same_hash(self) -> None:
        a = Money(Decimal("10.00"), "EUR")
        b = Money(Decimal("10.00"), "EUR")

        assert hash(a) == hash(b)

    def test_hash_is_order_sensitive(self) -> None:
        a = Money(Decimal("10.00"), "USD")
        b = Money(Decimal("10.00"), "EUR")

        assert hash(a) != hash(b)

    def test_transposed_components_hash_differently(self) -> None:
        assert hash(Path("left", "right")) != hash(Path("right", "left"))

    def test_usable_in_sets(self) -> None:
        values = {
            Money(Decimal("10.00"), "EUR"),
            Money(Decimal("10.00"), "EUR"),
            Money(Decimal("5.00"), "EUR"),
        }

        assert len(values) == 2


class TestValueObjectImmutability:
    """Dataclass value objects are frozen and self-validating."""

    def test_is_frozen(self) -> None:
        money = Money(Decimal("1"), "USD")
        with pytest.raises(FrozenInstanceError):
            money.amount = Decimal("2")  # type: ignore[misc]

    def test_invariants_checked_on_construction(self) -> None:
        with pytest.raises(InvalidArgumentError, match="currency"):
            Money(Decimal("1"), "  ")
