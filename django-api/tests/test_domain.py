"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from decimal import Decimal
from uuid import UUID

import pytest

from events.domain import Actor, Capacity, EventId, Money, Quantity, Role, UserId
from events.domain.roles import can_manage_events, has_role


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        """Money can be created with positive amount."""
        assert Money(Decimal("25.00")).amount == Decimal("25.00")

    def test_money_accepts_zero(self):
        """Money can be created with zero."""
        assert Money(Decimal("0")).is_free

    def test_money_rejects_negative_amount(self):
        """Money raises ValueError for negative amount."""
        with pytest.raises(ValueError):
            Money(Decimal("-0.01"))

    def test_money_rejects_non_finite_amount(self):
        with pytest.raises(ValueError):
            Money(Decimal("NaN"))

    def test_money_str_format(self):
        """Money string representation is formatted to 2 decimal places."""
        assert str(Money(Decimal("7.5"))) == "7.50"
        assert str(Money(Decimal("0"))) == "0.00"

    def test_money_converts_floats_without_binary_noise(self):
        assert Money(0.1).amount == Decimal("0.1")

    def test_times_is_exact(self):
        assert Money(Decimal("19.99")).times(3).amount == Decimal("59.97")

    def test_times_rejects_negative_count(self):
        with pytest.raises(ValueError):
            Money(Decimal("1.00")).times(-1)

    def test_repeated_addition_does_not_drift(self):
        total = Money.zero()
        for _ in range(1000):
            total = total + Money(Decimal("0.10"))
        assert total.amount == Decimal("100.00")

    def test_label_for_free_and_paid(self):
        assert Money(Decimal("0")).label() == "Free"
        assert Money(Decimal("12")).label() == "12.00"


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_positive_value(self):
        """Capacity can be created with positive value."""
        assert Capacity(100).value == 100

    def test_capacity_accepts_zero(self):
        """Capacity can be created with zero."""
        assert Capacity(0).value == 0

    def test_capacity_rejects_negative_value(self):
        """Capacity raises ValueError for negative value."""
        with pytest.raises(ValueError):
            Capacity(-1)


class TestQuantity:
    def test_accepts_one(self):
        assert Quantity(1).value == 1

    @pytest.mark.parametrize("value", [0, -3])
    def test_rejects_less_than_one(self, value):
        with pytest.raises(ValueError):
            Quantity(value)

    @pytest.mark.parametrize("value", [1.5, "2", True])
    def test_rejects_non_integers(self, value):
        with pytest.raises(ValueError):
            Quantity(value)


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_uuid(self):
        """EventId.from_string parses valid UUID."""
        raw = "6f1c2a9e-3b7d-4c5e-9a8b-1d2e3f4a5b6c"
        event_id = EventId.from_string(raw)
        assert event_id.value == UUID(raw)
        assert str(event_id) == raw

    def test_from_string_invalid_uuid(self):
        """EventId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            EventId.from_string("not-a-uuid")


class TestUserId:
    def test_wraps_integer_key(self):
        assert UserId(7).value == 7

    def test_rejects_non_integer(self):
        with pytest.raises(ValueError):
            UserId("7")


class TestActor:
    def test_anonymous_actor_is_not_authenticated(self):
        actor = Actor.anonymous()
        assert not actor.is_authenticated
        assert actor.roles == frozenset()

    def test_actor_with_user_is_authenticated(self):
        assert Actor(user_id=UserId(1)).is_authenticated


class TestRoles:
    def test_has_role(self):
        assert has_role({Role.ORGANIZER}, Role.ORGANIZER)
        assert not has_role(set(), Role.ORGANIZER)

    @pytest.mark.parametrize(
        "roles,expected",
        [
            (set(), False),
            ({Role.ORGANIZER}, True),
            ({Role.ADMIN}, True),
            ({Role.ORGANIZER, Role.ADMIN}, True),
        ],
    )
    def test_can_manage_events(self, roles, expected):
        assert can_manage_events(roles) is expected
