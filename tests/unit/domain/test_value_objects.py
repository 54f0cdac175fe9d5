"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from core.domain.value_objects import Caller, Money, OrderNumber


@pytest.mark.parametrize(
    "amount, minor",
    [
        ("149.50", 14950),
        ("500.00", 50000),
        ("0.01", 1),
        ("19.99", 1999),
        ("1234567.89", 123456789),
        ("100", 10000),
    ],
)
def test_money_to_minor_units(amount, minor):
    assert Money(amount=Decimal(amount)).to_minor_units() == minor


def test_money_minor_units_round_half_up():
    assert Money(amount=Decimal("10.005")).to_minor_units() == 1001
    assert Money(amount=Decimal("10.004")).to_minor_units() == 1000


def test_money_rejects_bad_currency():
    with pytest.raises(ValueError):
        Money(amount=Decimal("1"), currency="RUPEE")


def test_order_number_generate_format():
    number = OrderNumber.generate()

    prefix, timestamp, suffix = number.value.split("-")
    assert prefix == "ORG"
    assert timestamp.isalnum() and timestamp.isupper()
    assert len(suffix) == 5


@pytest.mark.parametrize("value", ["", "ORD-ABC-12345", "ORG-abc-12345", "ORG-ABC"])
def test_order_number_rejects_invalid(value):
    with pytest.raises(ValueError):
        OrderNumber(value=value)


def test_caller_is_admin():
    assert Caller(user_id="a", role="ADMIN").is_admin
    assert not Caller(user_id="c").is_admin
