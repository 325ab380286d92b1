from decimal import Decimal

import pytest

from json_to_code.classifier import ValueKind, classify


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, ValueKind.BOOL),
        (False, ValueKind.BOOL),
        (1, ValueKind.NUMBER),
        (1.5, ValueKind.NUMBER),
        ("text", ValueKind.STRING),
        ("", ValueKind.STRING),
        ({}, ValueKind.OBJECT),
        ([], ValueKind.ARRAY),
        (None, ValueKind.ANY),
        (object(), ValueKind.ANY),
    ],
)
def test_standard_policy(value, expected):
    assert classify(value) == expected


@pytest.mark.parametrize("value", [1, 1.5, 12345678901234567890, Decimal("0.1")])
def test_decimal_policy_numbers(value):
    assert classify(value, use_decimal=True) == ValueKind.DECIMAL


def test_decimal_policy_keeps_bool():
    assert classify(True, use_decimal=True) == ValueKind.BOOL


def test_decimal_value_without_policy():
    # A decoder that already produced Decimal values wins over the policy flag
    assert classify(Decimal("1.10")) == ValueKind.DECIMAL


def test_needs_recursion():
    assert ValueKind.OBJECT.needs_recursion
    assert ValueKind.ARRAY.needs_recursion
    assert not ValueKind.STRING.needs_recursion
    assert not ValueKind.ANY.needs_recursion
