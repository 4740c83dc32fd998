import pytest

from loyalty.domain.orders.validation import is_all_digits, passes_luhn


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("", False),
        ("12a3", False),
        ("79927398713", True),
        ("0", True),
        (" 123", False),
        ("12 3", False),
        ("-123", False),
        ("١٢٣", False),
        ("²", False),
    ],
)
def test_is_all_digits(value: str, expected: bool) -> None:
    assert is_all_digits(value) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("79927398713", True),
        ("12345678903", True),
        ("4561261212345467", True),
        ("18", True),
        ("12345678901", False),
        ("79927398710", False),
        ("4561261212345464", False),
        ("", False),
        ("abc", False),
    ],
)
def test_passes_luhn(value: str, expected: bool) -> None:
    assert passes_luhn(value) is expected


def test_doubled_digits_above_nine_are_reduced() -> None:
    # 5 doubles to 10 -> 1, plus the check digit 9 gives 10
    assert passes_luhn("59") is True
    assert passes_luhn("58") is False
