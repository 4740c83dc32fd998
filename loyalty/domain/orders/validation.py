# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Order number predicates. Both are pure and total."""

from __future__ import annotations


def is_all_digits(number: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits such as "²" or "٣"
    if not number:
        return False
    return all("0" <= ch <= "9" for ch in number)


def passes_luhn(number: str) -> bool:
    """Luhn checksum over an ASCII digit string, read right to left."""
    if not number or not is_all_digits(number):
        return False

    total = 0
    for index, ch in enumerate(reversed(number)):
        digit = ord(ch) - ord("0")
        if index % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit

    return total % 10 == 0


__all__ = ["is_all_digits", "passes_luhn"]
