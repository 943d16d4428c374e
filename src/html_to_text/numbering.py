#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Number-to-string converters used for ordered list markers."""

from __future__ import annotations

_ROMAN_ONES = ("I", "X", "C", "M")
_ROMAN_FIVES = ("V", "L", "D")


def number_to_letter_sequence(num: int, base_char: str = "a", base: int = 26) -> str:
    """Convert a number into an alphabetic sequence without zeroes.

    The sequence runs ``a, ..., z, aa, ..., zz, aaa, ...``.

    Parameters
    ----------
    num : int
        Number to convert. Must be >= 1.
    base_char : str, default "a"
        Character representing 1 in the sequence
    base : int, default 26
        Number of characters in the sequence

    Returns
    -------
    str
        Letter representation of ``num``

    Examples
    --------
        >>> number_to_letter_sequence(28)
        'ab'
        >>> number_to_letter_sequence(3, "A")
        'C'

    """
    if num < 1:
        raise ValueError(f"num must be >= 1, got {num}")

    digits = []
    while True:
        num -= 1
        digits.append(num % base)
        num //= base
        if num <= 0:
            break

    base_code = ord(base_char)
    return "".join(chr(base_code + digit) for digit in reversed(digits))


def number_to_roman(num: int) -> str:
    """Convert a number to its Roman representation.

    Parameters
    ----------
    num : int
        Number to convert, ``0 < num <= 3999``

    Returns
    -------
    str
        Upper-case Roman numeral

    """
    if not 0 < num <= 3999:
        raise ValueError(f"num must be between 1 and 3999, got {num}")

    parts = []
    for position, char in enumerate(reversed(str(num))):
        digit = int(char)
        if digit % 5 < 4:
            five = _ROMAN_FIVES[position] if digit >= 5 else ""
            parts.append(five + _ROMAN_ONES[position] * (digit % 5))
        else:
            # 4 -> IV, 9 -> IX
            following = _ROMAN_FIVES[position] if digit < 5 else _ROMAN_ONES[position + 1]
            parts.append(_ROMAN_ONES[position] + following)
    return "".join(reversed(parts))
