"""Arithmetic puzzles on integers, digit strings and calendar dates."""

from __future__ import annotations

import re
from collections.abc import Sequence
from itertools import accumulate

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_DAYS_BEFORE_MONTH = (0, *accumulate(_DAYS_IN_MONTH))
_DATE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def _is_leap(year: int) -> bool:
    return year % 400 == 0 or (year % 100 != 0 and year % 4 == 0)


def day_of_year(date: str) -> int:
    """Return the ordinal day of a ``YYYY-MM-DD`` date within its year."""
    match = _DATE.fullmatch(date)
    if match is None:
        raise ValueError(f"expected a YYYY-MM-DD date, got {date!r}")
    year, month, day = map(int, match.groups())
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range in {date!r}")
    leap_day = 1 if month > 2 and _is_leap(year) else 0
    return _DAYS_BEFORE_MONTH[month - 1] + leap_day + day


def pascal_row(row_index: int) -> list[int]:
    """Return row ``row_index`` (counted from 0) of Pascal's triangle."""
    if row_index < 0:
        raise ValueError(f"row index must not be negative, got {row_index}")
    row = [1]
    for _ in range(row_index):
        row = [1, *(a + b for a, b in zip(row, row[1:])), 1]
    return row


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer."""
    if not s:
        raise ValueError("empty Roman numeral")
    try:
        values = [_ROMAN_VALUES[symbol] for symbol in s]
    except KeyError as error:
        raise ValueError(f"invalid Roman symbol {error.args[0]!r} in {s!r}") from None
    total = values[-1]
    for value, following in zip(values, values[1:]):
        total += -value if value < following else value
    return total


def digit_square_sum(n: int) -> int:
    """Return the sum of the squares of the decimal digits of ``n``."""
    n = abs(n)
    total = 0
    while n:
        n, digit = divmod(n, 10)
        total += digit * digit
    return total


def is_happy(n: int) -> bool:
    """Tell whether repeated digit-square sums starting at ``n`` reach 1."""
    slow = fast = n
    while True:
        slow = digit_square_sum(slow)
        fast = digit_square_sum(digit_square_sum(fast))
        if slow == fast:
            return slow == 1


def missing_number(nums: Sequence[int]) -> int:
    """Return the one number of 0..len(nums) that ``nums`` lacks."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def is_power_of_three(n: int) -> bool:
    """Tell whether ``n`` is a non-negative integer power of three."""
    if n > 1:
        while n % 3 == 0:
            n //= 3
    return n == 1


def count_bits(n: int) -> list[int]:
    """Return the number of set bits of every integer from 0 to ``n``."""
    return [bin(i).count("1") for i in range(n + 1)]


def fizz_buzz(n: int) -> list[str]:
    """Return the Fizz Buzz sequence for 1..n."""
    def word(i: int) -> str:
        if i % 15 == 0:
            return "FizzBuzz"
        if i % 3 == 0:
            return "Fizz"
        if i % 5 == 0:
            return "Buzz"
        return str(i)

    return [word(i) for i in range(1, n + 1)]


def _check_digits(num: str) -> None:
    if not num or not (num.isascii() and num.isdigit()):
        raise ValueError(f"expected a string of decimal digits, got {num!r}")


def multiply_strings(num1: str, num2: str) -> str:
    """Multiply two non-negative integers given as decimal strings."""
    _check_digits(num1)
    _check_digits(num2)
    if num1 == "0" or num2 == "0":
        return "0"
    product = [0] * (len(num1) + len(num2))
    for i, a in reversed(list(enumerate(num1))):
        for j, b in reversed(list(enumerate(num2))):
            product[i + j + 1] += int(a) * int(b)
            carry, product[i + j + 1] = divmod(product[i + j + 1], 10)
            product[i + j] += carry
    return "".join(map(str, product)).lstrip("0") or "0"


def plus_one(digits: Sequence[int]) -> list[int]:
    """Return the digits of the number ``digits`` represents, plus one."""
    result = list(digits)
    if not result:
        raise ValueError("no digits given")
    for position in reversed(range(len(result))):
        if result[position] == 9:
            result[position] = 0
        else:
            result[position] += 1
            return result
    return [1, *result]


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` steps taking one or two at a time."""
    if n <= 2:
        return n
    previous, current = 1, 2
    for _ in range(3, n + 1):
        previous, current = current, previous + current
    return current


def powerful_integers(x: int, y: int, bound: int) -> list[int]:
    """Return, sorted, every value x**i + y**j (i, j >= 0) not above ``bound``."""
    if x < 1 or y < 1:
        raise ValueError("bases must be positive")
    found: set[int] = set()
    power_x = 1
    while power_x <= bound:
        power_y = 1
        while power_x + power_y <= bound:
            found.add(power_x + power_y)
            if y == 1:
                break
            power_y *= y
        if x == 1:
            break
        power_x *= x
    return sorted(found)