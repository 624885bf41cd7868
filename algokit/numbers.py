"""Number puzzles, digit tricks and bit manipulation."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from operator import xor

__all__ = [
    "is_armstrong",
    "binary_to_decimal",
    "digit_square_sum",
    "is_happy",
    "is_palindrome_number",
    "is_prime",
    "binomial_coefficient",
    "pascal_triangle",
    "fibonacci",
    "get_bit",
    "set_bit",
    "clear_bit",
    "update_bit",
    "count_ones",
    "is_power_of_two",
    "max_of_three",
    "min_of_three",
    "net_salary",
    "find_unpaired",
]


def _digits(number: int) -> list[int]:
    """Decimal digits of ``abs(number)``, least significant first."""
    number = abs(number)
    digits = []
    while number:
        number, digit = divmod(number, 10)
        digits.append(digit)
    return digits


def is_armstrong(number: int) -> bool:
    """True if the sum of the cubes of the digits equals the number."""
    sign = -1 if number < 0 else 1
    return sign * sum(digit**3 for digit in _digits(number)) == number


def binary_to_decimal(number: int) -> int:
    """Read the decimal digits of ``number`` as a base-2 numeral."""
    result = 0
    base = 1
    while number > 0:
        number, digit = divmod(number, 10)
        result += digit * base
        base *= 2
    return result


def digit_square_sum(number: int) -> int:
    """Sum of the squares of the decimal digits of a non-negative number."""
    if number <= 0:
        return 0
    return sum(digit * digit for digit in _digits(number))


def is_happy(number: int) -> bool:
    """True if repeated digit-square sums reach 1 rather than the 4 cycle."""
    if number < 1:
        raise ValueError(f"happy numbers are positive, got {number}")
    while number not in (1, 4):
        number = digit_square_sum(number)
    return number == 1


def is_palindrome_number(number: int) -> bool:
    """True if the decimal digits read the same in both directions."""
    digits = _digits(number)
    return digits == digits[::-1]


def is_prime(number: int) -> bool:
    """Primality by trial division."""
    if number < 2:
        return False
    return all(number % divisor for divisor in range(2, number))


def binomial_coefficient(n: int, k: int) -> int:
    """The binomial coefficient C(n, k)."""
    if k < 0 or k > n:
        raise ValueError(f"k must lie between 0 and n, got n={n}, k={k}")
    k = min(k, n - k)
    result = 1
    for i in range(k):
        result = result * (n - i) // (i + 1)
    return result


def pascal_triangle(rows: int) -> list[list[int]]:
    """The first ``rows`` lines of Pascal's triangle."""
    return [[binomial_coefficient(line, i) for i in range(line + 1)] for line in range(rows)]


def fibonacci(count: int) -> list[int]:
    """The first ``count`` Fibonacci numbers, starting 0, 1."""
    terms = []
    current, following = 0, 1
    for _ in range(count):
        terms.append(current)
        current, following = following, current + following
    return terms


def get_bit(n: int, pos: int) -> int:
    """The bit of ``n`` at position ``pos`` as 0 or 1."""
    return int(n & (1 << pos) != 0)


def set_bit(n: int, pos: int) -> int:
    """``n`` with the bit at ``pos`` set."""
    return n | (1 << pos)


def clear_bit(n: int, pos: int) -> int:
    """``n`` with the bit at ``pos`` cleared."""
    return n & ~(1 << pos)


def update_bit(n: int, pos: int) -> int:
    """``n`` with the bit at ``pos`` overwritten by 0."""
    return clear_bit(n, pos) | (0 << pos)


def count_ones(n: int) -> int:
    """Number of set bits in a non-negative integer."""
    if n < 0:
        raise ValueError(f"count_ones needs a non-negative integer, got {n}")
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count


def is_power_of_two(n: int) -> bool:
    """True if ``n`` is a positive power of two."""
    return n > 0 and not n & (n - 1)


def max_of_three(a, b, c):
    """The largest of three values."""
    if a > b:
        return a if a > c else c
    return b if b > c else c


def min_of_three(a, b, c):
    """The smallest of three values."""
    if a < b:
        return a if a < c else c
    return b if b < c else c


def net_salary(basic: float, allowance_percent: float, deduction_percent: float) -> float:
    """Basic salary plus allowances minus deductions, both given in percent."""
    return basic + basic * allowance_percent / 100 - basic * deduction_percent / 100


def find_unpaired(values: Iterable[int]) -> int:
    """XOR of all values: the one value that occurs an odd number of times."""
    return reduce(xor, values, 0)