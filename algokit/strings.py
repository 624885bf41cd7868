"""String puzzles and text patterns."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

__all__ = [
    "is_balanced",
    "num_decodings",
    "word_frequencies",
    "max_expression",
    "is_palindrome_string",
    "star_pattern",
    "alternating_pattern",
]


def is_balanced(expression: str) -> bool:
    """True if every '(' has a matching ')' that follows it."""
    depth = 0
    for char in expression:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def num_decodings(s: str) -> int:
    """Count the ways a digit string decodes with 'A'=1 ... 'Z'=26."""
    if s and not s.isdigit():
        raise ValueError(f"expected a string of digits, got {s!r}")
    # ways[i] is the number of decodings of s[i:].
    ways = [0] * (len(s) + 2)
    ways[len(s)] = 1
    for i in range(len(s) - 1, -1, -1):
        if s[i] == "0":
            continue
        ways[i] = ways[i + 1]
        if i + 2 <= len(s) and int(s[i : i + 2]) <= 26:
            ways[i] += ways[i + 2]
    return ways[0]


def word_frequencies(words: Iterable[str]) -> list[tuple[str, int]]:
    """Distinct words in lexicographic order, each with its count."""
    return sorted(Counter(words).items())


def max_expression(expression: str) -> str:
    """Rearrange digits and '+'/'-' signs into the expression of largest value."""
    unexpected = set(expression) - set("0123456789+-")
    if unexpected:
        raise ValueError(f"unexpected characters: {''.join(sorted(unexpected))!r}")
    minus = expression.count("-")
    plus = expression.count("+")
    pieces = []
    for digit in sorted(char for char in expression if char.isdigit()):
        pieces.append(digit)
        if minus:
            pieces.append("-")
            minus -= 1
        elif plus:
            pieces.append("+")
            plus -= 1
    return "".join(pieces)[::-1]


def is_palindrome_string(text: str) -> bool:
    """True if the text reads the same forwards and backwards."""
    return text == text[::-1]


def star_pattern(n: int) -> list[str]:
    """Lines 1..n, line i holding n - i stars."""
    return ["*" * (n - i) for i in range(1, n + 1)]


def alternating_pattern(rows: int, columns: int) -> list[str]:
    """Grid lines alternating '*' in odd columns and '#' in even ones."""
    line = "".join("#" if j % 2 == 0 else "*" for j in range(1, columns + 1))
    return [line] * rows