import pytest

from algokit.numbers import fibonacci
from algokit.strings import (
    alternating_pattern,
    is_balanced,
    is_palindrome_string,
    max_expression,
    num_decodings,
    star_pattern,
    word_frequencies,
)


def test_balanced_source_examples():
    assert is_balanced("((()))()()")
    assert not is_balanced("())((())")


def test_balanced_edge_cases():
    assert is_balanced("")
    assert not is_balanced(")(")
    assert not is_balanced("(((")


def test_balanced_by_nesting():
    for depth in range(10):
        assert is_balanced("(" * depth + ")" * depth)
        assert not is_balanced("(" * depth + ")" * (depth + 1))


def test_num_decodings_source_example():
    assert num_decodings("226") == 3


def test_num_decodings_empty_string():
    assert num_decodings("") == 1


def test_num_decodings_all_ones_follow_fibonacci():
    for n in range(1, 15):
        assert num_decodings("1" * n) == fibonacci(n + 2)[-1]


def test_num_decodings_leading_zero_is_undecodable():
    for tail in ("", "1", "12", "226"):
        assert num_decodings("0" + tail) == 0


def test_num_decodings_rejects_non_digits():
    with pytest.raises(ValueError):
        num_decodings("12a")


def test_word_frequencies_sorted_and_complete():
    words = ["pear", "apple", "pear", "fig", "apple", "pear"]
    result = word_frequencies(words)
    keys = [word for word, _ in result]
    assert keys == sorted(set(words))
    assert sum(count for _, count in result) == len(words)
    assert dict(result)["pear"] == words.count("pear")


def test_word_frequencies_empty():
    assert word_frequencies([]) == []


def test_max_expression_example():
    assert max_expression("1+2-3") == "3+2-1"


def test_max_expression_keeps_characters():
    expression = "9-4+7-1+0"
    result = max_expression(expression)
    assert sorted(result) == sorted(expression)
    digits = [char for char in result if char.isdigit()]
    assert digits == sorted(digits, reverse=True)
    assert result[0].isdigit() and result[-1].isdigit()


def test_max_expression_rejects_other_characters():
    with pytest.raises(ValueError):
        max_expression("1*2")


def test_palindrome_string_mirrored():
    for text in ("a", "ab", "race", "level up"):
        assert is_palindrome_string(text + text[::-1])


def test_palindrome_string_rejects():
    assert not is_palindrome_string("ab")


def test_star_pattern_shape():
    lines = star_pattern(5)
    assert len(lines) == 5
    assert all(set(line) <= {"*"} for line in lines)
    assert [len(line) for line in lines] == list(range(4, -1, -1))


def test_alternating_pattern_grid():
    lines = alternating_pattern(4, 4)
    assert lines == ["*#*#"] * 4


def test_alternating_pattern_dimensions():
    lines = alternating_pattern(3, 7)
    assert len(lines) == 3
    assert all(len(line) == 7 and line[0] == "*" for line in lines)