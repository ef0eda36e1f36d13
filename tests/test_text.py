import pytest

from fmtprintf.text import (
    atoi,
    itoa,
    split,
    strncmp,
    strnstr,
    strtrim,
    substr,
    to_upper,
)


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2147483647, -2147483648])
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


def test_atoi_skips_space_and_sign():
    assert atoi(" \t\n\v\f\r+42abc") == 42
    assert atoi("  -17 5") == -17


def test_atoi_no_digits():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("+-3") == 0


def test_atoi_overflow():
    assert atoi("9223372036854775808") == -1
    assert atoi("-9223372036854775809") == 0


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", ",") == []
    assert split(",,,", ",") == []


@pytest.mark.parametrize("text", ["a,b,c", ",x,,yy,", "single"])
def test_split_words_have_no_separator(text):
    words = split(text, ",")
    assert all(words)
    assert all("," not in w for w in words)
    assert "".join(words) == text.replace(",", "")


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("abcba", "ab") == "c"
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_charset_keeps_string():
    assert strtrim("  keep  ", "") == "  keep  "


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 2, 100) == "llo"
    assert substr("hello", 10, 2) == ""
    assert substr("hello", 5, 2) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strnstr():
    assert strnstr("foo bar baz", "bar", 11) == 4
    assert strnstr("foo bar baz", "bar", 6) is None
    assert strnstr("foo", "", 0) == 0
    assert strnstr("foo", "zzz", 3) is None
    assert strnstr("ab", "abc", 5) is None


def test_strnstr_only_first_occurrence_counts():
    assert strnstr("abab", "ab", 4) == 0
    assert strnstr("xab", "ab", 2) is None


def test_strncmp_equal_and_limits():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("a", "b", 0) == 0


def test_strncmp_sign():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 5) < 0
    assert strncmp("abc", "ab", 5) > 0


@pytest.mark.parametrize("pair", [("apple", "apricot"), ("zeta", "alpha"), ("", "x")])
def test_strncmp_antisymmetric(pair):
    a, b = pair
    assert strncmp(a, b, 10) == -strncmp(b, a, 10)


def test_to_upper_ascii_only():
    assert to_upper("hello, World 1") == "HELLO, WORLD 1"
    assert to_upper("ßé") == "ßé"