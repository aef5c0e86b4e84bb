import pytest

from helixkit.strings import (
    all_of_alpha_numerics,
    all_of_alphas,
    all_of_digits,
    join,
    make,
    split,
    split_on_whitespace,
    trim,
)


def test_make_stops_at_nul():
    assert make(b"abc\0def") == "abc"


def test_make_without_nul_keeps_everything():
    assert make(b"abcdef") == "abcdef"
    assert make("xyz") == "xyz"


def test_make_leading_nul_is_empty():
    assert make(b"\0abc") == ""


def test_trim_default_whitespace():
    assert trim(" \t hello world \r\n") == "hello world"


def test_trim_all_unwanted_is_empty():
    assert trim(" \t\r\n ") == ""


def test_trim_custom_characters():
    assert trim("--value--", "-") == "value"


def test_trim_keeps_inner_characters():
    assert trim("  a  b  ") == "a  b"


def test_split_every_token():
    assert split("a,b,c", ",") == ["a", "b", "c"]


def test_split_with_limit_keeps_remainder():
    assert split("a,b,c", ",", 1) == ["a", "b,c"]


def test_split_limit_zero_returns_input():
    assert split("a,b,c", ",", 0) == ["a,b,c"]


def test_split_multi_character_token():
    assert split("one::two::three", "::") == ["one", "two", "three"]


def test_split_empty_input():
    assert split("", ",") == [""]


def test_split_empty_token_raises():
    with pytest.raises(ValueError):
        split("abc", "")


@pytest.mark.parametrize("text", ["a,b,c", ",,", "", "no tokens", ",lead", "trail,"])
def test_split_join_round_trip(text):
    assert join(split(text, ","), ",") == text


def test_split_on_whitespace_collapses_runs():
    assert split_on_whitespace("a  \t b\nc") == ["a", "b", "c"]


def test_split_on_whitespace_leading_and_trailing():
    assert split_on_whitespace(" a") == ["", "a"]
    assert split_on_whitespace("a ") == ["a", ""]


def test_split_on_whitespace_empty():
    assert split_on_whitespace("") == [""]


def test_join_empty_is_empty():
    assert join([], ", ") == ""


def test_join_non_strings():
    assert join([1, 2, 3], "-") == "1-2-3"


def test_all_of_digits():
    assert all_of_digits("0123456789")
    assert not all_of_digits("12a")
    assert all_of_digits("")


def test_all_of_alpha_numerics():
    assert all_of_alpha_numerics("abc123XYZ")
    assert not all_of_alpha_numerics("abc 123")


def test_all_of_alphas():
    assert all_of_alphas("abcXYZ")
    assert not all_of_alphas("abc1")