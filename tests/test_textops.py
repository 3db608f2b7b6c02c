import pytest

from zonealloc.textops import (
    bounded_concat,
    compare,
    compare_n,
    equals,
    equals_n,
    find_char,
    find_first,
    find_last,
    find_nth,
    find_substring,
    find_substring_n,
    join,
    map_chars,
    map_chars_indexed,
    rfind_char,
    substring,
)


@pytest.mark.parametrize("text,char", [("hello", "l"), ("banana", "a"), ("x", "x")])
def test_find_char_first_occurrence(text, char):
    index = find_char(text, char)
    assert text[index] == char
    assert char not in text[:index]


def test_find_char_missing_and_nul():
    assert find_char("hello", "z") is None
    assert find_char("hello", "\0") == len("hello")


@pytest.mark.parametrize("text,char", [("hello", "l"), ("banana", "a")])
def test_rfind_char_last_occurrence(text, char):
    index = rfind_char(text, char)
    assert text[index] == char
    assert char not in text[index + 1 :]


def test_rfind_char_missing_and_nul():
    assert rfind_char("abc", "q") is None
    assert rfind_char("abc", "\0") == len("abc")


def test_find_char_rejects_long_char():
    with pytest.raises(ValueError):
        find_char("abc", "ab")


def test_compare_equal_and_ordering():
    assert compare("abc", "abc") == 0
    assert compare("abc", "abd") < 0
    assert compare("abd", "abc") > 0
    assert compare("ab", "abc") == -ord("c")
    assert compare("abc", "ab") == ord("c")


def test_compare_is_antisymmetric():
    for a, b in [("apple", "apply"), ("", "z"), ("Zed", "zed")]:
        assert compare(a, b) == -compare(b, a)


def test_compare_n_limits_length():
    assert compare_n("abcX", "abcY", 3) == 0
    assert compare_n("abcX", "abcY", 4) == ord("X") - ord("Y")
    assert compare_n("abc", "xyz", 0) == 0


def test_compare_n_negative_length():
    with pytest.raises(ValueError):
        compare_n("a", "b", -1)


def test_equals():
    assert equals("same", "same") is True
    assert equals("same", "sam") is False
    assert equals("", "") is True


def test_equals_n():
    assert equals_n("prefix-one", "prefix-two", 7) is True
    assert equals_n("prefix-one", "prefix-two", 8) is False
    assert equals_n("ab", "abc", 3) is False
    assert equals_n("anything", "else", 0) is True


def test_find_substring():
    hay = "the quick brown fox"
    index = find_substring(hay, "brown")
    assert hay[index : index + len("brown")] == "brown"
    assert find_substring(hay, "cat") is None
    assert find_substring(hay, "") == 0


def test_find_substring_n_requires_fit():
    hay = "hello world"
    assert find_substring_n(hay, "world", len(hay)) == hay.index("world")
    assert find_substring_n(hay, "world", len(hay) - 1) is None
    assert find_substring_n(hay, "", 0) == 0


def test_join():
    assert join("foo", "bar") == "foobar"
    assert join("", "x") == "x"


def test_bounded_concat_fits():
    result, total = bounded_concat("ab", "cd", 10)
    assert result == "ab" + "cd"
    assert total == len("ab") + len("cd")


@pytest.mark.parametrize("size", [3, 4, 5, 6, 10])
def test_bounded_concat_truncates_to_size(size):
    result, total = bounded_concat("ab", "cdef", size)
    assert total == len("ab") + len("cdef")
    assert len(result) <= size - 1
    assert ("ab" + "cdef").startswith(result)


def test_bounded_concat_full_buffer():
    assert bounded_concat("abc", "de", 3) == ("abc", len("abc") + len("de"))
    assert bounded_concat("abc", "de", 1) == ("abc", 1 + len("de"))


def test_substring():
    text = "abcdef"
    assert substring(text, 2, 3) == text[2:5]
    assert substring(text, 0, 0) == ""
    assert substring(text, 0, len(text)) == text


def test_substring_out_of_range():
    with pytest.raises(IndexError):
        substring("abc", 2, 5)
    with pytest.raises(ValueError):
        substring("abc", -1, 1)


def test_map_chars():
    assert map_chars("abc", str.upper) == "ABC"
    assert map_chars("", str.upper) == ""


def test_map_chars_indexed():
    result = map_chars_indexed("abcd", lambda i, c: c.upper() if i % 2 else c)
    assert result == "aBcD"


def test_find_first_and_last():
    text = "mississippi"
    first = find_first(text, "s")
    last = find_last(text, "s")
    assert text[first] == "s" and "s" not in text[:first]
    assert text[last] == "s" and "s" not in text[last + 1 :]
    assert find_first(text, "z") is None


def test_find_first_never_matches_nul_but_last_does():
    assert find_first("abc", "\0") is None
    assert find_last("abc", "\0") == len("abc")


def test_find_nth():
    text = "a,b,c,d"
    positions = [find_nth(text, ",", n) for n in range(1, 4)]
    assert all(text[p] == "," for p in positions)
    assert positions == sorted(set(positions))
    assert find_nth(text, ",", 4) is None


def test_find_nth_rejects_zero():
    with pytest.raises(ValueError):
        find_nth("abc", "a", 0)