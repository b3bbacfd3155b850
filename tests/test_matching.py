import pytest

from desktools.menu.matching import cistrstr, match_items


@pytest.mark.parametrize(
    "haystack, needle",
    [("Hello World", "WORLD"), ("abcABC", "Cab"), ("xyz", "Y"), ("MiXeD", "mixed")],
)
def test_cistrstr_finds_occurrence(haystack, needle):
    index = cistrstr(haystack, needle)
    assert index >= 0
    assert haystack[index:index + len(needle)].lower() == needle.lower()


def test_cistrstr_empty_needle_matches_at_start():
    assert cistrstr("anything", "") == 0


def test_cistrstr_missing_needle():
    assert cistrstr("abc", "x") == -1
    assert cistrstr("", "a") == -1


def test_empty_text_keeps_all_items_in_order():
    items = ["zeta", "alpha", "mid"]
    assert match_items("", items) == items


def test_exact_then_prefix_then_substring():
    assert match_items("foo", ["barfoo", "foo", "foobar"]) == ["foo", "foobar", "barfoo"]


def test_all_tokens_must_match():
    result = match_items("b a", ["abc", "bca", "xyz"])
    assert result == ["bca", "abc"]


def test_non_matching_items_dropped():
    assert match_items("q", ["abc", "def"]) == []


def test_case_sensitivity():
    items = ["foo", "Foobar"]
    assert match_items("FOO", items) == []
    assert match_items("FOO", items, case_insensitive=True) == ["foo", "Foobar"]


def test_result_is_subset_preserving_relative_order_within_buckets():
    items = ["xay", "ab", "a", "ba", "ac"]
    result = match_items("a", items)
    assert sorted(result) == sorted(items)
    assert result[0] == "a"
    prefixes = [item for item in result if item.startswith("a") and item != "a"]
    assert prefixes == ["ab", "ac"]