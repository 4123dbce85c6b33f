import pytest

from csesalgo.textsearch import borders, count_occurrences, prefix_function

TEXTS = ["abcababcab", "aaaa", "abacaba", "xyz", "a", "abababab", "aabaaab"]


@pytest.mark.parametrize("text", TEXTS)
def test_prefix_function_values_are_longest_borders(text):
    lps = prefix_function(text)
    assert len(lps) == len(text)
    for end, value in enumerate(lps, start=1):
        prefix = text[:end]
        assert value < end
        assert prefix[:value] == prefix[end - value:]
        assert not any(prefix[:k] == prefix[end - k:] for k in range(value + 1, end))


def test_prefix_function_empty():
    assert prefix_function("") == []


@pytest.mark.parametrize("text", TEXTS)
def test_borders_are_exactly_the_borders(text):
    expected = [k for k in range(1, len(text)) if text[:k] == text[-k:]]
    assert borders(text) == expected


def test_borders_example():
    assert borders("abcababcab") == [2, 5]


def test_borders_empty():
    assert borders("") == []


def test_count_occurrences_example():
    assert count_occurrences("saippuakauppias", "pp") == 2


@pytest.mark.parametrize(
    "text,pattern",
    [("aaaaa", "aa"), ("abababab", "aba"), ("abcabc", "d"), ("ab", "abc"), ("aabaaab", "aab")],
)
def test_count_occurrences_matches_scan(text, pattern):
    expected = sum(text.startswith(pattern, i) for i in range(len(text)))
    assert count_occurrences(text, pattern) == expected


def test_count_occurrences_empty_pattern():
    with pytest.raises(ValueError):
        count_occurrences("abc", "")