import pytest

from dsakit.dp_strings import (
    count_palindromic_substrings,
    edit_distance,
    longest_common_subsequence,
    longest_palindrome_from_subsequences,
    longest_palindromic_subsequence,
    longest_palindromic_substring,
)

WORDS = ["", "a", "ab", "aa", "abc", "racecar", "AGGTAB", "GXTXAYB", "banana", "abcba"]


def _is_palindrome(text):
    return text == text[::-1]


def test_count_empty_and_single():
    assert count_palindromic_substrings("") == 0
    assert count_palindromic_substrings("a") == 1


def test_count_distinct_letters_only_singles():
    assert count_palindromic_substrings("abcd") == len("abcd")


@pytest.mark.parametrize("word", WORDS)
def test_count_at_least_length(word):
    assert count_palindromic_substrings(word) >= len(word)


def test_count_repeated_letter_counts_every_substring():
    word = "aaaaa"
    substrings = [(i, j) for i in range(len(word)) for j in range(i + 1, len(word) + 1)]
    assert count_palindromic_substrings(word) == len(substrings)


@pytest.mark.parametrize("word", WORDS)
def test_edit_distance_identity_and_empty(word):
    assert edit_distance(word, word) == 0
    assert edit_distance(word, "") == len(word)
    assert edit_distance("", word) == len(word)


@pytest.mark.parametrize("a", WORDS)
@pytest.mark.parametrize("b", ["", "ab", "banana", "abcba"])
def test_edit_distance_symmetric_and_bounded(a, b):
    distance = edit_distance(a, b)
    assert distance == edit_distance(b, a)
    assert abs(len(a) - len(b)) <= distance <= max(len(a), len(b))


def test_edit_distance_triangle_inequality():
    a, b, c = "kitten", "sitting", "mitten"
    assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)


def test_lcs_worked_example():
    assert longest_common_subsequence("AGGTAB", "GXTXAYB") == 4


@pytest.mark.parametrize("word", WORDS)
def test_lcs_with_itself_and_empty(word):
    assert longest_common_subsequence(word, word) == len(word)
    assert longest_common_subsequence(word, "") == 0


@pytest.mark.parametrize("a", WORDS)
@pytest.mark.parametrize("b", ["xyz", "banana", "abc"])
def test_lcs_symmetric_and_bounded(a, b):
    length = longest_common_subsequence(a, b)
    assert length == longest_common_subsequence(b, a)
    assert length <= min(len(a), len(b))


@pytest.mark.parametrize("word", ["", "a", "aa", "racecar", "abcba"])
def test_lps_of_palindrome_is_whole_length(word):
    assert longest_palindromic_subsequence(word) == len(word)


@pytest.mark.parametrize("word", WORDS)
def test_lps_equals_lcs_with_reverse(word):
    assert longest_palindromic_subsequence(word) == longest_common_subsequence(
        word, word[::-1]
    )


@pytest.mark.parametrize("word", WORDS)
def test_longest_substring_is_palindromic_substring(word):
    result = longest_palindromic_substring(word)
    assert result in word
    assert _is_palindrome(result)
    assert len(result) <= longest_palindromic_subsequence(word)


def test_longest_substring_prefers_leftmost():
    assert longest_palindromic_substring("abc") == "a"
    assert longest_palindromic_substring("babad") == "bab"


@pytest.mark.parametrize("word", ["", "a", "racecar", "abba"])
def test_longest_substring_of_palindrome_is_itself(word):
    assert longest_palindromic_substring(word) == word


def test_from_subsequences_no_common_letter():
    assert longest_palindrome_from_subsequences("ab", "cd") == 0
    assert longest_palindrome_from_subsequences("", "cd") == 0


def test_from_subsequences_whole_concatenation():
    word1, word2 = "ab", "ba"
    assert longest_palindrome_from_subsequences(word1, word2) == len(word1 + word2)


@pytest.mark.parametrize(
    "word1, word2", [("cacb", "cbba"), ("aa", "bb"), ("ab", "a"), ("abc", "cba")]
)
def test_from_subsequences_bounded_by_lps(word1, word2):
    result = longest_palindrome_from_subsequences(word1, word2)
    assert result <= longest_palindromic_subsequence(word1 + word2)
    if set(word1) & set(word2):
        assert result >= 2
    else:
        assert result == 0