import itertools

import pytest

from algokit.pattern_search import (
    distinct_search,
    naive_search,
    permutations,
    rabin_karp_search,
)

TEXT = "AABAACAADAABAAABAA"


def test_naive_search_driver_example():
    assert naive_search("AABA", TEXT) == [0, 9, 13]


@pytest.mark.parametrize("pattern", ["AABA", "A", "AA", "CAAD", "XYZ"])
def test_naive_search_indices_are_matches(pattern):
    for index in naive_search(pattern, TEXT):
        assert TEXT[index:index + len(pattern)] == pattern


def test_naive_search_pattern_longer_than_text():
    assert naive_search("ABCDE", "ABC") == []


def test_distinct_search_driver_example():
    assert distinct_search("ABCD", "ABCEABCDABCEABCD") == [4, 12]


@pytest.mark.parametrize(
    "pattern, text",
    [("ABCD", "ABCEABCDABCEABCD"), ("XY", "AXYBXYXY"), ("Q", "QQQ"), ("ZW", "abc")],
)
def test_distinct_search_agrees_with_naive_for_distinct_patterns(pattern, text):
    assert distinct_search(pattern, text) == naive_search(pattern, text)


def test_distinct_search_rejects_empty_pattern():
    with pytest.raises(ValueError):
        distinct_search("", "ABC")


@pytest.mark.parametrize("prime", [2, 13, 101, 1_000_003])
@pytest.mark.parametrize(
    "pattern, text",
    [("GEEK", "GEEKS FOR GEEKS"), ("AABA", TEXT), ("A", TEXT), ("ZZ", TEXT), ("LONGER", "SHORT")],
)
def test_rabin_karp_agrees_with_naive(pattern, text, prime):
    assert rabin_karp_search(pattern, text, prime) == naive_search(pattern, text)


def test_rabin_karp_default_prime():
    assert rabin_karp_search("GEEK", "GEEKS FOR GEEKS") == naive_search("GEEK", "GEEKS FOR GEEKS")


def test_rabin_karp_rejects_bad_prime():
    with pytest.raises(ValueError):
        rabin_karp_search("A", "AAA", 0)


def test_permutations_cover_every_arrangement():
    result = list(permutations("ABC"))
    expected = {"".join(p) for p in itertools.permutations("ABC")}
    assert len(result) == len(expected)
    assert set(result) == expected


def test_permutations_start_with_input():
    assert next(permutations("ABCD")) == "ABCD"


def test_permutations_keep_duplicates():
    result = list(permutations("AAB"))
    assert len(result) == len(list(itertools.permutations("AAB")))
    assert sorted(result) == sorted("".join(p) for p in itertools.permutations("AAB"))


def test_permutations_of_single_and_empty():
    assert list(permutations("A")) == ["A"]
    assert list(permutations("")) == []