import pytest

from drills.substring import find_substring


@pytest.mark.parametrize(
    ("s", "words", "expected"),
    [
        ("barfoothefoobarman", ["foo", "bar"], [0, 9]),
        ("barfofoobarthefoobarman", ["bar", "foo", "the"], [5, 8, 11]),
        ("aaaaaa", ["aa", "aa", "aa"], [0]),
        ("catfoxcatfox", ["cat", "fox"], [0, 3, 6]),
        ("barfoofoo", ["bar", "foo", "foo"], [0]),
        ("ababab", ["a", "b", "a"], [0, 2]),
    ],
)
def test_found_starts(s, words, expected):
    assert sorted(find_substring(s, words)) == expected


@pytest.mark.parametrize(
    ("s", "words"),
    [
        ("wordgoodgoodgoodbestword", ["word", "good", "best", "word"]),
        ("anything", []),
        ("short", ["longword", "another"]),
        ("aaaabaaaab", ["aa", "aa", "aa"]),
    ],
)
def test_no_matches(s, words):
    assert find_substring(s, words) == []


def test_accepts_tuple_of_words():
    assert sorted(find_substring("foobar", ("bar", "foo"))) == [0]


def test_every_reported_start_is_a_permutation_of_words():
    s = "barfofoobarthefoobarman"
    words = ["bar", "foo", "the"]
    size = len(words[0])
    for start in find_substring(s, words):
        chunk = s[start:start + size * len(words)]
        pieces = sorted(chunk[i:i + size] for i in range(0, len(chunk), size))
        assert pieces == sorted(words)


def test_results_ordered_within_offset():
    assert find_substring("catfoxcatfox", ["cat", "fox"]) == [0, 3, 6]
    assert find_substring("ababab", ["a", "b", "a"]) == [0, 2]