import pytest

from simtext.shingling import (
    character_shingles,
    generate_shingles,
    jaccard_similarity,
    word_shingles,
)


def test_short_text_gives_single_shingle():
    assert character_shingles("abc", 5) == {"abc"}


def test_empty_text_gives_empty_shingle():
    assert character_shingles("", 5) == {""}


def test_character_shingles_have_requested_width():
    shingles = character_shingles("The quick brown fox jumps over the lazy dog", 4)
    assert shingles
    assert all(len(shingle) == 4 for shingle in shingles)


def test_character_shingles_normalise_case_and_punctuation():
    assert character_shingles("Hello, World!", 3) == character_shingles("hello world", 3)


def test_whitespace_becomes_spaces_and_all_space_shingles_dropped():
    shingles = character_shingles("ab\t\n\ncd", 2)
    assert "  " not in shingles
    assert all("\t" not in shingle and "\n" not in shingle for shingle in shingles)
    assert "ab" in shingles and "cd" in shingles


def test_character_shingles_are_substrings_of_lowered_text():
    text = "simple text sample"
    assert all(shingle in text for shingle in character_shingles(text, 5))


def test_generate_shingles_matches_character_shingles():
    text = "Repeated phrases, repeated phrases."
    assert generate_shingles(text) == character_shingles(text, 3)


def test_negative_width_is_rejected():
    with pytest.raises(ValueError):
        character_shingles("text", -1)
    with pytest.raises(ValueError):
        word_shingles(["a"], -2)


def test_word_shingles_windows():
    assert word_shingles(["a", "b", "c", "d"], 3) == {"a b c", "b c d"}


def test_word_shingles_few_tokens():
    assert word_shingles(["only", "two"], 3) == {"only two"}
    assert word_shingles([], 3) == {""}


def test_word_shingles_count_bounded_by_windows():
    tokens = "one two three one two three four".split()
    shingles = word_shingles(tokens, 2)
    assert len(shingles) <= len(tokens) - 1
    assert all(len(shingle.split()) == 2 for shingle in shingles)


def test_jaccard_identical_sets():
    shingles = character_shingles("the same text twice", 3)
    assert jaccard_similarity(shingles, set(shingles)) == 1.0


def test_jaccard_empty_sets():
    assert jaccard_similarity(set(), set()) == 1.0
    assert jaccard_similarity({"a"}, set()) == 0.0
    assert jaccard_similarity(set(), {"a"}) == 0.0


def test_jaccard_disjoint_sets():
    assert jaccard_similarity({"a", "b"}, {"c"}) == 0.0


def test_jaccard_partial_overlap():
    assert jaccard_similarity({"a", "b"}, {"b", "c"}) == pytest.approx(1 / 3)


def test_jaccard_symmetric_and_bounded():
    first = character_shingles("a cat sat on the mat", 3)
    second = character_shingles("the cat sat on a hat", 3)
    value = jaccard_similarity(first, second)
    assert value == jaccard_similarity(second, first)
    assert 0.0 < value < 1.0