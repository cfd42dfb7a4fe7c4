import pytest

from simtext.text_processor import TextProcessor


@pytest.fixture
def stopwords_file(tmp_path):
    path = tmp_path / "stopwords.txt"
    path.write_text("the\nand\nis\n", encoding="utf-8")
    return path


def test_text_processing():
    tokens = TextProcessor().process_text("The Quick Brown Fox! Jumps over the lazy dog.")
    assert tokens
    assert tokens[0] == "the"
    assert tokens[1] == "quick"


def test_tokens_are_stripped_of_edge_punctuation():
    tokens = TextProcessor().process_text("The Quick Brown Fox! Jumps over the lazy dog.")
    assert tokens == ["the", "quick", "brown", "fox", "jumps", "over", "the", "lazy", "dog"]


def test_inner_punctuation_is_kept():
    assert TextProcessor().process_text("(don't) ... e.g.") == ["don't", "e.g"]


def test_stopwords_filtering(stopwords_file):
    processor = TextProcessor(ignore_stopwords=True)
    processor.load_stopwords(stopwords_file)
    tokens = processor.process_text("the cat and dog is running")
    assert len(tokens) == 3
    assert "the" not in tokens
    assert tokens == ["cat", "dog", "running"]


def test_stopwords_kept_when_not_ignored(stopwords_file):
    processor = TextProcessor()
    processor.load_stopwords(stopwords_file)
    assert processor.process_text("the cat") == ["the", "cat"]


def test_stopwords_are_lowered_and_trimmed(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("THE  \t\n\n  \nAnd\r\n", encoding="utf-8")
    processor = TextProcessor(ignore_stopwords=True)
    processor.load_stopwords(path)
    assert processor.stopwords == {"the", "and"}


def test_missing_stopwords_file_adds_nothing(tmp_path):
    processor = TextProcessor(ignore_stopwords=True)
    processor.load_stopwords(tmp_path / "absent.txt")
    assert processor.stopwords == set()
    assert processor.process_text("the cat") == ["the", "cat"]


def test_term_frequency():
    tf = TextProcessor().term_frequencies("cat cat dog")
    assert tf["cat"] == pytest.approx(2.0 / 3.0, abs=0.001)
    assert tf["dog"] == pytest.approx(1.0 / 3.0, abs=0.001)


def test_term_frequencies_sum_to_one():
    tf = TextProcessor().term_frequencies("a b c a b a! d, e.")
    assert sum(tf.values()) == pytest.approx(1.0)


def test_term_frequencies_of_empty_text():
    assert TextProcessor().term_frequencies("  ... !!! ") == {}