"""Tokenisation, stopword filtering and term frequencies."""

from __future__ import annotations

from collections import Counter
from pathlib import Path

_EDGE_PUNCTUATION = ".,!?\"'();:"


class TextProcessor:
    """Turns raw text into lower-case tokens and term-frequency maps."""

    def __init__(self, ignore_stopwords: bool = False) -> None:
        self.ignore_stopwords = ignore_stopwords
        self.stopwords: set[str] = set()

    def load_stopwords(self, filename: str | Path) -> None:
        """Add the stopwords listed one per line in *filename*.

        Trailing whitespace is removed and words are lower-cased.  A file
        that does not exist adds nothing.
        """
        try:
            with open(filename, encoding="utf-8", errors="replace") as handle:
                for line in handle:
                    word = line.rstrip()
                    if word:
                        self.stopwords.add(word.lower())
        except FileNotFoundError:
            return

    @staticmethod
    def _tokenize(text: str) -> list[str]:
        tokens = (raw.strip(_EDGE_PUNCTUATION) for raw in text.split())
        return [token.lower() for token in tokens if token]

    def process_text(self, text: str) -> list[str]:
        """Return the tokens of *text*, without stopwords if so configured."""
        tokens = self._tokenize(text)
        if self.ignore_stopwords:
            tokens = [token for token in tokens if token not in self.stopwords]
        return tokens

    def term_frequencies(self, text: str) -> dict[str, float]:
        """Return each token's share of all tokens in *text*."""
        tokens = self.process_text(text)
        total = len(tokens)
        return {term: count / total for term, count in Counter(tokens).items()}