"""Character and word shingles and Jaccard similarity of shingle sets."""

from __future__ import annotations

from collections.abc import Sequence, Set

_WHITESPACE = " \t\n\v\f\r"


def _normalize(text: str) -> str:
    """Lower-case ASCII letters and digits, turn whitespace into spaces, drop the rest."""
    kept = []
    for char in text:
        if char.isascii() and char.isalnum():
            kept.append(char.lower())
        elif char in _WHITESPACE:
            kept.append(" ")
    return "".join(kept)


def character_shingles(text: str, w: int = 5) -> set[str]:
    """Every run of *w* characters of the normalised text that is not all spaces.

    Text shorter than *w* gives a single shingle holding all of it.
    """
    if w < 0:
        raise ValueError(f"shingle size must not be negative: {w}")
    normalized = _normalize(text)
    if len(normalized) < w:
        return {normalized}
    windows = (normalized[start:start + w] for start in range(len(normalized) - w + 1))
    return {shingle for shingle in windows if shingle.strip(" ")}


def generate_shingles(text: str, w: int = 3) -> set[str]:
    """Character shingles of *text*, three characters wide by default."""
    return character_shingles(text, w)


def word_shingles(tokens: Sequence[str], w: int = 3) -> set[str]:
    """Every run of *w* consecutive tokens, joined by single spaces.

    Fewer than *w* tokens give a single shingle holding all of them.
    """
    if w < 0:
        raise ValueError(f"shingle size must not be negative: {w}")
    if len(tokens) < w:
        return {" ".join(tokens)}
    return {" ".join(tokens[start:start + w]) for start in range(len(tokens) - w + 1)}


def jaccard_similarity(shingles1: Set[str], shingles2: Set[str]) -> float:
    """Size of the intersection over size of the union; two empty sets count as identical."""
    if not shingles1 and not shingles2:
        return 1.0
    if not shingles1 or not shingles2:
        return 0.0
    return len(shingles1 & shingles2) / len(shingles1 | shingles2)