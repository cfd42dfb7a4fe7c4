"""Cosine and TF-IDF weighted cosine similarity of term-frequency maps."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Mapping


def _magnitude(values: Iterable[float]) -> float:
    return math.sqrt(sum(value * value for value in values))


def cosine_similarity(tf1: Mapping[str, float], tf2: Mapping[str, float]) -> float:
    """Cosine of the angle between two term-frequency vectors."""
    dot = sum(freq * tf2[term] for term, freq in tf1.items() if term in tf2)
    magnitude1 = _magnitude(tf1.values())
    magnitude2 = _magnitude(tf2.values())
    if magnitude1 == 0.0 or magnitude2 == 0.0:
        return 0.0
    return dot / (magnitude1 * magnitude2)


def _weighted(tf: Mapping[str, float], idf: Mapping[str, float]) -> dict[str, float]:
    return {term: freq * idf[term] for term, freq in tf.items() if term in idf}


def tfidf_cosine_similarity(
    tf1: Mapping[str, float],
    tf2: Mapping[str, float],
    idf: Mapping[str, float],
) -> float:
    """Cosine similarity with every term weighted by its IDF.

    Terms missing from *idf* are left out entirely.
    """
    weighted1 = _weighted(tf1, idf)
    weighted2 = _weighted(tf2, idf)
    dot = sum(value * weighted2[term] for term, value in weighted1.items() if term in weighted2)
    magnitude1 = _magnitude(weighted1.values())
    magnitude2 = _magnitude(weighted2.values())
    if magnitude1 == 0.0 or magnitude2 == 0.0:
        return 0.0
    return dot / (magnitude1 * magnitude2)


def compute_idf(documents: Iterable[Mapping[str, float]]) -> dict[str, float]:
    """Inverse document frequency, log(N / df), of every term in *documents*."""
    document_freq: Counter[str] = Counter()
    total = 0
    for document in documents:
        total += 1
        document_freq.update(document.keys())
    return {term: math.log(total / df) for term, df in document_freq.items()}