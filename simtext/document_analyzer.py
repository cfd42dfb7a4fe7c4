"""Document statistics, confidence rating and sentence-level comparison."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from simtext.similarity import cosine_similarity
from simtext.text_processor import TextProcessor

_SENTENCE_END = re.compile(r"[.!?]+")
_SENTENCE_BREAK = re.compile(r"[.!?]+\s*")
_TRIM = " \t\n\r"
_MIN_SENTENCE_LENGTH = 10
_SENTENCE_REPORT_THRESHOLD = 0.6


@dataclass
class DocumentStats:
    """Counts and derived measures describing one document."""

    word_count: int = 0
    character_count: int = 0
    sentence_count: int = 0
    unique_words: int = 0
    average_words_per_sentence: float = 0.0
    lexical_diversity: float = 0.0
    top_words: list[str] = field(default_factory=list)


@dataclass
class SimilarityConfidence:
    """A combined similarity score with its level and explanation."""

    score: float = 0.0
    level: str = ""
    interpretation: str = ""
    indicators: list[str] = field(default_factory=list)


# (lower bound, level, interpretation, indicators), highest bound first.
_LEVELS: tuple[tuple[float, str, str, tuple[str, str]], ...] = (
    (
        0.85,
        "Very High",
        "Extremely high similarity - likely identical or near-identical content",
        ("Potential copy-paste plagiarism", "Review immediately"),
    ),
    (
        0.70,
        "High",
        "High similarity - significant content overlap detected",
        ("Possible paraphrasing or heavy adaptation", "Manual review recommended"),
    ),
    (
        0.50,
        "Medium",
        "Moderate similarity - some shared concepts or phrases",
        ("May share common sources or ideas", "Consider context and field norms"),
    ),
    (
        0.30,
        "Low",
        "Low similarity - minimal content overlap",
        ("Likely original content", "Normal similarity for same topic"),
    ),
)

_LOWEST_LEVEL = (
    "Very Low",
    "Very low similarity - distinct content",
    ("Content appears original", "No plagiarism concerns"),
)


def analyze_document(content: str, tokens: Sequence[str]) -> DocumentStats:
    """Gather word, sentence and vocabulary statistics for *content*."""
    word_count = len(tokens)
    sentence_count = sum(1 for _ in _SENTENCE_END.finditer(content)) or 1
    unique_words = len(set(tokens))
    return DocumentStats(
        word_count=word_count,
        character_count=len(content),
        sentence_count=sentence_count,
        unique_words=unique_words,
        average_words_per_sentence=word_count / sentence_count,
        lexical_diversity=unique_words / word_count if word_count else 0.0,
    )


def analyze_similarity_confidence(
    cosine: float, tfidf: float, jaccard_char: float, jaccard_word: float
) -> SimilarityConfidence:
    """Combine the four similarity scores into a rated confidence."""
    score = cosine * 0.4 + jaccard_char * 0.3 + jaccard_word * 0.2 + tfidf * 0.1

    for bound, level, interpretation, indicators in _LEVELS:
        if score >= bound:
            break
    else:
        level, interpretation, indicators = _LOWEST_LEVEL

    found = list(indicators)
    if cosine > 0.8:
        found.append("High word frequency similarity")
    if jaccard_char > 0.7:
        found.append("Similar character patterns detected")
    if jaccard_word > 0.6:
        found.append("Similar phrase structures found")
    if tfidf > 0.5:
        found.append("Shared rare or distinctive terms")

    return SimilarityConfidence(
        score=score, level=level, interpretation=interpretation, indicators=found
    )


def analyze_sentence_similarity(content1: str, content2: str) -> list[tuple[float, str]]:
    """Sentences of *content1* that closely match some sentence of *content2*.

    Each result is (best cosine similarity, sentence); only scores above 0.6
    are kept, highest first.
    """
    processor = TextProcessor()
    candidates = [
        processor.term_frequencies(sentence)
        for sentence in split_into_sentences(content2)
        if len(sentence) >= _MIN_SENTENCE_LENGTH
    ]

    results: list[tuple[float, str]] = []
    for sentence in split_into_sentences(content1):
        if len(sentence) < _MIN_SENTENCE_LENGTH:
            continue
        tf = processor.term_frequencies(sentence)
        best = max((cosine_similarity(tf, other) for other in candidates), default=0.0)
        if best > _SENTENCE_REPORT_THRESHOLD:
            results.append((best, sentence))

    results.sort(key=lambda item: item[0], reverse=True)
    return results


def generate_analysis_summary(
    stats1: DocumentStats, stats2: DocumentStats, confidence: SimilarityConfidence
) -> str:
    """Render a human-readable report comparing two documents."""
    lines = [
        "=== ANALYSIS SUMMARY ===",
        "",
        "Document Comparison:",
        f"Document 1: {stats1.word_count} words, {stats1.sentence_count} sentences",
        f"Document 2: {stats2.word_count} words, {stats2.sentence_count} sentences",
        "",
        "Similarity Assessment:",
        f"Confidence Level: {confidence.level}",
        f"Overall Score: {confidence.score * 100:.1f}%",
        f"Interpretation: {confidence.interpretation}",
        "",
    ]

    if confidence.indicators:
        lines.append("Key Indicators:")
        lines.extend(f"• {indicator}" for indicator in confidence.indicators)
        lines.append("")

    longest = max(stats1.word_count, stats2.word_count)
    if longest:
        size_diff = abs(stats1.word_count - stats2.word_count) / longest
        if size_diff < 0.1:
            lines.append("• Documents are similar in length")
        elif size_diff > 0.5:
            lines.append("• Significant difference in document length")

    if abs(stats1.lexical_diversity - stats2.lexical_diversity) < 0.1:
        lines.append("• Similar vocabulary complexity")

    return "\n".join(lines) + "\n"


def split_into_sentences(text: str) -> list[str]:
    """Split *text* at runs of sentence punctuation, keeping pieces over five characters."""
    pieces = (piece.strip(_TRIM) for piece in _SENTENCE_BREAK.split(text))
    return [piece for piece in pieces if len(piece) > 5]


def top_words(term_freq: Mapping[str, float], count: int = 5) -> list[str]:
    """The *count* terms with the highest frequency, most frequent first."""
    ranked = sorted(term_freq.items(), key=lambda item: item[1], reverse=True)
    return [word for word, _ in ranked[:count]]