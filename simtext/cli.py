"""Command-line front end: compare every pair of the files given."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from itertools import combinations
from pathlib import Path

from simtext.document_analyzer import (
    DocumentStats,
    SimilarityConfidence,
    analyze_document,
    analyze_sentence_similarity,
    analyze_similarity_confidence,
    generate_analysis_summary,
)
from simtext.shingling import character_shingles, jaccard_similarity, word_shingles
from simtext.similarity import compute_idf, cosine_similarity, tfidf_cosine_similarity
from simtext.text_processor import TextProcessor

_MAX_REPORTED_SENTENCES = 5


class Algorithm(Enum):
    """Which similarity measure to compute."""

    COSINE = "cosine"
    TFIDF = "tfidf"
    JACCARD_CHAR = "jaccard-char"
    JACCARD_WORD = "jaccard-word"
    ALL = "all"


class OutputFormat(Enum):
    """How results are written."""

    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


@dataclass
class Config:
    """Options gathered from the command line."""

    ignore_stopwords: bool = False
    stopwords_file: str = ""
    algorithm: Algorithm = Algorithm.COSINE
    output_format: OutputFormat = OutputFormat.SIMPLE
    shingle_size: int = 3
    show_timings: bool = False
    show_analysis: bool = False
    show_sentences: bool = False
    threshold: float = 0.0
    files: list[str] = field(default_factory=list)
    show_help: bool = False


@dataclass
class SimilarityResult:
    """Every score and analysis computed for one pair of files."""

    cosine: float = 0.0
    tfidf: float = 0.0
    jaccard_char: float = 0.0
    jaccard_word: float = 0.0
    duration: float = 0.0
    stats1: DocumentStats = field(default_factory=DocumentStats)
    stats2: DocumentStats = field(default_factory=DocumentStats)
    confidence: SimilarityConfidence = field(default_factory=SimilarityConfidence)
    sentence_similarities: list[tuple[float, str]] = field(default_factory=list)


def _uses(config: Config, algorithm: Algorithm) -> bool:
    return config.algorithm in (algorithm, Algorithm.ALL)


def read_file(filename: str | Path) -> str:
    """Return the whole contents of *filename*."""
    try:
        with open(filename, encoding="utf-8", errors="replace", newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise OSError(f"Could not open file: {filename}") from exc


def usage() -> str:
    """The help text."""
    return (
        "SimText - Advanced Text Similarity Checker v2.1\n\n"
        "Usage: simtext [options] <file1> <file2> [file3...]\n\n"
        "Options:\n"
        "  --algorithm ALGO        Algorithm to use: cosine, tfidf, jaccard-char, jaccard-word, all (default: cosine)\n"
        "  --ignore-stopwords      Ignore common stopwords\n"
        "  --stopwords-file FILE   Use custom stopwords file\n"
        "  --output FORMAT         Output format: simple, detailed, json (default: simple)\n"
        "  --shingle-size N        Size of shingles for Jaccard similarity (default: 3)\n"
        "  --threshold N           Only show results above threshold (0.0-1.0)\n"
        "  --timing                Show execution times\n"
        "  --analysis              Show detailed plagiarism analysis and confidence levels\n"
        "  --sentence-check        Show sentence-level similarity analysis\n"
        "  --help, -h              Show this help message\n\n"
        "Examples:\n"
        "  simtext doc1.txt doc2.txt\n"
        "  simtext --algorithm all --output detailed --analysis doc1.txt doc2.txt\n"
        "  simtext --analysis --sentence-check essay1.txt essay2.txt\n"
        "  simtext --algorithm jaccard-word --shingle-size 4 --ignore-stopwords *.txt\n"
    )


def parse_arguments(args: Sequence[str]) -> Config:
    """Build a Config from *args*.

    Parsing stops at --help or -h, which sets ``show_help``.  An unknown
    algorithm or output format, or a malformed number, raises ValueError.
    Options lacking their value and unknown options are ignored.
    """
    config = Config()
    remaining = iter(args)
    valued = {"--stopwords-file", "--algorithm", "--output", "--shingle-size", "--threshold"}

    for arg in remaining:
        if arg in ("--help", "-h"):
            config.show_help = True
            return config
        if arg in valued:
            value = next(remaining, None)
            if value is None:
                continue
            if arg == "--stopwords-file":
                config.stopwords_file = value
            elif arg == "--algorithm":
                try:
                    config.algorithm = Algorithm(value)
                except ValueError:
                    raise ValueError(f"Unknown algorithm: {value}") from None
            elif arg == "--output":
                try:
                    config.output_format = OutputFormat(value)
                except ValueError:
                    raise ValueError(f"Unknown output format: {value}") from None
            elif arg == "--shingle-size":
                config.shingle_size = int(value)
            else:
                config.threshold = float(value)
        elif arg == "--ignore-stopwords":
            config.ignore_stopwords = True
        elif arg == "--timing":
            config.show_timings = True
        elif arg == "--analysis":
            config.show_analysis = True
        elif arg == "--sentence-check":
            config.show_sentences = True
        elif not arg.startswith("-"):
            config.files.append(arg)

    return config


def calculate_similarity(
    file1: str | Path, file2: str | Path, config: Config, processor: TextProcessor
) -> SimilarityResult:
    """Read both files and compute the measures *config* asks for."""
    start = time.perf_counter()
    result = SimilarityResult()

    content1 = read_file(file1)
    content2 = read_file(file2)

    tf1 = processor.term_frequencies(content1)
    tf2 = processor.term_frequencies(content2)

    if _uses(config, Algorithm.COSINE):
        result.cosine = cosine_similarity(tf1, tf2)

    if _uses(config, Algorithm.TFIDF):
        idf = compute_idf([tf1, tf2])
        result.tfidf = tfidf_cosine_similarity(tf1, tf2, idf)

    if _uses(config, Algorithm.JACCARD_CHAR):
        result.jaccard_char = jaccard_similarity(
            character_shingles(content1, config.shingle_size),
            character_shingles(content2, config.shingle_size),
        )

    if _uses(config, Algorithm.JACCARD_WORD):
        result.jaccard_word = jaccard_similarity(
            word_shingles(processor.process_text(content1), config.shingle_size),
            word_shingles(processor.process_text(content2), config.shingle_size),
        )

    if config.show_analysis:
        result.stats1 = analyze_document(content1, processor.process_text(content1))
        result.stats2 = analyze_document(content2, processor.process_text(content2))
        result.confidence = analyze_similarity_confidence(
            result.cosine, result.tfidf, result.jaccard_char, result.jaccard_word
        )

    if config.show_sentences:
        result.sentence_similarities = analyze_sentence_similarity(content1, content2)

    result.duration = (time.perf_counter() - start) * 1000.0
    return result


def _format_json(file1: str, file2: str, result: SimilarityResult, config: Config) -> str:
    lines = ["{", f'  "file1": "{file1}",', f'  "file2": "{file2}",', '  "similarity": {']
    measures = (
        (Algorithm.COSINE, "cosine", result.cosine),
        (Algorithm.TFIDF, "tfidf", result.tfidf),
        (Algorithm.JACCARD_CHAR, "jaccard_char", result.jaccard_char),
        (Algorithm.JACCARD_WORD, "jaccard_word", result.jaccard_word),
    )
    lines.extend(
        f'    "{name}": {value:.4f},' for algorithm, name, value in measures if _uses(config, algorithm)
    )
    lines.append("  },")
    if config.show_timings:
        lines.append(f'  "duration_ms": {result.duration:.2f}')
    lines.append("}")
    return "\n".join(lines) + "\n"


def _format_detailed(file1: str, file2: str, result: SimilarityResult, config: Config) -> str:
    parts = [f"=== Similarity Analysis ===\nFile 1: {file1}\nFile 2: {file2}\n\n"]
    measures = (
        (Algorithm.COSINE, "Cosine Similarity:      ", result.cosine),
        (Algorithm.TFIDF, "TF-IDF Similarity:      ", result.tfidf),
        (Algorithm.JACCARD_CHAR, "Jaccard (Character):    ", result.jaccard_char),
        (Algorithm.JACCARD_WORD, "Jaccard (Word):         ", result.jaccard_word),
    )
    parts.extend(
        f"{label}{value * 100:.2f}%\n" for algorithm, label, value in measures if _uses(config, algorithm)
    )

    if config.show_timings:
        parts.append(f"Processing time:        {result.duration:.2f} ms\n")

    if config.show_analysis:
        parts.append("\n" + generate_analysis_summary(result.stats1, result.stats2, result.confidence))

    if config.show_sentences and result.sentence_similarities:
        parts.append("=== HIGH SIMILARITY SENTENCES ===\n")
        for score, sentence in result.sentence_similarities[:_MAX_REPORTED_SENTENCES]:
            parts.append(f"Similarity: {score * 100:.1f}%\n")
            parts.append(f'Sentence: "{sentence}"\n\n')

    parts.append("\n")
    return "".join(parts)


def _format_simple(file1: str, file2: str, result: SimilarityResult, config: Config) -> str:
    choices = {
        Algorithm.TFIDF: (result.tfidf, "TF-IDF"),
        Algorithm.JACCARD_CHAR: (result.jaccard_char, "Jaccard (Character)"),
        Algorithm.JACCARD_WORD: (result.jaccard_word, "Jaccard (Word)"),
    }
    similarity, _name = choices.get(config.algorithm, (result.cosine, "Cosine"))
    line = f"{file1} vs {file2}: {similarity * 100:.1f}%"
    if config.show_timings:
        line += f" ({result.duration:.1f}ms)"
    return line + "\n"


def format_results(
    file1: str, file2: str, result: SimilarityResult, config: Config
) -> str:
    """Render *result* in the configured format; empty if no score reaches the threshold."""
    best = max(result.cosine, result.tfidf, result.jaccard_char, result.jaccard_word)
    if best < config.threshold:
        return ""
    if config.output_format is OutputFormat.JSON:
        return _format_json(file1, file2, result, config)
    if config.output_format is OutputFormat.DETAILED:
        return _format_detailed(file1, file2, result, config)
    return _format_simple(file1, file2, result, config)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)

    if not args:
        sys.stdout.write(usage())
        return 1

    try:
        config = parse_arguments(args)
    except ValueError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1

    if config.show_help:
        sys.stdout.write(usage())
        return 0

    if len(config.files) < 2:
        sys.stderr.write("Error: Please provide at least two files to compare\n")
        sys.stdout.write(usage())
        return 1

    try:
        processor = TextProcessor(ignore_stopwords=config.ignore_stopwords)
        if config.stopwords_file:
            processor.load_stopwords(config.stopwords_file)

        for file1, file2 in combinations(config.files, 2):
            result = calculate_similarity(file1, file2, config, processor)
            sys.stdout.write(format_results(file1, file2, result, config))
            sys.stdout.flush()
        return 0
    except (OSError, ValueError) as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())