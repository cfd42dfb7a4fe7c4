# simtext

Compare text documents and report how similar they are. Four measures are
available:

- **cosine**: cosine similarity of term-frequency vectors
- **tfidf**: cosine similarity with every term weighted by its inverse
  document frequency, log(N / df), over the two documents compared
- **jaccard-char**: Jaccard similarity of character shingles
- **jaccard-word**: Jaccard similarity of word shingles

It can also report per-document statistics, rate the combined score with a
confidence level for possible plagiarism, and list the sentences of the
first document that closely match a sentence of the second.

## Installation

```
pip install .
```

## Command line

```
simtext [options] <file1> <file2> [file3...]
```

Every pair of the files given is compared, in the order given. At least two
files are required.

| Option | Meaning |
| --- | --- |
| `--algorithm ALGO` | `cosine`, `tfidf`, `jaccard-char`, `jaccard-word` or `all` (default `cosine`) |
| `--ignore-stopwords` | Leave out stopwords |
| `--stopwords-file FILE` | Read stopwords from a file, one per line |
| `--output FORMAT` | `simple`, `detailed` or `json` (default `simple`) |
| `--shingle-size N` | Shingle size for the Jaccard measures (default 3) |
| `--threshold N` | Show only pairs whose best computed score reaches N (0.0–1.0) |
| `--timing` | Show processing times |
| `--analysis` | Add document statistics and a confidence assessment (shown with `--output detailed`) |
| `--sentence-check` | List up to five highly similar sentences (shown with `--output detailed`) |
| `--help`, `-h` | Show help |

Stopwords are only removed when `--ignore-stopwords` is given; there is no
built-in list, so pair it with `--stopwords-file`.

With `--algorithm all`, the `simple` format prints the cosine score.

An unknown algorithm or output format, an unreadable file, or a malformed
number gives an error message and exit status 1.

Examples:

```
simtext doc1.txt doc2.txt
simtext --algorithm all --output detailed --analysis doc1.txt doc2.txt
simtext --analysis --sentence-check essay1.txt essay2.txt
simtext --algorithm jaccard-word --shingle-size 4 --ignore-stopwords --stopwords-file stop.txt a.txt b.txt c.txt
```

## Library use

```python
from simtext.text_processor import TextProcessor
from simtext.similarity import cosine_similarity, compute_idf, tfidf_cosine_similarity
from simtext.shingling import character_shingles, word_shingles, jaccard_similarity

processor = TextProcessor(ignore_stopwords=False)
tf1 = processor.term_frequencies("the cat sat on the mat")
tf2 = processor.term_frequencies("the cat lay on the rug")

print(cosine_similarity(tf1, tf2))
idf = compute_idf([tf1, tf2])
print(tfidf_cosine_similarity(tf1, tf2, idf))

print(jaccard_similarity(character_shingles("hello world", 3),
                         character_shingles("hello there", 3)))
print(jaccard_similarity(word_shingles(processor.process_text("a b c d"), 2),
                         word_shingles(processor.process_text("b c d e"), 2)))
```

- `simtext.text_processor.TextProcessor` splits text on whitespace, strips
  punctuation from the ends of each token and lower-cases it.
  `load_stopwords(filename)` adds words from a file (a missing file adds
  nothing); `process_text` returns the tokens; `term_frequencies` returns
  each token's share of all tokens.
- `simtext.shingling` also has `generate_shingles(text, w=3)`, character
  shingles with a default width of three. Character shingles are taken from
  the text with only ASCII letters, digits and whitespace kept.
- `simtext.document_analyzer` provides `analyze_document`,
  `analyze_similarity_confidence`, `analyze_sentence_similarity`,
  `generate_analysis_summary`, `split_into_sentences` and `top_words`, with
  the `DocumentStats` and `SimilarityConfidence` dataclasses.
- `simtext.cli` holds `parse_arguments`, `calculate_similarity`,
  `format_results` and `main`, which the `simtext` command runs.

## Limitations

The `json` output is JSON-like rather than strict JSON: each score line ends
with a comma, and file names are written without escaping. Use a different
format, or the library functions, where a JSON parser must read the result.

## Tests

```
pip install .[test]
pytest
```