"""Text similarity measures (cosine, TF-IDF, Jaccard shingling), document analysis and the simtext command."""

__version__ = "2.1.0"