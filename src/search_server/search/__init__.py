"""
Search indexing and query engine package.

This package provides a pure-Python TF-IDF search stack:
- analyzers: Whitespace tokenizer and stop-word filter
- index: In-memory inverted index with document metadata
- query: Plus/minus query parsing
- stats: Term frequency and IDF helpers
- ranking: Top-K TF-IDF ranking
- matcher: Per-document query term matching
"""
