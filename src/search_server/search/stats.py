"""Statistical helpers for TF-IDF scoring.

The functions here stay independent of the index layout so they can be
unit tested on plain numbers.
"""

from __future__ import annotations

from collections.abc import Sequence
import math


def term_frequencies(terms: Sequence[str]) -> dict[str, float]:
    """Return the share of ``terms`` taken by each distinct term.

    Each occurrence adds ``1 / len(terms)``, so the values of a non-empty
    document sum to 1.0 up to rounding. An empty sequence has no terms.
    """

    if not terms:
        return {}
    inv_word_count = 1.0 / len(terms)
    frequencies: dict[str, float] = {}
    for term in terms:
        frequencies[term] = frequencies.get(term, 0.0) + inv_word_count
    return frequencies


def calculate_idf(doc_freq: int, total_docs: int) -> float:
    """Return ``ln(total_docs / doc_freq)``, or 0.0 when the term is unseen."""

    if doc_freq <= 0 or total_docs <= 0:
        return 0.0
    return math.log(total_docs / doc_freq)


def tf_idf(tf: float, idf: float) -> float:
    return tf * idf
