"""Frequency queries over a TermCountMatrix.

All functions take the matrix as first argument and derive counts from its
column sums on every call; nothing is cached on the matrix.
"""
from collections import Counter
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

if TYPE_CHECKING:
    from .matrix import TermCountMatrix


def _column_sums(m: 'TermCountMatrix') -> np.ndarray:
    return np.asarray(m.counts.sum(axis=0)).ravel()


def term_frequencies(m: 'TermCountMatrix') -> Dict[str, int]:
    return {t: int(c) for t, c in zip(m.terms, _column_sums(m))}


def most_frequent(m: 'TermCountMatrix', k: int) -> List[Tuple[str, int]]:
    if k < 0:
        raise ValueError(f"k must be >= 0, got {k}")
    items = sorted(term_frequencies(m).items(), key=lambda kv: (-kv[1], kv[0]))
    return items[:k]


def least_frequent(m: 'TermCountMatrix', k: int) -> List[Tuple[str, int]]:
    if k < 0:
        raise ValueError(f"k must be >= 0, got {k}")
    items = sorted(term_frequencies(m).items(), key=lambda kv: (kv[1], kv[0]))
    return items[:k]


def find_frequent_terms(m: 'TermCountMatrix', min_count: int,
                        max_count: Optional[int] = None) -> List[str]:
    """Terms with total count in [min_count, max_count], alphabetical."""
    freqs = term_frequencies(m)
    hits = [t for t, c in freqs.items()
            if c >= min_count and (max_count is None or c <= max_count)]
    return sorted(hits)


def frequency_table(m: 'TermCountMatrix') -> pd.DataFrame:
    """Per-term count, document frequency and length, most frequent first."""
    freqs = term_frequencies(m)
    dfs = m.doc_frequencies()
    tab = pd.DataFrame({
        'term': list(m.terms),
        'count': [freqs[t] for t in m.terms],
        'doc_freq': [dfs[t] for t in m.terms],
        'length': [len(t) for t in m.terms],
    })
    tab = tab.sort_values(['count', 'term'], ascending=[False, True], kind='mergesort')
    return tab.reset_index(drop=True)


def term_length_counts(m: 'TermCountMatrix', weighted: bool = False) -> Dict[int, int]:
    """Histogram of term lengths; ``weighted`` counts every occurrence."""
    hist: Counter = Counter()
    if weighted:
        for t, c in term_frequencies(m).items():
            hist[len(t)] += c
    else:
        hist.update(len(t) for t in m.terms)
    return dict(sorted(hist.items()))
