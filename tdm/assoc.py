from typing import TYPE_CHECKING, List, Optional, Tuple

import numpy as np

from .errors import TermNotFoundError

if TYPE_CHECKING:
    from .matrix import TermCountMatrix


def _pearson_against(m: 'TermCountMatrix', x: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Pearson r of dense vector ``x`` against every column of ``m``.

    Returns (r, defined); r is 0 where the denominator vanishes.
    """
    n = float(m.n_docs)
    X = m.counts.astype(np.float64)
    x = x.astype(np.float64)

    sx = x.sum()
    sxx = (x * x).sum()
    sy = np.asarray(X.sum(axis=0)).ravel()
    syy = np.asarray(X.multiply(X).sum(axis=0)).ravel()
    sxy = np.asarray(X.T @ x).ravel()

    num = n * sxy - sx * sy
    den_sq = (n * sxx - sx * sx) * (n * syy - sy * sy)
    defined = den_sq > 0
    r = np.zeros_like(num)
    r[defined] = num[defined] / np.sqrt(den_sq[defined])
    np.clip(r, -1.0, 1.0, out=r)
    return r, defined


def find_associations(m: 'TermCountMatrix', term: str, min_correlation: float,
                      digits: Optional[int] = None) -> List[Tuple[str, float]]:
    """Terms whose per-document counts correlate with ``term`` at >= min_correlation.

    Ordered by descending r, ties alphabetical. Columns with zero variance
    have no defined correlation and are left out; if ``term`` itself is
    constant across documents the result is empty.
    """
    if m.n_docs == 0:
        return []
    ref = m.term_index(term)
    r, defined = _pearson_against(m, m.column(term))
    if digits is not None:
        r = np.round(r, digits)

    hits = [(m.terms[j], float(r[j]))
            for j in np.flatnonzero(defined & (r >= min_correlation))
            if j != ref]
    hits.sort(key=lambda kv: (-kv[1], kv[0]))
    return hits


def correlation(m: 'TermCountMatrix', a: str, b: str) -> Optional[float]:
    """Pearson r between two terms' columns, None when undefined."""
    for t in (a, b):
        if t not in m:
            raise TermNotFoundError(t)
    if m.n_docs == 0:
        return None
    r, defined = _pearson_against(m, m.column(a))
    j = m.term_index(b)
    return float(r[j]) if defined[j] else None
