from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
import scipy.sparse as sp
from loguru import logger

from . import assoc, freq
from .data import Corpus
from .errors import ConfigurationError, TermNotFoundError
from .tokenizer import Tokenizer, WordTokenizer


@dataclass(frozen=True)
class Bounds:
    """Inclusive vocabulary bounds; ``None`` leaves that side open."""
    min_doc_freq: Optional[int] = None
    max_doc_freq: Optional[int] = None
    min_term_length: Optional[int] = None
    max_term_length: Optional[int] = None

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if _crossed(self.min_doc_freq, self.max_doc_freq):
            raise ConfigurationError(
                f"min_doc_freq ({self.min_doc_freq}) > max_doc_freq ({self.max_doc_freq})")
        if _crossed(self.min_term_length, self.max_term_length):
            raise ConfigurationError(
                f"min_term_length ({self.min_term_length}) > max_term_length ({self.max_term_length})")

    def admits(self, term: str, doc_freq: int) -> bool:
        return (_within(doc_freq, self.min_doc_freq, self.max_doc_freq)
                and _within(len(term), self.min_term_length, self.max_term_length))


def _crossed(lo: Optional[int], hi: Optional[int]) -> bool:
    return lo is not None and hi is not None and lo > hi


def _within(value: int, lo: Optional[int], hi: Optional[int]) -> bool:
    if lo is not None and value < lo:
        return False
    if hi is not None and value > hi:
        return False
    return True


def bounds_from_cfg(cfg: Dict) -> Bounds:
    cfg = cfg or {}

    def _opt(key: str) -> Optional[int]:
        v = cfg.get(key)
        return None if v is None else int(v)
    return Bounds(
        min_doc_freq=_opt('min_doc_freq'),
        max_doc_freq=_opt('max_doc_freq'),
        min_term_length=_opt('min_term_length'),
        max_term_length=_opt('max_term_length'),
    )


class TermCountMatrix:
    """Sparse document x term counts, read-only once built.

    Rows follow corpus order, columns are the vocabulary sorted
    alphabetically. Cells absent from the CSR structure are zero.
    """

    def __init__(self, counts: sp.csr_matrix, terms: Sequence[str], doc_ids: Sequence[int]):
        if counts.shape != (len(doc_ids), len(terms)):
            raise ValueError(f"counts shape {counts.shape} does not match "
                             f"{len(doc_ids)} docs x {len(terms)} terms")
        self._counts = sp.csr_matrix(counts, dtype=np.int64, copy=True)
        self._counts.sort_indices()
        self._counts.data.flags.writeable = False
        self._terms: Tuple[str, ...] = tuple(terms)
        self._doc_ids: Tuple[int, ...] = tuple(doc_ids)
        self._index: Dict[str, int] = {t: j for j, t in enumerate(self._terms)}

    # --- structure ---

    @property
    def counts(self) -> sp.csr_matrix:
        return self._counts

    @property
    def terms(self) -> Tuple[str, ...]:
        return self._terms

    @property
    def doc_ids(self) -> Tuple[int, ...]:
        return self._doc_ids

    @property
    def n_docs(self) -> int:
        return len(self._doc_ids)

    @property
    def n_terms(self) -> int:
        return len(self._terms)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.n_docs, self.n_terms

    @property
    def nnz(self) -> int:
        return int(self._counts.nnz)

    def __contains__(self, term: str) -> bool:
        return term in self._index

    def __repr__(self) -> str:
        return f'TermCountMatrix(docs={self.n_docs}, terms={self.n_terms}, nnz={self.nnz})'

    def term_index(self, term: str) -> int:
        try:
            return self._index[term]
        except KeyError:
            raise TermNotFoundError(term) from None

    def row(self, i: int) -> Dict[str, int]:
        """Non-zero counts of the i-th document (corpus position)."""
        if not -self.n_docs <= i < self.n_docs:
            raise IndexError(f"row {i} out of range for {self.n_docs} documents")
        i %= self.n_docs
        start, end = self._counts.indptr[i], self._counts.indptr[i + 1]
        cols = self._counts.indices[start:end]
        vals = self._counts.data[start:end]
        return {self._terms[j]: int(v) for j, v in zip(cols, vals)}

    def column(self, term: str) -> np.ndarray:
        j = self.term_index(term)
        return self._counts[:, j].toarray().ravel()

    def get(self, i: int, term: str) -> int:
        return int(self._counts[i, self.term_index(term)])

    def nonzero(self) -> Iterator[Tuple[int, str, int]]:
        """Yield (doc_id, term, count) row by row, columns ascending."""
        for i in range(self.n_docs):
            start, end = self._counts.indptr[i], self._counts.indptr[i + 1]
            for j, v in zip(self._counts.indices[start:end], self._counts.data[start:end]):
                yield self._doc_ids[i], self._terms[j], int(v)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self._counts.toarray(), index=list(self._doc_ids),
                            columns=list(self._terms))

    def term_document(self) -> 'TermDocumentMatrix':
        return TermDocumentMatrix(self)

    def doc_frequencies(self) -> Dict[str, int]:
        # stored cells are always positive, so stored-per-column == doc freq
        per_col = np.diff(self._counts.tocsc().indptr)
        return {t: int(n) for t, n in zip(self._terms, per_col)}

    def select_terms(self, keep: Sequence[str]) -> 'TermCountMatrix':
        cols = sorted(self.term_index(t) for t in set(keep))
        if not cols:
            return TermCountMatrix(sp.csr_matrix((self.n_docs, 0), dtype=np.int64), [], self._doc_ids)
        return TermCountMatrix(self._counts[:, cols], [self._terms[j] for j in cols], self._doc_ids)

    def remove_sparse_terms(self, sparse: float) -> 'TermCountMatrix':
        """Keep terms whose share of empty documents is below ``sparse``."""
        if not 0 < sparse < 1:
            raise ConfigurationError(f"sparse must be in (0, 1), got {sparse}")
        df = self.doc_frequencies()
        threshold = self.n_docs * (1 - sparse)
        kept = [t for t in self._terms if df[t] > threshold]
        logger.debug("remove_sparse_terms({}): kept {} of {} terms", sparse, len(kept), self.n_terms)
        return self.select_terms(kept)

    def tfidf(self, norm: Optional[str] = 'l2', smooth_idf: bool = True,
              sublinear_tf: bool = False) -> sp.csr_matrix:
        """TF-IDF weights of the counts, same row/column layout."""
        if self.n_docs == 0 or self.n_terms == 0:
            return sp.csr_matrix(self.shape, dtype=np.float64)
        from sklearn.feature_extraction.text import TfidfTransformer
        tf = TfidfTransformer(norm=norm, smooth_idf=smooth_idf, sublinear_tf=sublinear_tf)
        return sp.csr_matrix(tf.fit_transform(self._counts))

    # --- queries ---

    def term_frequencies(self) -> Dict[str, int]:
        return freq.term_frequencies(self)

    def most_frequent(self, k: int) -> List[Tuple[str, int]]:
        return freq.most_frequent(self, k)

    def least_frequent(self, k: int) -> List[Tuple[str, int]]:
        return freq.least_frequent(self, k)

    def find_frequent_terms(self, min_count: int, max_count: Optional[int] = None) -> List[str]:
        return freq.find_frequent_terms(self, min_count, max_count)

    def find_associations(self, term: str, min_correlation: float,
                          digits: Optional[int] = None) -> List[Tuple[str, float]]:
        return assoc.find_associations(self, term, min_correlation, digits=digits)

    def correlation(self, a: str, b: str) -> Optional[float]:
        return assoc.correlation(self, a, b)


class TermDocumentMatrix:
    """Transposed (term x document) view over a TermCountMatrix."""

    def __init__(self, dtm: TermCountMatrix):
        self.dtm = dtm

    @property
    def counts(self) -> sp.csr_matrix:
        return self.dtm.counts.T.tocsr()

    @property
    def shape(self) -> Tuple[int, int]:
        return self.dtm.n_terms, self.dtm.n_docs

    @property
    def terms(self) -> Tuple[str, ...]:
        return self.dtm.terms

    @property
    def doc_ids(self) -> Tuple[int, ...]:
        return self.dtm.doc_ids

    def row(self, term: str) -> Dict[int, int]:
        col = self.dtm.column(term)
        return {self.dtm.doc_ids[i]: int(col[i]) for i in np.flatnonzero(col)}

    def to_frame(self) -> pd.DataFrame:
        return self.dtm.to_frame().T


def build_matrix(corpus: Corpus, tokenizer: Optional[Tokenizer] = None,
                 bounds: Optional[Bounds] = None) -> TermCountMatrix:
    # fail fast on bad bounds before touching any document
    if bounds is not None:
        bounds.validate()
    tokenizer = tokenizer or WordTokenizer()

    doc_counts: List[Counter] = [Counter(tokenizer.tokenize(d.text)) for d in corpus]
    doc_freq: Counter = Counter()
    for c in doc_counts:
        doc_freq.update(c.keys())

    if bounds is None:
        vocab = sorted(doc_freq)
    else:
        vocab = sorted(t for t, n in doc_freq.items() if bounds.admits(t, n))
    index = {t: j for j, t in enumerate(vocab)}

    indptr = [0]
    indices: List[int] = []
    values: List[int] = []
    for c in doc_counts:
        for tok, n in c.items():
            j = index.get(tok)
            if j is not None:
                indices.append(j)
                values.append(n)
        indptr.append(len(indices))

    counts = sp.csr_matrix(
        (np.asarray(values, dtype=np.int64), np.asarray(indices, dtype=np.int64),
         np.asarray(indptr, dtype=np.int64)),
        shape=(len(doc_counts), len(vocab)),
    )
    logger.debug("built {}x{} matrix ({} candidate terms, {} non-zero cells) with {}",
                 counts.shape[0], counts.shape[1], len(doc_freq), counts.nnz, tokenizer)
    return TermCountMatrix(counts, vocab, corpus.doc_ids)
