from dataclasses import dataclass
from typing import Optional

from loguru import logger

from .clean import clean_corpus
from .config import PipelineConfig, SourceConfig
from .data import Corpus, load_csv, load_directory
from .matrix import TermCountMatrix, build_matrix
from .tokenizer import make_tokenizer


@dataclass(frozen=True)
class PipelineResult:
    raw: Corpus
    cleaned: Corpus
    matrix: TermCountMatrix


def load_source(src: SourceConfig) -> Corpus:
    if src.kind == 'directory':
        return load_directory(src.path, pattern=src.pattern)
    if src.kind == 'csv':
        return load_csv(src.path, src.column)
    return Corpus.from_texts(src.texts)


def run_pipeline(cfg: PipelineConfig, corpus: Optional[Corpus] = None) -> PipelineResult:
    """Load (unless ``corpus`` is given), clean, and build the matrix."""
    # bounds are validated by the dataclass, before any text is touched
    raw = corpus if corpus is not None else load_source(cfg.source)
    cleaned = clean_corpus(raw, cfg.cleaning)
    m = build_matrix(cleaned, make_tokenizer(cfg.ngram), cfg.bounds)
    if cfg.sparse is not None:
        m = m.remove_sparse_terms(cfg.sparse)
    logger.info("{} documents -> {} terms ({} non-zero cells)", m.n_docs, m.n_terms, m.nnz)
    return PipelineResult(raw=raw, cleaned=cleaned, matrix=m)
