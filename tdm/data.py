from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Tuple, Union, overload

import pandas as pd
from loguru import logger


@dataclass(frozen=True)
class Document:
    doc_id: int
    text: str


@dataclass(frozen=True)
class Corpus:
    docs: Tuple[Document, ...]

    @classmethod
    def from_texts(cls, texts: Iterable[str]) -> 'Corpus':
        return cls(tuple(Document(doc_id=i, text=t) for i, t in enumerate(texts)))

    def __len__(self) -> int:
        return len(self.docs)

    def __iter__(self) -> Iterator[Document]:
        return iter(self.docs)

    @overload
    def __getitem__(self, i: int) -> Document: ...

    @overload
    def __getitem__(self, i: slice) -> 'Corpus': ...

    def __getitem__(self, i: Union[int, slice]):
        if isinstance(i, slice):
            return Corpus(self.docs[i])
        return self.docs[i]

    @property
    def texts(self) -> List[str]:
        return [d.text for d in self.docs]

    @property
    def doc_ids(self) -> List[int]:
        return [d.doc_id for d in self.docs]

    def map(self, transform: Callable[[str], str]) -> 'Corpus':
        """Apply a text transform to every document, keeping ids and order."""
        return Corpus(tuple(replace(d, text=transform(d.text)) for d in self.docs))


def load_directory(path: Union[str, Path], pattern: str = '*.txt',
                   encoding: str = 'utf-8') -> Corpus:
    """One document per file, files in name order."""
    root = Path(path)
    if not root.is_dir():
        raise FileNotFoundError(f"corpus directory not found: {root}")
    files = sorted(p for p in root.glob(pattern) if p.is_file())
    logger.debug("loading {} files from {}", len(files), root)
    return Corpus.from_texts(p.read_text(encoding=encoding) for p in files)


def load_dataframe(df: pd.DataFrame, column: str) -> Corpus:
    if column not in df.columns:
        raise KeyError(f"column {column!r} not in frame; have {list(df.columns)}")
    # missing cells become empty documents so row order is preserved
    texts = df[column].fillna('').astype(str).tolist()
    return Corpus.from_texts(texts)


def load_csv(path: Union[str, Path], column: str, **read_csv_kwargs) -> Corpus:
    df = pd.read_csv(path, **read_csv_kwargs)
    logger.debug("read {} rows from {}", len(df), path)
    return load_dataframe(df, column)
