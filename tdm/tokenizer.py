from dataclasses import dataclass
from typing import Iterator, Protocol

from .errors import ConfigurationError


@dataclass(frozen=True)
class TokenSequence:
    """Lazy, re-iterable tokens of one document.

    Each iteration re-derives the windows from ``text``; nothing is cached.
    """
    text: str
    n: int = 1

    def __iter__(self) -> Iterator[str]:
        words = self.text.split()
        if self.n == 1:
            yield from words
            return
        for i in range(len(words) - self.n + 1):
            yield ' '.join(words[i:i + self.n])

    def __len__(self) -> int:
        return max(0, len(self.text.split()) - self.n + 1)


class Tokenizer(Protocol):
    def tokenize(self, text: str) -> TokenSequence: ...


class WordTokenizer:
    """Whitespace unigrams; expects punctuation already stripped upstream."""

    def tokenize(self, text: str) -> TokenSequence:
        return TokenSequence(text, 1)

    def __repr__(self) -> str:
        return 'WordTokenizer()'


class NGramTokenizer:
    def __init__(self, n: int = 2):
        if n < 1:
            raise ConfigurationError(f"n-gram size must be >= 1, got {n}")
        self.n = n

    def tokenize(self, text: str) -> TokenSequence:
        return TokenSequence(text, self.n)

    def __repr__(self) -> str:
        return f'NGramTokenizer(n={self.n})'


def make_tokenizer(ngram: int = 1) -> Tokenizer:
    if ngram == 1:
        return WordTokenizer()
    return NGramTokenizer(ngram)
