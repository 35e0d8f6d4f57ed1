import re
import string
from dataclasses import dataclass, field
from functools import reduce
from typing import Callable, Dict, FrozenSet, Iterable, List, Tuple

from loguru import logger

from .data import Corpus

Transform = Callable[[str], str]

_PUNCT_TABLE = str.maketrans('', '', string.punctuation)
_DIGITS_RE = re.compile(r'\d+')
_MULTISPACE_RE = re.compile(r'\s+')

# NLTK resources are fetched lazily so importing the package never hits the network
_NLTK_RESOURCES = {
    'stopwords': 'corpora/stopwords',
    'wordnet': 'corpora/wordnet',
    'omw-1.4': 'corpora/omw-1.4',
}


def _ensure_nltk(*names: str) -> None:
    import nltk
    for name in names:
        try:
            nltk.data.find(_NLTK_RESOURCES[name])
        except LookupError:
            logger.info("downloading nltk resource {}", name)
            nltk.download(name, quiet=True)


def to_lower(text: str) -> str:
    return text.lower()


def remove_punctuation(text: str) -> str:
    return text.translate(_PUNCT_TABLE)


def remove_numbers(text: str) -> str:
    return _DIGITS_RE.sub('', text)


def strip_whitespace(text: str) -> str:
    return _MULTISPACE_RE.sub(' ', text).strip()


def remove_words(words: Iterable[str]) -> Transform:
    """Drop whole whitespace-delimited tokens found in ``words``."""
    drop = frozenset(words)

    def _remove(text: str) -> str:
        return ' '.join(tok for tok in text.split() if tok not in drop)
    return _remove


def stem_words(language: str = 'english') -> Transform:
    from nltk.stem.snowball import SnowballStemmer
    stemmer = SnowballStemmer(language)

    def _stem(text: str) -> str:
        return ' '.join(stemmer.stem(tok) for tok in text.split())
    return _stem


def lemmatize_words() -> Transform:
    _ensure_nltk('wordnet', 'omw-1.4')
    from nltk.stem import WordNetLemmatizer
    wnl = WordNetLemmatizer()

    def _lemmatize(text: str) -> str:
        return ' '.join(wnl.lemmatize(tok) for tok in text.split())
    return _lemmatize


def english_stopwords(source: str = 'nltk') -> FrozenSet[str]:
    if source == 'nltk':
        _ensure_nltk('stopwords')
        from nltk.corpus import stopwords
        return frozenset(stopwords.words('english'))
    if source == 'sklearn':
        from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS
        return frozenset(ENGLISH_STOP_WORDS)
    raise ValueError(f"Unknown stopword source: {source}")


def compose(*transforms: Transform) -> Transform:
    """Chain transforms left to right."""
    def _composed(text: str) -> str:
        return reduce(lambda acc, fn: fn(acc), transforms, text)
    return _composed


@dataclass(frozen=True)
class CleaningProfile:
    name: str = 'basic'

    lowercase: bool = True
    punctuation: bool = True
    numbers: bool = True
    collapse_whitespace: bool = True

    stopwords: bool = False
    stopword_source: str = 'nltk'
    extra_stopwords: Tuple[str, ...] = field(default_factory=tuple)

    # stemming wins if both are set
    stem: bool = False
    lemmatize: bool = False


def profile_from_cfg(cfg: Dict) -> CleaningProfile:
    # allow empty cfg
    cfg = cfg or {}
    return CleaningProfile(
        name=str(cfg.get('name', 'basic')),
        lowercase=bool(cfg.get('lowercase', True)),
        punctuation=bool(cfg.get('punctuation', True)),
        numbers=bool(cfg.get('numbers', True)),
        collapse_whitespace=bool(cfg.get('collapse_whitespace', True)),
        stopwords=bool(cfg.get('stopwords', False)),
        stopword_source=str(cfg.get('stopword_source', 'nltk')),
        extra_stopwords=tuple(str(w) for w in (cfg.get('extra_stopwords') or [])),
        stem=bool(cfg.get('stem', False)),
        lemmatize=bool(cfg.get('lemmatize', False)),
    )


def build_pipeline(prof: CleaningProfile) -> Transform:
    steps: List[Transform] = []
    if prof.lowercase:
        steps.append(to_lower)
    if prof.punctuation:
        steps.append(remove_punctuation)
    if prof.numbers:
        steps.append(remove_numbers)

    drop = set(prof.extra_stopwords)
    if prof.stopwords:
        drop |= english_stopwords(prof.stopword_source)
    if drop:
        steps.append(remove_words(drop))

    if prof.stem:
        steps.append(stem_words())
    elif prof.lemmatize:
        steps.append(lemmatize_words())

    if prof.collapse_whitespace:
        steps.append(strip_whitespace)
    return compose(*steps)


def clean_corpus(corpus: Corpus, prof: CleaningProfile) -> Corpus:
    logger.debug("cleaning {} documents with profile {}", len(corpus), prof.name)
    return corpus.map(build_pipeline(prof))
