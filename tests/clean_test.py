import pytest

from tdm.clean import (CleaningProfile, build_pipeline, clean_corpus, compose, english_stopwords,
                       lemmatize_words, profile_from_cfg, remove_numbers, remove_punctuation, remove_words,
                       stem_words, strip_whitespace, to_lower)
from tdm.data import Corpus


def test_single_transforms():
    assert to_lower("GoAts") == "goats"
    assert remove_punctuation("don't, stop!") == "dont stop"
    assert remove_numbers("3 goats in 2024") == " goats in "
    assert strip_whitespace("  a \t b\n\nc ") == "a b c"
    assert remove_words({'the', 'on'})("the goats on the hill") == "goats hill"


def test_compose_runs_left_to_right():
    fn = compose(to_lower, remove_words({'the'}))
    assert fn("The goats") == "goats"
    assert compose()("unchanged") == "unchanged"


def test_default_pipeline():
    clean = build_pipeline(CleaningProfile())
    assert clean("Hello, World! 42 times   over") == "hello world times over"


def test_stopwords_offline():
    words = english_stopwords('sklearn')
    assert 'the' in words
    prof = CleaningProfile(stopwords=True, stopword_source='sklearn', extra_stopwords=('hill',))
    assert build_pipeline(prof)("The goats are on the HILL.") == "goats"


def test_unknown_stopword_source():
    with pytest.raises(ValueError):
        english_stopwords('bogus')


def test_stemming():
    assert stem_words()("running goats") == "run goat"
    prof = profile_from_cfg({'stem': True})
    assert build_pipeline(prof)("Running GOATS!") == "run goat"


def test_profile_from_cfg_defaults():
    assert profile_from_cfg(None) == CleaningProfile()
    prof = profile_from_cfg({'name': 'x', 'numbers': 0, 'extra_stopwords': ['a', 'b']})
    assert prof.numbers is False
    assert prof.extra_stopwords == ('a', 'b')


def test_clean_corpus_returns_new_value():
    raw = Corpus.from_texts(["Goats ARE happy!!", "", "  2 fat goats "])
    cleaned = clean_corpus(raw, CleaningProfile())
    assert cleaned.texts == ["goats are happy", "", "fat goats"]
    assert cleaned.doc_ids == raw.doc_ids
    assert raw.texts[0] == "Goats ARE happy!!"


def _nltk_data(*paths):
    import nltk
    for path in paths:
        try:
            nltk.data.find(path)
        except LookupError:
            pytest.skip(f"nltk data {path} not installed")


def test_nltk_stopwords():
    _nltk_data('corpora/stopwords')
    words = english_stopwords()
    assert {'the', 'and', 'are'} <= words
    prof = CleaningProfile(stopwords=True)
    assert build_pipeline(prof)("The goats are on the hill") == "goats hill"


def test_lemmatize_words():
    _nltk_data('corpora/wordnet', 'corpora/omw-1.4')
    assert lemmatize_words()("geese goats") == "goose goat"
    prof = profile_from_cfg({'lemmatize': True})
    assert build_pipeline(prof)("Geese, GOATS!") == "goose goat"
