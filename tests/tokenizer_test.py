import pytest

from tdm.errors import ConfigurationError
from tdm.tokenizer import NGramTokenizer, TokenSequence, WordTokenizer, make_tokenizer

DOCS = ["", "word1", "goats are happy", "a b c d e f", "tabs\tand\nnewlines  too"]


def test_unigrams_split_on_whitespace():
    assert list(WordTokenizer().tokenize("tabs\tand\nnewlines  too")) == ['tabs', 'and', 'newlines', 'too']
    assert list(WordTokenizer().tokenize("")) == []


def test_bigrams_are_space_joined_windows():
    toks = list(NGramTokenizer(2).tokenize("a b c d"))
    assert toks == ['a b', 'b c', 'c d']


@pytest.mark.parametrize("text", DOCS)
def test_n1_matches_unigrams(text):
    assert list(NGramTokenizer(1).tokenize(text)) == list(WordTokenizer().tokenize(text))


@pytest.mark.parametrize("n", [1, 2, 3, 6, 7, 10])
def test_ngram_count(n):
    text = "a b c d e f"
    seq = NGramTokenizer(n).tokenize(text)
    assert len(list(seq)) == max(0, 6 - n + 1)
    assert len(seq) == len(list(seq))


def test_sequence_is_restartable():
    seq = NGramTokenizer(3).tokenize("one two three four")
    assert list(seq) == list(seq) == ['one two three', 'two three four']
    assert isinstance(seq, TokenSequence)


def test_bad_ngram_size():
    with pytest.raises(ConfigurationError):
        NGramTokenizer(0)
    with pytest.raises(ConfigurationError):
        make_tokenizer(-1)


def test_make_tokenizer():
    assert isinstance(make_tokenizer(1), WordTokenizer)
    assert make_tokenizer(3).n == 3
