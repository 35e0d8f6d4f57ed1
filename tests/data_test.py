import pandas as pd
import pytest

from tdm.data import Corpus, Document, load_csv, load_dataframe, load_directory


def test_from_texts_and_map():
    c = Corpus.from_texts(["A", "B"])
    assert list(c) == [Document(0, "A"), Document(1, "B")]
    lower = c.map(str.lower)
    assert lower.texts == ["a", "b"]
    assert c.texts == ["A", "B"]
    assert len(c[1:]) == 1 and c[1:][0].doc_id == 1


def test_documents_are_immutable():
    with pytest.raises(AttributeError):
        Document(0, "x").text = "y"


def test_load_directory_sorted(tmp_path):
    (tmp_path / "b.txt").write_text("second", encoding="utf-8")
    (tmp_path / "a.txt").write_text("first", encoding="utf-8")
    (tmp_path / "notes.md").write_text("skip", encoding="utf-8")
    c = load_directory(tmp_path)
    assert c.texts == ["first", "second"]


def test_load_directory_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_directory(tmp_path / "nope")


def test_load_dataframe():
    df = pd.DataFrame({'text': ["goats", None, "sheep"], 'score': [1, 2, 3]})
    c = load_dataframe(df, 'text')
    assert c.texts == ["goats", "", "sheep"]
    with pytest.raises(KeyError):
        load_dataframe(df, 'body')


def test_load_csv(tmp_path):
    path = tmp_path / "reviews.csv"
    pd.DataFrame({'text': ["good hotel", "bad breakfast"]}).to_csv(path, index=False)
    assert load_csv(path, 'text').texts == ["good hotel", "bad breakfast"]
