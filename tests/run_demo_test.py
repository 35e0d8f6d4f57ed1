import sys

import pandas as pd
from loguru import logger

import run_demo
from tdm.log_setup import setup_logging


def test_setup_logging_writes_to_stdout(capsys):
    setup_logging(debug=True)
    logger.debug("matrix ready")
    out = capsys.readouterr().out
    assert "DEBUG" in out and "matrix ready" in out
    logger.remove()
    logger.add(sys.stderr)


def test_demo_on_builtin_sample(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, 'argv', ['run_demo', '--outdir', str(tmp_path)])
    run_demo.main()
    out = capsys.readouterr().out
    assert "Top 8 terms:" in out
    assert "goats" in out
    for name in ('term_frequencies.csv', 'document_term_matrix.csv', 'term_lengths.csv'):
        assert (tmp_path / name).exists()
    lengths = pd.read_csv(tmp_path / 'term_lengths.csv')
    assert list(lengths.columns) == ['length', 'count']
    assert lengths['length'].is_monotonic_increasing
    assert lengths['count'].sum() == pd.read_csv(tmp_path / 'term_frequencies.csv')['count'].sum()
    logger.remove()
    logger.add(sys.stderr)
