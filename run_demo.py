import argparse
import os
from typing import List

import pandas as pd
from loguru import logger

from tdm.config import PipelineConfig, config_from_cfg, load_config
from tdm.freq import frequency_table, term_length_counts
from tdm.log_setup import setup_logging
from tdm.pipeline import run_pipeline

"""
Demo runner:
- Load a corpus from a YAML-configured source, or a small built-in sample
- Clean it (lowercase, punctuation, numbers, stopwords, optional stemming)
- Build the document-term matrix
- Print frequent terms and associations, save the tables behind the plots
"""

OUTPUT_DIR = 'output'

SAMPLES: List[str] = [
    "Goats are happy when they graze on the hill.",
    "Goats are fat after 3 weeks of summer grazing!",
    "The farmer feeds the goats hay in winter.",
    "Happy farmers keep healthy goats and happy sheep.",
    "Sheep graze the same hill as the goats.",
    "Winter hay is expensive; the farmer buys it in autumn.",
]


def default_config() -> PipelineConfig:
    return config_from_cfg({
        'source': {'kind': 'texts', 'texts': SAMPLES},
        'cleaning': {'stopwords': True, 'stopword_source': 'sklearn', 'stem': False},
        'report': {'top_k': 8, 'min_count': 2, 'associations': {'goats': 0.2, 'farmer': 0.5}},
    })


def main():
    p = argparse.ArgumentParser(description="Build a document-term matrix and report term statistics")
    p.add_argument("--config", help="YAML pipeline config (defaults to the built-in sample)")
    p.add_argument("--outdir", default=OUTPUT_DIR, help=f"Where to write CSV tables (default {OUTPUT_DIR})")
    p.add_argument("--debug", action="store_true", help="Verbose logging")
    args = p.parse_args()

    setup_logging(debug=args.debug)
    cfg = load_config(args.config) if args.config else default_config()
    result = run_pipeline(cfg)
    m = result.matrix

    print(f"\nMatrix: {m.n_docs} documents x {m.n_terms} terms, {m.nnz} non-zero cells")

    print(f"\nTop {cfg.report.top_k} terms:")
    for term, count in m.most_frequent(cfg.report.top_k):
        print(f"{term:20s} {count}")

    print(f"\nTerms occurring at least {cfg.report.min_count} times:")
    print(", ".join(m.find_frequent_terms(cfg.report.min_count)))

    for term, threshold in cfg.report.associations.items():
        if term not in m:
            logger.warning("association term {!r} not in vocabulary, skipped", term)
            continue
        print(f"\nAssociations of '{term}' (r >= {threshold}):")
        for other, r in m.find_associations(term, threshold, digits=2):
            print(f"{other:20s} {r:.2f}")

    os.makedirs(args.outdir, exist_ok=True)
    frequency_table(m).to_csv(os.path.join(args.outdir, 'term_frequencies.csv'), index=False)
    m.to_frame().to_csv(os.path.join(args.outdir, 'document_term_matrix.csv'))
    lengths = term_length_counts(m, weighted=True)
    pd.DataFrame(sorted(lengths.items()), columns=['length', 'count']).to_csv(
        os.path.join(args.outdir, 'term_lengths.csv'), index=False)
    print('\nTables saved to:', args.outdir)


if __name__ == '__main__':
    main()
