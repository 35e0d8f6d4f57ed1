# Term-count matrix text mining
# Load a corpus, clean it, build a sparse document-term matrix with unigram or
# n-gram tokens, then query term frequencies and Pearson term associations.

from .data import Document, Corpus, load_directory, load_dataframe, load_csv
from .clean import CleaningProfile, build_pipeline, clean_corpus, english_stopwords
from .tokenizer import TokenSequence, WordTokenizer, NGramTokenizer, make_tokenizer
from .matrix import Bounds, TermCountMatrix, TermDocumentMatrix, build_matrix
from .freq import frequency_table, term_length_counts
from .errors import TdmError, ConfigurationError, TermNotFoundError
from .config import PipelineConfig, load_config
from .pipeline import PipelineResult, run_pipeline

__version__ = '0.1.0'
