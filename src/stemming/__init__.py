"""
Stem-grouped word frequency analysis.

Reduces English word forms to their Porter stem and aggregates corpus
frequencies per stem, so "run", "runs" and "running" are reported together.

Components:
- stemmer: Porter (1980) suffix-stripping algorithm
- irregular: Lookup of irregular forms ("went" → "go") from a table
- aggregator: Merges (word, count) pairs into stem-grouped records
- tokenizer: Text to lowercase alphabetic tokens
- corpus: Text, CSV and Excel corpus readers
- spreadsheet: Excel workbook access (pandas)
- writer: CSV / Excel export of the grouped result
- factory: Stemmer backend selection (built-in Porter or NLTK Snowball)
- pipeline: End-to-end run driven by PipelineSettings
"""

from .errors import InvalidWordError, IrregularTableError
from .stemmer import PorterStemmer, stem
from .irregular import IrregularResolver
from .aggregator import ResultAggregator, StemRecord, WordEntry
from .tokenizer import tokenize, count_tokens
from .corpus import read_corpus
from .writer import write_csv, write_excel, write_result
from .factory import StemmerFactory
from .pipeline import PipelineSettings, aggregate_tokens, run_pipeline

__all__ = [
    "InvalidWordError",
    "IrregularTableError",
    "PorterStemmer",
    "stem",
    "IrregularResolver",
    "ResultAggregator",
    "StemRecord",
    "WordEntry",
    "tokenize",
    "count_tokens",
    "read_corpus",
    "write_csv",
    "write_excel",
    "write_result",
    "StemmerFactory",
    "PipelineSettings",
    "aggregate_tokens",
    "run_pipeline",
]
