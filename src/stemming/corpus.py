"""
Corpus readers - turn source files into a flat token list.

- .txt / .md: UTF-8 text, tokenized line by line
- .csv / .tsv: every cell tokenized (row order, then column order)
- .xlsx / .xls: every cell of the first sheet tokenized, same order
"""

import csv
import logging
from pathlib import Path
from typing import Iterable, List, Union

from .spreadsheet import SPREADSHEET_FORMATS, read_sheet_rows
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

TEXT_FORMATS = {".txt", ".md", ".text"}
TABLE_FORMATS = {".csv", ".tsv"}

PathLike = Union[str, Path]


def read_text(path: PathLike) -> List[str]:
    """Read a UTF-8 text file and return its tokens."""
    tokens: List[str] = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            tokens.extend(tokenize(line))
    return tokens


def read_table(path: PathLike) -> List[str]:
    """Read a CSV/TSV file and return the tokens of every cell."""
    path = Path(path)
    delimiter = "\t" if path.suffix.lower() == ".tsv" else ","
    tokens: List[str] = []
    # utf-8-sig drops the byte-order mark Excel puts in front of CSV exports
    with open(path, newline="", encoding="utf-8-sig") as f:
        for row in csv.reader(f, delimiter=delimiter):
            for cell in row:
                tokens.extend(tokenize(cell))
    return tokens


def read_spreadsheet(path: PathLike) -> List[str]:
    """Read the first sheet of an Excel workbook and return the tokens of every cell."""
    tokens: List[str] = []
    for row in read_sheet_rows(path):
        for cell in row:
            tokens.extend(tokenize(cell))
    return tokens


def read_corpus(paths: Iterable[PathLike]) -> List[str]:
    """
    Read several corpus files into one token list.

    Args:
        paths: Text (.txt, .md), table (.csv, .tsv) and workbook (.xlsx, .xls) files

    Returns:
        Tokens of all files, in file order

    Raises:
        ValueError: If a file has an unsupported extension
        OSError: If a file cannot be read
    """
    tokens: List[str] = []
    for path in paths:
        path = Path(path)
        suffix = path.suffix.lower()
        if suffix in TEXT_FORMATS:
            file_tokens = read_text(path)
        elif suffix in TABLE_FORMATS:
            file_tokens = read_table(path)
        elif suffix in SPREADSHEET_FORMATS:
            file_tokens = read_spreadsheet(path)
        else:
            raise ValueError(
                f"Unsupported corpus format '{suffix}' for {path}. "
                f"Supported: {', '.join(sorted(TEXT_FORMATS | TABLE_FORMATS | SPREADSHEET_FORMATS))}"
            )
        logger.info(f"Read {len(file_tokens)} tokens from {path}")
        tokens.extend(file_tokens)
    return tokens
