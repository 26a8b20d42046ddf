"""
Export of stem-grouped results (CSV or Excel workbook).

One row per word, stem groups separated by a blank row:

    stem,word,frequency,frequency in total
    run,running,1,3
    run,run,2,3

    walk,walked,4,4
"""

import csv
import logging
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from .aggregator import StemRecord
from .spreadsheet import write_sheet

logger = logging.getLogger(__name__)

HEADER = ("stem", "word", "frequency", "frequency in total")
SHEET_NAME = "result"

PathLike = Union[str, Path]


def write_csv(records: Iterable[StemRecord], path: PathLike) -> int:
    """
    Write records to a CSV file.

    Args:
        records: StemRecords in output order (usually ResultAggregator.export())
        path: Output file; parent directories are created

    Returns:
        Number of word rows written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    rows = 0
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(HEADER)
        for record in records:
            for entry in record.words:
                writer.writerow((record.stem, entry.word, entry.frequency, record.total_frequency))
                rows += 1
            writer.writerow(())

    logger.info(f"Wrote {rows} word rows to {path}")
    return rows


def write_excel(records: Iterable[StemRecord], path: PathLike) -> int:
    """
    Write records to the "result" sheet of an .xlsx workbook.

    Same layout as write_csv, blank rows included.

    Returns:
        Number of word rows written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    sheet_rows: List[Tuple] = []
    rows = 0
    for record in records:
        for entry in record.words:
            sheet_rows.append((record.stem, entry.word, entry.frequency, record.total_frequency))
            rows += 1
        sheet_rows.append((None,) * len(HEADER))

    write_sheet(sheet_rows, HEADER, path, sheet_name=SHEET_NAME)
    logger.info(f"Wrote {rows} word rows to {path}")
    return rows


def write_result(records: Iterable[StemRecord], path: PathLike) -> int:
    """
    Write records in the format given by the file extension.

    Raises:
        ValueError: If the extension is neither .csv nor .xlsx
    """
    suffix = Path(path).suffix.lower()
    if suffix == ".csv":
        return write_csv(records, path)
    if suffix == ".xlsx":
        return write_excel(records, path)
    raise ValueError(f"Unsupported output format '{suffix}' for {path} (expected .csv or .xlsx)")
