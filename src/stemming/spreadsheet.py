"""
Excel workbook access via pandas.

- .xlsx is read and written with openpyxl
- .xls (legacy workbooks) is read with xlrd

Only the first sheet is read. Every row is returned as its non-empty
cells, so rows of different length (one word group per row) survive.
"""

from pathlib import Path
from typing import List, Sequence, Union

import pandas as pd

SPREADSHEET_FORMATS = {".xlsx", ".xls"}

_ENGINES = {".xlsx": "openpyxl", ".xls": "xlrd"}


def _engine_for(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in _ENGINES:
        raise ValueError(
            f"Unsupported spreadsheet format '{suffix}' for {path}. "
            f"Supported: {', '.join(sorted(SPREADSHEET_FORMATS))}"
        )
    return _ENGINES[suffix]


def read_sheet_rows(path: Union[str, Path]) -> List[List[str]]:
    """
    Read the first sheet of a workbook as rows of cell texts.

    Args:
        path: .xlsx or .xls file

    Returns:
        One list per sheet row with its non-empty cells as strings

    Raises:
        ValueError: If the extension is not a spreadsheet format
        OSError: If the file cannot be read
    """
    path = Path(path)
    df = pd.read_excel(path, sheet_name=0, header=None, dtype=str, engine=_engine_for(path))

    rows = []
    for row in df.itertuples(index=False):
        rows.append([str(cell) for cell in row if not pd.isna(cell)])
    return rows


def write_sheet(rows: Sequence[Sequence], columns: Sequence[str], path: Union[str, Path], sheet_name: str = "Sheet1") -> None:
    """
    Write rows to a new .xlsx workbook.

    Rows of None values come out as blank spreadsheet rows.
    """
    path = Path(path)
    if path.suffix.lower() != ".xlsx":
        raise ValueError(f"Spreadsheets can only be written as .xlsx, got {path}")
    df = pd.DataFrame(list(rows), columns=list(columns))
    df.to_excel(path, sheet_name=sheet_name, index=False, engine="openpyxl")
