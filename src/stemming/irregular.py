"""
Irregular word forms ("went" → "go", "mice" → "mouse").

Suffix stripping cannot relate these forms to their lemma, so they are
looked up in a table of synonym groups. The first word of each group is
the canonical form; every word of the group (the canonical one included)
is a lookup key:

    abide   abode    abided
    arise   arose    arisen
    go      went     gone

Supported table formats:
- .csv / .tsv: one group per row
- .txt: one group per line, whitespace separated
- .xlsx / .xls: one group per row of the first sheet
- .yaml / .yml: a list of lists
"""

import csv
import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

import yaml

from .errors import IrregularTableError
from .spreadsheet import SPREADSHEET_FORMATS, read_sheet_rows

logger = logging.getLogger(__name__)

_WORD_PATTERN = re.compile(r"^[a-zA-Z]+$")


def _clean_group(cells: Iterable) -> List[str]:
    """Keep alphabetic cells, lowercased; everything else is skipped."""
    group = []
    for cell in cells:
        if cell is None:
            continue
        text = str(cell).strip()
        if _WORD_PATTERN.match(text):
            group.append(text.lower())
    return group


class IrregularResolver:
    """
    Maps irregular inflections to their canonical lemma.

    When a word appears in several groups the first group wins.
    """

    def __init__(self, groups: Iterable[Sequence[str]] = ()):
        self._lemmas: Dict[str, str] = {}
        self.group_count = 0
        for group in groups:
            self.add_group(group)

    def add_group(self, group: Sequence[str]) -> None:
        """Register a group; its first word is the canonical form."""
        words = _clean_group(group)
        if not words:
            return
        canonical = words[0]
        for word in words:
            self._lemmas.setdefault(word, canonical)
        self.group_count += 1

    def resolve(self, word: str) -> Optional[str]:
        """
        Look up the canonical form of a word.

        Returns:
            The canonical lemma, or None if the word is not in the table
        """
        return self._lemmas.get(word)

    def __contains__(self, word: str) -> bool:
        return word in self._lemmas

    def __len__(self) -> int:
        return len(self._lemmas)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "IrregularResolver":
        """
        Load an irregular-form table from disk.

        Args:
            path: Table file (.csv, .tsv, .txt, .xlsx, .xls, .yaml, .yml)

        Returns:
            Resolver with one group per row

        Raises:
            OSError: If the file cannot be read
            IrregularTableError: If the file format is unsupported or malformed
        """
        path = Path(path)
        suffix = path.suffix.lower()

        if suffix in (".csv", ".tsv"):
            delimiter = "\t" if suffix == ".tsv" else ","
            # utf-8-sig drops the byte-order mark Excel puts in front of CSV exports
            with open(path, newline="", encoding="utf-8-sig") as f:
                groups = list(csv.reader(f, delimiter=delimiter))
        elif suffix == ".txt":
            with open(path, encoding="utf-8-sig") as f:
                groups = [line.split() for line in f]
        elif suffix in SPREADSHEET_FORMATS:
            groups = read_sheet_rows(path)
        elif suffix in (".yaml", ".yml"):
            groups = cls._load_yaml_groups(path)
        else:
            raise IrregularTableError(
                str(path),
                f"unsupported irregular table format '{suffix}' (expected .csv, .tsv, .txt, .xlsx, .xls, .yaml)",
            )

        resolver = cls(groups)
        logger.info(f"Loaded {resolver.group_count} irregular groups ({len(resolver)} forms) from {path}")
        return resolver

    @staticmethod
    def _load_yaml_groups(path: Path) -> List[List[str]]:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise IrregularTableError(str(path), f"invalid YAML: {e}") from e

        if data is None:
            return []
        if not isinstance(data, list):
            raise IrregularTableError(str(path), "expected a list of word groups")

        groups = []
        for row_number, row in enumerate(data, start=1):
            if isinstance(row, str):
                row = row.split()
            if not isinstance(row, list):
                raise IrregularTableError(str(path), f"row {row_number}: expected a list of words")
            groups.append(row)
        return groups
