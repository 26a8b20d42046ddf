"""
Unit tests for corpus readers and the result writers.
"""

import csv

import pandas as pd
import pytest

from src.stemming.aggregator import ResultAggregator, StemRecord, WordEntry
from src.stemming.corpus import read_corpus, read_spreadsheet, read_table, read_text
from src.stemming.writer import HEADER, SHEET_NAME, write_csv, write_excel, write_result


class TestReaders:
    """Text and table corpus readers"""

    def test_read_text(self, corpus_files):
        text_file, _ = corpus_files
        tokens = read_text(text_file)

        assert tokens[:4] == ["the", "runner", "running", "was"]
        assert tokens.count("running") == 2
        assert "went" in tokens

    def test_read_table_reads_every_cell(self, corpus_files):
        _, table_file = corpus_files
        tokens = read_table(table_file)

        assert tokens == ["passage", "notes", "connected", "connections", "connect", "went", "running"]

    def test_read_tsv(self, tmp_path):
        table = tmp_path / "cells.tsv"
        table.write_text("Alpha beta\tGamma, delta\n", encoding="utf-8")

        assert read_table(table) == ["alpha", "beta", "gamma", "delta"]

    def test_read_table_with_byte_order_mark(self, tmp_path):
        table = tmp_path / "export.csv"
        table.write_bytes("went,gone\n".encode("utf-8-sig"))

        assert read_table(table) == ["went", "gone"]

    def test_read_spreadsheet(self, tmp_path):
        workbook = tmp_path / "passages.xlsx"
        pd.DataFrame([
            ["Passage", "Notes"],
            ["Connected connections", None],
            [None, "He went running"],
        ]).to_excel(workbook, header=False, index=False, engine="openpyxl")

        assert read_spreadsheet(workbook) == [
            "passage", "notes", "connected", "connections", "he", "went", "running",
        ]

    def test_read_corpus_dispatches_xlsx(self, corpus_files, tmp_path):
        text_file, _ = corpus_files
        workbook = tmp_path / "extra.xlsx"
        pd.DataFrame([["Walked walking"]]).to_excel(workbook, header=False, index=False, engine="openpyxl")

        tokens = read_corpus([text_file, workbook])

        assert tokens == read_text(text_file) + ["walked", "walking"]

    def test_read_corpus_concatenates_in_order(self, corpus_files):
        text_file, table_file = corpus_files
        tokens = read_corpus([text_file, table_file])

        assert tokens == read_text(text_file) + read_table(table_file)

    def test_read_corpus_unsupported_format(self, tmp_path):
        source = tmp_path / "five.pdf"
        source.write_bytes(b"\x00")

        with pytest.raises(ValueError, match="Unsupported corpus format"):
            read_corpus([source])

    def test_read_corpus_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            read_corpus([tmp_path / "missing.txt"])


class TestWriter:
    """CSV export layout"""

    def test_layout(self, tmp_path):
        records = [
            StemRecord("run", 3, [WordEntry("running", 1), WordEntry("run", 2)]),
            StemRecord("walk", 4, [WordEntry("walked", 4)]),
        ]
        output = tmp_path / "out" / "result.csv"

        rows_written = write_csv(records, output)

        with open(output, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))

        assert rows_written == 3
        assert rows == [
            list(HEADER),
            ["run", "running", "1", "3"],
            ["run", "run", "2", "3"],
            [],
            ["walk", "walked", "4", "4"],
            [],
        ]

    def test_writes_aggregator_export(self, tmp_path):
        aggregator = ResultAggregator()
        aggregator.ingest_counts({"cats": 2, "cat": 1, "dogs": 1})
        output = tmp_path / "result.csv"

        write_csv(aggregator.export(), output)

        with open(output, newline="", encoding="utf-8") as f:
            rows = [row for row in csv.reader(f) if row]
        assert [row[0] for row in rows[1:]] == ["cat", "cat", "dog"]

    def test_empty_result_has_header_only(self, tmp_path):
        output = tmp_path / "empty.csv"
        assert write_csv([], output) == 0

        with open(output, newline="", encoding="utf-8") as f:
            assert list(csv.reader(f)) == [list(HEADER)]


class TestExcelWriter:
    """.xlsx export and extension dispatch"""

    @pytest.fixture
    def records(self):
        return [
            StemRecord("run", 3, [WordEntry("running", 1), WordEntry("run", 2)]),
            StemRecord("walk", 4, [WordEntry("walked", 4)]),
        ]

    def test_layout(self, records, tmp_path):
        output = tmp_path / "out" / "result.xlsx"

        rows_written = write_excel(records, output)

        df = pd.read_excel(output, sheet_name=SHEET_NAME, engine="openpyxl")
        assert rows_written == 3
        assert list(df.columns) == list(HEADER)
        # Blank separator row between the two stem groups
        assert df.isna().all(axis=1).tolist()[:4] == [False, False, True, False]

        words = df.dropna(how="all")
        assert words["stem"].tolist() == ["run", "run", "walk"]
        assert words["word"].tolist() == ["running", "run", "walked"]
        assert words["frequency"].astype(int).tolist() == [1, 2, 4]
        assert words["frequency in total"].astype(int).tolist() == [3, 3, 4]

    def test_empty_result_has_header_only(self, tmp_path):
        output = tmp_path / "empty.xlsx"
        assert write_excel([], output) == 0

        df = pd.read_excel(output, sheet_name=SHEET_NAME, engine="openpyxl")
        assert list(df.columns) == list(HEADER)
        assert df.empty

    def test_xls_output_rejected(self, records, tmp_path):
        with pytest.raises(ValueError, match=".xlsx"):
            write_excel(records, tmp_path / "result.xls")

    def test_write_result_dispatches_on_extension(self, records, tmp_path):
        csv_output = tmp_path / "result.csv"
        xlsx_output = tmp_path / "result.xlsx"

        assert write_result(records, csv_output) == 3
        assert write_result(records, xlsx_output) == 3

        with open(csv_output, newline="", encoding="utf-8") as f:
            assert next(csv.reader(f)) == list(HEADER)
        df = pd.read_excel(xlsx_output, sheet_name=SHEET_NAME, engine="openpyxl")
        assert len(df.dropna(how="all")) == 3

    def test_write_result_unsupported_extension(self, records, tmp_path):
        with pytest.raises(ValueError, match="Unsupported output format"):
            write_result(records, tmp_path / "result.txt")
