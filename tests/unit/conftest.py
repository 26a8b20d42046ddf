"""Unit test configuration - shared fixtures"""

import logging

import pytest

from src.stemming.irregular import IrregularResolver


@pytest.fixture
def irregular_resolver():
    """
    Small irregular-form table.

    First word of each group is the canonical form.
    """
    return IrregularResolver([
        ["go", "went", "gone", "goes"],
        ["abide", "abode", "abided"],
        ["arise", "arose", "arisen"],
        ["mouse", "mice"],
    ])


@pytest.fixture
def corpus_files(tmp_path):
    """A text file and a CSV file forming a tiny corpus"""
    text_file = tmp_path / "reading.txt"
    text_file.write_text(
        "The runner's running was better than running alone.\n"
        "He runs; she ran. They went home!\n",
        encoding="utf-8",
    )

    table_file = tmp_path / "passages.csv"
    table_file.write_text(
        "passage,notes\n"
        "\"Connected connections connect\",went running\n",
        encoding="utf-8",
    )
    return text_file, table_file


@pytest.fixture
def restore_root_logging():
    """Restore root logger handlers/level after tests that reconfigure logging"""
    def is_pytest_handler(handler):
        # pytest attaches its own capture handlers per test phase
        return type(handler).__module__.startswith("_pytest")

    root_logger = logging.getLogger()
    saved_handlers = [h for h in root_logger.handlers if not is_pytest_handler(h)]
    saved_level = root_logger.level

    yield

    pytest_handlers = [h for h in root_logger.handlers if is_pytest_handler(h)]
    for handler in root_logger.handlers:
        if handler not in saved_handlers and not is_pytest_handler(handler):
            handler.close()
    root_logger.handlers[:] = saved_handlers + pytest_handlers
    root_logger.setLevel(saved_level)
