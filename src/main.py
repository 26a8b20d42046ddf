"""
Word Roots - command-line entry point.

Groups the words of a corpus by their Porter stem and writes a CSV (or .xlsx)
with per-word and per-stem frequencies:

    python -m src.main reading.txt passages.csv --irregular irregular.csv

Configuration comes from environment variables (see PipelineSettings),
loaded from .env.local (local dev) or .env, and CLI flags override them.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from src.logging_config import setup_logging
from src.stemming import PipelineSettings, run_pipeline
from src.stemming.factory import StemmerFactory

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent


def load_environment(root: Path = PROJECT_ROOT) -> Optional[Path]:
    """Load .env.local first (highest priority), then .env as fallback."""
    for candidate in (root / ".env.local", root / ".env"):
        if candidate.exists():
            load_dotenv(candidate, override=True)
            return candidate
    return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="word-roots",
        description="Group corpus words by stem and count frequencies.",
    )
    parser.add_argument("inputs", nargs="*", help="Corpus files (.txt, .md, .csv, .tsv, .xlsx, .xls)")
    parser.add_argument("--irregular", dest="irregular_file", help="Irregular-form table (.csv, .tsv, .txt, .xlsx, .xls, .yaml)")
    parser.add_argument("-o", "--output", help="Result file (.csv or .xlsx)")
    parser.add_argument("--stemmer", choices=StemmerFactory.BACKENDS, help="Stemmer backend")
    parser.add_argument("--log-level", help="Console log level (default: LOG_LEVEL or INFO)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    env_file = load_environment()

    log_level = (args.log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    setup_logging(
        log_file=os.getenv("LOG_FILE", "logs/word-roots.log"),
        console_level=getattr(logging, log_level, logging.INFO),
        file_level=logging.DEBUG,  # Always DEBUG in file for troubleshooting
    )
    if env_file is not None:
        logger.info(f"Loaded environment from: {env_file}")

    try:
        settings = PipelineSettings.from_env(
            inputs=args.inputs or None,
            irregular_file=args.irregular_file,
            output=args.output,
            stemmer=args.stemmer,
        )
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    try:
        records = run_pipeline(settings)
    except (OSError, ValueError) as e:
        logger.error(f"Pipeline failed: {e}")
        return 1

    logger.info(f"Done: {len(records)} stems written to {settings.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
