"""
End-to-end stemming run: read → count → resolve/stem/aggregate → write.
"""

import logging
import os
import time
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .aggregator import ResultAggregator, StemRecord
from .corpus import read_corpus
from .factory import StemmerFactory
from .irregular import IrregularResolver
from .tokenizer import count_tokens
from .writer import write_result

logger = logging.getLogger(__name__)


class PipelineSettings(BaseModel):
    """Run configuration (environment variables, overridden by CLI flags)"""
    model_config = ConfigDict(frozen=True)

    inputs: List[Path] = Field(..., min_length=1, description="Corpus files (.txt, .md, .csv, .tsv, .xlsx, .xls)")
    irregular_file: Optional[Path] = Field(None, description="Irregular-form table")
    output: Path = Field(Path("output/result.csv"), description="Result file (.csv or .xlsx)")
    stemmer: Literal["porter", "snowball"] = Field("porter", description="Stemmer backend")

    @field_validator("stemmer", mode="before")
    @classmethod
    def normalize_stemmer(cls, value):
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("output")
    @classmethod
    def check_output_format(cls, value: Path) -> Path:
        if value.suffix.lower() not in (".csv", ".xlsx"):
            raise ValueError(f"output must be a .csv or .xlsx file, got {value}")
        return value

    @classmethod
    def from_env(cls, **overrides) -> "PipelineSettings":
        """
        Build settings from environment variables.

        Config (env vars):
            WORDROOTS_INPUTS: Comma-separated corpus files (required)
            WORDROOTS_IRREGULAR_FILE: Irregular-form table (optional)
            WORDROOTS_OUTPUT: Result file, .csv or .xlsx (default: output/result.csv)
            WORDROOTS_STEMMER: "porter" | "snowball" (default: porter)

        Args:
            **overrides: Values that take precedence over the environment
                (None values are ignored)
        """
        values = {}

        inputs = os.getenv("WORDROOTS_INPUTS", "")
        values["inputs"] = [p.strip() for p in inputs.split(",") if p.strip()]

        irregular_file = os.getenv("WORDROOTS_IRREGULAR_FILE")
        if irregular_file:
            values["irregular_file"] = irregular_file

        output = os.getenv("WORDROOTS_OUTPUT")
        if output:
            values["output"] = output

        stemmer = os.getenv("WORDROOTS_STEMMER")
        if stemmer:
            values["stemmer"] = stemmer

        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)


def aggregate_tokens(
    tokens: List[str],
    resolver: Optional[IrregularResolver] = None,
    stemmer: str = "porter",
) -> List[StemRecord]:
    """
    Count tokens and group them by stem.

    Args:
        tokens: Lowercase alphabetic tokens
        resolver: Optional irregular-form resolver
        stemmer: Stemmer backend name

    Returns:
        StemRecords sorted by stem
    """
    counts = count_tokens(tokens)
    aggregator = ResultAggregator(stemmer=StemmerFactory.create(stemmer))
    aggregator.ingest_counts(counts, resolver)
    logger.info(f"Grouped {len(counts)} distinct words under {len(aggregator)} stems")
    return aggregator.export()


def run_pipeline(settings: PipelineSettings) -> List[StemRecord]:
    """
    Run the full pipeline and write the result file.

    Returns:
        Exported StemRecords (sorted by stem)
    """
    start_time = time.time()

    resolver = None
    if settings.irregular_file is not None:
        resolver = IrregularResolver.from_file(settings.irregular_file)

    tokens = read_corpus(settings.inputs)
    logger.info(f"Read {len(tokens)} tokens from {len(settings.inputs)} file(s)")

    records = aggregate_tokens(tokens, resolver=resolver, stemmer=settings.stemmer)
    write_result(records, settings.output)

    logger.info(f"Pipeline finished in {time.time() - start_time:.2f}s → {settings.output}")
    return records
