"""Tabular file boundary: reading raw comment tables and writing processed ones."""

import csv
import json
import logging
import os
from pathlib import Path
from typing import Sequence, Union

import pandas as pd

from comment_normalizer.models.dtos import RecordError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

ERROR_COLUMNS = ["index", "reason"]

SUPPORTED_SUFFIXES = (".csv", ".json")


def _suffix(path: PathLike) -> str:
    suffix = Path(path).suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(
            f"Unsupported table format '{suffix or path}'. Expected one of: {', '.join(SUPPORTED_SUFFIXES)}"
        )
    return suffix


def _ensure_directory(path: PathLike) -> None:
    """Ensure the directory for the output file exists."""
    directory = os.path.dirname(str(path))
    if directory:
        os.makedirs(directory, exist_ok=True)


def read_comments(path: PathLike) -> pd.DataFrame:
    """
    Read a raw comment table.

    CSV files are read with every column as text so ids and counts pass through
    unchanged; JSON files must hold a list of records.
    """
    if _suffix(path) == ".csv":
        df = pd.read_csv(path, dtype=str, encoding="utf-8")
    else:
        df = pd.read_json(path, orient="records", dtype=False)
    logger.info(f"Read {len(df)} comment(s) from {path}")
    return df


def _encode_lists(df: pd.DataFrame) -> pd.DataFrame:
    """JSON-encode list cells so they survive a round trip through CSV."""
    encoded = df.copy()
    for column in encoded.columns:
        if encoded[column].map(lambda value: isinstance(value, list)).any():
            encoded[column] = encoded[column].map(
                lambda value: json.dumps(value, ensure_ascii=False) if isinstance(value, list) else value
            )
    return encoded


def write_table(df: pd.DataFrame, path: PathLike) -> int:
    """
    Write a table as CSV or JSON records, chosen by file extension.

    Returns:
        Number of rows written.
    """
    suffix = _suffix(path)
    _ensure_directory(path)
    if suffix == ".csv":
        _encode_lists(df).to_csv(
            path,
            index=False,
            header=True,
            quoting=csv.QUOTE_MINIMAL,
            encoding="utf-8",
        )
    else:
        df.to_json(path, orient="records", force_ascii=False, indent=2)
    logger.info(f"Wrote {len(df)} row(s) to {path}")
    return len(df)


def errors_to_dataframe(errors: Sequence[RecordError]) -> pd.DataFrame:
    return pd.DataFrame([error.model_dump() for error in errors], columns=ERROR_COLUMNS)
