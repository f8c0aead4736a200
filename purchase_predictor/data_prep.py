from __future__ import annotations

"""
Dataset helpers: CSV ingestion, DataFrame conversion and the synthetic
customer dataset used when no file is supplied.
"""

from pathlib import Path
from typing import Sequence

import numpy as np
import pandas as pd

from .constants import (
    AGE_COLUMN,
    AGE_HINT,
    INCOME_COLUMN,
    INCOME_HINT,
    LABEL_COLUMN,
    LABEL_HINT,
    SAMPLE_AGE_CENTER,
    SAMPLE_AGE_RANGE,
    SAMPLE_AGE_SLOPE,
    SAMPLE_INCOME_CENTER,
    SAMPLE_INCOME_RANGE,
    SAMPLE_INCOME_SLOPE,
    SAMPLE_SIZE,
)
from .errors import DatasetFormatError
from .records import LabeledRecord


def _find_column(columns: Sequence[str], hint: str) -> str | None:
    """First column whose lower-cased name contains hint."""
    for col in columns:
        if hint in str(col).strip().lower():
            return col
    return None


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """
    Locate the age, salary and purchased columns by name and return them
    under the canonical names, as integers. Rows missing any value are dropped.
    """
    mapping = {}
    for hint, canonical in (
        (AGE_HINT, AGE_COLUMN),
        (INCOME_HINT, INCOME_COLUMN),
        (LABEL_HINT, LABEL_COLUMN),
    ):
        col = _find_column(list(df.columns), hint)
        if col is None:
            raise DatasetFormatError(
                f"No column matching '{hint}' in header: {list(df.columns)}"
            )
        mapping[canonical] = col

    out = pd.DataFrame(
        {canonical: pd.to_numeric(df[col], errors="coerce") for canonical, col in mapping.items()}
    )
    out = out.dropna().reset_index(drop=True)
    # Uploaded values are whole numbers; fractional parts are truncated.
    return np.trunc(out).astype(int)


def records_from_frame(df: pd.DataFrame) -> list[LabeledRecord]:
    return [
        LabeledRecord(float(age), float(income), int(label))
        for age, income, label in zip(df[AGE_COLUMN], df[INCOME_COLUMN], df[LABEL_COLUMN])
    ]


def records_to_frame(records: Sequence[LabeledRecord]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            AGE_COLUMN: [r.feature1 for r in records],
            INCOME_COLUMN: [r.feature2 for r in records],
            LABEL_COLUMN: [r.label for r in records],
        }
    )


def load_records(csv_path: Path) -> list[LabeledRecord]:
    """Read a purchase CSV and return its rows as records, in file order."""
    df = pd.read_csv(csv_path)
    return records_from_frame(normalize_columns(df))


def generate_sample_records(
    n: int = SAMPLE_SIZE, random_state: int | None = 42
) -> list[LabeledRecord]:
    """
    Draw a synthetic customer dataset: uniform integer ages and incomes, with
    the purchase label sampled from a logistic curve that rises with both.
    """
    rng = np.random.default_rng(random_state)
    ages = rng.integers(SAMPLE_AGE_RANGE[0], SAMPLE_AGE_RANGE[1] + 1, size=n)
    incomes = rng.integers(SAMPLE_INCOME_RANGE[0], SAMPLE_INCOME_RANGE[1] + 1, size=n)
    logits = SAMPLE_AGE_SLOPE * (ages - SAMPLE_AGE_CENTER) + SAMPLE_INCOME_SLOPE * (
        incomes - SAMPLE_INCOME_CENTER
    )
    probs = 1.0 / (1.0 + np.exp(-logits))
    labels = (rng.random(n) < probs).astype(int)
    return [
        LabeledRecord(float(age), float(income), int(label))
        for age, income, label in zip(ages, incomes, labels)
    ]
