from __future__ import annotations

"""
Plain value types passed in and out of the engine.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class LabeledRecord:
    """
    One training observation. feature1 is age, feature2 is income and label
    is the 0/1 purchase outcome.
    """

    feature1: float
    feature2: float
    label: int


@dataclass(frozen=True)
class Prediction:
    purchased: bool
    probability: float


@dataclass(frozen=True)
class PredictionReport:
    """One row of the per-algorithm summary: prediction plus training accuracy."""

    algorithm: str
    purchased: bool
    probability: float
    accuracy: float


def records_to_arrays(records: Sequence[LabeledRecord]) -> tuple[np.ndarray, np.ndarray]:
    """Stack records into an (n, 2) feature matrix and a label vector, keeping order."""
    X = np.array([[r.feature1, r.feature2] for r in records], dtype=float).reshape(-1, 2)
    y = np.array([r.label for r in records], dtype=int)
    return X, y
