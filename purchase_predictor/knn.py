from __future__ import annotations

"""
Brute-force k-nearest-neighbours vote over standardized training points.
"""

import numpy as np

from .constants import DEFAULT_K
from .records import Prediction


def nearest_neighbors(X_scaled: np.ndarray, point, k: int) -> np.ndarray:
    """
    Indices of the k rows closest to point by Euclidean distance. Equal
    distances keep their input order; k past the dataset size returns all rows.
    """
    if k < 1:
        raise ValueError(f"k must be a positive integer, got {k}")
    diffs = X_scaled - np.asarray(point, dtype=float)
    distances = np.sqrt(np.sum(diffs**2, axis=1))
    order = np.argsort(distances, kind="stable")
    return order[:k]


class KNNVoter:
    """
    Majority vote among the k nearest training labels. The vote needs more
    than half of k, so an even split is a "no".
    """

    def __init__(self, X_scaled, y):
        self.X_scaled = np.asarray(X_scaled, dtype=float)
        self.y = np.asarray(y, dtype=int)

    def vote(self, point, k: int = DEFAULT_K) -> Prediction:
        neighbors = nearest_neighbors(self.X_scaled, point, k)
        purchased_count = int(np.sum(self.y[neighbors] == 1))
        return Prediction(
            purchased=purchased_count > k / 2,
            probability=purchased_count / k,
        )
