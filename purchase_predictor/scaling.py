from __future__ import annotations

"""
Feature standardization with population statistics frozen at training time.
"""

from dataclasses import dataclass

import numpy as np

from .errors import InvalidTrainingSet


@dataclass(frozen=True)
class ScalingParameters:
    """
    Per-feature mean and population standard deviation. A zero deviation is
    stored as 1.0 so a constant feature only gets centered.
    """

    mean: tuple[float, float]
    std: tuple[float, float]

    @classmethod
    def from_features(cls, X) -> "ScalingParameters":
        X_arr = np.asarray(X, dtype=float).reshape(-1, 2)
        if X_arr.shape[0] == 0:
            raise InvalidTrainingSet("Cannot compute scaling parameters of an empty dataset.")
        mean = X_arr.mean(axis=0)
        std = X_arr.std(axis=0)
        std[std == 0] = 1.0
        return cls(
            mean=(float(mean[0]), float(mean[1])),
            std=(float(std[0]), float(std[1])),
        )

    def standardize(self, feature1: float, feature2: float) -> tuple[float, float]:
        return (
            (feature1 - self.mean[0]) / self.std[0],
            (feature2 - self.mean[1]) / self.std[1],
        )

    def transform(self, X) -> np.ndarray:
        """Standardize every row of an (n, 2) matrix."""
        X_arr = np.asarray(X, dtype=float).reshape(-1, 2)
        return (X_arr - np.asarray(self.mean)) / np.asarray(self.std)
