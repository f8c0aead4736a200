from __future__ import annotations

"""
Classification engine: one fitted snapshot of both models for one dataset.

An engine is built once from a list of LabeledRecord and never changes
afterwards. To retrain on new data, build a new engine and swap the reference.
"""

from typing import Iterable

import numpy as np
import pandas as pd

from .constants import (
    ALGORITHM_LABELS,
    ALGORITHMS,
    DECISION_THRESHOLD,
    DEFAULT_K,
    KNN,
    LOGISTIC_REGRESSION,
)
from .data_prep import records_from_frame
from .errors import InvalidTrainingSet, UnknownAlgorithm
from .knn import KNNVoter
from .logreg import LogisticRegressionGD
from .records import LabeledRecord, Prediction, PredictionReport, records_to_arrays
from .scaling import ScalingParameters


class ClassificationEngine:
    """
    Fits the scaling parameters and the gradient-descent logistic model at
    construction; KNN is evaluated per query against the cached standardized
    training matrix.
    """

    def __init__(self, records: Iterable[LabeledRecord]):
        self._records = tuple(records)
        if not self._records:
            raise InvalidTrainingSet("Training set must contain at least one record.")

        X, y = records_to_arrays(self._records)
        self._labels = y
        self._scaling = ScalingParameters.from_features(X)
        self._X_scaled = self._scaling.transform(X)
        self._X_scaled.setflags(write=False)
        self._labels.setflags(write=False)

        self._model = LogisticRegressionGD().fit(self._X_scaled, y)
        self._knn = KNNVoter(self._X_scaled, y)

    @classmethod
    def from_records(cls, records: Iterable[LabeledRecord]) -> "ClassificationEngine":
        return cls(records)

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "ClassificationEngine":
        """Build an engine from a frame with Age / EstimatedSalary / Purchased columns."""
        return cls(records_from_frame(df))

    @property
    def records(self) -> tuple[LabeledRecord, ...]:
        return self._records

    @property
    def scaling(self) -> ScalingParameters:
        return self._scaling

    @property
    def weights(self) -> tuple[float, float]:
        return float(self._model.coef_[0]), float(self._model.coef_[1])

    @property
    def bias(self) -> float:
        return float(self._model.intercept_)

    def __len__(self) -> int:
        return len(self._records)

    def standardize(self, feature1: float, feature2: float) -> tuple[float, float]:
        return self._scaling.standardize(feature1, feature2)

    def predict_logistic_regression(self, feature1: float, feature2: float) -> Prediction:
        point = np.array([self.standardize(feature1, feature2)], dtype=float)
        probability = float(self._model.predict_proba(point)[0])
        return Prediction(purchased=probability >= DECISION_THRESHOLD, probability=probability)

    def predict_knn(self, feature1: float, feature2: float, k: int = DEFAULT_K) -> Prediction:
        return self._knn.vote(self.standardize(feature1, feature2), k)

    def predict(
        self, algorithm: str, feature1: float, feature2: float, k: int = DEFAULT_K
    ) -> Prediction:
        if algorithm == LOGISTIC_REGRESSION:
            return self.predict_logistic_regression(feature1, feature2)
        if algorithm == KNN:
            return self.predict_knn(feature1, feature2, k)
        raise UnknownAlgorithm(algorithm)

    def accuracy(self, algorithm: str, k: int = DEFAULT_K) -> float:
        """
        Training-set accuracy: every record is re-predicted from its own raw
        features and compared with its label. There is no held-out split.
        k only applies to KNN.
        """
        if algorithm not in ALGORITHMS:
            raise UnknownAlgorithm(algorithm)
        correct = 0
        for record in self._records:
            pred = self.predict(algorithm, record.feature1, record.feature2, k)
            if int(pred.purchased) == record.label:
                correct += 1
        return correct / len(self._records)

    def summary(self, feature1: float, feature2: float, k: int = DEFAULT_K) -> list[PredictionReport]:
        """Prediction and training accuracy per algorithm, logistic regression first."""
        lr = self.predict_logistic_regression(feature1, feature2)
        knn = self.predict_knn(feature1, feature2, k)
        return [
            PredictionReport(
                algorithm=ALGORITHM_LABELS[LOGISTIC_REGRESSION],
                purchased=lr.purchased,
                probability=lr.probability,
                accuracy=self.accuracy(LOGISTIC_REGRESSION),
            ),
            PredictionReport(
                algorithm=f"{ALGORITHM_LABELS[KNN]} (K={k})",
                purchased=knn.purchased,
                probability=knn.probability,
                accuracy=self.accuracy(KNN, k),
            ),
        ]
