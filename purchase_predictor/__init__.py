"""
Purchase prediction from customer age and income.

This package contains a two-model classification engine (gradient-descent
logistic regression and k-nearest-neighbours), dataset helpers, and the
evaluation utilities used by main.py.
"""

from .constants import ALGORITHMS, DEFAULT_K, KNN, LOGISTIC_REGRESSION
from .data_prep import generate_sample_records, load_records, records_to_frame
from .engine import ClassificationEngine
from .errors import DatasetFormatError, InvalidTrainingSet, UnknownAlgorithm
from .logreg import LogisticRegressionGD
from .metrics import compute_classification_metrics, training_report
from .records import LabeledRecord, Prediction, PredictionReport
from .scaling import ScalingParameters

__all__ = [
    "ALGORITHMS",
    "DEFAULT_K",
    "KNN",
    "LOGISTIC_REGRESSION",
    "generate_sample_records",
    "load_records",
    "records_to_frame",
    "ClassificationEngine",
    "DatasetFormatError",
    "InvalidTrainingSet",
    "UnknownAlgorithm",
    "LogisticRegressionGD",
    "compute_classification_metrics",
    "training_report",
    "LabeledRecord",
    "Prediction",
    "PredictionReport",
    "ScalingParameters",
]
