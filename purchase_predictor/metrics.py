from __future__ import annotations

"""
Metric helpers for the evaluate experiment (classification summaries on the
training set and a majority-class baseline).
"""

import numpy as np
import pandas as pd
from sklearn import metrics

from .constants import DECISION_THRESHOLD, DEFAULT_K, KNN, LOGISTIC_REGRESSION


def compute_classification_metrics(
    y_true: np.ndarray | pd.Series,
    probs: np.ndarray,
    threshold: float = DECISION_THRESHOLD,
    preds: np.ndarray | None = None,
):
    """
    Compute standard binary metrics given probabilities and a threshold.
    Pass preds to score labels that were not derived from the threshold.
    """
    probs = np.asarray(probs, dtype=float)
    if preds is None:
        preds = (probs >= threshold).astype(int)
    precision, recall, f1, _ = metrics.precision_recall_fscore_support(
        y_true, preds, average="binary", zero_division=0
    )
    try:
        roc_auc = metrics.roc_auc_score(y_true, probs)
    except ValueError:
        roc_auc = float("nan")

    return {
        "accuracy": metrics.accuracy_score(y_true, preds),
        "precision": precision,
        "recall": recall,
        "f1": f1,
        "roc_auc": roc_auc,
        "confusion_matrix": metrics.confusion_matrix(y_true, preds, labels=[0, 1]),
    }


def majority_baseline(
    y_train: np.ndarray | pd.Series, y_test: np.ndarray | pd.Series | None = None
):
    """
    Predicts the positive rate learned from y_train for every row of y_test
    (y_train itself when no test labels are given).
    """
    if y_test is None:
        y_test = y_train
    prob = float(np.mean(y_train))
    probs = np.full(len(y_test), prob, dtype=float)
    return compute_classification_metrics(y_test, probs)


def training_report(engine, k: int = DEFAULT_K) -> dict[str, dict]:
    """Training-set metrics for both algorithms of a fitted engine."""
    records = engine.records
    y_true = np.array([r.label for r in records], dtype=int)

    lr_preds = [engine.predict_logistic_regression(r.feature1, r.feature2) for r in records]
    knn_preds = [engine.predict_knn(r.feature1, r.feature2, k) for r in records]

    return {
        LOGISTIC_REGRESSION: compute_classification_metrics(
            y_true, np.array([p.probability for p in lr_preds])
        ),
        KNN: compute_classification_metrics(
            y_true,
            np.array([p.probability for p in knn_preds]),
            preds=np.array([int(p.purchased) for p in knn_preds]),
        ),
    }
