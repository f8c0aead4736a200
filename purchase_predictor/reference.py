from __future__ import annotations

"""
scikit-learn counterparts of the engine's two models, fitted on the same
records. Used to sanity-check the hand-written implementations.
"""

from sklearn.linear_model import LogisticRegression
from sklearn.neighbors import KNeighborsClassifier
from sklearn.pipeline import make_pipeline
from sklearn.preprocessing import StandardScaler

from .constants import DEFAULT_K, KNN, LOGISTIC_REGRESSION
from .records import records_to_arrays


def fit_sklearn_reference(engine, k: int = DEFAULT_K) -> dict:
    """
    Fit make_pipeline(StandardScaler(), ...) versions of both models. k is
    capped at the dataset size since KNeighborsClassifier refuses larger values.
    Returns None for logistic regression when the labels hold a single class.
    """
    X, y = records_to_arrays(engine.records)

    lr_model = None
    if len(set(y.tolist())) > 1:
        lr_model = make_pipeline(StandardScaler(), LogisticRegression(max_iter=5000))
        lr_model.fit(X, y)

    knn_model = make_pipeline(
        StandardScaler(), KNeighborsClassifier(n_neighbors=min(k, len(y)))
    )
    knn_model.fit(X, y)
    return {LOGISTIC_REGRESSION: lr_model, KNN: knn_model}


def reference_coefficients(pipeline) -> tuple[float, float, float]:
    """(w1, w2, b) of a fitted reference logistic pipeline, in standardized space."""
    logreg = pipeline.named_steps["logisticregression"]
    return float(logreg.coef_[0][0]), float(logreg.coef_[0][1]), float(logreg.intercept_[0])
