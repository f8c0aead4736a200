from __future__ import annotations

"""
Two-feature logistic regression trained with plain batch gradient descent.
Inputs are expected to be standardized already (see scaling.py).
"""

import numpy as np

from .constants import DECISION_THRESHOLD, LEARNING_RATE, N_ITERATIONS


class LogisticRegressionGD:
    """
    Logistic regression trained with batch gradient descent over the whole
    dataset for a fixed number of steps. Weights and bias start at zero, so
    a given dataset always produces the same model.
    """

    def __init__(
        self,
        lr: float = LEARNING_RATE,
        max_iter: int = N_ITERATIONS,
        verbose: bool = False,
    ):
        self.lr = lr
        self.max_iter = max_iter
        self.verbose = verbose
        self.coef_: np.ndarray | None = None
        self.intercept_: float = 0.0
        self.n_iter_: int = 0

    @staticmethod
    def _sigmoid(z: np.ndarray) -> np.ndarray:
        # exp overflows to inf for very negative z, which gives exactly 0.0
        with np.errstate(over="ignore"):
            return 1.0 / (1.0 + np.exp(-z))

    def fit(self, X, y):
        """Run max_iter full-batch updates on the cross-entropy gradient."""
        X_arr = np.asarray(X, dtype=float)
        y_arr = np.asarray(y, dtype=float)
        m = len(y_arr)

        weights = np.zeros(X_arr.shape[1])
        bias = 0.0

        for step in range(1, self.max_iter + 1):
            preds = self._sigmoid(X_arr @ weights + bias)
            diff = preds - y_arr
            grad_w = (X_arr.T @ diff) / m
            grad_b = float(np.sum(diff)) / m

            weights = weights - self.lr * grad_w
            bias = bias - self.lr * grad_b
            self.n_iter_ = step

            if self.verbose and step % 500 == 0:
                loss = -np.mean(
                    y_arr * np.log(preds + 1e-12)
                    + (1 - y_arr) * np.log(1 - preds + 1e-12)
                )
                print(f"[GD] step={step}, loss={loss:.4f}")

        self.coef_ = weights
        self.intercept_ = bias
        return self

    def decision_function(self, X) -> np.ndarray:
        if self.coef_ is None:
            raise RuntimeError("Model is not fitted.")
        X_arr = np.asarray(X, dtype=float)
        return X_arr @ self.coef_ + self.intercept_

    def predict_proba(self, X) -> np.ndarray:
        """Return P(y=1) for each row in X."""
        return self._sigmoid(self.decision_function(X))

    def predict(self, X, threshold: float = DECISION_THRESHOLD) -> np.ndarray:
        """Binary predictions using the provided threshold."""
        return (self.predict_proba(X) >= threshold).astype(int)
