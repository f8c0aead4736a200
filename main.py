from __future__ import annotations

"""
CLI entrypoint for the purchase classifier. Pick experiment via --experiment:
predict (both models for one customer), evaluate (training-set metrics),
compare (custom models vs scikit-learn).
"""

import argparse
from pathlib import Path

import numpy as np

from purchase_predictor import (
    DEFAULT_K,
    KNN,
    LOGISTIC_REGRESSION,
    ClassificationEngine,
    InvalidTrainingSet,
    generate_sample_records,
    load_records,
    training_report,
)
from purchase_predictor.metrics import majority_baseline
from purchase_predictor.reference import fit_sklearn_reference, reference_coefficients


def describe_dataset(engine: ClassificationEngine):
    """Print a short summary of dataset size, balance, and scaling."""
    labels = [r.label for r in engine.records]
    scaling = engine.scaling
    print(f"Training records: {len(engine)}")
    print(f"Purchase rate: {np.mean(labels):.3f}")
    print(
        f"Age mean/std: {scaling.mean[0]:.2f}/{scaling.std[0]:.2f}, "
        f"income mean/std: {scaling.mean[1]:.2f}/{scaling.std[1]:.2f}"
    )


def print_metrics(label: str, metrics: dict):
    """Nicely format the metric dict produced by compute_classification_metrics."""
    cm = metrics["confusion_matrix"]
    print(
        f"[{label}] Acc {metrics['accuracy']:.3f} | "
        f"Prec {metrics['precision']:.3f} | Rec {metrics['recall']:.3f} | "
        f"F1 {metrics['f1']:.3f} | ROC-AUC {metrics['roc_auc']:.3f}"
    )
    print(f"    Confusion matrix [[TN, FP], [FN, TP]]: {cm.tolist()}")


def build_arg_parser():
    """CLI parser with the dataset source, query point and experiment choice."""
    parser = argparse.ArgumentParser(
        description="Predict whether a customer purchases from age and estimated salary."
    )
    parser.add_argument(
        "--csv-path",
        type=Path,
        default=None,
        help="CSV with age, salary and purchased columns. Synthetic data when omitted.",
    )
    parser.add_argument(
        "--experiment",
        choices=["predict", "evaluate", "compare"],
        default="predict",
        help="predict: one customer; evaluate: training metrics; compare: vs scikit-learn.",
    )
    parser.add_argument("--age", type=float, default=38)
    parser.add_argument("--income", type=float, default=85000)
    parser.add_argument("--k", type=int, default=DEFAULT_K, help="Neighbours for KNN.")
    parser.add_argument("--samples", type=int, default=120, help="Size of the synthetic dataset.")
    parser.add_argument(
        "--random-state",
        type=int,
        default=42,
        help="Random seed for the synthetic dataset.",
    )
    parser.add_argument("--verbose", action="store_true", help="Print dataset summary.")
    return parser


def build_engine(args: argparse.Namespace) -> ClassificationEngine:
    """Engine over the CSV when given, the synthetic dataset otherwise."""
    if args.csv_path is not None:
        try:
            return ClassificationEngine.from_records(load_records(args.csv_path))
        except InvalidTrainingSet:
            print(f"No usable rows in {args.csv_path}; using the synthetic dataset instead.")
    records = generate_sample_records(n=args.samples, random_state=args.random_state)
    return ClassificationEngine.from_records(records)


def run_predict(engine: ClassificationEngine, args: argparse.Namespace):
    """Both models for the customer given by --age/--income."""
    print(f"Customer: age {args.age:g}, income {args.income:g}")
    for row in engine.summary(args.age, args.income, k=args.k):
        verdict = "purchase" if row.purchased else "no purchase"
        print(
            f"  {row.algorithm}: {verdict} (p={row.probability:.3f}), "
            f"training accuracy {row.accuracy:.1%}"
        )


def run_evaluate(engine: ClassificationEngine, args: argparse.Namespace):
    """Training-set metrics for both models plus the majority baseline."""
    labels = np.array([r.label for r in engine.records])
    print_metrics("Majority baseline", majority_baseline(labels))

    report = training_report(engine, k=args.k)
    print_metrics("Logistic regression (GD)", report[LOGISTIC_REGRESSION])
    print_metrics(f"KNN (K={args.k})", report[KNN])

    w1, w2 = engine.weights
    print(f"\nWeights (standardized space): age {w1:.4f}, income {w2:.4f}, bias {engine.bias:.4f}")


def run_compare(engine: ClassificationEngine, args: argparse.Namespace):
    """Custom models vs scikit-learn fitted on the same records."""
    reference = fit_sklearn_reference(engine, k=args.k)
    X = np.array([[r.feature1, r.feature2] for r in engine.records])

    sk_lr = reference[LOGISTIC_REGRESSION]
    if sk_lr is None:
        print("Single-class labels: skipping scikit-learn LogisticRegression.")
    else:
        w1, w2, b = reference_coefficients(sk_lr)
        print(f"sklearn LogisticRegression: age {w1:.4f}, income {w2:.4f}, bias {b:.4f}")
        gd_w1, gd_w2 = engine.weights
        print(f"Custom GD logistic:         age {gd_w1:.4f}, income {gd_w2:.4f}, bias {engine.bias:.4f}")
        sk_preds = sk_lr.predict(X)
        gd_preds = [engine.predict_logistic_regression(*row).purchased for row in X]
        print(f"    Prediction agreement: {np.mean(sk_preds == np.array(gd_preds, dtype=int)):.3f}")

    sk_knn = reference[KNN]
    sk_preds = sk_knn.predict(X)
    own_preds = [engine.predict_knn(*row, k=args.k).purchased for row in X]
    print(f"KNN (K={args.k}) agreement with sklearn: {np.mean(sk_preds == np.array(own_preds, dtype=int)):.3f}")


def main(args: argparse.Namespace | None = None):
    """Dispatch to the selected experiment."""
    args = args or build_arg_parser().parse_args()
    engine = build_engine(args)

    if args.verbose:
        describe_dataset(engine)

    if args.experiment == "predict":
        run_predict(engine, args)
    elif args.experiment == "evaluate":
        run_evaluate(engine, args)
    else:
        run_compare(engine, args)


if __name__ == "__main__":
    main()
