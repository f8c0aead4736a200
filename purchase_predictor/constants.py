"""
Shared constants: fixed training hyperparameters, algorithm names and the
column layout of the purchase dataset.
"""

# Gradient descent is not tuned; these are part of the model definition.
LEARNING_RATE = 0.1
N_ITERATIONS = 1000

DEFAULT_K = 5
DECISION_THRESHOLD = 0.5

LOGISTIC_REGRESSION = "logistic-regression"
KNN = "knn"
ALGORITHMS = (LOGISTIC_REGRESSION, KNN)

ALGORITHM_LABELS = {
    LOGISTIC_REGRESSION: "Logistic Regression",
    KNN: "KNN",
}

AGE_COLUMN = "Age"
INCOME_COLUMN = "EstimatedSalary"
LABEL_COLUMN = "Purchased"

# Header substrings used to locate columns in uploaded CSV files
AGE_HINT = "age"
INCOME_HINT = "salary"
LABEL_HINT = "purchased"

# Synthetic dataset used when no CSV is supplied
SAMPLE_SIZE = 120
SAMPLE_AGE_RANGE = (18, 60)
SAMPLE_INCOME_RANGE = (15000, 150000)
SAMPLE_AGE_SLOPE = 0.18
SAMPLE_AGE_CENTER = 38
SAMPLE_INCOME_SLOPE = 0.00004
SAMPLE_INCOME_CENTER = 80000
