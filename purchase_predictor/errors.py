"""
Exceptions raised by the engine and the dataset loaders.
"""


class InvalidTrainingSet(ValueError):
    """Raised when an engine is built from an empty record sequence."""


class UnknownAlgorithm(ValueError):
    def __init__(self, algorithm: str):
        super().__init__(f"Unknown algorithm: {algorithm}")
        self.algorithm = algorithm


class DatasetFormatError(ValueError):
    """Raised when a CSV header lacks the age, salary or purchased column."""
