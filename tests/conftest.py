# tests/conftest.py
from __future__ import annotations

import pytest

from purchase_predictor import ClassificationEngine, LabeledRecord, generate_sample_records


@pytest.fixture
def two_point_records() -> list[LabeledRecord]:
    """Two well-separated customers with opposite labels."""
    return [
        LabeledRecord(20, 20000, 0),
        LabeledRecord(60, 140000, 1),
    ]


@pytest.fixture
def two_point_engine(two_point_records) -> ClassificationEngine:
    return ClassificationEngine(two_point_records)


@pytest.fixture
def sample_records() -> list[LabeledRecord]:
    return generate_sample_records(n=120, random_state=7)


@pytest.fixture
def sample_engine(sample_records) -> ClassificationEngine:
    return ClassificationEngine(sample_records)


@pytest.fixture
def purchase_csv(tmp_path):
    """Small CSV laid out like the usual Social Network Ads export."""
    path = tmp_path / "ads.csv"
    path.write_text(
        "User ID,Gender,Age,EstimatedSalary,Purchased\n"
        "15624510,Male,19,19000,0\n"
        "15810944,Male,35,20000,0\n"
        "15668575,Female,26,43000,0\n"
        "15603246,Female,27.9,57000.5,0\n"
        "15804002,Male,,76000,0\n"
        "15728773,Male,47,25000,1\n"
        "15598044,Female,58,144000,1\n"
        "\n"
    )
    return path
