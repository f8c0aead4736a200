from __future__ import annotations

import pandas as pd
import pytest

from purchase_predictor import DatasetFormatError, LabeledRecord, generate_sample_records, load_records
from purchase_predictor.data_prep import normalize_columns, records_from_frame, records_to_frame


def test_load_records_matches_columns_by_name(purchase_csv):
    records = load_records(purchase_csv)

    assert len(records) == 6
    assert records[0] == LabeledRecord(19.0, 19000.0, 0)
    assert records[-1] == LabeledRecord(58.0, 144000.0, 1)


def test_load_records_truncates_fractions(purchase_csv):
    records = load_records(purchase_csv)
    assert records[3] == LabeledRecord(27.0, 57000.0, 0)


def test_header_matching_is_case_insensitive():
    df = pd.DataFrame({"PURCHASED": [1, 0], " customer_age ": [30, 40], "AnnualSalary": [50000, 60000]})
    out = normalize_columns(df)

    assert list(out.columns) == ["Age", "EstimatedSalary", "Purchased"]
    assert out["Age"].tolist() == [30, 40]
    assert out["Purchased"].tolist() == [1, 0]


def test_missing_column_raises(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("Age,Income,Purchased\n30,40000,1\n")
    with pytest.raises(DatasetFormatError, match="salary"):
        load_records(path)


def test_frame_conversion_keeps_order():
    records = [LabeledRecord(31.0, 42000.0, 1), LabeledRecord(22.0, 18000.0, 0)]
    assert records_from_frame(records_to_frame(records)) == records


def test_sample_records_are_seeded():
    first = generate_sample_records(n=50, random_state=3)
    second = generate_sample_records(n=50, random_state=3)

    assert first == second
    assert len(first) == 50


def test_sample_records_ranges():
    records = generate_sample_records(n=400, random_state=11)

    assert all(18 <= r.feature1 <= 60 for r in records)
    assert all(15000 <= r.feature2 <= 150000 for r in records)
    assert {r.label for r in records} == {0, 1}
