# ==============================================
# Tests for ColumnScanner
# ==============================================

import numpy as np
import pandas as pd

from numerify.detection import ColumnScanner, FormatClassifier, NumericFormat


class RecordingClassifier(FormatClassifier):
    def __init__(self):
        self.samples = []

    def classify(self, sample):
        self.samples.append(list(sample))
        return super().classify(sample)


class TestColumnScanner:
    def test_partitions_documentation_example(self, data_set):
        partition = ColumnScanner().scan(data_set, list(data_set.columns), 30)
        assert partition.direct_columns == ["col1"]
        assert partition.normalized_columns == ["col2"]

    def test_keeps_scan_order(self):
        table = pd.DataFrame({
            "b": ["1", "2"],
            "a": ["1,5", "2"],
            "d": ["3", "4"],
            "c": ["0,1", "0,2"],
        })
        partition = ColumnScanner().scan(table, ["d", "c", "b", "a"], 30)
        assert partition.direct_columns == ["d", "b"]
        assert partition.normalized_columns == ["c", "a"]

    def test_only_listed_columns_are_scanned(self, data_set):
        partition = ColumnScanner().scan(data_set, ["col2"], 30)
        assert partition.direct_columns == []
        assert partition.normalized_columns == ["col2"]

    def test_skips_non_text_columns(self):
        classifier = RecordingClassifier()
        table = pd.DataFrame({"n": [1.0, 2.0], "flag": [True, False]})
        partition = ColumnScanner(classifier).scan(table, ["n", "flag"], 30)
        assert partition.is_empty
        assert classifier.samples == []

    def test_skips_columns_without_values(self):
        classifier = RecordingClassifier()
        table = pd.DataFrame({"empty": pd.Series(["", None, np.nan], dtype=object)})
        partition = ColumnScanner(classifier).scan(table, ["empty"], 30)
        assert partition.is_empty
        assert classifier.samples == []

    def test_sample_ignores_missing_and_empty_cells(self):
        classifier = RecordingClassifier()
        table = pd.DataFrame({"x": pd.Series([None, "", "1,5", np.nan, "2,5"], dtype=object)})
        partition = ColumnScanner(classifier).scan(table, ["x"], 30)
        assert classifier.samples == [["1,5", "2,5"]]
        assert partition.normalized_columns == ["x"]

    def test_progress_reported_for_every_column(self, data_set):
        seen = []
        ColumnScanner().scan(data_set, list(data_set.columns), 30, seen.append)
        assert seen == ["ID", "col1", "col2", "name"]

    def test_sample_size_bounds_detection(self):
        table = pd.DataFrame({"x": ["1,5", "oops", "2,5"]})
        scanner = ColumnScanner()
        assert scanner.scan(table, ["x"], 1).normalized_columns == ["x"]
        assert scanner.scan(table, ["x"], 2).is_empty

    def test_scan_column(self):
        scanner = ColumnScanner()
        assert scanner.scan_column(pd.Series(["1", "2"]), 5) is NumericFormat.DIRECT
        assert scanner.scan_column(pd.Series(["x", "2"]), 5) is NumericFormat.NOT_NUMERIC
        assert scanner.scan_column(pd.Series([1, 2]), 5) is None

    def test_does_not_modify_table(self, data_set):
        before = data_set.copy()
        ColumnScanner().scan(data_set, list(data_set.columns), 30)
        pd.testing.assert_frame_equal(data_set, before)
