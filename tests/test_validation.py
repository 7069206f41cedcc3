# ==============================================
# Tests for Validation Module
# ==============================================

import math

import numpy as np
import pandas as pd
import pytest

from numerify.errors import InvalidColumnName, InvalidInputKind, InvalidParameterRange
from numerify.validation import check_verbose, resolve_columns, to_table, validate_sample_size


class TestToTable:
    def test_dataframe_is_returned_as_is(self, data_set):
        assert to_table(data_set) is data_set

    def test_mapping_of_columns(self):
        table = to_table({"a": ["1", "2"], "b": [3, 4]})
        assert list(table.columns) == ["a", "b"]
        assert table.shape == (2, 2)

    def test_list_of_rows(self):
        table = to_table([{"a": "1"}, {"a": "2"}])
        assert table["a"].tolist() == ["1", "2"]

    def test_series(self):
        table = to_table(pd.Series(["1", "2"], name="x"))
        assert list(table.columns) == ["x"]

    def test_two_dimensional_array(self):
        table = to_table(np.array([["1", "2"], ["3", "4"]], dtype=object))
        assert list(table.columns) == ["V1", "V2"]

    @pytest.mark.parametrize("bad_input", ["a,b", 42, None, [1, 2, 3], np.array([1, 2])])
    def test_rejects_non_tables(self, bad_input):
        with pytest.raises(InvalidInputKind):
            to_table(bad_input)

    def test_rejects_ragged_columns(self):
        with pytest.raises(InvalidInputKind):
            to_table({"a": [1, 2], "b": [1]})

    def test_rejects_empty_tables(self):
        with pytest.raises(InvalidInputKind):
            to_table(pd.DataFrame())
        with pytest.raises(InvalidInputKind):
            to_table(pd.DataFrame({"a": []}))

    def test_rejects_duplicated_column_names(self):
        table = pd.DataFrame([["1", "2"], ["3", "4"]], columns=["a", "a"])
        with pytest.raises(InvalidInputKind) as excinfo:
            to_table(table)
        assert "'a'" in str(excinfo.value)

    def test_error_is_a_type_error(self):
        with pytest.raises(TypeError):
            to_table("not a table")


class TestResolveColumns:
    def test_auto_means_every_column(self, data_set):
        assert resolve_columns(data_set, "auto") == ["ID", "col1", "col2", "name"]

    def test_single_name(self, data_set):
        assert resolve_columns(data_set, "col2") == ["col2"]

    def test_explicit_names_keep_order_and_drop_duplicates(self, data_set):
        assert resolve_columns(data_set, ["col2", "ID", "col2"]) == ["col2", "ID"]

    def test_nothing_selected(self, data_set):
        assert resolve_columns(data_set, None) == []
        assert resolve_columns(data_set, []) == []

    def test_unknown_names(self, data_set):
        with pytest.raises(InvalidColumnName) as excinfo:
            resolve_columns(data_set, ["col1", "nope", "missing"])
        assert excinfo.value.missing == ["nope", "missing"]
        assert "nope" in str(excinfo.value)

    def test_unknown_name_is_a_key_error(self, data_set):
        with pytest.raises(KeyError):
            resolve_columns(data_set, "nope")

    def test_integer_labels(self):
        table = pd.DataFrame([["1", "2"]])
        assert resolve_columns(table, 1) == [1]


class TestValidateSampleSize:
    def test_valid_value(self, data_set):
        assert validate_sample_size(data_set, 3) == 3

    def test_clamped_to_row_count(self, data_set, capsys):
        assert validate_sample_size(data_set, 30) == 5
        assert capsys.readouterr().out == ""

    def test_clamp_warning_when_verbose(self, data_set, capsys):
        validate_sample_size(data_set, 30, verbose=True)
        assert "larger than the number of rows" in capsys.readouterr().out

    def test_integral_float_accepted(self, data_set):
        assert validate_sample_size(data_set, 2.0) == 2

    @pytest.mark.parametrize("bad_value", [0, -1, math.inf, math.nan, 1.5, "3", None, True])
    def test_rejected_values(self, data_set, bad_value):
        with pytest.raises(InvalidParameterRange):
            validate_sample_size(data_set, bad_value)

    def test_error_is_a_value_error(self, data_set):
        with pytest.raises(ValueError):
            validate_sample_size(data_set, -5)


class TestCheckVerbose:
    def test_booleans(self):
        assert check_verbose(True) is True
        assert check_verbose(False) is False

    def test_rejects_other_values(self):
        with pytest.raises(InvalidInputKind):
            check_verbose("yes")
