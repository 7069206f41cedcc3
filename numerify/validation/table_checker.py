# ==============================================
# Table Checker
# ==============================================
#
# PURPOSE:
#   Coerce whatever the caller hands us into the working table
#   representation (a pandas DataFrame) and make sure it is usable.
#
# FUNCTION:
# ---------
# - to_table(data_set, function_name) -> pd.DataFrame
#
# ACCEPTED INPUTS:
# ----------------
#   DataFrame          → returned as-is (same object, mutated later)
#   Series             → one-column DataFrame
#   Mapping            → {column: sequence of cells}
#   list of mappings   → one mapping per row
#   2-D numpy array    → columns named "V1", "V2", ...
#
# REJECTED (InvalidInputKind):
# ----------------------------
#   any other type, columns of unequal length, zero rows or zero columns,
#   duplicated column names
#
#   Only a DataFrame input is mutated by reference; any other input is
#   copied into a new DataFrame, which callers must use from then on.
#
# ==============================================

from collections.abc import Mapping
from typing import Any

import numpy as np
import pandas as pd

from numerify.errors import InvalidInputKind


def to_table(data_set: Any, function_name: str = "to_table") -> pd.DataFrame:
    """
    Return data_set as a DataFrame.

    A DataFrame input is never copied: later steps mutate it by reference.

    Args:
        data_set: Table-like input
        function_name: Name used as prefix in error messages

    Returns:
        The working DataFrame

    Raises:
        InvalidInputKind: If data_set cannot be used as a table
    """
    if isinstance(data_set, pd.DataFrame):
        table = data_set
    elif isinstance(data_set, pd.Series):
        table = data_set.to_frame()
    elif isinstance(data_set, np.ndarray):
        if data_set.ndim != 2:
            raise InvalidInputKind(
                f"{function_name}: data_set should be a 2-D array, got {data_set.ndim} dimension(s)"
            )
        columns = [f"V{i + 1}" for i in range(data_set.shape[1])]
        table = pd.DataFrame(data_set, columns=columns)
    elif isinstance(data_set, Mapping):
        table = _from_mapping(data_set, function_name)
    elif isinstance(data_set, list) and data_set and all(isinstance(row, Mapping) for row in data_set):
        table = pd.DataFrame.from_records(data_set)
    else:
        raise InvalidInputKind(
            f"{function_name}: data_set should be a DataFrame, a mapping of columns, "
            f"a list of row mappings or a 2-D array, got {type(data_set).__name__}"
        )

    if table.shape[0] == 0 or table.shape[1] == 0:
        raise InvalidInputKind(f"{function_name}: data_set should have at least one row and one column")

    if table.columns.has_duplicates:
        duplicated = table.columns[table.columns.duplicated()].unique().tolist()
        raise InvalidInputKind(
            f"{function_name}: column names should be unique, duplicated: {duplicated}"
        )

    return table


def _from_mapping(data_set: Mapping, function_name: str) -> pd.DataFrame:
    lengths = set()
    for name, values in data_set.items():
        if isinstance(values, (str, bytes)) or not hasattr(values, "__len__"):
            raise InvalidInputKind(
                f"{function_name}: column {name!r} should be a sequence of cells"
            )
        lengths.add(len(values))

    if len(lengths) > 1:
        raise InvalidInputKind(
            f"{function_name}: all columns should have the same number of rows, got {sorted(lengths)}"
        )

    return pd.DataFrame({name: list(values) for name, values in data_set.items()})
