# ==============================================
# Numeric Caster
# ==============================================
#
# PURPOSE:
#   Convert chosen columns of a table to float, in place.
#
# FUNCTION:
# ---------
# - set_col_as_numeric(table, cols, strip_string=False, verbose=False)
#       -> pd.DataFrame
#
#   For each column:
#     - already numeric columns are left as they are
#     - other columns are replaced by parse_decimal_series(column,
#       normalize_comma=strip_string): unparseable and missing
#       cells become NaN
#
#   The table object is modified by reference and returned, so that
#   calls can be chained.
#
# ==============================================

from typing import Any

import pandas as pd

from numerify.detection import ColumnKind, TypeDetector, parse_decimal_series
from numerify.validation import resolve_columns, to_table


def set_col_as_numeric(
    table: Any,
    cols: Any,
    strip_string: bool = False,
    verbose: bool = False
) -> pd.DataFrame:
    """
    Set columns as numeric.

    Args:
        table: DataFrame (or table-like input) to modify
        cols: Column name(s) to convert; "auto" for every column
        strip_string: Read "," as the decimal mark before parsing
        verbose: Print one line per converted column

    Returns:
        The same table, with the columns converted

    Raises:
        InvalidInputKind: If table is not table-like
        InvalidColumnName: If a column is not in the table
    """
    function_name = "set_col_as_numeric"
    table = to_table(table, function_name)
    cols = resolve_columns(table, cols, function_name)

    for col in cols:
        if TypeDetector.detect(table[col]) is ColumnKind.NUMERIC:
            continue
        table[col] = parse_decimal_series(table[col], normalize_comma=strip_string)
        if verbose:
            print(f"  ✓ {function_name}: '{col}' set as numeric"
                  f"{' (comma read as decimal mark)' if strip_string else ''}")

    return table
