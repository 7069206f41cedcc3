# ==============================================
# Column Resolver
# ==============================================
#
# PURPOSE:
#   Turn a column selector into the ordered list of column names
#   that the scanner (or the caster) should look at.
#
# FUNCTION:
# ---------
# - resolve_columns(table, cols, function_name) -> list[str]
#
# RULES:
# ------
#   1. "auto"             → every column, in table order
#   2. None / empty list  → nothing to do (empty list)
#   3. single string      → that one column
#   4. iterable of names  → those columns, duplicates dropped,
#                           caller order kept
#   5. unknown name       → InvalidColumnName (lists every missing name)
#
# ==============================================

from typing import Any, Hashable, List

import pandas as pd

from numerify.errors import InvalidColumnName, InvalidInputKind

AUTO = "auto"


def resolve_columns(table: pd.DataFrame, cols: Any = AUTO, function_name: str = "resolve_columns") -> List[Hashable]:
    """
    Resolve a column selector against a table.

    Args:
        table: The working DataFrame
        cols: "auto", a column name, or an iterable of column names
        function_name: Name used as prefix in error messages

    Returns:
        Ordered list of column names, each present in the table

    Raises:
        InvalidColumnName: If a requested column is not in the table
        InvalidInputKind: If cols is not a name or an iterable of names
    """
    if cols is None:
        return []

    if isinstance(cols, str):
        if cols == AUTO:
            return list(table.columns)
        requested = [cols]
    else:
        try:
            requested = list(cols)
        except TypeError:
            # A scalar label such as an integer column name
            requested = [cols]

    if not requested:
        return []

    resolved: List[Hashable] = []
    seen = set()
    for name in requested:
        try:
            if name in seen:
                continue
        except TypeError:
            raise InvalidInputKind(f"{function_name}: column names should be hashable, got {name!r}")
        seen.add(name)
        resolved.append(name)

    missing = [name for name in resolved if name not in table.columns]
    if missing:
        raise InvalidColumnName(missing, function_name)

    return resolved
