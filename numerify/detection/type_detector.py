import re
import numbers
from enum import Enum
from typing import Any

import pandas as pd


class ColumnKind(Enum):
    """
    What a column holds, read from its dtype before any sampling.

    - TEXT: strings (StringDtype, or object dtype holding only str and missing cells)
    - NUMERIC: numeric, non-boolean dtype
    - OTHER: booleans, datetimes, categoricals, mixed objects...
    """
    TEXT = "text"
    NUMERIC = "numeric"
    OTHER = "other"


class TypeDetector:
    DECIMAL_PATTERN = re.compile(
        r'^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$'
    )

    TEXT_INFERRED_TYPES = {"string", "empty"}

    @classmethod
    def detect(cls, column: pd.Series) -> ColumnKind:
        dtype = column.dtype

        if pd.api.types.is_bool_dtype(dtype):
            return ColumnKind.OTHER

        if isinstance(dtype, pd.StringDtype):
            return ColumnKind.TEXT

        if pd.api.types.is_numeric_dtype(dtype):
            return ColumnKind.NUMERIC

        if pd.api.types.is_object_dtype(dtype):
            inferred = pd.api.types.infer_dtype(column, skipna=True)
            if inferred in cls.TEXT_INFERRED_TYPES:
                return ColumnKind.TEXT

        return ColumnKind.OTHER

    @classmethod
    def is_missing(cls, value: Any) -> bool:
        if value is None:
            return True
        if pd.api.types.is_scalar(value):
            return bool(pd.isna(value))
        return False

    @classmethod
    def is_decimal(cls, value: str) -> bool:
        return bool(cls.DECIMAL_PATTERN.match(value))

    @classmethod
    def parse_decimal(cls, value: Any, normalize_comma: bool = False) -> float:
        if isinstance(value, str):
            if normalize_comma:
                value = value.replace(",", ".")
            if cls.is_decimal(value):
                return float(value)
            return float("nan")

        if isinstance(value, numbers.Real) and not isinstance(value, bool):
            return float(value)

        return float("nan")
