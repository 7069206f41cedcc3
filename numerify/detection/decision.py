# ==============================================
# Decision (Data Classes)
# ==============================================
#
# PURPOSE:
#   Data classes that represent the OUTPUT of detection: the format
#   of one column, and how the scanned columns split between the two
#   conversion paths.
#
# ENUMS:
# ------
# - NumericFormat(Enum): DIRECT, NORMALIZED, NOT_NUMERIC
#     How a sample of text values reads as numbers.
#
# CLASSES:
# --------
# - ColumnPartition (dataclass)
#     The two disjoint, ordered lists of columns to convert.
#
#     Attributes:
#     -----------
#     - direct_columns: list       → Convert as-is ("1.5")
#     - normalized_columns: list   → Convert after "," → "." ("1,5")
#
#     Methods:
#     --------
#     - add(column, fmt)           → File a column under its format
#     - is_empty / total           → Nothing to convert? How many?
#     - to_dict() / from_dict()    → JSON-friendly form for reports
#
# ==============================================

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List


class NumericFormat(Enum):
    """
    Classification of a text sample.

    - DIRECT: every value parses as a plain decimal number
    - NORMALIZED: every value parses once "," is read as the decimal mark
    - NOT_NUMERIC: at least one value parses under neither format
    """
    DIRECT = "direct"
    NORMALIZED = "normalized"
    NOT_NUMERIC = "not_numeric"


@dataclass
class ColumnPartition:
    """
    Columns found numeric by one scan, split by conversion path.

    Lists keep the order in which columns were scanned. A column is
    never in both lists.
    """

    direct_columns: List[Hashable] = field(default_factory=list)
    normalized_columns: List[Hashable] = field(default_factory=list)

    def add(self, column: Hashable, fmt: NumericFormat) -> None:
        """
        File a column according to its format.

        NOT_NUMERIC columns are ignored.
        """
        if fmt is NumericFormat.DIRECT:
            self.direct_columns.append(column)
        elif fmt is NumericFormat.NORMALIZED:
            self.normalized_columns.append(column)

    @property
    def is_empty(self) -> bool:
        return not self.direct_columns and not self.normalized_columns

    @property
    def total(self) -> int:
        return len(self.direct_columns) + len(self.normalized_columns)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the partition for reporting.

        Returns:
            A JSON-serializable dictionary representation
        """
        return {
            "direct_columns": [str(col) for col in self.direct_columns],
            "normalized_columns": [str(col) for col in self.normalized_columns],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ColumnPartition":
        """
        Rebuild a ColumnPartition from its dictionary form.

        Args:
            data: Dictionary produced by to_dict()

        Returns:
            A ColumnPartition instance
        """
        return cls(
            direct_columns=list(data.get("direct_columns", [])),
            normalized_columns=list(data.get("normalized_columns", [])),
        )
