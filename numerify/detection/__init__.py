# ==============================================
# TOPIC 2: DETECTION
# ==============================================
#
# This package decides which text columns hold numbers, and in
# which format, WITHOUT touching the table.
#
# Modules:
# --------
# - type_detector.py      → Column kind (text / numeric / other), decimal grammar
# - decimal_parser.py     → Parse a series of cells with that grammar
# - sampling.py           → First n non-missing, non-empty values of a column
# - decision.py           → NumericFormat enum and ColumnPartition
# - format_classifier.py  → Classify one sample
# - column_scanner.py     → Scan many columns, build the partition
#
# ==============================================

from .type_detector import TypeDetector, ColumnKind
from .decimal_parser import parse_decimal_series
from .sampling import find_n_first_non_null
from .decision import NumericFormat, ColumnPartition
from .format_classifier import FormatClassifier
from .column_scanner import ColumnScanner

__all__ = [
    "TypeDetector",
    "ColumnKind",
    "parse_decimal_series",
    "find_n_first_non_null",
    "NumericFormat",
    "ColumnPartition",
    "FormatClassifier",
    "ColumnScanner",
]
