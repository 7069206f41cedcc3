# ==============================================
# numerify
# ==============================================
#
# Find text columns of a table that are in fact numeric, and
# convert them in place, reading "," as a decimal mark when needed.
#
# Package Structure (3 Topics + Orchestrator):
#
# numerify/
# ├── validation/     # Topic 1: Check the table, columns and parameters
# ├── detection/      # Topic 2: Sample columns & classify their format
# ├── transform/      # Topic 3: Cast detected columns to float
# ├── reporting.py    # Progress output
# ├── config.py       # Configuration management
# ├── errors.py       # Error taxonomy
# ├── converter.py    # Final orchestrator class
# └── cli.py          # Command line entry point
#
# ==============================================

__version__ = "0.1.0"

from numerify.errors import NumerifyError, InvalidInputKind, InvalidColumnName, InvalidParameterRange
from numerify.detection import ColumnPartition, ColumnScanner, FormatClassifier, NumericFormat
from numerify.transform import set_col_as_numeric
from numerify.converter import NumericConverter, find_and_transform_numerics, identify_numerics

__all__ = [
    "NumerifyError",
    "InvalidInputKind",
    "InvalidColumnName",
    "InvalidParameterRange",
    "ColumnPartition",
    "ColumnScanner",
    "FormatClassifier",
    "NumericFormat",
    "set_col_as_numeric",
    "NumericConverter",
    "find_and_transform_numerics",
    "identify_numerics",
]
