# ==============================================
# TOPIC 1: VALIDATION
# ==============================================
#
# This package handles every sanity check that must pass
# BEFORE a table is scanned. Nothing here mutates the table.
#
# Modules:
# --------
# - table_checker.py    → Coerce input into a non-empty DataFrame
# - column_resolver.py  → Resolve "auto" / explicit column selectors
# - parameters.py       → Validate sample size and verbose flag
#
# ==============================================

from .table_checker import to_table
from .column_resolver import resolve_columns, AUTO
from .parameters import validate_sample_size, check_verbose

__all__ = ["to_table", "resolve_columns", "AUTO", "validate_sample_size", "check_verbose"]
