# ==============================================
# TOPIC 3: TRANSFORM
# ==============================================
#
# This package applies the detected formats to the table.
# Unlike the other topics it MUTATES the caller's DataFrame.
#
# Modules:
# --------
# - numeric_caster.py  → Cast columns to float, optionally reading
#                        "," as the decimal mark
#
# ==============================================

from .numeric_caster import set_col_as_numeric

__all__ = ["set_col_as_numeric"]
