# ==============================================
# Errors
# ==============================================
#
# PURPOSE:
#   Error taxonomy shared by every topic. All of these are raised
#   during validation, before any column is scanned or mutated.
#
# CLASSES:
# --------
# - NumerifyError          → base class, caught only by the CLI
# - InvalidInputKind       → input is not a usable table, or a sample
#                            handed to the classifier is not text
# - InvalidColumnName      → an explicit column selector names columns
#                            that are not in the table
# - InvalidParameterRange  → sample size is not a positive finite integer
#
# Each error also derives from the matching builtin (TypeError,
# KeyError, ValueError) so callers can catch them the usual way.
#
# ==============================================

from typing import Iterable, List


class NumerifyError(Exception):
    """Base class for every error raised by numerify."""


class InvalidInputKind(NumerifyError, TypeError):
    """Raised when an input has the wrong kind (not a table, not text...)."""


class InvalidColumnName(NumerifyError, KeyError):
    """
    Raised when requested columns are missing from the table.

    Attributes:
        missing: Names that were requested but not found
    """

    def __init__(self, missing: Iterable[str], function_name: str = "numerify"):
        self.missing: List[str] = list(missing)
        self.function_name = function_name
        super().__init__(
            f"{function_name}: column(s) not found in data set: "
            + ", ".join(repr(name) for name in self.missing)
        )

    def __str__(self) -> str:
        # KeyError quotes its message, keep it readable
        return self.args[0]


class InvalidParameterRange(NumerifyError, ValueError):
    """Raised when a numeric parameter is outside its accepted range."""
