# ==============================================
# Parameter Checks
# ==============================================
#
# PURPOSE:
#   Validate the numeric knobs of the public API before any
#   work happens on the table.
#
# FUNCTIONS:
# ----------
# - validate_sample_size(table, n_test, ...) -> int
#     Positive finite integer, clamped to the table's row count.
#
# - check_verbose(verbose, function_name) -> bool
#     verbose must be a real boolean.
#
# ==============================================

import math
import numbers

import pandas as pd

from numerify.errors import InvalidInputKind, InvalidParameterRange


def validate_sample_size(
    table: pd.DataFrame,
    n_test,
    function_name: str = "validate_sample_size",
    variable_name: str = "n_test",
    verbose: bool = False
) -> int:
    """
    Check a requested number of rows and return the one to use.

    Args:
        table: The working DataFrame
        n_test: Requested number of rows
        function_name: Name used as prefix in messages
        variable_name: Parameter name used in messages
        verbose: Print a warning when the value gets clamped

    Returns:
        The effective sample size, between 1 and the table's row count

    Raises:
        InvalidParameterRange: If n_test is not a positive finite integer
    """
    if isinstance(n_test, bool) or not isinstance(n_test, numbers.Real):
        raise InvalidParameterRange(
            f"{function_name}: {variable_name} should be a positive integer, got {n_test!r}"
        )

    if not math.isfinite(n_test):
        raise InvalidParameterRange(
            f"{function_name}: {variable_name} should be finite, got {n_test!r}"
        )

    if n_test <= 0:
        raise InvalidParameterRange(
            f"{function_name}: {variable_name} should be strictly positive, got {n_test!r}"
        )

    if n_test != int(n_test):
        raise InvalidParameterRange(
            f"{function_name}: {variable_name} should be an integer, got {n_test!r}"
        )

    n_test = int(n_test)
    nb_rows = table.shape[0]
    if n_test > nb_rows:
        if verbose:
            print(f"⚠ {function_name}: {variable_name} ({n_test}) is larger than the number of rows, "
                  f"using {nb_rows} instead")
        n_test = nb_rows

    return n_test


def check_verbose(verbose, function_name: str = "check_verbose") -> bool:
    if not isinstance(verbose, bool):
        raise InvalidInputKind(f"{function_name}: verbose should be True or False, got {verbose!r}")
    return verbose
