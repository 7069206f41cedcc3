# ==============================================
# Decimal Parser
# ==============================================
#
# PURPOSE:
#   The one numeric grammar used everywhere in numerify: by the
#   classifier to decide a column's format, and by the caster to
#   convert it. Sharing it guarantees that a column classified as
#   numeric converts with no new missing values.
#
# GRAMMAR:
# --------
#   [spaces] [+|-] digits [. digits] [e|E [+|-] digits] [spaces]
#   (".5" and "5." are accepted). With normalize_comma=True every ","
#   is replaced by "." first, so "1,5" reads as 1.5 but "1,000,5"
#   fails.
#
#   Everything else becomes NaN: free text, "inf", "nan", "1_000",
#   hexadecimal, missing cells. Real numbers already stored in the
#   column are kept as floats.
#
# ==============================================

from functools import partial
from typing import Iterable, Union

import pandas as pd

from .type_detector import TypeDetector


def parse_decimal_series(
    values: Union[pd.Series, Iterable],
    normalize_comma: bool = False
) -> pd.Series:
    """
    Parse every cell as a plain decimal number.

    Args:
        values: A Series (its index is kept) or any iterable of cells
        normalize_comma: Replace "," by "." before parsing

    Returns:
        float64 Series, NaN where a cell does not parse
    """
    if not isinstance(values, pd.Series):
        values = pd.Series(list(values), dtype=object)

    parser = partial(TypeDetector.parse_decimal, normalize_comma=normalize_comma)
    return values.astype(object).map(parser).astype("float64")
