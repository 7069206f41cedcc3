# ==============================================
# FormatClassifier
# ==============================================
#
# PURPOSE:
#   Decide how a small sample of text values reads as numbers:
#   as-is, only after reading "," as the decimal mark, or not at all.
#
# HOW IT DECIDES:
#   Each candidate format is accepted only if parsing with it yields
#   exactly the same missing-mask as the raw sample, i.e. it creates
#   no new missing value. A single unparseable value disqualifies the
#   format for the whole column.
#
#   Three masks are built over the sample:
#     mask_original    → missing cells in the raw sample (none, by construction)
#     mask_direct      → cells that fail the plain decimal parse
#     mask_normalized  → cells that fail after "," → "."
#
#   mask_direct == mask_original       → DIRECT
#   mask_normalized == mask_original   → NORMALIZED
#   otherwise                          → NOT_NUMERIC
#
#   DIRECT is tested first: ["1", "2", "3"] reads fine both ways and
#   must not be comma-normalized.
#
# ==============================================

from typing import List, Sequence

import pandas as pd

from numerify.errors import InvalidInputKind
from .decimal_parser import parse_decimal_series
from .decision import NumericFormat


class FormatClassifier:
    """Classifies a sample of text values into a NumericFormat."""

    def classify(self, sample: Sequence[str]) -> NumericFormat:
        """
        Classify a sample of text values.

        Args:
            sample: Non-empty sequence of strings

        Returns:
            NumericFormat.DIRECT, NORMALIZED or NOT_NUMERIC

        Raises:
            InvalidInputKind: If sample is empty or holds a non-string
        """
        values = self._check_sample(sample)

        mask_original = pd.Series(values, dtype=object).isna().tolist()
        mask_direct = parse_decimal_series(values).isna().tolist()
        mask_normalized = parse_decimal_series(values, normalize_comma=True).isna().tolist()

        if mask_direct == mask_original:
            return NumericFormat.DIRECT
        if mask_normalized == mask_original:
            return NumericFormat.NORMALIZED
        return NumericFormat.NOT_NUMERIC

    def _check_sample(self, sample: Sequence[str]) -> List[str]:
        if isinstance(sample, str):
            raise InvalidInputKind("FormatClassifier: sample should be a sequence of strings, not a single string")

        try:
            values = list(sample)
        except TypeError:
            raise InvalidInputKind(
                f"FormatClassifier: sample should be a sequence of strings, got {type(sample).__name__}"
            )

        if not values:
            raise InvalidInputKind("FormatClassifier: sample should not be empty")

        for value in values:
            if not isinstance(value, str):
                raise InvalidInputKind(
                    f"FormatClassifier: sample should contain only strings, got {value!r}"
                )

        return values
