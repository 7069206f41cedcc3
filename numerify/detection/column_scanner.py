# ==============================================
# ColumnScanner
# ==============================================
#
# PURPOSE:
#   Walk through the candidate columns of a table and find the ones
#   whose text values are in fact numbers. This is the "observation
#   engine": it reads a bounded sample of each column and hands it
#   to the FormatClassifier.
#
# CLASS: ColumnScanner
# --------------------
#   Stateless between scans.
#
#   Constructor:
#   ------------
#   - __init__(classifier: FormatClassifier = None,
#              type_detector: TypeDetector = None)
#
#   Methods:
#   --------
#   - scan(table, column_names, sample_size, on_column_processed=None)
#         -> ColumnPartition
#       For each column, in the given order:
#         1. Skip unless its kind is TEXT
#         2. Sample the first sample_size non-missing, non-"" values
#         3. Skip if the sample is empty
#         4. Classify the sample, file the column in the partition
#         5. Call on_column_processed(column), whatever happened above
#
#   - scan_column(column) -> NumericFormat | None
#       Steps 1 to 4 for a single column. None means "skipped".
#
# ==============================================

from typing import Callable, Hashable, Iterable, Optional

import pandas as pd

from .decision import ColumnPartition, NumericFormat
from .format_classifier import FormatClassifier
from .sampling import find_n_first_non_null
from .type_detector import ColumnKind, TypeDetector


class ColumnScanner:
    """
    Scans candidate columns and partitions the numeric ones.
    """

    def __init__(self, classifier: FormatClassifier = None, type_detector: TypeDetector = None):
        """
        Initialize the ColumnScanner.

        Args:
            classifier: Optional FormatClassifier instance. If not provided,
                        a new one will be created.
            type_detector: Optional TypeDetector instance. If not provided,
                           a new one will be created.
        """
        self.classifier = classifier or FormatClassifier()
        self.type_detector = type_detector or TypeDetector()

    def scan(
        self,
        table: pd.DataFrame,
        column_names: Iterable[Hashable],
        sample_size: int,
        on_column_processed: Optional[Callable[[Hashable], None]] = None
    ) -> ColumnPartition:
        """
        Partition the given columns into "convert directly" and
        "convert after normalization".

        Args:
            table: The DataFrame to look into (not modified)
            column_names: Columns to examine, in order
            sample_size: Maximum number of values tested per column
            on_column_processed: Called once per examined column

        Returns:
            ColumnPartition with the numeric columns, in scan order
        """
        partition = ColumnPartition()

        for column in column_names:
            fmt = self.scan_column(table[column], sample_size)
            if fmt is not None:
                partition.add(column, fmt)

            if on_column_processed is not None:
                on_column_processed(column)

        return partition

    def scan_column(self, column: pd.Series, sample_size: int) -> Optional[NumericFormat]:
        """
        Classify one column.

        Args:
            column: Cells of the column
            sample_size: Maximum number of values tested

        Returns:
            The column's NumericFormat, or None when the column is not
            text or holds no usable value
        """
        # Only text columns can hide numbers
        if self.type_detector.detect(column) is not ColumnKind.TEXT:
            return None

        sample = find_n_first_non_null(column, sample_size)
        if not sample:
            return None

        return self.classifier.classify(sample)
