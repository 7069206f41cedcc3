# ==============================================
# NumericConverter — Final Orchestrator
# ==============================================
#
# PURPOSE:
#   This is the MAIN CLASS that ties the topics together into a
#   single call. Users interact with this class (or with the
#   functions at the bottom of this file) only.
#
# HOW IT CONNECTS THE TOPICS:
#
#   ┌──────────────────────────────────────────────────────────┐
#   │                   NumericConverter                       │
#   │                                                          │
#   │  ┌──────────────────────────────────────────────┐        │
#   │  │ TOPIC 1: VALIDATION                          │        │
#   │  │  to_table → resolve_columns →                │        │
#   │  │  validate_sample_size                        │        │
#   │  └──────────────┬───────────────────────────────┘        │
#   │                 │ table, columns, sample size            │
#   │                 ▼                                        │
#   │  ┌──────────────────────────────────────────────┐        │
#   │  │ TOPIC 2: DETECTION                           │        │
#   │  │  ColumnScanner → FormatClassifier →          │        │
#   │  │  ColumnPartition                             │        │
#   │  └──────────────┬───────────────────────────────┘        │
#   │                 │ partition                              │
#   │                 ▼                                        │
#   │  ┌──────────────────────────────────────────────┐        │
#   │  │ TOPIC 3: TRANSFORM                           │        │
#   │  │  set_col_as_numeric(direct)                  │        │
#   │  │  set_col_as_numeric(normalized, strip)       │        │
#   │  └──────────────────────────────────────────────┘        │
#   └──────────────────────────────────────────────────────────┘
#
#   Validation runs entirely before detection, so a bad argument
#   never leaves a half-converted table behind.
#
# CLASS: NumericConverter
# -----------------------
#   - __init__(config: AppConfig | None = None)
#   - identify(data_set, cols="auto", sample_size=None, verbose=None)
#         -> ColumnPartition
#   - convert(data_set, cols="auto", sample_size=None, verbose=None)
#         -> pd.DataFrame  (same object when given a DataFrame)
#
# FUNCTIONS:
# ----------
#   - find_and_transform_numerics(data_set, cols="auto", n_test=30, verbose=True)
#   - identify_numerics(data_set, cols="auto", n_test=30, verbose=True)
#
# ==============================================

import time
from typing import Any, Hashable, List, Optional, Tuple

import pandas as pd

from numerify.config import AppConfig, get_config
from numerify.detection import ColumnPartition, ColumnScanner, FormatClassifier, TypeDetector
from numerify.reporting import NullProgress, ProgressReporter
from numerify.transform import set_col_as_numeric
from numerify.validation import AUTO, check_verbose, resolve_columns, to_table, validate_sample_size


class NumericConverter:
    """
    Finds text columns that hold numbers and converts them in place.

    Defaults for sample_size and verbose come from the configuration
    (NUMERIFY_SAMPLE_SIZE, NUMERIFY_VERBOSE) unless passed explicitly.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        """
        Initialize the converter with all components.

        Args:
            config: Application configuration. If None, loads from environment.
        """
        self._config = config or get_config()

        # TOPIC 2: Detection
        self._type_detector = TypeDetector()
        self._classifier = FormatClassifier()
        self._scanner = ColumnScanner(self._classifier, self._type_detector)

        # Result of the latest scan
        self._partition: Optional[ColumnPartition] = None

    def get_partition(self) -> Optional[ColumnPartition]:
        """
        Return the partition found by the latest identify() or convert().

        Returns:
            ColumnPartition, or None before the first scan
        """
        return self._partition

    def identify(
        self,
        data_set: Any,
        cols: Any = AUTO,
        sample_size: Optional[int] = None,
        verbose: Optional[bool] = None,
        function_name: str = "identify_numerics"
    ) -> ColumnPartition:
        """
        Find numeric columns without converting them.

        Args:
            data_set: DataFrame or table-like input
            cols: "auto" for every column, or the column name(s) to look into
            sample_size: Number of non-empty values tested per column
            verbose: Print progress

        Returns:
            ColumnPartition of the columns to convert
        """
        table, columns, sample_size, verbose = self._validate(
            data_set, cols, sample_size, verbose, function_name
        )
        return self._scan(table, columns, sample_size, verbose, function_name)

    def convert(
        self,
        data_set: Any,
        cols: Any = AUTO,
        sample_size: Optional[int] = None,
        verbose: Optional[bool] = None
    ) -> pd.DataFrame:
        """
        Find and transform text columns that are in fact numeric.

        The detection looks for a perfect transformation: a single
        sampled value that cannot be read as a number keeps the column
        as text. Replace known mistakes by missing values beforehand.

        Args:
            data_set: DataFrame or table-like input. A DataFrame is
                      modified by reference; other inputs are copied into
                      a new DataFrame, which is returned.
            cols: "auto" for every column, or the column name(s) to look into
            sample_size: Number of non-empty values tested per column
            verbose: Print progress

        Returns:
            The table with its numeric columns converted to float
        """
        function_name = "find_and_transform_numerics"

        # TOPIC 1: Validation (nothing is touched if this fails)
        table, columns, sample_size, verbose = self._validate(
            data_set, cols, sample_size, verbose, function_name
        )

        # TOPIC 2: Detection
        start_time = time.time()
        partition = self._scan(table, columns, sample_size, verbose, function_name)
        if verbose:
            print(f"✓ {function_name}: It took me {time.time() - start_time:.2f}s to identify "
                  f"{partition.total} numeric column(s), I will set them as numeric")

        if partition.is_empty:
            if verbose:
                print(f"✓ {function_name}: There are no numerics to transform. "
                      f"(If I missed something consider using set_col_as_numeric to transform it)")
            return table

        # TOPIC 3: Transform
        start_time = time.time()
        set_col_as_numeric(table, partition.direct_columns, strip_string=False, verbose=verbose)
        set_col_as_numeric(table, partition.normalized_columns, strip_string=True, verbose=verbose)
        if verbose:
            print(f"✓ {function_name}: It took me {time.time() - start_time:.2f}s to transform "
                  f"{partition.total} column(s) to a numeric format")

        return table

    def _validate(
        self,
        data_set: Any,
        cols: Any,
        sample_size: Optional[int],
        verbose: Optional[bool],
        function_name: str
    ) -> Tuple[pd.DataFrame, List[Hashable], int, bool]:
        if verbose is None:
            verbose = self._config.reporting.verbose
        if sample_size is None:
            sample_size = self._config.detection.sample_size

        table = to_table(data_set, function_name)
        verbose = check_verbose(verbose, function_name)
        columns = resolve_columns(table, cols, function_name)
        sample_size = validate_sample_size(
            table, sample_size, function_name=function_name, variable_name="n_test", verbose=verbose
        )
        return table, columns, sample_size, verbose

    def _scan(
        self,
        table: pd.DataFrame,
        columns: List[Hashable],
        sample_size: int,
        verbose: bool,
        function_name: str
    ) -> ColumnPartition:
        progress = ProgressReporter(function_name, columns) if verbose else NullProgress()
        self._partition = self._scanner.scan(table, columns, sample_size, progress.on_column_processed)
        return self._partition


def find_and_transform_numerics(
    data_set: Any,
    cols: Any = AUTO,
    n_test: Optional[int] = 30,
    verbose: Optional[bool] = True
) -> pd.DataFrame:
    """
    Find and transform text columns that are in fact numeric.

    Example:
        >>> data_set = pd.DataFrame({"ID": [1, 2, 3, 4, 5],
        ...                          "col1": ["1.2", "1.3", "1.2", "1", "6"],
        ...                          "col2": ["1,2", "1,3", "1,2", "1", "6"]})
        >>> find_and_transform_numerics(data_set, n_test=5, verbose=False).dtypes.tolist()
        [dtype('int64'), dtype('float64'), dtype('float64')]

    Args:
        data_set: DataFrame or table-like input. A DataFrame is modified
                  by reference and returned as the same object; any other
                  input (mapping, list of rows, array) is copied into a new
                  DataFrame and left as it was, so use the returned table.
        cols: "auto" for every column, or the column name(s) to look into
        n_test: Number of non-empty values tested per column
        verbose: Print progress

    Returns:
        The table with its numeric columns converted to float
    """
    return NumericConverter().convert(data_set, cols=cols, sample_size=n_test, verbose=verbose)


def identify_numerics(
    data_set: Any,
    cols: Any = AUTO,
    n_test: Optional[int] = 30,
    verbose: Optional[bool] = True
) -> ColumnPartition:
    """
    Find text columns that are in fact numeric, without converting them.

    Returns:
        ColumnPartition with direct_columns ("1.5") and
        normalized_columns ("1,5")
    """
    return NumericConverter().identify(data_set, cols=cols, sample_size=n_test, verbose=verbose)
