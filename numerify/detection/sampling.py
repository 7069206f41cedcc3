from typing import Iterable, List

from .type_detector import TypeDetector


def find_n_first_non_null(column: Iterable, n: int) -> List[str]:
    """
    Collect the first n cells that are neither missing nor "".

    Cells are read in row order and reading stops as soon as n values
    are collected, so the cost is bounded by n on well-filled columns.

    Args:
        column: Cells of one column, in row order
        n: Maximum number of values to collect

    Returns:
        Up to n values, possibly fewer (or none)
    """
    sample: List[str] = []
    if n <= 0:
        return sample

    for value in column:
        if TypeDetector.is_missing(value) or value == "":
            continue
        sample.append(value)
        if len(sample) >= n:
            break

    return sample
