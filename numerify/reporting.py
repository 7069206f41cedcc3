# ==============================================
# Progress Reporting
# ==============================================
#
# PURPOSE:
#   Tell the user how far a scan has gone. The scanner only knows
#   a callback, on_column_processed(column); these classes provide it.
#
# CLASSES:
# --------
# - ProgressReporter
#     Prints "<function_name>: [#####     ] 50% (5/10 columns)" every
#     time another tenth of the columns is done, and on completion.
#
# - NullProgress
#     Same interface, prints nothing. Used when verbose=False.
#
# ==============================================

from typing import Hashable, Sequence


class NullProgress:
    """Progress reporter that does nothing."""

    def on_column_processed(self, column: Hashable) -> None:
        pass

    def __call__(self, column: Hashable) -> None:
        self.on_column_processed(column)


class ProgressReporter(NullProgress):
    """
    Prints a text progress bar as columns get processed.
    """

    BAR_WIDTH = 10

    def __init__(self, function_name: str, columns: Sequence[Hashable]):
        """
        Args:
            function_name: Prefix of every printed line
            columns: All the columns that will be processed
        """
        self.function_name = function_name
        self.total = len(columns)
        self.processed = 0
        self._last_step = 0

    def on_column_processed(self, column: Hashable) -> None:
        self.processed += 1
        if self.total == 0:
            return

        step = self.processed * self.BAR_WIDTH // self.total
        if step > self._last_step or self.processed == self.total:
            self._last_step = step
            print(self._render())

    def _render(self) -> str:
        filled = min(self._last_step, self.BAR_WIDTH)
        bar = "#" * filled + " " * (self.BAR_WIDTH - filled)
        percent = round(100 * self.processed / self.total)
        return f"{self.function_name}: [{bar}] {percent}% ({self.processed}/{self.total} columns)"
