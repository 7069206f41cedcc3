# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Run the numeric detection on a CSV file from the shell.
#
# USAGE:
# ------
# 1. Convert a file, write the result:
#    numerify data.csv -o clean.csv
#
# 2. Only look at some columns, test 100 values per column:
#    numerify data.csv --cols price weight --n-test 100 -o clean.csv
#
# 3. Semicolon-separated file, every column read as text,
#    print which columns were found numeric:
#    numerify data.csv --sep ";" --all-text --summary
#
#   Without -o, the resulting column types are printed instead.
#   Exit code 2 on invalid arguments (unknown column, bad n_test...)
#   and on input files that cannot be read or parsed.
#
# ==============================================

import argparse
import json
import sys
from typing import List, Optional

import pandas as pd

from numerify.config import get_config
from numerify.converter import NumericConverter
from numerify.errors import NumerifyError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numerify",
        description="Find text columns that are in fact numeric and convert them."
    )
    parser.add_argument("input", help="CSV file to read")
    parser.add_argument("-o", "--output", help="CSV file to write the converted table to")
    parser.add_argument("--cols", nargs="+", default=None,
                        help="Columns to look into (default: all columns)")
    parser.add_argument("--n-test", type=int, default=None,
                        help="Number of non-empty values tested per column "
                             "(default: NUMERIFY_SAMPLE_SIZE or 30)")
    parser.add_argument("--sep", default=",", help="Field separator of the CSV files")
    parser.add_argument("--all-text", action="store_true",
                        help="Read every column as text before detection")
    parser.add_argument("--summary", action="store_true",
                        help="Print the detected columns as JSON")
    parser.add_argument("-q", "--quiet", action="store_true", help="Do not print progress")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = get_config()
    verbose = config.reporting.verbose and not args.quiet

    read_kwargs = {"sep": args.sep}
    if args.all_text:
        read_kwargs["dtype"] = str
    try:
        table = pd.read_csv(args.input, **read_kwargs)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        print(f"✗ Could not read {args.input}: {e}", file=sys.stderr)
        return 2

    converter = NumericConverter(config)
    cols = args.cols if args.cols else "auto"

    try:
        table = converter.convert(table, cols=cols, sample_size=args.n_test, verbose=verbose)
    except NumerifyError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 2

    if args.summary:
        print(json.dumps(converter.get_partition().to_dict(), indent=2))

    if args.output:
        table.to_csv(args.output, sep=args.sep, index=False)
        if verbose:
            print(f"✓ Wrote {table.shape[0]} rows to {args.output}")
    else:
        for name, dtype in table.dtypes.items():
            print(f"{name}: {dtype}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
