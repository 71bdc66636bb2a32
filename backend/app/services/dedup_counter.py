"""Count unique (fin_year, month, district_code) periods in a dataset CSV.

Usage:
    python -m app.services.dedup_counter                 # uses CSV_PATH
    python -m app.services.dedup_counter path/to.csv
"""
import argparse
import logging
from dataclasses import dataclass

import pandas as pd

from app.core.config import settings

logger = logging.getLogger(__name__)

KEY_COLUMNS = ("fin_year", "month", "district_code")


@dataclass(frozen=True)
class DedupReport:
    total_rows: int
    unique_keys: int

    @property
    def duplicates(self):
        return self.total_rows - self.unique_keys


def count_unique_periods(csv_path):
    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False, skip_blank_lines=True)
    for column in KEY_COLUMNS:
        if column not in df.columns:
            raise KeyError(f"{csv_path} has no {column!r} column")

    combos = set(df.loc[:, list(KEY_COLUMNS)].itertuples(index=False, name=None))
    logger.debug("Read %d rows from %s", len(df), csv_path)
    return DedupReport(total_rows=len(df), unique_keys=len(combos))


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("csv_path", nargs="?", default=settings.CSV_PATH)
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    report = count_unique_periods(args.csv_path)
    print("Total rows:", report.total_rows)
    print("Unique (fin_year, month, district_code):", report.unique_keys)
    return report


if __name__ == "__main__":
    main()
