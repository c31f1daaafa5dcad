# SPDX-License-Identifier: LGPL-3.0-or-later
# perfcounter2csv/counters/csv_writer.py
from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, List, Union

from ..core.exceptions import CsvWriteError, OutputFileError
from .model import CounterRow

DEFAULT_OUTPUT = "performanceCounters.csv"


def _has_bare_cr(record: List[str]) -> bool:
    return any("\r" in field for field in record)


def write_rows(rows: Iterable[CounterRow], path: Union[str, Path] = DEFAULT_OUTPUT) -> int:
    """
    Write ``rows`` as a header-less 3-column CSV, truncating ``path``.

    Quoting is minimal: fields holding a comma, a double quote or ``\\n`` are
    quoted, with inner quotes doubled. Records end with ``\\n``, so the csv
    module would leave a carriage return unquoted; a record with ``\\r`` in any
    field is written with every field quoted instead, which keeps it a single
    record for any reader. Fields starting with whitespace are not quoted
    (they read back unchanged either way). Returns the number of rows written.
    """
    p = Path(path)
    try:
        fh = open(p, "w", encoding="utf-8", newline="")
    except OSError as e:
        raise OutputFileError(f"cannot create {p}: {e.strerror or e}", cause=e, path=str(p))

    n = 0
    try:
        with fh:
            minimal = csv.writer(fh, lineterminator="\n")
            quote_all = csv.writer(fh, lineterminator="\n", quoting=csv.QUOTE_ALL)
            for row in rows:
                record = row.as_record()
                (quote_all if _has_bare_cr(record) else minimal).writerow(record)
                n += 1
            fh.flush()
    except (OSError, csv.Error) as e:
        raise CsvWriteError(f"error writing csv {p}: {e}", cause=e, path=str(p), rows_written=n)

    return n
