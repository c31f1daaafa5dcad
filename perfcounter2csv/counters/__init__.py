# SPDX-License-Identifier: LGPL-3.0-or-later
# perfcounter2csv/counters/__init__.py
"""Performance counter definitions: fetch, project to rows, write CSV."""

from .csv_writer import DEFAULT_OUTPUT, write_rows
from .fetcher import fetch_counter_descriptors
from .model import CounterDescriptor, CounterRow
from .projector import full_counter_name, project_row, project_rows

__all__ = [
    "DEFAULT_OUTPUT",
    "CounterDescriptor",
    "CounterRow",
    "fetch_counter_descriptors",
    "full_counter_name",
    "project_row",
    "project_rows",
    "write_rows",
]
