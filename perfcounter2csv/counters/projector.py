# SPDX-License-Identifier: LGPL-3.0-or-later
# perfcounter2csv/counters/projector.py
from __future__ import annotations

from typing import Iterable, List

from .model import CounterDescriptor, CounterRow


def full_counter_name(d: CounterDescriptor) -> str:
    """``<group>.<name>.<rollup>``, e.g. ``cpu.usage.average``."""
    return f"{d.group_key}.{d.name_key}.{d.rollup_type}"


def project_row(d: CounterDescriptor) -> CounterRow:
    return CounterRow(full_name=full_counter_name(d), level=str(d.level), summary=d.summary)


def project_rows(descriptors: Iterable[CounterDescriptor]) -> List[CounterRow]:
    # One row per descriptor, input order, no dedup.
    return [project_row(d) for d in descriptors]
