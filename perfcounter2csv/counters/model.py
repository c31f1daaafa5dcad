# SPDX-License-Identifier: LGPL-3.0-or-later
# perfcounter2csv/counters/model.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List


def _text(v: Any) -> str:
    return "" if v is None else str(v)


@dataclass(frozen=True)
class CounterDescriptor:
    """Metadata of one performance counter, as defined by the server."""

    group_key: str
    name_key: str
    rollup_type: str
    level: int
    summary: str

    @classmethod
    def from_vim(cls, info: Any) -> "CounterDescriptor":
        """Build from a ``vim.PerformanceManager.CounterInfo``."""
        group = getattr(info, "groupInfo", None)
        name = getattr(info, "nameInfo", None)
        level = getattr(info, "level", None)
        return cls(
            group_key=_text(getattr(group, "key", None)),
            name_key=_text(getattr(name, "key", None)),
            rollup_type=_text(getattr(info, "rollupType", None)),
            level=int(level) if level is not None else 0,
            summary=_text(getattr(name, "summary", None)),
        )


@dataclass(frozen=True)
class CounterRow:
    full_name: str
    level: str
    summary: str

    def as_record(self) -> List[str]:
        return [self.full_name, self.level, self.summary]
