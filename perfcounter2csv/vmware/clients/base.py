# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# perfcounter2csv/vmware/clients/base.py
"""
The slice of a vSphere session the counter pipeline depends on.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Sequence


class SessionClient(ABC):
    """Abstract authenticated session against an ESXi host or vCenter."""

    @abstractmethod
    def connect(self) -> None:
        """Authenticate; raise VSphereConnectionError / AuthenticationError on failure."""
        ...

    @abstractmethod
    def disconnect(self) -> None:
        ...

    @abstractmethod
    def is_vcenter(self) -> bool:
        """True for vCenter, False for a standalone ESXi host."""
        ...

    @abstractmethod
    def perf_manager_ref(self) -> Any:
        """PerformanceManager reference advertised in the service content."""
        ...

    @abstractmethod
    def retrieve_one(self, ref: Any, path_set: Optional[Sequence[str]] = None) -> Dict[str, Any]:
        """
        Retrieve one managed object's properties as ``{name: value}``.
        ``path_set=None`` means every property.
        """
        ...

    def __enter__(self) -> "SessionClient":
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.disconnect()
        return False
