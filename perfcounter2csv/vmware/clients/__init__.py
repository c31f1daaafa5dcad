# SPDX-License-Identifier: LGPL-3.0-or-later
# perfcounter2csv/vmware/clients/__init__.py
"""
vSphere API client modules.

- base: SessionClient capability used by the counter pipeline
- client: pyVmomi implementation (VSphereSession)
"""

from .base import SessionClient
from .client import VSphereSession

__all__ = ["SessionClient", "VSphereSession"]
