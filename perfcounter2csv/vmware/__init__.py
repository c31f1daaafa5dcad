# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# perfcounter2csv/vmware/__init__.py
"""ESXi / vCenter access through pyVmomi."""

from .clients.base import SessionClient
from .clients.client import VSphereSession

__all__ = ["SessionClient", "VSphereSession"]
