# SPDX-License-Identifier: LGPL-3.0-or-later
# perfcounter2csv/orchestrator/__init__.py
from .orchestrator import Orchestrator, RunOptions

__all__ = ["Orchestrator", "RunOptions"]
