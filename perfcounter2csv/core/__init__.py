# SPDX-License-Identifier: LGPL-3.0-or-later
# perfcounter2csv/core/__init__.py
from .exceptions import (
    AuthenticationError,
    ConfigurationError,
    CsvWriteError,
    OutputError,
    OutputFileError,
    PerfCounterError,
    RetrievalError,
    VSphereConnectionError,
    VSphereError,
)

__all__ = [
    "AuthenticationError",
    "ConfigurationError",
    "CsvWriteError",
    "OutputError",
    "OutputFileError",
    "PerfCounterError",
    "RetrievalError",
    "VSphereConnectionError",
    "VSphereError",
]
