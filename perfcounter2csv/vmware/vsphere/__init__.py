# SPDX-License-Identifier: LGPL-3.0-or-later
# perfcounter2csv/vmware/vsphere/__init__.py
"""vSphere error classification and exit codes."""

from .errors import ExitCode, classify_connect_error, exit_code_for, wrap_retrieval_error

__all__ = ["ExitCode", "classify_connect_error", "exit_code_for", "wrap_retrieval_error"]
