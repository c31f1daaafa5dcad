# SPDX-License-Identifier: LGPL-3.0-or-later
# perfcounter2csv/vmware/vsphere/errors.py
# -*- coding: utf-8 -*-
"""Error classification and exit code handling for vSphere operations"""
from __future__ import annotations

import errno
import socket
import ssl
from enum import IntEnum

from pyVmomi import vim

from ...core.exceptions import (
    AuthenticationError,
    PerfCounterError,
    RetrievalError,
    VSphereConnectionError,
    VSphereError,
)


class ExitCode(IntEnum):
    OK = 0
    UNKNOWN = 1
    USAGE = 2

    AUTH = 10
    NETWORK = 12

    VSPHERE_API = 30
    LOCAL_IO = 40

    INTERRUPTED = 130


def _is_auth_error(e: BaseException) -> bool:
    if isinstance(e, (vim.fault.InvalidLogin, vim.fault.NoPermission, vim.fault.NotAuthenticated)):
        return True
    msg = str(e).lower()
    needles = [
        "not authenticated",
        "authentication",
        "unauthorized",
        "invalid login",
        "incorrect user name or password",
        "cannot complete login",
        "no permission",
        "access denied",
    ]
    return any(n in msg for n in needles)


def _is_network_error(e: BaseException) -> bool:
    if isinstance(e, (socket.timeout, TimeoutError, ConnectionError, ssl.SSLError, socket.gaierror)):
        return True
    if isinstance(e, OSError) and e.errno in (
        errno.ECONNREFUSED,
        errno.ETIMEDOUT,
        errno.EHOSTUNREACH,
        errno.ENETUNREACH,
        errno.ECONNRESET,
    ):
        return True
    msg = str(e).lower()
    needles = [
        "timed out",
        "connection refused",
        "connection reset",
        "name or service not known",
        "temporary failure in name resolution",
        "certificate verify failed",
        "handshake",
    ]
    return any(n in msg for n in needles)


def _fault_message(e: BaseException) -> str:
    # vmodl faults carry the useful text in .msg; str() dumps the whole object.
    msg = getattr(e, "msg", None)
    if isinstance(msg, str) and msg:
        return msg
    return str(e) or type(e).__name__


def classify_connect_error(e: BaseException, *, endpoint: str) -> VSphereError:
    """Wrap a SmartConnect failure into AuthenticationError or VSphereConnectionError."""
    if _is_auth_error(e):
        return AuthenticationError(f"cannot log in to {endpoint}: {_fault_message(e)}", cause=e, endpoint=endpoint)
    return VSphereConnectionError(f"cannot connect to {endpoint}: {_fault_message(e)}", cause=e, endpoint=endpoint)


def wrap_retrieval_error(e: BaseException, *, what: str) -> RetrievalError:
    return RetrievalError(f"failed to retrieve {what}: {_fault_message(e)}", cause=e, object=what)


def exit_code_for(e: BaseException) -> int:
    if isinstance(e, KeyboardInterrupt):
        return int(ExitCode.INTERRUPTED)
    if isinstance(e, PerfCounterError):
        return e.code
    if _is_network_error(e):
        return int(ExitCode.NETWORK)
    if isinstance(e, OSError):
        return int(ExitCode.LOCAL_IO)
    return int(ExitCode.UNKNOWN)

