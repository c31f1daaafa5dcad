# SPDX-License-Identifier: LGPL-3.0-or-later
# perfcounter2csv/core/exceptions.py
"""
Error types. Each carries the process exit code it maps to, a one-line
message, an optional underlying cause and free-form context (secrets in the
context are masked whenever it is rendered).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

REDACTED = "***REDACTED***"

# Context keys containing any of these are never rendered.
_SECRET_MARKERS = ("pass", "secret", "token", "cookie", "auth", "session")


def _exit_code(value: Any) -> int:
    try:
        code = int(value)
    except (TypeError, ValueError):
        return 1
    if code < 0:
        return 1
    return min(code, 255)


def _one_line(s: str, limit: int = 600) -> str:
    flat = " ".join((s or "").split())
    if len(flat) > limit:
        return flat[: limit - 3] + "..."
    return flat


def _redact(ctx: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for k, v in ctx.items():
        if any(m in str(k).lower() for m in _SECRET_MARKERS):
            out[k] = REDACTED
        elif isinstance(v, dict):
            out[k] = _redact(v)
        else:
            out[k] = v
    return out


def _render_context(ctx: Dict[str, Any]) -> str:
    shown = _redact(ctx)
    return ", ".join(f"{k}={shown[k]!r}" for k in sorted(shown, key=str))


@dataclass(eq=False)
class PerfCounterError(Exception):
    """Base error; ``code`` is the exit status main() returns for it."""

    code: int = 1
    msg: str = "error"
    cause: Optional[BaseException] = None
    context: Optional[Dict[str, Any]] = None

    def __post_init__(self) -> None:
        self.code = _exit_code(self.code)
        self.msg = _one_line(self.msg) or type(self).__name__
        if self.context is None:
            self.context = {}
        super().__init__(self.msg)

    def with_context(self, **ctx: Any) -> "PerfCounterError":
        self.context.update(ctx)
        return self

    def user_message(self, *, include_context: bool = False, include_cause: bool = False) -> str:
        text = self.msg
        if include_context and self.context:
            text += f" [{_one_line(_render_context(self.context))}]"
        if include_cause and self.cause is not None:
            text += f" (cause: {type(self.cause).__name__}: {_one_line(str(self.cause))})"
        return text

    def __str__(self) -> str:
        return self.msg

    def to_dict(self, *, include_cause: bool = False) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "type": type(self).__name__,
            "code": self.code,
            "message": self.msg,
            "context": _redact(self.context or {}),
        }
        if include_cause and self.cause is not None:
            d["cause"] = {"type": type(self.cause).__name__, "message": _one_line(str(self.cause))}
        return d


class ConfigurationError(PerfCounterError):
    """Malformed endpoint URL, bad flag value or unreadable config file."""

    def __init__(self, msg: str = "invalid configuration", cause: Optional[BaseException] = None, **context: Any):
        super().__init__(code=2, msg=msg, cause=cause, context=context or None)


class VSphereError(PerfCounterError):
    """
    vSphere/ESXi operation failed.
    Use for pyVmomi / SDK errors.
    """
    pass


class VSphereConnectionError(VSphereError):
    def __init__(self, msg: str = "connection failed", cause: Optional[BaseException] = None, **context: Any):
        super().__init__(code=12, msg=msg, cause=cause, context=context or None)


class AuthenticationError(VSphereError):
    def __init__(self, msg: str = "authentication failed", cause: Optional[BaseException] = None, **context: Any):
        super().__init__(code=10, msg=msg, cause=cause, context=context or None)


class RetrievalError(VSphereError):
    def __init__(self, msg: str = "property retrieval failed", cause: Optional[BaseException] = None, **context: Any):
        super().__init__(code=30, msg=msg, cause=cause, context=context or None)


class OutputError(PerfCounterError):
    """Local output could not be produced."""

    def __init__(self, msg: str = "output failed", cause: Optional[BaseException] = None, **context: Any):
        super().__init__(code=40, msg=msg, cause=cause, context=context or None)


class OutputFileError(OutputError):
    pass


class CsvWriteError(OutputError):
    pass


def format_exception_for_cli(e: BaseException, *, verbose: int = 0) -> str:
    """
    One-liner output for CLI.

    verbose=0: just message
    verbose=1: message + compact context (if any)
    verbose>=2: message + context + cause
    """
    if isinstance(e, PerfCounterError):
        return e.user_message(
            include_context=(verbose >= 1),
            include_cause=(verbose >= 2),
        )

    if verbose >= 2:
        return f"{type(e).__name__}: {_one_line(str(e))}"
    return _one_line(str(e)) or type(e).__name__
