# SPDX-License-Identifier: LGPL-3.0-or-later
# perfcounter2csv/core/logger.py
"""
Logging for the CLI.

Human-readable lines on stderr by default (timestamp, level emoji, colored
level name, message, ``key=value`` context); ``--json-logs`` switches to one
JSON object per line. Stdout is left to the informational console lines.
"""
from __future__ import annotations

import datetime as _dt
import json
import logging
import os
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Generator, List, Mapping, Optional

from termcolor import colored as _colored

from .exceptions import ConfigurationError

LOGGER_NAME = "perfcounter2csv"

# -vvv
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_EMOJI_BY_LEVEL = {
    "TRACE": "🧬",
    "DEBUG": "🔍",
    "INFO": "✅",
    "WARNING": "⚠️",
    "ERROR": "💥",
    "CRITICAL": "🧨",
}
_COLOR_BY_LEVEL = {
    "TRACE": "cyan",
    "DEBUG": "blue",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red",
}


def c(
    text: str,
    color: Optional[str] = None,
    attrs: Optional[List[str]] = None,
    *,
    enable: bool = True,
) -> str:
    """termcolor wrapper that is a no-op when disabled or uncolored."""
    if not (enable and color):
        return text
    return _colored(text, color=color, attrs=attrs or [])


def _stderr_is_tty() -> bool:
    isatty = getattr(sys.stderr, "isatty", None)
    return bool(isatty and isatty())


def _stderr_takes_emoji() -> bool:
    enc = getattr(sys.stderr, "encoding", None) or "utf-8"
    try:
        "🔍".encode(enc)
    except (UnicodeEncodeError, LookupError):
        return False
    return True


def _clip(v: Any, limit: int = 240) -> str:
    s = str(v).replace("\r", "\\r").replace("\n", "\\n")
    return s if len(s) <= limit else s[: limit - 1] + "…"


def _ctx_suffix(ctx: Optional[Mapping[str, Any]]) -> str:
    if not ctx:
        return ""
    return " " + " ".join(f"{k}={_clip(v)}" for k, v in sorted(ctx.items(), key=lambda kv: str(kv[0])))


@dataclass(frozen=True)
class LogStyle:
    color: bool = True
    unicode: bool = True
    utc: bool = False
    detailed: bool = False  # ms timestamps, pid, logger name, module:line


class EmojiFormatter(logging.Formatter):
    def __init__(self, style: LogStyle):
        super().__init__()
        self.style = style

    def _timestamp(self, created: float) -> str:
        tz = _dt.timezone.utc if self.style.utc else None
        stamp = _dt.datetime.fromtimestamp(created, tz=tz)
        if self.style.detailed:
            return stamp.strftime("%H:%M:%S.%f")[:-3]
        return stamp.strftime("%H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        colorize = self.style.color and _stderr_is_tty()
        level_color = _COLOR_BY_LEVEL.get(record.levelname)

        emoji = _EMOJI_BY_LEVEL.get(record.levelname, "•") if self.style.unicode else "·"
        level = c(f"{record.levelname:<8}", level_color, enable=colorize)
        msg = record.getMessage()
        if record.levelno >= logging.WARNING:
            msg = c(msg, level_color, ["bold"], enable=colorize)

        where = ""
        if self.style.detailed:
            where = f" [pid={os.getpid()} {record.name} {record.module}:{record.lineno}]"

        line = f"{self._timestamp(record.created)} {emoji} {level}{where} {msg}{_ctx_suffix(getattr(record, 'ctx', None))}"
        if record.exc_info:
            tb = "\n".join("  " + ln for ln in self.formatException(record.exc_info).splitlines())
            line += "\n" + c(tb, "red", enable=colorize)
        return line


class JsonFormatter(logging.Formatter):
    """One JSON object per line."""

    def __init__(self, *, utc: bool = True):
        super().__init__()
        self.utc = utc

    def format(self, record: logging.LogRecord) -> str:
        tz = _dt.timezone.utc if self.utc else None
        obj: Dict[str, Any] = {
            "ts": _dt.datetime.fromtimestamp(record.created, tz=tz).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "pid": os.getpid(),
            "module": record.module,
            "lineno": record.lineno,
        }
        ctx = getattr(record, "ctx", None)
        if ctx:
            obj["ctx"] = {str(k): _clip(v) for k, v in ctx.items()}
        if record.exc_info:
            obj["traceback"] = self.formatException(record.exc_info)
        return json.dumps(obj, ensure_ascii=False, default=str)


class Log:
    @staticmethod
    def level_for(verbose: int) -> int:
        """0/-v: INFO, -vv: DEBUG, -vvv: TRACE."""
        if verbose >= 3:
            return TRACE
        if verbose >= 2:
            return logging.DEBUG
        return logging.INFO

    @staticmethod
    def step(logger: logging.Logger, msg: str, **ctx: Any) -> None:
        logger.info("➡️  %s", msg, extra={"ctx": ctx} if ctx else None)

    @staticmethod
    def ok(logger: logging.Logger, msg: str, **ctx: Any) -> None:
        logger.info("✅ %s", msg, extra={"ctx": ctx} if ctx else None)

    @staticmethod
    def warn(logger: logging.Logger, msg: str, **ctx: Any) -> None:
        logger.warning("⚠️  %s", msg, extra={"ctx": ctx} if ctx else None)

    @staticmethod
    def trace(logger: logging.Logger, msg: str, *args: Any) -> None:
        if logger.isEnabledFor(TRACE):
            logger.log(TRACE, msg, *args)

    @staticmethod
    def setup(
        verbose: int = 0,
        log_file: Optional[str] = None,
        *,
        color: bool = True,
        utc: bool = False,
        logger_name: str = LOGGER_NAME,
        json_logs: bool = False,
    ) -> logging.Logger:
        """
        (Re)configure the project logger: a stderr handler, plus a detailed
        uncolored file handler when ``log_file`` is given. Calling it again
        replaces the handlers.
        """
        logger = logging.getLogger(logger_name)
        logger.propagate = False
        level = Log.level_for(verbose)
        logger.setLevel(level)

        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()

        unicode = _stderr_takes_emoji()
        console_fmt: logging.Formatter
        if json_logs:
            console_fmt = JsonFormatter(utc=utc)
        else:
            console_fmt = EmojiFormatter(LogStyle(color=color, unicode=unicode, utc=utc, detailed=verbose >= 3))

        sh = logging.StreamHandler(stream=sys.stderr)
        sh.setLevel(level)
        sh.setFormatter(console_fmt)
        logger.addHandler(sh)

        if log_file:
            fp = Path(log_file).expanduser().resolve()
            try:
                fp.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(fp, encoding="utf-8")
            except OSError as e:
                raise ConfigurationError(f"cannot open log file {fp}: {e.strerror or e}", cause=e, path=str(fp))
            fh.setLevel(level)
            fh.setFormatter(
                JsonFormatter(utc=utc)
                if json_logs
                else EmojiFormatter(LogStyle(color=False, unicode=unicode, utc=utc, detailed=True))
            )
            logger.addHandler(fh)

        logger.debug("Logger initialized (level=%s)", logging.getLevelName(level))
        Log.trace(logger, "TRACE enabled (verbose >= 3)")
        return logger


@contextmanager
def log_step(logger: logging.Logger, description: str) -> Generator[None, None, None]:
    """
    Time a block: debug line on entry, ``<description> done (1.23s)`` at info
    on success, debug line and re-raise on failure.
    """
    t0 = time.monotonic()
    logger.debug("%s ...", description)
    try:
        yield
    except Exception as e:
        logger.debug("%s failed (%.2fs): %s", description, time.monotonic() - t0, e)
        raise
    logger.info("%s done (%.2fs)", description, time.monotonic() - t0)
