# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# perfcounter2csv/config/env.py
"""
Environment variable helpers.

Every helper takes an optional ``environ`` mapping so callers (and tests) can
resolve against something other than ``os.environ``.
"""
from __future__ import annotations

import os
from typing import Mapping, Optional

ENV_URL = "GOVMOMI_URL"
ENV_USERNAME = "GOVMOMI_USERNAME"
ENV_PASSWORD = "GOVMOMI_PASSWORD"
ENV_INSECURE = "GOVMOMI_INSECURE"


def resolve_environ(environ: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def parse_bool(value: str) -> bool:
    """True when the first character (case-insensitive) is t, y or 1."""
    return (value or "")[:1].lower() in ("t", "y", "1")


def get_env_string(name: str, default: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the variable's value, or ``default`` when unset or empty."""
    v = resolve_environ(environ).get(name, "")
    return v if v != "" else default


def get_env_bool(name: str, default: bool, environ: Optional[Mapping[str, str]] = None) -> bool:
    """Return the variable parsed with parse_bool, or ``default`` when unset or empty."""
    v = resolve_environ(environ).get(name, "")
    if v == "":
        return default
    return parse_bool(v)
